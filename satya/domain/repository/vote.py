"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from satya.domain.model.vote import Vote
from satya.domain.value import ReportId, VoterId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Implementations must guarantee at most one row per (report_id, voter_id).
    """

    @abstractmethod
    async def find_by_report_and_voter(
        self, report_id: ReportId, voter_id: VoterId
    ) -> Optional[Vote]:
        """Find the vote in one ballot slot.

        Args:
            report_id: The report's ID
            voter_id: The voter's token

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_report(self, report_id: ReportId) -> List[Vote]:
        """Find all votes on a report.

        Args:
            report_id: The report's ID

        Returns:
            Every vote row for the report
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the choice of an existing one.

        Conflicts on (report_id, voter_id) must be resolved atomically by
        the store, so concurrent submissions for one slot leave one row.

        Args:
            vote: The vote to write

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_report(self, report_id: ReportId) -> int:
        """Delete every vote on a report.

        Args:
            report_id: The report's ID

        Returns:
            Number of rows deleted (zero is not an error)
        """
        pass
