"""In-memory vote repository for testing."""

from typing import Optional

from satya.domain.model.vote import Vote
from satya.domain.repository.vote import VoteRepository
from satya.domain.value import ReportId, VoterId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (report_id, voter_id), so a slot holds one row.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[ReportId, VoterId], Vote] = {}

    async def find_by_report_and_voter(
        self, report_id: ReportId, voter_id: VoterId
    ) -> Optional[Vote]:
        """Find the vote in one ballot slot."""
        return self._votes.get((report_id, voter_id))

    async def find_by_report(self, report_id: ReportId) -> list[Vote]:
        """Find all votes on a report."""
        return [v for v in self._votes.values() if v.report_id == report_id]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the existing choice."""
        key = (vote.report_id, vote.voter_id)
        existing = self._votes.get(key)
        if existing is not None:
            vote = existing.model_copy(update={"choice": vote.choice})
        self._votes[key] = vote
        return vote

    async def delete_by_report(self, report_id: ReportId) -> int:
        """Delete every vote on a report."""
        keys = [key for key in self._votes if key[0] == report_id]
        for key in keys:
            del self._votes[key]
        return len(keys)
