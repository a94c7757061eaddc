"""Vote tally domain service."""

from collections.abc import Sequence

import logfire

from satya.domain.error import DependencyError
from satya.domain.model.vote import VoteTally
from satya.domain.repository import VoteRepository
from satya.domain.value import ReportId

from .base import Service, row_store_errors


class TallyService(Service):
    """Aggregates like/dislike counts from vote rows.

    Tallies are never cached or maintained incrementally; every call scans
    the current vote rows for the report.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize tally service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def get_tally(self, report_id: ReportId) -> VoteTally:
        """Count the votes on one report.

        Args:
            report_id: Report ID

        Returns:
            Current tally, (0, 0) when the report has no votes

        Raises:
            DependencyError: If the votes cannot be read
        """
        with logfire.span("tally_service.get_tally", report_id=str(report_id)):
            with row_store_errors("get_tally"):
                votes = await self.vote_repository.find_by_report(report_id)
            return VoteTally.from_choices(vote.choice for vote in votes)

    async def get_tallies(
        self, report_ids: Sequence[ReportId]
    ) -> dict[ReportId, VoteTally]:
        """Count the votes on many reports, best effort.

        Each report is read on its own. A report whose votes cannot be read
        gets a (0, 0) tally; the others are unaffected.

        Args:
            report_ids: Report IDs to aggregate

        Returns:
            Tally for every requested report ID
        """
        with logfire.span("tally_service.get_tallies", count=len(report_ids)):
            tallies: dict[ReportId, VoteTally] = {}
            for report_id in report_ids:
                try:
                    tallies[report_id] = await self.get_tally(report_id)
                except DependencyError as e:
                    logfire.warn(
                        "Tally unavailable, reporting zero counts",
                        report_id=str(report_id),
                        error=str(e),
                    )
                    tallies[report_id] = VoteTally()
            return tallies
