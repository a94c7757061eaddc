"""Report domain service."""

import logfire

from satya.config import TrendingSettings
from satya.domain.error import DependencyError, NotFoundError
from satya.domain.model.report import Report
from satya.domain.model.vote import VoteTally
from satya.domain.repository import ReportRepository, VoteRepository
from satya.domain.value import ReportId, ReportStatus

from .base import Service, row_store_errors
from .storage_service import StorageService
from .tally_service import TallyService


class ReportService(Service):
    """Domain service for report operations."""

    def __init__(
        self,
        report_repository: ReportRepository,
        vote_repository: VoteRepository,
        tally_service: TallyService,
        storage_service: StorageService,
        trending_settings: TrendingSettings,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            vote_repository: Vote repository
            tally_service: Tally domain service
            storage_service: Storage domain service
            trending_settings: Trending feed limits
        """
        self.report_repository = report_repository
        self.vote_repository = vote_repository
        self.tally_service = tally_service
        self.storage_service = storage_service
        self.trending_settings = trending_settings

    async def create_report(self, report: Report) -> Report:
        """Publish a report.

        Args:
            report: Report to store

        Returns:
            Stored report, with the store-assigned created_at

        Raises:
            DependencyError: If the row store fails
        """
        with logfire.span(
            "report_service.create_report",
            report_id=str(report.id),
            source_type=report.source_type.value if report.source_type else None,
        ):
            with row_store_errors("create_report"):
                saved = await self.report_repository.save(report)
            logfire.info("Report created", report_id=str(saved.id), status=saved.status)
            return saved

    def clamp_limit(self, limit: int | None) -> int:
        """Clamp a requested page size into [1, max_limit]."""
        if limit is None:
            return self.trending_settings.default_limit
        return max(1, min(limit, self.trending_settings.max_limit))

    async def list_trending(
        self, limit: int | None = None
    ) -> list[tuple[Report, VoteTally]]:
        """List the latest published reports with their tallies.

        Tallies are best effort: a report whose votes cannot be read is
        listed with (0, 0).

        Args:
            limit: Requested page size (clamped)

        Returns:
            (report, tally) pairs, most recent first

        Raises:
            DependencyError: If the reports themselves cannot be read
        """
        page_size = self.clamp_limit(limit)
        with logfire.span("report_service.list_trending", limit=page_size):
            with row_store_errors("list_trending"):
                reports = await self.report_repository.find_by_status(
                    ReportStatus.PUBLISHED.value, page_size
                )

            tallies = await self.tally_service.get_tallies([r.id for r in reports])

            logfire.info("Trending listed", count=len(reports))
            return [(report, tallies[report.id]) for report in reports]

    async def delete_report(self, report_id: ReportId, deleted_by: str) -> None:
        """Delete a report with its votes and image.

        Order: votes, then image (best effort), then the report row. A
        failure to remove the image is logged and does not stop deletion.

        Args:
            report_id: Report to delete
            deleted_by: Identity of the authorized caller, for audit

        Raises:
            NotFoundError: If the report does not exist
            DependencyError: If the row store fails
        """
        with logfire.span(
            "report_service.delete_report",
            report_id=str(report_id),
            deleted_by=deleted_by,
        ):
            with row_store_errors("delete_report.load"):
                report = await self.report_repository.find_by_id(report_id)
            if report is None:
                logfire.warn("Delete of non-existent report", report_id=str(report_id))
                raise NotFoundError("Report", str(report_id))

            object_path = (
                self.storage_service.path_from_public_url(report.image_url)
                if report.image_url
                else None
            )

            with row_store_errors("delete_report.votes"):
                removed_votes = await self.vote_repository.delete_by_report(report_id)

            if object_path:
                try:
                    await self.storage_service.remove_object(object_path)
                except DependencyError as e:
                    logfire.warn(
                        "Storage remove failed",
                        report_id=str(report_id),
                        object_path=object_path,
                        error=str(e),
                    )

            with row_store_errors("delete_report.report"):
                await self.report_repository.delete(report_id)

            logfire.info(
                "Report deleted",
                report_id=str(report_id),
                deleted_by=deleted_by,
                removed_votes=removed_votes,
                object_path=object_path,
            )
