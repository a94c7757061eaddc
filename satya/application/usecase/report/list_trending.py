"""List trending reports use case."""

from typing import Any

from pydantic import BaseModel, field_validator

from satya.application.usecase.base import BaseUseCase
from satya.domain.service import ReportService

from .create_report import ReportItem


class TrendingReportItem(ReportItem):
    """Report decorated with its vote tally."""

    likes: int
    dislikes: int


class ListTrendingRequest(BaseModel):
    """List trending request.

    The limit is clamped by the service rather than rejected; a value that
    is not an integer falls back to the default page size.
    """

    limit: int | None = None

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return None


class ListTrendingResponse(BaseModel):
    """List trending response."""

    reports: list[TrendingReportItem]


class ListTrendingUseCase(BaseUseCase[ListTrendingRequest, ListTrendingResponse]):
    """Use case for the trending feed."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize list trending use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: ListTrendingRequest) -> ListTrendingResponse:
        """Execute list trending flow.

        Args:
            request: List trending request

        Returns:
            Latest published reports with their tallies
        """
        pairs = await self.report_service.list_trending(request.limit)
        return ListTrendingResponse(
            reports=[
                TrendingReportItem(
                    **ReportItem.from_report(report).model_dump(),
                    likes=tally.likes,
                    dislikes=tally.dislikes,
                )
                for report, tally in pairs
            ]
        )
