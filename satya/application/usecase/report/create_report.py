"""Create report use case."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import pydantic
from pydantic import BaseModel

from satya.application.usecase.base import BaseUseCase
from satya.domain.error import ValidationError
from satya.domain.model.report import Report
from satya.domain.service import ReportService
from satya.domain.value import ReportId, ReportStatus, SourceType


class ReportItem(BaseModel):
    """Report as returned by the API."""

    id: str
    title: str | None
    source_type: str | None
    source_url: str | None
    image_url: str | None
    headline: str | None
    link: str | None
    analysis_text: str | None
    reliability: float | None
    tags: list[str]
    reasons: list[str]
    status: str
    created_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        return cls(
            id=str(report.id),
            title=report.title,
            source_type=report.source_type.value if report.source_type else None,
            source_url=report.source_url,
            image_url=report.image_url,
            headline=report.headline,
            link=report.link,
            analysis_text=report.analysis_text,
            reliability=report.reliability,
            tags=list(report.tags),
            reasons=list(report.reasons),
            status=report.status,
            created_at=report.created_at,
        )


class CreateReportRequest(BaseModel):
    """Create report request.

    Fields are loosely typed; the use case normalizes them.
    """

    title: str | None = None
    source_type: str | None = None
    source_url: str | None = None
    image_url: str | None = None
    headline: str | None = None
    link: str | None = None
    analysis_text: str | None = None
    reliability: Any = None
    tags: list[str] | None = None
    reasons: list[str] | None = None
    status: str | None = None


class CreateReportResponse(BaseModel):
    """Create report response."""

    report: ReportItem


def _blank_to_none(value: str | None) -> str | None:
    return value if value else None


class CreateReportUseCase(BaseUseCase[CreateReportRequest, CreateReportResponse]):
    """Use case for publishing a report."""

    def __init__(self, report_service: ReportService) -> None:
        """Initialize create report use case.

        Args:
            report_service: Report domain service
        """
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> CreateReportResponse:
        """Execute create report flow.

        Normalization:
        - empty strings become absent
        - reliability is kept only when it is a number
        - tags and reasons default to empty lists
        - status defaults to "published"

        Args:
            request: Create report request

        Returns:
            The stored report

        Raises:
            ValidationError: If the source type is unknown or reliability
                is outside 0-100
            DependencyError: If the row store fails
        """
        source_type = _blank_to_none(request.source_type)
        reliability = request.reliability
        if isinstance(reliability, bool) or not isinstance(reliability, (int, float)):
            reliability = None

        try:
            report = Report(
                id=ReportId(uuid4()),
                title=_blank_to_none(request.title),
                source_type=SourceType(source_type) if source_type else None,
                source_url=_blank_to_none(request.source_url),
                image_url=_blank_to_none(request.image_url),
                headline=_blank_to_none(request.headline),
                link=_blank_to_none(request.link),
                analysis_text=_blank_to_none(request.analysis_text),
                reliability=reliability,
                tags=request.tags or [],
                reasons=request.reasons or [],
                status=request.status or ReportStatus.PUBLISHED.value,
            )
        except ValueError as e:
            # Covers pydantic.ValidationError and unknown SourceType values
            if isinstance(e, pydantic.ValidationError):
                message = "; ".join(err["msg"] for err in e.errors())
            else:
                message = str(e)
            raise ValidationError(message) from e

        saved = await self.report_service.create_report(report)
        return CreateReportResponse(report=ReportItem.from_report(saved))
