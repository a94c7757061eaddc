"""Report use cases."""

from .create_report import (
    CreateReportRequest,
    CreateReportResponse,
    CreateReportUseCase,
    ReportItem,
)
from .delete_report import (
    DeleteReportRequest,
    DeleteReportResponse,
    DeleteReportUseCase,
)
from .list_trending import (
    ListTrendingRequest,
    ListTrendingResponse,
    ListTrendingUseCase,
    TrendingReportItem,
)

__all__ = [
    "CreateReportRequest",
    "CreateReportResponse",
    "CreateReportUseCase",
    "DeleteReportRequest",
    "DeleteReportResponse",
    "DeleteReportUseCase",
    "ListTrendingRequest",
    "ListTrendingResponse",
    "ListTrendingUseCase",
    "ReportItem",
    "TrendingReportItem",
]
