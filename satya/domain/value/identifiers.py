"""Strongly typed identifiers for SatyaMatrix domain entities."""

from typing import NewType
from uuid import UUID

from satya.domain.error import MissingReportIdError

# Server-assigned report identifier
ReportId = NewType("ReportId", UUID)

# Client-generated ballot slot token (unauthenticated, opaque)
VoterId = NewType("VoterId", str)


def parse_report_id(raw: str | UUID | None) -> ReportId:
    """Parse a report id coming from a path or payload.

    Args:
        raw: Raw report id

    Returns:
        Typed report id

    Raises:
        MissingReportIdError: If the id is absent or not a valid UUID
            (such an id can never resolve to a stored report)
    """
    if isinstance(raw, UUID):
        return ReportId(raw)
    if not raw or not str(raw).strip():
        raise MissingReportIdError()
    try:
        return ReportId(UUID(str(raw).strip()))
    except ValueError:
        raise MissingReportIdError(str(raw))
