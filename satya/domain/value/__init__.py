"""Domain value objects for SatyaMatrix."""

from satya.domain.value.identifiers import ReportId, VoterId, parse_report_id
from satya.domain.value.types import (
    Authorization,
    IdentityUser,
    ReportStatus,
    SourceType,
    VoteChoice,
)

__all__ = [
    # Identifiers
    "ReportId",
    "VoterId",
    "parse_report_id",
    # Types
    "Authorization",
    "IdentityUser",
    "ReportStatus",
    "SourceType",
    "VoteChoice",
]
