"""Repository interfaces for SatyaMatrix domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from satya.domain.repository.report import ReportRepository
from satya.domain.repository.vote import VoteRepository

__all__ = [
    "ReportRepository",
    "VoteRepository",
]
