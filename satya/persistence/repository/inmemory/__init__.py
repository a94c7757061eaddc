"""In-memory repository implementations for testing."""

from .report import InMemoryReportRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryReportRepository",
    "InMemoryVoteRepository",
]
