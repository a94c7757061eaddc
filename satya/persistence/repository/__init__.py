"""PostgreSQL repository implementations."""

from satya.persistence.repository.report import PostgresReportRepository
from satya.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresReportRepository",
    "PostgresVoteRepository",
]
