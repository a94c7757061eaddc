"""In-memory row store for tests."""

from dishka import Scope, provide

from satya.domain.repository import ReportRepository, VoteRepository
from satya.persistence.repository.inmemory import (
    InMemoryReportRepository,
    InMemoryVoteRepository,
)
from satya.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """In-memory repositories shared by every request of one container.

    Each test builds its own container, so state never leaks between tests.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def report_repository(self) -> ReportRepository:
        return InMemoryReportRepository()

    @provide
    def vote_repository(self) -> VoteRepository:
        return InMemoryVoteRepository()
