"""Row store providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from satya.config import Settings
from satya.domain.repository import ReportRepository, VoteRepository
from satya.persistence.database import create_engine, create_session_factory
from satya.persistence.repository import (
    PostgresReportRepository,
    PostgresVoteRepository,
)
from satya.util.di.base import ProviderBase
from satya.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Row store component (report and vote repositories)."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def session_factory(
        self, settings: Settings
    ) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
        """Own the engine for the container's lifetime."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        try:
            yield create_session_factory(engine)
        finally:
            await engine.dispose()

    @provide(scope=Scope.REQUEST)
    async def session(
        self, factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction: committed on success, rolled back on error."""
        async with factory() as session:
            try:
                async with session.begin():
                    yield session
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                raise

    @provide(scope=Scope.REQUEST)
    def report_repository(self, session: AsyncSession) -> ReportRepository:
        return PostgresReportRepository(session)

    @provide(scope=Scope.REQUEST)
    def vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)
