"""Async engine and session factory for the row store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from satya.config import Settings

APPLICATION_NAME = "satya-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Connections are pinged on checkout; managed Postgres drops idle ones.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit and never autoflush."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
