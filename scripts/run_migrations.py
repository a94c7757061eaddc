#!/usr/bin/env python3
"""Apply Alembic migrations (reports, report_votes) before the API starts."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from satya.config import Settings
from satya.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision`` and report failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    database = make_url(settings.database_url)
    with logfire.span(
        "run_migrations",
        revision=revision,
        host=database.host,
        database=database.database,
    ):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a broken schema
            raise

        logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
