#!/usr/bin/env python3
"""Run the SatyaMatrix API under uvicorn.

Usage: start_app.py [--reload]
"""

import sys

import logfire
import uvicorn

from satya.config import Settings
from satya.util.logging import setup_logging
from satya.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    reload = "--reload" in argv and settings.environment == "development"
    with logfire.span("start_app", port=settings.port, reload=reload):
        try:
            uvicorn.run(
                "satya.interface.api.app:create_app",
                factory=True,
                host="0.0.0.0",
                port=settings.port,
                reload=reload,
                log_config=None,  # keep setup_logging's handlers
            )
        except Exception as e:
            logfire.error(
                "API failed to start",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
