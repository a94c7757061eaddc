"""Standard library logging for third-party packages.

Our own code logs through logfire; this only sets levels and format for
uvicorn, SQLAlchemy and httpx.
"""

import logging
import sys

from satya.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Logger name -> level outside debug mode
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from settings."""
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout, force=True)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)

    log = logging.getLogger("satya")
    log.info("Logging configured (%s, %s)", settings.environment, logging.getLevelName(level))
    if not settings.platform.is_configured:
        log.warning(
            "PLATFORM__URL or PLATFORM__SERVICE_ROLE_KEY is not set; "
            "token checks and image storage will fail"
        )
