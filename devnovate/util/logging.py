"""Standard library logging for third-party loggers.

Application telemetry goes through logfire; uvicorn, SQLAlchemy, httpx and
alembic still log through the logging module.
"""

import logging
import sys

from devnovate.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Logger name -> level outside debug mode
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging to stdout.

    Debug mode logs everything at DEBUG, including SQL statements and
    per-request access lines; otherwise the noisy loggers in QUIET_LOGGERS
    only report problems.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
