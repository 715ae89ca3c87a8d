#!/usr/bin/env python3
"""Serve the Devnovate API with uvicorn.

Logging and Logfire are configured here, before uvicorn imports the app
module, so that failures while building the app are captured too.
"""

import sys

import logfire
import uvicorn

from devnovate.config import Settings
from devnovate.util.logging import setup_logging
from devnovate.util.observability import configure_logfire

APP = "devnovate.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Devnovate API",
        version=settings.version,
        environment=settings.environment,
        port=settings.port,
    )
    try:
        uvicorn.run(
            APP,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development" and settings.debug,
            proxy_headers=settings.environment != "development",
        )
    except Exception:
        logfire.exception("Devnovate API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
