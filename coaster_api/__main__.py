"""Command line entry point for the Coaster API.

Builds the application from environment variables and serves it with
Uvicorn.  ``ADMIN_PASSWORD`` is required; ``HOST`` and ``PORT`` default
to ``0.0.0.0`` and ``8080``.

Usage:
    ADMIN_PASSWORD=secret python -m coaster_api
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from coaster_api.app.core.config import ConfigurationError, Settings
from coaster_api.app.core.logging_config import setup_logging
from coaster_api.app.main import create_app

logger = logging.getLogger("coaster_api")


async def serve(settings: Settings) -> None:
    """Build the application and serve it until shutdown.

    Uvicorn exits the process with status 1 if it cannot bind the
    port.
    """
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, log_config=None)
    server = Server(config)
    logger.info("Serving %s on %s:%d", settings.project_name, settings.host, settings.port)
    await server.serve()


def main() -> None:
    try:
        settings = Settings.from_env()
        setup_logging(settings.log_level, settings.log_file or None)
        asyncio.run(serve(settings))
    except ConfigurationError as exc:
        logger.critical("Cannot start: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
