"""FastAPI app entrypoint."""

import logging
import sys
from typing import Optional

from fastapi import FastAPI
from pydantic import ValidationError

from demo_api import __version__
from demo_api.api import api_router
from demo_api.core.config import Settings, get_settings
from demo_api.server import APIServer

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send app and uvicorn logs through one root handler."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a FastAPI application.

    Args:
        settings: Configuration record; the cached environment settings are
            used when omitted.

    Returns:
        A new application instance with the API routes registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_TITLE,
        description="Demo service answering a welcome payload and a health check",
        version=__version__,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.include_router(api_router)

    return app


def main() -> None:
    """Load settings from the environment and serve until terminated."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Starting {settings.APP_TITLE} on {settings.HOST}:{settings.PORT}")

    server = APIServer(settings, create_app(settings))
    server.run()


if __name__ == "__main__":
    main()
