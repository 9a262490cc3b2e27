"""uvicorn server bound to an explicit settings record."""

import enum
import logging
import socket
from typing import List, Optional

import uvicorn
from fastapi import FastAPI

from demo_api.core.config import Settings

logger = logging.getLogger(__name__)


class ServerState(str, enum.Enum):
    STARTING = "starting"
    SERVING = "serving"


class APIServer(uvicorn.Server):
    """
    HTTP server for one app instance.

    The server listens on ``settings.HOST``/``settings.PORT`` and logs a ready
    line once the socket accepts connections. A failed bind is fatal: uvicorn
    logs the error and raises ``SystemExit(1)`` out of ``run()``.
    """

    def __init__(self, settings: Settings, app: FastAPI):
        config = uvicorn.Config(
            app,
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
            log_config=None,
        )
        super().__init__(config)
        self.settings = settings

    @property
    def state(self) -> ServerState:
        return ServerState.SERVING if self.started else ServerState.STARTING

    @property
    def port(self) -> int:
        """Port actually bound, which differs from the configured one for PORT=0."""
        for server in getattr(self, "servers", None) or []:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port

    async def startup(self, sockets: Optional[List[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server running on {self.settings.base_url(self.port)}")
