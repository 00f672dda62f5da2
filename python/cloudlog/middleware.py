# ASGI middleware giving each request its own trace-correlated logger.

from __future__ import annotations
from typing import Any, Optional

from .config import Config
from .default import std
from .logger import Logger
from .trace import TRACE_HEADER

_HEADER = TRACE_HEADER.lower().encode("latin-1")


class TraceMiddleware:
    """Stores ``Logger.for_header(...)`` in ``scope["state"]["logger"]``.

    Starlette and FastAPI expose it as ``request.state.logger``.
    """

    def __init__(self, app: Any, config: Optional[Config] = None) -> None:
        self.app = app
        self.config = config

    async def __call__(self, scope: dict, receive: Any, send: Any) -> None:
        if scope["type"] in ("http", "websocket"):
            header = None
            for name, value in scope.get("headers") or ():
                if name.lower() == _HEADER:
                    header = value.decode("latin-1")
                    break
            scope.setdefault("state", {})["logger"] = Logger.for_header(header, self.config)
        await self.app(scope, receive, send)


def request_logger(request: Any) -> Logger:
    state = getattr(request, "state", None)
    logger = getattr(state, "logger", None)
    return logger if isinstance(logger, Logger) else std
