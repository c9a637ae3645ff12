"""FastAPI middleware giving each request its own deferred session."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastapi import FastAPI, HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from ..levels import LevelSpec
from ..record import Record
from ..session import Session

LOGGER = logging.getLogger(__name__)


class DeferredLogMiddleware(BaseHTTPMiddleware):
    """Opens a :class:`Session` per request and emits it after the response.

    Handlers reach the session through :func:`get_log`. Background work that
    must land in the same record should hold ``session.retain()`` or wrap its
    callable with ``session.continuation``.
    """

    def __init__(
        self,
        app: FastAPI,
        callback: Callable[[Record], Any],
        level: Optional[LevelSpec] = None,
    ) -> None:
        super().__init__(app)
        self.callback = callback
        self.level = level

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        session = Session(self.callback, level=self.level)
        request.state.log = session
        data = session.data()
        data["method"] = request.method
        data["path"] = request.url.path
        try:
            with session.timer("request"):
                response = await call_next(request)
            data["status"] = response.status_code
            return response
        except Exception as exc:
            session.error("unhandled exception", repr(exc))
            raise
        finally:
            session.release()


def get_log(request: Request) -> Session:
    """FastAPI dependency returning the session bound to ``request``."""

    session = getattr(request.state, "log", None)
    if session is None:
        LOGGER.error("DeferredLogMiddleware is not installed for %s", request.url.path)
        raise HTTPException(status_code=500, detail="deferred logging is not configured")
    return session
