"""Logging setup and request logging middleware."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("cards_api.requests")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log start and completion of each request with a short request id."""

    def __init__(self, app, *, log: logging.Logger | None = None) -> None:
        super().__init__(app)
        self.log = log or logger

    async def dispatch(self, request: Request, call_next):
        req_id = str(uuid.uuid4())[:8]
        start = time.time()
        client_ip = request.client.host if request.client else None
        self.log.info(
            "request_started req_id=%s method=%s path=%s client_ip=%s",
            req_id,
            request.method,
            request.url.path,
            client_ip,
        )
        try:
            response = await call_next(request)
        except Exception:
            self.log.exception("request_failed req_id=%s", req_id)
            raise
        duration_ms = round((time.time() - start) * 1000, 2)
        self.log.info(
            "request_completed req_id=%s status=%s duration_ms=%s",
            req_id,
            response.status_code,
            duration_ms,
        )
        return response
