"""Request correlation for the HTTP surface.

Every request runs with a request ID taken from the ``X-Request-ID`` header
(or freshly generated). The ID is held in a contextvar so log records emitted
while serving the request carry it, and it is echoed on the response.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = logging.getLogger(__name__)


def current_request_id() -> str:
    """Request ID of the request being served, or "no-request-id" outside one."""
    return _request_id.get() or "no-request-id"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds a request ID for the duration of each request and logs its timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = _request_id.set(request_id)

        try:
            start_time = time.time()
            logger.info(f"{request.method} {request.url.path}")

            response = await call_next(request)

            logger.info(
                f"Request completed: {response.status_code}",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": round((time.time() - start_time) * 1000, 2),
                }
            )
        finally:
            _request_id.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
