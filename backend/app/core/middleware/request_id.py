from __future__ import annotations

import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.middleware.context import clear_context, get_logger, set_request_id

logger = get_logger()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request id for the duration of the request and log one line when it completes."""

    def __init__(self, app, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        clear_context()
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        set_request_id(request_id)

        started = time.perf_counter()
        # Stays 500 when call_next raises; the exception goes on to the server error handler.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[self.header_name] = request_id
            return response
        finally:
            logger.info(
                "request.completed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
