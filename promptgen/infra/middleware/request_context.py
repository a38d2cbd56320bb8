"""
Request context middleware for structured logging.
"""

from __future__ import annotations

from typing import Awaitable, Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from promptgen.api.errors import general_exception_handler
from promptgen.infra.config.logging_config import (
    bind_context,
    clear_context,
    get_logger,
)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a request_id and basic request info to the structlog context.

    Logs request start/end and echoes the X-Request-ID header, also on
    responses rendered for unexpected errors.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        client = request.client.host if request.client else None

        bind_context(
            request_id=request_id, path=str(request.url.path), method=request.method
        )
        logger = get_logger("http")

        logger.info("request.start", client_ip=client)
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                # 500 is rendered while the request context is still bound
                response = await general_exception_handler(request, exc)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info("request.end", status_code=response.status_code)
            return response
        finally:
            clear_context()
