"""Correlation ID middleware for request tracing.

Reuses the caller's ``X-Correlation-ID`` header or generates a UUID4 hex
string, stores it in ``request.state.correlation_id`` for handlers and echoes
it on the response.

Secrets MUST NOT be logged here; only method, path and status are recorded.
"""

from __future__ import annotations

import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

_HEADER_NAME = "X-Correlation-ID"
_logger = logging.getLogger("intercom-oauth.correlation")


def correlation_id_of(request: Request) -> str | None:
    return getattr(request.state, "correlation_id", None)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """ASGI middleware that attaches a per-request correlation ID."""

    def __init__(self, app: ASGIApp, header_name: str = _HEADER_NAME) -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get(self.header_name) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id
        response = await call_next(request)
        response.headers[self.header_name] = correlation_id
        _logger.debug(
            "%s %s -> %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={"correlation_id": correlation_id},
        )
        return response
