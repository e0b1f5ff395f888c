"""Request-scoped middleware."""
from collections.abc import Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from userflow.core.logging import correlation_id_ctx


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id before routing so auth dependencies log it too."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = request.headers.get("x-correlation-id") or request.headers.get("x-request-id") or None
        value = (incoming or str(uuid4())).strip()
        token = correlation_id_ctx.set(value)
        try:
            response = await call_next(request)
            response.headers["X-Correlation-Id"] = value
            return response
        finally:
            correlation_id_ctx.reset(token)
