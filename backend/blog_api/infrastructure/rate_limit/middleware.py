"""ASGI middleware enforcing the per-client request budget."""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from .memory_limiter import FixedWindowRateLimiter, RateLimitContext

logger = logging.getLogger(__name__)


def _headers(context: RateLimitContext) -> dict[str, str]:
    return {
        "X-RateLimit-Limit": str(context.limit),
        "X-RateLimit-Remaining": str(context.remaining),
        "X-RateLimit-Reset": str(context.reset),
    }


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients over budget with 429 before the request is routed.

    Every response it lets through carries the X-RateLimit-* headers.
    """

    def __init__(self, app: ASGIApp, limiter: FixedWindowRateLimiter):
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client = request.client.host if request.client else "unknown"
        context = self._limiter.hit(client)
        if context.reached:
            logger.warning("Rate limit exceeded for %s", client)
            return PlainTextResponse(
                "Limit exceeded",
                status_code=429,
                headers=_headers(context),
            )

        response = await call_next(request)
        response.headers.update(_headers(context))
        return response
