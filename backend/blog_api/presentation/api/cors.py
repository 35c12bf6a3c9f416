"""Permissive cross-origin headers on every response."""

from collections.abc import Sequence

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

ALLOWED_METHODS = "GET, POST, OPTIONS, DELETE"
ALLOWED_HEADERS = "Content-Type"


class CrossOriginMiddleware(BaseHTTPMiddleware):
    """Stamp CORS headers on every response and answer OPTIONS itself.

    Any OPTIONS request, preflight or not, gets an empty 200 without being
    routed or counted against the rate limit.
    """

    def __init__(self, app: ASGIApp, allow_origins: Sequence[str] = ("*",)):
        super().__init__(app)
        self._origins = list(allow_origins) or ["*"]

    def _allow_origin(self, request: Request) -> str:
        if "*" in self._origins:
            return "*"
        origin = request.headers.get("origin")
        if origin in self._origins:
            return origin
        return self._origins[0]

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            response = await call_next(request)

        response.headers["Access-Control-Allow-Origin"] = self._allow_origin(request)
        response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS
        if "*" not in self._origins:
            response.headers["Vary"] = "Origin"
        return response
