"""Bearer token gate for every route except the health check."""

from __future__ import annotations

import hmac

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from eodproxy.web.models import ErrorResponse

BEARER_PREFIX = "Bearer "
HEALTH_PATH = "/api/health"


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Rejects requests that do not carry the configured bearer token.

    Responds 500 when the server has no token configured, 401 when the
    ``Authorization`` header is missing, malformed or wrong.
    """

    def __init__(self, app: ASGIApp, expected_token: str, exempt_path: str = HEALTH_PATH) -> None:
        super().__init__(app)
        self.expected_token = expected_token
        self.exempt_path = exempt_path

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if path == self.exempt_path:
            return await call_next(request)

        if not self.expected_token:
            logger.error("Rejecting request: PROXY_BEARER_TOKEN is not configured", path=path)
            return _reject(500, "Server authentication is not configured")

        header = request.headers.get("authorization")
        if not header or not header.startswith(BEARER_PREFIX):
            logger.warning("Rejecting request without bearer token", path=path)
            return _reject(401, "Unauthorized")

        provided = header[len(BEARER_PREFIX):].strip()
        if not hmac.compare_digest(provided.encode(), self.expected_token.encode()):
            logger.warning("Rejecting request with invalid bearer token", path=path)
            return _reject(401, "Unauthorized")

        return await call_next(request)


def _reject(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())
