"""Permissive CORS middleware — stamps cross-origin headers on every response."""


import logging
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from maintenance_api.core.exceptions import internal_error_response

logger = logging.getLogger(__name__)

class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Allows any origin on every response, unhandled 500s included.

    OPTIONS requests are answered here with a bare 200 and never reach the
    router, so preflights succeed whether or not the database is up.
    """

    def __init__(self, app, allow_origin: str = "*", allow_methods: str = "GET, POST, OPTIONS",
                 allow_headers: str = "Content-Type"):
        super().__init__(app)
        self._headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": allow_methods,
            "Access-Control-Allow-Headers": allow_headers,
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                response = internal_error_response()

        response.headers.update(self._headers)
        return response
