"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: object | None = None):
        msg = f"{entity} not found" if entity_id is None else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class BadRequestError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="BAD_REQUEST")

class DatabaseError(AppException):
    """A query, insert or row conversion failed. The detail is logged, never returned."""

    def __init__(self, operation: str, message: str = "Internal server error"):
        self.operation = operation
        super().__init__(message, status_code=500, code="DATABASE_ERROR")

class DatabaseNotInitializedError(AppException):
    def __init__(self):
        super().__init__("database not initialized", status_code=500, code="DATABASE_NOT_INITIALIZED")

class DatabaseUnavailableError(RuntimeError):
    """Raised at startup when the store cannot be reached; aborts the process."""

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def internal_error_response() -> JSONResponse:
    """Generic 500 envelope for exceptions nothing else handled."""
    return JSONResponse(
        status_code=500,
        content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
    )

_HTTP_ERROR_CODES = {
    404: ("NOT_FOUND", "Resource not found"),
    405: ("METHOD_NOT_ALLOWED", "Method not allowed"),
}

def _validation_message(exc: RequestValidationError) -> str:
    """Turn the first validation error into a short client-facing message."""
    for err in exc.errors():
        loc = err.get("loc") or ()
        if loc and loc[0] == "path":
            return f"Invalid {str(loc[-1]).replace('_', ' ')}"
        if loc and loc[0] == "body":
            return "Invalid request payload"
    return "Invalid request"

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        level = logging.WARNING if exc.status_code >= 500 else logging.INFO
        logger.log(level, "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.info("%s %s -> 400 %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=400,
            content=_error_body("BAD_REQUEST", message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        code, message = _HTTP_ERROR_CODES.get(exc.status_code, ("HTTP_ERROR", str(exc.detail)))
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(code, message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return internal_error_response()
