# /app/core/errors.py

"""
Centralized error taxonomy and the FastAPI handlers that render it.

Every error body leaving the API has the same shape:

    {"success": false, "error": "Not Found", "message": "...", "code": "NOT_FOUND"}

with an optional `details` object. Services raise the `APIError` subclasses
below; routers never build error responses by hand.

HTTP status discipline:
- 400: malformed or missing input, broken references, duplicate keys
- 404: the identifier does not resolve to a record
- 500: anything unexpected (never caused by user input)
"""

import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorCode:
    """Machine-readable error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    IMMUTABLE_FIELD = "IMMUTABLE_FIELD"
    INVALID_REFERENCE = "INVALID_REFERENCE"

    NOT_FOUND = "NOT_FOUND"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class APIError(Exception):
    """Base API exception with a consistent response structure."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.error = error
        self.message = message
        self.code = code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "success": False,
            "error": self.error,
            "message": self.message,
            "code": self.code
        }
        if self.details:
            result["details"] = self.details
        return result

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


class BadRequestError(APIError):
    """400 Bad Request - invalid input."""
    def __init__(self, message: str, code: str = ErrorCode.INVALID_INPUT, details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message=message,
            code=code,
            details=details
        )


class NotFoundError(APIError):
    """404 Not Found - the resource does not exist."""
    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} with id '{identifier}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="Not Found",
            message=message,
            code=ErrorCode.NOT_FOUND
        )


class InternalError(APIError):
    """500 Internal Server Error - only for true internal failures."""
    def __init__(self, message: str = "An unexpected error occurred", log_id: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="Internal Error",
            message=message,
            code=ErrorCode.INTERNAL_ERROR,
            details={"log_id": log_id} if log_id else None
        )


# --- Exception Handlers ---

async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.warning(f"API error on {request.url.path}: {exc.code} - {exc.message}")
    return exc.to_response()


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    # The first failing field makes the human-readable message.
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", [])[1:]) or "request"
    message = f"{field}: {first.get('msg', 'Invalid input')}"
    return BadRequestError(message, code=ErrorCode.VALIDATION_ERROR, details={"errors": errors}).to_response()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"HTTP exception on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": "Error",
            "message": str(exc.detail),
            "code": ErrorCode.INTERNAL_ERROR if exc.status_code >= 500 else ErrorCode.INVALID_INPUT
        }
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_id = str(uuid.uuid4())[:8]
    logger.exception(f"[{log_id}] Unhandled exception on {request.url.path}: {type(exc).__name__}")
    return InternalError(log_id=log_id).to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Wires every handler in this module onto the application."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
