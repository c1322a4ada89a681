"""
Application Exception Handling

Single AppException class for all application errors with FastAPI integration.
"""

from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from supermarket.utils.validators import FieldError, combine_errors


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides consistent error response format across the entire API:
    ``{"error": <message>, "code": <ERROR_CODE>}`` plus ``details`` when set.

    Usage:
        raise AppException("endpoint not found", "ENDPOINT_NOT_FOUND", 405)
        raise AppException("[0]: name is required", "VALIDATION_ERROR", 400, {"index": 0})

    Error Codes:
        Validation:
            - VALIDATION_ERROR (400)      one or more item fields rejected
            - INVALID_PRODUCE_CODE (400)  malformed code in a path
            - INVALID_REQUEST_BODY (400)  body is not the expected JSON shape

        Routing:
            - ENDPOINT_NOT_FOUND (405)
            - HTTP_ERROR (any)            other framework HTTP errors

        Startup:
            - SEED_FAILED (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INVALID_PRODUCE_CODE")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "error": self.message,
            "code": self.code,
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict

    def to_response(self) -> JSONResponse:
        """Build the JSON response for this exception."""
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return exc.to_response()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report bodies that do not decode into the expected shape as 400."""
    return invalid_request_body(exc.errors()).to_response()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Report unknown routes and methods as "endpoint not found"."""
    if exc.status_code in (404, 405):
        return endpoint_not_found().to_response()
    return AppException(str(exc.detail), "HTTP_ERROR", exc.status_code).to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Call this in main.py after creating the FastAPI instance.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def item_validation_failed(index: int, errors: Sequence[FieldError]) -> AppException:
    """Create exception for the first rejected item of a batch."""
    return AppException(
        f"[{index}]: {combine_errors(errors)}",
        "VALIDATION_ERROR",
        400,
        {"index": index, "errors": [error.to_dict() for error in errors]}
    )


def invalid_produce_code(error: FieldError) -> AppException:
    """Create exception for a malformed (or empty) produce code."""
    return AppException(
        error.message,
        "INVALID_PRODUCE_CODE",
        400,
        {"field": error.field, "reason": error.reason}
    )


def endpoint_not_found() -> AppException:
    """Create exception for unknown routes and methods."""
    return AppException("endpoint not found", "ENDPOINT_NOT_FOUND", 405)


def invalid_request_body(errors: List[Dict[str, Any]]) -> AppException:
    """Create exception for request bodies with the wrong JSON shape."""
    problems = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)

    return AppException(
        "invalid request body: " + "; ".join(problems),
        "INVALID_REQUEST_BODY",
        400
    )


def seed_failed(
    source: str,
    reason: str,
    details: Optional[Dict[str, Any]] = None
) -> AppException:
    """Create exception for a seed file that cannot be loaded."""
    return AppException(
        f"cannot seed catalog from {source}: {reason}",
        "SEED_FAILED",
        500,
        details
    )
