"""
API error handling and exception mapping.

Converts domain and framework errors into ErrorResponse bodies with
appropriate HTTP status codes.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from promptgen.api.schemas import ErrorResponse
from promptgen.domain.exceptions import DomainError
from promptgen.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

# Map domain error codes to HTTP status codes
STATUS_CODE_MAPPING = {
    "INPUT_TOO_LONG": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """
    Handle domain-specific errors.

    Args:
        request: The HTTP request
        exc: The domain error

    Returns:
        JSONResponse: Formatted error response
    """
    logger.warning("error.domain", code=exc.code, detail=exc.message)

    status_code = STATUS_CODE_MAPPING.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return _error_response(status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Args:
        request: The HTTP request
        exc: The validation error

    Returns:
        JSONResponse: Formatted error response
    """
    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    detail = "Validation failed: " + "; ".join(formatted_errors)
    logger.warning("error.validation", detail=detail)

    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", detail
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions, including unknown routes and methods."""
    logger.warning("error.http", status_code=exc.status_code, detail=exc.detail)

    return _error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals."""
    logger.exception("error.unexpected", error_type=type(exc).__name__)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
