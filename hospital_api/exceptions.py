"""
Global exception handlers and custom exception classes.

Every failure leaves the API as the uniform envelope
``{"success": false, "error": "<message>"}``.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .core.responses import error_envelope

# Set up logging
logger = logging.getLogger(__name__)

class AppException(Exception):
    """
    Base exception class for application-specific exceptions.
    """
    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ResourceNotFoundException(AppException):
    """Exception raised when an id is absent from its collection."""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StorageException(AppException):
    """Exception raised when a collection file cannot be read or written."""
    def __init__(self, detail: str = "Storage failure"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


async def app_exception_handler(request: Request, exc: AppException):
    """
    Handler for application-specific exceptions.

    Args:
        request: The request that caused the exception
        exc: The exception instance

    Returns:
        JSONResponse: Failure envelope with the exception's status code
    """
    logger.error(f"Application error on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.detail)
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for framework HTTP errors such as unknown routes or methods.

    Args:
        request: The request that caused the exception
        exc: The HTTP exception raised by routing

    Returns:
        JSONResponse: Failure envelope with the original status code
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail)),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation exceptions.

    Request bodies are not validated field by field, so this only fires when
    the body is missing, malformed, or not a JSON object. Like any other
    failure outside a missing id it is a 500.

    Args:
        request: The request that caused the exception
        exc: The validation exception instance

    Returns:
        JSONResponse: Failure envelope carrying the first parser message
    """
    errors = exc.errors()
    logger.error(f"Invalid request body on {request.method} {request.url.path}: {errors}")
    message = errors[0].get("msg") if errors else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(message or "Invalid request body")
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler so no exception reaches the transport unwrapped."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope(str(exc) or "Internal server error")
    )


# Register exception handlers with FastAPI app
def register_exception_handlers(app):
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
