import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError

from marketmate.errors import ErrorType, ERROR_STATUS_MAP

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Custom exception that repositories and services can raise."""

    def __init__(self, error_type: ErrorType, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(message)


async def app_exception_handler(_request: Request, exc: AppException) -> JSONResponse:
    """Global handler for AppException - converts to proper HTTP response."""
    status_code = ERROR_STATUS_MAP.get(exc.error_type, 500)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message}
    )


def classify_database_error(exc: SQLAlchemyError) -> AppException:
    """Translate a store-level failure into a generic AppException."""
    if isinstance(exc, IntegrityError):
        return AppException(ErrorType.CONSTRAINT_VIOLATION, "Request conflicts with stored data")
    if isinstance(exc, (OperationalError, InterfaceError)):
        return AppException(ErrorType.STORE_UNAVAILABLE, "Database unavailable")
    return AppException(ErrorType.INTERNAL_ERROR, "Internal server error")


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Global handler for SQLAlchemy errors - never leaks driver messages."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return await app_exception_handler(request, classify_database_error(exc))


async def generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Global handler for unhandled exceptions - returns 500."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )
