"""Application-level exception handlers."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from flashdeck.exceptions import UnknownOperationError

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


async def unknown_operation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unclassified storage failures with a generic 500."""
    cause = exc.cause if isinstance(exc, UnknownOperationError) else None
    logger.error(
        "unknown_operation_error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        cause=repr(cause),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": UNEXPECTED_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UnknownOperationError, unknown_operation_error_handler)
