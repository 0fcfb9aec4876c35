"""Exception handlers mapping minerals errors onto HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from modules.minerals.errors import (
    InternalInvariantError,
    MineralError,
    NotFoundError,
    StorageError,
    UpstreamServiceError,
    ValidationError,
)

logger = get_module_logger()

GENERIC_ERROR_MESSAGE = "internal server error"


async def not_found_handler(_request: Request, exc: Exception):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


async def validation_error_handler(_request: Request, exc: Exception):
    content = {"message": str(exc)}
    if isinstance(exc, ValidationError) and exc.field:
        content["field"] = exc.field
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def upstream_error_handler(_request: Request, exc: Exception):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"message": str(exc)})


async def internal_error_handler(request: Request, exc: Exception):
    """Log the full error and answer with a generic message."""
    logger.error(
        "request_failed",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )


def setup_exception_handlers(app: FastAPI):
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(UpstreamServiceError, upstream_error_handler)
    app.add_exception_handler(StorageError, internal_error_handler)
    app.add_exception_handler(InternalInvariantError, internal_error_handler)
    app.add_exception_handler(MineralError, internal_error_handler)
