"""Map domain exceptions to HTTP responses.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from flagpost.core.errors import (
    FlagpostError,
    NotFound,
    PreconditionFailed,
    Unauthorized,
    UpstreamIntegrationFailure,
)

logger = logging.getLogger(__name__)

ERROR_TO_STATUS: dict[type[FlagpostError], int] = {
    Unauthorized: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    PreconditionFailed: status.HTTP_409_CONFLICT,
    UpstreamIntegrationFailure: status.HTTP_502_BAD_GATEWAY,
}


def _status_for(exc: FlagpostError) -> int:
    for error_type, status_code in ERROR_TO_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def flagpost_error_handler(request: Request, exc: FlagpostError) -> JSONResponse:
    """Render a domain error with its code."""
    status_code = _status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Render service-level validation failures as 422."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "code": "VALIDATION_ERROR"},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all domain exception handlers on ``app``."""
    app.add_exception_handler(FlagpostError, flagpost_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, value_error_handler)  # type: ignore[arg-type]
