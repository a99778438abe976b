"""
FastAPI exception handlers for domain errors.

Every domain error becomes one response with the body
{"description": "<message>"} and is logged once with the request path,
method and headers. 4xx outcomes are logged at info, 5xx at error.
"""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.user_dto import ErrorResponse
from ..core.logging import log_with_fields
from ..domain.exceptions import (
    NotifyError,
    StorageError,
    UserApiError,
    UserConflictError,
    UserDecodeError,
    UserNotFoundError,
    UserValidationError,
)

logger = logging.getLogger(__name__)


# Checked in order; first isinstance match wins
ERROR_STATUS_CODES = (
    (UserValidationError, status.HTTP_400_BAD_REQUEST),
    (UserNotFoundError, status.HTTP_404_NOT_FOUND),
    (UserConflictError, status.HTTP_409_CONFLICT),
    # Malformed bodies are reported as server errors, not 400
    (UserDecodeError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (NotifyError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(exc: UserApiError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, description: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(description=description).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the domain error handler and the catch-all 500 handler.
    
    This is called once during app creation in main.py.
    """

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError) -> JSONResponse:
        status_code = status_code_for(exc)
        level = "error" if status_code >= 500 else "info"
        fields = {"errorType": type(exc).__name__}
        nickname = getattr(exc, "nickname", None)
        if nickname is not None:
            fields["nickname"] = nickname
        log_with_fields(logger, request, level, exc.description, **fields)
        return error_response(status_code, exc.description)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        description = str(exc) or type(exc).__name__
        log_with_fields(
            logger,
            request,
            "error",
            f"Unhandled error: {description}",
            errorType=type(exc).__name__,
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, description)
