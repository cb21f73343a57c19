"""Error Handlers — global exception handlers for the learn content API.

Invariants:
    - ERROR_STATUS is the only place an error kind is mapped to an HTTP status
    - Every error body is {"statusCode", "message", "error"}
    - 5xx bodies never leak internal details (message is the reason phrase)
    - RequestValidationError → 400 with one message per invalid field

Design Decisions:
    - Status lookup walks the exception MRO so subclasses inherit their parent's status
    - Starlette HTTPException (unknown route, wrong method) gets the same body shape
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from learn_api.core.errors import (
    AccessDeniedError, DatabaseError, InvalidHierarchyError, InvalidPathError,
    LearnApiError, NotFoundError, ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[LearnApiError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidPathError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    InvalidHierarchyError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DatabaseError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: LearnApiError) -> int:
    """HTTP status for an error kind; unknown kinds are 500."""
    for cls in type(exc).__mro__:
        status_code = ERROR_STATUS.get(cls)
        if status_code is not None:
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(status_code: int, message: str | list[str]) -> dict:
    return {
        "statusCode": status_code,
        "message": message,
        "error": HTTPStatus(status_code).phrase,
    }


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_learn_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_learn_error_handler(app: FastAPI) -> None:

    @app.exception_handler(LearnApiError)
    async def learn_error_handler(request: Request, exc: LearnApiError):
        """Handle all domain/infrastructure errors through ERROR_STATUS."""
        status_code = status_for(exc)
        extra = {**exc.log_extra(), "path": request.url.path}
        if status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra)
            message = HTTPStatus(status_code).phrase
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
            message = exc.message
        return JSONResponse(
            status_code=status_code, content=error_body(status_code, message),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                status.HTTP_400_BAD_REQUEST, _validation_messages(exc),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error",
            ),
        )


def _validation_messages(exc: RequestValidationError) -> list[str]:
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
