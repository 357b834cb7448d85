"""
Error Translation

Single place where request outcomes become HTTP error responses.

Error Taxonomy:
===============
(a) Validation  - malformed, missing or inconsistent input
                  -> 400 with field-level detail
(b) Not found   - EntityNotFoundError
                  -> 404 with an empty body
(c) Mutation    - MutationFailedError, a repository reported that a write
                  did not take effect -> 500 with the generic message
(d) Unexpected  - any other exception (database faults included)
                  -> 500 with the generic message

For (c) and (d) the detail is written to the log and never returned to
the caller. Nothing is retried.
"""

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from sqlalchemy.exc import SQLAlchemyError

from bookstore_api.services.logger import get_logger_service

GENERIC_ERROR_MESSAGE = (
    "An unexpected error occurred. Please contact the system administrator."
)


class BookStoreError(Exception):
    """Base class for errors raised by the BookStore routers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EntityNotFoundError(BookStoreError):
    """Raised when a requested entity is not stored."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} was not found")


class MutationFailedError(BookStoreError):
    """Raised when a repository create/update/delete returned False."""


def describe_exception(exc: BaseException) -> str:
    """
    Render an exception and its chained cause for the log.

    Example:
        "IntegrityError: UNIQUE constraint failed - caused by: ..."
    """
    message = f"{type(exc).__name__}: {exc}"
    inner = exc.__cause__ or exc.__context__
    if inner is not None:
        message += f" - caused by: {type(inner).__name__}: {inner}"
    return message


def generic_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_MESSAGE},
    )


# =============================================================================
# Exception Handlers
# =============================================================================
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report schema validation failures as 400 with per-field errors."""
    get_logger_service().warn(
        f"Invalid request data for {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def not_found_exception_handler(
    request: Request,
    exc: EntityNotFoundError,
) -> Response:
    get_logger_service().warn(exc.message)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def mutation_failed_exception_handler(
    request: Request,
    exc: MutationFailedError,
) -> JSONResponse:
    get_logger_service().error(exc.message)
    return generic_error_response()


async def database_exception_handler(
    request: Request,
    exc: SQLAlchemyError,
) -> JSONResponse:
    """Hide database errors from callers while logging the real cause."""
    get_logger_service().error(f"Database error: {describe_exception(exc)}")
    return generic_error_response()


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    get_logger_service().error(
        f"Unhandled error: {describe_exception(exc)}",
        exc_info=True,
    )
    return generic_error_response()


async def catch_unhandled_exceptions(
    request: Request,
    call_next: RequestResponseEndpoint,
) -> Response:
    """
    Turn unhandled exceptions into the generic 500 inside CORS.

    Handlers registered for Exception run outside every user middleware,
    so their responses carry no CORS headers.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every BookStore exception handler to the application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_exception_handler)
    app.add_exception_handler(MutationFailedError, mutation_failed_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unhandled_exceptions)
