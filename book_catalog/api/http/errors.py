"""Mapping of failures to the catalog's single error shape.

Every failure on a catalog route is answered with HTTP 500 and
``{"error": <message>}``; bad input and store faults are not told apart.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from starlette.responses import JSONResponse

GENERIC_ERROR_MESSAGE = "Internal Server Error"


def store_error_message(exc: Exception) -> str:
    """Return the driver's own message when the error wraps a DBAPI exception."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)


def validation_error_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def error_response(request: Request, message: str) -> JSONResponse:
    """Build the 500 response, hiding the message if configured to."""
    app_deps = getattr(request.app.state, "app_dependencies", None)
    expose = app_deps.config.app.expose_store_errors if app_deps else True
    return JSONResponse(
        status_code=500,
        content={"error": message if expose else GENERIC_ERROR_MESSAGE},
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    message = store_error_message(exc)
    logger.bind(error_type=type(exc).__name__).error("Store error: {}", message)
    return error_response(request, message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = validation_error_message(exc)
    logger.bind(error_type=type(exc).__name__).warning("Invalid request: {}", message)
    return error_response(request, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
