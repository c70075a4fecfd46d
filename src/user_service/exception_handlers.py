"""Global exception handlers for the FastAPI application.

Every error response has the same shape, a single ``error`` text field.
Internal details are logged and never sent to the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_service.constants import MSG_INTERNAL_ERROR, MSG_INVALID_BODY
from user_service.exceptions import NotFoundError, UserServiceError


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build the JSON error body used by all handlers."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
        if isinstance(exc, NotFoundError):
            logger.debug(f"{request.method} {request.url.path}: user {exc.identifier} not found")
        else:
            logger.debug(f"{request.method} {request.url.path}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug(f"{request.method} {request.url.path}: invalid request body: {exc.errors()}")
        return error_response(status.HTTP_400_BAD_REQUEST, MSG_INVALID_BODY)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, MSG_INTERNAL_ERROR)

    logger.debug("Registered exception handlers")
