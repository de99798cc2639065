import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from vehicle_api.utils.response import error_response

logger = logging.getLogger(__name__)


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidInput(AppException):
    """Caller-supplied value that cannot be coerced into the expected type."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, status_code=400)
        self.field = field


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        data = {"field": exc.field} if isinstance(exc, InvalidInput) and exc.field else None
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, data=data),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
