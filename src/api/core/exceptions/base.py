"""Global exception handlers for the FastAPI application."""

import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import ErrorMessage
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Distinguishes "no details" from an upstream body that is literally null
NO_DETAILS: Any = object()


class ForecastProxyException(Exception):
    """Base exception for the forecast proxy, rendered as ``{error[, details]}``."""

    def __init__(
        self,
        message: ErrorMessage,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Any = NO_DETAILS,
        headers: dict | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        self.headers = headers or {}
        super().__init__(message.value)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        content: dict[str, Any] = {"error": self.message.value}
        if self.details is not NO_DETAILS:
            content["details"] = self.details
        return content


def error_response(
    message: ErrorMessage | str,
    status_code: int,
    headers: dict | None = None,
) -> JSONResponse:
    error = message.value if isinstance(message, ErrorMessage) else message
    return JSONResponse(
        status_code=status_code, content={"error": error}, headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(ForecastProxyException)
    async def forecast_proxy_exception_handler(
        request: Request, exc: ForecastProxyException
    ) -> JSONResponse:
        """Handle custom forecast proxy exceptions."""
        logger.warning(
            f"Forecast proxy exception: {exc.message.value}",
            path=request.url.path,
            method=request.method,
            status_code=exc.status_code,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors (404, 405) raised by Starlette."""
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )

        return error_response(str(exc.detail), exc.status_code, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        logger.warning(
            "Validation error occurred",
            path=request.url.path,
            method=request.method,
            error_count=len(exc.errors()),
        )

        return error_response(
            ErrorMessage.MISSING_INPUT, status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )

        return error_response(
            ErrorMessage.INTERNAL_SERVER_ERROR,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
