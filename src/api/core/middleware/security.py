from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.core.exceptions.base import error_response
from src.api.core.messages import ErrorMessage
from src.utils.logger import get_logger
from src.utils.settings.app import AppSettings

logger = get_logger(__name__)


class PayloadSizeMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body exceeds the configured limit."""

    def __init__(self, app, max_request_size: int | None = None):
        super().__init__(app)
        self.max_request_size = max_request_size or AppSettings().MAX_REQUEST_SIZE

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("Content-Length")
        if (
            content_length
            and content_length.isdigit()
            and int(content_length) > self.max_request_size
        ):
            logger.warning(
                f"Request too large: {content_length} bytes from {request.client.host if request.client else 'unknown'}",
                max_request_size=self.max_request_size,
            )
            return error_response(
                ErrorMessage.PAYLOAD_TOO_LARGE,
                status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )

        return await call_next(request)
