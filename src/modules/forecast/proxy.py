"""Sky-photo forecast pipeline: validate, prompt, call Gemini, unwrap."""

from typing import Any, Protocol

import orjson
from fastapi import status
from pydantic import ValidationError

from src.api.core.exceptions.base import ForecastProxyException
from src.api.core.messages import ErrorMessage
from src.api.forecast.schemas import (
    ForecastRequest,
    ForecastResult,
    GenerateContentRequest,
    GenerateContentResponse,
)
from src.modules.forecast.infrastructure.gemini_client import (
    GeminiClientError,
    GeminiReply,
)
from src.modules.forecast.prompt import build_forecast_prompt
from src.utils.logger import get_logger
from src.utils.settings.gemini import GeminiSettings


logger = get_logger(__name__)


class ForecastParseError(ValueError):
    """Gemini replied 2xx but the body did not hold a usable forecast."""


class UpstreamClient(Protocol):
    async def generate_content(
        self, payload: GenerateContentRequest, api_key: str
    ) -> GeminiReply: ...


def parse_forecast_request(body: Any) -> ForecastRequest:
    """Validate the posted body, rejecting missing or empty image/weather data."""
    if not isinstance(body, dict) or not (
        body.get("imageDataBase64") and body.get("weatherData")
    ):
        raise ForecastProxyException(
            ErrorMessage.MISSING_INPUT, status.HTTP_400_BAD_REQUEST
        )
    try:
        return ForecastRequest.model_validate(body)
    except ValidationError as e:
        logger.info("Rejected forecast request", error_count=e.error_count())
        raise ForecastProxyException(
            ErrorMessage.MISSING_INPUT, status.HTTP_400_BAD_REQUEST
        ) from e


def extract_forecast(body: Any) -> ForecastResult:
    """Unwrap the first candidate's text and parse it as a ForecastResult."""
    try:
        envelope = GenerateContentResponse.model_validate(body)
        return ForecastResult.model_validate(orjson.loads(envelope.first_text))
    except (ValidationError, ValueError) as e:
        raise ForecastParseError(str(e)) from e


class ForecastProxy:
    """Turns one inbound forecast request into one Gemini call."""

    def __init__(self, settings: GeminiSettings, client: UpstreamClient):
        self.settings = settings
        self.client = client

    async def handle(self, method: str, body: Any) -> ForecastResult:
        if method.upper() != "POST":
            raise ForecastProxyException(
                ErrorMessage.METHOD_NOT_ALLOWED,
                status.HTTP_405_METHOD_NOT_ALLOWED,
                headers={"Allow": "POST"},
            )

        api_key = self.settings.GEMINI_API_KEY
        if not api_key:
            logger.error("GEMINI_API_KEY is not configured")
            raise ForecastProxyException(ErrorMessage.API_KEY_NOT_CONFIGURED)

        request = parse_forecast_request(body)
        prompt = build_forecast_prompt(
            request.weather_data, self.settings.FORECAST_LOCATION
        )
        payload = GenerateContentRequest.from_prompt_and_image(
            prompt, request.image_data_base64
        )

        # Transport and parse failures collapse into one generic 500
        try:
            reply = await self.client.generate_content(payload, api_key)
            if not reply.ok:
                logger.error(
                    "Google API Error", status_code=reply.status, details=reply.body
                )
                raise ForecastProxyException(
                    ErrorMessage.UPSTREAM_ERROR, reply.status, details=reply.body
                )
            result = extract_forecast(reply.body)
        except (GeminiClientError, ForecastParseError) as e:
            logger.error(
                f"Proxy Error: {e}", exception_type=type(e).__name__, exc_info=True
            )
            raise ForecastProxyException(ErrorMessage.INTERNAL_SERVER_ERROR) from e

        logger.info(
            "Forecast generated",
            rain_probability_percent=result.rain_probability_percent,
            confidence_score_percent=result.confidence_score_percent,
        )
        return result
