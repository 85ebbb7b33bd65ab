"""Client for the Gemini generateContent API."""

import asyncio
from dataclasses import dataclass
from typing import Any

import aiohttp
import orjson

from src.api.forecast.schemas import GenerateContentRequest
from src.utils.logger import get_logger
from src.utils.settings.gemini import GeminiSettings


logger = get_logger(__name__)


class GeminiClientError(RuntimeError):
    """The call never produced a usable HTTP reply (transport or body decoding)."""


@dataclass(frozen=True)
class GeminiReply:
    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class GeminiClient:
    """Client for making generateContent requests to Gemini."""

    def __init__(self, settings: GeminiSettings):
        self.url = settings.generate_content_url
        self.timeout = aiohttp.ClientTimeout(total=settings.GEMINI_TIMEOUT)

    async def generate_content(
        self, payload: GenerateContentRequest, api_key: str
    ) -> GeminiReply:
        """POST the payload once and return status plus decoded JSON body."""
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            try:
                async with session.post(
                    self.url,
                    json=payload.to_wire(),
                    params={"key": api_key},
                ) as response:
                    raw = await response.read()
                    if not raw.strip():
                        raise ValueError(f"Empty body with status {response.status}")
                    # Gemini error bodies are JSON too, decode regardless of status
                    body = orjson.loads(raw)
                    return GeminiReply(status=response.status, body=body)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(f"Gemini request failed: {e!r}")
                raise GeminiClientError(f"Gemini API unavailable: {e!r}") from e
            except ValueError as e:
                logger.error(f"Gemini returned a non-JSON body: {e}")
                raise GeminiClientError("Gemini API returned a non-JSON body") from e

