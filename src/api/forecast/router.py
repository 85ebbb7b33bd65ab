from typing import Any

import orjson
from fastapi import APIRouter, Request, status

from src.api.core.dependencies import AppSettingsDep, ForecastProxyDep
from src.api.core.exceptions.base import ForecastProxyException
from src.api.core.messages import ErrorMessage
from src.api.forecast.schemas import ForecastResult


router = APIRouter(tags=["forecast"])

# Every method reaches the handler so non-POST calls get the JSON 405 body
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


async def read_json_body(request: Request, max_size: int) -> Any:
    """Decode the request body, treating empty or malformed JSON as absent.

    Chunked bodies carry no Content-Length, so the size limit is enforced
    while streaming as well.
    """
    chunks = bytearray()
    async for chunk in request.stream():
        chunks.extend(chunk)
        if len(chunks) > max_size:
            raise ForecastProxyException(
                ErrorMessage.PAYLOAD_TOO_LARGE,
                status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )
    if not chunks:
        return None
    try:
        return orjson.loads(chunks)
    except orjson.JSONDecodeError:
        return None


@router.api_route("/gemini", methods=ALL_METHODS, response_model=ForecastResult)
async def forecast_from_sky(
    request: Request,
    proxy: ForecastProxyDep,
    app_settings: AppSettingsDep,
) -> ForecastResult:
    """Forecast the next hours from a sky photo and current weather readings."""
    body = None
    if request.method == "POST":
        body = await read_json_body(request, app_settings.MAX_REQUEST_SIZE)
    return await proxy.handle(request.method, body)
