from typing import Annotated

from fastapi import Depends

from src.modules.forecast.infrastructure.gemini_client import GeminiClient
from src.modules.forecast.proxy import ForecastProxy
from src.utils.settings.app import AppSettings
from src.utils.settings.gemini import GeminiSettings


def get_app_settings() -> AppSettings:
    """Read application settings from the environment."""
    return AppSettings()


def get_gemini_settings() -> GeminiSettings:
    """Read Gemini settings from the environment."""
    return GeminiSettings()


AppSettingsDep = Annotated[AppSettings, Depends(get_app_settings)]
GeminiSettingsDep = Annotated[GeminiSettings, Depends(get_gemini_settings)]


async def get_gemini_client(settings: GeminiSettingsDep) -> GeminiClient:
    """Get Gemini client for dependency injection."""
    return GeminiClient(settings)


GeminiClientDep = Annotated[GeminiClient, Depends(get_gemini_client)]


async def get_forecast_proxy(
    settings: GeminiSettingsDep,
    client: GeminiClientDep,
) -> ForecastProxy:
    return ForecastProxy(settings, client)


ForecastProxyDep = Annotated[ForecastProxy, Depends(get_forecast_proxy)]
