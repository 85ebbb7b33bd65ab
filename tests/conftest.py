"""Global test configuration and fixtures for the forecast proxy."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.core.dependencies import get_gemini_client, get_gemini_settings
from src.utils.settings.gemini import GeminiSettings
from tests.utils.gemini import FakeGeminiClient


TEST_API_KEY = "test-gemini-key"


@pytest.fixture
def gemini_settings() -> GeminiSettings:
    return GeminiSettings(
        _env_file=None,
        GEMINI_API_KEY=TEST_API_KEY,
        GEMINI_API_URL="http://gemini.test/v1beta",
        GEMINI_MODEL="gemini-test",
    )


@pytest.fixture
def unconfigured_settings() -> GeminiSettings:
    return GeminiSettings(_env_file=None, GEMINI_API_KEY=None)


@pytest.fixture
def fake_gemini() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def valid_body() -> dict:
    return {
        "imageDataBase64": "/9j/4AAQSkZJRgABAQAAAQABAAD/2wBDAAgGBgcGBQgH",
        "weatherData": {"temperature": 31.5, "humidity": 64, "cloudCover": 40},
    }


@pytest_asyncio.fixture
async def app(
    gemini_settings: GeminiSettings, fake_gemini: FakeGeminiClient
) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with the Gemini upstream faked out."""
    from src.main import app

    app.dependency_overrides[get_gemini_settings] = lambda: gemini_settings
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini

    async with LifespanManager(app):
        yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-forecast-proxy",
    ) as client:
        yield client
