import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import PayloadSizeMiddleware
from src.api.router import api_router
from src.utils.settings.app import AppSettings
from src.utils.settings.gemini import GeminiSettings
from src.utils.logger import setup_logging


app_settings = AppSettings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = setup_logging(app_settings.is_production)
    logger.info("Starting Sky Forecast Proxy...")

    gemini_settings = GeminiSettings()
    if not gemini_settings.GEMINI_API_KEY:
        # Not fatal: each forecast request answers 500 until a key is provided
        logger.warning("GEMINI_API_KEY is not set, forecasts will fail")
    logger.info("Gemini upstream configured", model=gemini_settings.GEMINI_MODEL)

    yield

    logger.info("Shutting down Sky Forecast Proxy...")


app = FastAPI(
    title="Sky Forecast Proxy",
    description="Short-range weather forecasts from sky photos using Gemini",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if app_settings.is_production else "/docs",
    redoc_url=None if app_settings.is_production else "/redoc",
    openapi_url=None if app_settings.is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_origin_regex=r"https://.*\.vercel\.app",
    allow_credentials=False,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(
    PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
