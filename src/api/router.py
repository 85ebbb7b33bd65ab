from fastapi import APIRouter

from src.api.forecast.router import router as forecast_router
from src.api.health.router import router as health_router

# Serverless-compatible prefix, the front-end posts to /api/gemini
public_router = APIRouter(prefix="/api")
public_router.include_router(forecast_router)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(public_router)
