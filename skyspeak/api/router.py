from fastapi import APIRouter

from skyspeak.api.routes import forecast

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(forecast.router, tags=["forecast"])
