"""Main API router combining all sub-routers."""

from fastapi import APIRouter

from shelfwatch.api.health import router as health_router
from shelfwatch.api.products import router as products_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(products_router)
