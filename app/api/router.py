"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes use
dependencies from app.api.dependencies (no manual cache/repo construction).
"""

from fastapi import APIRouter

from app.api.endpoints import constants, cron, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(constants.router, prefix="/constants", tags=["constants"])
api_router.include_router(cron.router, prefix="/cron", tags=["cron"])
