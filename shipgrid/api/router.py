"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from shipgrid.api import health, hull, saves

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(saves.router)
api_router.include_router(hull.router)
