"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from shipgrid import __version__
from shipgrid.grid.presets import GRID_PRESETS
from shipgrid.models.responses import HealthResponse
from shipgrid.models.types import GridPreset

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        presets_available=len(GRID_PRESETS),
    )


@router.get("/presets", response_model=list[GridPreset])
async def presets() -> list[GridPreset]:
    return list(GRID_PRESETS)
