"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shipgrid.geometry.hull_perimeter import PerimeterEdge
from shipgrid.models.save import ShipMetadata
from shipgrid.models.types import Position


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    presets_available: int = 0


class SaveShipsResponse(BaseModel):
    all_ships: list[ShipMetadata] = Field(default_factory=list)
    player_ships: list[ShipMetadata] = Field(default_factory=list)


class HullPerimeterResponse(BaseModel):
    edges: list[PerimeterEdge] = Field(default_factory=list)
    inner_tiles: list[Position] = Field(default_factory=list)
    wall_tiles: list[Position] = Field(default_factory=list)
    outline_length: float = 0.0
    ascii_preview: str | None = None
