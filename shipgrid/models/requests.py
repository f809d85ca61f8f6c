"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shipgrid.grid.presets import GRID_PRESETS
from shipgrid.models.types import Position, StructureCatalog

# Preview grids never need to exceed the largest preset side
MAX_PREVIEW_SIDE = max(max(p.width, p.height) for p in GRID_PRESETS)


class SaveShipsRequest(BaseModel):
    xml: str = Field(..., description="Raw save archive XML")


class ConvertShipRequest(BaseModel):
    xml: str = Field(..., description="Raw save archive XML")
    sid: str = Field(..., description="Identifier of the ship to convert")
    catalog: StructureCatalog | None = Field(
        default=None,
        description="Structure catalog; the configured catalog is used when omitted",
    )


class HullPerimeterRequest(BaseModel):
    tiles: list[Position] = Field(default_factory=list, description="Hull tile positions")
    grid_width: int | None = Field(default=None, gt=0, le=MAX_PREVIEW_SIDE, description="Grid width for the ASCII preview")
    grid_height: int | None = Field(default=None, gt=0, le=MAX_PREVIEW_SIDE, description="Grid height for the ASCII preview")
