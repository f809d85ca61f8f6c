"""Converter output: the grid model plus diagnostics."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from shipgrid.models.types import GridPreset, GridSize, HullTile, PlacedStructure

WarningKind = Literal["unknown_structure", "parse_error", "bounds_exceeded"]


class ConversionWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: WarningKind
    message: str
    type_code: int | None = None
    count: int | None = None


class ConversionStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_elements: int = 0
    hull_tiles_created: int = 0
    structures_created: int = 0
    # Always 0 for now; duplicates are dropped silently
    structures_skipped: int = 0
    unknown_type_codes: int = 0


class ShipConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    preset: GridPreset
    grid_size: GridSize
    hull_tiles: list[HullTile] = Field(default_factory=list)
    structures: list[PlacedStructure] = Field(default_factory=list)
    warnings: list[ConversionWarning] = Field(default_factory=list)
    stats: ConversionStats = Field(default_factory=ConversionStats)
