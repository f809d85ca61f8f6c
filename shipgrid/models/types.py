"""Core grid domain types: positions, layers, catalog entries, placements."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Rotation(enum.IntEnum):
    """Clockwise rotation in degrees."""

    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270


class LayerId(str, enum.Enum):
    HULL = "Hull"
    ROOMS = "Rooms"
    SYSTEMS = "Systems"
    FURNITURE = "Furniture"


# Render order, bottom to top
LAYERS: tuple[LayerId, ...] = (LayerId.HULL, LayerId.ROOMS, LayerId.SYSTEMS, LayerId.FURNITURE)


class TileType(str, enum.Enum):
    CONSTRUCTION = "construction"
    BLOCKED = "blocked"
    ACCESS = "access"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class _CatalogModel(BaseModel):
    """Catalog payloads come from an external builder that writes camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Position(_Frozen):
    x: int
    y: int


class HullTile(Position):
    """A 1x1 hull block. Only its presence at (x, y) carries meaning."""


class GridSize(_Frozen):
    width: int
    height: int


class GridPreset(_Frozen):
    label: str
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


class BoundingBox(_Frozen):
    x: int
    y: int
    width: int
    height: int


class StructureTile(_CatalogModel):
    # Offsets from the structure origin
    x: int
    y: int
    type: TileType = TileType.CONSTRUCTION
    # 255 = blocked, 1 = walkable, 0 = free access
    walk_cost: int = 1


class TileLayout(_CatalogModel):
    tiles: tuple[StructureTile, ...] = ()
    width: int
    height: int


class StructureDef(_CatalogModel):
    id: str
    name: str
    size: tuple[int, int] = (1, 1)
    color: str = "#888888"
    category_id: str = ""
    # When absent the whole size counts as construction tiles
    tile_layout: TileLayout | None = None


class StructureCategory(_CatalogModel):
    id: str
    name: str
    color: str = "#888888"
    default_layer: LayerId = LayerId.FURNITURE
    items: tuple[StructureDef, ...] = ()


class StructureCatalog(_CatalogModel):
    categories: tuple[StructureCategory, ...] = ()


class PlacedStructure(_Frozen):
    """One catalog structure instance placed on the grid.

    ``x``/``y`` is the minimum corner of the footprint regardless of rotation.
    ``org_layer_id`` and ``org_group_id`` only carry organizational metadata
    for the editor; nothing in the conversion logic reads them.
    """

    id: str
    structure_id: str
    category_id: str
    x: int
    y: int
    rotation: Rotation = Rotation.R0
    layer: LayerId
    org_layer_id: str | None = None
    org_group_id: str | None = None


def rotated_size(size: tuple[int, int], rotation: Rotation) -> tuple[int, int]:
    """Footprint size after rotation; 90 and 270 swap width and height."""
    if rotation in (Rotation.R90, Rotation.R270):
        return (size[1], size[0])
    return (size[0], size[1])


def structure_bounds(structure: PlacedStructure, definition: StructureDef) -> BoundingBox:
    width, height = rotated_size(definition.size, structure.rotation)
    return BoundingBox(x=structure.x, y=structure.y, width=width, height=height)
