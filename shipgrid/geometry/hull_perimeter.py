"""Hull perimeter edges using 4-neighbor (cardinal) adjacency.

Each tile is tested on its own against its four neighbors, so the result
does not depend on iteration order and runs in O(tiles). Screen
orientation: north is y-1, south is y+1.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict
from shapely.geometry import box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union


class Direction(str, enum.Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
}

_RING_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1), (0, 1), (-1, 0), (1, 0),
    (-1, -1), (1, -1), (-1, 1), (1, 1),
)


class PerimeterEdge(BaseModel):
    """Side ``direction`` of tile (x, y) is exposed."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    direction: Direction


TileKey = tuple[int, int]


def _key(tile: Any) -> TileKey:
    if hasattr(tile, "x"):
        return (int(tile.x), int(tile.y))
    x, y = tile
    return (int(x), int(y))


def as_tile_set(hull_tiles: Iterable[Any]) -> frozenset[TileKey]:
    """Normalize (x, y) tuples or objects with x/y into a set of keys."""
    return frozenset(_key(t) for t in hull_tiles)


def compute_perimeter_edges(hull_tiles: Iterable[Any]) -> list[PerimeterEdge]:
    """One edge per (tile, direction) whose neighbor is not a hull tile."""
    tiles = as_tile_set(hull_tiles)
    edges: list[PerimeterEdge] = []

    for x, y in tiles:
        for direction, (dx, dy) in _OFFSETS.items():
            if (x + dx, y + dy) not in tiles:
                edges.append(PerimeterEdge(x=x, y=y, direction=direction))

    return edges


def is_inner_hull_tile(hull_tiles: Iterable[Any], x: int, y: int) -> bool:
    """True if (x, y) is hull and all four cardinal neighbors are hull too."""
    return _is_inner(as_tile_set(hull_tiles), x, y)


def _is_inner(tiles: frozenset[TileKey], x: int, y: int) -> bool:
    if (x, y) not in tiles:
        return False
    return all((x + dx, y + dy) in tiles for dx, dy in _OFFSETS.values())


def inner_hull_tiles(hull_tiles: Iterable[Any]) -> set[TileKey]:
    tiles = as_tile_set(hull_tiles)
    return {(x, y) for x, y in tiles if _is_inner(tiles, x, y)}


def wall_positions(hull_tiles: Iterable[Any]) -> set[TileKey]:
    """Empty positions among the 8 neighbors of any hull tile."""
    tiles = as_tile_set(hull_tiles)
    walls: set[TileKey] = set()
    for x, y in tiles:
        for dx, dy in _RING_OFFSETS:
            neighbor = (x + dx, y + dy)
            if neighbor not in tiles:
                walls.add(neighbor)
    return walls


def hull_outline(hull_tiles: Iterable[Any]) -> BaseGeometry:
    """Union of unit squares. Boundary length == number of perimeter edges."""
    tiles = as_tile_set(hull_tiles)
    return unary_union([box(x, y, x + 1, y + 1) for x, y in tiles])
