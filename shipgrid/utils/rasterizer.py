"""Rasterization utilities: hull tile set to numpy grid, grid to text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from shipgrid.geometry.hull_perimeter import as_tile_set
from shipgrid.models.types import GridSize


def hull_mask(hull_tiles: Iterable[Any], grid_size: GridSize) -> NDArray[np.int8]:
    """Binary grid (row = y, col = x). Tiles outside the grid are dropped."""
    grid = np.zeros((grid_size.height, grid_size.width), dtype=np.int8)
    tiles = as_tile_set(hull_tiles)
    if not tiles:
        return grid

    coords = np.array(sorted(tiles), dtype=np.int64)
    xs, ys = coords[:, 0], coords[:, 1]
    inside = (xs >= 0) & (xs < grid_size.width) & (ys >= 0) & (ys < grid_size.height)
    grid[ys[inside], xs[inside]] = 1
    return grid


def inner_mask(grid: NDArray[np.int8]) -> NDArray[np.int8]:
    """Cells whose four cardinal neighbors are all filled. Off-grid counts as empty."""
    padded = np.pad(grid, 1, mode="constant", constant_values=0)
    north = padded[:-2, 1:-1]
    south = padded[2:, 1:-1]
    west = padded[1:-1, :-2]
    east = padded[1:-1, 2:]
    return (grid & north & south & west & east).astype(np.int8)


# empty, hull tile with an exposed side, inner hull tile
SHADING_SYMBOLS = ".+#"


def hull_shading(grid: NDArray[np.int8]) -> NDArray[np.int8]:
    """0 = empty, 1 = hull tile with an exposed side, 2 = inner hull tile."""
    return (grid + inner_mask(grid)).astype(np.int8)


def grid_to_text(grid: NDArray[np.int8], symbols: str = ".#") -> str:
    """Convert a grid to text, one symbol per cell value."""
    rows = []
    for row in grid:
        rows.append("".join(symbols[int(cell)] for cell in row))
    return "\n".join(rows)
