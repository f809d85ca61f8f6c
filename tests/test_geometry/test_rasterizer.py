"""Tests for hull rasterization helpers."""

import numpy as np

from shipgrid.geometry.hull_perimeter import inner_hull_tiles
from shipgrid.models.types import GridSize
from shipgrid.utils.rasterizer import SHADING_SYMBOLS, grid_to_text, hull_mask, hull_shading, inner_mask


def test_hull_mask_places_tiles_row_major():
    grid = hull_mask({(0, 0), (2, 1)}, GridSize(width=3, height=2))
    assert grid.shape == (2, 3)
    assert grid.dtype == np.int8
    assert grid[0, 0] == 1
    assert grid[1, 2] == 1
    assert int(grid.sum()) == 2


def test_hull_mask_drops_out_of_bounds():
    grid = hull_mask({(-1, 0), (0, 0), (5, 5)}, GridSize(width=2, height=2))
    assert int(grid.sum()) == 1


def test_hull_mask_empty():
    grid = hull_mask([], GridSize(width=4, height=3))
    assert grid.shape == (3, 4)
    assert not grid.any()


def test_inner_mask_matches_set_based_inner_tiles():
    tiles = {(x, y) for x in range(1, 5) for y in range(1, 4)} | {(7, 2)}
    grid = hull_mask(tiles, GridSize(width=9, height=6))
    ys, xs = np.nonzero(inner_mask(grid))
    assert {(int(x), int(y)) for x, y in zip(xs, ys)} == inner_hull_tiles(tiles)


def test_shading_preview():
    tiles = {(x, y) for x in range(3) for y in range(3)}
    grid = hull_mask(tiles, GridSize(width=4, height=3))
    assert grid_to_text(hull_shading(grid), SHADING_SYMBOLS) == "+++.\n+#+.\n+++."


def test_grid_to_text_custom_symbols():
    grid = np.array([[1, 0]], dtype=np.int8)
    assert grid_to_text(grid, symbols="-X") == "X-"


def test_plain_mask_preview():
    grid = hull_mask({(0, 0), (1, 0)}, GridSize(width=3, height=2))
    assert grid_to_text(grid) == "##.\n..."
