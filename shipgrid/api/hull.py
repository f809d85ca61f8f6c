"""POST /api/hull/perimeter: wall edges and inner shading for a hull tile set."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter

from shipgrid.geometry.hull_perimeter import (
    compute_perimeter_edges,
    hull_outline,
    inner_hull_tiles,
    wall_positions,
)
from shipgrid.models.requests import HullPerimeterRequest
from shipgrid.models.responses import HullPerimeterResponse
from shipgrid.models.types import GridSize, Position
from shipgrid.utils.rasterizer import SHADING_SYMBOLS, grid_to_text, hull_mask, hull_shading

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hull")


@router.post("/perimeter", response_model=HullPerimeterResponse)
async def perimeter(req: HullPerimeterRequest) -> HullPerimeterResponse:
    start = time.perf_counter()

    tiles = {(t.x, t.y) for t in req.tiles}
    edges = compute_perimeter_edges(tiles)
    inner = sorted(inner_hull_tiles(tiles))
    walls = sorted(wall_positions(tiles))
    outline_length = float(hull_outline(tiles).length) if tiles else 0.0

    preview = None
    if req.grid_width is not None and req.grid_height is not None:
        grid = hull_mask(tiles, GridSize(width=req.grid_width, height=req.grid_height))
        preview = grid_to_text(hull_shading(grid), SHADING_SYMBOLS)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Hull perimeter for %d tiles: %d edges in %.1f ms", len(tiles), len(edges), elapsed)

    return HullPerimeterResponse(
        edges=sorted(edges, key=lambda e: (e.x, e.y, e.direction.value)),
        inner_tiles=[Position(x=x, y=y) for x, y in inner],
        wall_tiles=[Position(x=x, y=y) for x, y in walls],
        outline_length=outline_length,
        ascii_preview=preview,
    )
