"""Hull tile geometry: perimeter edges, inner tiles, wall ring, outline."""

from shipgrid.geometry.hull_perimeter import (
    Direction,
    PerimeterEdge,
    compute_perimeter_edges,
    hull_outline,
    inner_hull_tiles,
    is_inner_hull_tile,
    wall_positions,
)

__all__ = [
    "Direction",
    "PerimeterEdge",
    "compute_perimeter_edges",
    "hull_outline",
    "inner_hull_tiles",
    "is_inner_hull_tile",
    "wall_positions",
]
