"""Grid presets and the grid-fit selector."""

from shipgrid.grid.presets import (
    DEFAULT_PRESET,
    GRID_PRESETS,
    find_preset_by_label,
    find_smallest_fitting_preset,
    grid_size_from_preset,
    ship_fits_in_preset,
)

__all__ = [
    "DEFAULT_PRESET",
    "GRID_PRESETS",
    "find_preset_by_label",
    "find_smallest_fitting_preset",
    "grid_size_from_preset",
    "ship_fits_in_preset",
]
