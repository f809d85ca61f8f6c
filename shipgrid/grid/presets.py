"""Ship canvas presets and the smallest-fit selector.

One preset unit is 27 tiles, so ``2x1`` is a 54×27 tile canvas.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from shipgrid.models.types import GridPreset, GridSize

logger = logging.getLogger(__name__)

# ── Preset table ──

GRID_PRESETS: tuple[GridPreset, ...] = (
    GridPreset(label="1x1", width=27, height=27),
    GridPreset(label="2x1", width=54, height=27),
    GridPreset(label="1x2", width=27, height=54),
    GridPreset(label="2x2", width=54, height=54),
    GridPreset(label="3x1", width=81, height=27),
    GridPreset(label="1x3", width=27, height=81),
    GridPreset(label="3x2", width=81, height=54),
    GridPreset(label="2x3", width=54, height=81),
)

DEFAULT_PRESET: GridPreset = GRID_PRESETS[3]


def _sort_key(preset: GridPreset) -> tuple[int, int]:
    return (preset.area, preset.width)


def _requirement(value: Any) -> float:
    """Coerce a required dimension to a float; NaN when it is unusable."""
    if isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def find_smallest_fitting_preset(
    width: Any,
    height: Any,
    presets: Sequence[GridPreset] = GRID_PRESETS,
) -> GridPreset:
    """Smallest preset (area, then width) containing width×height.

    Falls back to the largest preset when nothing fits. Unusable
    requirements (None, NaN, non-numeric) never fit, so they also land on
    the largest preset.
    """
    if not presets:
        raise ValueError("At least one grid preset is required")

    ordered = sorted(presets, key=_sort_key)
    need_w = _requirement(width)
    need_h = _requirement(height)

    if math.isnan(need_w) or math.isnan(need_h):
        logger.warning("Unusable grid requirement %r×%r; using largest preset", width, height)
        return ordered[-1]

    for preset in ordered:
        if preset.width >= need_w and preset.height >= need_h:
            return preset

    logger.debug("No preset fits %s×%s; using %s", width, height, ordered[-1].label)
    return ordered[-1]


def find_preset_by_label(label: str, presets: Sequence[GridPreset] = GRID_PRESETS) -> GridPreset:
    for preset in presets:
        if preset.label == label:
            return preset
    return DEFAULT_PRESET


def grid_size_from_preset(preset: GridPreset) -> GridSize:
    return GridSize(width=preset.width, height=preset.height)


def ship_fits_in_preset(width: int, height: int, preset: GridPreset) -> bool:
    return preset.width >= width and preset.height >= height
