"""Converter configuration: game-data constants consulted during conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from shipgrid.grid.presets import GRID_PRESETS
from shipgrid.models.types import GridPreset, LayerId


def _default_layer_org_ids() -> Mapping[LayerId, str]:
    return MappingProxyType(
        {
            LayerId.HULL: "layer-hull",
            LayerId.ROOMS: "layer-rooms",
            LayerId.SYSTEMS: "layer-systems",
            LayerId.FURNITURE: "layer-furniture",
        }
    )


@dataclass(frozen=True)
class ConverterConfig:
    """Swap this out to target a different game-data version."""

    # Type code the archive writes for an unoccupied tile
    empty_type_code: int = -2
    # Floor variants observed in saves; these become hull tiles, never structures
    hull_type_codes: frozenset[int] = frozenset({1146, 1147, 1148})
    # Catalog key = prefix + type code
    catalog_key_prefix: str = "mid_"
    # Default organizational layer for each system layer
    layer_org_ids: Mapping[LayerId, str] = field(default_factory=_default_layer_org_ids)
    default_org_group_id: str | None = None
    presets: tuple[GridPreset, ...] = GRID_PRESETS

    def catalog_key(self, type_code: int) -> str:
        return f"{self.catalog_key_prefix}{type_code}"


DEFAULT_CONVERTER_CONFIG = ConverterConfig()
