"""Ship converter — ParsedShip + structure catalog → grid model.

Every tile element lands in exactly one bucket: hull, placed structure,
unknown (hull for single tiles, dropped for multi-tile), or discarded empty.
"""

from __future__ import annotations

import logging
import uuid
from collections import Counter

from shipgrid.catalog.index import build_catalog_index
from shipgrid.grid.presets import find_smallest_fitting_preset, grid_size_from_preset
from shipgrid.models.conversion import ConversionStats, ConversionWarning, ShipConversionResult
from shipgrid.models.save import ParsedShip
from shipgrid.models.types import HullTile, PlacedStructure, StructureCatalog
from shipgrid.save.config import DEFAULT_CONVERTER_CONFIG, ConverterConfig

logger = logging.getLogger(__name__)


def generate_structure_id() -> str:
    return f"imported-{uuid.uuid4().hex}"


def convert_ship(
    ship: ParsedShip,
    catalog: StructureCatalog,
    config: ConverterConfig = DEFAULT_CONVERTER_CONFIG,
) -> ShipConversionResult:
    """Convert a parsed ship into hull tiles, placed structures and warnings."""
    meta = ship.meta

    preset = find_smallest_fitting_preset(meta.width, meta.height, config.presets)
    index = build_catalog_index(catalog)

    # dict as an insertion-ordered set
    hull: dict[tuple[int, int], None] = {}
    structures: list[PlacedStructure] = []
    unknown_counts: Counter[int] = Counter()
    placed_anchors: set[tuple[str, int, int]] = set()

    for element in ship.elements:
        code = element.type_code

        if code == config.empty_type_code:
            continue

        if code in config.hull_type_codes:
            hull[(element.x, element.y)] = None
            continue

        key = config.catalog_key(code)
        entry = index.get(key)

        if entry is None:
            unknown_counts[code] += 1
            # Footprint of an unknown multi-tile structure can't be inferred
            if not element.is_multi_tile:
                hull[(element.x, element.y)] = None
            continue

        anchor = element.anchor
        # Multi-tile elements without usable child records are placed like single tiles
        if element.is_multi_tile and element.child_tiles:
            dedup_key = (key, anchor.x, anchor.y)
            if dedup_key in placed_anchors:
                continue
            placed_anchors.add(dedup_key)

        structures.append(
            PlacedStructure(
                id=generate_structure_id(),
                structure_id=entry.definition.id,
                category_id=entry.category_id,
                x=anchor.x,
                y=anchor.y,
                rotation=element.rotation,
                layer=entry.default_layer,
                org_layer_id=config.layer_org_ids.get(entry.default_layer),
                org_group_id=config.default_org_group_id,
            )
        )

    hull_tiles = [HullTile(x=x, y=y) for x, y in hull]
    warnings: list[ConversionWarning] = []

    if unknown_counts:
        total_unknown = sum(unknown_counts.values())
        logger.debug("Ship %s unknown type codes: %s", meta.sid, dict(unknown_counts))
        warnings.append(
            ConversionWarning(
                type="unknown_structure",
                message=(
                    f"{total_unknown} tiles with {len(unknown_counts)} unknown structure types "
                    "were treated as hull. Load a complete structure catalog to resolve them."
                ),
                count=total_unknown,
            )
        )

    if meta.width > preset.width or meta.height > preset.height:
        warnings.append(
            ConversionWarning(
                type="bounds_exceeded",
                message=(
                    f"Ship size ({meta.width}×{meta.height}) exceeds the largest available "
                    f"preset ({preset.width}×{preset.height}). Some content may be clipped."
                ),
            )
        )

    stats = ConversionStats(
        total_elements=len(ship.elements),
        hull_tiles_created=len(hull_tiles),
        structures_created=len(structures),
        structures_skipped=0,
        unknown_type_codes=len(unknown_counts),
    )

    logger.info(
        "Converted ship %s (%s) into preset %s: %d hull tiles, %d structures, %d unknown codes",
        meta.sid,
        meta.name,
        preset.label,
        stats.hull_tiles_created,
        stats.structures_created,
        stats.unknown_type_codes,
    )

    return ShipConversionResult(
        preset=preset,
        grid_size=grid_size_from_preset(preset),
        hull_tiles=hull_tiles,
        structures=structures,
        warnings=warnings,
        stats=stats,
    )
