"""Structure lookup built from a catalog in one pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shipgrid.models.types import LayerId, StructureCatalog, StructureDef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    definition: StructureDef
    category_id: str
    default_layer: LayerId


def build_catalog_index(catalog: StructureCatalog) -> dict[str, CatalogEntry]:
    """Map structure id → definition, category and layer. Last write wins."""
    index: dict[str, CatalogEntry] = {}
    for category in catalog.categories:
        for item in category.items:
            if item.id in index:
                logger.debug("Duplicate catalog id %s; keeping entry from %s", item.id, category.id)
            index[item.id] = CatalogEntry(
                definition=item,
                category_id=category.id,
                default_layer=category.default_layer,
            )
    return index
