"""Load a structure catalog JSON file written by the external catalog builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from shipgrid.models.types import StructureCatalog

logger = logging.getLogger(__name__)

LoadStatus = Literal["found", "invalid", "absent"]


@dataclass(frozen=True)
class CatalogLoadResult:
    status: LoadStatus
    catalog: StructureCatalog | None = None
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.status == "found"


def load_catalog(path: str | Path | None) -> CatalogLoadResult:
    """Read and validate a catalog file.

    Missing file → ``absent``; unreadable or schema-violating content →
    ``invalid`` with the reason; otherwise ``found`` with the catalog.
    """
    if path is None:
        return CatalogLoadResult(status="absent")

    catalog_path = Path(path)
    if not catalog_path.is_file():
        logger.info("No catalog at %s", catalog_path)
        return CatalogLoadResult(status="absent")

    try:
        raw = catalog_path.read_bytes()
    except OSError as e:
        logger.warning("Could not read catalog %s: %s", catalog_path, e)
        return CatalogLoadResult(status="invalid", error=str(e))

    try:
        catalog = StructureCatalog.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("Invalid catalog %s: %d errors", catalog_path, e.error_count())
        return CatalogLoadResult(status="invalid", error=str(e))

    n_items = sum(len(c.items) for c in catalog.categories)
    logger.info("Loaded catalog %s: %d categories, %d structures", catalog_path, len(catalog.categories), n_items)
    return CatalogLoadResult(status="found", catalog=catalog)
