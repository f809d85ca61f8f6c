"""FastAPI dependency injection."""

from __future__ import annotations

import logging

from shipgrid.catalog.loader import load_catalog
from shipgrid.config import Settings, settings
from shipgrid.models.types import StructureCatalog

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    return settings


def get_default_catalog() -> StructureCatalog:
    """Configured catalog, or an empty one when it is absent or invalid."""
    result = load_catalog(settings.catalog_path)
    if result.found and result.catalog is not None:
        return result.catalog
    if result.status == "invalid":
        logger.warning("Configured catalog is invalid, converting without one: %s", result.error)
    return StructureCatalog()
