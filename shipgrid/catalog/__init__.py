"""Structure catalog interface: lookup index and file loader."""

from shipgrid.catalog.index import CatalogEntry, build_catalog_index
from shipgrid.catalog.loader import CatalogLoadResult, load_catalog

__all__ = ["CatalogEntry", "CatalogLoadResult", "build_catalog_index", "load_catalog"]
