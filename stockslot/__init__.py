"""
stockslot: in-memory inventory catalogs.

Two interchangeable designs are provided:

- SimpleCatalog: an ordered list of records keyed by identifier
- MultiViewCatalog: a fixed-capacity record table kept in sync with a
  price/quantity projection, a name index and sparse storage
"""

from .config import CatalogSettings
from .core import (
    CatalogError,
    ValidationError,
    DuplicateError,
    NotFoundError,
    CapacityError,
    IntegrityError,
    ItemRecord,
    ById,
    ByName,
    to_key,
)
from .multiview import MultiViewCatalog, Orientation, SparseEntry, CatalogStats
from .simple import SimpleCatalog

__version__ = "0.1.0"


def new_catalog() -> SimpleCatalog:
    """Create an empty simple catalog with its own identifier counter."""
    return SimpleCatalog()


def new_multi_view_catalog(capacity: int, row_major: bool = True) -> MultiViewCatalog:
    """Create an empty multi-view catalog with a fixed projection orientation."""
    return MultiViewCatalog(capacity, row_major)


__all__ = [
    "CatalogSettings",
    "CatalogError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "CapacityError",
    "IntegrityError",
    "ItemRecord",
    "ById",
    "ByName",
    "to_key",
    "MultiViewCatalog",
    "Orientation",
    "SparseEntry",
    "CatalogStats",
    "SimpleCatalog",
    "new_catalog",
    "new_multi_view_catalog",
]
