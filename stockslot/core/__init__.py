from .exceptions import (
    CatalogError,
    ValidationError,
    DuplicateError,
    NotFoundError,
    CapacityError,
    IntegrityError,
)
from .item import ItemRecord
from .lookup import ById, ByName, ItemKey, to_key

__all__ = [
    "CatalogError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "CapacityError",
    "IntegrityError",
    "ItemRecord",
    "ById",
    "ByName",
    "ItemKey",
    "to_key",
]
