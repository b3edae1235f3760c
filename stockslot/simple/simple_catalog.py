import logging
import threading
from dataclasses import replace
from typing import Iterator, List, Mapping, Optional

from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from ..core.item import (
    ItemRecord,
    validate_identifier,
    validate_name,
    validate_price,
    validate_quantity,
)
from ..core.lookup import ById, ByName, to_key

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "quantity", "price")


class SimpleCatalog:
    """
    Ordered list of item records keyed by identifier.

    Identifiers are either supplied by the caller or taken from a counter
    owned by this instance. A supplied identifier moves the counter past it,
    so later auto-assigned identifiers never collide with it.

    Returned records are copies, so changes go through update_quantity.

    Only identifiers are unique here; two records may share a name, in which
    case a name search returns the one inserted first.
    """

    def __init__(self):
        self._items: list[ItemRecord] = []
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def next_id(self) -> int:
        """Identifier the next insert without an ``item_id`` will receive."""
        return self._next_id

    def insert(self, fields: Mapping) -> ItemRecord:
        """
        Validate and append a new record.

        Args:
            fields: Mapping with ``name``, ``quantity``, ``price`` and an
                optional ``item_id``

        Returns:
            ItemRecord: Copy of the stored record

        Raises:
            ValidationError: If a required field is missing or invalid
            DuplicateError: If the supplied item_id is already present
        """
        with self._lock:
            missing = [key for key in REQUIRED_FIELDS if key not in fields]
            if missing:
                raise self._reject(ValidationError(
                    f"Missing required fields: {', '.join(missing)}"))

            try:
                name = validate_name(fields["name"])
                quantity = validate_quantity(fields["quantity"])
                price = validate_price(fields["price"])
                item_id = None
                if "item_id" in fields:
                    item_id = validate_identifier(fields["item_id"])
            except ValidationError as e:
                raise self._reject(e)

            if item_id is not None:
                if self._find(ById(item_id)) is not None:
                    raise self._reject(DuplicateError(
                        f"Item with ID {item_id} already exists"))
                next_id = max(self._next_id, item_id + 1)
            else:
                item_id = self._next_id
                next_id = self._next_id + 1

            record = ItemRecord(item_id, name, quantity, price)
            self._items.append(record)
            self._next_id = next_id

            logger.info("Successfully added item: %s", record)
            return replace(record)

    def delete(self, item_id: int) -> ItemRecord:
        """
        Remove the record with the given identifier.

        Returns:
            ItemRecord: The removed record

        Raises:
            NotFoundError: If no record has that identifier
        """
        with self._lock:
            for index, item in enumerate(self._items):
                if item.item_id == item_id:
                    deleted = self._items.pop(index)
                    logger.info("Successfully deleted item: %s", deleted)
                    return deleted

            raise self._reject(NotFoundError(
                f"Item with ID {item_id} not found"))

    def search(self, key) -> Optional[ItemRecord]:
        """
        Find the first record matching an identifier or a name.

        Args:
            key: int identifier, str name, or an ItemKey

        Returns:
            The matching record, or None if nothing matches
        """
        with self._lock:
            item = self._find(to_key(key))
            return replace(item) if item is not None else None

    def update_quantity(self, item_id: int, new_quantity: int) -> ItemRecord:
        """
        Set the quantity of an existing record.

        Raises:
            NotFoundError: If no record has that identifier
            ValidationError: If new_quantity is negative or not an int
        """
        with self._lock:
            item = self._find(ById(item_id))
            if item is None:
                raise self._reject(NotFoundError(
                    f"Item with ID {item_id} not found"))

            try:
                validate_quantity(new_quantity)
            except ValidationError as e:
                raise self._reject(e)

            old_quantity = item.quantity
            item.quantity = new_quantity
            logger.info("Updated item %d quantity from %d to %d",
                        item_id, old_quantity, new_quantity)
            return replace(item)

    def total_value(self) -> float:
        """Sum of quantity times price over every record."""
        with self._lock:
            return sum(item.value for item in self._items)

    def item_count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def list_items(self) -> List[ItemRecord]:
        """Records in insertion order."""
        with self._lock:
            return [replace(item) for item in self._items]

    def _find(self, key) -> Optional[ItemRecord]:
        for item in self._items:
            if isinstance(key, ById) and item.item_id == key.item_id:
                return item
            if isinstance(key, ByName) and item.name_key == key.name_key:
                return item
        return None

    @staticmethod
    def _reject(error: Exception) -> Exception:
        logger.warning("Error: %s", error)
        return error

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemRecord]:
        return iter(self.list_items())

    def __contains__(self, key) -> bool:
        return self.search(key) is not None

    def __repr__(self) -> str:
        return f"SimpleCatalog(items={len(self._items)}, next_id={self._next_id})"
