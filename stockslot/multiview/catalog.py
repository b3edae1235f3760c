import logging
import threading
from dataclasses import replace
from typing import List, Optional, Tuple

from ..config import CatalogSettings, RARE_RESTOCK_THRESHOLD_DAYS
from ..core.exceptions import (
    CapacityError,
    CatalogError,
    DuplicateError,
    IntegrityError,
    NotFoundError,
    ValidationError,
)
from ..core.item import (
    ItemRecord,
    validate_amount,
    validate_identifier,
    validate_name,
    validate_price,
    validate_quantity,
    validate_restock_frequency,
)
from ..core.lookup import ById, ByName, to_key
from .name_index import NameIndex
from .orientation import Orientation
from .projection import EMPTY_ROW, PriceQuantityTable, Row
from .record_table import RecordTable, SlotState
from .sparse import PRICE_COL, QUANTITY_COL, SparseEntry, SparseStorage
from .stats import CatalogStats

logger = logging.getLogger(__name__)


class MultiViewCatalog:
    """
    Fixed-capacity inventory catalog kept in several synchronized views.

    Views:
    - **Record table**: one ItemRecord per slot, dense from slot 0
    - **Name index**: lowercased name <-> slot, both directions
    - **Projection table**: (price, quantity) or (quantity, price) per slot,
      depending on the orientation chosen at construction
    - **Sparse storage**: (row, col, value) triples for items whose restock
      frequency was above the rare-restock threshold when they were added

    Architecture:
    ```
    MultiViewCatalog
    ├── RecordTable          (slot -> ItemRecord)
    ├── NameIndex            (name <-> slot)
    ├── PriceQuantityTable   (slot -> row in orientation order)
    └── SparseStorage        (rarely restocked items only)
    ```

    Every mutation validates first, then builds the new state of each view
    it touches and commits them together, so a failed call leaves all views
    as they were. One lock per instance makes each mutation a single unit.
    """

    def __init__(self, capacity: int, row_major: bool = True, *,
                 rare_restock_threshold: int = RARE_RESTOCK_THRESHOLD_DAYS):
        """
        Initialize an empty catalog.

        Args:
            capacity: Maximum number of records, must be positive
            row_major: True for (price, quantity) projection rows,
                False for (quantity, price)
            rare_restock_threshold: Items restocked less often than this many
                days are mirrored into sparse storage

        Raises:
            ValueError: If capacity or the threshold is out of range
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")
        if rare_restock_threshold < 0:
            raise ValueError(
                f"Rare restock threshold must be non-negative, got {rare_restock_threshold}")

        self._orientation = Orientation.from_flag(row_major)
        self.rare_restock_threshold = rare_restock_threshold

        self._records = RecordTable(capacity)
        self._names = NameIndex()
        self._projection = PriceQuantityTable(capacity, self._orientation)
        self._sparse = SparseStorage()

        self._lock = threading.RLock()

        logger.info("Inventory Management System initialized with %d slots using %s ordering",
                    capacity, self._orientation.label)

    @classmethod
    def from_settings(cls, settings: CatalogSettings) -> 'MultiViewCatalog':
        """Build a catalog from configured defaults."""
        return cls(settings.default_capacity, settings.row_major,
                   rare_restock_threshold=settings.rare_restock_threshold)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def row_major(self) -> bool:
        return self._orientation is Orientation.ROW_MAJOR

    @property
    def capacity(self) -> int:
        return self._records.capacity

    @property
    def occupied(self) -> int:
        return self._records.occupied

    @property
    def free_slots(self) -> int:
        return self._records.free_slots()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_record(self, item_id: int, name: str, quantity: int, price: float,
                   restock_frequency: int) -> int:
        """
        Add a record at the next free slot.

        Args:
            item_id: Unique identifier
            name: Non-empty name, unique ignoring case
            quantity: Units on hand, >= 0
            price: Unit price, >= 0
            restock_frequency: Days between restocks, >= 0

        Returns:
            int: Slot the record was written to

        Raises:
            CapacityError: If every slot is taken
            ValidationError: If a field is empty, negative or mistyped
            DuplicateError: If the identifier or name is already present
        """
        with self._lock:
            slot = self._records.next_free_slot()
            if slot is None:
                raise self._reject(CapacityError("Inventory is full"))

            try:
                item_id = validate_identifier(item_id)
                name = validate_name(name)
                quantity = validate_quantity(quantity)
                price = validate_price(price)
                restock_frequency = validate_restock_frequency(restock_frequency)
            except ValidationError as e:
                raise self._reject(e)

            if self._search(ById(item_id)) is not None or self._search(ByName(name)) is not None:
                raise self._reject(DuplicateError(
                    f"Item with ID {item_id} or name '{name}' already exists"))

            record = ItemRecord(item_id, name, quantity, price, restock_frequency)

            new_slots = self._records.with_record(slot, record)
            new_names = self._names.copy()
            new_names.register(slot, name)
            new_rows = self._projection.with_row(slot, price, quantity)
            new_sparse = None
            if restock_frequency > self.rare_restock_threshold:
                new_sparse = self._sparse.with_added(
                    SparseStorage.entries_for_item(slot, price, quantity))

            self._records.commit(new_slots)
            self._names = new_names
            self._projection.commit(new_rows)
            if new_sparse is not None:
                self._sparse.commit(new_sparse)
                logger.debug("Added item %s to sparse storage", name)

            logger.info("Successfully added item: %s (ID: %d)", name, item_id)
            return slot

    def remove_record(self, key) -> ItemRecord:
        """
        Remove a record and compact every view.

        Records, projection rows and name-index entries above the removed
        slot move down by one; the last occupied slot becomes empty. Sparse
        entries of the removed slot are dropped and those above it are
        re-numbered so they keep tracking the same item.

        Args:
            key: int identifier, str name, or an ItemKey

        Returns:
            ItemRecord: The removed record

        Raises:
            NotFoundError: If no record matches
        """
        with self._lock:
            lookup = to_key(key)
            slot = self._search(lookup)
            if slot is None:
                raise self._reject(NotFoundError(f"Item not found: {lookup}"))

            removed = self._records.get(slot)
            occupied = self._records.occupied

            new_slots = self._records.compacted_without(slot)
            new_names = NameIndex.rebuilt_from(new_slots[:occupied - 1])
            new_rows = self._projection.compacted_without(slot, occupied)
            new_sparse = self._sparse.without_row(slot)

            self._records.commit(new_slots)
            self._names = new_names
            self._projection.commit(new_rows)
            self._sparse.commit(new_sparse)

            logger.debug("Compacted %d slot(s) above slot %d",
                         occupied - 1 - slot, slot)
            logger.info("Successfully removed item: %s (ID: %d)",
                        removed.name, removed.item_id)
            return replace(removed)

    def update_quantity(self, key, new_quantity: int) -> int:
        """
        Change an item's quantity in every view that holds it.

        Returns:
            int: The previous quantity

        Raises:
            NotFoundError: If no record matches
            ValidationError: If new_quantity is negative or not an int
        """
        with self._lock:
            lookup = to_key(key)
            slot = self._search(lookup)
            if slot is None:
                raise self._reject(NotFoundError(f"Item not found: {lookup}"))

            try:
                validate_quantity(new_quantity)
            except ValidationError as e:
                raise self._reject(e)

            record = self._records.get(slot)
            old_quantity = record.quantity
            updated = replace(record, quantity=new_quantity)

            new_slots = self._records.with_replaced(slot, updated)
            new_rows = self._projection.with_row(slot, updated.price, new_quantity)
            new_sparse = self._sparse.with_quantity(slot, new_quantity)

            self._records.commit(new_slots)
            self._projection.commit(new_rows)
            self._sparse.commit(new_sparse)

            logger.info("Updated quantity for %s from %d to %d",
                        record.name, old_quantity, new_quantity)
            return old_quantity

    def manage_price_quantity(self, slot: int, price: float, quantity: float) -> Row:
        """
        Write a slot's projection row in this catalog's orientation.

        Row-major stores (price, quantity), column-major (quantity, price).

        Returns:
            The row as stored

        Raises:
            NotFoundError: If the slot is not occupied
            ValidationError: If the slot is not an int, or price or quantity
                is not a finite non-negative number
        """
        with self._lock:
            if isinstance(slot, bool) or not isinstance(slot, int):
                raise self._reject(ValidationError(
                    f"slot must be an integer, got {type(slot).__name__}"))
            self._check_occupied(slot)
            try:
                price = validate_price(price)
                quantity = validate_amount(quantity, "quantity")
            except ValidationError as e:
                raise self._reject(e)
            self._projection.write(slot, price, quantity)
            return self._projection.row(slot)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search(self, key) -> Optional[int]:
        """
        Locate an item.

        Identifiers are found by a linear scan over the occupied slots,
        names through the name index, ignoring case.

        Returns:
            Slot number, or None if nothing matches
        """
        with self._lock:
            return self._search(to_key(key))

    def get_record(self, key) -> Optional[ItemRecord]:
        """Copy of the matching record, or None."""
        with self._lock:
            slot = self._search(to_key(key))
            if slot is None:
                return None
            return replace(self._records.get(slot))

    def item_details(self, key) -> Optional[str]:
        """One-line description of the matching record, or None."""
        record = self.get_record(key)
        if record is None:
            return None
        return record.describe()

    def records(self) -> List[ItemRecord]:
        """Copies of the stored records in slot order."""
        with self._lock:
            return [replace(record) for record in self._records.occupied_records()]

    def projection_rows(self) -> List[Row]:
        """Projection rows of the occupied slots, in orientation order."""
        with self._lock:
            return self._projection.rows(self._records.occupied)

    def projection_row(self, slot: int) -> Row:
        with self._lock:
            return self._projection.row(slot)

    def sparse_entries(self) -> List[SparseEntry]:
        with self._lock:
            return self._sparse.entries()

    def name_index_items(self) -> List[Tuple[str, int]]:
        """(lowercased name, slot) pairs sorted by slot."""
        with self._lock:
            return self._names.items()

    def name_at(self, slot: int) -> Optional[str]:
        with self._lock:
            return self._names.name_at(slot)

    def slot_state(self, slot: int) -> SlotState:
        with self._lock:
            return self._records.slot_state(slot)

    def is_empty(self) -> bool:
        return self._records.occupied == 0

    def total_value(self) -> float:
        """Sum of quantity times price over the occupied slots."""
        with self._lock:
            return sum(record.value for record in self._records.occupied_records())

    def stats(self) -> CatalogStats:
        with self._lock:
            return CatalogStats(
                capacity=self.capacity,
                occupied=self.occupied,
                free_slots=self.free_slots,
                orientation=self._orientation.label,
                sparse_entries=len(self._sparse),
                sparse_items=self._sparse.item_count(),
                total_value=self.total_value(),
            )

    def verify_integrity(self) -> None:
        """
        Recheck every cross-view invariant from scratch.

        Raises:
            IntegrityError: Describing the first disagreement found
        """
        with self._lock:
            occupied = self._records.occupied
            records = self._records.occupied_records()

            for slot in range(self.capacity):
                state = self._records.slot_state(slot)
                expected = SlotState.OCCUPIED if slot < occupied else SlotState.EMPTY
                if state is not expected:
                    raise IntegrityError(
                        f"Slot {slot} is {state.value}, expected {expected.value}")

            if len({record.item_id for record in records}) != occupied:
                raise IntegrityError("Duplicate item identifiers in record table")

            if len(self._names) != occupied or self._names.slots() != list(range(occupied)):
                raise IntegrityError(
                    f"Name index has {len(self._names)} entries for {occupied} occupied slots")

            for slot, record in enumerate(records):
                if self._names.lookup(record.name) != slot:
                    raise IntegrityError(
                        f"Name index maps '{record.name}' to {self._names.lookup(record.name)}, "
                        f"expected slot {slot}")
                if self._names.name_at(slot) != record.name:
                    raise IntegrityError(
                        f"Slot {slot} is indexed as '{self._names.name_at(slot)}', "
                        f"holds '{record.name}'")
                expected_row = self._orientation.pack(record.price, record.quantity)
                if self._projection.row(slot) != expected_row:
                    raise IntegrityError(
                        f"Projection row {slot} is {self._projection.row(slot)}, "
                        f"expected {expected_row}")

            for slot in range(occupied, self.capacity):
                if self._projection.row(slot) != EMPTY_ROW:
                    raise IntegrityError(f"Projection row {slot} is not cleared")

            for entry in self._sparse:
                if not 0 <= entry.row < occupied:
                    raise IntegrityError(
                        f"Sparse entry {entry} references empty slot {entry.row}")
                record = records[entry.row]
                if record.restock_frequency <= self.rare_restock_threshold:
                    raise IntegrityError(
                        f"Sparse entry {entry} belongs to '{record.name}', "
                        f"which is not rarely restocked")
                if entry.col == PRICE_COL:
                    actual = record.price
                elif entry.col == QUANTITY_COL:
                    actual = record.quantity
                else:
                    raise IntegrityError(f"Sparse entry {entry} has unknown column")
                if entry.value != actual:
                    raise IntegrityError(
                        f"Sparse entry {entry} disagrees with '{record.name}' "
                        f"{entry.column_name} {actual}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _search(self, key) -> Optional[int]:
        if isinstance(key, ById):
            return self._records.find_by_id(key.item_id)
        if isinstance(key, ByName):
            return self._names.lookup(key.name)
        raise ValidationError(f"Unsupported lookup key: {key!r}")

    def _check_occupied(self, slot: int) -> None:
        if not 0 <= slot < self._records.occupied:
            raise self._reject(NotFoundError(f"Slot {slot} is not occupied"))

    @staticmethod
    def _reject(error: CatalogError) -> CatalogError:
        logger.warning("Error: %s", error)
        return error

    def __len__(self) -> int:
        return self._records.occupied

    def __contains__(self, key) -> bool:
        return self.search(key) is not None

    def __repr__(self) -> str:
        return (f"MultiViewCatalog(capacity={self.capacity}, occupied={self.occupied}, "
                f"orientation={self._orientation.label})")
