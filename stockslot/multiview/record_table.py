from enum import Enum
from typing import List, Optional

from ..core.item import ItemRecord


class SlotState(Enum):
    """States a record slot can be in."""
    EMPTY = "EMPTY"
    OCCUPIED = "OCCUPIED"


class RecordTable:
    """
    🗂️ Fixed-capacity table of item records 🗂️

    Slots are filled front to back and kept dense: slots [0, occupied) hold
    records, the rest are empty. Removing a record shifts every record above
    it down by one so no hole is ever left behind.

    Compaction Example (removing slot 1):
    ---------------------------------------------
     Before: [Laptop][Mouse][Monitor][ empty ]
                       ↑ removed
     After:  [Laptop][Monitor][ empty ][ empty ]
    ---------------------------------------------

    The table itself is never changed in place by compaction; callers get a
    new slot list back and commit it together with the other views.
    """

    def __init__(self, capacity: int, slots: Optional[List[Optional[ItemRecord]]] = None):
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")

        self.capacity = capacity
        self._slots: List[Optional[ItemRecord]]
        if slots is not None:
            if len(slots) != capacity:
                raise ValueError(
                    f"Slot list size mismatch: expected {capacity}, got {len(slots)}")
            self._slots = list(slots)
        else:
            self._slots = [None] * capacity
        self.occupied = sum(1 for record in self._slots if record is not None)

    def get(self, slot: int) -> Optional[ItemRecord]:
        """Record stored at a slot, or None if the slot is empty."""
        self._check_range(slot)
        return self._slots[slot]

    def slot_state(self, slot: int) -> SlotState:
        self._check_range(slot)
        if self._slots[slot] is None:
            return SlotState.EMPTY
        return SlotState.OCCUPIED

    def find_by_id(self, item_id: int) -> Optional[int]:
        """
        🔍 Linear scan for an identifier over the occupied slots.

        Returns:
            Slot number, or None if no record has that identifier
        """
        for slot in range(self.occupied):
            record = self._slots[slot]
            if record is not None and record.item_id == item_id:
                return slot
        return None

    def next_free_slot(self) -> Optional[int]:
        """First empty slot, or None if the table is full."""
        if self.is_full():
            return None
        return self.occupied

    def is_full(self) -> bool:
        return self.occupied >= self.capacity

    def free_slots(self) -> int:
        return self.capacity - self.occupied

    def occupied_records(self) -> List[ItemRecord]:
        """Records in slot order."""
        return [self._slots[slot] for slot in range(self.occupied)]

    def with_record(self, slot: int, record: ItemRecord) -> List[Optional[ItemRecord]]:
        """
        ✏️ New slot list with a record written at a slot.

        Args:
            slot: Target slot, must be the next free one
            record: Record to place
        """
        if slot != self.occupied:
            raise IndexError(
                f"Slot {slot} is not the next free slot ({self.occupied})")
        self._check_range(slot)
        slots = list(self._slots)
        slots[slot] = record
        return slots

    def with_replaced(self, slot: int, record: ItemRecord) -> List[Optional[ItemRecord]]:
        """New slot list with the record of an occupied slot swapped out."""
        if not 0 <= slot < self.occupied:
            raise IndexError(
                f"Slot {slot} is not occupied (occupied: {self.occupied})")
        slots = list(self._slots)
        slots[slot] = record
        return slots

    def compacted_without(self, slot: int) -> List[Optional[ItemRecord]]:
        """
        📦 New slot list with a slot removed and everything above shifted down.

        The last previously occupied slot comes back empty.
        """
        if not 0 <= slot < self.occupied:
            raise IndexError(
                f"Slot {slot} is not occupied (occupied: {self.occupied})")
        slots = list(self._slots)
        for i in range(slot, self.occupied - 1):
            slots[i] = slots[i + 1]
        slots[self.occupied - 1] = None
        return slots

    def commit(self, slots: List[Optional[ItemRecord]]) -> None:
        """Replace the slot list with one produced by with_record/compacted_without."""
        if len(slots) != self.capacity:
            raise ValueError(
                f"Slot list size mismatch: expected {self.capacity}, got {len(slots)}")
        self._slots = slots
        self.occupied = sum(1 for record in slots if record is not None)

    def _check_range(self, slot: int) -> None:
        if slot < 0 or slot >= self.capacity:
            raise IndexError(
                f"Slot {slot} out of range (max: {self.capacity - 1})")

    def __len__(self) -> int:
        return self.occupied
