from typing import List, Tuple

from .orientation import Orientation

Row = Tuple[float, float]

EMPTY_ROW: Row = (0.0, 0.0)


class PriceQuantityTable:
    """
    Denormalized two-column price/quantity table, one row per slot.

    The column order comes from the orientation and never changes:

    ┌──────────────┬──────────┬──────────┐
    │ Orientation  │ column 0 │ column 1 │
    ├──────────────┼──────────┼──────────┤
    │ ROW_MAJOR    │ price    │ quantity │
    │ COLUMN_MAJOR │ quantity │ price    │
    └──────────────┴──────────┴──────────┘

    Row i always mirrors the record in slot i of the record table.
    """

    def __init__(self, capacity: int, orientation: Orientation):
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.orientation = orientation
        self._rows: List[Row] = [EMPTY_ROW] * capacity

    def write(self, slot: int, price: float, quantity: float) -> None:
        """Store a slot's price and quantity in orientation order."""
        self._check_range(slot)
        self._rows[slot] = self.orientation.pack(price, quantity)

    def row(self, slot: int) -> Row:
        """Raw row as stored, in orientation order."""
        self._check_range(slot)
        return self._rows[slot]

    def price_at(self, slot: int) -> float:
        return self.orientation.unpack(self.row(slot))[0]

    def quantity_at(self, slot: int) -> float:
        return self.orientation.unpack(self.row(slot))[1]

    def rows(self, occupied: int) -> List[Row]:
        """The first ``occupied`` rows."""
        return self._rows[:occupied]

    def with_row(self, slot: int, price: float, quantity: float) -> List[Row]:
        """New row list with one slot rewritten."""
        self._check_range(slot)
        rows = list(self._rows)
        rows[slot] = self.orientation.pack(price, quantity)
        return rows

    def compacted_without(self, slot: int, occupied: int) -> List[Row]:
        """
        New row list with a slot removed.

        Rows above ``slot`` move down by one and the last occupied row is
        reset to zeros.
        """
        if not 0 <= slot < occupied <= self.capacity:
            raise IndexError(
                f"Slot {slot} is not occupied (occupied: {occupied})")
        rows = list(self._rows)
        for i in range(slot, occupied - 1):
            rows[i] = rows[i + 1]
        rows[occupied - 1] = EMPTY_ROW
        return rows

    def commit(self, rows: List[Row]) -> None:
        if len(rows) != self.capacity:
            raise ValueError(
                f"Row list size mismatch: expected {self.capacity}, got {len(rows)}")
        self._rows = rows

    def _check_range(self, slot: int) -> None:
        if slot < 0 or slot >= self.capacity:
            raise IndexError(
                f"Slot {slot} out of range (max: {self.capacity - 1})")
