from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

PRICE_COL = 0
QUANTITY_COL = 1

COLUMN_NAMES = {PRICE_COL: "price", QUANTITY_COL: "quantity"}


@dataclass(frozen=True)
class SparseEntry:
    """
    One (row, col, value) triple of sparse storage.

    ``row`` is the slot of the item, ``col`` is PRICE_COL or QUANTITY_COL.
    """
    row: int
    col: int
    value: float

    @property
    def column_name(self) -> str:
        return COLUMN_NAMES[self.col]

    def __str__(self) -> str:
        return f"({self.row},{self.col},{self.value:.2f})"


class SparseStorage:
    """
    Sparse side store for rarely restocked items.

    An item contributes a price entry when its price is above zero and a
    quantity entry when its quantity is above zero. Whether an item belongs
    here is decided once, when it is added; later quantity updates only
    rewrite an existing quantity entry.
    """

    def __init__(self, entries: Optional[Iterable[SparseEntry]] = None):
        self._entries: List[SparseEntry] = list(entries or [])

    @staticmethod
    def entries_for_item(slot: int, price: float, quantity: float) -> List[SparseEntry]:
        """Triples a rarely restocked item in ``slot`` should get."""
        entries = []
        if price > 0:
            entries.append(SparseEntry(slot, PRICE_COL, float(price)))
        if quantity > 0:
            entries.append(SparseEntry(slot, QUANTITY_COL, float(quantity)))
        return entries

    def entries(self) -> List[SparseEntry]:
        return list(self._entries)

    def at_row(self, slot: int) -> List[SparseEntry]:
        return [entry for entry in self._entries if entry.row == slot]

    def with_added(self, entries: Iterable[SparseEntry]) -> List[SparseEntry]:
        return self._entries + list(entries)

    def without_row(self, slot: int) -> List[SparseEntry]:
        """
        Entries after removing ``slot`` from the record table.

        The slot's own entries are dropped and every entry above it moves
        down one row so it keeps following the same item after compaction.
        Order is preserved.
        """
        entries = []
        for entry in self._entries:
            if entry.row == slot:
                continue
            if entry.row > slot:
                entry = replace(entry, row=entry.row - 1)
            entries.append(entry)
        return entries

    def with_quantity(self, slot: int, quantity: float) -> List[SparseEntry]:
        """Entries with the slot's quantity entry rewritten, if it has one."""
        entries = list(self._entries)
        for i, entry in enumerate(entries):
            if entry.row == slot and entry.col == QUANTITY_COL:
                entries[i] = replace(entry, value=float(quantity))
                break
        return entries

    def commit(self, entries: List[SparseEntry]) -> None:
        self._entries = list(entries)

    def item_count(self) -> int:
        """Items in sparse storage, counting two entries per item."""
        return len(self._entries) // 2

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))
