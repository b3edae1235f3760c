"""
Tests for the individual views: orientation, record table, name index,
projection table and sparse storage.
"""
import pytest

from stockslot.core.item import ItemRecord
from stockslot.multiview import (
    NameIndex,
    Orientation,
    PriceQuantityTable,
    RecordTable,
    SlotState,
    SparseEntry,
    SparseStorage,
    PRICE_COL,
    QUANTITY_COL,
)


def _record(item_id, name, quantity=1, price=1.0, restock=0):
    return ItemRecord(item_id, name, quantity, price, restock)


class TestOrientation:
    """Test cases for Orientation."""

    def test_from_flag(self):
        assert Orientation.from_flag(True) is Orientation.ROW_MAJOR
        assert Orientation.from_flag(False) is Orientation.COLUMN_MAJOR

    def test_pack_row_major(self):
        assert Orientation.ROW_MAJOR.pack(999.99, 25) == (999.99, 25.0)

    def test_pack_column_major(self):
        assert Orientation.COLUMN_MAJOR.pack(999.99, 25) == (25.0, 999.99)

    @pytest.mark.parametrize("orientation", list(Orientation))
    def test_unpack_returns_price_then_quantity(self, orientation):
        row = orientation.pack(12.5, 4)
        assert orientation.unpack(row) == (12.5, 4.0)

    def test_labels_and_headers(self):
        assert Orientation.ROW_MAJOR.label == "Row-Major"
        assert Orientation.COLUMN_MAJOR.label == "Column-Major"
        assert Orientation.ROW_MAJOR.column_headers() == ("Price", "Quantity")
        assert Orientation.COLUMN_MAJOR.column_headers() == ("Quantity", "Price")


class TestRecordTable:
    """Test cases for RecordTable slot bookkeeping."""

    def setup_method(self):
        self.table = RecordTable(4)
        slots = self.table.with_record(0, _record(1, "A"))
        self.table.commit(slots)
        self.table.commit(self.table.with_record(1, _record(2, "B")))
        self.table.commit(self.table.with_record(2, _record(3, "C")))

    def test_init_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError, match="Capacity must be positive"):
            RecordTable(0)

    def test_init_with_slot_list_size_mismatch(self):
        with pytest.raises(ValueError, match="Slot list size mismatch: expected 2, got 1"):
            RecordTable(2, [None])

    def test_occupancy(self):
        assert self.table.occupied == 3
        assert self.table.free_slots() == 1
        assert not self.table.is_full()
        assert self.table.next_free_slot() == 3
        assert len(self.table) == 3

    def test_slot_states(self):
        assert self.table.slot_state(2) is SlotState.OCCUPIED
        assert self.table.slot_state(3) is SlotState.EMPTY

    def test_out_of_range_slot(self):
        with pytest.raises(IndexError, match="Slot 4 out of range"):
            self.table.get(4)

    def test_find_by_id(self):
        assert self.table.find_by_id(2) == 1
        assert self.table.find_by_id(99) is None

    def test_with_record_only_at_next_free_slot(self):
        with pytest.raises(IndexError, match="not the next free slot"):
            self.table.with_record(0, _record(9, "Z"))

    def test_full_table(self):
        self.table.commit(self.table.with_record(3, _record(4, "D")))
        assert self.table.is_full()
        assert self.table.next_free_slot() is None

    def test_compacted_without_shifts_down(self):
        """Test records above the removed slot move down by one."""
        slots = self.table.compacted_without(0)

        assert [r.name if r else None for r in slots] == ["B", "C", None, None]
        # table is unchanged until commit
        assert self.table.get(0).name == "A"

        self.table.commit(slots)
        assert self.table.occupied == 2
        assert self.table.slot_state(2) is SlotState.EMPTY

    def test_compacted_without_last_slot(self):
        slots = self.table.compacted_without(2)
        assert [r.name if r else None for r in slots] == ["A", "B", None, None]

    def test_compacted_without_empty_slot(self):
        with pytest.raises(IndexError, match="is not occupied"):
            self.table.compacted_without(3)

    def test_with_replaced(self):
        slots = self.table.with_replaced(1, _record(2, "B", quantity=9))
        self.table.commit(slots)
        assert self.table.get(1).quantity == 9


class TestNameIndex:
    """Test cases for NameIndex."""

    def test_register_and_lookup_ignore_case(self):
        index = NameIndex()
        index.register(0, "Vintage Monitor")

        assert index.lookup("vintage monitor") == 0
        assert index.lookup("VINTAGE MONITOR") == 0
        assert index.name_at(0) == "Vintage Monitor"
        assert "Vintage monitor" in index
        assert index.lookup("monitor") is None

    def test_rebuilt_from(self):
        index = NameIndex.rebuilt_from([_record(1, "Laptop"), _record(2, "Mouse")])

        assert index.items() == [("laptop", 0), ("mouse", 1)]
        assert index.slots() == [0, 1]
        assert len(index) == 2

    def test_copy_is_independent(self):
        index = NameIndex()
        index.register(0, "Laptop")
        clone = index.copy()
        clone.register(1, "Mouse")

        assert len(index) == 1
        assert len(clone) == 2


class TestPriceQuantityTable:
    """Test cases for PriceQuantityTable."""

    def test_write_row_major(self):
        table = PriceQuantityTable(3, Orientation.ROW_MAJOR)
        table.write(0, 999.99, 25)

        assert table.row(0) == (999.99, 25.0)
        assert table.price_at(0) == 999.99
        assert table.quantity_at(0) == 25.0

    def test_write_column_major(self):
        table = PriceQuantityTable(3, Orientation.COLUMN_MAJOR)
        table.write(0, 599.99, 15)

        assert table.row(0) == (15.0, 599.99)
        assert table.price_at(0) == 599.99
        assert table.quantity_at(0) == 15.0

    def test_rows_start_empty(self):
        table = PriceQuantityTable(2, Orientation.ROW_MAJOR)
        assert table.row(1) == (0.0, 0.0)
        assert table.rows(0) == []

    def test_out_of_range(self):
        table = PriceQuantityTable(2, Orientation.ROW_MAJOR)
        with pytest.raises(IndexError):
            table.write(2, 1.0, 1)

    def test_compacted_without_clears_last_row(self):
        """Test rows shift down and the vacated row is zeroed."""
        table = PriceQuantityTable(4, Orientation.ROW_MAJOR)
        table.write(0, 1.0, 10)
        table.write(1, 2.0, 20)
        table.write(2, 3.0, 30)

        table.commit(table.compacted_without(1, 3))

        assert table.rows(3) == [(1.0, 10.0), (3.0, 30.0), (0.0, 0.0)]

    def test_commit_size_mismatch(self):
        table = PriceQuantityTable(2, Orientation.ROW_MAJOR)
        with pytest.raises(ValueError, match="Row list size mismatch"):
            table.commit([(0.0, 0.0)])


class TestSparseStorage:
    """Test cases for SparseStorage."""

    def test_entries_for_item(self):
        entries = SparseStorage.entries_for_item(2, 299.99, 5)
        assert entries == [SparseEntry(2, PRICE_COL, 299.99),
                           SparseEntry(2, QUANTITY_COL, 5.0)]

    def test_entries_for_item_skips_zero_values(self):
        assert SparseStorage.entries_for_item(0, 0.0, 3) == [SparseEntry(0, QUANTITY_COL, 3.0)]
        assert SparseStorage.entries_for_item(0, 4.0, 0) == [SparseEntry(0, PRICE_COL, 4.0)]
        assert SparseStorage.entries_for_item(0, 0.0, 0) == []

    def test_without_row_drops_and_renumbers(self):
        """Test removal drops a slot's entries and shifts later rows down."""
        storage = SparseStorage([
            SparseEntry(0, PRICE_COL, 1.0),
            SparseEntry(1, PRICE_COL, 2.0),
            SparseEntry(1, QUANTITY_COL, 20.0),
            SparseEntry(3, PRICE_COL, 4.0),
            SparseEntry(3, QUANTITY_COL, 40.0),
        ])

        storage.commit(storage.without_row(1))

        assert storage.entries() == [
            SparseEntry(0, PRICE_COL, 1.0),
            SparseEntry(2, PRICE_COL, 4.0),
            SparseEntry(2, QUANTITY_COL, 40.0),
        ]

    def test_with_quantity_updates_existing_entry(self):
        storage = SparseStorage([SparseEntry(0, PRICE_COL, 1.0),
                                 SparseEntry(0, QUANTITY_COL, 5.0)])
        storage.commit(storage.with_quantity(0, 9))

        assert storage.at_row(0) == [SparseEntry(0, PRICE_COL, 1.0),
                                     SparseEntry(0, QUANTITY_COL, 9.0)]

    def test_with_quantity_never_creates_entry(self):
        storage = SparseStorage([SparseEntry(0, PRICE_COL, 1.0)])
        assert storage.with_quantity(0, 9) == [SparseEntry(0, PRICE_COL, 1.0)]

    def test_item_count_is_half_the_entries(self):
        storage = SparseStorage(SparseStorage.entries_for_item(0, 1.0, 1)
                                + SparseStorage.entries_for_item(1, 1.0, 0))
        assert len(storage) == 3
        assert storage.item_count() == 1

    def test_entry_str_and_column_name(self):
        entry = SparseEntry(2, QUANTITY_COL, 5)
        assert str(entry) == "(2,1,5.00)"
        assert entry.column_name == "quantity"
        assert SparseEntry(2, PRICE_COL, 1.0).column_name == "price"
