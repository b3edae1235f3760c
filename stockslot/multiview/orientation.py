from enum import Enum
from typing import Tuple


class Orientation(Enum):
    """
    Column order of the price/quantity projection table.

    ROW_MAJOR rows hold (price, quantity); COLUMN_MAJOR rows hold
    (quantity, price). Chosen once when a catalog is built.
    """
    ROW_MAJOR = "row_major"
    COLUMN_MAJOR = "column_major"

    @classmethod
    def from_flag(cls, row_major: bool) -> 'Orientation':
        return cls.ROW_MAJOR if row_major else cls.COLUMN_MAJOR

    @property
    def label(self) -> str:
        return "Row-Major" if self is Orientation.ROW_MAJOR else "Column-Major"

    def pack(self, price: float, quantity: float) -> Tuple[float, float]:
        """Lay out a price and a quantity as a projection row."""
        if self is Orientation.ROW_MAJOR:
            return float(price), float(quantity)
        return float(quantity), float(price)

    def unpack(self, row: Tuple[float, float]) -> Tuple[float, float]:
        """Read a projection row back as (price, quantity)."""
        first, second = row
        if self is Orientation.ROW_MAJOR:
            return first, second
        return second, first

    def column_headers(self) -> Tuple[str, str]:
        if self is Orientation.ROW_MAJOR:
            return "Price", "Quantity"
        return "Quantity", "Price"
