import math
from dataclasses import dataclass, asdict

from .exceptions import ValidationError


@dataclass
class ItemRecord:
    """
    A single stock-keeping record.

    📦 Holds everything either catalog knows about an item. The restock
    frequency is only meaningful inside the multi-view catalog, where it
    decides whether the item is mirrored into sparse storage.
    """

    """🔑 Unique numeric identifier of the item"""
    item_id: int

    """🏷️ Display name; uniqueness is checked case-insensitively"""
    name: str

    """📊 Units on hand"""
    quantity: int

    """💲 Unit price"""
    price: float

    """🔄 Days between restocks"""
    restock_frequency: int = 0

    @property
    def name_key(self) -> str:
        """Lowercased name used by every case-insensitive comparison."""
        return self.name.lower()

    @property
    def value(self) -> float:
        """Stock value of this record (quantity times unit price)."""
        return self.quantity * self.price

    def describe(self) -> str:
        """
        📝 One-line detail string for this record.

        Returns:
            str: e.g. ``ID: 101, Name: Laptop, Quantity: 25, Price: $999.99, RestockFreq: 30 days``
        """
        return (f"ID: {self.item_id}, Name: {self.name}, "
                f"Quantity: {self.quantity}, Price: ${self.price:.2f}, "
                f"RestockFreq: {self.restock_frequency} days")

    def to_dict(self) -> dict:
        """
        📦 Convert the record to a plain dictionary.

        Returns:
            dict: Dictionary representation of the record
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'ItemRecord':
        """
        📥 Create a validated record from a dictionary.

        Args:
            data: Dictionary containing record attributes

        Returns:
            ItemRecord: New record instance

        Raises:
            ValidationError: If any attribute is missing or invalid
        """
        missing = [key for key in ("item_id", "name", "quantity", "price")
                   if key not in data]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}")

        return cls(
            item_id=validate_identifier(data["item_id"]),
            name=validate_name(data["name"]),
            quantity=validate_quantity(data["quantity"]),
            price=validate_price(data["price"]),
            restock_frequency=validate_restock_frequency(
                data.get("restock_frequency", 0)),
        )

    def __str__(self) -> str:
        return (f"ID: {self.item_id}, Name: {self.name}, "
                f"Quantity: {self.quantity}, Price: ${self.price:.2f}")


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid count or identifier
    return isinstance(value, int) and not isinstance(value, bool)


def validate_identifier(value) -> int:
    """Check that an item identifier is an integer."""
    if not _is_int(value):
        raise ValidationError(
            f"item_id must be an integer, got {type(value).__name__}")
    return value


def validate_name(value) -> str:
    """Check that a name is a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("name cannot be empty")
    return value


def validate_quantity(value, field_name: str = "quantity") -> int:
    """
    Check that a quantity is a non-negative integer.

    Args:
        value: Candidate quantity
        field_name: Name used in the error message

    Returns:
        int: The validated quantity

    Raises:
        ValidationError: If value is not an int or is negative
    """
    if not _is_int(value):
        raise ValidationError(
            f"{field_name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{field_name} must be non-negative, got {value}")
    return value


def validate_amount(value, field_name: str) -> float:
    """
    Check that a value is a finite, non-negative number.

    Args:
        value: Candidate amount
        field_name: Name used in the error message

    Returns:
        float: The validated amount

    Raises:
        ValidationError: If value is not numeric, not finite or negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field_name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number, got {value}")
    if value < 0:
        raise ValidationError(f"{field_name} must be non-negative, got {value}")
    return float(value)


def validate_price(value) -> float:
    """Check that a price is a finite, non-negative number."""
    return validate_amount(value, "price")


def validate_restock_frequency(value) -> int:
    """Check that a restock frequency is a non-negative number of days."""
    return validate_quantity(value, "restock_frequency")
