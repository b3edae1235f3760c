from dataclasses import dataclass
from typing import Union

from .exceptions import ValidationError


@dataclass(frozen=True)
class ById:
    """Look an item up by its numeric identifier."""
    item_id: int

    def __str__(self) -> str:
        return f"ID {self.item_id}"


@dataclass(frozen=True)
class ByName:
    """Look an item up by name, ignoring case."""
    name: str

    @property
    def name_key(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return f"name '{self.name}'"


ItemKey = Union[ById, ByName]


def to_key(value) -> ItemKey:
    """
    Normalize a lookup argument into an ItemKey.

    Integers become ById and strings become ByName; keys pass through
    once their payload type is checked.

    Raises:
        ValidationError: If value is none of the above
    """
    if isinstance(value, ById):
        if isinstance(value.item_id, bool) or not isinstance(value.item_id, int):
            raise ValidationError(
                f"ById key needs an int identifier, got {type(value.item_id).__name__}")
        return value
    if isinstance(value, ByName):
        if not isinstance(value.name, str):
            raise ValidationError(
                f"ByName key needs a str name, got {type(value.name).__name__}")
        return value
    if isinstance(value, bool):
        raise ValidationError("Lookup key cannot be a boolean")
    if isinstance(value, int):
        return ById(value)
    if isinstance(value, str):
        return ByName(value)
    raise ValidationError(
        f"Lookup key must be an int or str, got {type(value).__name__}")
