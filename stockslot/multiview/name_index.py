from typing import Dict, Iterable, List, Optional, Tuple

from ..core.item import ItemRecord


class NameIndex:
    """
    Two-way map between item names and slots.

    Lowercased name -> slot answers case-insensitive lookups; slot -> name
    keeps the display spelling for reports. Both directions always cover
    exactly the occupied slots.
    """

    def __init__(self):
        self._slot_by_name: Dict[str, int] = {}
        self._name_by_slot: Dict[int, str] = {}

    def lookup(self, name: str) -> Optional[int]:
        """Slot holding the given name (any case), or None."""
        return self._slot_by_name.get(name.lower())

    def name_at(self, slot: int) -> Optional[str]:
        return self._name_by_slot.get(slot)

    def register(self, slot: int, name: str) -> None:
        self._slot_by_name[name.lower()] = slot
        self._name_by_slot[slot] = name

    def copy(self) -> 'NameIndex':
        clone = NameIndex()
        clone._slot_by_name = dict(self._slot_by_name)
        clone._name_by_slot = dict(self._name_by_slot)
        return clone

    @classmethod
    def rebuilt_from(cls, records: Iterable[ItemRecord]) -> 'NameIndex':
        """Fresh index for records laid out in slot order."""
        index = cls()
        for slot, record in enumerate(records):
            index.register(slot, record.name)
        return index

    def items(self) -> List[Tuple[str, int]]:
        """(lowercased name, slot) pairs sorted by slot."""
        return sorted(self._slot_by_name.items(), key=lambda pair: pair[1])

    def slots(self) -> List[int]:
        return sorted(self._name_by_slot)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._slot_by_name

    def __len__(self) -> int:
        return len(self._slot_by_name)
