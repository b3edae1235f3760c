from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class CatalogStats:
    """
    📊 Point-in-time statistics of a multi-view catalog.
    """

    """📦 Maximum number of records"""
    capacity: int

    """🟢 Slots currently holding a record"""
    occupied: int

    """⚪ Slots still available"""
    free_slots: int

    """🧭 Projection table layout label (Row-Major / Column-Major)"""
    orientation: str

    """🧩 Number of (row, col, value) triples in sparse storage"""
    sparse_entries: int

    """🐢 Items in sparse storage, two entries per item"""
    sparse_items: int

    """💰 Sum of quantity times price over occupied slots"""
    total_value: float

    def to_dict(self) -> dict:
        return asdict(self)
