from .catalog import MultiViewCatalog
from .name_index import NameIndex
from .orientation import Orientation
from .projection import PriceQuantityTable
from .record_table import RecordTable, SlotState
from .sparse import SparseEntry, SparseStorage, PRICE_COL, QUANTITY_COL
from .stats import CatalogStats

__all__ = [
    "MultiViewCatalog",
    "NameIndex",
    "Orientation",
    "PriceQuantityTable",
    "RecordTable",
    "SlotState",
    "SparseEntry",
    "SparseStorage",
    "PRICE_COL",
    "QUANTITY_COL",
    "CatalogStats",
]
