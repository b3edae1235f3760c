from .console_report import (
    items_table,
    simple_items_table,
    projection_table,
    sparse_table,
    stats_panel,
    print_report,
)

__all__ = [
    "items_table",
    "simple_items_table",
    "projection_table",
    "sparse_table",
    "stats_panel",
    "print_report",
]
