"""
Rich console rendering for both catalogs.

Everything here only reads from a catalog through its public queries.
"""

from typing import Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from ..multiview import MultiViewCatalog
from ..simple import SimpleCatalog

EMPTY_CAPTION = "Inventory is empty"
NO_SPARSE_CAPTION = "No items in sparse storage"


def items_table(catalog: MultiViewCatalog) -> Table:
    """Table of every record with its restock frequency."""
    table = Table(title="Inventory Items", box=box.ROUNDED)
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Quantity", style="green", justify="right")
    table.add_column("Price", style="magenta", justify="right")
    table.add_column("RestockFreq", style="yellow", justify="right")

    records = catalog.records()
    for record in records:
        table.add_row(
            str(record.item_id),
            record.name,
            str(record.quantity),
            f"${record.price:.2f}",
            str(record.restock_frequency),
        )

    table.caption = f"Total items: {len(records)}" if records else EMPTY_CAPTION
    return table


def simple_items_table(catalog: SimpleCatalog) -> Table:
    table = Table(title="Inventory Items", box=box.ROUNDED)
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Quantity", style="green", justify="right")
    table.add_column("Price", style="magenta", justify="right")

    for record in catalog.list_items():
        table.add_row(str(record.item_id), record.name,
                      str(record.quantity), f"${record.price:.2f}")

    if catalog.is_empty():
        table.caption = EMPTY_CAPTION
    else:
        table.caption = (f"Total items: {catalog.item_count()} | "
                         f"Total value: ${catalog.total_value():.2f}")
    return table


def projection_table(catalog: MultiViewCatalog) -> Table:
    """
    Price/quantity projection as stored.

    Column headers follow the catalog's orientation, so a column-major
    catalog shows Quantity before Price.
    """
    first, second = catalog.orientation.column_headers()
    table = Table(title=f"Price-Quantity Table ({catalog.orientation.label})",
                  box=box.ROUNDED)
    table.add_column("Item", style="white")
    table.add_column(first, justify="right")
    table.add_column(second, justify="right")

    for slot, row in enumerate(catalog.projection_rows()):
        table.add_row(catalog.name_at(slot) or "",
                      _format_cell(first, row[0]),
                      _format_cell(second, row[1]))
    return table


def sparse_table(catalog: MultiViewCatalog) -> Table:
    """Sparse storage triples with the item and column they belong to."""
    table = Table(title="Sparse Matrix (Rarely Restocked Items)", box=box.ROUNDED)
    table.add_column("Entry", style="cyan")
    table.add_column("Item", style="white")
    table.add_column("Column", style="yellow")

    entries = catalog.sparse_entries()
    for entry in entries:
        table.add_row(str(entry), catalog.name_at(entry.row) or "",
                      entry.column_name)

    if entries:
        table.caption = "Format: (row, col, value) where col 0=price, col 1=quantity"
    else:
        table.caption = NO_SPARSE_CAPTION
    return table


def stats_panel(catalog: MultiViewCatalog) -> Panel:
    stats = catalog.stats()
    lines = [
        f"Total capacity: {stats.capacity}",
        f"Current items: {stats.occupied}",
        f"Available slots: {stats.free_slots}",
        f"Memory organization: {stats.orientation}",
        f"Sparse matrix entries: {stats.sparse_entries}",
        f"Items in sparse storage: {stats.sparse_items}",
        f"Total inventory value: ${stats.total_value:.2f}",
    ]
    return Panel("\n".join(lines), title="System Statistics",
                 style="bright_blue", box=box.DOUBLE)


def print_report(catalog: MultiViewCatalog, console: Optional[Console] = None) -> Console:
    """Print items, projection, sparse storage and statistics."""
    console = console or Console()
    console.print(Group(
        items_table(catalog),
        projection_table(catalog),
        sparse_table(catalog),
        stats_panel(catalog),
    ))
    return console


def _format_cell(header: str, value: float) -> str:
    if header == "Price":
        return f"${value:.2f}"
    return f"{value:.0f}"
