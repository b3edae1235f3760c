"""
Demonstration driver for both catalogs.

Run with: stockslot-demo  (or python -m stockslot.main)
"""

from typing import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel

from .config import CatalogSettings
from .core.exceptions import CatalogError
from .logger import get_logger
from .multiview import MultiViewCatalog
from .reporting import (
    items_table,
    print_report,
    projection_table,
    simple_items_table,
    sparse_table,
)
from .simple import SimpleCatalog

console = Console()


def print_header(title: str) -> None:
    console.print(Panel(f"[bold blue]{title}[/bold blue]",
                        style="bright_blue", box=box.DOUBLE, padding=(1, 2)))


def print_step(step_num: int, title: str) -> None:
    console.print(f"\n[bold yellow]{step_num}. {title}[/bold yellow]")


def attempt(action: Callable, *args) -> bool:
    """Run a catalog operation, reporting its outcome instead of stopping the demo."""
    try:
        action(*args)
    except CatalogError as e:
        console.print(f"[bold red]✗[/bold red] {type(e).__name__}: {e}")
        return False
    return True


def simple_catalog_demo() -> SimpleCatalog:
    print_header("SIMPLE CATALOG DEMONSTRATION")
    inventory = SimpleCatalog()

    print_step(1, "Testing insert")
    attempt(inventory.insert, {"name": "Laptop", "quantity": 10, "price": 999.99})
    attempt(inventory.insert, {"name": "Mouse", "quantity": 50, "price": 25.50})
    attempt(inventory.insert, {"item_id": 100, "name": "Keyboard",
                               "quantity": 30, "price": 75.00})
    attempt(inventory.insert, {"name": "Invalid Item", "quantity": -5, "price": 10.00})

    print_step(2, "Display all items")
    console.print(simple_items_table(inventory))

    print_step(3, "Testing search")
    console.print(f"Found by ID: {inventory.search(1)}")
    console.print(f"Found by name: {inventory.search('mouse')}")
    if inventory.search(999) is None:
        console.print("Item with ID 999 not found")

    print_step(4, "Testing delete")
    attempt(inventory.delete, 2)
    attempt(inventory.delete, 999)

    print_step(5, "Testing quantity update")
    attempt(inventory.update_quantity, 1, 15)

    print_step(6, "Final inventory state")
    console.print(simple_items_table(inventory))
    console.print(f"Is empty: {inventory.is_empty()}")
    return inventory


def multi_view_catalog_demo(settings: CatalogSettings) -> MultiViewCatalog:
    print_header("MULTI-VIEW CATALOG DEMONSTRATION")
    inventory = MultiViewCatalog(settings.default_capacity, settings.row_major,
                                 rare_restock_threshold=settings.rare_restock_threshold)

    print_step(1, "Testing add_record")
    attempt(inventory.add_record, 101, "Laptop", 25, 999.99, 30)
    attempt(inventory.add_record, 102, "Mouse", 100, 25.50, 60)
    attempt(inventory.add_record, 103, "Keyboard", 50, 75.00, 45)
    attempt(inventory.add_record, 104, "Vintage Monitor", 5, 299.99, 120)
    attempt(inventory.add_record, 105, "Antique Printer", 2, 150.00, 180)

    print_step(2, "Display all items")
    console.print(items_table(inventory))
    console.print(projection_table(inventory))
    console.print(sparse_table(inventory))

    print_step(3, "Testing search")
    console.print(f"Found by ID: {inventory.item_details(102)}")
    console.print(f"Found by name: {inventory.item_details('keyboard')}")

    print_step(4, "Testing update_quantity")
    attempt(inventory.update_quantity, "Mouse", 80)

    print_step(5, "Testing remove_record")
    attempt(inventory.remove_record, 103)

    print_step(6, "Inventory after removal")
    print_report(inventory, console)

    print_header("COLUMN-MAJOR CATALOG")
    column_major = MultiViewCatalog(5, row_major=False,
                                    rare_restock_threshold=settings.rare_restock_threshold)
    attempt(column_major.add_record, 201, "Tablet", 15, 599.99, 25)
    attempt(column_major.add_record, 202, "Headphones", 30, 199.99, 40)
    console.print(projection_table(column_major))
    return inventory


def main():
    """Main entry point of the demonstration."""
    settings = CatalogSettings.from_env()
    get_logger("stockslot", settings.log_level)
    simple_catalog_demo()
    multi_view_catalog_demo(settings)


if __name__ == "__main__":
    main()
