"""
Tests for the demonstration driver and package entry points.
"""
import io
import logging

from rich.console import Console

import stockslot
from stockslot import main as demo
from stockslot.config import CatalogSettings
from stockslot.logger import get_logger


class TestDemo:
    """Test cases for the demonstration routines."""

    def setup_method(self):
        demo.console = Console(file=io.StringIO(), record=True, width=120)

    def test_simple_catalog_demo(self):
        inventory = demo.simple_catalog_demo()

        assert inventory.item_count() == 2
        assert inventory.search(1).quantity == 15
        assert inventory.search(2) is None
        assert "ValidationError" in demo.console.export_text()

    def test_multi_view_catalog_demo(self):
        inventory = demo.multi_view_catalog_demo(CatalogSettings())

        assert inventory.occupied == 4
        assert inventory.search(103) is None
        assert inventory.get_record("mouse").quantity == 80
        assert inventory.search("vintage monitor") == 2
        assert len(inventory.sparse_entries()) == 4
        inventory.verify_integrity()

    def test_main_runs(self, monkeypatch):
        monkeypatch.delenv("STOCKSLOT_CAPACITY", raising=False)
        demo.main()
        assert "COLUMN-MAJOR CATALOG" in demo.console.export_text()


class TestPackageApi:
    """Test cases for the package-level factories."""

    def test_new_catalog(self):
        catalog = stockslot.new_catalog()
        assert isinstance(catalog, stockslot.SimpleCatalog)
        assert catalog.is_empty()

    def test_new_multi_view_catalog(self):
        catalog = stockslot.new_multi_view_catalog(4, False)
        assert catalog.capacity == 4
        assert catalog.orientation is stockslot.Orientation.COLUMN_MAJOR


class TestLogger:
    """Test cases for get_logger."""

    def test_handler_added_once(self):
        logger = get_logger("stockslot.test_logger", logging.DEBUG)
        get_logger("stockslot.test_logger")

        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_accepts_level_names(self):
        logger = get_logger("stockslot.test_logger_names", "WARNING")
        assert logger.level == logging.WARNING
