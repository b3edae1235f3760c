from .simple_catalog import SimpleCatalog

__all__ = ["SimpleCatalog"]
