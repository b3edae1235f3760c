"""Custom exceptions for the inventory catalogs."""


class CatalogError(Exception):
    """Base exception for catalog-related errors."""
    pass


class ValidationError(CatalogError):
    """Raised when a field is missing, empty, negative or of the wrong type."""
    pass


class DuplicateError(CatalogError):
    """Raised when an identifier or name is already in use."""
    pass


class NotFoundError(CatalogError):
    """Raised when a mutating operation targets an item that does not exist."""
    pass


class CapacityError(CatalogError):
    """Raised when a fixed-capacity catalog has no free slot left."""
    pass


class IntegrityError(CatalogError):
    """Raised when the synchronized views of a catalog disagree."""
    pass
