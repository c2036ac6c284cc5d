"""Exceptions raised by the hearth engine."""


class HearthError(Exception):
    """Base class for engine errors."""


class ItemStoreError(HearthError):
    """A shopping item store failed to read or write items."""
