"""Failures reported by inventory queries and mutations."""

from __future__ import annotations


class InventoryError(RuntimeError):
    """Base class for every failure the inventory core reports."""

    kind = "InventoryError"


class NotFoundError(InventoryError):
    """Raised when a referenced product does not exist."""

    kind = "NotFound"


class InvalidArgumentError(InventoryError):
    """Raised for malformed or out-of-range input."""

    kind = "InvalidArgument"


class InvalidStateError(InventoryError):
    """Raised when the current data does not allow the operation."""

    kind = "InvalidState"


class InsufficientStockError(InventoryError):
    """Raised when a transfer asks for more stock than the product holds."""

    kind = "InsufficientStock"
