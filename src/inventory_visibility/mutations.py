"""Validated changes to product demand and location."""

from __future__ import annotations

import dataclasses
import logging

from .errors import (
    InsufficientStockError,
    InvalidArgumentError,
    InvalidStateError,
    InventoryError,
)
from .models import Product
from .store import CatalogStore

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a valid quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    return value


class InventoryService:
    """Applies demand updates and stock transfers to a catalog store."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def update_demand(self, product_id: str, demand: object) -> Product:
        """Set the demand forecast of a product and return the updated product."""

        try:
            value = _require_int("demand", demand)
            if value < 0:
                raise InvalidArgumentError(f"demand must be non-negative, got {value}")
            updated = self.store.apply_mutation(
                product_id, lambda product: dataclasses.replace(product, demand=value)
            )
        except InventoryError as exc:
            logger.info("Demand update for %s rejected (%s): %s", product_id, exc.kind, exc)
            raise

        logger.info("Demand for %s set to %d", product_id, updated.demand)
        return updated

    def transfer_stock(self, product_id: str, from_code: str, to_code: str, qty: object) -> Product:
        """Move a product from ``from_code`` to ``to_code``, removing ``qty`` from its stock.

        Checks run in a fixed order and the first failure is reported:
        quantity, product existence, source warehouse, available stock, then
        destination warehouse. Either both the stock and the location change,
        or nothing does.
        """

        try:
            amount = _require_int("qty", qty)
            if amount <= 0:
                raise InvalidArgumentError(f"qty must be positive, got {amount}")

            def move(product: Product) -> Product:
                if product.warehouse_code != from_code:
                    raise InvalidStateError(
                        f"Product '{product.id}' is not in source warehouse '{from_code}'"
                    )
                if product.stock < amount:
                    raise InsufficientStockError(
                        f"Insufficient stock for '{product.id}': {product.stock} available, {amount} requested"
                    )
                if self.store.get_warehouse(to_code) is None:
                    raise InvalidArgumentError(f"Unknown destination warehouse '{to_code}'")
                return dataclasses.replace(product, stock=product.stock - amount, warehouse_code=to_code)

            updated = self.store.apply_mutation(product_id, move)
        except InventoryError as exc:
            logger.info("Transfer of %s rejected (%s): %s", product_id, exc.kind, exc)
            raise

        logger.info(
            "Transferred %s from %s to %s, %d units removed, %d remaining",
            product_id,
            from_code,
            to_code,
            amount,
            updated.stock,
        )
        return updated
