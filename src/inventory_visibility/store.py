"""In-memory catalog of warehouses and products."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Optional

from .errors import NotFoundError
from .models import Product, Warehouse

logger = logging.getLogger(__name__)

ProductUpdater = Callable[[Product], Product]


class CatalogStore:
    """Single source of truth for warehouses and products.

    Warehouses are fixed at construction. Products are immutable values; the
    only way to change one is :meth:`apply_mutation`, which swaps in a
    replacement while holding the store lock.
    """

    def __init__(self, warehouses: Iterable[Warehouse], products: Iterable[Product]) -> None:
        self._lock = threading.RLock()
        self._warehouses: dict[str, Warehouse] = {}
        for warehouse in warehouses:
            if warehouse.code in self._warehouses:
                raise ValueError(f"Duplicate warehouse code '{warehouse.code}'")
            self._warehouses[warehouse.code] = warehouse

        self._products: dict[str, Product] = {}
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id '{product.id}'")
            self._check(product)
            self._products[product.id] = product

        logger.debug(
            "Catalog ready with %d warehouses and %d products",
            len(self._warehouses),
            len(self._products),
        )

    def get_warehouses(self) -> list[Warehouse]:
        return list(self._warehouses.values())

    def get_warehouse(self, code: str) -> Optional[Warehouse]:
        return self._warehouses.get(code)

    def get_products(self) -> list[Product]:
        """Return a snapshot of every product in insertion order."""

        with self._lock:
            return list(self._products.values())

    def find_product(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(product_id)

    def apply_mutation(self, product_id: str, update: ProductUpdater) -> Product:
        """Replace a product with ``update(product)`` as one exclusive step.

        ``update`` receives the current value and returns the replacement, or
        raises to abort. Nothing is committed unless it returns and the
        replacement keeps the catalog invariants.
        """

        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                raise NotFoundError(f"Product '{product_id}' not found")

            replacement = update(current)
            if (replacement.id, replacement.name, replacement.sku) != (current.id, current.name, current.sku):
                raise ValueError(f"Mutation may not change the identity of product '{product_id}'")
            self._check(replacement)

            self._products[product_id] = replacement
            return replacement

    def _check(self, product: Product) -> None:
        if product.warehouse_code not in self._warehouses:
            raise ValueError(f"Product '{product.id}' references unknown warehouse '{product.warehouse_code}'")
        if product.stock < 0 or product.demand < 0:
            raise ValueError(f"Product '{product.id}' has negative stock or demand")
