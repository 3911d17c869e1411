"""Startup data for the catalog store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import Product, Warehouse
from .schemas import SeedFile

logger = logging.getLogger(__name__)

DEFAULT_WAREHOUSES: tuple[Warehouse, ...] = (
    Warehouse(code="BLR-A", name="Bangalore Central", city="Bangalore", country="India"),
    Warehouse(code="PNQ-C", name="Pune North", city="Pune", country="India"),
    Warehouse(code="DEL-B", name="Delhi West", city="Delhi", country="India"),
)

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(id="P-1001", name="12mm Hex Bolt", sku="HEX-12-100", warehouse_code="BLR-A", stock=180, demand=120),
    Product(id="P-1002", name="Steel Washer", sku="WSR-08-500", warehouse_code="BLR-A", stock=50, demand=80),
    Product(id="P-1003", name="M8 Nut", sku="NUT-08-200", warehouse_code="PNQ-C", stock=80, demand=80),
    Product(id="P-1004", name="Bearing 608ZZ", sku="BRG-608-50", warehouse_code="DEL-B", stock=24, demand=120),
)


class SeedFileError(ValueError):
    """Raised when a seed file cannot be read or does not validate."""


def load_seed_file(path: Path) -> tuple[list[Warehouse], list[Product]]:
    """Read warehouses and products from a JSON seed file."""

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SeedFileError(f"Cannot read seed file {path}: {exc}") from exc

    try:
        seed = SeedFile.model_validate(json.loads(raw))
    except json.JSONDecodeError as exc:
        raise SeedFileError(f"Seed file {path} is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise SeedFileError(f"Seed file {path} is invalid: {exc}") from exc

    warehouses = [Warehouse(**item.model_dump()) for item in seed.warehouses]
    products = [
        Product(
            id=item.id,
            name=item.name,
            sku=item.sku,
            warehouse_code=item.warehouse,
            stock=item.stock,
            demand=item.demand,
        )
        for item in seed.products
    ]
    logger.info("Loaded %d warehouses and %d products from %s", len(warehouses), len(products), path)
    return warehouses, products


def resolve_seed(path: Optional[Path] = None) -> tuple[list[Warehouse], list[Product]]:
    """Return the seed from *path* when given, otherwise the built-in data."""

    if path is not None:
        return load_seed_file(path)
    return list(DEFAULT_WAREHOUSES), list(DEFAULT_PRODUCTS)
