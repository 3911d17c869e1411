"""Domain records held by the catalog store."""

from __future__ import annotations

from dataclasses import dataclass
import datetime as dt

from .status import StockStatus, classify


@dataclass(frozen=True, slots=True)
class Warehouse:
    """A stocking location; seeded once and never changed."""

    code: str
    name: str
    city: str
    country: str


@dataclass(frozen=True, slots=True)
class Product:
    """A product located in exactly one warehouse."""

    id: str
    name: str
    sku: str
    warehouse_code: str
    stock: int
    demand: int

    @property
    def status(self) -> StockStatus:
        return classify(self.stock, self.demand)


@dataclass(frozen=True, slots=True)
class TrendPoint:
    """Aggregate stock and demand for one calendar day."""

    date: dt.date
    stock: int
    demand: int
