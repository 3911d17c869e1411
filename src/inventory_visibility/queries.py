"""Product search, filtering and dashboard totals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .models import Product
from .status import StockStatus, classify, parse_status

ProductPredicate = Callable[[Product], bool]


@dataclass(frozen=True, slots=True)
class InventorySummary:
    total_stock: int
    total_demand: int
    fill_rate: float
    status_counts: dict[str, int]


def matches_search(text: str) -> ProductPredicate:
    needle = text.strip().lower()

    def predicate(product: Product) -> bool:
        return needle in product.name.lower() or needle in product.sku.lower() or needle in product.id.lower()

    return predicate


def matches_warehouse(code: str) -> ProductPredicate:
    return lambda product: product.warehouse_code == code


def matches_status(status: StockStatus) -> ProductPredicate:
    return lambda product: classify(product.stock, product.demand) is status


def build_predicates(
    search: Optional[str] = None,
    status: Optional[str] = None,
    warehouse: Optional[str] = None,
) -> list[ProductPredicate]:
    """Translate optional filter values into predicates.

    Blank search text, a blank warehouse code and an unrecognised status are
    all treated as "no filter".
    """

    predicates: list[ProductPredicate] = []
    if search and search.strip():
        predicates.append(matches_search(search))
    if warehouse:
        predicates.append(matches_warehouse(warehouse))
    wanted = parse_status(status)
    if wanted is not None:
        predicates.append(matches_status(wanted))
    return predicates


def query_products(
    products: Iterable[Product],
    search: Optional[str] = None,
    status: Optional[str] = None,
    warehouse: Optional[str] = None,
) -> list[Product]:
    """Return the products matching every supplied filter, in input order."""

    predicates = build_predicates(search=search, status=status, warehouse=warehouse)
    return [product for product in products if all(predicate(product) for predicate in predicates)]


def fill_rate(products: Iterable[Product]) -> float:
    """Percentage of total demand covered by stock, capped per product."""

    covered = 0
    total_demand = 0
    for product in products:
        covered += min(product.stock, product.demand)
        total_demand += product.demand
    if total_demand <= 0:
        return 0.0
    return round(covered / total_demand * 100, 1)


def summarize(products: Iterable[Product]) -> InventorySummary:
    items = list(products)
    counts = {status.value: 0 for status in StockStatus}
    for product in items:
        counts[classify(product.stock, product.demand).value] += 1
    return InventorySummary(
        total_stock=sum(product.stock for product in items),
        total_demand=sum(product.demand for product in items),
        fill_rate=fill_rate(items),
        status_counts=counts,
    )
