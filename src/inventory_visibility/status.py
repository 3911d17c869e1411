"""Stock health classification."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class StockStatus(str, Enum):
    HEALTHY = "Healthy"
    LOW = "Low"
    CRITICAL = "Critical"


def classify(stock: int, demand: int) -> StockStatus:
    """Return the health of a stock level measured against its demand."""

    if stock > demand:
        return StockStatus.HEALTHY
    if stock == demand:
        return StockStatus.LOW
    return StockStatus.CRITICAL


def parse_status(value: object) -> Optional[StockStatus]:
    """Return the matching status, or ``None`` for anything unrecognised."""

    if isinstance(value, StockStatus):
        return value
    if not isinstance(value, str):
        return None
    try:
        return StockStatus(value)
    except ValueError:
        return None
