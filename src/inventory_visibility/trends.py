"""Daily stock and demand series for the dashboard chart."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Callable, Optional, Protocol

from .models import TrendPoint

DEFAULT_WINDOW_DAYS = 30
WINDOWS = {"7d": 7, "14d": 14, "30d": 30}

STOCK_BASELINE = 1000
DEMAND_BASELINE = 800


def window_days(range_token: object) -> int:
    """Number of days covered by a range token; unknown tokens fall back to 30."""

    if not isinstance(range_token, str):
        return DEFAULT_WINDOW_DAYS
    return WINDOWS.get(range_token, DEFAULT_WINDOW_DAYS)


def window_dates(length: int, today: date) -> list[date]:
    """Calendar days ending at *today*, oldest first."""

    return [today - timedelta(days=offset) for offset in range(length - 1, -1, -1)]


class TrendSource(Protocol):
    """Anything able to produce a daily series for a range token.

    A historical aggregator over per-day catalog snapshots can stand in for
    :class:`SyntheticTrendSource` as long as it keeps this signature.
    """

    def points(self, range_token: str) -> list[TrendPoint]:
        ...


class SyntheticTrendSource:
    """Illustrative series jittered around fixed baselines."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._today = today or date.today

    def points(self, range_token: str) -> list[TrendPoint]:
        series = []
        for day in window_dates(window_days(range_token), self._today()):
            series.append(
                TrendPoint(
                    date=day,
                    stock=max(0, STOCK_BASELINE + self._rng.randint(-100, 99)),
                    demand=max(0, DEMAND_BASELINE + self._rng.randint(-75, 74)),
                )
            )
        return series
