import random
from datetime import date, timedelta

import pytest

from inventory_visibility.trends import SyntheticTrendSource, TrendSource, window_dates, window_days

TODAY = date(2026, 10, 19)


@pytest.mark.parametrize(
    ("token", "days"),
    [("7d", 7), ("14d", 14), ("30d", 30), ("bogus", 30), ("", 30), ("7D", 30), (None, 30)],
)
def test_window_days(token: object, days: int) -> None:
    assert window_days(token) == days


def test_window_dates_end_today_oldest_first() -> None:
    days = window_dates(3, TODAY)
    assert days == [TODAY - timedelta(days=2), TODAY - timedelta(days=1), TODAY]


def test_seven_day_series() -> None:
    source = SyntheticTrendSource(rng=random.Random(1), today=lambda: TODAY)
    points = source.points("7d")

    assert len(points) == 7
    assert points[-1].date == TODAY
    assert all(earlier.date < later.date for earlier, later in zip(points, points[1:]))
    assert points[0].date.isoformat() == "2026-10-13"


def test_unrecognised_range_falls_back_to_thirty_days() -> None:
    source = SyntheticTrendSource(rng=random.Random(1), today=lambda: TODAY)
    points = source.points("bogus")
    assert len(points) == 30
    assert points[-1].date == TODAY


def test_values_stay_within_jitter_bounds() -> None:
    source = SyntheticTrendSource(rng=random.Random(99), today=lambda: TODAY)
    for point in source.points("30d"):
        assert 900 <= point.stock <= 1099
        assert 725 <= point.demand <= 874


def test_seeded_generators_are_reproducible() -> None:
    first = SyntheticTrendSource(rng=random.Random(5), today=lambda: TODAY).points("14d")
    second = SyntheticTrendSource(rng=random.Random(5), today=lambda: TODAY).points("14d")
    assert first == second


def test_default_clock_is_today() -> None:
    points = SyntheticTrendSource().points("7d")
    assert points[-1].date == date.today()


def test_any_object_with_points_is_a_trend_source() -> None:
    class Flat:
        def points(self, range_token: str):
            return []

    source: TrendSource = Flat()
    assert source.points("7d") == []
