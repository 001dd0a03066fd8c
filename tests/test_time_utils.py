from __future__ import annotations

import datetime as dt

import pytest

from sleep_chart.time_utils import as_zone, parse_time_utc, start_of_day

UTC = dt.timezone.utc


@pytest.mark.parametrize(
    "raw",
    [
        "2024-03-09T22:00:00Z",
        "2024-03-09T22:00:00+00:00",
        "2024-03-09T17:00:00-05:00",
        "2024-03-09 17:00:00 -0500",
        "2024-03-09T22:00:00",
        dt.datetime(2024, 3, 9, 22, 0),
        dt.datetime(2024, 3, 9, 22, 0, tzinfo=UTC).timestamp(),
    ],
)
def test_parse_time_utc(raw) -> None:
    assert parse_time_utc(raw) == dt.datetime(2024, 3, 9, 22, 0, tzinfo=UTC)


def test_parse_time_rejects_unknown_types() -> None:
    with pytest.raises(TypeError):
        parse_time_utc([2024, 3, 9])


def test_as_zone_treats_naive_as_utc() -> None:
    assert as_zone(dt.datetime(2024, 1, 1, 12, 0)).tzinfo is UTC


def test_start_of_day_in_zone() -> None:
    t = dt.datetime(2024, 3, 10, 2, 0, tzinfo=UTC)
    plus3 = dt.timezone(dt.timedelta(hours=3))
    assert start_of_day(t) == dt.datetime(2024, 3, 10, tzinfo=UTC)
    assert start_of_day(t, plus3) == dt.datetime(2024, 3, 10, tzinfo=plus3)
    assert start_of_day(t, dt.timezone(dt.timedelta(hours=-5))).day == 9
