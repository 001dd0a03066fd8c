from __future__ import annotations

import datetime as dt
from typing import Callable
from zoneinfo import ZoneInfo

import pytest

from sleep_chart.models import SleepInterval, SleepStage

IntervalFactory = Callable[[SleepStage, float, float], SleepInterval]


@pytest.fixture()
def night_start() -> dt.datetime:
    """22:00 UTC; all interval offsets below are minutes from here."""
    return dt.datetime(2024, 3, 9, 22, 0, tzinfo=dt.timezone.utc)


@pytest.fixture()
def make_interval(night_start: dt.datetime) -> IntervalFactory:
    def _make(stage: SleepStage, start_min: float, end_min: float) -> SleepInterval:
        return SleepInterval(
            stage,
            night_start + dt.timedelta(minutes=start_min),
            night_start + dt.timedelta(minutes=end_min),
        )

    return _make


@pytest.fixture()
def three_stage_night(make_interval: IntervalFactory) -> list[SleepInterval]:
    # core 22:00-23:00, deep 23:00-01:00, rem 01:00-02:00
    return [
        make_interval(SleepStage.CORE, 0, 60),
        make_interval(SleepStage.DEEP, 60, 180),
        make_interval(SleepStage.REM, 180, 240),
    ]


@pytest.fixture()
def new_york() -> ZoneInfo:
    return ZoneInfo("America/New_York")


@pytest.fixture()
def spring_forward_night(new_york: ZoneInfo) -> list[SleepInterval]:
    # 2024-03-10: clocks jump 02:00 EST -> 03:00 EDT, so 00:00-04:00 local is 3 h.
    def at(hour: int) -> dt.datetime:
        return dt.datetime(2024, 3, 10, hour, 0, tzinfo=new_york)

    return [
        SleepInterval(SleepStage.CORE, at(0), at(1)),
        SleepInterval(SleepStage.DEEP, at(1), at(4)),
    ]


@pytest.fixture()
def fall_back_night(new_york: ZoneInfo) -> list[SleepInterval]:
    # 2024-11-03: 01:00-02:00 local happens twice; fold=1 is the second (EST) pass.
    def at(hour: int, minute: int, fold: int = 0) -> dt.datetime:
        return dt.datetime(2024, 11, 3, hour, minute, tzinfo=new_york, fold=fold)

    return [
        SleepInterval(SleepStage.CORE, at(0, 0), at(1, 30)),  # 1.5 h
        SleepInterval(SleepStage.DEEP, at(1, 30), at(1, 30, fold=1)),  # 1 h
        SleepInterval(SleepStage.REM, at(1, 30, fold=1), at(2, 0)),  # 0.5 h
    ]
