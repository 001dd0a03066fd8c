from __future__ import annotations

import datetime as dt
import gettext

import pytest

from sleep_chart.labels import (
    ClockTimeFormatter,
    CustomDisplayNameResolver,
    DefaultDisplayNameResolver,
    DefaultDurationFormatter,
    TranslatedDisplayNameResolver,
)
from sleep_chart.models import SleepStage


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0m"),
        (59, "0m"),
        (42 * 60, "42m"),
        (3600, "1h 0m"),
        (7 * 3600 + 5 * 60 + 59, "7h 5m"),
        (-30, "0m"),
    ],
)
def test_default_duration_formatter(seconds: float, expected: str) -> None:
    assert DefaultDurationFormatter().format(seconds) == expected


def test_default_names() -> None:
    resolver = DefaultDisplayNameResolver()
    assert [resolver.display_name(s) for s in SleepStage] == ["Awake", "REM", "Light", "Deep", "Sleep", "In Bed"]


def test_custom_names_fall_back_to_defaults() -> None:
    resolver = CustomDisplayNameResolver({SleepStage.CORE: "Core"})
    assert resolver.display_name(SleepStage.CORE) == "Core"
    assert resolver.display_name(SleepStage.DEEP) == "Deep"


class _Catalog(gettext.NullTranslations):
    def __init__(self, messages: dict[str, str]) -> None:
        super().__init__()
        self._messages = messages

    def gettext(self, message: str) -> str:
        return self._messages.get(message, message)


def test_translated_names() -> None:
    resolver = TranslatedDisplayNameResolver(_Catalog({"sleep_stage_deep": "Tiefschlaf"}))
    assert resolver.display_name(SleepStage.DEEP) == "Tiefschlaf"
    assert resolver.display_name(SleepStage.REM) == "REM"


def test_translated_names_without_catalog() -> None:
    assert TranslatedDisplayNameResolver().display_name(SleepStage.IN_BED) == "In Bed"
    assert TranslatedDisplayNameResolver.message_key(SleepStage.IN_BED) == "sleep_stage_in_bed"


def test_clock_time_formatter_zones() -> None:
    t = dt.datetime(2024, 3, 9, 22, 5, tzinfo=dt.timezone.utc)
    assert ClockTimeFormatter().format_time(t) == "22:05"
    assert ClockTimeFormatter(dt.timezone(dt.timedelta(hours=2))).format_time(t) == "00:05"
    assert ClockTimeFormatter(fmt="%H:%M:%S").format_time(t.replace(tzinfo=None)) == "22:05:00"
