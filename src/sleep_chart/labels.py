"""
labels.py

What this file does:
  - Text collaborators used for legends and summary labels:
      * duration text ("7h 5m", "42m")
      * stage display names (default, custom overrides, gettext translations)
      * clock-time labels ("22:30") in a chosen display zone

This file does NOT:
  - Touch geometry. Nothing here changes where anything is drawn.
"""

from __future__ import annotations

import gettext
from datetime import datetime, tzinfo
from typing import Mapping, Optional, Protocol, Union

from .models import SleepStage
from .time_utils import as_zone, resolve_tz


class DurationTextFormatter(Protocol):
    def format(self, duration_seconds: float) -> str: ...


class DisplayNameResolver(Protocol):
    def display_name(self, stage: SleepStage) -> str: ...


class TimeFormatter(Protocol):
    def format_time(self, dt: datetime) -> str: ...


class DefaultDurationFormatter:
    """Whole hours and minutes, truncated: 7h 5m, or just 42m under an hour."""

    def format(self, duration_seconds: float) -> str:
        s = int(max(0.0, float(duration_seconds)))
        hours, rem = divmod(s, 3600)
        minutes = rem // 60
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"


class DefaultDisplayNameResolver:
    def display_name(self, stage: SleepStage) -> str:
        return stage.default_display_name


class CustomDisplayNameResolver:
    def __init__(self, custom_names: Mapping[SleepStage, str]) -> None:
        self._names = dict(custom_names)

    def display_name(self, stage: SleepStage) -> str:
        return self._names.get(stage, stage.default_display_name)


class TranslatedDisplayNameResolver:
    """
    Looks names up through a gettext catalog using keys like
    'sleep_stage_deep'. An untranslated key falls back to the default name.
    """

    def __init__(self, translations: Optional[gettext.NullTranslations] = None) -> None:
        self._translations = translations or gettext.NullTranslations()

    @staticmethod
    def message_key(stage: SleepStage) -> str:
        return f"sleep_stage_{stage.name.lower()}"

    def display_name(self, stage: SleepStage) -> str:
        key = self.message_key(stage)
        text = self._translations.gettext(key)
        return text if text != key else stage.default_display_name


class ClockTimeFormatter:
    def __init__(self, tz: Union[str, tzinfo, None] = None, fmt: str = "%H:%M") -> None:
        self.tz = resolve_tz(tz)
        self.fmt = fmt

    def format_time(self, dt: datetime) -> str:
        return as_zone(dt, self.tz).strftime(self.fmt)
