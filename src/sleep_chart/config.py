"""
config.py

What this file does:
  - ChartConfig: every knob a layout pass needs (style, canvas size, rows,
    threshold, marker count, display zone).
  - ChartConfig.from_env(): the same settings from SLEEP_CHART_* env vars
    (a local .env file is loaded first).

This file does NOT:
  - Compute layout
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .circular import (
    DEFAULT_ICON_PADDING_DEG,
    DEFAULT_LINE_WIDTH,
    DEFAULT_SIZE,
    DEFAULT_THRESHOLD_HOURS,
    CircularMode,
)
from .markers import DEFAULT_MARKER_COUNT
from .time_utils import resolve_tz
from .timeline import MIN_BAR_WIDTH, STAGE_ROW_COUNT

ENV_PREFIX = "SLEEP_CHART_"


class ChartStyle(str, Enum):
    TIMELINE = "timeline"
    CIRCULAR = "circular"


@dataclass(frozen=True)
class ChartConfig:
    style: ChartStyle = ChartStyle.TIMELINE
    circular_mode: CircularMode = CircularMode.THRESHOLD
    width: float = 320.0
    height: float = 100.0
    row_count: int = STAGE_ROW_COUNT
    min_bar_width: float = MIN_BAR_WIDTH
    marker_count: int = DEFAULT_MARKER_COUNT
    threshold_hours: float = DEFAULT_THRESHOLD_HOURS
    line_width: float = DEFAULT_LINE_WIDTH
    size: float = DEFAULT_SIZE
    icon_padding_deg: float = DEFAULT_ICON_PADDING_DEG
    display_tz: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept plain strings for the enums ("circular", "clock").
        object.__setattr__(self, "style", ChartStyle(self.style))
        object.__setattr__(self, "circular_mode", CircularMode(self.circular_mode))

        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must be positive, got {self.width}x{self.height}")
        if self.row_count < STAGE_ROW_COUNT:
            raise ValueError(f"row_count must be >= {STAGE_ROW_COUNT}, got {self.row_count}")
        if self.min_bar_width < 0:
            raise ValueError(f"min_bar_width must be >= 0, got {self.min_bar_width}")
        if self.marker_count < 0:
            raise ValueError(f"marker_count must be >= 0, got {self.marker_count}")
        if self.threshold_hours <= 0:
            raise ValueError(f"threshold_hours must be > 0, got {self.threshold_hours}")
        if self.line_width <= 0 or self.size <= 0:
            raise ValueError("line_width and size must be > 0")
        if self.line_width * 2 > self.size:
            raise ValueError(f"line_width {self.line_width} is too wide for a {self.size} ring")
        if self.display_tz is not None:
            resolve_tz(self.display_tz)  # raises ZoneInfoNotFoundError for typos

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> "ChartConfig":
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        def env(name: str, default: str) -> str:
            return os.getenv(ENV_PREFIX + name, default)

        return cls(
            style=ChartStyle(env("STYLE", ChartStyle.TIMELINE.value).lower()),
            circular_mode=CircularMode(env("CIRCULAR_MODE", CircularMode.THRESHOLD.value).lower()),
            width=float(env("WIDTH", "320")),
            height=float(env("HEIGHT", "100")),
            row_count=int(env("ROW_COUNT", str(STAGE_ROW_COUNT))),
            min_bar_width=float(env("MIN_BAR_WIDTH", str(MIN_BAR_WIDTH))),
            marker_count=int(env("MARKER_COUNT", str(DEFAULT_MARKER_COUNT))),
            threshold_hours=float(env("THRESHOLD_HOURS", str(DEFAULT_THRESHOLD_HOURS))),
            line_width=float(env("LINE_WIDTH", str(DEFAULT_LINE_WIDTH))),
            size=float(env("SIZE", str(DEFAULT_SIZE))),
            icon_padding_deg=float(env("ICON_PADDING_DEG", str(DEFAULT_ICON_PADDING_DEG))),
            display_tz=os.getenv(ENV_PREFIX + "DISPLAY_TZ") or None,
        )
