"""
timeline.py

What this file does:
  - Lays intervals out as horizontal bars on a fixed grid of stage rows:
      * x / width come from the time offset / duration within the session
      * y comes from the stage's row (awake on top, deeper stages below)
  - Emits S-shaped connector curves between consecutive bars of different stages.

Key details:
  - In-bed intervals are dropped whenever any other stage is present; they are a
    low-information fallback once real staging exists.
  - Zero-length intervals still get a visible sliver (min_bar_width).

This file does NOT:
  - Pick colors
  - Sort intervals (input must already be ordered by start)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .models import ConnectorCurve, LayoutRect, Point, SleepInterval, SleepStage, StageBar

logger = logging.getLogger(__name__)

STAGE_ROW_COUNT = 5
MIN_BAR_WIDTH = 1.0
BAR_CORNER_RADIUS_RATIO = 6.0
CONNECTOR_CONTROL_RATIOS = (0.3, 0.7)

# Unspecified and in-bed share the bottom row; in-bed only survives when alone.
STAGE_ROWS = {
    SleepStage.AWAKE: 0,
    SleepStage.REM: 1,
    SleepStage.CORE: 2,
    SleepStage.DEEP: 3,
    SleepStage.UNSPECIFIED: 4,
    SleepStage.IN_BED: 4,
}


@dataclass(frozen=True)
class TimelineLayout:
    bars: Tuple[StageBar, ...] = ()
    connectors: Tuple[ConnectorCurve, ...] = ()
    bar_height: float = 0.0
    corner_radius: float = 0.0
    gridlines: Tuple[float, ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        return not self.bars


def row_for_stage(stage: SleepStage) -> int:
    return STAGE_ROWS[stage]


def row_top(row: int, total_height: float, row_count: int = STAGE_ROW_COUNT) -> float:
    bar_height = total_height / row_count
    spacing = max(0.0, total_height - row_count * bar_height) / (row_count - 1)
    return row * (bar_height + spacing)


def connector_between(prev: LayoutRect, cur: LayoutRect) -> ConnectorCurve:
    start = Point(prev.max_x, prev.mid_y)
    end = Point(cur.x, cur.mid_y)
    r1, r2 = CONNECTOR_CONTROL_RATIOS
    dx = end.x - start.x
    return ConnectorCurve(
        start=start,
        end=end,
        control1=Point(start.x + dx * r1, start.y),
        control2=Point(start.x + dx * r2, end.y),
    )


def layout_timeline(
    intervals: Sequence[SleepInterval],
    total_width: float,
    total_height: float,
    *,
    row_count: int = STAGE_ROW_COUNT,
    min_bar_width: float = MIN_BAR_WIDTH,
) -> TimelineLayout:
    if row_count < STAGE_ROW_COUNT:
        raise ValueError(f"row_count must be >= {STAGE_ROW_COUNT}, got {row_count}")
    if not intervals:
        return TimelineLayout()

    first_start = intervals[0].start_utc
    span_s = (intervals[-1].end_utc - first_start).total_seconds()
    if span_s <= 0:
        logger.debug("Null span (%d intervals); empty timeline", len(intervals))
        return TimelineLayout()

    bar_height = total_height / row_count
    drop_in_bed = any(i.stage != SleepStage.IN_BED for i in intervals)

    bars: List[StageBar] = []
    connectors: List[ConnectorCurve] = []
    prev: Optional[StageBar] = None

    for interval in intervals:
        if drop_in_bed and interval.stage == SleepStage.IN_BED:
            continue

        offset_s = (interval.start_utc - first_start).total_seconds()
        rect = LayoutRect(
            x=offset_s / span_s * total_width,
            y=row_top(row_for_stage(interval.stage), total_height, row_count),
            width=max(min_bar_width, interval.duration / span_s * total_width),
            height=bar_height,
        )
        bar = StageBar(interval.stage, rect)

        if prev is not None and prev.stage != bar.stage:
            connectors.append(connector_between(prev.rect, rect))

        bars.append(bar)
        prev = bar

    logger.debug("Timeline: %d bars, %d connectors", len(bars), len(connectors))
    return TimelineLayout(
        bars=tuple(bars),
        connectors=tuple(connectors),
        bar_height=bar_height,
        corner_radius=bar_height / BAR_CORNER_RADIUS_RATIO,
    )
