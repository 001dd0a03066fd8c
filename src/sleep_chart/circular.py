"""
circular.py

What this file does:
  - Lays intervals out as arc segments around a ring (clock-face chart).
  - Two interchangeable angle mappings:
      * CLOCK: absolute 24-hour dial. Midnight is at the top, untracked parts
        of the day become dimmed background segments.
      * THRESHOLD: the arc sweeps a share of the circle proportional to total
        recorded time vs. a goal (default 9h); segments are packed end to end.
  - Adds the rounded caps at the two ends of the arc and the anchor points for
    the "sleep start" / "sleep end" icons.

Angles:
  - Degrees, 0 = 3 o'clock, -90 = top of the circle, increasing clockwise in
    screen coordinates (y grows downwards).

This file does NOT:
  - Pick colors
  - Round interior stage boundaries (those stay butt joins)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import List, Optional, Protocol, Sequence, Tuple, Union

from .models import ArcSegment, BackgroundArcSegment, CapGeometry, IconAnchor, Point, SleepInterval
from .time_utils import SECONDS_PER_DAY, as_zone, start_of_day

logger = logging.getLogger(__name__)

TOP_ANGLE_DEG = -90.0
FULL_CIRCLE_DEG = 360.0
DEFAULT_THRESHOLD_HOURS = 9.0
DEFAULT_ICON_PADDING_DEG = 2.0
DEFAULT_SIZE = 160.0
DEFAULT_LINE_WIDTH = 16.0

# Ring centerline sits 0.6 line widths inside the outer edge; the background
# track is drawn 1.5 line widths wide around the same centerline.
RING_INSET_RATIO = 0.6
TRACK_WIDTH_RATIO = 1.5


class CircularMode(str, Enum):
    CLOCK = "clock"
    THRESHOLD = "threshold"


Mapped = Tuple[List[ArcSegment], List[BackgroundArcSegment], float]


class AngleMapper(Protocol):
    def map(self, intervals: Sequence[SleepInterval]) -> Mapped: ...


class ClockAngleMapper:
    """24-hour dial anchored at local midnight of the day the session starts."""

    def __init__(self, tz: Union[str, tzinfo, None] = None) -> None:
        self.tz = tz

    def day_start(self, intervals: Sequence[SleepInterval]) -> datetime:
        return start_of_day(intervals[0].start, self.tz).astimezone(timezone.utc)

    @staticmethod
    def angle(t: datetime, day_start: datetime) -> float:
        elapsed_s = (as_zone(t, timezone.utc) - day_start).total_seconds()
        return elapsed_s / SECONDS_PER_DAY * FULL_CIRCLE_DEG + TOP_ANGLE_DEG

    def map(self, intervals: Sequence[SleepInterval]) -> Mapped:
        if not intervals:
            return [], [], 0.0
        if intervals[-1].end_utc <= intervals[0].start_utc:
            logger.debug("Null span (%d intervals); empty clock dial", len(intervals))
            return [], [], 0.0

        day_start = self.day_start(intervals)
        day_end = day_start + timedelta(seconds=SECONDS_PER_DAY)

        segments = [
            ArcSegment(i.stage, self.angle(i.start_utc, day_start), self.angle(i.end_utc, day_start))
            for i in intervals
        ]

        background: List[BackgroundArcSegment] = []
        first_start = intervals[0].start_utc
        last_end = intervals[-1].end_utc
        if first_start > day_start:
            background.append(BackgroundArcSegment(TOP_ANGLE_DEG, self.angle(first_start, day_start)))
        if last_end < day_end:
            background.append(
                BackgroundArcSegment(self.angle(last_end, day_start), TOP_ANGLE_DEG + FULL_CIRCLE_DEG)
            )

        total_sweep = sum(s.sweep_deg for s in segments)
        return segments, background, total_sweep


class ThresholdAngleMapper:
    """Arc length = share of the goal reached, capped at a full circle."""

    def __init__(self, threshold_hours: float = DEFAULT_THRESHOLD_HOURS) -> None:
        self.threshold_hours = threshold_hours

    @property
    def threshold_seconds(self) -> float:
        return self.threshold_hours * 3600.0

    def total_sweep(self, total_duration_s: float) -> float:
        if total_duration_s <= 0:
            return 0.0
        if self.threshold_seconds <= 0:
            return FULL_CIRCLE_DEG
        return min(total_duration_s / self.threshold_seconds, 1.0) * FULL_CIRCLE_DEG

    def map(self, intervals: Sequence[SleepInterval]) -> Mapped:
        total_s = sum(i.duration for i in intervals)
        if total_s <= 0:
            if intervals:
                logger.debug("Zero recorded duration (%d intervals); empty sweep", len(intervals))
            return [], [], 0.0

        total_sweep = self.total_sweep(total_s)
        segments: List[ArcSegment] = []
        current = TOP_ANGLE_DEG
        for interval in intervals:
            sweep = interval.duration / total_s * total_sweep
            segments.append(ArcSegment(interval.stage, current, current + sweep))
            current += sweep
        return segments, [], total_sweep


@dataclass(frozen=True)
class RingGeometry:
    center: Point
    outer_radius: float
    ring_radius: float
    line_width: float
    track_width: float

    @classmethod
    def for_size(cls, size: float, line_width: float) -> "RingGeometry":
        outer = size / 2
        return cls(
            center=Point(size / 2, size / 2),
            outer_radius=outer,
            ring_radius=outer - line_width * RING_INSET_RATIO,
            line_width=line_width,
            track_width=line_width * TRACK_WIDTH_RATIO,
        )

    def point_at(self, angle_deg: float, radius: Optional[float] = None) -> Point:
        r = self.ring_radius if radius is None else radius
        rad = math.radians(angle_deg)
        return Point(self.center.x + r * math.cos(rad), self.center.y + r * math.sin(rad))


@dataclass(frozen=True)
class CircularLayout:
    mode: CircularMode
    ring: RingGeometry
    segments: Tuple[ArcSegment, ...] = ()
    background: Tuple[BackgroundArcSegment, ...] = ()
    caps: Tuple[CapGeometry, ...] = ()
    icon_anchors: Tuple[IconAnchor, ...] = ()
    total_sweep_deg: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.segments


def build_caps(segments: Sequence[ArcSegment], ring: RingGeometry) -> Tuple[CapGeometry, ...]:
    if not segments:
        return ()
    first, last = segments[0], segments[-1]
    radius = ring.line_width / 2
    a0 = first.start_angle_deg
    a1 = last.end_angle_deg
    # Start cap bulges backwards (counter-clockwise), end cap forwards.
    return (
        CapGeometry(first.stage, ring.point_at(a0), radius, a0, a0 + 180.0, a0 + 360.0),
        CapGeometry(last.stage, ring.point_at(a1), radius, a1, a1, a1 + 180.0),
    )


def build_icon_anchors(
    segments: Sequence[ArcSegment],
    ring: RingGeometry,
    padding_deg: float = DEFAULT_ICON_PADDING_DEG,
) -> Tuple[IconAnchor, ...]:
    if not segments:
        return ()
    start_angle = segments[0].start_angle_deg + padding_deg
    end_angle = segments[-1].end_angle_deg - padding_deg
    return (
        IconAnchor("sleep_start", start_angle, ring.ring_radius, ring.point_at(start_angle)),
        IconAnchor("sleep_end", end_angle, ring.ring_radius, ring.point_at(end_angle)),
    )


def angle_mapper_for(
    mode: CircularMode,
    *,
    threshold_hours: float = DEFAULT_THRESHOLD_HOURS,
    tz: Union[str, tzinfo, None] = None,
) -> AngleMapper:
    if mode is CircularMode.CLOCK:
        return ClockAngleMapper(tz)
    return ThresholdAngleMapper(threshold_hours)


def layout_circular(
    intervals: Sequence[SleepInterval],
    mode: CircularMode = CircularMode.THRESHOLD,
    *,
    size: float = DEFAULT_SIZE,
    line_width: float = DEFAULT_LINE_WIDTH,
    threshold_hours: float = DEFAULT_THRESHOLD_HOURS,
    icon_padding_deg: float = DEFAULT_ICON_PADDING_DEG,
    tz: Union[str, tzinfo, None] = None,
    mapper: Optional[AngleMapper] = None,
) -> CircularLayout:
    mode = CircularMode(mode)
    ring = RingGeometry.for_size(size, line_width)
    mapper = mapper or angle_mapper_for(mode, threshold_hours=threshold_hours, tz=tz)

    segments, background, total_sweep = mapper.map(intervals)
    logger.debug(
        "Circular (%s): %d segments, %d background, sweep=%.2f",
        mode.value,
        len(segments),
        len(background),
        total_sweep,
    )
    return CircularLayout(
        mode=mode,
        ring=ring,
        segments=tuple(segments),
        background=tuple(background),
        caps=build_caps(segments, ring),
        icon_anchors=build_icon_anchors(segments, ring, icon_padding_deg),
        total_sweep_deg=total_sweep,
    )
