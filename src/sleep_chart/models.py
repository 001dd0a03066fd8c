"""
models.py

What this file does:
  - Defines the stage taxonomy (SleepStage) and the interval record (SleepInterval).
  - Defines the immutable geometry primitives every layout pass returns:
    rectangles, connector curves, arc segments, caps, icon anchors, markers.

Key idea:
  - Everything here is a frozen value. A layout pass builds fresh objects and
    never mutates them, so results can be compared with == and shared freely.

This file does NOT:
  - Compute any layout
  - Know about colors or fonts
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Dict, NamedTuple, Tuple

from .time_utils import as_zone


class InvalidIntervalError(ValueError):
    """Raised when an interval ends before it starts (upstream data corruption)."""


class SleepStage(IntEnum):
    # Ordinal is the display order: timeline rows, legend order, default names.
    AWAKE = 0
    REM = 1
    CORE = 2
    DEEP = 3
    UNSPECIFIED = 4
    IN_BED = 5

    @property
    def default_display_name(self) -> str:
        return _DEFAULT_NAMES[self]


_DEFAULT_NAMES = {
    SleepStage.AWAKE: "Awake",
    SleepStage.REM: "REM",
    SleepStage.CORE: "Light",
    SleepStage.DEEP: "Deep",
    SleepStage.UNSPECIFIED: "Sleep",
    SleepStage.IN_BED: "In Bed",
}


@dataclass(frozen=True)
class SleepInterval:
    """
    One contiguous span in a single stage.

    start/end keep the zone the caller gave them (labels and the clock dial read
    it). start_utc/end_utc are the same instants in UTC; duration and offset math
    must use these, since two datetimes sharing a ZoneInfo subtract as wall
    clock. Naive values count as UTC.
    """

    stage: SleepStage
    start: datetime
    end: datetime
    start_utc: datetime = field(init=False, repr=False, compare=False)
    end_utc: datetime = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_utc", as_zone(self.start, timezone.utc))
        object.__setattr__(self, "end_utc", as_zone(self.end, timezone.utc))
        if self.end_utc < self.start_utc:
            raise InvalidIntervalError(
                f"{self.stage.name} interval ends before it starts: {self.start.isoformat()} > {self.end.isoformat()}"
            )

    @property
    def duration(self) -> float:
        """Length in seconds (zero for instantaneous events)."""
        return (self.end_utc - self.start_utc).total_seconds()


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class LayoutRect:
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2


class StageBar(NamedTuple):
    stage: SleepStage
    rect: LayoutRect


@dataclass(frozen=True)
class ConnectorCurve:
    """Cubic Bezier from one bar's trailing edge to the next bar's leading edge."""

    start: Point
    end: Point
    control1: Point
    control2: Point


@dataclass(frozen=True)
class ArcSegment:
    stage: SleepStage
    start_angle_deg: float
    end_angle_deg: float

    @property
    def sweep_deg(self) -> float:
        return self.end_angle_deg - self.start_angle_deg


@dataclass(frozen=True)
class BackgroundArcSegment:
    start_angle_deg: float
    end_angle_deg: float

    @property
    def sweep_deg(self) -> float:
        return self.end_angle_deg - self.start_angle_deg


@dataclass(frozen=True)
class CapGeometry:
    """
    Semicircular terminator drawn at the very start or end of the sleep arc.

    center sits on the ring centerline at anchor_angle_deg; the half disc spans
    start_angle_deg..end_angle_deg (180 degrees) around that center.
    """

    stage: SleepStage
    center: Point
    radius: float
    anchor_angle_deg: float
    start_angle_deg: float
    end_angle_deg: float


@dataclass(frozen=True)
class IconAnchor:
    kind: str  # "sleep_start" | "sleep_end"
    angle_deg: float
    radius: float
    point: Point


@dataclass(frozen=True)
class TimeMarker:
    label: str
    position: float  # fraction of the session span, 0..1


@dataclass(frozen=True)
class StageTotals:
    # Only stages with a positive total appear in durations.
    durations: Dict[SleepStage, float] = field(default_factory=dict)
    present: Tuple[SleepStage, ...] = ()

    @property
    def total_seconds(self) -> float:
        return sum(self.durations.values())

    def get(self, stage: SleepStage) -> float:
        return self.durations.get(stage, 0.0)
