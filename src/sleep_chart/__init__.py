"""Sleep-stage chart layout: intervals in, drawable geometry out."""

from .assembler import ChartAssembler, LayoutResult, LegendEntry, SummaryLabels
from .circular import CircularLayout, CircularMode, layout_circular
from .config import ChartConfig, ChartStyle
from .markers import generate_time_markers
from .models import (
    ArcSegment,
    BackgroundArcSegment,
    CapGeometry,
    ConnectorCurve,
    IconAnchor,
    InvalidIntervalError,
    LayoutRect,
    Point,
    SleepInterval,
    SleepStage,
    StageBar,
    StageTotals,
    TimeMarker,
)
from .stages import aggregate_stages
from .timeline import TimelineLayout, layout_timeline

__all__ = [
    "ArcSegment",
    "BackgroundArcSegment",
    "CapGeometry",
    "ChartAssembler",
    "ChartConfig",
    "ChartStyle",
    "CircularLayout",
    "CircularMode",
    "ConnectorCurve",
    "IconAnchor",
    "InvalidIntervalError",
    "LayoutRect",
    "LayoutResult",
    "LegendEntry",
    "Point",
    "SleepInterval",
    "SleepStage",
    "StageBar",
    "StageTotals",
    "SummaryLabels",
    "TimeMarker",
    "TimelineLayout",
    "aggregate_stages",
    "generate_time_markers",
    "layout_circular",
    "layout_timeline",
]
