"""
assembler.py

What this file does:
  - Composition root. Given intervals + ChartConfig it runs the aggregator,
    the marker generator and the timeline or circular engine, and packages the
    results with the summary labels (start, end, total, legend) into one
    LayoutResult a painter can draw without further math.

Key idea:
  - Text and color collaborators are injected once, at construction. The
    geometry never depends on them.

This file does NOT:
  - Paint, read files, or keep state between calls
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional, Sequence, Tuple

from .circular import CircularLayout, layout_circular
from .colors import RGBA, ColorResolver, DefaultColorResolver
from .config import ChartConfig, ChartStyle
from .labels import (
    ClockTimeFormatter,
    DefaultDisplayNameResolver,
    DefaultDurationFormatter,
    DisplayNameResolver,
    DurationTextFormatter,
    TimeFormatter,
)
from .markers import generate_time_markers
from .models import ArcSegment, BackgroundArcSegment, ConnectorCurve, SleepInterval, SleepStage, StageBar, StageTotals, TimeMarker
from .stages import aggregate_stages
from .timeline import TimelineLayout, layout_timeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegendEntry:
    stage: SleepStage
    name: str
    duration_text: str
    seconds: float


@dataclass(frozen=True)
class SummaryLabels:
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    total_duration: Optional[str] = None
    legend: Tuple[LegendEntry, ...] = ()


@dataclass(frozen=True)
class LayoutResult:
    config: ChartConfig
    totals: StageTotals
    markers: Tuple[TimeMarker, ...] = ()
    timeline: Optional[TimelineLayout] = None
    circular: Optional[CircularLayout] = None
    labels: SummaryLabels = SummaryLabels()

    @property
    def style(self) -> ChartStyle:
        return self.config.style

    @property
    def bars(self) -> Tuple[StageBar, ...]:
        return self.timeline.bars if self.timeline else ()

    @property
    def connectors(self) -> Tuple[ConnectorCurve, ...]:
        return self.timeline.connectors if self.timeline else ()

    @property
    def segments(self) -> Tuple[ArcSegment, ...]:
        return self.circular.segments if self.circular else ()

    @property
    def background(self) -> Tuple[BackgroundArcSegment, ...]:
        return self.circular.background if self.circular else ()

    @property
    def is_empty(self) -> bool:
        return not self.bars and not self.segments

    def stages_drawn(self) -> Tuple[SleepStage, ...]:
        stages = {b.stage for b in self.bars} | {s.stage for s in self.segments}
        stages |= {e.stage for e in self.labels.legend}
        return tuple(sorted(stages))


class ChartAssembler:
    def __init__(
        self,
        *,
        color_resolver: Optional[ColorResolver] = None,
        duration_formatter: Optional[DurationTextFormatter] = None,
        display_name_resolver: Optional[DisplayNameResolver] = None,
        time_formatter: Optional[TimeFormatter] = None,
    ) -> None:
        self.color_resolver = color_resolver or DefaultColorResolver()
        self.duration_formatter = duration_formatter or DefaultDurationFormatter()
        self.display_name_resolver = display_name_resolver or DefaultDisplayNameResolver()
        self.time_formatter = time_formatter

    def _time_formatter_for(self, config: ChartConfig) -> TimeFormatter:
        return self.time_formatter or ClockTimeFormatter(config.display_tz)

    def summary_labels(
        self,
        intervals: Sequence[SleepInterval],
        totals: StageTotals,
        time_formatter: TimeFormatter,
    ) -> SummaryLabels:
        if not intervals:
            return SummaryLabels()
        legend = tuple(
            LegendEntry(
                stage=stage,
                name=self.display_name_resolver.display_name(stage),
                duration_text=self.duration_formatter.format(seconds),
                seconds=seconds,
            )
            for stage, seconds in sorted(totals.durations.items())
        )
        return SummaryLabels(
            start_time=time_formatter.format_time(intervals[0].start),
            end_time=time_formatter.format_time(intervals[-1].end),
            total_duration=self.duration_formatter.format(totals.total_seconds),
            legend=legend,
        )

    def assemble(self, intervals: Sequence[SleepInterval], config: Optional[ChartConfig] = None) -> LayoutResult:
        config = config or ChartConfig()
        intervals = tuple(intervals)
        time_formatter = self._time_formatter_for(config)

        totals = aggregate_stages(intervals)
        markers = tuple(generate_time_markers(intervals, config.marker_count, time_formatter=time_formatter))
        labels = self.summary_labels(intervals, totals, time_formatter)

        timeline: Optional[TimelineLayout] = None
        circular: Optional[CircularLayout] = None
        if config.style is ChartStyle.TIMELINE:
            timeline = layout_timeline(
                intervals,
                config.width,
                config.height,
                row_count=config.row_count,
                min_bar_width=config.min_bar_width,
            )
            if not timeline.is_empty:
                xs = (0.0, *(m.position * config.width for m in markers), config.width)
                timeline = replace(timeline, gridlines=xs)
        else:
            circular = layout_circular(
                intervals,
                config.circular_mode,
                size=config.size,
                line_width=config.line_width,
                threshold_hours=config.threshold_hours,
                icon_padding_deg=config.icon_padding_deg,
                tz=config.display_tz,
            )

        logger.debug("Assembled %s chart from %d intervals", config.style.value, len(intervals))
        return LayoutResult(
            config=config,
            totals=totals,
            markers=markers,
            timeline=timeline,
            circular=circular,
            labels=labels,
        )

    def color_overlay(self, result: LayoutResult) -> Dict[SleepStage, RGBA]:
        """Resolved colors for every stage the result draws or lists."""
        return {stage: self.color_resolver.color(stage) for stage in result.stages_drawn()}
