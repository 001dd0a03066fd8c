#!/usr/bin/env python3
"""
chart_render.py

What this file does:
  - PURE painting. Given a LayoutResult (already fully positioned by
    sleep_chart.assembler) and a stage -> RGBA color overlay, it draws a PNG:
      * timeline: rounded stage bars, connector curves, dotted gridlines,
        marker labels, sleep/wake times and a legend
      * circular: background track, dimmed untracked time, stage arcs,
        rounded end caps, start/end icons and the total in the middle

What this file does NOT do:
  - Compute any geometry (every coordinate comes from the layout)
  - Decide colors (they come from the assembler's ColorResolver)

Why this is useful:
  - You can change the layout math without touching plotting, and iterate on
    visuals without risking the layout math.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import matplotlib
matplotlib.use("Agg")  # headless-safe

import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba
from matplotlib.patches import FancyBboxPatch, Patch, PathPatch, Wedge
from matplotlib.path import Path as MplPath

from sleep_chart.assembler import LayoutResult
from sleep_chart.circular import CircularLayout
from sleep_chart.colors import BACKGROUND_RING_COLOR, BAR_BORDER_COLOR, CONNECTOR_ALPHA, RGBA
from sleep_chart.config import ChartStyle
from sleep_chart.models import SleepStage
from sleep_chart.timeline import TimelineLayout

BG_COLOR = "#0B1020"
TEXT_COLOR = "white"
MUTED_TEXT_COLOR = "#B7BCC7"
ICON_COLORS = {"sleep_start": "#C9D6FF", "sleep_end": "#FFD479"}

# Canvas units -> inches
UNITS_PER_INCH = 80.0


def render_timeline_axis(
    ax: plt.Axes,
    result: LayoutResult,
    timeline: TimelineLayout,
    colors: Mapping[SleepStage, RGBA],
) -> None:
    width = result.config.width
    height = result.config.height

    ax.set_facecolor("none")
    ax.set_xlim(0.0, width)
    ax.set_ylim(height, 0.0)  # layout y grows downwards
    ax.set_yticks([])
    ax.set_xticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)

    for x in timeline.gridlines:
        ax.axvline(x, color=MUTED_TEXT_COLOR, linewidth=0.5, linestyle=(0, (2, 3)), alpha=0.5, zorder=1)

    for stage, rect in timeline.bars:
        ax.add_patch(
            FancyBboxPatch(
                (rect.x, rect.y),
                rect.width,
                rect.height,
                boxstyle=f"round,pad=0,rounding_size={min(timeline.corner_radius, rect.width / 2)}",
                facecolor=colors[stage],
                edgecolor=BAR_BORDER_COLOR,
                linewidth=1.0,
                zorder=3,
            )
        )

    for c in timeline.connectors:
        path = MplPath(
            [(c.start.x, c.start.y), (c.control1.x, c.control1.y), (c.control2.x, c.control2.y), (c.end.x, c.end.y)],
            [MplPath.MOVETO, MplPath.CURVE4, MplPath.CURVE4, MplPath.CURVE4],
        )
        ax.add_patch(
            PathPatch(path, facecolor="none", edgecolor=to_rgba(BAR_BORDER_COLOR, CONNECTOR_ALPHA), linewidth=1.5, zorder=2)
        )

    for m in result.markers:
        ax.text(m.position * width, height * 1.06, m.label, ha="center", va="top", fontsize=9, color=MUTED_TEXT_COLOR)

    labels = result.labels
    if labels.start_time and labels.end_time:
        ax.text(0.0, height * 1.06, labels.start_time, ha="left", va="top", fontsize=10, color=TEXT_COLOR)
        ax.text(width, height * 1.06, labels.end_time, ha="right", va="top", fontsize=10, color=TEXT_COLOR)

    handles = [
        Patch(facecolor=colors[e.stage], label=f"{e.name} {e.duration_text}") for e in labels.legend
    ]
    if handles:
        leg = ax.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, -0.22),
            ncol=min(len(handles), 4),
            frameon=False,
            fontsize=9,
        )
        for t in leg.get_texts():
            t.set_color(TEXT_COLOR)


def render_circular_axis(
    ax: plt.Axes,
    result: LayoutResult,
    circular: CircularLayout,
    colors: Mapping[SleepStage, RGBA],
) -> None:
    ring = circular.ring
    size = result.config.size
    cx, cy = ring.center.x, ring.center.y

    ax.set_facecolor("none")
    ax.set_xlim(0.0, size)
    ax.set_ylim(size, 0.0)  # screen coordinates: clockwise angles
    ax.set_aspect("equal")
    ax.axis("off")

    def ring_wedge(start: float, end: float, width: float, color) -> Wedge:
        return Wedge((cx, cy), ring.ring_radius + width / 2, start, end, width=width, facecolor=color, edgecolor="none")

    ax.add_patch(ring_wedge(0.0, 360.0, ring.track_width, BACKGROUND_RING_COLOR))

    for bg in circular.background:
        ax.add_patch(ring_wedge(bg.start_angle_deg, bg.end_angle_deg, ring.line_width, BACKGROUND_RING_COLOR))

    for seg in circular.segments:
        if seg.sweep_deg <= 0:
            continue
        ax.add_patch(ring_wedge(seg.start_angle_deg, seg.end_angle_deg, ring.line_width, colors[seg.stage]))

    for cap in circular.caps:
        ax.add_patch(
            Wedge(
                (cap.center.x, cap.center.y),
                cap.radius,
                cap.start_angle_deg,
                cap.end_angle_deg,
                facecolor=colors[cap.stage],
                edgecolor="none",
            )
        )

    for anchor in circular.icon_anchors:
        ax.scatter([anchor.point.x], [anchor.point.y], s=18, color=ICON_COLORS.get(anchor.kind, TEXT_COLOR), zorder=5)

    labels = result.labels
    if labels.total_duration:
        ax.text(cx, cy, labels.total_duration, ha="center", va="center", fontsize=14, color=TEXT_COLOR, fontweight="bold")
    if labels.start_time and labels.end_time:
        ax.text(
            cx,
            cy + size * 0.1,
            f"{labels.start_time} - {labels.end_time}",
            ha="center",
            va="center",
            fontsize=9,
            color=MUTED_TEXT_COLOR,
        )


def render_layout_png(
    *,
    result: LayoutResult,
    colors: Mapping[SleepStage, RGBA],
    output_path: str | Path,
    title: str | None = None,
    dpi: int = 200,
) -> Path:
    """
    Public API: pure renderer.

    Args:
      result: a LayoutResult from ChartAssembler.assemble()
      colors: ChartAssembler.color_overlay(result)
      output_path: where to write the PNG
    """
    cfg = result.config
    if cfg.style is ChartStyle.TIMELINE:
        figsize = (cfg.width / UNITS_PER_INCH + 1.0, cfg.height / UNITS_PER_INCH + 1.2)
    else:
        figsize = (cfg.size / UNITS_PER_INCH + 0.6, cfg.size / UNITS_PER_INCH + 0.6)

    fig = plt.figure(figsize=figsize, facecolor=BG_COLOR)
    ax = fig.add_subplot(1, 1, 1)
    if title:
        ax.set_title(title, fontsize=12, color=TEXT_COLOR, pad=8)

    if result.timeline is not None:
        render_timeline_axis(ax, result, result.timeline, colors)
    elif result.circular is not None:
        render_circular_axis(ax, result, result.circular, colors)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, transparent=False, facecolor=fig.get_facecolor(), bbox_inches="tight", pad_inches=0.25)
    plt.close(fig)
    return output_path
