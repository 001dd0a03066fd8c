"""
stages.py

What this file does:
  - Reduces an interval list into per-stage cumulative durations (StageTotals).
  - Reports which stages are present, in display order.

Key idea:
  - One pass, no deduplication. Overlapping intervals are summed independently;
    cleaning them up is the caller's job.

This file does NOT:
  - Sort or merge intervals
  - Render anything
"""

from __future__ import annotations

from typing import Dict, Iterable

from .models import SleepInterval, SleepStage, StageTotals


def aggregate_stages(intervals: Iterable[SleepInterval]) -> StageTotals:
    sums: Dict[SleepStage, float] = {}
    for interval in intervals:
        sums[interval.stage] = sums.get(interval.stage, 0.0) + interval.duration

    present = tuple(sorted(sums))
    durations = {stage: sums[stage] for stage in present if sums[stage] > 0}
    return StageTotals(durations=durations, present=present)
