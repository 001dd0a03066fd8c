"""
markers.py

What this file does:
  - Produces the interior time-axis labels for a session: `count` markers at
    i / (count + 1) of the span, each labelled with the clock time there.

This file does NOT:
  - Decide where the axis is drawn (positions are fractions, 0..1)
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import List, Optional, Sequence

from .labels import ClockTimeFormatter, TimeFormatter
from .models import SleepInterval, TimeMarker
from .time_utils import as_zone

logger = logging.getLogger(__name__)

DEFAULT_MARKER_COUNT = 3


def generate_time_markers(
    intervals: Sequence[SleepInterval],
    count: int = DEFAULT_MARKER_COUNT,
    *,
    time_formatter: Optional[TimeFormatter] = None,
) -> List[TimeMarker]:
    if count < 0:
        raise ValueError(f"marker count must be >= 0, got {count}")
    if not intervals or count == 0:
        return []

    first = intervals[0]
    span_s = (intervals[-1].end_utc - first.start_utc).total_seconds()
    if span_s <= 0:
        logger.debug("Null span (%d intervals); no time markers", len(intervals))
        return []

    fmt = time_formatter or ClockTimeFormatter()
    markers: List[TimeMarker] = []
    for i in range(1, count + 1):
        fraction = i / (count + 1)
        # Step in UTC, then show the instant in the zone the session started in.
        at = as_zone(first.start_utc + timedelta(seconds=fraction * span_s), first.start.tzinfo)
        markers.append(TimeMarker(label=fmt.format_time(at), position=fraction))
    return markers
