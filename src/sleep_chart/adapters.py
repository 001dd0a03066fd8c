"""
adapters.py

What this file does:
  - Converts raw records from health-data exports into SleepInterval lists:
      * Garmin SleepIntraday rows (time + SleepStageLevel + SleepStageSeconds)
      * Apple Health sleep-analysis records (value + startDate + endDate)
  - Offers an explicit, opt-in sort for callers whose source is unordered.

Key idea:
  - The layout engine only ever sees SleepInterval. Anything platform-specific
    stays here and can be skipped entirely.

This file does NOT:
  - Query databases or APIs (rows are already fetched)
  - Merge overlapping intervals
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Iterable, List, Mapping, Sequence

from .models import SleepInterval, SleepStage
from .time_utils import parse_time_utc

logger = logging.getLogger(__name__)

# Garmin SleepStageLevel (0=Deep, 1=Light, 2=REM, 3=Awake)
GARMIN_STAGE_LEVELS = {
    0: SleepStage.DEEP,
    1: SleepStage.CORE,
    2: SleepStage.REM,
    3: SleepStage.AWAKE,
}

# Garmin rows without a duration on the final point cover ~4 minutes
GARMIN_LAST_POINT_SECONDS = 240.0

HEALTHKIT_STAGE_VALUES = {
    "HKCategoryValueSleepAnalysisInBed": SleepStage.IN_BED,
    "HKCategoryValueSleepAnalysisAwake": SleepStage.AWAKE,
    "HKCategoryValueSleepAnalysisAsleepREM": SleepStage.REM,
    "HKCategoryValueSleepAnalysisAsleepCore": SleepStage.CORE,
    "HKCategoryValueSleepAnalysisAsleepDeep": SleepStage.DEEP,
    "HKCategoryValueSleepAnalysisAsleepUnspecified": SleepStage.UNSPECIFIED,
    # Pre-iOS 16 exports
    "HKCategoryValueSleepAnalysisAsleep": SleepStage.UNSPECIFIED,
}


def sort_intervals(intervals: Iterable[SleepInterval]) -> List[SleepInterval]:
    """Stable sort by start time. The layout engine never does this on its own."""
    return sorted(intervals, key=lambda i: i.start_utc)


def _garmin_stage(level: Any) -> SleepStage | None:
    try:
        return GARMIN_STAGE_LEVELS.get(int(float(level)))
    except (TypeError, ValueError):
        return None


def intervals_from_garmin_rows(
    rows: Sequence[Mapping[str, Any]],
    *,
    time_key: str = "time",
    stage_key: str = "SleepStageLevel",
    dur_key: str = "SleepStageSeconds",
) -> List[SleepInterval]:
    pts = [r for r in rows if r.get(stage_key) is not None and r.get(time_key) is not None]
    pts.sort(key=lambda r: parse_time_utc(r[time_key]))
    starts = [parse_time_utc(r[time_key]) for r in pts]

    out: List[SleepInterval] = []
    for i, (row, start) in enumerate(zip(pts, starts)):
        stage = _garmin_stage(row[stage_key])
        if stage is None:
            logger.debug("Skipping Garmin row at %s with unknown level %r", row[time_key], row[stage_key])
            continue

        d = row.get(dur_key)
        if d is not None:
            seconds = float(d)
        elif i < len(pts) - 1:
            seconds = (starts[i + 1] - start).total_seconds()
        else:
            seconds = GARMIN_LAST_POINT_SECONDS

        out.append(SleepInterval(stage, start, start + timedelta(seconds=seconds)))

    logger.debug("Converted %d Garmin rows into %d intervals", len(rows), len(out))
    return out


def intervals_from_healthkit_records(
    records: Sequence[Mapping[str, Any]],
    *,
    value_key: str = "value",
    start_key: str = "startDate",
    end_key: str = "endDate",
) -> List[SleepInterval]:
    out: List[SleepInterval] = []
    for rec in records:
        stage = HEALTHKIT_STAGE_VALUES.get(str(rec.get(value_key)))
        if stage is None:
            logger.debug("Skipping HealthKit record with value %r", rec.get(value_key))
            continue
        out.append(SleepInterval(stage, parse_time_utc(rec[start_key]), parse_time_utc(rec[end_key])))
    return out
