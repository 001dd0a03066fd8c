#!/usr/bin/env python3
"""
demo.py

Loads sample Garmin intraday stage rows from:
  data/Demo_SleepIntraday.jsonl

Then:
- converts them into sleep intervals (sleep_chart.adapters)
- lays them out as a timeline and as a circular chart (sleep_chart.assembler)
- prints the summary labels to stdout
- writes both PNGs to exports/charts/

Run (host python, after `pip install -e .`):
  python src/demo.py --mode clock --palette apple
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List

from sleep_chart.adapters import intervals_from_garmin_rows
from sleep_chart.assembler import ChartAssembler, LayoutResult
from sleep_chart.colors import COLOR_RESOLVERS, resolve_color_resolver
from sleep_chart.config import ChartConfig, ChartStyle
from sleep_chart.circular import CircularMode
from sleep_chart.labels import ClockTimeFormatter
from sleep_chart.logging_setup import configure_logging

from chart_render import render_layout_png

logger = logging.getLogger("demo")

DEFAULT_JSONL = Path("data") / "Demo_SleepIntraday.jsonl"


def repo_root_from_src_file(src_file: Path) -> Path:
    """Assumes this file lives in <repo>/src/ and returns <repo>."""
    return src_file.resolve().parents[1]


def iter_jsonl(path: Path) -> Iterable[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                raise RuntimeError(f"Invalid JSON on line {line_no} in {path}") from e


def summary_text(result: LayoutResult) -> str:
    labels = result.labels
    if result.is_empty or labels.start_time is None:
        return "No sleep recorded."
    lines: List[str] = [f"Slept {labels.total_duration} ({labels.start_time} - {labels.end_time})"]
    for entry in labels.legend:
        lines.append(f"  {entry.name:<8} {entry.duration_text}")
    return "\n".join(lines)


def main() -> None:
    p = argparse.ArgumentParser(description="Lay out the demo night and write timeline + circular PNGs.")
    p.add_argument("--data", type=Path, default=None, help="Garmin SleepIntraday JSONL file.")
    p.add_argument("--mode", choices=[m.value for m in CircularMode], default=None, help="Circular angle mapping.")
    p.add_argument("--palette", choices=sorted(COLOR_RESOLVERS), default="default", help="Stage color palette.")
    p.add_argument("--display-tz", type=str, default=None, help="Timezone for clock labels and the 24h dial.")
    p.add_argument("--out-dir", type=Path, default=None, help="Where to write the PNGs.")
    p.add_argument("--log-level", type=str, default=os.getenv("LOG_LEVEL", "INFO"))
    args = p.parse_args()

    configure_logging(args.log_level)

    root = repo_root_from_src_file(Path(__file__))
    data_path = args.data or Path(os.getenv("DEMO_SLEEP_INTRADAY_JSONL", str(root / DEFAULT_JSONL)))
    if not data_path.exists():
        raise SystemExit(
            f"Could not find demo file: {data_path}\n"
            f"Expected default: {DEFAULT_JSONL}\n"
            f"Tip: put Demo_SleepIntraday.jsonl in the repo's data/ folder."
        )

    intervals = intervals_from_garmin_rows(list(iter_jsonl(data_path)))
    if not intervals:
        raise SystemExit(f"No stage rows found in {data_path}")
    logger.info("Loaded %d intervals from %s", len(intervals), data_path)

    base = ChartConfig.from_env()
    overrides: Dict[str, Any] = {}
    if args.mode:
        overrides["circular_mode"] = CircularMode(args.mode)
    if args.display_tz:
        overrides["display_tz"] = args.display_tz
    base = replace(base, **overrides)

    assembler = ChartAssembler(
        color_resolver=resolve_color_resolver(args.palette),
        time_formatter=ClockTimeFormatter(base.display_tz),
    )
    out_dir = args.out_dir or root / "exports" / "charts"

    print("\n=== SUMMARY (sample data) ===\n")
    for style in ChartStyle:
        result = assembler.assemble(intervals, replace(base, style=style))
        if style is ChartStyle.TIMELINE:
            print(summary_text(result))
        out_path = render_layout_png(
            result=result,
            colors=assembler.color_overlay(result),
            output_path=out_dir / f"sleep_{style.value}.png",
            title="Sleep Stages",
        )
        print("Wrote:", out_path)


if __name__ == "__main__":
    main()
