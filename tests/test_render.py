from __future__ import annotations

import pathlib

import pytest

from chart_render import render_layout_png
from sleep_chart.assembler import ChartAssembler
from sleep_chart.config import ChartConfig
from sleep_chart.models import SleepStage

PNG_MAGIC = b"\x89PNG"


@pytest.mark.parametrize(
    "config",
    [
        ChartConfig(style="timeline"),
        ChartConfig(style="circular", circular_mode="threshold"),
        ChartConfig(style="circular", circular_mode="clock"),
    ],
)
def test_render_writes_png(tmp_path: pathlib.Path, make_interval, config: ChartConfig) -> None:
    intervals = [
        make_interval(SleepStage.IN_BED, 0, 15),
        make_interval(SleepStage.CORE, 15, 120),
        make_interval(SleepStage.AWAKE, 120, 120),
        make_interval(SleepStage.DEEP, 120, 240),
        make_interval(SleepStage.REM, 240, 360),
    ]
    assembler = ChartAssembler()
    result = assembler.assemble(intervals, config)

    out = render_layout_png(
        result=result,
        colors=assembler.color_overlay(result),
        output_path=tmp_path / "nested" / "chart.png",
        title="Sleep Stages",
        dpi=50,
    )

    assert out.exists()
    assert out.read_bytes()[:4] == PNG_MAGIC


def test_render_empty_result(tmp_path: pathlib.Path) -> None:
    assembler = ChartAssembler()
    result = assembler.assemble([], ChartConfig(style="circular"))
    out = render_layout_png(result=result, colors={}, output_path=tmp_path / "empty.png", dpi=50)
    assert out.exists()
