from __future__ import annotations

import pytest

from sleep_chart.circular import CircularMode
from sleep_chart.config import ChartConfig, ChartStyle


def test_defaults() -> None:
    cfg = ChartConfig()
    assert cfg.style is ChartStyle.TIMELINE
    assert cfg.circular_mode is CircularMode.THRESHOLD
    assert cfg.row_count == 5
    assert cfg.marker_count == 3
    assert cfg.threshold_hours == 9.0
    assert cfg.icon_padding_deg == 2.0


def test_plain_strings_become_enums() -> None:
    cfg = ChartConfig(style="circular", circular_mode="clock")
    assert cfg.style is ChartStyle.CIRCULAR
    assert cfg.circular_mode is CircularMode.CLOCK


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -1},
        {"row_count": 4},
        {"marker_count": -1},
        {"threshold_hours": 0},
        {"min_bar_width": -0.5},
        {"line_width": 100, "size": 160},
        {"style": "pie"},
    ],
)
def test_invalid_values_are_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        ChartConfig(**kwargs)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLEEP_CHART_STYLE", "Circular")
    monkeypatch.setenv("SLEEP_CHART_CIRCULAR_MODE", "clock")
    monkeypatch.setenv("SLEEP_CHART_THRESHOLD_HOURS", "8")
    monkeypatch.setenv("SLEEP_CHART_MARKER_COUNT", "5")
    monkeypatch.delenv("SLEEP_CHART_DISPLAY_TZ", raising=False)

    cfg = ChartConfig.from_env(load_dotenv_file=False)

    assert cfg.style is ChartStyle.CIRCULAR
    assert cfg.circular_mode is CircularMode.CLOCK
    assert cfg.threshold_hours == 8.0
    assert cfg.marker_count == 5
    assert cfg.display_tz is None
    assert cfg.width == 320.0


def test_from_env_reads_dotenv_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("SLEEP_CHART_SIZE=200\nSLEEP_CHART_LINE_WIDTH=20\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SLEEP_CHART_SIZE", raising=False)
    monkeypatch.delenv("SLEEP_CHART_LINE_WIDTH", raising=False)

    cfg = ChartConfig.from_env()

    assert cfg.size == 200.0
    assert cfg.line_width == 20.0
    monkeypatch.delenv("SLEEP_CHART_SIZE", raising=False)
    monkeypatch.delenv("SLEEP_CHART_LINE_WIDTH", raising=False)
