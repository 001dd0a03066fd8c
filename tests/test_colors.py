from __future__ import annotations

import pytest

from sleep_chart.colors import (
    COLOR_RESOLVERS,
    DefaultColorResolver,
    MappingColorResolver,
    PaletteColorResolver,
    resolve_color_resolver,
)
from sleep_chart.models import SleepStage


@pytest.mark.parametrize("name", sorted(COLOR_RESOLVERS))
def test_every_palette_covers_every_stage(name: str) -> None:
    resolver = resolve_color_resolver(name)
    for stage in SleepStage:
        rgba = resolver.color(stage)
        assert len(rgba) == 4
        assert all(0.0 <= c <= 1.0 for c in rgba)


def test_palettes_distinguish_sleep_stages() -> None:
    resolver = DefaultColorResolver()
    colors = {resolver.color(s) for s in SleepStage}
    assert len(colors) == len(SleepStage)


def test_unknown_palette_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown color palette"):
        resolve_color_resolver("neon")


def test_palette_lookup_is_case_insensitive() -> None:
    assert resolve_color_resolver(" Apple ").color(SleepStage.AWAKE) == (1.0, 0.6, 0.0, 1.0)


def test_incomplete_palette_is_rejected() -> None:
    with pytest.raises(ValueError, match="missing stages"):
        PaletteColorResolver({SleepStage.AWAKE: "red"})


def test_mapping_overrides_fall_back() -> None:
    resolver = MappingColorResolver({SleepStage.DEEP: "#000000"})
    assert resolver.color(SleepStage.DEEP) == (0.0, 0.0, 0.0, 1.0)
    assert resolver.color(SleepStage.AWAKE) == DefaultColorResolver().color(SleepStage.AWAKE)
