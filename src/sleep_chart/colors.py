"""
colors.py

What this file does:
  - Color palettes for sleep stages, swappable at construction time.
  - Every palette resolves to an RGBA tuple via matplotlib, so a painter can use
    the result directly.

This file does NOT:
  - Influence layout. Layout results carry stages, never colors.
"""

from __future__ import annotations

from typing import Dict, Mapping, Protocol, Tuple

from matplotlib.colors import to_rgba

from .models import SleepStage

RGBA = Tuple[float, float, float, float]

# Dimmed ring behind the arc / untracked clock-face time
BACKGROUND_RING_COLOR = to_rgba("gray", alpha=0.2)
BAR_BORDER_COLOR = "#9DC6E2"
CONNECTOR_ALPHA = 0.4


class ColorResolver(Protocol):
    def color(self, stage: SleepStage) -> RGBA: ...


class PaletteColorResolver:
    """Resolves stages through a {stage: matplotlib color spec} table."""

    palette: Mapping[SleepStage, object] = {}

    def __init__(self, palette: Mapping[SleepStage, object] | None = None) -> None:
        if palette is not None:
            self.palette = dict(palette)
        missing = [s.name for s in SleepStage if s not in self.palette]
        if missing:
            raise ValueError(f"Palette is missing stages: {', '.join(missing)}")

    def color(self, stage: SleepStage) -> RGBA:
        return to_rgba(self.palette[stage])


class DefaultColorResolver(PaletteColorResolver):
    palette = {
        SleepStage.AWAKE: "orange",
        SleepStage.REM: "cyan",
        SleepStage.CORE: "blue",
        SleepStage.DEEP: "indigo",
        SleepStage.UNSPECIFIED: "purple",
        SleepStage.IN_BED: "gray",
    }


class AppleColorResolver(PaletteColorResolver):
    """Close to the Health app's sleep chart."""

    palette = {
        SleepStage.AWAKE: (1.0, 0.6, 0.0),
        SleepStage.REM: (0.0, 0.7, 1.0),
        SleepStage.CORE: (0.2, 0.8, 0.4),
        SleepStage.DEEP: (0.2, 0.4, 0.9),
        SleepStage.UNSPECIFIED: (0.6, 0.4, 0.9),
        SleepStage.IN_BED: (0.7, 0.7, 0.7),
    }


class PastelColorResolver(PaletteColorResolver):
    palette = {
        SleepStage.AWAKE: (1.0, 0.8, 0.6),
        SleepStage.REM: (0.7, 0.9, 1.0),
        SleepStage.CORE: (0.7, 0.95, 0.8),
        SleepStage.DEEP: (0.6, 0.8, 1.0),
        SleepStage.UNSPECIFIED: (0.9, 0.8, 1.0),
        SleepStage.IN_BED: (0.9, 0.9, 0.9),
    }


class HighContrastColorResolver(PaletteColorResolver):
    palette = {
        SleepStage.AWAKE: "red",
        SleepStage.REM: "blue",
        SleepStage.CORE: "green",
        SleepStage.DEEP: "purple",
        SleepStage.UNSPECIFIED: "orange",
        SleepStage.IN_BED: "gray",
    }


class MappingColorResolver:
    """Per-stage overrides on top of another resolver."""

    def __init__(self, overrides: Mapping[SleepStage, object], fallback: ColorResolver | None = None) -> None:
        self._overrides: Dict[SleepStage, RGBA] = {stage: to_rgba(c) for stage, c in overrides.items()}
        self._fallback = fallback or DefaultColorResolver()

    def color(self, stage: SleepStage) -> RGBA:
        if stage in self._overrides:
            return self._overrides[stage]
        return self._fallback.color(stage)


COLOR_RESOLVERS = {
    "default": DefaultColorResolver,
    "apple": AppleColorResolver,
    "pastel": PastelColorResolver,
    "high_contrast": HighContrastColorResolver,
}


def resolve_color_resolver(name: str) -> ColorResolver:
    try:
        return COLOR_RESOLVERS[name.strip().lower()]()
    except KeyError:
        raise ValueError(f"Unknown color palette {name!r}; choose from {', '.join(COLOR_RESOLVERS)}") from None
