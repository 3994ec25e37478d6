from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ContrastConfig:
    min_ratio: float = 4.5
    adjust_steps: int = 10
    adjust_step_size: float = 0.05
    light_threshold: float = 0.75


@dataclass
class PaletteConfig:
    divider_alpha: float = 0.18
    primary_shade_darken: float = 0.14


@dataclass
class FontConfig:
    default_weights: tuple[int, ...] = (400, 700)


@dataclass
class StoryLayoutConfig:
    default_gap_dvh: float = 150
    default_tail_dvh: float = 30


@dataclass
class ThemeConfig:
    contrast: ContrastConfig = field(default_factory=ContrastConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    fonts: FontConfig = field(default_factory=FontConfig)
    layout: StoryLayoutConfig = field(default_factory=StoryLayoutConfig)


__all__ = ["ContrastConfig", "FontConfig", "PaletteConfig", "StoryLayoutConfig", "ThemeConfig"]
