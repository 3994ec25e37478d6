from __future__ import annotations

from .loader import CONFIG_FILENAME, ConfigSource, load_config, resolve_config
from .model import ContrastConfig, FontConfig, PaletteConfig, StoryLayoutConfig, ThemeConfig

__all__ = [
    "CONFIG_FILENAME",
    "ConfigSource",
    "ContrastConfig",
    "FontConfig",
    "PaletteConfig",
    "StoryLayoutConfig",
    "ThemeConfig",
    "load_config",
    "resolve_config",
]
