"""
storytheme: brand-driven, contrast-safe theme resolution for scrolly story pages.
"""

from __future__ import annotations

from storytheme.config import ThemeConfig, load_config
from storytheme.errors import StoryThemeError
from storytheme.theme import ResolvedTheme, resolve_story_theme
from storytheme.version import __version__

__all__ = ["ResolvedTheme", "StoryThemeError", "ThemeConfig", "__version__", "load_config", "resolve_story_theme"]
