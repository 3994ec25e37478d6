from __future__ import annotations

from .base import StoryThemeError
from .guidance import build_guidance_message, parse_guidance

__all__ = ["StoryThemeError", "build_guidance_message", "parse_guidance"]
