from __future__ import annotations

from .colors import contrast_ratio, ensure_aa_pair, normalize_hex
from .model import (
    Brand,
    BrandColor,
    BrandFont,
    BrandSlot,
    ColorPair,
    CustomColor,
    ResolvedTheme,
    STORY_THEME_COLOR_KEYS,
    ThemeOverride,
    UnsupportedColor,
)
from .overrides import parse_brand, parse_brand_fonts, parse_theme_override
from .resolver import resolve_story_theme

__all__ = [
    "Brand",
    "BrandColor",
    "BrandFont",
    "BrandSlot",
    "ColorPair",
    "CustomColor",
    "ResolvedTheme",
    "STORY_THEME_COLOR_KEYS",
    "ThemeOverride",
    "UnsupportedColor",
    "contrast_ratio",
    "ensure_aa_pair",
    "normalize_hex",
    "parse_brand",
    "parse_brand_fonts",
    "parse_theme_override",
    "resolve_story_theme",
]
