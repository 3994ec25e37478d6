from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


STORY_THEME_COLOR_KEYS: tuple[str, ...] = (
    "visual_background",
    "visual_text",
    "narrative_background",
    "narrative_text",
    "cta_background",
    "cta_text",
)

LEGACY_COLOR_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "visual_background": "background",
        "narrative_background": "background",
        "visual_text": "text",
        "narrative_text": "text",
        "cta_background": "button",
    }
)


@dataclass(frozen=True)
class CustomColor:
    hex: str | None = None


@dataclass(frozen=True)
class BrandColor:
    slot_key: str | None = None


@dataclass(frozen=True)
class UnsupportedColor:
    """A reference that is present but cannot resolve (unknown source or not a mapping)."""

    source: str | None = None


ColorRef = CustomColor | BrandColor | UnsupportedColor


@dataclass(frozen=True)
class ThemeOverride:
    colors: Mapping[str, ColorRef] = field(default_factory=dict)
    legacy_colors: Mapping[str, ColorRef] = field(default_factory=dict)
    heading_font_id: str | None = None
    body_font_id: str | None = None


@dataclass(frozen=True)
class BrandSlot:
    key: str
    hex: str


@dataclass(frozen=True)
class BrandFont:
    id: str | None = None
    uuid: str | None = None
    family: str | None = None
    provider: str | None = None
    external_url: str | None = None
    weights: tuple[int, ...] = ()


@dataclass(frozen=True)
class Brand:
    slug: str | None = None
    css_path: str | None = None
    slots: tuple[BrandSlot, ...] = ()
    color_tokens: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class ColorPair:
    background: str
    text: str


@dataclass(frozen=True)
class SemanticDefaults:
    visual_background: str
    visual_text: str
    narrative_background: str
    narrative_text: str
    cta_background: str
    cta_text: str
    brand_primary: str

    def for_role(self, role: str) -> str:
        return getattr(self, role)


@dataclass(frozen=True)
class FontResolution:
    family: str | None = None
    stylesheet: str | None = None


@dataclass(frozen=True)
class ResolvedTheme:
    css_vars: Mapping[str, str]
    stylesheets: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, object]:
        return {"cssVars": dict(self.css_vars), "stylesheets": list(self.stylesheets)}


__all__ = [
    "Brand",
    "BrandColor",
    "BrandFont",
    "BrandSlot",
    "ColorPair",
    "ColorRef",
    "CustomColor",
    "FontResolution",
    "LEGACY_COLOR_KEYS",
    "ResolvedTheme",
    "STORY_THEME_COLOR_KEYS",
    "SemanticDefaults",
    "ThemeOverride",
    "UnsupportedColor",
]
