from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from storytheme.theme.colors import normalize_hex
from storytheme.theme.model import (
    LEGACY_COLOR_KEYS,
    STORY_THEME_COLOR_KEYS,
    Brand,
    BrandColor,
    BrandFont,
    BrandSlot,
    ColorRef,
    CustomColor,
    ThemeOverride,
    UnsupportedColor,
)
from storytheme.theme.slots import find_slot_by_key


logger = logging.getLogger(__name__)


def parse_color_ref(raw: object) -> ColorRef | None:
    if raw is None:
        return None
    if isinstance(raw, (CustomColor, BrandColor, UnsupportedColor)):
        return raw
    if not isinstance(raw, Mapping):
        return UnsupportedColor()
    source = raw.get("source")
    if source == "custom":
        hex_value = raw.get("hex")
        return CustomColor(hex=hex_value if isinstance(hex_value, str) else None)
    if source == "brand":
        slot_key = raw.get("slot_key")
        return BrandColor(slot_key=slot_key if isinstance(slot_key, str) else None)
    return UnsupportedColor(source=source if isinstance(source, str) else None)


def parse_theme_override(raw: object) -> ThemeOverride:
    """Normalize a story or scene theme payload.

    Both the semantic keys and the legacy ``background``/``text``/``button``
    keys are read from ``colors``. Legacy values are mapped onto the semantic
    roles here, so the cascade only ever sees one shape.
    """
    if isinstance(raw, ThemeOverride):
        return raw
    if not isinstance(raw, Mapping):
        raw = {}

    colors: dict[str, ColorRef] = {}
    legacy_colors: dict[str, ColorRef] = {}
    raw_colors = raw.get("colors")
    if isinstance(raw_colors, Mapping):
        for role in STORY_THEME_COLOR_KEYS:
            ref = parse_color_ref(raw_colors.get(role))
            if ref is not None:
                colors[role] = ref
        for role, legacy_key in LEGACY_COLOR_KEYS.items():
            ref = parse_color_ref(raw_colors.get(legacy_key))
            if ref is not None:
                legacy_colors[role] = ref

    heading_font_id: str | None = None
    body_font_id: str | None = None
    typography = raw.get("typography")
    if isinstance(typography, Mapping):
        heading_font_id = _optional_str(typography.get("heading_font_id"))
        body_font_id = _optional_str(typography.get("body_font_id"))

    return ThemeOverride(
        colors=MappingProxyType(colors),
        legacy_colors=MappingProxyType(legacy_colors),
        heading_font_id=heading_font_id,
        body_font_id=body_font_id,
    )


def parse_brand(raw: object) -> Brand | None:
    if raw is None or isinstance(raw, Brand):
        return raw
    if not isinstance(raw, Mapping):
        return None

    slots: list[BrandSlot] = []
    for entry in _list_at(raw, "settings", "colors", "slots") or ():
        if not isinstance(entry, Mapping):
            continue
        key = entry.get("key")
        hex_value = entry.get("hex")
        if isinstance(key, str) and isinstance(hex_value, str):
            slots.append(BrandSlot(key=key, hex=hex_value))

    tokens = raw.get("tokens")
    color_tokens = tokens.get("color") if isinstance(tokens, Mapping) else None

    return Brand(
        slug=_optional_str(raw.get("slug")),
        css_path=_optional_str(raw.get("css_path")),
        slots=tuple(slots),
        color_tokens=dict(color_tokens) if isinstance(color_tokens, Mapping) else {},
    )


def parse_brand_fonts(raw: object) -> tuple[BrandFont, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    fonts: list[BrandFont] = []
    for entry in raw:
        if isinstance(entry, BrandFont):
            fonts.append(entry)
            continue
        if not isinstance(entry, Mapping):
            continue
        weights = entry.get("weights")
        fonts.append(
            BrandFont(
                id=_optional_str(entry.get("id")),
                uuid=_optional_str(entry.get("uuid")),
                family=_optional_str(entry.get("family")),
                provider=_optional_str(entry.get("provider")),
                external_url=_optional_str(entry.get("external_url")),
                weights=tuple(
                    weight
                    for weight in (weights if isinstance(weights, (list, tuple)) else ())
                    if isinstance(weight, int) and not isinstance(weight, bool)
                ),
            )
        )
    return tuple(fonts)


def cascade_color(scene: ThemeOverride, story: ThemeOverride, role: str) -> ColorRef | None:
    for layer in (scene.colors, story.colors, scene.legacy_colors, story.legacy_colors):
        ref = layer.get(role)
        if ref is not None:
            return ref
    return None


def resolve_color_ref(ref: ColorRef | None, slots: Sequence[BrandSlot]) -> str | None:
    if isinstance(ref, CustomColor):
        return normalize_hex(ref.hex)
    if isinstance(ref, BrandColor):
        slot = find_slot_by_key(slots, ref.slot_key)
        if slot is None:
            logger.debug("Brand slot %r not found", ref.slot_key)
            return None
        return slot.hex
    return None


def _list_at(value: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    if isinstance(value, (list, tuple)):
        return value
    return None


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


__all__ = [
    "cascade_color",
    "parse_brand",
    "parse_brand_fonts",
    "parse_color_ref",
    "parse_theme_override",
    "resolve_color_ref",
]
