from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from storytheme.theme.model import BrandFont, FontResolution


logger = logging.getLogger(__name__)

GOOGLE_FONT_PREFIX = "gfont:"
GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"
DEFAULT_FONT_WEIGHTS: tuple[int, ...] = (400, 700)

_WHITESPACE = re.compile(r"\s+")
_NO_FONT = FontResolution()


def google_font_url(family: str, weights: Iterable[int] = DEFAULT_FONT_WEIGHTS) -> str:
    unique_weights = sorted(set(weights))
    family_param = _WHITESPACE.sub("+", family.strip())
    weight_param = ";".join(str(weight) for weight in unique_weights)
    return f"{GOOGLE_FONTS_CSS_URL}?family={family_param}:wght@{weight_param}&display=swap"


def pick_font_id(scene_id: str | None, story_id: str | None) -> str | None:
    # An empty scene id still shadows the story id.
    return scene_id if scene_id is not None else story_id


def find_font(fonts: Sequence[BrandFont], font_id: object) -> BrandFont | None:
    if not isinstance(font_id, str):
        return None
    needle = font_id.strip()
    if not needle:
        return None
    for font in fonts:
        if font.uuid == needle or font.id == needle:
            return font
    return None


def resolve_font(
    fonts: Sequence[BrandFont],
    font_id: object,
    *,
    default_weights: Sequence[int] = DEFAULT_FONT_WEIGHTS,
) -> FontResolution:
    if not isinstance(font_id, str):
        return _NO_FONT
    trimmed = font_id.strip()
    if not trimmed:
        return _NO_FONT

    if trimmed.startswith(GOOGLE_FONT_PREFIX):
        family = trimmed[len(GOOGLE_FONT_PREFIX):].strip()
        if not family:
            return _NO_FONT
        return FontResolution(family=family, stylesheet=google_font_url(family, default_weights))

    font = find_font(fonts, trimmed)
    if font is None or not isinstance(font.family, str) or not font.family.strip():
        logger.debug("Brand font %r not found or has no family", trimmed)
        return _NO_FONT

    family = font.family.strip()
    external_url = font.external_url.strip() if isinstance(font.external_url, str) else ""
    if external_url:
        return FontResolution(family=family, stylesheet=external_url)
    if font.provider == "google":
        weights = font.weights or tuple(default_weights)
        return FontResolution(family=family, stylesheet=google_font_url(family, weights))
    return FontResolution(family=family, stylesheet=None)


__all__ = [
    "DEFAULT_FONT_WEIGHTS",
    "GOOGLE_FONTS_CSS_URL",
    "GOOGLE_FONT_PREFIX",
    "find_font",
    "google_font_url",
    "pick_font_id",
    "resolve_font",
]
