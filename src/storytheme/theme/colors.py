from __future__ import annotations

import logging
import math
import re

from storytheme.theme.model import ColorPair


logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

WHITE = "#FFFFFF"
BLACK = "#000000"
FALLBACK_INK = "#111111"
FALLBACK_SURFACE = "#FFFFFF"
FALLBACK_PRIMARY = "#007C7E"

AA_MIN_CONTRAST = 4.5
AA_ADJUST_STEPS = 10
AA_ADJUST_STEP_SIZE = 0.05
LIGHT_LUMINANCE_THRESHOLD = 0.75

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def normalize_hex(raw: object) -> str | None:
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not _HEX_COLOR.match(text):
        return None
    if len(text) == 4:
        text = "#" + "".join(ch * 2 for ch in text[1:])
    return text.upper()


def hex_to_rgb(value: str) -> RGB:
    chunk = value[1:] if value.startswith("#") else value
    if len(chunk) == 3:
        chunk = "".join(ch * 2 for ch in chunk)
    return int(chunk[0:2], 16), int(chunk[2:4], 16), int(chunk[4:6], 16)


def rgb_to_hex(rgb: RGB) -> str:
    return f"#{rgb[0]:02X}{rgb[1]:02X}{rgb[2]:02X}"


def luminance(value: str) -> float:
    r, g, b = [_linearize(channel / 255.0) for channel in hex_to_rgb(value)]
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(left: str, right: str) -> float:
    l1 = luminance(left)
    l2 = luminance(right)
    bright = max(l1, l2)
    dark = min(l1, l2)
    return (bright + 0.05) / (dark + 0.05)


def pair_contrast(pair: ColorPair) -> float:
    return contrast_ratio(pair.background, pair.text)


def adjust_hex(value: str, ratio: float) -> str:
    r, g, b = hex_to_rgb(value)
    if ratio >= 1:
        amount = ratio - 1
        return rgb_to_hex(
            (
                _clamp_channel(r + (255 - r) * amount),
                _clamp_channel(g + (255 - g) * amount),
                _clamp_channel(b + (255 - b) * amount),
            )
        )
    return rgb_to_hex((_clamp_channel(r * ratio), _clamp_channel(g * ratio), _clamp_channel(b * ratio)))


def darken_hex(value: str, factor: float = 0.14) -> str:
    return adjust_hex(value, 1 - factor)


def is_light(value: str, threshold: float = LIGHT_LUMINANCE_THRESHOLD) -> bool:
    return luminance(value) > threshold


def best_foreground(background: str) -> str:
    white = contrast_ratio(background, WHITE)
    ink = contrast_ratio(background, FALLBACK_INK)
    return WHITE if white >= ink else FALLBACK_INK


def ensure_aa_pair(
    background: str,
    preferred_text: str,
    *,
    min_contrast: float = AA_MIN_CONTRAST,
    steps: int = AA_ADJUST_STEPS,
    step_size: float = AA_ADJUST_STEP_SIZE,
) -> ColorPair:
    """Return a background/text pair that meets ``min_contrast``.

    The preferred text is kept when it already passes. Otherwise the text
    switches to white or near-black, and if that is still not enough the
    background is nudged lighter then darker in ``steps`` linear increments.
    Pure black or white is the last resort.
    """
    if contrast_ratio(background, preferred_text) >= min_contrast:
        return ColorPair(background=background, text=preferred_text)

    text = best_foreground(background)
    if contrast_ratio(background, text) >= min_contrast:
        logger.debug("Swapped text %s for %s on %s", preferred_text, text, background)
        return ColorPair(background=background, text=text)

    # Linear scan; lighten is tried before darken at every step.
    for step in range(1, steps + 1):
        amount = step * step_size
        lighter = adjust_hex(background, 1 + amount)
        if contrast_ratio(lighter, text) >= min_contrast:
            logger.debug("Lightened background %s to %s for %s", background, lighter, text)
            return ColorPair(background=lighter, text=text)
        darker = adjust_hex(background, 1 - amount)
        if contrast_ratio(darker, text) >= min_contrast:
            logger.debug("Darkened background %s to %s for %s", background, darker, text)
            return ColorPair(background=darker, text=text)

    fallback = BLACK if text == WHITE else WHITE
    logger.debug("No tonal shift of %s reaches %.2f; using %s", background, min_contrast, fallback)
    return ColorPair(background=fallback, text=text)


def to_rgba(value: str, alpha: float) -> str:
    r, g, b = hex_to_rgb(value)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def _linearize(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def _clamp_channel(value: float) -> int:
    # Round half up.
    return max(0, min(255, math.floor(value + 0.5)))


__all__ = [
    "AA_ADJUST_STEPS",
    "AA_ADJUST_STEP_SIZE",
    "AA_MIN_CONTRAST",
    "BLACK",
    "FALLBACK_INK",
    "FALLBACK_PRIMARY",
    "FALLBACK_SURFACE",
    "LIGHT_LUMINANCE_THRESHOLD",
    "RGB",
    "WHITE",
    "adjust_hex",
    "best_foreground",
    "contrast_ratio",
    "darken_hex",
    "ensure_aa_pair",
    "hex_to_rgb",
    "is_light",
    "luminance",
    "normalize_hex",
    "pair_contrast",
    "rgb_to_hex",
    "to_rgba",
]
