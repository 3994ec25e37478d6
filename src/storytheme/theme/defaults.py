from __future__ import annotations

from typing import Sequence

from storytheme.config.model import ContrastConfig
from storytheme.theme.colors import (
    FALLBACK_INK,
    FALLBACK_PRIMARY,
    FALLBACK_SURFACE,
    WHITE,
    contrast_ratio,
    ensure_aa_pair,
    is_light,
    luminance,
    pair_contrast,
)
from storytheme.theme.model import Brand, BrandSlot, ColorPair, SemanticDefaults
from storytheme.theme.slots import find_slot_by_hints, token_primary


PRIMARY_HINTS: tuple[str, ...] = ("brand", "primary", "accent")
TEXT_HINTS: tuple[str, ...] = ("ink", "text", "support-1", "neutral-900", "black")
SURFACE_HINTS: tuple[str, ...] = ("surface", "paper", "background", "canvas", "neutral", "white")
SECONDARY_HINTS: tuple[str, ...] = ("secondary",)
ACCENT_HINTS: tuple[str, ...] = ("accent",)


def semantic_defaults(
    brand: Brand | None,
    slots: Sequence[BrandSlot],
    contrast: ContrastConfig | None = None,
) -> SemanticDefaults:
    contrast = contrast or ContrastConfig()
    primary = token_primary(brand) or _slot_hex(slots, PRIMARY_HINTS) or FALLBACK_PRIMARY
    text_candidate = _slot_hex(slots, TEXT_HINTS) or FALLBACK_INK
    surface = pick_surface(slots, text_candidate, contrast)

    text_pair = aa_pair(surface, text_candidate, contrast)
    cta_pair = pick_cta_pair(
        [primary, _slot_hex(slots, SECONDARY_HINTS), _slot_hex(slots, ACCENT_HINTS), FALLBACK_PRIMARY],
        contrast,
    )
    return SemanticDefaults(
        visual_background=text_pair.background,
        visual_text=text_pair.text,
        narrative_background=text_pair.background,
        narrative_text=text_pair.text,
        cta_background=cta_pair.background,
        cta_text=cta_pair.text,
        brand_primary=primary,
    )


def pick_surface(slots: Sequence[BrandSlot], text_candidate: str, contrast: ContrastConfig) -> str:
    """Lightest surface-like brand slot that is light and readable under the text candidate."""
    candidates: list[str] = []
    for slot in slots:
        key = slot.key.lower()
        if any(hint in key for hint in SURFACE_HINTS) and slot.hex not in candidates:
            candidates.append(slot.hex)
    candidates.sort(key=luminance, reverse=True)
    candidates.append(FALLBACK_SURFACE)
    for candidate in candidates:
        if not is_light(candidate, contrast.light_threshold):
            continue
        if contrast_ratio(candidate, text_candidate) >= contrast.min_ratio:
            return candidate
    return FALLBACK_SURFACE


def pick_cta_pair(candidates: Sequence[str | None], contrast: ContrastConfig) -> ColorPair:
    present = [candidate for candidate in candidates if candidate]
    pair = aa_pair(present[0], WHITE, contrast)
    if pair_contrast(pair) >= contrast.min_ratio:
        return pair
    for candidate in present:
        next_pair = aa_pair(candidate, WHITE, contrast)
        if pair_contrast(next_pair) >= contrast.min_ratio:
            return next_pair
    return pair


def aa_pair(background: str, text: str, contrast: ContrastConfig) -> ColorPair:
    return ensure_aa_pair(
        background,
        text,
        min_contrast=contrast.min_ratio,
        steps=contrast.adjust_steps,
        step_size=contrast.adjust_step_size,
    )


def _slot_hex(slots: Sequence[BrandSlot], hints: Sequence[str]) -> str | None:
    slot = find_slot_by_hints(slots, hints)
    return slot.hex if slot else None


__all__ = [
    "ACCENT_HINTS",
    "PRIMARY_HINTS",
    "SECONDARY_HINTS",
    "SURFACE_HINTS",
    "TEXT_HINTS",
    "aa_pair",
    "pick_cta_pair",
    "pick_surface",
    "semantic_defaults",
]
