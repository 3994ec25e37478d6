from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Sequence

from storytheme.config.model import ThemeConfig
from storytheme.theme.colors import darken_hex, to_rgba
from storytheme.theme.defaults import aa_pair, semantic_defaults
from storytheme.theme.fonts import pick_font_id, resolve_font
from storytheme.theme.model import (
    STORY_THEME_COLOR_KEYS,
    BrandSlot,
    ColorPair,
    FontResolution,
    ResolvedTheme,
    SemanticDefaults,
    ThemeOverride,
)
from storytheme.theme.overrides import (
    cascade_color,
    parse_brand,
    parse_brand_fonts,
    parse_theme_override,
    resolve_color_ref,
)
from storytheme.theme.slots import brand_slots


logger = logging.getLogger(__name__)


def resolve_story_theme(
    effective_brand: object = None,
    story_theme: object = None,
    scene_theme_overrides: object = None,
    brand_fonts: object = None,
    *,
    config: ThemeConfig | None = None,
) -> ResolvedTheme:
    """Resolve CSS variables and stylesheets for one story scene.

    Inputs may be raw JSON-like mappings or already parsed model objects.
    Scene overrides win over story overrides, which win over legacy-shaped
    values, which win over defaults derived from the brand palette. Every
    background/text pair is checked for contrast before it is emitted.
    """
    config = config or ThemeConfig()
    brand = parse_brand(effective_brand)
    story = parse_theme_override(story_theme)
    scene = parse_theme_override(scene_theme_overrides)
    fonts = parse_brand_fonts(brand_fonts)

    slots = brand_slots(brand)
    defaults = semantic_defaults(brand, slots, config.contrast)
    colors = _resolve_role_colors(scene, story, slots, defaults)

    visual = aa_pair(colors["visual_background"], colors["visual_text"], config.contrast)
    narrative = aa_pair(colors["narrative_background"], colors["narrative_text"], config.contrast)
    cta = aa_pair(colors["cta_background"], colors["cta_text"], config.contrast)

    weights = config.fonts.default_weights
    heading = resolve_font(fonts, pick_font_id(scene.heading_font_id, story.heading_font_id), default_weights=weights)
    body = resolve_font(fonts, pick_font_id(scene.body_font_id, story.body_font_id), default_weights=weights)

    brand_primary = defaults.brand_primary or cta.background
    css_vars = _build_css_vars(visual, narrative, cta, brand_primary, heading, body, config)
    stylesheets = _collect_stylesheets(brand.css_path if brand else None, heading.stylesheet, body.stylesheet)
    return ResolvedTheme(css_vars=MappingProxyType(css_vars), stylesheets=stylesheets)


def _resolve_role_colors(
    scene: ThemeOverride,
    story: ThemeOverride,
    slots: Sequence[BrandSlot],
    defaults: SemanticDefaults,
) -> dict[str, str]:
    colors: dict[str, str] = {}
    for role in STORY_THEME_COLOR_KEYS:
        ref = cascade_color(scene, story, role)
        value = resolve_color_ref(ref, slots)
        if value is None:
            if ref is not None:
                logger.debug("Theme color %s did not resolve; using default", role)
            value = defaults.for_role(role)
        colors[role] = value
    return colors


def _build_css_vars(
    visual: ColorPair,
    narrative: ColorPair,
    cta: ColorPair,
    brand_primary: str,
    heading: FontResolution,
    body: FontResolution,
    config: ThemeConfig,
) -> dict[str, str]:
    css_vars: dict[str, str] = {}
    css_vars["--story-visual-bg"] = visual.background
    css_vars["--story-visual-text"] = visual.text
    css_vars["--story-narrative-bg"] = narrative.background
    css_vars["--story-narrative-text"] = narrative.text
    css_vars["--story-cta-bg"] = cta.background
    css_vars["--story-cta-text"] = cta.text
    css_vars["--story-divider"] = to_rgba(narrative.text, config.palette.divider_alpha)
    css_vars["--brand-primary"] = brand_primary
    css_vars["--color-primary-500"] = brand_primary
    css_vars["--color-primary-600"] = darken_hex(brand_primary, config.palette.primary_shade_darken)
    # Legacy aliases.
    css_vars["--story-bg"] = narrative.background
    css_vars["--story-text"] = narrative.text
    css_vars["--story-button"] = cta.background
    css_vars["--story-button-text"] = cta.text
    if heading.family:
        css_vars["--story-font-heading"] = heading.family
    if body.family:
        css_vars["--story-font-body"] = body.family
    return css_vars


def _collect_stylesheets(*candidates: object) -> tuple[str, ...]:
    seen: set[str] = set()
    ordered: list[str] = []
    for candidate in candidates:
        if not isinstance(candidate, str) or not candidate.strip():
            continue
        if candidate in seen:
            continue
        seen.add(candidate)
        ordered.append(candidate)
    return tuple(ordered)


__all__ = ["resolve_story_theme"]
