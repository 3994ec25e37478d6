from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

from storytheme.config.model import StoryLayoutConfig
from storytheme.errors.base import StoryThemeError
from storytheme.errors.guidance import build_guidance_message
from storytheme.story.model import (
    ARTICLE_BLOCK_TYPES,
    STEP_ALIGNMENTS,
    STORY_LAYOUTS,
    FlatStoryStep,
    StepSpacing,
    StoryArticleBlock,
    StoryArticleStep,
    StoryScene,
    StoryVisual,
)


DEFAULT_TRIGGER_FRACTION = 0.5


def parse_scenes(raw: object) -> tuple[StoryScene, ...]:
    if not isinstance(raw, (list, tuple)):
        _raise_invalid("scenes", raw, "a list of scene objects")
    return tuple(_parse_scene(item, index) for index, item in enumerate(raw))


def flatten_steps(scenes: Sequence[StoryScene]) -> tuple[FlatStoryStep, ...]:
    return tuple(
        FlatStoryStep(scene_index=scene_index, local_step=local_step, article=article)
        for scene_index, scene in enumerate(scenes)
        for local_step, article in enumerate(scene.articles)
    )


def trigger_fraction(article: StoryArticleStep) -> float:
    value = article.trigger_center_fraction
    if value is None:
        value = DEFAULT_TRIGGER_FRACTION
    return max(0.0, min(1.0, value))


def mobile_step_spacing(
    flat_steps: Sequence[FlatStoryStep],
    scenes: Sequence[StoryScene],
    config: StoryLayoutConfig | None = None,
) -> tuple[StepSpacing, ...]:
    """Mobile card margins and minimum heights, in dynamic viewport units.

    Explicit per-step offsets win. The first step of a scene falls back to the
    scene lead-in and the last to the scene lead-out. A step with no top
    offset sits one scene gap below the previous card, minus whatever bottom
    offset that card already declared. The final step of the story gets a
    tail so it can scroll clear of the viewport.
    """
    config = config or StoryLayoutConfig()
    spacings: list[StepSpacing] = []
    last_index = len(flat_steps) - 1
    for index, step in enumerate(flat_steps):
        scene = scenes[step.scene_index]
        article = step.article
        gap = scene.mobile_card_gap_dvh if scene.mobile_card_gap_dvh is not None else config.default_gap_dvh

        top = article.mobile_top_offset_dvh
        bottom = article.mobile_bottom_offset_dvh
        if step.local_step == 0 and top is None:
            top = scene.mobile_lead_in_dvh
        if step.local_step == len(scene.articles) - 1 and bottom is None:
            bottom = scene.mobile_lead_out_dvh

        if top is None:
            previous_bottom = 0.0
            if index > 0:
                previous_bottom = flat_steps[index - 1].article.mobile_bottom_offset_dvh or 0.0
            top = max(0.0, gap - previous_bottom)
        if index == last_index and bottom is None:
            bottom = config.default_tail_dvh

        min_height = article.mobile_min_height_dvh
        if min_height is None:
            min_height = scene.mobile_min_height_dvh
        spacings.append(StepSpacing(top_dvh=top, bottom_dvh=bottom or 0.0, min_height_dvh=min_height))
    return tuple(spacings)


def _parse_scene(raw: object, index: int) -> StoryScene:
    where = f"scenes[{index}]"
    if not isinstance(raw, Mapping):
        _raise_invalid(where, raw, "a scene object")
    key = raw.get("key")
    if not isinstance(key, str) or not key.strip():
        _raise_invalid(f"{where}.key", key, "a non-empty string")
    layout = raw.get("layout")
    if layout is not None and layout not in STORY_LAYOUTS:
        _raise_invalid(f"{where}.layout", layout, f"one of {', '.join(STORY_LAYOUTS)}")
    articles = raw.get("articles")
    if not isinstance(articles, (list, tuple)):
        _raise_invalid(f"{where}.articles", articles, "a list of article steps")
    return StoryScene(
        key=key,
        visual=_parse_visual(raw.get("visual"), f"{where}.visual"),
        articles=tuple(_parse_article(item, f"{where}.articles[{pos}]") for pos, item in enumerate(articles)),
        layout=layout,
        mobile_lead_in_dvh=_finite(raw.get("mobileLeadInDvh")),
        mobile_lead_out_dvh=_finite(raw.get("mobileLeadOutDvh")),
        mobile_card_gap_dvh=_finite(raw.get("mobileCardGapDvh")),
        mobile_min_height_dvh=_finite(raw.get("mobileMinHeightDvh")),
    )


def _parse_visual(raw: object, where: str) -> StoryVisual:
    if not isinstance(raw, Mapping):
        _raise_invalid(where, raw, "a visual object")
    pod_slug = raw.get("podSlug")
    if not isinstance(pod_slug, str) or not pod_slug.strip():
        _raise_invalid(f"{where}.podSlug", pod_slug, "a non-empty string")
    return StoryVisual(pod_slug=pod_slug, props=_props(raw.get("props")))


def _parse_article(raw: object, where: str) -> StoryArticleStep:
    if not isinstance(raw, Mapping):
        _raise_invalid(where, raw, "an article step object")
    align = raw.get("align")
    if align is not None and align not in STEP_ALIGNMENTS:
        _raise_invalid(f"{where}.align", align, f"one of {', '.join(STEP_ALIGNMENTS)}")
    raw_blocks = raw.get("blocks")
    if raw_blocks is None:
        raw_blocks = ()
    elif not isinstance(raw_blocks, (list, tuple)):
        _raise_invalid(f"{where}.blocks", raw_blocks, "a list of article blocks")
    blocks: list[StoryArticleBlock] = []
    for pos, block in enumerate(raw_blocks):
        block_where = f"{where}.blocks[{pos}]"
        if not isinstance(block, Mapping) or block.get("type") not in ARTICLE_BLOCK_TYPES:
            _raise_invalid(block_where, block, f"a block with type {', '.join(ARTICLE_BLOCK_TYPES)}")
        blocks.append(StoryArticleBlock(type=block["type"], props=_props(block.get("props"))))
    return StoryArticleStep(
        align=align,
        blocks=tuple(blocks),
        mobile_top_offset_dvh=_finite(raw.get("mobileTopOffsetDvh")),
        mobile_bottom_offset_dvh=_finite(raw.get("mobileBottomOffsetDvh")),
        mobile_min_height_dvh=_finite(raw.get("mobileMinHeightDvh")),
        trigger_center_fraction=_finite(raw.get("triggerCenterFraction")),
    )


def _props(value: object) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _finite(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _raise_invalid(where: str, value: object, expected: str) -> None:
    raise StoryThemeError(
        build_guidance_message(
            what=f"Invalid story value at {where}: {value!r}.",
            why=f"{where} must be {expected}.",
            fix="Correct the story payload.",
        ),
        details={"path": where},
    )


__all__ = ["DEFAULT_TRIGGER_FRACTION", "flatten_steps", "mobile_step_spacing", "parse_scenes", "trigger_fraction"]
