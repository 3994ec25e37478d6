from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


STORY_LAYOUTS: tuple[str, ...] = ("split", "full")
STEP_ALIGNMENTS: tuple[str, ...] = ("left", "center", "right")
ARTICLE_BLOCK_TYPES: tuple[str, ...] = ("copy", "cta", "mediaCaption", "html")


@dataclass(frozen=True)
class StoryVisual:
    pod_slug: str
    props: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StoryArticleBlock:
    type: str
    props: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StoryArticleStep:
    align: str | None = None
    blocks: tuple[StoryArticleBlock, ...] = ()
    mobile_top_offset_dvh: float | None = None
    mobile_bottom_offset_dvh: float | None = None
    mobile_min_height_dvh: float | None = None
    # Desktop trigger point as a fraction of viewport height.
    trigger_center_fraction: float | None = None


@dataclass(frozen=True)
class StoryScene:
    key: str
    visual: StoryVisual
    articles: tuple[StoryArticleStep, ...] = ()
    layout: str | None = None
    mobile_lead_in_dvh: float | None = None
    mobile_lead_out_dvh: float | None = None
    mobile_card_gap_dvh: float | None = None
    mobile_min_height_dvh: float | None = None


@dataclass(frozen=True)
class FlatStoryStep:
    scene_index: int
    local_step: int
    article: StoryArticleStep


@dataclass(frozen=True)
class StepSpacing:
    top_dvh: float
    bottom_dvh: float
    min_height_dvh: float | None = None


__all__ = [
    "ARTICLE_BLOCK_TYPES",
    "FlatStoryStep",
    "STEP_ALIGNMENTS",
    "STORY_LAYOUTS",
    "StepSpacing",
    "StoryArticleBlock",
    "StoryArticleStep",
    "StoryScene",
    "StoryVisual",
]
