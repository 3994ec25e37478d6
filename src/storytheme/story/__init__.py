from __future__ import annotations

from .model import (
    FlatStoryStep,
    StepSpacing,
    StoryArticleBlock,
    StoryArticleStep,
    StoryScene,
    StoryVisual,
)
from .steps import flatten_steps, mobile_step_spacing, parse_scenes, trigger_fraction

__all__ = [
    "FlatStoryStep",
    "StepSpacing",
    "StoryArticleBlock",
    "StoryArticleStep",
    "StoryScene",
    "StoryVisual",
    "flatten_steps",
    "mobile_step_spacing",
    "parse_scenes",
    "trigger_fraction",
]
