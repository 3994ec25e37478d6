from __future__ import annotations

import pytest

from storytheme.config.model import StoryLayoutConfig
from storytheme.errors.base import StoryThemeError
from storytheme.story.model import FlatStoryStep, StepSpacing, StoryArticleStep
from storytheme.story.steps import flatten_steps, mobile_step_spacing, parse_scenes, trigger_fraction


SCENES = [
    {
        "key": "intro",
        "layout": "split",
        "visual": {"podSlug": "harbour-map", "props": {"zoom": 4}},
        "mobileLeadInDvh": 40,
        "articles": [
            {"align": "left", "blocks": [{"type": "copy", "props": {"text": "Dawn."}}]},
            {"mobileBottomOffsetDvh": 20},
            {},
        ],
    },
    {
        "key": "outro",
        "layout": "full",
        "visual": {"podSlug": "tonnage-chart"},
        "mobileCardGapDvh": 100,
        "mobileLeadOutDvh": 10,
        "mobileMinHeightDvh": 80,
        "articles": [
            {"mobileMinHeightDvh": 60, "triggerCenterFraction": 1.4},
            {"blocks": [{"type": "cta", "props": {"href": "/subscribe"}}]},
        ],
    },
]


def test_parse_scenes_builds_typed_scenes() -> None:
    scenes = parse_scenes(SCENES)
    assert [scene.key for scene in scenes] == ["intro", "outro"]
    assert scenes[0].visual.pod_slug == "harbour-map"
    assert scenes[0].visual.props == {"zoom": 4}
    assert scenes[0].articles[0].blocks[0].type == "copy"
    assert scenes[0].mobile_lead_in_dvh == 40.0
    assert scenes[1].mobile_card_gap_dvh == 100.0
    assert scenes[1].articles[0].trigger_center_fraction == 1.4


def test_flatten_steps_keeps_scene_and_local_indexes() -> None:
    scenes = parse_scenes(SCENES)
    flat = flatten_steps(scenes)
    assert [(step.scene_index, step.local_step) for step in flat] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]
    assert flat[1] == FlatStoryStep(scene_index=0, local_step=1, article=scenes[0].articles[1])


def test_mobile_step_spacing_follows_scene_defaults() -> None:
    scenes = parse_scenes(SCENES)
    spacing = mobile_step_spacing(flatten_steps(scenes), scenes)
    assert spacing == (
        StepSpacing(top_dvh=40.0, bottom_dvh=0.0, min_height_dvh=None),
        StepSpacing(top_dvh=150.0, bottom_dvh=20.0, min_height_dvh=None),
        StepSpacing(top_dvh=130.0, bottom_dvh=0.0, min_height_dvh=None),
        StepSpacing(top_dvh=100.0, bottom_dvh=0.0, min_height_dvh=60.0),
        StepSpacing(top_dvh=100.0, bottom_dvh=10.0, min_height_dvh=80.0),
    )


def test_last_step_gets_tail_when_scene_has_no_lead_out() -> None:
    scenes = parse_scenes([{"key": "solo", "visual": {"podSlug": "v"}, "articles": [{}, {}]}])
    spacing = mobile_step_spacing(flatten_steps(scenes), scenes, StoryLayoutConfig(default_gap_dvh=120, default_tail_dvh=25))
    assert spacing[0] == StepSpacing(top_dvh=120.0, bottom_dvh=0.0)
    assert spacing[1] == StepSpacing(top_dvh=120.0, bottom_dvh=25.0)


def test_gap_never_goes_negative() -> None:
    scenes = parse_scenes(
        [{"key": "s", "visual": {"podSlug": "v"}, "articles": [{"mobileTopOffsetDvh": 0, "mobileBottomOffsetDvh": 200}, {}]}]
    )
    spacing = mobile_step_spacing(flatten_steps(scenes), scenes)
    assert spacing[0].top_dvh == 0
    assert spacing[1].top_dvh == 0.0


def test_non_finite_numbers_are_ignored() -> None:
    scenes = parse_scenes(
        [{"key": "s", "visual": {"podSlug": "v"}, "mobileCardGapDvh": float("nan"), "articles": [{"mobileTopOffsetDvh": "10"}]}]
    )
    assert scenes[0].mobile_card_gap_dvh is None
    assert scenes[0].articles[0].mobile_top_offset_dvh is None


def test_trigger_fraction_is_clamped() -> None:
    assert trigger_fraction(StoryArticleStep()) == 0.5
    assert trigger_fraction(StoryArticleStep(trigger_center_fraction=1.4)) == 1.0
    assert trigger_fraction(StoryArticleStep(trigger_center_fraction=-0.2)) == 0.0
    assert trigger_fraction(StoryArticleStep(trigger_center_fraction=0.3)) == 0.3


@pytest.mark.parametrize(
    ("payload", "path"),
    [
        ("scenes", "scenes"),
        ([{"visual": {"podSlug": "v"}, "articles": []}], "scenes[0].key"),
        ([{"key": "s", "layout": "grid", "visual": {"podSlug": "v"}, "articles": []}], "scenes[0].layout"),
        ([{"key": "s", "visual": {}, "articles": []}], "scenes[0].visual.podSlug"),
        ([{"key": "s", "visual": {"podSlug": "v"}}], "scenes[0].articles"),
        ([{"key": "s", "visual": {"podSlug": "v"}, "articles": [{"align": "justify"}]}], "scenes[0].articles[0].align"),
        (
            [{"key": "s", "visual": {"podSlug": "v"}, "articles": [{"blocks": [{"type": "video"}]}]}],
            "scenes[0].articles[0].blocks[0]",
        ),
        ([{"key": "s", "visual": {"podSlug": "v"}, "articles": [{"blocks": 5}]}], "scenes[0].articles[0].blocks"),
        ([{"key": "s", "visual": {"podSlug": "v"}, "articles": [{"blocks": "copy"}]}], "scenes[0].articles[0].blocks"),
    ],
)
def test_parse_scenes_rejects_malformed_payloads(payload, path) -> None:
    with pytest.raises(StoryThemeError) as err:
        parse_scenes(payload)
    assert err.value.details["path"] == path
    assert path in str(err.value)
