from __future__ import annotations

from storytheme.errors import StoryThemeError, build_guidance_message, parse_guidance


def test_guidance_message_round_trips_sections() -> None:
    message = build_guidance_message(
        what="Invalid value 'x' for contrast.min_ratio.",
        why="contrast.min_ratio must be a number.",
        fix="Use a valid setting value.",
        example="[contrast]\nmin_ratio = 4.5",
    )
    parts = parse_guidance(message)
    assert parts["what"] == "Invalid value 'x' for contrast.min_ratio."
    assert parts["why"] == "contrast.min_ratio must be a number."
    assert parts["fix"] == "Use a valid setting value."
    assert parts["example"] == "[contrast]"


def test_guidance_message_omits_missing_example() -> None:
    message = build_guidance_message(what="a", why="b", fix="c")
    assert "Example:" not in message
    assert message.splitlines() == ["What happened: a", "Why: b", "Fix: c"]


def test_story_theme_error_carries_details() -> None:
    err = StoryThemeError("boom", details={"path": "scenes[0]"})
    assert str(err) == "boom"
    assert err.details == {"path": "scenes[0]"}
    assert isinstance(err, RuntimeError)
    assert StoryThemeError("plain").details == {}
