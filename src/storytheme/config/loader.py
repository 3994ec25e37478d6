from __future__ import annotations

import math
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from storytheme.config.model import ThemeConfig
from storytheme.errors.base import StoryThemeError
from storytheme.errors.guidance import build_guidance_message


CONFIG_FILENAME = "storytheme.toml"
ENV_MIN_CONTRAST = "STORYTHEME_MIN_CONTRAST"
ENV_ADJUST_STEPS = "STORYTHEME_ADJUST_STEPS"
ENV_ADJUST_STEP_SIZE = "STORYTHEME_ADJUST_STEP_SIZE"
ENV_DIVIDER_ALPHA = "STORYTHEME_DIVIDER_ALPHA"


@dataclass(frozen=True)
class ConfigSource:
    kind: str
    path: str | None = None


def load_config(root: Path | None = None) -> ThemeConfig:
    config, _ = resolve_config(root=root)
    return config


def resolve_config(root: Path | None = None) -> tuple[ThemeConfig, list[ConfigSource]]:
    config = ThemeConfig()
    sources: list[ConfigSource] = []
    if root is not None:
        toml_path = Path(root) / CONFIG_FILENAME
        if toml_path.exists():
            data = _parse_toml(toml_path)
            _apply_toml_config(config, data, toml_path)
            sources.append(ConfigSource(kind="toml", path=toml_path.as_posix()))
    if _apply_env_overrides(config):
        sources.append(ConfigSource(kind="env", path=None))
    return config, sources


def _parse_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as err:
        raise StoryThemeError(
            build_guidance_message(
                what=f"{path.name} is not valid TOML.",
                why=str(err),
                fix="Fix the TOML syntax in the config file.",
                example="[contrast]\nmin_ratio = 4.5",
            ),
            details={"file": path.as_posix()},
        ) from err


def _apply_toml_config(config: ThemeConfig, data: dict[str, Any], path: Path) -> None:
    contrast = _section(data, "contrast", path)
    if "min_ratio" in contrast:
        config.contrast.min_ratio = _positive_float("contrast.min_ratio", contrast["min_ratio"], minimum=1.0)
    if "adjust_steps" in contrast:
        config.contrast.adjust_steps = _non_negative_int("contrast.adjust_steps", contrast["adjust_steps"])
    if "adjust_step_size" in contrast:
        config.contrast.adjust_step_size = _fraction("contrast.adjust_step_size", contrast["adjust_step_size"])
    if "light_threshold" in contrast:
        config.contrast.light_threshold = _fraction("contrast.light_threshold", contrast["light_threshold"])

    palette = _section(data, "palette", path)
    if "divider_alpha" in palette:
        config.palette.divider_alpha = _fraction("palette.divider_alpha", palette["divider_alpha"])
    if "primary_shade_darken" in palette:
        config.palette.primary_shade_darken = _fraction("palette.primary_shade_darken", palette["primary_shade_darken"])

    fonts = _section(data, "fonts", path)
    if "default_weights" in fonts:
        config.fonts.default_weights = _weights("fonts.default_weights", fonts["default_weights"])

    layout = _section(data, "layout", path)
    if "default_gap_dvh" in layout:
        config.layout.default_gap_dvh = _positive_float("layout.default_gap_dvh", layout["default_gap_dvh"], minimum=0.0)
    if "default_tail_dvh" in layout:
        config.layout.default_tail_dvh = _positive_float("layout.default_tail_dvh", layout["default_tail_dvh"], minimum=0.0)


def _apply_env_overrides(config: ThemeConfig) -> bool:
    used = False
    min_contrast = os.getenv(ENV_MIN_CONTRAST)
    if min_contrast:
        config.contrast.min_ratio = _positive_float(ENV_MIN_CONTRAST, min_contrast, minimum=1.0)
        used = True
    steps = os.getenv(ENV_ADJUST_STEPS)
    if steps:
        config.contrast.adjust_steps = _non_negative_int(ENV_ADJUST_STEPS, steps)
        used = True
    step_size = os.getenv(ENV_ADJUST_STEP_SIZE)
    if step_size:
        config.contrast.adjust_step_size = _fraction(ENV_ADJUST_STEP_SIZE, step_size)
        used = True
    divider_alpha = os.getenv(ENV_DIVIDER_ALPHA)
    if divider_alpha:
        config.palette.divider_alpha = _fraction(ENV_DIVIDER_ALPHA, divider_alpha)
        used = True
    return used


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise StoryThemeError(
        build_guidance_message(
            what=f"[{name}] in {path.name} must be a table.",
            why="Each config section maps setting names to values.",
            fix=f"Write the section as a [{name}] table.",
            example=f"[{name}]",
        ),
        details={"file": path.as_posix(), "section": name},
    )


def _coerce_float(name: str, value: object) -> float:
    if isinstance(value, bool):
        _raise_invalid(name, value, "a number")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            _raise_invalid(name, value, "a number")
    else:
        _raise_invalid(name, value, "a number")
    if not math.isfinite(number):
        _raise_invalid(name, value, "a finite number")
    return number


def _positive_float(name: str, value: object, *, minimum: float) -> float:
    number = _coerce_float(name, value)
    if number < minimum:
        _raise_invalid(name, value, f"a number >= {minimum:g}")
    return number


def _fraction(name: str, value: object) -> float:
    number = _coerce_float(name, value)
    if number < 0.0 or number > 1.0:
        _raise_invalid(name, value, "a number between 0 and 1")
    return number


def _non_negative_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        _raise_invalid(name, value, "a whole number")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            _raise_invalid(name, value, "a whole number")
    else:
        _raise_invalid(name, value, "a whole number")
    if number < 0:
        _raise_invalid(name, value, "a whole number >= 0")
    return number


def _weights(name: str, value: object) -> tuple[int, ...]:
    if not isinstance(value, list) or not value:
        _raise_invalid(name, value, "a non-empty list of font weights")
    weights: list[int] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or item < 100 or item > 900:
            _raise_invalid(name, value, "a list of weights between 100 and 900")
        weights.append(item)
    return tuple(weights)


def _raise_invalid(name: str, value: object, expected: str) -> None:
    raise StoryThemeError(
        build_guidance_message(
            what=f"Invalid value '{value}' for {name}.",
            why=f"{name} must be {expected}.",
            fix="Use a valid setting value.",
        ),
        details={"setting": name},
    )


__all__ = ["CONFIG_FILENAME", "ConfigSource", "load_config", "resolve_config"]
