import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from storytheme.config.loader import (  # noqa: E402
    ENV_ADJUST_STEPS,
    ENV_ADJUST_STEP_SIZE,
    ENV_DIVIDER_ALPHA,
    ENV_MIN_CONTRAST,
)


def make_brand(slots=None, *, primary_token=None, css_path=None, slug="acme"):
    """Build a raw brand payload the way the CMS serves it."""
    brand = {
        "slug": slug,
        "css_path": css_path,
        "settings": {"colors": {"slots": [{"key": key, "hex": hex_value} for key, hex_value in (slots or [])]}},
        "tokens": {"color": {}},
    }
    if primary_token is not None:
        brand["tokens"]["color"]["primary-500"] = primary_token
    return brand


def custom(hex_value):
    return {"source": "custom", "hex": hex_value}


def brand_ref(slot_key):
    return {"source": "brand", "slot_key": slot_key}


@pytest.fixture(autouse=True)
def _clear_theme_env(monkeypatch):
    for name in (ENV_MIN_CONTRAST, ENV_ADJUST_STEPS, ENV_ADJUST_STEP_SIZE, ENV_DIVIDER_ALPHA):
        monkeypatch.delenv(name, raising=False)


__all__ = ["brand_ref", "custom", "make_brand"]
