from __future__ import annotations

from importlib import metadata


def get_version() -> str:
    try:
        return metadata.version("storytheme")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()

__all__ = ["__version__", "get_version"]
