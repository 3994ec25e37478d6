from __future__ import annotations

from typing import Any


class StoryThemeError(RuntimeError):
    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message


__all__ = ["StoryThemeError"]
