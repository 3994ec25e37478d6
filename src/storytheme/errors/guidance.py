from __future__ import annotations


_LABELS: tuple[tuple[str, str], ...] = (
    ("what", "What happened:"),
    ("why", "Why:"),
    ("fix", "Fix:"),
    ("example", "Example:"),
)


def build_guidance_message(*, what: str, why: str, fix: str, example: str | None = None) -> str:
    lines = [
        f"What happened: {what}",
        f"Why: {why}",
        f"Fix: {fix}",
    ]
    if example:
        lines.append(f"Example: {example}")
    return "\n".join(lines)


def parse_guidance(text: str) -> dict[str, str]:
    parts: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        for name, label in _LABELS:
            if stripped.startswith(label):
                parts[name] = stripped.replace(label, "", 1).strip()
                break
    return parts


__all__ = ["build_guidance_message", "parse_guidance"]
