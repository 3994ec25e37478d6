from __future__ import annotations

from typing import Iterable, Sequence

from storytheme.theme.colors import normalize_hex
from storytheme.theme.model import Brand, BrandSlot


PRIMARY_TOKEN = "primary-500"


def brand_slots(brand: Brand | None) -> tuple[BrandSlot, ...]:
    if brand is None:
        return ()
    slots: list[BrandSlot] = []
    for slot in brand.slots:
        key = slot.key.strip() if isinstance(slot.key, str) else ""
        hex_value = normalize_hex(slot.hex)
        if not key or not hex_value:
            continue
        slots.append(BrandSlot(key=key, hex=hex_value))
    return tuple(slots)


def find_slot_by_hints(slots: Sequence[BrandSlot], hints: Iterable[str]) -> BrandSlot | None:
    normalized = [hint.lower() for hint in hints]
    for hint in normalized:
        for slot in slots:
            if slot.key.lower() == hint:
                return slot
    for hint in normalized:
        for slot in slots:
            if hint in slot.key.lower():
                return slot
    return None


def find_slot_by_key(slots: Sequence[BrandSlot], key: object) -> BrandSlot | None:
    if not isinstance(key, str):
        return None
    needle = key.strip().lower()
    if not needle:
        return None
    for slot in slots:
        if slot.key.lower() == needle:
            return slot
    return None


def token_primary(brand: Brand | None) -> str | None:
    if brand is None:
        return None
    return normalize_hex(brand.color_tokens.get(PRIMARY_TOKEN))


__all__ = ["PRIMARY_TOKEN", "brand_slots", "find_slot_by_hints", "find_slot_by_key", "token_primary"]
