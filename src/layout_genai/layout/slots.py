from __future__ import annotations

from dataclasses import dataclass

from layout_genai.models.pattern import Pattern, PunchlineSet, TextSlot

# Closed per content type; not configurable per call.
CONTENT_TYPE_ALLOWED_SLOTS: dict[str, tuple[str, ...]] = {
    "ad": ("headline", "subheadline", "cta"),
    "promo": ("headline", "subheadline", "cta", "caption"),
    "meme": ("headline", "caption"),
}


@dataclass(frozen=True)
class SlotMapping:
    slot_id: str
    text: str
    slot: TextSlot


def map_slots(punchlines: PunchlineSet, pattern: Pattern) -> list[SlotMapping]:
    """
    Pair the pattern's slots with the user's copy.

    Keeps pattern declaration order. A slot is dropped when its role is not
    allowed for the content type, or when the user left that punchline empty.
    Roles the pattern does not declare are never synthesized.
    """
    allowed = CONTENT_TYPE_ALLOWED_SLOTS[punchlines.content_type]
    out: list[SlotMapping] = []
    for slot in pattern.text_slots:
        if slot.id not in allowed:
            continue
        text = punchlines.for_role(slot.id)
        if not text:
            continue
        out.append(SlotMapping(slot_id=slot.id, text=text, slot=slot))
    return out
