from __future__ import annotations

from collections import Counter
from typing import Literal

from pydantic import Field, model_validator

from layout_genai.models.base import NonEmptyStr, PositiveFinite, UnitInterval, WireModel
from layout_genai.models.design import FontWeight, OverlayType, TextAlign

SlotRole = Literal["headline", "subheadline", "cta", "caption"]
Zone = Literal["top", "center", "bottom"]
ContentType = Literal["ad", "promo", "meme"]

SLOT_ROLES: tuple[str, ...] = ("headline", "subheadline", "cta", "caption")

# Keeps 48 x scale far from float overflow.
MAX_FONT_SIZE_SCALE = 100


class TextSlot(WireModel):
    id: SlotRole
    zone: Zone
    align: TextAlign
    font_family: str
    font_size_scale: float = Field(strict=True, gt=0, le=MAX_FONT_SIZE_SCALE, allow_inf_nan=False)
    color: str
    font_weight: FontWeight


class BackgroundTreatment(WireModel):
    # Becomes the generated document's overlay, not its background.
    type: OverlayType
    value: str
    overlay_opacity: UnitInterval


class Pattern(WireModel):
    id: NonEmptyStr
    name: NonEmptyStr
    description: str
    tags: list[str] = Field(default_factory=list)
    background: BackgroundTreatment
    accent_color: str
    text_slots: list[TextSlot]
    prompt_hints: str | None = None

    @model_validator(mode="after")
    def _slot_roles_unique(self) -> "Pattern":
        counts = Counter(slot.id for slot in self.text_slots)
        dupes = [role for role in SLOT_ROLES if counts[role] > 1]
        if dupes:
            raise ValueError(f"pattern declares more than one slot for role(s): {', '.join(dupes)}")
        return self


class PunchlineSet(WireModel):
    headline: NonEmptyStr
    subheadline: str | None = None
    cta: str | None = None
    caption: str | None = None
    content_type: ContentType

    def for_role(self, role: str) -> str | None:
        if role not in SLOT_ROLES:
            return None
        return getattr(self, role)

    def provided(self) -> dict[str, str]:
        """Role -> text for every non-empty punchline, in role order."""
        out: dict[str, str] = {}
        for role in SLOT_ROLES:
            value = getattr(self, role)
            if value:
                out[role] = value
        return out


class UserAsset(WireModel):
    """Opaque background image reference; pixel content is never inspected."""

    id: NonEmptyStr
    name: str
    blob_url: NonEmptyStr
    width: PositiveFinite
    height: PositiveFinite
