from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from layout_genai.models.design import DesignJSON

TEMPLATE_SOURCE = "template"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Composition:
    name: str
    design_json: DesignJSON
    generated_by: str = TEMPLATE_SOURCE
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "designJson": self.design_json.to_wire(),
            "generatedBy": self.generated_by,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class Project:
    """
    Ordered, exclusively-owned list of compositions.

    Every mutation refreshes `updated_at`.
    """

    name: str
    compositions: list[Composition] = field(default_factory=list)
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def add_composition(self, composition: Composition) -> None:
        self.compositions.append(composition)
        self.updated_at = _now()

    def add_compositions(self, compositions: list[Composition]) -> None:
        # One batch, one mutation: callers append only after a full generation succeeded.
        self.compositions.extend(compositions)
        self.updated_at = _now()

    def remove_composition(self, composition_id: str) -> None:
        self.compositions = [c for c in self.compositions if c.id != composition_id]
        self.updated_at = _now()

    def get_composition(self, composition_id: str) -> Composition | None:
        return next((c for c in self.compositions if c.id == composition_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "compositions": [c.to_dict() for c in self.compositions],
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
