from __future__ import annotations

from typing import Protocol

from layout_genai.models.design import DesignJSON
from layout_genai.models.pattern import UserAsset


class TextProvider(Protocol):
    """Returns short text substitutions keyed by slot id."""

    name: str

    async def generate_variations(
        self,
        prompt: str,
        context_assets: list[UserAsset] | None = None,
    ) -> dict[str, str]: ...


class DesignProvider(Protocol):
    """Legacy prompt-only mode: a whole document straight from the model."""

    name: str

    async def generate(self, prompt: str, base_design: DesignJSON | None = None) -> DesignJSON: ...
