from __future__ import annotations

import json

from layout_genai.models.design import DesignJSON
from layout_genai.models.pattern import UserAsset

VARIATION_INSTRUCTIONS = (
    "You are rewriting short ad copy for a fixed visual template.\n"
    "Return STRICT JSON only (no markdown): one object whose keys are the slot ids\n"
    "you were given and whose values are the rewritten text.\n"
    "Keep each value about as long as the original. Do not add new keys.\n"
)

DESIGN_INSTRUCTIONS = (
    "You are an expert graphic designer. You must output a JSON layout composition "
    "based on the user's prompt.\n"
    "Return STRICT JSON only (no markdown) matching this JSON schema:\n"
)


def variation_prompt(prompt: str, context_assets: list[UserAsset] | None) -> str:
    parts = [VARIATION_INSTRUCTIONS, f"\n{prompt}\n"]
    if context_assets:
        parts.append("\nBackground image(s):\n")
        for a in context_assets:
            parts.append(f"- {a.name} ({int(a.width)}x{int(a.height)})\n")
    return "".join(parts)


def design_prompt(prompt: str, base_design: DesignJSON | None) -> str:
    schema = json.dumps(DesignJSON.model_json_schema(by_alias=True))
    out = f"{DESIGN_INSTRUCTIONS}{schema}\n\n{prompt}\n"
    if base_design is not None:
        out += f"\nBase Design: {json.dumps(base_design.to_wire())}\n"
    return out
