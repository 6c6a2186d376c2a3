from __future__ import annotations

import json
import re
from typing import Any

from layout_genai.errors import ProviderResponseError

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def _strip_code_fences(text: str) -> str:
    s = text.strip()
    m = _FENCE_RE.search(s)
    if m:
        return m.group(1).strip()
    return s


def parse_json_object(provider: str, raw_text: str | None) -> dict[str, Any]:
    """
    Best-effort extraction of one JSON object from model output
    (handles code fences and accidental pre/post text).
    """
    if not raw_text or not raw_text.strip():
        raise ProviderResponseError(provider, "empty response")

    raw = _strip_code_fences(raw_text)
    start = raw.find("{")
    end = raw.rfind("}")
    if start != -1 and end > start:
        raw = raw[start : end + 1]

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ProviderResponseError(provider, f"response is not valid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ProviderResponseError(provider, "expected a JSON object")
    return data


def coerce_variations(provider: str, data: Any) -> dict[str, str]:
    """Slot id -> replacement text. Anything else is a malformed response."""
    if not isinstance(data, dict):
        raise ProviderResponseError(provider, "variations must be an object of slot id -> text")
    out: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ProviderResponseError(provider, f"variation for {key!r} is not a string")
        out[key] = value.strip()
    return out
