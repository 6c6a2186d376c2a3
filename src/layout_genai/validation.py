"""
Validation entry points for everything that crosses a serialization boundary.

Each function takes an arbitrary structured value (usually decoded JSON, or
an already-built model) and returns the typed model, or raises
SchemaValidationError listing every violated field path.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from layout_genai.errors import SchemaValidationError, ValidationIssue
from layout_genai.models.design import DesignJSON
from layout_genai.models.pattern import Pattern, PunchlineSet, UserAsset

M = TypeVar("M", bound=BaseModel)

_pattern_list = TypeAdapter(list[Pattern])


def _issues(exc: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(path=".".join(str(p) for p in err["loc"]), message=err["msg"])
        for err in exc.errors()
    ]


def validate_model(model: type[M], data: Any, schema: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise SchemaValidationError(schema, _issues(exc)) from exc


def _raw_duplicate_ids(data: Any) -> list[str]:
    if not isinstance(data, Mapping) or not isinstance(data.get("elements"), list):
        return []
    counts = Counter(
        el["id"] for el in data["elements"] if isinstance(el, Mapping) and isinstance(el.get("id"), str)
    )
    return sorted(i for i, n in counts.items() if n > 1)


def validate_design(data: Any) -> DesignJSON:
    try:
        return DesignJSON.model_validate(data)
    except ValidationError as exc:
        issues = _issues(exc)
        # The model-level id check only runs once every field is valid, so
        # duplicates are looked up on the raw input as well.
        dupes = _raw_duplicate_ids(data)
        if dupes and not any("duplicate element id" in issue.message for issue in issues):
            issues.append(ValidationIssue(path="elements", message=f"duplicate element id(s): {', '.join(dupes)}"))
        raise SchemaValidationError("DesignJSON", issues) from exc


def validate_pattern(data: Any) -> Pattern:
    return validate_model(Pattern, data, "Pattern")


def validate_punchlines(data: Any) -> PunchlineSet:
    return validate_model(PunchlineSet, data, "PunchlineSet")


def validate_user_asset(data: Any) -> UserAsset:
    return validate_model(UserAsset, data, "UserAsset")


def validate_patterns(data: Any) -> list[Pattern]:
    """Validate a whole pattern list; issues are reported as `<index>.<field>`."""
    try:
        return _pattern_list.validate_python(data)
    except ValidationError as exc:
        raise SchemaValidationError("Pattern[]", _issues(exc)) from exc
