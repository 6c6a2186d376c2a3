"""
Exception taxonomy for layout generation.

Every error is surfaced to the immediate caller; nothing here is retried
or suppressed inside the engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class LayoutGenError(Exception):
    """Base class for all layout_genai errors."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": str(self), "details": self.details}


@dataclass(frozen=True)
class ValidationIssue:
    path: str
    message: str


class SchemaValidationError(LayoutGenError):
    """Input does not conform to a document/template/punchline schema.

    `issues` lists every violated field path, not just the first one.
    """

    def __init__(self, schema: str, issues: list[ValidationIssue]) -> None:
        summary = "; ".join(f"{i.path or '<root>'}: {i.message}" for i in issues)
        super().__init__(
            f"{schema} validation failed: {summary}",
            code="VALIDATION_ERROR",
            details={"schema": schema, "issues": [{"path": i.path, "message": i.message} for i in issues]},
        )
        self.schema = schema
        self.issues = issues

    @property
    def paths(self) -> list[str]:
        return [i.path for i in self.issues]


class ProviderNotFoundError(LayoutGenError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Text provider '{name}' not found in registry.", code="PROVIDER_NOT_FOUND", details={"name": name})
        self.name = name


class ConfigurationError(LayoutGenError):
    """A precondition for the requested work (credential, provider) is missing."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class ProviderError(LayoutGenError):
    """The external text provider rejected or failed the call."""

    def __init__(self, provider: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"{provider}: {message}", code="PROVIDER_ERROR", details={"provider": provider, **(details or {})})
        self.provider = provider


class ProviderResponseError(ProviderError):
    """The provider answered, but not with something we can use."""


class GenerationError(LayoutGenError):
    def __init__(self, message: str, pattern_id: str | None = None) -> None:
        super().__init__(message, code="GENERATION_ERROR", details={"pattern_id": pattern_id} if pattern_id else None)
        self.pattern_id = pattern_id
