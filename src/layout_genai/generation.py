"""
Generation orchestrator.

For each pattern: map punchlines to slots, place them, optionally ask a
text provider for copy variations and merge them back, then wrap the
document in a Composition. Patterns are processed concurrently but the
result keeps the caller's pattern order.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Sequence
from typing import Any, TypeVar

from layout_genai.errors import ConfigurationError, GenerationError, LayoutGenError
from layout_genai.layout.elements import build_text_elements
from layout_genai.layout.merge import merge_copy_variations
from layout_genai.layout.placement import REFERENCE_CANVAS_HEIGHT, REFERENCE_CANVAS_WIDTH
from layout_genai.layout.slots import map_slots
from layout_genai.models.design import DESIGN_JSON_VERSION, Canvas, DesignJSON, ImageBackground, Overlay
from layout_genai.models.pattern import Pattern, PunchlineSet, UserAsset
from layout_genai.models.project import TEMPLATE_SOURCE, Composition
from layout_genai.providers.base import DesignProvider, TextProvider
from layout_genai.providers.parsing import coerce_variations
from layout_genai.providers.registry import ProviderRegistry
from layout_genai.validation import validate_design, validate_patterns, validate_punchlines, validate_user_asset

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_copy_prompt(punchlines: PunchlineSet, pattern: Pattern) -> str:
    lines = [
        f"Content type: {punchlines.content_type}",
        f"Style: {pattern.prompt_hints}",
        "Current copy (slot id: text):",
    ]
    for role, text in punchlines.provided().items():
        lines.append(f"- {role}: {text}")
    return "\n".join(lines)


def build_draft(asset: UserAsset, punchlines: PunchlineSet, pattern: Pattern) -> DesignJSON:
    """The unmerged document for one pattern."""
    elements = build_text_elements(map_slots(punchlines, pattern))
    return DesignJSON(
        version=DESIGN_JSON_VERSION,
        canvas=Canvas(width=REFERENCE_CANVAS_WIDTH, height=REFERENCE_CANVAS_HEIGHT),
        background=ImageBackground(src=asset.blob_url, asset_id=asset.id),
        overlay=Overlay(
            type=pattern.background.type,
            value=pattern.background.value,
            opacity=pattern.background.overlay_opacity,
        ),
        elements=elements,
    )


async def _gather_ordered(aws: Sequence[Awaitable[T]]) -> list[T]:
    # gather() keeps argument order; on the first failure the rest are abandoned.
    tasks = [asyncio.ensure_future(a) for a in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for t in tasks:
            t.cancel()
        raise


def _resolve_provider(
    provider: TextProvider | None,
    provider_name: str | None,
    registry: ProviderRegistry | None,
) -> TextProvider:
    if provider is not None:
        return provider
    if provider_name and registry is not None:
        return registry.resolve(provider_name)
    raise ConfigurationError(
        "Copy variation requested but no text provider is available",
        details={"provider_name": provider_name},
    )


async def _generate_one(
    asset: UserAsset,
    punchlines: PunchlineSet,
    pattern: Pattern,
    provider: TextProvider | None,
    source: str,
) -> Composition:
    draft = build_draft(asset, punchlines, pattern)
    if provider is None or not pattern.prompt_hints:
        return Composition(name=pattern.name, design_json=draft, generated_by=TEMPLATE_SOURCE)

    prompt = build_copy_prompt(punchlines, pattern)
    try:
        raw = await provider.generate_variations(prompt, [asset])
        variations = coerce_variations(source, raw)
    except LayoutGenError as exc:
        raise GenerationError(f"Copy variation failed for pattern '{pattern.id}': {exc}", pattern_id=pattern.id) from exc
    except Exception as exc:
        raise GenerationError(
            f"Copy variation failed for pattern '{pattern.id}': {exc.__class__.__name__}: {exc}",
            pattern_id=pattern.id,
        ) from exc

    logger.debug("pattern %s: variations for %s", pattern.id, sorted(variations))
    design = draft.model_copy(update={"elements": merge_copy_variations(draft.elements, variations)})
    return Composition(name=pattern.name, design_json=design, generated_by=source)


async def generate_compositions(
    asset: UserAsset | dict[str, Any],
    punchlines: PunchlineSet | dict[str, Any],
    patterns: Sequence[Pattern | dict[str, Any]],
    *,
    use_copy_variation: bool = False,
    provider: TextProvider | None = None,
    provider_name: str | None = None,
    registry: ProviderRegistry | None = None,
) -> list[Composition]:
    """
    Build one Composition per pattern, in pattern order.

    Inputs are validated up front (SchemaValidationError, nothing generated).
    With `use_copy_variation`, a provider must be passed directly or be
    resolvable by `provider_name` from `registry`; this is checked before any
    provider call. Only patterns with prompt hints consult the provider, and
    any provider failure fails the whole request with GenerationError.
    """
    asset = validate_user_asset(asset)
    punchlines = validate_punchlines(punchlines)
    patterns = validate_patterns(patterns)

    active: TextProvider | None = None
    source = TEMPLATE_SOURCE
    if use_copy_variation:
        active = _resolve_provider(provider, provider_name, registry)
        source = provider_name or getattr(active, "name", None) or "provider"

    logger.info(
        "generating %d composition(s) content_type=%s provider=%s",
        len(patterns),
        punchlines.content_type,
        source if active is not None else "none",
    )
    return await _gather_ordered([_generate_one(asset, punchlines, p, active, source) for p in patterns])


async def generate_from_prompt(
    prompt: str,
    count: int,
    provider: DesignProvider,
    provider_name: str,
    start_index: int = 0,
) -> list[Composition]:
    """Prompt-only mode: `count` documents straight from the provider, no slot logic."""
    if count < 1:
        raise ValueError("count must be at least 1")

    designs = await _gather_ordered([provider.generate(prompt) for _ in range(count)])
    return [
        Composition(name=f"Variant {start_index + i + 1}", design_json=validate_design(design), generated_by=provider_name)
        for i, design in enumerate(designs)
    ]
