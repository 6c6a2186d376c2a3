from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from layout_genai.api.schemas import GenerateRequest, PromptGenerateRequest
from layout_genai.config import configure_logging, settings
from layout_genai.errors import LayoutGenError, SchemaValidationError
from layout_genai.generation import generate_compositions, generate_from_prompt
from layout_genai.presets import PRESET_PATTERNS
from layout_genai.providers.factory import SUPPORTED_PROVIDERS, create_provider, register_configured_providers
from layout_genai.providers.registry import ProviderRegistry
from layout_genai.validation import validate_model

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="layout_genai")

# Providers with a key in settings are registered once at startup; a
# per-request x-api-key header takes precedence.
registry = ProviderRegistry()
register_configured_providers(registry)


@app.exception_handler(SchemaValidationError)
async def _validation_failed(request: Request, exc: SchemaValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Validation failed", "details": exc.details["issues"]})


@app.exception_handler(LayoutGenError)
async def _generation_failed(request: Request, exc: LayoutGenError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc), "code": exc.code})


def _get_provider(provider_name: str | None, api_key: str | None):
    name = provider_name or settings.default_provider
    if name not in SUPPORTED_PROVIDERS:
        raise HTTPException(status_code=400, detail=f"Unsupported provider '{name}'")
    if api_key:
        return name, create_provider(name, api_key)
    if name in registry:
        return name, registry.resolve(name)
    raise HTTPException(status_code=401, detail="API Key is required in x-api-key header")


@app.get("/api/patterns")
def list_patterns():
    return {"patterns": [p.to_wire() for p in PRESET_PATTERNS]}


@app.post("/api/generate")
async def generate(
    payload: dict[str, Any] = Body(...),
    x_api_key: str | None = Header(default=None),
):
    req = validate_model(GenerateRequest, payload, "GenerateRequest")

    provider = None
    provider_name = None
    if req.use_llm_copy_variation:
        provider_name, provider = _get_provider(req.provider_name, x_api_key)

    compositions = await generate_compositions(
        req.background_image,
        req.punchlines,
        req.patterns,
        use_copy_variation=req.use_llm_copy_variation,
        provider=provider,
        provider_name=provider_name,
    )
    return {"compositions": [c.to_dict() for c in compositions]}


@app.post("/api/generate/prompt")
async def generate_prompt(
    payload: dict[str, Any] = Body(...),
    x_api_key: str | None = Header(default=None),
):
    req = validate_model(PromptGenerateRequest, payload, "PromptGenerateRequest")
    if req.count > settings.max_prompt_variants:
        raise HTTPException(status_code=400, detail=f"count must be at most {settings.max_prompt_variants}")

    provider_name, provider = _get_provider(req.provider_name, x_api_key)
    compositions = await generate_from_prompt(
        req.prompt,
        req.count,
        provider,
        provider_name,
        start_index=req.start_index,
    )
    return {"compositions": [c.to_dict() for c in compositions]}
