from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from layout_genai.config import settings
from layout_genai.errors import ProviderError, ProviderResponseError, SchemaValidationError
from layout_genai.models.design import DesignJSON
from layout_genai.models.pattern import UserAsset
from layout_genai.providers.parsing import coerce_variations, parse_json_object
from layout_genai.providers.prompts import design_prompt, variation_prompt
from layout_genai.validation import validate_design

logger = logging.getLogger(__name__)


class GeminiTextProvider:
    name = "gemini"

    def __init__(self, api_key: str, model: str | None = None, client: Any | None = None) -> None:
        self.client = client if client is not None else genai.Client(api_key=api_key)
        self.model = model or settings.gemini_text_model

    async def generate_variations(
        self,
        prompt: str,
        context_assets: list[UserAsset] | None = None,
    ) -> dict[str, str]:
        text = await self._complete(variation_prompt(prompt, context_assets))
        return coerce_variations(self.name, parse_json_object(self.name, text))

    async def generate(self, prompt: str, base_design: DesignJSON | None = None) -> DesignJSON:
        text = await self._complete(design_prompt(prompt, base_design))
        data = parse_json_object(self.name, text)
        try:
            return validate_design(data)
        except SchemaValidationError as exc:
            raise ProviderResponseError(self.name, str(exc)) from exc

    async def _complete(self, prompt: str) -> str:
        logger.debug("gemini request model=%s chars=%d", self.model, len(prompt))
        try:
            resp = await self.client.aio.models.generate_content(
                model=self.model,
                contents=[prompt],
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
        except genai_errors.APIError as exc:
            raise ProviderError(self.name, str(exc)) from exc
        return getattr(resp, "text", None) or ""
