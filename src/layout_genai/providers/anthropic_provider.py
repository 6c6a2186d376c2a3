from __future__ import annotations

import logging
from typing import Any

from anthropic import AnthropicError, AsyncAnthropic

from layout_genai.config import settings
from layout_genai.errors import ProviderError, ProviderResponseError, SchemaValidationError
from layout_genai.models.design import DesignJSON
from layout_genai.models.pattern import UserAsset
from layout_genai.providers.parsing import coerce_variations, parse_json_object
from layout_genai.providers.prompts import design_prompt, variation_prompt
from layout_genai.validation import validate_design

logger = logging.getLogger(__name__)


class AnthropicTextProvider:
    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        client: Any | None = None,
        max_tokens: int | None = None,
    ) -> None:
        self.client = client if client is not None else AsyncAnthropic(api_key=api_key)
        self.model = model or settings.anthropic_text_model
        self.max_tokens = max_tokens or settings.anthropic_max_tokens

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
        logger.debug("anthropic request model=%s chars=%d", self.model, len(prompt))
        try:
            resp = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except AnthropicError as exc:
            raise ProviderError(self.name, str(exc)) from exc
        # Messages come back as content blocks; only text blocks carry the answer.
        return "".join(getattr(block, "text", "") for block in resp.content if getattr(block, "type", None) == "text")
