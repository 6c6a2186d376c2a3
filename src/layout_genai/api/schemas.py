from __future__ import annotations

from pydantic import ConfigDict, Field

from layout_genai.models.base import WireModel
from layout_genai.models.pattern import Pattern, PunchlineSet, UserAsset


class GenerateRequest(WireModel):
    # Request envelopes tolerate extra keys; the documents inside do not.
    model_config = ConfigDict(extra="ignore")

    background_image: UserAsset
    punchlines: PunchlineSet
    patterns: list[Pattern]
    use_llm_copy_variation: bool = Field(default=False, alias="useLLMCopyVariation")
    provider_name: str | None = None


class PromptGenerateRequest(WireModel):
    model_config = ConfigDict(extra="ignore")

    prompt: str = Field(min_length=3)
    count: int = Field(ge=1)
    provider_name: str
    start_index: int = Field(default=0, ge=0)
