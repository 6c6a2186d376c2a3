from __future__ import annotations

from layout_genai.config import Settings, settings
from layout_genai.errors import ConfigurationError
from layout_genai.providers.anthropic_provider import AnthropicTextProvider
from layout_genai.providers.gemini_provider import GeminiTextProvider
from layout_genai.providers.openai_provider import OpenAITextProvider
from layout_genai.providers.registry import ProviderRegistry

_ADAPTERS = {
    "openai": OpenAITextProvider,
    "gemini": GeminiTextProvider,
    "anthropic": AnthropicTextProvider,
}

SUPPORTED_PROVIDERS: tuple[str, ...] = tuple(_ADAPTERS)


def create_provider(name: str, api_key: str | None) -> OpenAITextProvider | GeminiTextProvider | AnthropicTextProvider:
    if name not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(f"Unsupported provider '{name}'", details={"supported": list(SUPPORTED_PROVIDERS)})
    if not api_key:
        raise ConfigurationError(f"An API key is required for provider '{name}'", details={"provider": name})
    return _ADAPTERS[name](api_key=api_key)


def register_configured_providers(registry: ProviderRegistry, cfg: Settings | None = None) -> list[str]:
    """Register an adapter for every provider that has a key in settings."""
    cfg = cfg or settings
    keys = {"openai": cfg.openai_api_key, "gemini": cfg.gemini_api_key, "anthropic": cfg.anthropic_api_key}
    registered: list[str] = []
    for name in SUPPORTED_PROVIDERS:
        if keys[name]:
            registry.register(name, create_provider(name, keys[name]))
            registered.append(name)
    return registered
