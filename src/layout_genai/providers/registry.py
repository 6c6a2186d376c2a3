from __future__ import annotations

from layout_genai.errors import ProviderNotFoundError
from layout_genai.providers.base import TextProvider


class ProviderRegistry:
    """
    Named lookup of text providers.

    Construct one per process (or per test) and pass it where needed;
    registration is expected once at startup and the last writer wins.
    """

    def __init__(self) -> None:
        self._providers: dict[str, TextProvider] = {}

    def register(self, name: str, provider: TextProvider) -> None:
        self._providers[name] = provider

    def resolve(self, name: str) -> TextProvider:
        provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    def clear(self) -> None:
        self._providers.clear()

    def names(self) -> list[str]:
        return sorted(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers
