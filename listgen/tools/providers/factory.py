# listgen/tools/providers/factory.py
"""
Provider selection, keyed by `GenerationSettings.preferred_provider`.

Resolved once at startup. Every failure mode (unknown name, missing
credential, SDK construction error) surfaces as ProviderUnavailableError
before any network call is made.
"""

from __future__ import annotations

from collections.abc import Callable

from listgen.config import GenerationSettings
from listgen.core.errors import ProviderUnavailableError

from .provider_base import InferenceProvider


def _gemini(settings: GenerationSettings) -> InferenceProvider:
    from .gemini_provider import GeminiProvider

    return GeminiProvider(settings)


def _openai(settings: GenerationSettings) -> InferenceProvider:
    from .openai_provider import OpenAIProvider

    return OpenAIProvider(settings)


def _mock(settings: GenerationSettings) -> InferenceProvider:
    from .mock_provider import MockProvider

    return MockProvider()


PROVIDER_BUILDERS: dict[str, Callable[[GenerationSettings], InferenceProvider]] = {
    "gemini": _gemini,
    "openai": _openai,
    "mock": _mock,
}


def create_provider(settings: GenerationSettings) -> InferenceProvider:
    name = settings.preferred_provider
    builder = PROVIDER_BUILDERS.get(name)
    if builder is None:
        raise ProviderUnavailableError(f"Unknown AI provider {name!r}; expected one of {sorted(PROVIDER_BUILDERS)}.")
    try:
        return builder(settings)
    except ProviderUnavailableError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ProviderUnavailableError(f"Could not initialize {name!r} provider: {exc}") from exc


__all__ = ["PROVIDER_BUILDERS", "create_provider"]
