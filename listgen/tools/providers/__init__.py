"""
Inference providers package

Re-exports the provider contract, the dispatch helper and the factory, so
callers can do:

    from listgen.tools.providers import (
        InferenceProvider,
        MockProvider,
        create_provider,
        run_generation,
    )

Concrete SDK-backed providers (GeminiProvider, OpenAIProvider) are imported
from their own modules; the factory loads them lazily.
"""

from __future__ import annotations

from .factory import PROVIDER_BUILDERS, create_provider
from .mock_provider import MockProvider
from .provider_base import ImageFetcher, InferenceProvider, run_generation

__all__ = [
    "InferenceProvider",
    "ImageFetcher",
    "MockProvider",
    "PROVIDER_BUILDERS",
    "create_provider",
    "run_generation",
]
