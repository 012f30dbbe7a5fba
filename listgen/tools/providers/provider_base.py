# listgen/tools/providers/provider_base.py
"""
Inference Provider Interface (V2) — text + optional images in, raw text out

Purpose
-------
Define a minimal, backend-agnostic contract for listing generation and a
standard helper that resolves image references before dispatching. Concrete
backends (Gemini, OpenAI, mock) only translate an instruction plus encoded
images into their SDK's request shape and return the model's text.

Design
------
- Protocol `InferenceProvider` exposes `provider_id` and
  `generate(instruction, images)`.
- An empty `images` sequence means the text-only request path; providers must
  not require images.
- `run_generation(...)` owns the image fetch step so adapters stay free of
  storage concerns, and skips fetching/encoding entirely when no references
  are supplied.

Public API
----------
class InferenceProvider(Protocol):
    provider_id: str
    def generate(self, instruction: str, images: Sequence[ImagePart]) -> str

def run_generation(provider, instruction, image_refs, *, fetcher) -> ProviderResponse

Invariants & Guardrails
-----------------------
- Images reach the provider in the same order as `image_refs`.
- Every failure leaves this helper as a ProviderError (or subclass); no
  retries happen here.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from listgen.core.errors import ProviderError, provider_error_guard
from listgen.schemas.models import ImagePart, ProviderResponse

ImageFetcher = Callable[[Sequence[str]], list[ImagePart]]


@runtime_checkable
class InferenceProvider(Protocol):
    provider_id: str

    def generate(self, instruction: str, images: Sequence[ImagePart]) -> str: ...


def run_generation(
    provider: InferenceProvider,
    instruction: str,
    image_refs: Sequence[str],
    *,
    fetcher: ImageFetcher,
) -> ProviderResponse:
    """
    Fetch images (if any), invoke the provider once, and tag the raw text with its backend.
    With no references the provider is called on its text-only path.
    """
    refs = [r for r in image_refs if r and r.strip()]
    with provider_error_guard():
        parts = fetcher(refs) if refs else []
        if len(parts) != len(refs):
            raise ProviderError("Image fetcher returned an inconsistent number of images.")
        text = provider.generate(instruction, parts)

    if not isinstance(text, str):
        raise ProviderError(f"Provider {provider.provider_id!r} returned non-string output.")
    return ProviderResponse(text=text, provider_id=provider.provider_id)


__all__ = ["ImageFetcher", "InferenceProvider", "run_generation"]
