# listgen/core/errors.py
"""
Typed errors + utilities for listing generation.

Exports
-------
- ListingGenerationError, InvalidRequestError, ProviderUnavailableError,
  ProviderError, ImageFetchError, GenerationFailedError
- PROVIDER_ERRORS
- classify_provider_error(exc)
- provider_error_guard()

Boundary mapping
----------------
Every class carries `status_code`: 400 for a bad request shape, 500 for
configuration and backend failures. Parse problems are never errors; they
surface as `ListingContent.parse_failed`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import requests

# =========================
# Exception types
# =========================


class ListingGenerationError(RuntimeError):
    """Base class for listing generation failures."""

    status_code: int = 500


class InvalidRequestError(ListingGenerationError):
    """Caller supplied neither images nor a model identifier (or exceeded limits)."""

    status_code = 400


class ProviderUnavailableError(ListingGenerationError):
    """The configured inference backend cannot be constructed (credential, SDK, or name)."""


class ProviderError(ListingGenerationError):
    """Backend/transport failure while generating content."""


class ImageFetchError(ProviderError):
    """An image reference could not be fetched from the store."""


class GenerationFailedError(ListingGenerationError):
    """Uniform caller-facing failure wrapping any ProviderError."""


# Selector tuple for grouped exception handling
PROVIDER_ERRORS = (
    ProviderError,
    ImageFetchError,
)

# =========================
# Classification helpers
# =========================


def classify_provider_error(exc: Exception) -> ListingGenerationError:
    """
    Map arbitrary exceptions raised inside a provider call to a typed error.

    Heuristics:
      - Any ListingGenerationError subclass → passed through
      - requests.* errors → ImageFetchError (only the image store uses requests)
      - Fallback (SDK errors, timeouts, bad response shapes) → ProviderError
    """
    if isinstance(exc, ListingGenerationError):
        return exc

    if isinstance(exc, requests.RequestException):
        return ImageFetchError(str(exc))

    return ProviderError(f"{type(exc).__name__}: {exc}")


@contextmanager
def provider_error_guard() -> Iterator[None]:
    """Context manager to normalize unexpected exceptions from provider internals."""
    try:
        yield
    except ListingGenerationError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise classify_provider_error(exc) from exc


__all__ = [
    "ListingGenerationError",
    "InvalidRequestError",
    "ProviderUnavailableError",
    "ProviderError",
    "ImageFetchError",
    "GenerationFailedError",
    "PROVIDER_ERRORS",
    "classify_provider_error",
    "provider_error_guard",
]
