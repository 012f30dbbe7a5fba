# tests/conftest.py
from __future__ import annotations

import pytest

from listgen.services.listing_content import ListingContentService
from tests.utils import (
    FIXED_NOW,
    RecordingFetcher,
    RecordingProvider,
    make_payload,
    make_settings,
    wrap_in_prose,
)

_PROVIDER_ENV = (
    "LISTGEN_AI_PROVIDER",
    "GOOGLE_AI_API_KEY",
    "GEMINI_API_KEY",
    "OPENAI_API_KEY",
    "LISTGEN_GEMINI_MODEL",
    "LISTGEN_OPENAI_MODEL",
    "LISTGEN_TEMPERATURE",
    "LISTGEN_MAX_OUTPUT_TOKENS",
    "LISTGEN_REQUEST_TIMEOUT_S",
    "LISTGEN_IMAGE_TIMEOUT_S",
    "LISTGEN_FETCH_WORKERS",
    "LISTGEN_FALLBACK_DESCRIPTION_CHARS",
)


# -------- Hermetic environment: no developer keys leak into tests --------
@pytest.fixture(autouse=True)
def _clean_provider_env(monkeypatch):
    for var in _PROVIDER_ENV:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def provider_text():
    """Factory for provider output wrapping the canonical payload (overridable)."""

    def _factory(*, fenced: bool = True, **overrides):
        return wrap_in_prose(make_payload(**overrides), fenced=fenced)

    return _factory


@pytest.fixture
def fake_provider():
    return RecordingProvider()


@pytest.fixture
def fake_fetcher():
    return RecordingFetcher()


@pytest.fixture
def service_factory(settings):
    """
    Build a ListingContentService around test doubles.

    Usage:
        svc = service_factory()                              # canned payload
        svc = service_factory(provider=RecordingProvider("no json"))
    """

    def _factory(*, provider=None, fetcher=None, **overrides):
        svc_settings = settings.model_copy(update=overrides) if overrides else settings
        return ListingContentService(
            provider if provider is not None else RecordingProvider(),
            settings=svc_settings,
            fetcher=fetcher if fetcher is not None else RecordingFetcher(),
        )

    return _factory


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
