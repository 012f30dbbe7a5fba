# listgen/config.py
"""
Process-level generation settings.

Resolved once at startup via `GenerationSettings.from_env()` and then passed
explicitly to the service, providers and parser. Nothing in the package reads
the environment after construction.

Environment
-----------
LISTGEN_AI_PROVIDER                : "gemini" (default) | "openai" | "mock"
GOOGLE_AI_API_KEY / GEMINI_API_KEY : Gemini credential
OPENAI_API_KEY                     : OpenAI credential
LISTGEN_GEMINI_MODEL               : default "gemini-2.5-flash"
LISTGEN_OPENAI_MODEL               : default "gpt-4o"
LISTGEN_TEMPERATURE                : default "0.3"
LISTGEN_MAX_OUTPUT_TOKENS          : default "1500"
LISTGEN_REQUEST_TIMEOUT_S          : default "60"
LISTGEN_IMAGE_TIMEOUT_S            : default "20"
LISTGEN_FETCH_WORKERS              : default "4"
LISTGEN_FALLBACK_DESCRIPTION_CHARS : default "1000"
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationSettings(BaseModel):
    """Immutable knobs for one process. Defaults match production behavior."""

    model_config = ConfigDict(frozen=True)

    preferred_provider: str = Field("gemini", description="Backend key used by the provider factory.")
    google_api_key: str | None = Field(None, description="Gemini API key; absence makes 'gemini' unavailable.")
    openai_api_key: str | None = Field(None, description="OpenAI API key; absence makes 'openai' unavailable.")

    gemini_model: str = Field("gemini-2.5-flash")
    openai_model: str = Field("gpt-4o")
    temperature: float = Field(0.3, ge=0, le=2)
    max_output_tokens: int = Field(1500, ge=1)
    request_timeout_s: float = Field(60.0, gt=0, description="Provider call timeout.")

    image_fetch_timeout_s: float = Field(20.0, gt=0, description="Per-image GET timeout.")
    max_fetch_workers: int = Field(4, ge=1, description="Thread pool size for parallel image fetches.")
    user_agent: str = Field("listgen/0.1 (+listing-content)")

    fallback_description_chars: int = Field(
        1000, ge=1, description="Raw-text prefix kept as the description of a degraded record."
    )
    title_max_length: int = Field(200, ge=1)
    default_currency: str = Field("USD")
    max_images: int = Field(5, ge=1, description="Upper bound on images per request.")
    max_context_chars: int = Field(500, ge=0, description="Upper bound on freeform context length.")

    @field_validator("preferred_provider")
    @classmethod
    def _normalize_provider(cls, v: str) -> str:
        return (v or "").strip().lower()

    @field_validator("google_api_key", "openai_api_key")
    @classmethod
    def _blank_key_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> GenerationSettings:
        env = os.environ if environ is None else environ
        data: dict = {
            "preferred_provider": env.get("LISTGEN_AI_PROVIDER", "gemini"),
            "google_api_key": env.get("GOOGLE_AI_API_KEY") or env.get("GEMINI_API_KEY"),
            "openai_api_key": env.get("OPENAI_API_KEY"),
        }
        optional = {
            "gemini_model": "LISTGEN_GEMINI_MODEL",
            "openai_model": "LISTGEN_OPENAI_MODEL",
            "temperature": "LISTGEN_TEMPERATURE",
            "max_output_tokens": "LISTGEN_MAX_OUTPUT_TOKENS",
            "request_timeout_s": "LISTGEN_REQUEST_TIMEOUT_S",
            "image_fetch_timeout_s": "LISTGEN_IMAGE_TIMEOUT_S",
            "max_fetch_workers": "LISTGEN_FETCH_WORKERS",
            "fallback_description_chars": "LISTGEN_FALLBACK_DESCRIPTION_CHARS",
        }
        for field, var in optional.items():
            val = env.get(var)
            if val:
                data[field] = val
        data.update(overrides)
        return cls.model_validate(data)


__all__ = ["GenerationSettings"]
