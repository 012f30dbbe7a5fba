# listgen/tools/providers/gemini_provider.py
"""
Gemini Provider (V2)

Purpose
-------
Production `InferenceProvider` backed by Google Gemini via the `google-genai`
SDK. Images are attached inline as bytes + MIME type parts; with no images the
request carries the instruction alone.

Configuration (from GenerationSettings)
---------------------------------------
google_api_key     : required (GOOGLE_AI_API_KEY / GEMINI_API_KEY)
gemini_model       : default "gemini-2.5-flash"
temperature        : default 0.3
max_output_tokens  : default 1500
request_timeout_s  : default 60
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from google import genai
from google.genai import types

from listgen.config import GenerationSettings
from listgen.core.errors import ProviderError, ProviderUnavailableError
from listgen.schemas.models import ImagePart


class GeminiProvider:
    provider_id = "gemini"

    def __init__(self, settings: GenerationSettings, *, client: Any | None = None) -> None:
        if client is None:
            if not settings.google_api_key:
                raise ProviderUnavailableError("GOOGLE_AI_API_KEY not set for GeminiProvider.")
            client = genai.Client(
                api_key=settings.google_api_key,
                http_options=types.HttpOptions(timeout=int(settings.request_timeout_s * 1000)),
            )
        self._client = client
        self._model = settings.gemini_model
        self._config = types.GenerateContentConfig(
            temperature=settings.temperature,
            max_output_tokens=settings.max_output_tokens,
        )

    def generate(self, instruction: str, images: Sequence[ImagePart]) -> str:
        contents: list[Any] = [instruction]
        contents.extend(types.Part.from_bytes(data=img.data, mime_type=img.mime_type) for img in images)

        response = self._client.models.generate_content(
            model=self._model,
            contents=contents,
            config=self._config,
        )
        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            raise ProviderError("Gemini returned an empty response (blocked or no candidates).")
        return text


__all__ = ["GeminiProvider"]
