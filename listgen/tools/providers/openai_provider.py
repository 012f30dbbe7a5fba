# listgen/tools/providers/openai_provider.py
"""
OpenAI Provider (V2)

Purpose
-------
Production `InferenceProvider` using OpenAI chat completions. With images the
user message carries the instruction plus one `image_url` part per image
(base64 data URLs, high detail); without images it is a plain text message, so
no encoding work is done.

Configuration (from GenerationSettings)
---------------------------------------
openai_api_key     : required (OPENAI_API_KEY)
openai_model       : default "gpt-4o"
temperature        : default 0.3
max_output_tokens  : default 1500 (sent as max_tokens)
request_timeout_s  : default 60
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from openai import OpenAI

from listgen.config import GenerationSettings
from listgen.core.errors import ProviderError, ProviderUnavailableError
from listgen.core.prompt import SYSTEM_DIRECTIVE
from listgen.schemas.models import ImagePart


class OpenAIProvider:
    provider_id = "openai"

    def __init__(self, settings: GenerationSettings, *, client: Any | None = None) -> None:
        if client is None:
            if not settings.openai_api_key:
                raise ProviderUnavailableError("OPENAI_API_KEY not set for OpenAIProvider.")
            # Retries belong to the caller; the SDK default would retry silently.
            client = OpenAI(api_key=settings.openai_api_key, timeout=settings.request_timeout_s, max_retries=0)
        self._client = client
        self._model = settings.openai_model
        self._temperature = settings.temperature
        self._max_tokens = settings.max_output_tokens

    def generate(self, instruction: str, images: Sequence[ImagePart]) -> str:
        return self._call_chat_completions(_build_messages(instruction, images))

    # ---------- OpenAI calls ----------
    def _call_chat_completions(self, messages: list[dict[str, Any]]) -> str:
        resp = self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
        )
        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError) as exc:
            raise ProviderError("Unexpected OpenAI response shape (no choices).") from exc
        if not content:
            raise ProviderError("OpenAI returned an empty completion.")
        return content


# ---------- helpers ----------
def _build_messages(instruction: str, images: Sequence[ImagePart]) -> list[dict[str, Any]]:
    system = {"role": "system", "content": SYSTEM_DIRECTIVE}
    if not images:
        return [system, {"role": "user", "content": instruction}]

    content: list[dict[str, Any]] = [{"type": "text", "text": instruction}]
    content.extend({"type": "image_url", "image_url": {"url": img.data_url(), "detail": "high"}} for img in images)
    return [system, {"role": "user", "content": content}]


__all__ = ["OpenAIProvider"]
