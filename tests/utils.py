"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from listgen.config import GenerationSettings
from listgen.schemas.models import GenerationRequest, ImagePart

# -----------------------------
# Global defaults (edit once)
# -----------------------------

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
DEFAULT_IMAGE_URL = "https://cdn.example.com/listings/abc/front.jpg"
PNG_STUB = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16

# Canonical provider payload (what a well-behaved model returns)
DEFAULT_PROVIDER_PAYLOAD: dict[str, Any] = {
    "seoTitle": "Sony WH-1000XM4 Wireless Noise Cancelling Headphones - Black",
    "keyFeatures": [
        "Industry-leading noise cancellation",
        "30-hour battery life",
        "Speak-to-chat pauses playback automatically",
    ],
    "productDescription": "Premium over-ear headphones with adaptive noise cancelling.",
    "specifications": {
        "brand": "Sony",
        "model": "WH-1000XM4",
        "modelNumber": "WH1000XM4/B",
        "category": "Electronics",
        "subCategory": "Headphones",
        "dimensions": "7.27 x 10.35 x 3.03 in",
        "weight": "254 g",
        "capacity": "",
        "color": "Black",
        "material": "Plastic, synthetic leather",
        "year": 2020,
        "condition": "Excellent, light wear on headband",
        "powerSpecs": "USB-C, 30h battery",
        "connectivity": "Bluetooth 5.0, 3.5mm",
        "compatibility": "iOS, Android",
        "warranty": "",
        "origin": "Malaysia",
        "certifications": "FCC, CE",
        "allSpecs": {"Driver size": "40 mm", "Battery hours": 30, "Codecs": ["SBC", "AAC", "LDAC"]},
    },
    "shortMarketplaceSummary": "Sony XM4 headphones in excellent condition.",
    "longSeoDescription": "Looking for noise cancelling headphones? The XM4 delivers.",
    "seoKeywords": {
        "primary": ["sony headphones", "wh-1000xm4", "noise cancelling headphones"],
        "secondary": ["wireless headphones", "bluetooth headphones"],
        "longTail": ["sony wh-1000xm4 black used"],
    },
    "marketplaceTags": [f"tag{i}" for i in range(12)],
    "condition": "excellent",
    "conditionNotes": "Light wear on headband.",
    "suggestedPrice": {"min": 180, "max": 240.5, "currency": "AUD", "reasoning": "Recent sold listings."},
    "warnings": ["Check battery health"],
    "confidence": 0.92,
}


def make_payload(**overrides: Any) -> dict[str, Any]:
    """Deep copy of the canonical payload with top-level overrides (None deletes a key)."""
    data = copy.deepcopy(DEFAULT_PROVIDER_PAYLOAD)
    for k, v in overrides.items():
        if v is None:
            data.pop(k, None)
        else:
            data[k] = v
    return data


def wrap_in_prose(payload: dict[str, Any] | str, *, fenced: bool = True) -> str:
    """Render a payload the way chat models tend to: prose, optional ```json fence, prose."""
    body = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
    if fenced:
        body = f"```json\n{body}\n```"
    return f"Sure! Here is the listing:\n\n{body}\n\nHope this helps."


def make_settings(**overrides: Any) -> GenerationSettings:
    base: dict[str, Any] = {"preferred_provider": "mock"}
    base.update(overrides)
    return GenerationSettings(**base)


def make_request(
    *,
    images: Sequence[str] = (),
    model_identifier: str | None = None,
    freeform_context: str | None = None,
) -> GenerationRequest:
    return GenerationRequest(images=list(images), model_identifier=model_identifier, freeform_context=freeform_context)


def make_image_part(url: str = DEFAULT_IMAGE_URL, *, mime_type: str = "image/png", data: bytes = PNG_STUB) -> ImagePart:
    return ImagePart(data=data, mime_type=mime_type, source_url=url)


# -----------------------------
# Fakes
# -----------------------------


class RecordingProvider:
    """Provider double: returns canned text and records every call."""

    def __init__(self, text: str | None = None, *, provider_id: str = "fake", error: Exception | None = None):
        self.provider_id = provider_id
        self._text = wrap_in_prose(DEFAULT_PROVIDER_PAYLOAD) if text is None else text
        self._error = error
        self.calls: list[tuple[str, list[ImagePart]]] = []

    def generate(self, instruction: str, images: Sequence[ImagePart]) -> str:
        self.calls.append((instruction, list(images)))
        if self._error is not None:
            raise self._error
        return self._text


class RecordingFetcher:
    """Image fetcher double: one ImagePart per URL, recording what was requested."""

    def __init__(self, error: Exception | None = None):
        self.requested: list[list[str]] = []
        self._error = error

    def __call__(self, urls: Sequence[str]) -> list[ImagePart]:
        self.requested.append(list(urls))
        if self._error is not None:
            raise self._error
        return [make_image_part(u) for u in urls]
