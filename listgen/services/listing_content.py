# listgen/services/listing_content.py
"""
Listing Content Service — the single door for AI listing generation

Purpose
-------
Orchestrate request validation → prompt → provider → parser into one
`generate(request)` call, and expose the small pure text helpers the API layer
reuses (title composition, keyword footer, listing summary).

Error contract
--------------
- InvalidRequestError       : no images and no model identifier (or limits
                              exceeded). Raised before any external call.
- ProviderUnavailableError  : no backend could be configured.
- GenerationFailedError     : any ProviderError (image fetch, SDK, transport),
                              with the original chained as __cause__.
A parse failure is NOT an error: the returned ListingContent has
`parse_failed=True`.

Usage
-----
service = ListingContentService.from_settings()          # once per process
content = service.generate(GenerationRequest(images=[url]))
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import partial
from typing import Any

from listgen.config import GenerationSettings
from listgen.core.errors import (
    PROVIDER_ERRORS,
    GenerationFailedError,
    InvalidRequestError,
    ProviderUnavailableError,
)
from listgen.core.media.fetcher import fetch_images
from listgen.core.parse.response import parse_response
from listgen.core.prompt.builder import PROMPT_VERSION, build_prompt
from listgen.schemas.models import GenerationRequest, ListingContent
from listgen.tools.providers.factory import create_provider
from listgen.tools.providers.provider_base import ImageFetcher, InferenceProvider, run_generation

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to analyze product images"
TITLE_MAX_LENGTH = 200


# =========================
# Pure text helpers
# =========================


def compose_title(
    brand: str | None,
    model: str | None,
    category: str | None,
    extra_attributes: Mapping[str, Any] | None = None,
    *,
    max_length: int = TITLE_MAX_LENGTH,
) -> str:
    """
    brand → model → category-specific attribute → color, single-space joined.
    Electronics contribute `storage`; Fashion contributes "Size <size>".
    """
    extra = extra_attributes or {}
    parts: list[str] = []

    if brand:
        parts.append(str(brand).strip())
    if model:
        parts.append(str(model).strip())
    if category == "Electronics" and extra.get("storage"):
        parts.append(str(extra["storage"]).strip())
    if category == "Fashion" and extra.get("size"):
        parts.append(f"Size {str(extra['size']).strip()}")
    if extra.get("color"):
        parts.append(str(extra["color"]).strip())

    return " ".join(p for p in parts if p)[:max_length]


def append_keyword_footer(description: str, keywords: Sequence[str]) -> str:
    """Append a closing paragraph naming the first three keywords and the full list."""
    kws = [k for k in keywords if k]
    if not kws:
        return description
    return (
        f"{description}\n\nPerfect for those searching for {', '.join(kws[:3])}. "
        "This listing includes everything shown in the photos. "
        f"Keywords: {', '.join(kws)}."
    )


def to_listing_data(content: ListingContent, request: GenerationRequest) -> dict[str, Any]:
    """Simplified listing draft (primary photo first) as handed to listing forms."""
    photos = request.image_refs
    return {
        "title": content.title,
        "description": content.description,
        "model_number": (request.model_identifier or "").strip() or content.specifications.model_number,
        "photo_url": photos[0] if photos else None,
        "additional_photos": photos[1:],
        "ai_metadata": {
            "generated": True,
            "category": content.category.main,
            "condition": content.condition.value,
            "suggested_price": content.suggested_price.model_dump(mode="json", by_alias=True),
            "keywords": list(content.search_keywords),
            "confidence": content.confidence,
            "parse_failed": content.parse_failed,
        },
    }


# =========================
# Service
# =========================


class ListingContentService:
    """
    Stateless across calls: holds only the startup-resolved settings, provider
    and image fetcher, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        provider: InferenceProvider | None,
        *,
        settings: GenerationSettings | None = None,
        fetcher: ImageFetcher | None = None,
        unavailable_reason: str | None = None,
    ) -> None:
        self.settings = settings or GenerationSettings()
        self.provider = provider
        self._unavailable_reason = unavailable_reason or "AI service not configured"
        self._fetcher: ImageFetcher = fetcher or partial(
            fetch_images,
            timeout_s=self.settings.image_fetch_timeout_s,
            user_agent=self.settings.user_agent,
            max_workers=self.settings.max_fetch_workers,
        )

    @classmethod
    def from_settings(cls, settings: GenerationSettings | None = None, **kwargs: Any) -> ListingContentService:
        """Resolve the provider once. An unavailable backend is kept as None and reported per call."""
        settings = settings or GenerationSettings.from_env()
        try:
            provider: InferenceProvider | None = create_provider(settings)
            reason = None
        except ProviderUnavailableError as exc:
            logger.warning("AI provider %r unavailable: %s", settings.preferred_provider, exc)
            provider, reason = None, str(exc)
        return cls(provider, settings=settings, unavailable_reason=reason, **kwargs)

    # ---------- validation ----------
    def validate(self, request: GenerationRequest) -> None:
        if not request.has_images and not request.has_identifier:
            raise InvalidRequestError("Either images or model number is required")
        if len(request.image_refs) > self.settings.max_images:
            raise InvalidRequestError(f"At most {self.settings.max_images} images are allowed")
        context = request.freeform_context or ""
        if len(context) > self.settings.max_context_chars:
            raise InvalidRequestError(f"Additional info must be at most {self.settings.max_context_chars} characters")

    # ---------- main operation ----------
    def generate(self, request: GenerationRequest) -> ListingContent:
        self.validate(request)
        if self.provider is None:
            raise ProviderUnavailableError(self._unavailable_reason)

        images = request.image_refs
        instruction = build_prompt(request.model_identifier, request.freeform_context, bool(images))
        logger.debug(
            "Generating listing via %s (images=%d, prompt v%s)",
            self.provider.provider_id,
            len(images),
            PROMPT_VERSION,
        )

        try:
            response = run_generation(self.provider, instruction, images, fetcher=self._fetcher)
        except PROVIDER_ERRORS as exc:
            logger.exception("AI analysis error from %s", self.provider.provider_id)
            raise GenerationFailedError(GENERATION_FAILED_MESSAGE) from exc

        return parse_response(response.text, response.provider_id, settings=self.settings)

    # ---------- pure helpers ----------
    def compose_title(
        self,
        brand: str | None,
        model: str | None,
        category: str | None,
        extra_attributes: Mapping[str, Any] | None = None,
    ) -> str:
        return compose_title(brand, model, category, extra_attributes, max_length=self.settings.title_max_length)

    @staticmethod
    def append_keyword_footer(description: str, keywords: Sequence[str]) -> str:
        return append_keyword_footer(description, keywords)


__all__ = [
    "GENERATION_FAILED_MESSAGE",
    "ListingContentService",
    "append_keyword_footer",
    "compose_title",
    "to_listing_data",
]
