"""
listgen — AI marketplace listing content generation

Exports the canonical schema, the service façade and its pure helpers:

    from listgen import GenerationRequest, ListingContentService

    service = ListingContentService.from_settings()
    content = service.generate(GenerationRequest(model_identifier="WH-1000XM4"))
"""

from __future__ import annotations

from listgen.config import GenerationSettings
from listgen.core.errors import (
    GenerationFailedError,
    InvalidRequestError,
    ListingGenerationError,
    ProviderError,
    ProviderUnavailableError,
)
from listgen.core.normalize import normalize_condition
from listgen.core.parse import parse_response
from listgen.core.prompt import build_prompt
from listgen.schemas.models import Condition, GenerationRequest, ListingContent
from listgen.services import ListingContentService, append_keyword_footer, compose_title, to_listing_data

__version__ = "0.1.0"

__all__ = [
    "Condition",
    "GenerationFailedError",
    "GenerationRequest",
    "GenerationSettings",
    "InvalidRequestError",
    "ListingContent",
    "ListingContentService",
    "ListingGenerationError",
    "ProviderError",
    "ProviderUnavailableError",
    "append_keyword_footer",
    "build_prompt",
    "compose_title",
    "normalize_condition",
    "parse_response",
    "to_listing_data",
]
