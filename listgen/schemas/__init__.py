from __future__ import annotations

from .models import (
    CONDITION_VALUES,
    Category,
    Condition,
    GenerationRequest,
    ImagePart,
    KeywordGroups,
    ListingContent,
    PriceEstimate,
    ProviderResponse,
    Specifications,
    StructuredContent,
)

__all__ = [
    "CONDITION_VALUES",
    "Category",
    "Condition",
    "GenerationRequest",
    "ImagePart",
    "KeywordGroups",
    "ListingContent",
    "PriceEstimate",
    "ProviderResponse",
    "Specifications",
    "StructuredContent",
]
