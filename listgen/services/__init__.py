from __future__ import annotations

from .listing_content import (
    GENERATION_FAILED_MESSAGE,
    ListingContentService,
    append_keyword_footer,
    compose_title,
    to_listing_data,
)

__all__ = [
    "GENERATION_FAILED_MESSAGE",
    "ListingContentService",
    "append_keyword_footer",
    "compose_title",
    "to_listing_data",
]
