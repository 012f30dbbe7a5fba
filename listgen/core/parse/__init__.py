from __future__ import annotations

from .response import (
    DEFAULT_TITLE,
    FALLBACK_CONFIDENCE,
    FALLBACK_TITLE,
    build_listing,
    degraded_listing,
    extract_json_object,
    parse_response,
)

__all__ = [
    "DEFAULT_TITLE",
    "FALLBACK_TITLE",
    "FALLBACK_CONFIDENCE",
    "build_listing",
    "degraded_listing",
    "extract_json_object",
    "parse_response",
]
