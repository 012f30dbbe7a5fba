# listgen/core/parse/response.py
"""
Response Parser & Validator — provider text → ListingContent

Steps
-----
1) Extract: first "{" to last "}" of the raw text (greedy, not brace-aware).
   The prompt asks for exactly one JSON object, so this catches fenced and
   prose-wrapped payloads alike. Prose containing a stray brace outside the
   payload defeats it; the result is then a degraded record.
2) Decode with json.loads; anything but a JSON object is a failure.
3) Rebuild every canonical field independently with the coerce.py
   combinators. A bad field yields its own default and nothing else.
4) On extraction/decode failure, synthesize a degraded record
   (parse_failed=True) whose description is a prefix of the raw text.

`parse_response` never raises: callers always get a displayable listing.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from listgen.config import GenerationSettings
from listgen.core.normalize.condition import normalize_condition
from listgen.schemas.models import (
    Category,
    Condition,
    KeywordGroups,
    ListingContent,
    PriceEstimate,
    Specifications,
    StructuredContent,
)

from .coerce import as_float, as_int, as_mapping, as_spec_map, as_str, as_str_list, clamp_unit

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Product Listing"
FALLBACK_TITLE = "Product for Sale"
DEFAULT_CATEGORY = "Other"
DEFAULT_CONFIDENCE = 0.5
FALLBACK_CONFIDENCE = 0.3
MAX_CATEGORY_TAGS = 10

# Fixed specification attributes: canonical field → provider JSON key
_SPEC_KEYS: dict[str, str] = {
    "brand": "brand",
    "model": "model",
    "model_number": "modelNumber",
    "category": "category",
    "sub_category": "subCategory",
    "dimensions": "dimensions",
    "weight": "weight",
    "color": "color",
    "material": "material",
    "capacity": "capacity",
    "condition": "condition",
    "power_specs": "powerSpecs",
    "connectivity": "connectivity",
    "compatibility": "compatibility",
    "warranty": "warranty",
    "origin": "origin",
    "certifications": "certifications",
}


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Greedy outermost-brace extraction + decode. Returns None on any failure."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        loaded = json.loads(text[start : end + 1])
    except (ValueError, RecursionError):
        return None
    return loaded if isinstance(loaded, dict) else None


def _keywords(parsed: Mapping[str, Any]) -> KeywordGroups:
    seo = as_mapping(parsed.get("seoKeywords"))
    return KeywordGroups(
        primary=as_str_list(seo.get("primary")),
        secondary=as_str_list(seo.get("secondary")),
        long_tail=as_str_list(seo.get("longTail")),
    )


def _specifications(spec: Mapping[str, Any], features: list[str]) -> Specifications:
    fields: dict[str, Any] = {name: as_str(spec.get(key)) for name, key in _SPEC_KEYS.items()}
    fields["year"] = as_int(spec.get("year"))
    fields["size"] = as_str(spec.get("size")) or fields["capacity"]
    fields["features"] = features
    fields["additional_specs"] = as_spec_map(spec.get("allSpecs"))
    return Specifications(**fields)


def _price(parsed: Mapping[str, Any], default_currency: str) -> PriceEstimate:
    price = as_mapping(parsed.get("suggestedPrice"))
    return PriceEstimate(
        min=as_float(price.get("min"), 0.0),
        max=as_float(price.get("max"), 0.0),
        currency=as_str(price.get("currency"), default_currency),
        reasoning=as_str(price.get("reasoning")),
    )


def build_listing(
    parsed: Mapping[str, Any],
    provider_id: str,
    *,
    settings: GenerationSettings,
    generated_at: datetime,
) -> ListingContent:
    """Map a decoded provider object onto the canonical schema, field by field."""
    spec = as_mapping(parsed.get("specifications"))
    key_features = as_str_list(parsed.get("keyFeatures"))
    keywords = _keywords(parsed)
    tags = as_str_list(parsed.get("marketplaceTags"))
    seo_title = as_str(parsed.get("seoTitle"))
    description = as_str(parsed.get("productDescription"))

    title = seo_title[: settings.title_max_length]
    if not title.strip():
        title = DEFAULT_TITLE

    confidence = as_float(parsed.get("confidence"), None)

    return ListingContent(
        title=title,
        description=description,
        structured_content=StructuredContent(
            seo_title=seo_title,
            key_features=key_features,
            product_description=description,
            short_summary=as_str(parsed.get("shortMarketplaceSummary")),
            long_seo_description=as_str(parsed.get("longSeoDescription")),
            keywords=keywords,
            marketplace_tags=tags,
        ),
        category=Category(
            main=as_str(spec.get("category"), DEFAULT_CATEGORY),
            sub=as_str(spec.get("subCategory")),
            tags=tags[:MAX_CATEGORY_TAGS],
        ),
        condition=normalize_condition(parsed.get("condition")),
        condition_notes=as_str(parsed.get("conditionNotes")),
        specifications=_specifications(spec, key_features),
        suggested_price=_price(parsed, settings.default_currency),
        search_keywords=[*keywords.primary, *keywords.secondary],
        warnings=as_str_list(parsed.get("warnings")),
        confidence=DEFAULT_CONFIDENCE if confidence is None else clamp_unit(confidence),
        provider_id=provider_id,
        generated_at=generated_at,
        parse_failed=False,
    )


def degraded_listing(
    raw_text: str,
    provider_id: str,
    *,
    settings: GenerationSettings,
    generated_at: datetime,
) -> ListingContent:
    """Best-effort record when no structure could be recovered."""
    excerpt = raw_text[: settings.fallback_description_chars]
    return ListingContent(
        title=FALLBACK_TITLE,
        description=excerpt,
        structured_content=StructuredContent(product_description=excerpt),
        category=Category(main=DEFAULT_CATEGORY),
        condition=Condition.good,
        suggested_price=PriceEstimate(currency=settings.default_currency),
        confidence=FALLBACK_CONFIDENCE,
        provider_id=provider_id,
        generated_at=generated_at,
        parse_failed=True,
    )


def parse_response(
    raw_text: str,
    provider_id: str,
    *,
    settings: GenerationSettings | None = None,
    generated_at: datetime | None = None,
) -> ListingContent:
    """Parse provider text into a ListingContent. Never raises; check `parse_failed`."""
    settings = settings or GenerationSettings()
    generated_at = generated_at or datetime.now(timezone.utc)
    text = raw_text if isinstance(raw_text, str) else ("" if raw_text is None else str(raw_text))

    parsed = extract_json_object(text)
    if parsed is not None:
        try:
            return build_listing(parsed, provider_id, settings=settings, generated_at=generated_at)
        except (ValidationError, OverflowError) as exc:
            logger.warning("Provider %s payload failed schema construction: %s", provider_id, exc)

    logger.warning("Could not parse structured response from %s; raw head: %r", provider_id, text[:200])
    return degraded_listing(text, provider_id, settings=settings, generated_at=generated_at)


__all__ = [
    "DEFAULT_TITLE",
    "FALLBACK_TITLE",
    "FALLBACK_CONFIDENCE",
    "build_listing",
    "degraded_listing",
    "extract_json_object",
    "parse_response",
]
