# listgen/schemas/models.py

from __future__ import annotations

import base64
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =========================
# Vocabulary
# =========================


class Condition(str, Enum):
    """Item wear/usability state. The seven values are the full vocabulary."""

    new = "new"
    like_new = "like-new"
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"
    for_parts = "for-parts"


CONDITION_VALUES: tuple[str, ...] = tuple(c.value for c in Condition)


class _CanonicalModel(BaseModel):
    """Frozen, camelCase-serialized base for everything handed to callers."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, protected_namespaces=())


# =========================
# Inputs
# =========================


class GenerationRequest(BaseModel):
    """
    Inputs to a single generation. At least one of `images` or `model_identifier`
    must be present; the service rejects the request otherwise.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())

    images: list[str] = Field(default_factory=list, description="Opaque image references (URLs), primary image first.")
    model_identifier: str | None = Field(None, description="Manufacturer model number or product identifier.")
    freeform_context: str | None = Field(None, description="Seller-supplied notes appended verbatim to the prompt.")

    @property
    def image_refs(self) -> list[str]:
        """Non-blank image references in caller order."""
        return [ref for ref in self.images if ref and ref.strip()]

    @property
    def has_images(self) -> bool:
        return bool(self.image_refs)

    @property
    def has_identifier(self) -> bool:
        return bool(self.model_identifier and self.model_identifier.strip())


class ImagePart(BaseModel):
    """An image fetched from the store and ready to attach to a provider request."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., description="Raw image bytes.")
    mime_type: str = Field("image/jpeg", description="MIME type reported by the store (or guessed).")
    source_url: str = Field("", description="Reference the bytes were fetched from.")

    def b64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.b64()}"


class ProviderResponse(BaseModel):
    """Raw text returned by an inference backend, tagged with the backend id."""

    text: str = Field("", description="Unprocessed model output.")
    provider_id: str = Field(..., description="Backend that produced the text (e.g. 'gemini').")


# =========================
# Canonical output
# =========================


class KeywordGroups(_CanonicalModel):
    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)
    long_tail: list[str] = Field(default_factory=list)


class StructuredContent(_CanonicalModel):
    """Richer marketplace copy. Every field is optional and defaults to empty."""

    seo_title: str = Field("", description="Untruncated SEO title as emitted by the provider.")
    key_features: list[str] = Field(default_factory=list, description="Ordered benefit bullets.")
    product_description: str = Field("", description="Main long-form description.")
    short_summary: str = Field("", description="One-paragraph marketplace summary.")
    long_seo_description: str = Field("", description="Search-intent focused description.")
    keywords: KeywordGroups = Field(default_factory=KeywordGroups)
    marketplace_tags: list[str] = Field(default_factory=list)


class Category(_CanonicalModel):
    main: str = Field("Other")
    sub: str = Field("")
    tags: list[str] = Field(default_factory=list)


class Specifications(_CanonicalModel):
    """Fixed attribute set plus an open-ended `additional_specs` map."""

    brand: str = ""
    model: str = ""
    model_number: str = ""
    category: str = ""
    sub_category: str = ""
    dimensions: str = ""
    weight: str = ""
    year: int | None = None
    color: str = ""
    size: str = ""
    material: str = ""
    capacity: str = ""
    condition: str = Field("", description="Provider's free-text condition, before normalization.")
    power_specs: str = ""
    connectivity: str = ""
    compatibility: str = ""
    warranty: str = ""
    origin: str = ""
    certifications: str = ""
    features: list[str] = Field(default_factory=list)
    additional_specs: dict[str, str | int | float] = Field(default_factory=dict)


class PriceEstimate(_CanonicalModel):
    min: float = 0.0
    max: float = 0.0
    currency: str = "USD"
    reasoning: str = ""


class ListingContent(_CanonicalModel):
    """
    One generated marketplace listing. Created once per generation call and
    never mutated. `parse_failed=True` marks a degraded record synthesized from
    raw text; callers should route those to manual review.
    """

    title: str = Field(..., description="Bounded-length listing title; never empty.")
    description: str = Field("", description="Main listing description.")
    structured_content: StructuredContent = Field(default_factory=StructuredContent)
    category: Category = Field(default_factory=Category)
    condition: Condition = Field(Condition.good)
    condition_notes: str = ""
    specifications: Specifications = Field(default_factory=Specifications)
    suggested_price: PriceEstimate = Field(default_factory=PriceEstimate)
    search_keywords: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    confidence: float = Field(0.5, ge=0, le=1)
    provider_id: str = Field(..., description="Backend that produced the source text.")
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    parse_failed: bool = False

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with canonical camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "Condition",
    "CONDITION_VALUES",
    "GenerationRequest",
    "ImagePart",
    "ProviderResponse",
    "KeywordGroups",
    "StructuredContent",
    "Category",
    "Specifications",
    "PriceEstimate",
    "ListingContent",
]
