# listgen/core/prompt/builder.py
"""
Prompt Builder (V2) — one instruction string for every provider

Purpose
-------
Turn the caller's partial information (model identifier, free-text notes,
whether photos exist) into the instruction text sent to the inference
provider. The text names every JSON key the response parser reads, so the
provider emits parseable structure.

Design
------
- Pure function of its arguments: no clock, no randomness, no env reads.
  Identical inputs yield byte-identical output (provider-response debugging
  relies on this).
- Sections are assembled in a fixed order:
    role → schema → style → identification guidance → context → honesty.
- `SYSTEM_DIRECTIVE` is exported for chat-style providers that take a
  separate system message.

Public API
----------
build_prompt(model_identifier, freeform_context, has_images) -> str
"""

from __future__ import annotations

from listgen.schemas.models import CONDITION_VALUES

PROMPT_VERSION = "2.0"

SYSTEM_DIRECTIVE = (
    "You are an expert at analyzing products and writing detailed, accurate marketplace listings. "
    "Always give honest condition assessments and accurate product information."
)

_ROLE = (
    "Act as a senior e-commerce content strategist and marketplace listing expert.\n\n"
    "Generate marketplace listing content for this product: **{identifier}**"
)

_SCHEMA = """Reply with exactly ONE JSON object and nothing else that contains braces. Use these keys:

{{
  "seoTitle": "Search-optimised title, 80-120 characters: brand, model, key features",
  "keyFeatures": ["6-10 benefit-led bullet points (build quality, efficiency, durability, capacity)"],
  "productDescription": "2-3 paragraphs, 200-300 words. Who it suits and why. No hype.",
  "specifications": {{
    "brand": "", "model": "", "modelNumber": "",
    "category": "Main category (Electronics, Fashion, Home Appliances, Furniture, Sports, Automotive, ...)",
    "subCategory": "", "dimensions": "L x W x H", "weight": "", "capacity": "", "size": "",
    "color": "", "material": "", "year": "Year of manufacture as a number",
    "condition": "Free-text condition assessment",
    "powerSpecs": "", "connectivity": "", "compatibility": "", "warranty": "",
    "origin": "Country of manufacture if visible", "certifications": "",
    "allSpecs": {{"<any product-specific attribute>": "<value>"}}
  }},
  "shortMarketplaceSummary": "One paragraph, 50-80 words, for eBay / Facebook Marketplace / Google Shopping",
  "longSeoDescription": "1-2 paragraphs, 150-200 words, targeting search intent without repeating earlier sections",
  "seoKeywords": {{
    "primary": ["3-5 keywords"],
    "secondary": ["5-7 keywords"],
    "longTail": ["5-8 long-tail phrases"]
  }},
  "marketplaceTags": ["20-30 categorisation tags"],
  "condition": "{conditions}",
  "conditionNotes": "Visible defects, wear, missing parts",
  "suggestedPrice": {{"min": 0, "max": 0, "currency": "USD", "reasoning": "Short justification"}},
  "warnings": ["Safety or authenticity concerns, if any"],
  "confidence": 0.0
}}"""

_STYLE = """**Tone & Style:**
- Premium retail voice: clean, confident, high clarity
- Zero fluff and no over-selling
- Focus on durability, efficiency and real user benefits
- Do not repeat sentences across sections
- Fill "allSpecs" with every specification that applies to this product type"""

_IDENTIFIER_GUIDANCE = """**Product Model Number:** {identifier}

Use the known manufacturer specifications for this exact model:
- Full technical specifications and ratings
- Complete feature list and compatibility information
- Measurements, materials and certifications"""

_NO_PHOTOS_NOTE = (
    "\n\nNo photos are available. Report the condition as \"good\" unless the additional context "
    "states otherwise, and say so in conditionNotes."
)

_IMAGE_GUIDANCE = """**Note:** Identify the product from the images provided.

Extract from the images:
- Brand, model and model numbers from labels
- All visible text, tags and ratings plates
- Materials, finish and approximate dimensions
- Serial numbers, certifications and safety marks"""

_CONTEXT = "**Additional Context:** {context}"

_HONESTY = (
    "Be accurate and honest about the condition. If you cannot determine a detail from the "
    "information provided, leave it empty and lower the confidence score (0.0-1.0)."
)


def build_prompt(
    model_identifier: str | None = None,
    freeform_context: str | None = None,
    has_images: bool = False,
) -> str:
    """
    Build the provider instruction. With an identifier the provider is told to rely on
    known specs for it; without one it must identify the product from the images.
    `freeform_context` is appended verbatim when non-empty.
    """
    identifier = (model_identifier or "").strip()
    sections = [
        _ROLE.format(identifier=identifier or "the product shown in the images"),
        _SCHEMA.format(conditions="|".join(CONDITION_VALUES)),
        _STYLE,
    ]

    if identifier:
        guidance = _IDENTIFIER_GUIDANCE.format(identifier=identifier)
        if not has_images:
            guidance += _NO_PHOTOS_NOTE
        sections.append(guidance)
    else:
        sections.append(_IMAGE_GUIDANCE)

    if freeform_context and freeform_context.strip():
        sections.append(_CONTEXT.format(context=freeform_context))

    sections.append(_HONESTY)
    return "\n\n".join(sections)


__all__ = ["PROMPT_VERSION", "SYSTEM_DIRECTIVE", "build_prompt"]
