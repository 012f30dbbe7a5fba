# listgen/tools/providers/mock_provider.py
"""
Mock Inference Provider (V2)

Purpose
-------
A deterministic, credential-free provider for local development, demos and
tests. It answers the way real models tend to: a sentence of prose, then a
JSON payload in a ```json fence, then a closing remark. This exercises the
same extraction path as a live backend.

Design
------
- Pure string rules over the *instruction* (the model identifier line) and
  the image count. It never reads image bytes.
- Output depends only on the inputs, so repeated calls return identical text.

Usage
-----
from listgen.tools.providers.mock_provider import MockProvider
text = MockProvider().generate(build_prompt("WH-1000XM4", None, False), [])
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence

from listgen.schemas.models import ImagePart

_IDENTIFIER_RE = re.compile(r"^\*\*Product Model Number:\*\*\s*(.+)$", re.MULTILINE)


class MockProvider:
    """Deterministic provider returning a canned listing payload."""

    provider_id = "mock"

    def generate(self, instruction: str, images: Sequence[ImagePart]) -> str:
        m = _IDENTIFIER_RE.search(instruction)
        identifier = m.group(1).strip() if m else ""
        name = identifier or "Unbranded Item"

        payload = {
            "seoTitle": f"{name} - Tested and Ready to Use",
            "keyFeatures": [f"Genuine {name}", "Fully tested", "Ships fast"],
            "productDescription": f"This {name} has been checked and works as described.",
            "specifications": {
                "brand": "",
                "model": identifier,
                "modelNumber": identifier,
                "category": "Other",
                "subCategory": "",
                "condition": "used - good" if images else "",
                "allSpecs": {"photosReviewed": len(images)},
            },
            "shortMarketplaceSummary": f"{name} in working order.",
            "longSeoDescription": f"Looking for a {name}? This one is ready to go.",
            "seoKeywords": {
                "primary": [name.lower()],
                "secondary": ["tested", "working"],
                "longTail": [f"used {name.lower()} for sale"],
            },
            "marketplaceTags": [name.lower(), "tested"],
            "condition": "used - good" if images else "good",
            "conditionNotes": "Light signs of use." if images else "",
            "suggestedPrice": {"min": 20, "max": 40, "currency": "USD", "reasoning": "Typical resale range."},
            "warnings": [],
            "confidence": 0.8 if images else 0.6,
        }
        body = json.dumps(payload, indent=2, sort_keys=True)
        return f"Here is the listing you asked for:\n\n```json\n{body}\n```\n\nLet me know if you need changes."


__all__ = ["MockProvider"]
