from __future__ import annotations

import logging

import pytest

from listgen.core.parse import FALLBACK_CONFIDENCE, FALLBACK_TITLE, parse_response
from listgen.schemas.models import Condition
from tests.utils import make_settings


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "I could not identify this product, sorry.",
        "{not: valid json}",
        '{"seoTitle": "Truncated payload", "keyFeatures": [',
        "```json\n[]\n```",
    ],
)
def test_no_valid_object_yields_degraded_record(raw):
    out = parse_response(raw, "openai", settings=make_settings())
    assert out.parse_failed is True
    assert out.title == FALLBACK_TITLE
    assert out.title  # never empty
    assert out.condition == Condition.good
    assert out.confidence == pytest.approx(FALLBACK_CONFIDENCE)
    assert out.provider_id == "openai"
    assert out.category.main == "Other"
    assert out.search_keywords == []
    assert out.suggested_price.min == 0.0 and out.suggested_price.max == 0.0
    assert out.suggested_price.currency == "USD"


def test_degraded_description_is_raw_prefix(fixed_now):
    raw = "word " * 400  # 2000 chars, no braces
    out = parse_response(raw, "gemini", settings=make_settings(), generated_at=fixed_now)
    assert out.description == raw[:1000]
    assert out.structured_content.product_description == raw[:1000]
    assert out.generated_at == fixed_now


def test_fallback_length_is_configurable():
    raw = "abc" * 300
    out = parse_response(raw, "gemini", settings=make_settings(fallback_description_chars=500))
    assert len(out.description) == 500


def test_non_string_input_never_raises():
    out = parse_response(None, "gemini")  # type: ignore[arg-type]
    assert out.parse_failed is True
    assert out.description == ""


def test_fallback_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="listgen.core.parse.response"):
        parse_response("no structure at all", "gemini")
    assert any("Could not parse structured response" in r.getMessage() for r in caplog.records)
