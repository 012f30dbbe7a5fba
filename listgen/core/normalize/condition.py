# listgen/core/normalize/condition.py
"""
Deterministic condition normalizer (free text → Condition).

The token is lowercased and stripped to `[a-z-]` before matching, so synonym
keys are stored without spaces ("brand new" → "brandnew"). Synonyms are tried
in table order; the first substring hit wins.
"""

from __future__ import annotations

import re

from listgen.schemas.models import Condition

_STRIP_RE = re.compile(r"[^a-z-]")

DEFAULT_CONDITION = Condition.good

# Order matters: "used but damaged" resolves to good, not poor.
CONDITION_SYNONYMS: tuple[tuple[str, Condition], ...] = (
    ("brandnew", Condition.new),
    ("likenew", Condition.like_new),
    ("mint", Condition.like_new),
    ("verygood", Condition.excellent),
    ("forparts", Condition.for_parts),
    ("used", Condition.good),
    ("acceptable", Condition.fair),
    ("damaged", Condition.poor),
    ("broken", Condition.for_parts),
)


def clean_condition_token(raw: object) -> str:
    if not isinstance(raw, str):
        return ""
    return _STRIP_RE.sub("", raw.lower())


def normalize_condition(raw: object) -> Condition:
    """Map any input to one of the seven Condition values. Never raises."""
    token = clean_condition_token(raw)
    if not token:
        return DEFAULT_CONDITION

    try:
        return Condition(token)
    except ValueError:
        pass

    for key, value in CONDITION_SYNONYMS:
        if key in token:
            return value
    return DEFAULT_CONDITION


__all__ = ["CONDITION_SYNONYMS", "DEFAULT_CONDITION", "clean_condition_token", "normalize_condition"]
