from __future__ import annotations

from .condition import CONDITION_SYNONYMS, DEFAULT_CONDITION, clean_condition_token, normalize_condition

__all__ = [
    "CONDITION_SYNONYMS",
    "DEFAULT_CONDITION",
    "clean_condition_token",
    "normalize_condition",
]
