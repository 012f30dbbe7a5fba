# listgen/core/parse/coerce.py
"""
Decode-or-default combinators for provider JSON.

Each helper takes an arbitrary decoded JSON value and returns a value of the
target type, falling back to a field-local default. None of them raise, so
one malformed field never aborts the parse of its siblings.

Numeric rule (pinned): strings are read with JavaScript parseFloat/parseInt
prefix semantics, so "199.99abc" → 199.99 and "abc" → default. Booleans are
never numbers; non-finite values (NaN, Infinity) and integers too large for a
float fall back to the default.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number_to_str(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_str(value: Any, default: str = "") -> str:
    """Strings pass through unchanged; numbers are stringified; empty or other → default."""
    if isinstance(value, str):
        return value or default
    if _is_number(value):
        return _number_to_str(value)
    return default


def as_str_list(value: Any) -> list[str]:
    """Non-lists → []. Keeps string items, stringifies numbers, drops everything else."""
    if not isinstance(value, list):
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        elif _is_number(item):
            out.append(_number_to_str(item))
    return out


def as_float(value: Any, default: T = 0.0) -> float | T:  # type: ignore[assignment]
    m = _FLOAT_PREFIX_RE.match(value) if isinstance(value, str) else None
    if _is_number(value):
        raw: Any = value
    elif m:
        raw = m.group(1)
    else:
        return default
    try:
        f = float(raw)
    except OverflowError:
        # JSON integers are unbounded; float() refuses the huge ones
        return default
    return f if math.isfinite(f) else default


def as_int(value: Any, default: T = None) -> int | T:  # type: ignore[assignment]
    try:
        if _is_number(value):
            return int(value) if math.isfinite(value) else default
        m = _INT_PREFIX_RE.match(value) if isinstance(value, str) else None
        if m:
            return int(m.group(1))
    except (OverflowError, ValueError):
        # oversized ints overflow isfinite(); over-long digit strings hit the int() digit limit
        return default
    return default


def as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, dict) else {}


def as_spec_map(value: Any) -> dict[str, str | int | float]:
    """Open-ended attribute map: keep scalars, JSON-encode nested values, drop nulls."""
    out: dict[str, str | int | float] = {}
    for k, v in as_mapping(value).items():
        if v is None:
            continue
        if isinstance(v, str) or _is_number(v):
            if isinstance(v, float) and not math.isfinite(v):
                continue
            out[str(k)] = v
        else:
            out[str(k)] = json.dumps(v, ensure_ascii=False, sort_keys=True)
    return out


def clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


__all__ = ["as_str", "as_str_list", "as_float", "as_int", "as_mapping", "as_spec_map", "clamp_unit"]
