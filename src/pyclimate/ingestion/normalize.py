"""Normalization helpers.

Centralizes defensive numeric parsing for TDV fields.
"""

from __future__ import annotations

import math
import re
from typing import Any

_FLOAT_BODY = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_INT_BODY = r"[+-]?\d+"

_FLOAT_FULL = re.compile(rf"\s*({_FLOAT_BODY})\s*")
_INT_FULL = re.compile(rf"\s*({_INT_BODY})\s*")
_FLOAT_PREFIX = re.compile(rf"\s*({_FLOAT_BODY})")
_INT_PREFIX = re.compile(rf"\s*({_INT_BODY})")


def _finite_or_none(result: float) -> float | None:
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def _to_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit.
        return None


def safe_float(value: Any) -> float | None:
    """Parse a complete decimal number, or return ``None``.

    Only plain decimal notation (with optional exponent) is accepted;
    ``nan``, ``inf`` and digit separators are rejected.
    """
    if value is None:
        return None
    match = _FLOAT_FULL.fullmatch(str(value))
    if match is None:
        return None
    return _finite_or_none(float(match.group(1)))


def safe_int(value: Any) -> int | None:
    if value is None:
        return None
    match = _INT_FULL.fullmatch(str(value))
    if match is None:
        return None
    return _to_int(match.group(1))


def leading_float(value: Any) -> float:
    """Parse the longest numeric prefix of *value* the way C ``atof`` does.

    ``"12.5abc"`` gives ``12.5``; text without a numeric prefix gives ``0.0``.
    Unlike ``atof``, a prefix that overflows to infinity (``"1e999"``) also
    gives ``0.0``, so the result is always finite.
    """
    if value is None:
        return 0.0
    match = _FLOAT_PREFIX.match(str(value))
    if match is None:
        return 0.0
    result = _finite_or_none(float(match.group(1)))
    return 0.0 if result is None else result


def leading_int(value: Any) -> int:
    """Parse the integer prefix of *value* the way C ``atol`` does."""
    if value is None:
        return 0
    match = _INT_PREFIX.match(str(value))
    if match is None:
        return 0
    result = _to_int(match.group(1))
    return 0 if result is None else result


def truncate_flag(value: float) -> bool:
    """Interpret a 0.0/1.0 flag field: truncate toward zero, then test non-zero."""
    return int(value) != 0
