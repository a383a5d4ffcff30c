# File: /tableviews/engine/values.py | Version: 1.1 | Title: Best-effort cell value coercion (truthiness, numbers, dates, text)
"""
Cell values are not validated against their column type: a number column
may hold "12", a date column may hold garbage after a type change. These
helpers coerce whatever is stored without ever raising.

Numbers and timestamps that cannot be parsed come back as NaN, so any
ordered comparison against them is False. A stored null is a value, not a
gap: it reads as 0 (the epoch, for dates). Callers that need to tell a
missing cell apart must check for the key themselves.

Numeric strings follow the grid's number syntax: ASCII decimal literals,
"Infinity" with an optional sign, and unsigned 0x / 0o / 0b integers.
Python-only spellings ("inf", "nan", "1_000", non-ASCII digits) are NaN.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any

NAN = float("nan")

# Dates further than this from the epoch (in ms) are invalid
MAX_TIMESTAMP_MS = 8.64e15

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_RADIX_RE = re.compile(
    r"0(?:[xX](?P<hex>[0-9a-fA-F]+)|[oO](?P<oct>[0-7]+)|[bB](?P<bin>[01]+))"
)
_RADIX_BASES = {"hex": 16, "oct": 8, "bin": 2}

# Tried in order after ISO 8601 parsing fails
_DATE_FORMATS = (
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_truthy(value: Any) -> bool:
    """Falsy: None, False, 0, NaN and the empty string. Everything else is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not is_nan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _int_to_float(value: int) -> float:
    # JSON allows integers far beyond double range; they saturate
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _parse_number(s: str) -> float:
    if _DECIMAL_RE.fullmatch(s):
        return float(s)
    if _INFINITY_RE.fullmatch(s):
        return -math.inf if s.startswith("-") else math.inf
    m = _RADIX_RE.fullmatch(s)
    if m:
        for group, base in _RADIX_BASES.items():
            if m.group(group) is not None:
                return _int_to_float(int(m.group(group), base))
    return NAN


def to_number(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int):
        return _int_to_float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return 0.0
        return _parse_number(s)
    return NAN


def _epoch_ms(dt: datetime) -> float:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp() * 1000.0


def _parse_date_string(s: str) -> float:
    try:
        return _epoch_ms(datetime.fromisoformat(s))
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return _epoch_ms(datetime.strptime(s, fmt))
        except ValueError:
            continue
    return NAN


def to_timestamp(value: Any) -> float:
    """Milliseconds since the epoch (UTC), or NaN when the value is not a date."""
    if value is None:
        return 0.0
    if isinstance(value, datetime):
        return _epoch_ms(value)
    if isinstance(value, date):
        return _epoch_ms(datetime(value.year, value.month, value.day))
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        ms = _int_to_float(value) if isinstance(value, int) else value
        return ms if abs(ms) <= MAX_TIMESTAMP_MS else NAN
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return NAN
        return _parse_date_string(s)
    return NAN


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if is_nan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # past the interpreter's int digit limit
            return to_text(_int_to_float(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(v) for v in value)
    return str(value)
