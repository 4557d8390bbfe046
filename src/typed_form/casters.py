"""Value casting: raw form strings to typed values.

Each ``cast_*`` function raises its :class:`~typed_form.errors.CastError`
subclass on failure.  :func:`cast_value` dispatches on the declared type and
decides between propagating the error (strict) and keeping the original
string.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

import orjson

from .errors import CastError, InvalidBoolean, InvalidDate, InvalidJson, InvalidNumber
from .model import FieldType

log = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_PREFIXED_INT_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_MAX_EXACT_INT = 2**53

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


# ---------------------------------------------------------------------------
# Per-type casters
# ---------------------------------------------------------------------------

def cast_number(raw: str) -> int | float:
    """Parse the trimmed string as a finite number.

    - Decimal integers → ``int``
    - ``0x`` / ``0o`` / ``0b`` integers → ``int``
    - Integers beyond ±2**53 → ``float`` (non-finite ones fail)
    - Decimal or exponent notation → ``float``
    - Blank → ``0``
    """
    text = raw.strip()
    if not text:
        return 0
    if _INT_RE.fullmatch(text):
        return _integral(text, 10, raw)
    if _PREFIXED_INT_RE.fullmatch(text):
        return _integral(text, 0, raw)
    if _FLOAT_RE.fullmatch(text):
        value = float(text)
        if math.isfinite(value):
            return value
    raise InvalidNumber(raw)


def _integral(text: str, base: int, raw: str) -> int | float:
    try:
        value = int(text, base)
    except ValueError:
        # over the interpreter's int digit limit, far past float range
        raise InvalidNumber(raw) from None
    if abs(value) <= _MAX_EXACT_INT:
        return value
    try:
        return float(value)
    except OverflowError:
        raise InvalidNumber(raw) from None


def cast_boolean(raw: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise InvalidBoolean(raw)


def cast_date(raw: str) -> datetime:
    """Parse an ISO 8601 or RFC 2822 date.

    Values without a UTC offset are taken as UTC.
    """
    text = raw.strip()
    if not text:
        raise InvalidDate(raw)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError, OverflowError):
            raise InvalidDate(raw) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def cast_json(raw: str) -> Any:
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise InvalidJson(raw) from exc


def split_array_value(raw: str, separator: str) -> list[str]:
    """Split on a literal *separator*, strip pieces, drop empty ones.

    An empty separator splits into single characters.
    """
    if not raw.strip():
        return []
    pieces = list(raw) if separator == "" else raw.split(separator)
    return [p.strip() for p in pieces if p.strip()]


_CASTERS: dict[str, Callable[[str], Any]] = {
    FieldType.NUMBER: cast_number,
    FieldType.BOOLEAN: cast_boolean,
    FieldType.DATE: cast_date,
    FieldType.JSON: cast_json,
}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def cast_value(
    field_type: str,
    raw: str,
    *,
    separator: str = ",",
    strict: bool = False,
) -> Any:
    """Cast *raw* according to *field_type*.

    ``array`` splits on *separator*; ``string`` and unrecognized types return
    *raw* unchanged.  A failed cast raises under *strict* and otherwise
    returns *raw*.
    """
    if field_type == FieldType.ARRAY:
        return split_array_value(raw, separator)

    caster = _CASTERS.get(field_type)
    if caster is None:
        return raw

    try:
        return caster(raw)
    except CastError as exc:
        if strict:
            raise
        log.debug("Keeping raw string for %s field: %s", field_type, exc)
        return raw
