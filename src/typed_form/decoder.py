"""Decoder: typed form entries → nested record."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .casters import cast_value
from .field_name import is_list_field, parse_field_name, parse_list_field
from .getter import get_deep
from .merge import merge_value
from .model import (
    DEFAULT_OPTIONS,
    ArrayField,
    FieldType,
    ListEntry,
    ParseOptions,
    is_attachment,
)
from .pairs import assemble_list_entries
from .setter import set_deep
from .sources import FormSource, iter_entries

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse_typed_form(source: FormSource, options: ParseOptions | None = None) -> dict[str, Any]:
    """Decode a query string, form container, mapping or pair iterable.

    Example::

        parse_typed_form("number::user.age=30&array::tags=a,b")
        # -> {"user": {"age": 30}, "tags": ["a", "b"]}
    """
    return decode_entries(iter_entries(source), options)


def decode_entries(
    entries: Iterable[tuple[str, Any]],
    options: ParseOptions | None = None,
) -> dict[str, Any]:
    """Decode ordered ``(name, value)`` pairs into a fresh nested dict.

    1. ``list::`` entries are buffered and paired after all other entries
    2. Attachments are stored as-is at their path (no casting)
    3. Other values are cast, merged with any earlier value, and stored
    4. With ``ignore_empty``, blank values are skipped and empty list
       elements are stripped at the end
    """
    opts = options or DEFAULT_OPTIONS
    out: dict[str, Any] = {}
    list_entries: list[ListEntry] = []

    for name, raw_value in entries:
        parsed = parse_field_name(name)

        if is_list_field(parsed):
            entry = _to_list_entry(name, raw_value, opts)
            if entry is not None:
                list_entries.append(entry)
            continue

        if is_attachment(raw_value):
            set_deep(out, parsed.key, raw_value)
            continue

        text = _stringify(raw_value)
        if opts.ignore_empty and not text.strip():
            continue

        if isinstance(parsed, ArrayField):
            separator = parsed.separator
            if separator is None:
                separator = opts.default_array_separator
            value = cast_value(FieldType.ARRAY, text, separator=separator)
            is_array = True
        else:
            value = cast_value(parsed.type, text, strict=opts.strict)
            is_array = False

        existing = get_deep(out, parsed.key)
        set_deep(out, parsed.key, merge_value(existing, value, is_array=is_array))

    assemble_list_entries(list_entries, out)

    if opts.ignore_empty:
        return strip_empty(out)
    return out


# ---------------------------------------------------------------------------
# Cleanup
# ---------------------------------------------------------------------------

def is_empty_value(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def strip_empty(value: Any) -> Any:
    """Drop ``""`` / ``None`` elements from lists and recurse into dicts.

    Returns new containers; applying it twice gives the same result as once.
    """
    if isinstance(value, list):
        return [item for item in value if not is_empty_value(item)]
    if isinstance(value, dict):
        return {key: strip_empty(item) for key, item in value.items()}
    return value


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _to_list_entry(name: str, raw_value: Any, opts: ParseOptions) -> ListEntry | None:
    field = parse_list_field(name, strict=opts.strict)
    if field is None:
        return None
    if is_attachment(raw_value):
        log.debug("Dropping attachment submitted to list field %r", name)
        return None
    return ListEntry(field.variant, field.group_name, field.index, _stringify(raw_value))


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
