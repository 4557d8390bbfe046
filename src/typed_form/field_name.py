"""Field-name grammar: ``type(payload)::path`` and ``list::variant::group::index``.

Examples::

    user.name            -> ScalarField("string", "user.name")
    number::age          -> ScalarField("number", "age")
    array(|)::tags       -> ArrayField("tags", separator="|")
    list::key::env::0    -> ListField("key", "env", "0")
    1bad::x              -> ScalarField("string", "1bad::x")
"""

from __future__ import annotations

import logging
import re

from .errors import InvalidFieldName
from .model import ArrayField, FieldType, ListField, ParsedFieldName, ScalarField

log = logging.getLogger(__name__)

TYPE_SEPARATOR = "::"

_TYPE_TOKEN_RE = re.compile(r"([a-z]+)(\((.*)\))?", re.IGNORECASE | re.ASCII)
_KNOWN_TYPES = frozenset(t.value for t in FieldType)


def parse_field_name(raw: str) -> ParsedFieldName:
    """Classify a raw field name.

    ``list`` names are classified by :func:`parse_list_field`; here they only
    produce ``ScalarField("list", ...)`` so the caller knows to re-parse the
    whole name with the stricter sub-grammar.
    """
    token, sep, path = raw.partition(TYPE_SEPARATOR)
    if not sep:
        return ScalarField(FieldType.STRING, raw)

    m = _TYPE_TOKEN_RE.fullmatch(token)
    if m is None:
        return ScalarField(FieldType.STRING, raw)

    type_name = m.group(1).lower()
    if type_name == FieldType.ARRAY:
        return ArrayField(path, separator=m.group(3))
    if type_name in _KNOWN_TYPES:
        return ScalarField(FieldType(type_name), path)
    return ScalarField(type_name, path)


def is_list_field(parsed: ParsedFieldName) -> bool:
    return isinstance(parsed, ScalarField) and parsed.type == FieldType.LIST


def parse_list_field(raw: str, strict: bool = False) -> ListField | None:
    """Parse ``list::<key|value>::<group>::<index>``.

    The group name may itself contain ``::``; the index is always the last
    segment.  Invalid names raise :class:`InvalidFieldName` when *strict*,
    otherwise return ``None``.
    """
    parts = raw.split(TYPE_SEPARATOR)
    if len(parts) < 4:
        return _reject(raw, strict)

    variant = parts[1].lower()
    if variant not in ("key", "value"):
        return _reject(raw, strict)

    group_name = TYPE_SEPARATOR.join(parts[2:-1])
    index = parts[-1]
    if not group_name.strip() or not index.strip():
        return _reject(raw, strict)

    return ListField(variant, group_name, index)


def _reject(raw: str, strict: bool) -> None:
    if strict:
        raise InvalidFieldName(raw)
    log.debug("Dropping invalid list field %r", raw)
    return None
