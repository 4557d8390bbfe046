"""Data model for typed-form: field classifications, list entries and options."""

from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any, Literal, Union

from .errors import OptionsError


# ---------------------------------------------------------------------------
# Absent — singleton for unresolved paths
# ---------------------------------------------------------------------------

class _AbsentType:
    """Sentinel returned when a path cannot be resolved in the output tree."""

    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False


Absent = _AbsentType()


# ---------------------------------------------------------------------------
# FieldType
# ---------------------------------------------------------------------------

class FieldType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    JSON = "json"
    DATE = "date"
    LIST = "list"


# ---------------------------------------------------------------------------
# Parsed field names
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScalarField:
    type: str  # a FieldType value, or an unrecognized token cast as string
    key: str


@dataclass(frozen=True, slots=True)
class ArrayField:
    key: str
    separator: str | None = None


@dataclass(frozen=True, slots=True)
class ListField:
    variant: Literal["key", "value"]
    group_name: str
    index: str


ParsedFieldName = Union[ScalarField, ArrayField, ListField]


@dataclass(frozen=True, slots=True)
class ListEntry:
    """A buffered ``list::`` entry awaiting pairing."""

    variant: Literal["key", "value"]
    group_name: str
    index: str
    raw_value: str

    @property
    def pair_key(self) -> str:
        return f"{self.group_name}::{self.index}"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

_CAMEL_ALIASES: dict[str, str] = {
    "ignoreEmpty": "ignore_empty",
    "defaultArraySeparator": "default_array_separator",
}


@dataclass(frozen=True, slots=True)
class ParseOptions:
    ignore_empty: bool = False
    strict: bool = False
    default_array_separator: str = ","

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ParseOptions:
        """Build options from a mapping of snake_case or camelCase names."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name, value in mapping.items():
            attr = _CAMEL_ALIASES.get(name, name)
            if attr not in known:
                raise OptionsError(f"Unknown parse option: {name!r}")
            kwargs[attr] = value
        separator = kwargs.get("default_array_separator", ",")
        if not isinstance(separator, str):
            raise OptionsError(
                f"default_array_separator must be a string, got {type(separator).__name__}"
            )
        return cls(**kwargs)


DEFAULT_OPTIONS = ParseOptions()


# ---------------------------------------------------------------------------
# Attachments
# ---------------------------------------------------------------------------

def is_attachment(value: object) -> bool:
    """Return True for opaque binary values (uploaded files, raw bytes)."""
    if isinstance(value, str):
        return False
    if isinstance(value, (bytes, bytearray, memoryview, io.IOBase)):
        return True
    return callable(getattr(value, "read", None))
