"""Exception hierarchy for typed-form."""

from __future__ import annotations


class TypedFormError(Exception):
    """Base class for every error raised by typed-form."""


class InvalidFieldName(TypedFormError):
    """A ``list::`` field name that does not follow the list sub-grammar."""

    def __init__(self, raw_name: str) -> None:
        super().__init__(f'Invalid list field: "{raw_name}"')
        self.raw_name = raw_name


class OptionsError(TypedFormError):
    """Unknown or malformed parse options."""


class CastError(TypedFormError, ValueError):
    """A raw string could not be cast to its declared type."""

    label = "value"

    def __init__(self, field_type: str, raw: str) -> None:
        super().__init__(f'Invalid {self.label}: "{raw}"')
        self.field_type = field_type
        self.raw = raw


class InvalidNumber(CastError):
    label = "number"

    def __init__(self, raw: str) -> None:
        super().__init__("number", raw)


class InvalidBoolean(CastError):
    label = "boolean"

    def __init__(self, raw: str) -> None:
        super().__init__("boolean", raw)


class InvalidDate(CastError):
    label = "date"

    def __init__(self, raw: str) -> None:
        super().__init__("date", raw)


class InvalidJson(CastError):
    label = "JSON"

    def __init__(self, raw: str) -> None:
        super().__init__("json", raw)
