"""Merging of repeated submissions of the same field."""

from __future__ import annotations

from typing import Any

from .model import _AbsentType


def merge_value(existing: Any, incoming: Any, *, is_array: bool) -> Any:
    """Return the value to store given the one already at the path.

    Array fields concatenate: ``[*existing, *incoming]`` (a non-list
    *existing* becomes the first element).  Other fields store *incoming* on
    first sight and promote to a list from the second occurrence on.
    Never mutates *existing*.
    """
    match (is_array, existing):
        case (_, _AbsentType()):
            return incoming
        case (True, list()):
            return [*existing, *incoming]
        case (True, _):
            return [existing, *incoming]
        case (False, list()):
            return [*existing, incoming]
        case _:
            return [existing, incoming]
