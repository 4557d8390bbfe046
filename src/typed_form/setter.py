"""Path assignment (write side) for the output tree."""

from __future__ import annotations

from typing import Any

from .paths import split_path


def set_deep(tree: dict[str, Any], path: str, value: Any) -> None:
    """Set *value* at dotted *path* inside *tree*.

    Missing intermediates are created as dicts; an intermediate that holds a
    non-dict value is replaced by an empty dict.  A path with no segments is
    a no-op.
    """
    segments = split_path(path)
    if not segments:
        return

    current = tree
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value
