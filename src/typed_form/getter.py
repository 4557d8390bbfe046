"""Path resolution (read side) for the output tree."""

from __future__ import annotations

from typing import Any

from .model import Absent
from .paths import split_path


def get_deep(tree: dict[str, Any], path: str) -> Any:
    """Resolve a dotted *path* in *tree* without creating anything.

    Returns ``Absent`` when a segment is missing, when an intermediate node is
    not a dict, or when *path* has no segments.
    """
    segments = split_path(path)
    if not segments:
        return Absent

    current: Any = tree
    for segment in segments:
        if not isinstance(current, dict) or segment not in current:
            return Absent
        current = current[segment]
    return current
