"""Dotted path syntax shared by the getter and setter."""

from __future__ import annotations

PATH_SEPARATOR = "."


def split_path(path: str) -> list[str]:
    """Split *path* on dots, ignoring empty segments (``.a..b.`` → ``[a, b]``)."""
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]
