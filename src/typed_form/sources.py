"""Input adapters: reduce form-like containers to ordered ``(name, value)`` pairs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl

FormSource = str | bytes | Mapping[str, Any] | Iterable[tuple[str, Any]]


def iter_entries(source: FormSource) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` pairs from *source* in submission order.

    Supported shapes:

    - ``str`` / ``bytes``: a URL query string (leading ``?`` ignored)
    - Starlette ``FormData`` / ``QueryParams`` (``multi_items()``)
    - Werkzeug ``MultiDict`` (``getlist()`` + ``items(multi=True)``)
    - Django ``QueryDict`` (``getlist()`` + ``lists()``)
    - ``multidict.MultiDict`` (``getall()``)
    - any other mapping; list and tuple values expand to one pair each
    - any iterable of 2-tuples
    """
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode("utf-8", errors="replace")
    if isinstance(source, str):
        pairs: Iterable[tuple[Any, Any]] = parse_qsl(
            source.removeprefix("?"), keep_blank_values=True
        )
    elif callable(getattr(source, "multi_items", None)):
        pairs = source.multi_items()
    elif callable(getattr(source, "getlist", None)):
        pairs = _multi_dict_items(source)
    elif callable(getattr(source, "getall", None)):
        pairs = source.items()
    elif isinstance(source, Mapping):
        pairs = _expand(source.items())
    else:
        pairs = source

    for name, value in pairs:
        yield str(name), value


def _multi_dict_items(source: Any) -> Iterable[tuple[Any, Any]]:
    try:
        return list(source.items(multi=True))
    except TypeError:
        # QueryDict.items() takes no arguments
        return list(_expand(source.lists()))


def _expand(items: Iterable[tuple[Any, Any]]) -> Iterator[tuple[Any, Any]]:
    for name, value in items:
        if isinstance(value, (list, tuple)):
            for item in value:
                yield name, item
        else:
            yield name, value
