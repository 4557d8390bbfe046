"""Assembly of ``list::key`` / ``list::value`` entries into dicts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .getter import get_deep
from .model import ListEntry
from .setter import set_deep

log = logging.getLogger(__name__)


def assemble_list_entries(entries: Iterable[ListEntry], target: dict[str, Any]) -> None:
    """Write paired key/value entries into *target*.

    Each key entry becomes ``target[group_name][key] = value`` where *value*
    comes from the value entry with the same group name and index (last one
    wins, ``""`` when missing).  Key entries with a blank key are skipped.
    """
    entries = list(entries)
    if not entries:
        return

    keys = [e for e in entries if e.variant == "key"]
    values = {e.pair_key: e.raw_value for e in entries if e.variant == "value"}

    for key_entry in keys:
        if not key_entry.raw_value.strip():
            log.debug("Skipping blank key for %s", key_entry.pair_key)
            continue

        matched = values.get(key_entry.pair_key, "")

        container = get_deep(target, key_entry.group_name)
        if not isinstance(container, dict):
            set_deep(target, key_entry.group_name, {})
            container = get_deep(target, key_entry.group_name)

        # A group name made only of dots has no path segments.
        if isinstance(container, dict):
            container[key_entry.raw_value] = matched
