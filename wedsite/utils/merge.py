"""
Deep-merge helpers shared by the config composer and the translation overlay.

Merge semantics:
- nested dicts merge recursively
- lists (and any other value) in the override replace the base wholesale
- keys present only in the base are kept
"""

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a new dict with ``override`` merged onto ``base``.

    Neither argument is mutated.
    """
    result = copy.deepcopy(dict(base))
    if not override:
        return result
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def merge_sections(
    defaults: Mapping[str, Any], override: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Merge ``override`` onto ``defaults`` one top-level section at a time.

    A section that is a dict on both sides is deep-merged so defaults the
    override does not mention survive; any other section value replaces
    the default outright. ``None`` sections in the override are ignored.
    """
    result = copy.deepcopy(dict(defaults))
    for section, value in (override or {}).items():
        if value is None:
            continue
        current = result.get(section)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[section] = deep_merge(current, value)
        else:
            result[section] = copy.deepcopy(value)
    return result


def prune_empty(value: Any) -> Any:
    """Drop blank strings (and containers left empty by that) from ``value``.

    Used before overlaying translated strings so an empty translation never
    erases a default.
    """
    if isinstance(value, Mapping):
        pruned = {}
        for key, item in value.items():
            item = prune_empty(item)
            if item is None or item == {} or item == []:
                continue
            pruned[key] = item
        return pruned
    if isinstance(value, list):
        items = [prune_empty(item) for item in value]
        # Lists replace wholesale, so one blank entry invalidates the list
        if any(item is None or item == {} for item in items):
            return None
        return items
    if isinstance(value, str):
        return value if value.strip() else None
    return value
