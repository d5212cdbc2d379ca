"""
Locale Store

Static per-locale bundles with dotted-path lookup and the default-locale
fallback chain, plus the flatten/unflatten helpers used to move between
nested bundles and the flat ``section.key.0.field`` rows kept in the
database.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wedsite.i18n.bundles import STATIC_BUNDLES

_MISSING = object()


def should_render(value: Any) -> bool:
    """Only non-empty strings (after trimming) are shown to guests."""
    return isinstance(value, str) and bool(value.strip())


def get_path(bundle: Any, key: str, default: Any = None) -> Any:
    """Walk ``bundle`` along a dotted ``key``; numeric segments index lists."""
    current = bundle
    for segment in key.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            if index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current


def flatten(value: Any, prefix: str = "") -> dict[str, str]:
    """Flatten a nested bundle into ``{"a.b.0.c": "text"}`` pairs."""
    flat: dict[str, str] = {}
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, list):
        items = ((str(i), item) for i, item in enumerate(value))
    else:
        if prefix:
            flat[prefix] = value
        return flat
    for key, item in items:
        path = f"{prefix}.{key}" if prefix else str(key)
        flat.update(flatten(item, path))
    return flat


def unflatten(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Rebuild a nested bundle from dotted keys.

    A segment followed by a numeric segment becomes a list, so
    ``features.items.0.title`` yields ``{"features": {"items": [{"title": ...}]}}``.
    Malformed keys that clash with an existing leaf are skipped.
    """
    result: dict[str, Any] = {}
    # Sorting makes lower list indexes arrive first
    for key in sorted(flat, key=_sort_key):
        segments = key.split(".")
        current: Any = result
        ok = True
        for segment, next_segment in zip(segments, segments[1:]):
            container = [] if next_segment.isdigit() else {}
            current = _child(current, segment, container)
            if current is None:
                ok = False
                break
        if ok:
            _assign(current, segments[-1], flat[key])
    return result


def _sort_key(key: str) -> tuple:
    return tuple((0, int(s), "") if s.isdigit() else (1, 0, s) for s in key.split("."))


def _child(current: Any, segment: str, container: Any) -> Any:
    if isinstance(current, list):
        if not segment.isdigit():
            return None
        index = int(segment)
        while len(current) <= index:
            current.append(None)
        if current[index] is None:
            current[index] = container
        existing = current[index]
    elif isinstance(current, dict):
        existing = current.setdefault(segment, container)
    else:
        return None
    return existing if isinstance(existing, (dict, list)) else None


def _assign(current: Any, segment: str, value: Any) -> None:
    if isinstance(current, list) and segment.isdigit():
        index = int(segment)
        while len(current) <= index:
            current.append(None)
        current[index] = value
    elif isinstance(current, dict):
        current[segment] = value


class LocaleStore:
    """Read-only view over the static bundles."""

    def __init__(
        self,
        bundles: Mapping[str, Mapping[str, Any]] | None = None,
        default_locale: str = "en",
    ):
        self.bundles = dict(bundles if bundles is not None else STATIC_BUNDLES)
        if default_locale not in self.bundles:
            raise ValueError(f"default locale '{default_locale}' has no bundle")
        self.default_locale = default_locale

    @property
    def locales(self) -> list[str]:
        return list(self.bundles)

    def bundle(self, locale: str) -> Mapping[str, Any]:
        return self.bundles.get(locale, self.bundles[self.default_locale])

    def lookup(self, key: str, locale: str, fallback: str | None = None) -> str:
        """Resolve ``key`` for ``locale``; never raises.

        Order: requested locale, default locale, ``fallback``, the key itself.
        """
        for candidate in (locale, self.default_locale):
            value = get_path(self.bundles.get(candidate, {}), key, _MISSING)
            if should_render(value):
                return value
        if should_render(fallback):
            return fallback
        return key

    def missing_keys(self, locale: str) -> list[str]:
        """Default-locale keys that ``locale`` does not render on its own."""
        target = flatten(self.bundles.get(locale, {}))
        return sorted(
            key
            for key in flatten(self.bundles[self.default_locale])
            if not should_render(target.get(key))
        )
