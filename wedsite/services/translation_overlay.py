"""
Live Translation Overlay

Per-locale bundles built from the static Locale Store plus the overrides
admins edit in ``translation_values``.

Two modes:
- static: ``load()`` once at startup, never refetch
- live editing: while at least one ``editing_session()`` is open a
  background task re-runs ``load()`` every ``poll_interval`` seconds and
  notifies subscribers when the bundles change. The task is created on
  first session entry and cancelled on last session exit.

Overrides replace bundle strings at the exact leaf path they name, so a
single ``features.items.0.title`` override leaves the rest of
``features.items`` intact. Blank override values are ignored.
"""

import asyncio
import copy
import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from wedsite.i18n.store import LocaleStore, flatten, get_path, should_render, unflatten
from wedsite.utils.merge import deep_merge, prune_empty

logger = logging.getLogger(__name__)

OverrideLoader = Callable[[], Awaitable[dict[str, dict[str, str]]]]


class TranslationOverlay:
    def __init__(
        self,
        store: LocaleStore,
        loader: OverrideLoader | None = None,
        poll_interval: float = 2.0,
    ):
        self.store = store
        self.poll_interval = poll_interval
        self.version = 0
        self._loader = loader
        self._overrides: dict[str, dict[str, str]] = {}
        self._bundles: dict[str, dict[str, Any]] = {
            locale: copy.deepcopy(dict(bundle)) for locale, bundle in store.bundles.items()
        }
        self._sections: dict[tuple[str, str], dict[str, Any]] = {}
        self._ready = asyncio.Event()
        self._load_lock = asyncio.Lock()
        self._session_lock = asyncio.Lock()
        self._sessions = 0
        self._poll_task: asyncio.Task | None = None
        self._subscribers: list[asyncio.Queue] = []

    # ── Loading ───────────────────────────────────────────────────────────────

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    @property
    def is_polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    async def load(self) -> bool:
        """Fetch overrides and rebuild bundles. Returns True when anything changed.

        A failing loader keeps the last good overrides (static bundles on
        the first load) and logs a warning; it never raises.
        """
        async with self._load_lock:
            if self._loader is None:
                overrides: dict[str, dict[str, str]] = {}
            else:
                try:
                    overrides = await self._loader()
                except Exception as e:
                    logger.warning("Translation overrides unavailable, serving %s bundles: %s",
                                   "last loaded" if self.is_ready else "static", e)
                    self._ready.set()
                    return False

            changed = overrides != self._overrides
            if changed:
                self._overrides = copy.deepcopy(overrides)
                self._rebuild()
            self._ready.set()

        if changed:
            logger.info("Translation bundles reloaded (version %d)", self.version)
            self._notify()
        return changed

    async def wait_ready(self, timeout: float) -> bool:
        """Wait for the first load to finish; False on timeout."""
        if self.is_ready:
            return True
        try:
            await asyncio.wait_for(self._ready.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True

    def _rebuild(self) -> None:
        bundles = {}
        for locale, static in self.store.bundles.items():
            flat = flatten(static)
            flat.update(
                {key: value for key, value in self._overrides.get(locale, {}).items() if should_render(value)}
            )
            bundles[locale] = unflatten(flat)
        self._bundles = bundles
        self._sections.clear()
        self.version += 1

    # ── Lookup ────────────────────────────────────────────────────────────────

    def bundle(self, locale: str) -> dict[str, Any]:
        """Merged bundle for ``locale`` (default locale when unsupported)."""
        return self._bundles.get(locale, self._bundles[self.store.default_locale])

    def bundles(self) -> dict[str, dict[str, Any]]:
        return dict(self._bundles)

    def t(self, key: str, locale: str, fallback: str | None = None) -> str:
        """Resolve one key. Never raises.

        Order: override for ``locale``, static ``locale``, static default
        locale, ``fallback``, the key itself.
        """
        override = self._overrides.get(locale, {}).get(key)
        if should_render(override):
            return override
        return self.store.lookup(key, locale, fallback)

    def section(self, locale: str, name: str) -> dict[str, Any]:
        """Merged ``name`` subtree for ``locale`` with default-locale gaps filled.

        Cached until the next reload. Callers must not mutate the result.
        """
        cache_key = (locale, name)
        if cache_key not in self._sections:
            base = get_path(self.bundle(self.store.default_locale), name, {})
            localized = get_path(self.bundle(locale), name, {})
            self._sections[cache_key] = deep_merge(
                prune_empty(base) if isinstance(base, dict) else {},
                prune_empty(localized) if isinstance(localized, dict) else {},
            )
        return self._sections[cache_key]

    def invalidate_sections(self, locale: str | None = None) -> None:
        if locale is None:
            self._sections.clear()
            return
        for cache_key in [k for k in self._sections if k[0] == locale]:
            del self._sections[cache_key]

    # ── Editing sessions ──────────────────────────────────────────────────────

    @asynccontextmanager
    async def editing_session(self):
        """Keep live polling running for the duration of the ``async with`` block."""
        await self._enter_session()
        try:
            yield self
        finally:
            await self._exit_session()

    async def _enter_session(self) -> None:
        async with self._session_lock:
            self._sessions += 1
            if self._sessions == 1:
                self._poll_task = asyncio.create_task(self._poll(), name="translation-overlay-poll")
                logger.info("Live translation polling started (every %.1fs)", self.poll_interval)

    async def _exit_session(self) -> None:
        async with self._session_lock:
            self._sessions -= 1
            if self._sessions > 0 or self._poll_task is None:
                return
            task, self._poll_task = self._poll_task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Live translation polling stopped")

    async def _poll(self) -> None:
        while True:
            await asyncio.sleep(self.poll_interval)
            await self.load()

    async def close(self) -> None:
        """Cancel polling regardless of open sessions (application shutdown)."""
        async with self._session_lock:
            self._sessions = 0
            task, self._poll_task = self._poll_task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

    # ── Subscribers ───────────────────────────────────────────────────────────

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=10)
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def _notify(self) -> None:
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(self.version)
            except asyncio.QueueFull:
                logger.debug("Dropping overlay notification for a slow subscriber")
