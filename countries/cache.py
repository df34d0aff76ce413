from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Tuple

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 15 * 60


class ResponseCache:
    """
    In-memory cache of upstream responses with time-based expiry.

    Entries are never returned once their expiry has passed; a stale entry
    is evicted by the ``get`` that finds it. There is no size bound and no
    LRU policy: entries live until they expire, ``clear`` is called, or the
    process exits.
    """

    def __init__(self, default_ttl: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        """Return the cached value for ``key`` or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self._clock():
            self._entries.pop(key, None)
            logger.debug("cache expired: %s", key)
            return None
        return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store ``value`` until now + ttl. ``ttl=None`` uses the default; 0 expires at once."""
        ttl_seconds = self.default_ttl if ttl is None else ttl
        self._entries[key] = (self._clock() + ttl_seconds, value)

    def clear(self) -> None:
        self._entries = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
