"""In-memory transformation cache."""

import logging
import threading

from wordshape.interfaces.transform_cache import TransformCache

logger = logging.getLogger(__name__)


class InMemoryTransformCache(TransformCache):
    """Unbounded, thread-safe dict-backed memo table.

    Entries grow monotonically for the lifetime of the instance and are never
    evicted. This suits a small, finite vocabulary of identifier-like strings.

    `hits` and `misses` count `get()` outcomes and exist for instrumentation.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
        return value

    def put(self, key: str, value: str) -> str:
        with self._lock:
            if (existing := self._entries.get(key)) is not None:
                return existing
            self._entries[key] = value
        logger.debug("Cached transformation %r -> %r", key, value)
        return value

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
