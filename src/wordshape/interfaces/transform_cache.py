"""Interface for transformation caches.

A transformation cache memoizes a pure string transformation keyed by the raw
input string. Because the memoized transformation is context-free, entries are
never invalidated: any value stored for a key equals a fresh computation.
"""

import abc


class TransformCache(abc.ABC):
    """Contract for a string -> string memo table."""

    @abc.abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value cached under `key`, or None on a miss."""

    @abc.abstractmethod
    def put(self, key: str, value: str) -> str:
        """Store `value` under `key` unless a value is already present.

        The first writer wins; a later writer's value is discarded.

        Returns:
            The value now cached under `key`.
        """

    @abc.abstractmethod
    def __len__(self) -> int:
        """Number of cached entries."""

    @abc.abstractmethod
    def __contains__(self, key: object) -> bool:
        """True if `key` has a cached value."""
