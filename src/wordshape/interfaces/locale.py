"""Locale contracts: key lookup and the current-locale holder.

This module defines:

* `Resolution`, the explicit result of a key lookup (found, not found, or
  found with a value that is not a string);
* `Locale`, a collection of key -> template mappings for one language;
* `LocaleRegistry`, the owner of the process "current locale", created lazily
  on first demand and exactly once, even under concurrent first callers.

Lookup rules implemented by `Locale.resolve`:

1. A string stored under the key wins.
2. Otherwise a string default wins.
3. Otherwise the result is `NOT_FOUND`, or `WRONG_KIND` when the key holds a
   non-string value.
"""

from __future__ import annotations

import abc
import threading
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


def _get_no_default() -> "_NoDefaultType":
    # Factory used by pickle to retrieve the one true instance.
    return NO_DEFAULT


@dataclass(frozen=True)
class _NoDefaultType:
    """Sentinel marking a lookup made without an explicit default.

    This is distinct from `None`, which is a (non-string) default value.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_no_default, ())


# Singleton instance
NO_DEFAULT = _NoDefaultType()


class ResolutionStatus(Enum):
    """Outcome of a locale lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    WRONG_KIND = "wrong_kind"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving a key against a locale.

    Attributes:
        status: The lookup outcome.
        value: The resolved template when `status` is FOUND, the offending
            stored value when it is WRONG_KIND, otherwise None.
    """

    status: ResolutionStatus
    value: object = None

    @classmethod
    def found(cls, template: str) -> Resolution:
        """Build a FOUND resolution carrying `template`."""
        return cls(ResolutionStatus.FOUND, template)

    @classmethod
    def not_found(cls) -> Resolution:
        """Build a NOT_FOUND resolution."""
        return cls(ResolutionStatus.NOT_FOUND)

    @classmethod
    def wrong_kind(cls, value: object) -> Resolution:
        """Build a WRONG_KIND resolution carrying the non-string `value`."""
        return cls(ResolutionStatus.WRONG_KIND, value)

    @property
    def is_found(self) -> bool:
        """True when a usable string template was resolved."""
        return self.status is ResolutionStatus.FOUND

    def template_or(self, fallback: str) -> str:
        """Return the resolved template, or `fallback` when none was found."""
        if self.status is ResolutionStatus.FOUND:
            assert isinstance(self.value, str)
            return self.value
        return fallback


class Locale(abc.ABC):
    """Contract for a language's key -> template mapping."""

    language: str

    @abc.abstractmethod
    def lookup(self, key: str) -> object:
        """Return the raw value stored under `key`.

        Raises:
            KeyError: If no value is stored under `key`.
        """

    def resolve(self, key: str, default: object = NO_DEFAULT) -> Resolution:
        """Resolve `key`, optionally falling back to `default`.

        Args:
            key: The localization key.
            default: Value to use when `key` holds no string. Only a string
                default produces a FOUND resolution.

        Returns:
            The lookup `Resolution`.
        """
        try:
            value = self.lookup(key)
        except KeyError:
            value = NO_DEFAULT

        if isinstance(value, str):
            return Resolution.found(value)
        if isinstance(default, str):
            return Resolution.found(default)
        if isinstance(value, _NoDefaultType):
            return Resolution.not_found()
        return Resolution.wrong_kind(value)


class LocaleRegistry(abc.ABC):
    """Owner of the current locale.

    The current locale moves from uninitialized to active on the first call to
    `ensure_current()` and stays active; nothing in this contract moves it back.
    Creation is guarded by double-checked locking so concurrent first callers
    all observe a single instance.
    """

    def __init__(self) -> None:
        self._current: Locale | None = None
        self._current_lock = threading.Lock()

    @property
    def current(self) -> Locale | None:
        """The active locale, or None before the first `ensure_current()`."""
        return self._current

    @property
    def has_current(self) -> bool:
        """True once the current locale has been created."""
        return self._current is not None

    def ensure_current(self) -> Locale:
        """Return the current locale, creating it on first demand."""
        if (locale := self._current) is not None:
            return locale
        with self._current_lock:
            if self._current is None:
                self._current = self.create_current_locale()
            return self._current

    @abc.abstractmethod
    def create_current_locale(self) -> Locale:
        """Build the locale that becomes current.

        Called at most once per registry by `ensure_current()`, under its lock.
        """
