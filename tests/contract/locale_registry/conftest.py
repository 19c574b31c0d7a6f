"""Fixtures for locale registry contract tests."""

import time
from collections.abc import Iterable

import pytest

from wordshape.adapters.locale import InMemoryLocale, InMemoryLocaleRegistry
from wordshape.interfaces.locale import LocaleRegistry

TABLES = {"en": {"greeting": "Hello %@"}, "en-gb": {"color": "colour"}}


class SlowLocaleRegistry(InMemoryLocaleRegistry):
    """In-memory registry whose locale creation takes a while.

    Widens the window in which concurrent first callers can race.
    """

    def create_current_locale(self) -> InMemoryLocale:
        time.sleep(0.01)
        return super().create_current_locale()


@pytest.fixture(params=["memory", "memory-regional", "slow"])
def locale_registry(request: pytest.FixtureRequest) -> Iterable[LocaleRegistry]:
    """Yield a fresh, uninitialized LocaleRegistry for the requested backend.

    Supported params:
      - `"memory"` → InMemoryLocaleRegistry for "en"
      - `"memory-regional"` → InMemoryLocaleRegistry for "en-GB"
      - `"slow"` → SlowLocaleRegistry for "en"
    """
    match request.param:
        case "memory":
            yield InMemoryLocaleRegistry(TABLES, language="en")
        case "memory-regional":
            yield InMemoryLocaleRegistry(TABLES, language="en-GB")
        case "slow":
            yield SlowLocaleRegistry(TABLES, language="en")
        case _:
            raise ValueError(f"unknown locale registry type: {request.param}")
