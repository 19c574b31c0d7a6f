"""Global pytest fixtures for WORDSHAPE."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from wordshape.adapters.formatter import PositionalFormatter
from wordshape.adapters.locale import InMemoryLocaleRegistry
from wordshape.adapters.transform_cache import InMemoryTransformCache
from wordshape.bootstrap import reset_default_container
from wordshape.service_layer.localization import ArgumentForwarding, Localizer
from wordshape.service_layer.shaping import StringShaper

# pylint: disable=redefined-outer-name

STRINGS = {
    "en": {
        "greeting": "Hello %@",
        "items.count": "%@ of %@ items",
        "swap": "%@2 before %@1",
        "blank": "",
        "broken": 42,
    },
    "en-us": {"color": "color"},
    "en-gb": {"color": "colour"},
    "fr": {"greeting": "Bonjour %@"},
}


@pytest.fixture(autouse=True)
def _fresh_default_container() -> Iterator[None]:
    """Drop the process default container around every test."""
    reset_default_container()
    yield
    reset_default_container()


@pytest.fixture
def transform_cache() -> InMemoryTransformCache:
    """An empty in-memory transformation cache."""
    return InMemoryTransformCache()


@pytest.fixture
def shaper(transform_cache: InMemoryTransformCache) -> StringShaper:
    """A string shaper bound to the `transform_cache` fixture."""
    return StringShaper(transform_cache)


@pytest.fixture
def registry() -> InMemoryLocaleRegistry:
    """An English registry seeded with `STRINGS`."""
    return InMemoryLocaleRegistry(STRINGS, language="en")


@pytest.fixture
def localizer(registry: InMemoryLocaleRegistry) -> Localizer:
    """A localizer over `registry` with historical argument forwarding."""
    return Localizer(registry, PositionalFormatter(), ArgumentForwarding.HISTORICAL)
