"""Fixtures for transformation cache contract tests."""

from collections.abc import Iterable

import pytest

from wordshape.adapters.transform_cache import InMemoryTransformCache
from wordshape.interfaces.transform_cache import TransformCache


@pytest.fixture(params=["memory"])
def cache(request: pytest.FixtureRequest) -> Iterable[TransformCache]:
    """Yield an empty TransformCache for the requested backend.

    Extend by adding new identifiers to `params` and branching below.
    """
    match request.param:
        case "memory":
            yield InMemoryTransformCache()
        case _:
            raise ValueError(f"unknown transform cache type: {request.param}")
