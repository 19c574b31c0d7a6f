"""Fixtures for formatter contract tests."""

from collections.abc import Iterable

import pytest

from wordshape.adapters.formatter import PositionalFormatter
from wordshape.interfaces.formatter import Formatter


@pytest.fixture(params=["positional"])
def formatter(request: pytest.FixtureRequest) -> Iterable[Formatter]:
    """Yield a Formatter for the requested backend."""
    match request.param:
        case "positional":
            yield PositionalFormatter()
        case _:
            raise ValueError(f"unknown formatter type: {request.param}")
