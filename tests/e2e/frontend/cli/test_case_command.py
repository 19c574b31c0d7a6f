"""End-to-end tests for `wordshape case`."""

import pytest

from wordshape.bootstrap import default_container
from wordshape.entrypoints.cli.main import wordshape

# pylint: disable=unused-argument


@pytest.mark.parametrize(
    ("command", "texts", "expected"),
    [
        ("capitalize", ["hello world"], ["Hello world"]),
        ("camelize", ["background-color", "my favorite items"],
         ["backgroundColor", "myFavoriteItems"]),
        ("decamelize", ["innerHTML"], ["inner_html"]),
        ("dasherize", ["innerHTML", "action_name", "my favorite items"],
         ["inner-html", "action-name", "my-favorite-items"]),
    ],
)
def test_case_commands(runner, fs, command, texts, expected):
    """Each TEXT produces one output line."""
    result = runner.invoke(
        wordshape, ["--no-flight-recorder", "case", command, *texts]
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == expected


def test_dasherize_populates_default_cache(runner, fs):
    """Repeated inputs share one cache entry in the default container."""
    result = runner.invoke(
        wordshape,
        ["--no-flight-recorder", "case", "dasherize", "fooBar", "fooBar"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["foo-bar", "foo-bar"]
    cache = default_container().shaper.cache
    assert "fooBar" in cache
    assert len(cache) == 1


def test_case_requires_text(runner, fs):
    """At least one TEXT is required."""
    result = runner.invoke(wordshape, ["--no-flight-recorder", "case", "camelize"])
    assert result.exit_code == 2
    assert "Missing argument" in result.output
