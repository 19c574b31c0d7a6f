"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages, plus
fixtures to register that command, obtain a CliRunner, and run tests within
an isolated filesystem.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from wordshape.entrypoints.cli.main import wordshape

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit log messages on a project logger and a third-party logger."""
    logger = logging.getLogger("wordshape.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `wordshape` for one test."""
    wordshape.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(wordshape, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def strings_file(fs) -> Path:
    """Write a small strings table to ``strings.json`` in the isolated fs."""
    path = Path("strings.json")
    path.write_text(
        json.dumps(
            {
                "en": {"greeting": "Hello %@", "swap": "%@2 before %@1"},
                "en-GB": {"color": "colour"},
                "fr": {"greeting": "Bonjour %@"},
            }
        ),
        encoding="utf-8",
    )
    return path
