"""Unit tests for :mod:`wordshape.entrypoints.cli.helpers.messages`.

Glyph selection follows the encoding of the stream returned by
``click.get_text_stream("stderr")``; ``warn`` writes styled lines to stderr.
"""

import io
import sys

import click
import pytest

from wordshape.entrypoints.cli.helpers.messages import (
    CAUTION,
    _supports_character,
    glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A text stream that claims to be a TTY with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(("encoding", "expected"), [("ascii", "[!]"), ("utf-8", "⚠️")])
def test_glyph_respects_stream_encoding(monkeypatch, encoding, expected):
    """glyph() picks the emoji only when stderr can encode it."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    assert glyph(CAUTION) == expected


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is looked up on every call."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True


@pytest.mark.parametrize(("encoding", "expected"), [("ascii", "[!]"), ("utf-8", "⚠️")])
def test_warn_emits_styled_line(monkeypatch, encoding, expected):
    """warn() writes a bold yellow line with the right glyph."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)

    warn("no table")

    out = stream.getvalue()
    assert f"{expected}  no table" in out
    assert SET_BOLD in out
    assert SET_YELLOW in out
    assert RESET in out


def test_warn_writes_to_stderr_only(monkeypatch, capsys):
    """stdout stays clean for rendered strings."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    warn("careful")
    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert captured.out == ""
