"""Terminal message helpers for the WORDSHAPE CLI.

Render user-visible notices with emoji, falling back to ASCII markers when
stderr cannot encode them. Notices go to stderr so stdout carries only the
rendered strings.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(marker: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, fallback)`` pair when stderr supports it.

    Args:
        marker: The emoji and its ASCII fallback, e.g. `CAUTION`.

    Returns:
        str: The emoji, or the ASCII fallback.
    """
    emoji, fallback = marker
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  No strings table for language 'xx'; keys will render as-is.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)
