"""Parse ``NAME=LEVEL`` logger-level options for the CLI.

Values arrive either as repeated options or as one comma/space separated
string (from ``WORDSHAPE_LOGGER_LEVELS``). Level names are case-insensitive.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}
ITEM_SEPARATOR = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten option values into non-empty ``NAME=LEVEL`` items."""
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in ITEM_SEPARATOR.split(v) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback mapping logger names to numeric levels.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
