"""WORDSHAPE case CLI: apply one case-shape transformation to each input.

Examples
    $ wordshape case dasherize innerHTML action_name
    inner-html
    action-name
    $ wordshape case camelize "my favorite items"
    myFavoriteItems
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from wordshape.bootstrap import default_container

logger = logging.getLogger(__name__)

TEXT_ARGUMENT = click.argument("texts", nargs=-1, required=True)


@click.group()
def case() -> None:
    """Case-shape transformations (one output line per TEXT)."""


def _emit(transform: Callable[[str], str], texts: tuple[str, ...]) -> None:
    for text in texts:
        click.echo(transform(text))


@case.command()
@TEXT_ARGUMENT
def capitalize(texts: tuple[str, ...]) -> None:
    """Upper-case the first character of each TEXT."""
    _emit(default_container().shaper.capitalize, texts)


@case.command()
@TEXT_ARGUMENT
def camelize(texts: tuple[str, ...]) -> None:
    """Convert space/dash/underscore separated TEXT to camelCase."""
    _emit(default_container().shaper.camelize, texts)


@case.command()
@TEXT_ARGUMENT
def decamelize(texts: tuple[str, ...]) -> None:
    """Convert camelCase TEXT to lower-case words joined by underscores."""
    _emit(default_container().shaper.decamelize, texts)


@case.command()
@TEXT_ARGUMENT
def dasherize(texts: tuple[str, ...]) -> None:
    """Convert camelCase or separated TEXT to dash-separated lower case."""
    shaper = default_container().shaper
    _emit(shaper.dasherize, texts)
    logger.debug("dasherize cache holds %d entries", len(shaper.cache))
