"""WORDSHAPE loc CLI: localize a key and interpolate arguments.

Strings tables are read from a JSON file of the form
``{"en": {"greeting": "Hello %@"}, "fr": {"greeting": "Bonjour %@"}}``.
Without ``--strings`` every key renders as itself.

Examples
    $ wordshape loc --strings strings.json --default "Hi %@" greeting Ada
    Hello Ada
    $ wordshape loc "%@ and %@" x
    %@ and %@ and x

Failure modes
- Unreadable or malformed strings file -> `ClickException` (exit code 1).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from wordshape import config
from wordshape.adapters.locale import InMemoryLocaleRegistry
from wordshape.bootstrap import bootstrap
from wordshape.interfaces.errors import StringsTableError
from wordshape.interfaces.formatter import ArgumentForwarding
from wordshape.logging import log_localization

from .helpers import warn

logger = logging.getLogger(__name__)


@click.command()
@click.argument("key")
@click.argument("args", nargs=-1)
@click.option(
    "--strings",
    "strings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=config.STRINGS_ENV,
    show_envvar=True,
    help="JSON file mapping language -> {key: template}.",
)
@click.option(
    "--language",
    default=config.DEFAULT_LANGUAGE,
    envvar=config.LANGUAGE_ENV,
    show_envvar=True,
    show_default=True,
    help="Preferred language (code like 'en-US' or name like 'French').",
)
@click.option(
    "--default",
    "default",
    default=None,
    help="Template to use when KEY has no string; switches to loc_with_default.",
)
@click.option(
    "--forwarding",
    type=click.Choice([mode.value for mode in ArgumentForwarding], case_sensitive=False),
    default=ArgumentForwarding.HISTORICAL.value,
    envvar=config.ARGUMENT_FORWARDING_ENV,
    show_envvar=True,
    show_default=True,
    help=(
        "How loc forwards arguments: 'historical' passes KEY as the first "
        "argument, 'consistent' passes only ARGS."
    ),
)
def loc(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    key: str,
    args: tuple[str, ...],
    strings_path: Path | None,
    language: str,
    default: str | None,
    forwarding: str,
) -> None:
    """Localize KEY and interpolate ARGS into the resulting template."""
    try:
        registry = (
            InMemoryLocaleRegistry.from_json(strings_path, language=language)
            if strings_path is not None
            else InMemoryLocaleRegistry(language=language)
        )
    except StringsTableError as exc:
        raise click.ClickException(str(exc)) from exc

    if registry.languages and not _has_table(registry):
        warn(
            f"No strings table for language '{registry.language}'; "
            "keys will render as-is."
        )

    mode = ArgumentForwarding(forwarding.lower())
    log_localization(
        logger,
        language=registry.language,
        tables=registry.languages,
        forwarding=mode,
        strings_path=strings_path,
    )
    container = bootstrap(registry=registry, forwarding=mode)
    if default is None:
        rendered = container.localizer.loc(key, *args)
    else:
        rendered = container.localizer.loc_with_default(key, default, *args)
    logger.debug("Rendered %r in %r as %r", key, registry.language, rendered)
    click.echo(rendered)


def _has_table(registry: InMemoryLocaleRegistry) -> bool:
    locale = registry.locale_for(registry.language)
    while locale is not None:
        if locale.language in registry.languages:
            return True
        locale = locale.parent
    return False
