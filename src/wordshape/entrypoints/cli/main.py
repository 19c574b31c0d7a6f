"""WORDSHAPE CLI entry point.

The top-level ``wordshape`` group (built with Click-Extra) owns the logging
options; the actual work happens in its subcommands:

- ``wordshape case`` - capitalize/camelize/decamelize/dasherize inputs.
- ``wordshape loc`` - localize a key against a JSON strings table and format it.

Examples
    $ wordshape --version
    $ wordshape case dasherize innerHTML
    $ wordshape -v loc --strings strings.json greeting Ada
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from wordshape import __version__, config
from wordshape.logging import (
    DEFAULT_CAPACITY,
    LoggingSettings,
    configure_logging,
    log_startup,
)

from .case import case as case_group
from .helpers import parse_log_level
from .loc import loc as loc_command

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("wordshape", appauthor=False, ensure_exists=True))
    / "latest.log"
)

HELP = """Reshape identifiers and render localized strings.

    `case` converts between camelCase, dashed and underscored shapes. `loc`
    looks a key up in a strings table, falls back to the key itself, and
    interpolates the remaining arguments into the result.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Placeholders:", fg="blue", bold=True, underline=True),
        "  %@       next argument",
        "  %@N      argument N, counting from 1",
        "  %{name}  entry of a single mapping argument",
        click.style("Environment:", fg="blue", bold=True, underline=True),
        f"  {config.LANGUAGE_ENV}, {config.ARGUMENT_FORWARDING_ENV},",
        f"  {config.STRINGS_ENV}",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show more on the console: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Show less on the console: ERROR with -q, CRITICAL with -qq.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Console at DEBUG with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="WORDSHAPE_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    "capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_CAPACITY,
    hidden=True,
    envvar="WORDSHAPE_FLIGHT_RECORDER_CAPACITY",
    help="Records buffered between flight-recorder flushes.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar="WORDSHAPE_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Keep recent records at DEBUG in memory and write them to --log-path "
        "as soon as a WARNING is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar="WORDSHAPE_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight-recorder buffer on exit, warning or not.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="WORDSHAPE_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "NAME=LEVEL minimum for one logger, on the console and in the flight "
        "recorder, e.g. -L wordshape.service_layer=DEBUG. Repeatable."
    ),
)
@clickx.pass_context
def wordshape(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """Reshape identifiers and render localized strings."""
    settings = LoggingSettings(
        verbose=verbose,
        quiet=quiet,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        capacity=capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers)
    ctx.call_on_close(logging.shutdown)


wordshape.add_command(case_group)
wordshape.add_command(loc_command)
