"""Logging setup for the WORDSHAPE CLI.

Library modules only ever call ``logging.getLogger(__name__)`` and log at
DEBUG (cache misses, key fallbacks, locale creation). Nothing is emitted
anywhere until the CLI calls `configure_logging`, which hangs two handlers off
the root logger:

* a Rich console handler on stderr whose threshold follows ``-v``/``-q``
  (WARNING by default, one level per repetition);
* a flight recorder: a ``MemoryHandler`` keeping recent records at DEBUG and
  writing them to the log file once a WARNING arrives, or on exit when
  force-flush is set.

Records from outside the ``wordshape`` namespace are tagged on the console
with their top-level package, e.g. ``[click_extra] ...``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from wordshape import __version__, config

if TYPE_CHECKING:
    from wordshape.interfaces.formatter import ArgumentForwarding

PROJECT_PREFIX = "wordshape"
DEFAULT_CAPACITY = 2000
VERBOSITY_STEP = 10

# Distributions whose versions are worth having in a bug report.
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")

CONSOLE_FORMAT = "%(origin)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts onto a level between DEBUG and CRITICAL."""
    level = logging.WARNING + VERBOSITY_STEP * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class OriginFilter(logging.Filter):
    """Set ``record.origin`` for the console format.

    Empty for wordshape's own loggers, ``"[package] "`` for everything else.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.origin = "" if package == PROJECT_PREFIX else f"[{package}] "
        return True


@dataclass(frozen=True)
class LoggingSettings:  # pylint: disable=too-many-instance-attributes
    """Everything the CLI collects from its logging options.

    Attributes:
        verbose: Number of ``-v`` flags.
        quiet: Number of ``-q`` flags.
        debug: Console at DEBUG with timestamps and source locations.
        color: Allow ANSI color on the console.
        log_path: Flight-recorder file; None disables the recorder.
        capacity: Records the flight recorder buffers between flushes.
        force_flush: Write whatever is buffered when logging shuts down.
        logger_levels: Minimum level per logger name.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = DEFAULT_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """Effective console threshold (DEBUG whenever `debug` is set)."""
        if self.debug:
            return logging.DEBUG
        return console_level(self.verbose, self.quiet)

    @property
    def flight_recorder(self) -> bool:
        """True when records are also kept for the log file."""
        return self.log_path is not None


def console_handler(settings: LoggingSettings) -> RichHandler:
    """Build the stderr handler described by `settings`."""
    console = Console(stderr=True, color_system="auto" if settings.color else None)
    handler = RichHandler(
        level=settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(OriginFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = DEFAULT_CAPACITY,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Buffer records in memory and write them to `path` from WARNING up.

    The file is truncated when the recorder is built, so it only ever holds
    the current run.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger passes everything through; handlers and the per-logger
    levels in `settings.logger_levels` do the filtering.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(settings.log_path, settings.capacity, settings.force_flush)
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_versions() -> str:
    found = []
    for name in REPORTED_DISTRIBUTIONS:
        try:
            found.append(f"{name} {version(name)}")
        except PackageNotFoundError:
            found.append(f"{name} <not installed>")
    return ", ".join(found)


def _environment_defaults() -> str:
    """Language, forwarding and strings file as the environment sets them."""
    try:
        forwarding = config.get_argument_forwarding().value
    except config.InvalidArgumentForwardingError as exc:
        forwarding = f"<invalid {exc.value!r}>"
    strings = os.environ.get(config.STRINGS_ENV) or "<none>"
    return (
        f"language={config.get_language()}, forwarding={forwarding}, "
        f"strings={strings}"
    )


def _diagnostics(
    settings: LoggingSettings, handlers: list[logging.Handler]
) -> Iterator[tuple[str, object]]:
    yield "Python", sys.version.split()[0]
    yield "Platform", f"{platform.system()} {platform.release()}"
    yield "PID", os.getpid()
    yield "CWD", Path.cwd()
    yield "Libraries", _distribution_versions()
    yield "Environment defaults", _environment_defaults()
    yield "Handlers", ", ".join(type(h).__name__ for h in handlers)
    if settings.log_path is not None:
        flush = "flush on exit" if settings.force_flush else "flush on WARNING"
        yield (
            "Flight recorder",
            f"{settings.log_path} (capacity {settings.capacity}, {flush})",
        )
    yield "Logger levels", ", ".join(
        f"{name}={logging.getLevelName(level)}"
        for name, level in settings.logger_levels.items()
    ) or "<none>"


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line summary at INFO, then the diagnostics at DEBUG."""
    logger.info(
        "WORDSHAPE %s: console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(settings.console_level),
        "ON" if settings.flight_recorder else "OFF",
    )
    for label, value in _diagnostics(settings, handlers):
        logger.debug("%s: %s", label, value)


def log_localization(
    logger: logging.Logger,
    *,
    language: str,
    tables: list[str],
    forwarding: ArgumentForwarding,
    strings_path: Path | None,
) -> None:
    """Record which locale, tables and forwarding mode a `loc` run uses."""
    logger.info(
        "Localizing in %r with %s forwarding",
        language,
        forwarding.value,
    )
    logger.debug(
        "Strings: %s (tables: %s)",
        strings_path if strings_path is not None else "<none>",
        ", ".join(tables) or "<none>",
    )
