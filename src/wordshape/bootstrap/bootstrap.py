"""Bootstrap the string shaper and localizer with their adapters."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wordshape import config
from wordshape.adapters.formatter import PositionalFormatter
from wordshape.adapters.locale import InMemoryLocaleRegistry
from wordshape.adapters.transform_cache import InMemoryTransformCache
from wordshape.service_layer.localization import ArgumentForwarding, Localizer
from wordshape.service_layer.shaping import StringShaper

if TYPE_CHECKING:
    from wordshape.interfaces.formatter import Formatter
    from wordshape.interfaces.locale import LocaleRegistry
    from wordshape.interfaces.transform_cache import TransformCache


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application services."""

    shaper: StringShaper
    localizer: Localizer


def build_shaper(cache: TransformCache | None = None) -> StringShaper:
    """Build a string shaper with its own (or the given) transformation cache."""
    return StringShaper(cache if cache is not None else InMemoryTransformCache())


def build_localizer(
    registry: LocaleRegistry,
    formatter: Formatter | None = None,
    forwarding: ArgumentForwarding | None = None,
) -> Localizer:
    """Build a localizer, reading the forwarding mode from config if not given."""
    return Localizer(
        registry,
        formatter if formatter is not None else PositionalFormatter(),
        forwarding if forwarding is not None else config.get_argument_forwarding(),
    )


def bootstrap(
    tables: Mapping[str, Mapping[str, object]] | None = None,
    *,
    language: str | None = None,
    registry: LocaleRegistry | None = None,
    forwarding: ArgumentForwarding | None = None,
) -> AppContainer:
    """Wire a fresh container.

    Args:
        tables: Strings tables for a new in-memory registry. Ignored when
            `registry` is given.
        language: Preferred language; defaults to `config.get_language()`.
        registry: A ready-made locale registry to use instead.
        forwarding: `loc` argument forwarding; defaults to
            `config.get_argument_forwarding()`.
    """
    if registry is None:
        registry = InMemoryLocaleRegistry(
            tables, language=language or config.get_language()
        )
    return AppContainer(
        shaper=build_shaper(),
        localizer=build_localizer(registry, forwarding=forwarding),
    )


_default: AppContainer | None = None
_default_lock = threading.Lock()


def default_container() -> AppContainer:
    """Return the process default container, wiring it on first use."""
    global _default  # pylint: disable=global-statement
    if (container := _default) is not None:
        return container
    with _default_lock:
        if _default is None:
            _default = bootstrap()
        return _default


def reset_default_container(container: AppContainer | None = None) -> None:
    """Replace the process default container (or drop it to rewire lazily)."""
    global _default  # pylint: disable=global-statement
    with _default_lock:
        _default = container
