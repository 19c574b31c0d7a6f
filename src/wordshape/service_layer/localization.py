"""Localization facade: look a key up, then format it.

Flow for both entry points:

1. Ensure the registry has a current locale (created lazily, exactly once).
2. Resolve the key against it, with or without a default.
3. Use the resolved template, or the key itself when nothing usable was found.
4. Hand the template and the forwarded argument list to the formatter.

Argument forwarding
-------------------
Under `ArgumentForwarding.HISTORICAL` (the default), `loc` forwards the key
itself as argument 0, while `loc_with_default` forwards only the
interpolation arguments:

    loc("%@ has %@ items", 3)            -> formatter args ["%@ has %@ items", 3]
    loc_with_default("k", "%@ items", 3) -> formatter args [3]

The asymmetry is long-standing observable behavior. `ArgumentForwarding.CONSISTENT`
strips the key in `loc` as well, for callers who want both entry points to
line placeholders up the same way.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from wordshape.interfaces.formatter import ArgumentForwarding

if TYPE_CHECKING:
    from wordshape.interfaces.formatter import Formatter
    from wordshape.interfaces.locale import LocaleRegistry, Resolution

logger = logging.getLogger(__name__)


def loc_arguments(
    key: str,
    args: Sequence[object],
    forwarding: ArgumentForwarding = ArgumentForwarding.HISTORICAL,
) -> list[object]:
    """Build the formatter argument list for `loc`."""
    if forwarding is ArgumentForwarding.HISTORICAL:
        return [key, *args]
    return list(args)


def loc_with_default_arguments(args: Sequence[object]) -> list[object]:
    """Build the formatter argument list for `loc_with_default`."""
    return list(args)


class Localizer:
    """Localize keys against a registry's current locale and format them.

    Args:
        registry: Owner of the current locale.
        formatter: Placeholder substitution for the resolved template.
        forwarding: Argument forwarding mode for `loc`.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        formatter: Formatter,
        forwarding: ArgumentForwarding = ArgumentForwarding.HISTORICAL,
    ) -> None:
        self._registry = registry
        self._formatter = formatter
        self._forwarding = forwarding

    @property
    def registry(self) -> LocaleRegistry:
        """The registry owning the current locale."""
        return self._registry

    @property
    def forwarding(self) -> ArgumentForwarding:
        """Argument forwarding mode used by `loc`."""
        return self._forwarding

    def loc(self, key: str, *args: object) -> str:
        """Localize `key` and interpolate `args`.

        Args:
            key: Localization key; also the template when the key is unresolved.
            *args: Interpolation arguments.

        Returns:
            The localized and formatted string.
        """
        resolution = self._registry.ensure_current().resolve(key)
        template = self._template(key, resolution)
        return self._formatter.format(
            template, loc_arguments(key, args, self._forwarding)
        )

    def loc_with_default(self, key: str, default: object, *args: object) -> str:
        """Like `loc`, but resolve to `default` when `key` is unresolved.

        The key, not the default, is the final fallback when neither yields a
        string. Only `args` are forwarded to the formatter.
        """
        resolution = self._registry.ensure_current().resolve(key, default)
        template = self._template(key, resolution)
        return self._formatter.format(template, loc_with_default_arguments(args))

    @staticmethod
    def _template(key: str, resolution: Resolution) -> str:
        if not resolution.is_found:
            logger.debug(
                "Falling back to key %r (%s)", key, resolution.status.value
            )
        return resolution.template_or(key)
