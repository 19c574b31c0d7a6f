"""Positional template formatter.

Placeholder syntax
------------------
- ``%@`` takes the next argument in order. The counter advances only for bare
  ``%@`` placeholders.
- ``%@N`` (1-based) takes argument ``N`` explicitly, e.g. ``"%@2 %@1"``.
- ``%{name}`` takes ``args[0][name]`` when the argument list is a single
  mapping; positional placeholders are left untouched in that mode.

Rendering
---------
- ``None`` renders as ``(null)``.
- A reference past the end of the argument list renders as the empty string.
- Everything else renders with ``str()``.

Examples:
    >>> PositionalFormatter().format("%@ of %@", [3, 10])
    '3 of 10'
    >>> PositionalFormatter().format("%@2, %@1", ["world", "hello"])
    'hello, world'
    >>> PositionalFormatter().format("Hi %{name}", [{"name": "Ada"}])
    'Hi Ada'
"""

import re
from collections.abc import Mapping, Sequence

from wordshape.interfaces.formatter import Formatter

# pylint: disable=too-few-public-methods

POSITIONAL_PATTERN = re.compile(r"%@([0-9]+)?")
NAMED_PATTERN = re.compile(r"%\{(.*?)\}")
NULL_TEXT = "(null)"


def _render(value: object) -> str:
    if value is None:
        return NULL_TEXT
    return str(value)


class PositionalFormatter(Formatter):
    """Formatter for ``%@``, ``%@N`` and ``%{name}`` placeholders."""

    def format(self, template: str, args: Sequence[object]) -> str:
        if len(args) == 1 and isinstance(args[0], Mapping):
            return self._format_named(template, args[0])
        return self._format_positional(template, args)

    @staticmethod
    def _format_positional(template: str, args: Sequence[object]) -> str:
        next_index = 0

        def substitute(match: re.Match[str]) -> str:
            nonlocal next_index
            if (explicit := match.group(1)) is not None:
                index = int(explicit) - 1
            else:
                index = next_index
                next_index += 1
            if not 0 <= index < len(args):
                return ""
            return _render(args[index])

        return POSITIONAL_PATTERN.sub(substitute, template)

    @staticmethod
    def _format_named(template: str, values: Mapping) -> str:
        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in values:
                return ""
            return _render(values[name])

        return NAMED_PATTERN.sub(substitute, template)
