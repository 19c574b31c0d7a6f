"""Interface for template formatters, and what the localizer hands them."""

import abc
from collections.abc import Sequence
from enum import Enum

# pylint: disable=too-few-public-methods


class ArgumentForwarding(Enum):
    """Which leading parameters `loc` strips before formatting.

    Modes:
    - HISTORICAL: `loc` forwards the key as argument 0.
    - CONSISTENT: `loc` forwards only the interpolation arguments.

    `loc_with_default` strips the key and the default in both modes.
    """

    HISTORICAL = "historical"
    CONSISTENT = "consistent"


class Formatter(abc.ABC):
    """Contract for positional placeholder substitution.

    The placeholder syntax is owned by the implementation. Placeholder and
    argument mismatches must not raise; the output for them is
    implementation-defined.
    """

    @abc.abstractmethod
    def format(self, template: str, args: Sequence[object]) -> str:
        """Substitute `args`, in order, into `template`."""
