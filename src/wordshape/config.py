"""Configuration utilities for WORDSHAPE.

This module centralizes small helpers and constants related to application
configuration, all read from the environment.
"""

import os

from wordshape.interfaces.formatter import ArgumentForwarding

LANGUAGE_ENV = "WORDSHAPE_LANGUAGE"  # pragma: no mutate
ARGUMENT_FORWARDING_ENV = "WORDSHAPE_ARGUMENT_FORWARDING"  # pragma: no mutate
STRINGS_ENV = "WORDSHAPE_STRINGS"  # pragma: no mutate

DEFAULT_LANGUAGE = "en"


class InvalidArgumentForwardingError(Exception):
    """Raised when WORDSHAPE_ARGUMENT_FORWARDING holds an unknown mode."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(mode.value for mode in ArgumentForwarding)
        super().__init__(
            f"{ARGUMENT_FORWARDING_ENV}={value!r} is not one of: {choices}"
        )
        self.value = value


def get_language() -> str:
    """Get the preferred language from the environment.

    Returns:
        The value of `WORDSHAPE_LANGUAGE`, or `DEFAULT_LANGUAGE` when unset
        or empty.
    """
    if not (language := os.environ.get(LANGUAGE_ENV)):
        return DEFAULT_LANGUAGE
    return language


def get_argument_forwarding() -> ArgumentForwarding:
    """Get the `loc` argument forwarding mode from the environment.

    Returns:
        The mode named by `WORDSHAPE_ARGUMENT_FORWARDING` (case-insensitive),
        or `ArgumentForwarding.HISTORICAL` when unset or empty.

    Raises:
        InvalidArgumentForwardingError: If the variable names an unknown mode.
    """
    if not (value := os.environ.get(ARGUMENT_FORWARDING_ENV)):
        return ArgumentForwarding.HISTORICAL
    try:
        return ArgumentForwarding(value.strip().lower())
    except ValueError as exc:
        raise InvalidArgumentForwardingError(value) from exc
