"""Errors raised at the WORDSHAPE boundaries.

The localization and shaping paths never raise under normal use; lookups that
miss degrade to the request key. These errors cover malformed input handed to
adapters when they are constructed.
"""


class WordshapeError(Exception):
    """Base class for all WORDSHAPE errors."""


class LocaleError(WordshapeError):
    """Base class for locale-related errors."""


class StringsTableError(LocaleError):
    """Raised when a strings table is malformed.

    Attributes:
        language (str | None): The language whose table is invalid, if known.
        reason (str): Why the table was rejected.
    """

    def __init__(self, reason: str, language: str | None = None) -> None:
        where = f" for language '{language}'" if language is not None else ""
        super().__init__(f"Invalid strings table{where}: {reason}")
        self.language = language
        self.reason = reason
