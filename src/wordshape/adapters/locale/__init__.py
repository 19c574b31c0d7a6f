"""Locale adapters."""

from .languages import normalize_language, parent_language
from .memory import InMemoryLocale, InMemoryLocaleRegistry

__all__ = [
    "InMemoryLocale",
    "InMemoryLocaleRegistry",
    "normalize_language",
    "parent_language",
]
