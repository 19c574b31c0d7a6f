"""In-memory locale registry and locales.

The registry is seeded at construction with one strings table per language
(``{"en": {"key": "template"}, "fr": {...}}``). Regional locales resolve
through their base language, so a key missing from ``"en-us"`` is looked up
in ``"en"``.

Typical usage
-------------
    registry = InMemoryLocaleRegistry({"en": {"greeting": "Hello %@"}})
    locale = registry.ensure_current()
    locale.resolve("greeting")  # Resolution(status=FOUND, value='Hello %@')
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from wordshape.interfaces.errors import StringsTableError
from wordshape.interfaces.locale import Locale, LocaleRegistry

from .languages import normalize_language, parent_language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

StringsTable = Mapping[str, object]


class InMemoryLocale(Locale):
    """Locale backed by a dict, with an optional parent for fallback lookups."""

    def __init__(
        self,
        language: str,
        strings: StringsTable | None = None,
        parent: InMemoryLocale | None = None,
    ) -> None:
        self.language = language
        self._strings = dict(strings or {})
        self._parent = parent

    @property
    def parent(self) -> InMemoryLocale | None:
        """The locale consulted when a key is missing here."""
        return self._parent

    def lookup(self, key: str) -> object:
        if key in self._strings:
            return self._strings[key]
        if self._parent is not None:
            return self._parent.lookup(key)
        raise KeyError(key)

    def __repr__(self) -> str:
        return f"InMemoryLocale(language={self.language!r})"


class InMemoryLocaleRegistry(LocaleRegistry):
    """Locale registry holding strings tables in memory.

    Args:
        tables: Strings tables keyed by language name or code.
        language: Preferred language for the current locale.

    Raises:
        StringsTableError: If `tables` is not a mapping of mappings with
            string keys.

    Attributes:
        created_count: How many times a current locale has been created.
    """

    def __init__(
        self,
        tables: Mapping[str, StringsTable] | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        super().__init__()
        self._tables = _validate_tables(tables or {})
        self._language = normalize_language(language)
        self.created_count = 0

    @classmethod
    def from_json(
        cls, path: Path, language: str = DEFAULT_LANGUAGE
    ) -> InMemoryLocaleRegistry:
        """Build a registry from a JSON file of strings tables.

        Raises:
            StringsTableError: If the file cannot be read or parsed, or its
                content is not a valid set of tables.
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise StringsTableError(f"cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise StringsTableError(f"{path} is not valid JSON: {exc}") from exc
        if not isinstance(data, Mapping):
            raise StringsTableError(f"{path} must contain a JSON object")
        return cls(data, language=language)

    @property
    def language(self) -> str:
        """Normalized preferred language."""
        return self._language

    @property
    def languages(self) -> list[str]:
        """Languages with a strings table, sorted."""
        return sorted(self._tables)

    def locale_for(self, language: str) -> InMemoryLocale:
        """Build a locale for `language`, chained to its base language."""
        code = normalize_language(language)
        parent = None
        if (base := parent_language(code)) is not None:
            parent = self.locale_for(base)
        return InMemoryLocale(code, self._tables.get(code), parent=parent)

    def create_current_locale(self) -> InMemoryLocale:
        locale = self.locale_for(self._language)
        self.created_count += 1
        if self._language not in self._tables and locale.parent is None:
            logger.debug(
                "No strings table for language %r; every key will fall back",
                self._language,
            )
        logger.debug("Created current locale %r", locale)
        return locale

    def reset_current(self) -> None:
        """Forget the current locale so the next call recreates it."""
        with self._current_lock:
            self._current = None


def _validate_tables(
    tables: Mapping[str, StringsTable],
) -> dict[str, dict[str, object]]:
    if not isinstance(tables, Mapping):
        raise StringsTableError("tables must be a mapping of language -> strings")
    validated: dict[str, dict[str, object]] = {}
    for language, strings in tables.items():
        if not isinstance(language, str):
            raise StringsTableError(f"language {language!r} is not a string")
        if not isinstance(strings, Mapping):
            raise StringsTableError("strings must be a mapping", language=language)
        if bad := [key for key in strings if not isinstance(key, str)]:
            raise StringsTableError(f"non-string keys {bad!r}", language=language)
        code = normalize_language(language)
        validated.setdefault(code, {}).update(strings)
    return validated
