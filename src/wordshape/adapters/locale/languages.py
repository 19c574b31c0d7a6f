"""Language name and code normalization."""

# Human-readable language names accepted in place of codes.
LANGUAGE_NAMES = {
    "english": "en",
    "french": "fr",
    "german": "de",
    "japanese": "ja",
    "spanish": "es",
    "italian": "it",
}


def normalize_language(language: str) -> str:
    """Return the canonical code for `language`.

    Names listed in `LANGUAGE_NAMES` map to their codes. Codes are
    lower-cased and use a dash between language and region, so ``"en_US"``
    and ``"en-US"`` both become ``"en-us"``. Anything else passes through
    lower-cased.
    """
    cleaned = language.strip().lower()
    if (code := LANGUAGE_NAMES.get(cleaned)) is not None:
        return code
    return cleaned.replace("_", "-")


def parent_language(language: str) -> str | None:
    """Return the base language of a regional code, e.g. ``"en-us"`` -> ``"en"``.

    Returns None for a code without a region.
    """
    base, sep, _ = normalize_language(language).partition("-")
    return base if sep else None
