"""Module-level string helpers.

Thin functions over the process default container (see
`wordshape.bootstrap.default_container`). Applications that need isolated
state should build their own container with `wordshape.bootstrap.bootstrap`
and call its `shaper` and `localizer` directly.

Examples:
    >>> from wordshape import api
    >>> api.dasherize("innerHTML")
    'inner-html'
    >>> api.loc("%@ items", 3)
    '%@ items items'
"""

from wordshape.bootstrap import default_container
from wordshape.domain import case

__all__ = [
    "capitalize",
    "camelize",
    "decamelize",
    "dasherize",
    "loc",
    "loc_with_default",
]

capitalize = case.capitalize
camelize = case.camelize
decamelize = case.decamelize


def dasherize(text: str) -> str:
    """Dasherize `text` through the default container's memo cache."""
    return default_container().shaper.dasherize(text)


def loc(key: str, *args: object) -> str:
    """Localize `key` and interpolate `args` with the default container."""
    return default_container().localizer.loc(key, *args)


def loc_with_default(key: str, default: object, *args: object) -> str:
    """Localize `key`, falling back to `default`, with the default container."""
    return default_container().localizer.loc_with_default(key, default, *args)
