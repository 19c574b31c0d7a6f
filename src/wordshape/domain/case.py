"""Case-shape transformations.

Pure functions converting between human-separated, camel and dash/underscore
string shapes.

| Input               | capitalize          | camelize          | decamelize          | dasherize           |
|---------------------|---------------------|-------------------|---------------------|---------------------|
| `my favorite items` | `My favorite items` | `myFavoriteItems` | `my favorite items` | `my-favorite-items` |
| `css-class-name`    | `Css-class-name`    | `cssClassName`    | `css-class-name`    | `css-class-name`    |
| `action_name`       | `Action_name`       | `actionName`      | `action_name`       | `action-name`       |
| `innerHTML`         | `InnerHTML`         | `innerHTML`       | `inner_html`        | `inner-html`        |

`dasherize_uncached` is the raw computation; memoization lives in
`wordshape.service_layer.shaping.StringShaper`.
"""

import re

# A separator followed by an optional non-separator character.
# The class includes "|" literally, matching the historical word-boundary set.
WORD_BOUNDARY_PATTERN = re.compile(r"([\s|\-_\n])([^\s|\-_\n]?)")
CAMEL_HUMP_PATTERN = re.compile(r"([a-z])([A-Z])")
DASH_SEPARATOR_PATTERN = re.compile(r"[ _]+")


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest unchanged.

    Args:
        text: The string to capitalize.

    Returns:
        The capitalized string. The empty string is returned unchanged.
    """
    return text[:1].upper() + text[1:]


def camelize(text: str) -> str:
    """Convert words separated by spaces, dashes or underscores into camelCase.

    Each separator is removed and the character following it is upper-cased.
    A leading character that has a distinct lower-case form is then forced to
    lower-case, so ``"InnerHTML"`` becomes ``"innerHTML"``.

    Args:
        text: The string to camelize.

    Returns:
        The camelized string.
    """
    camelized = WORD_BOUNDARY_PATTERN.sub(lambda match: match.group(2).upper(), text)

    first = camelized[:1]
    lower = first.lower()
    return lower + camelized[1:] if first != lower else camelized


def decamelize(text: str) -> str:
    """Split camel humps with underscores and lower-case the result.

    Args:
        text: The camel-cased string.

    Returns:
        The decamelized string, e.g. ``"innerHTML"`` -> ``"inner_html"``.
    """
    return CAMEL_HUMP_PATTERN.sub(r"\1_\2", text).lower()


def dasherize_uncached(text: str) -> str:
    """Decamelize, then collapse each run of spaces or underscores into one dash."""
    return DASH_SEPARATOR_PATTERN.sub("-", decamelize(text))
