"""WORDSHAPE

String-shape normalization (capitalize, camelize, decamelize, dasherize)
and a two-stage localization pipeline: key lookup against the current
locale with fallback, followed by positional-argument interpolation.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
