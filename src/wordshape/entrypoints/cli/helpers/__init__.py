"""CLI helpers for WORDSHAPE.

Utilities used by the command-line interface: logger-level option parsing
and stderr notices with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import warn

__all__ = ["parse_log_level", "warn"]
