"""Bootstrap (composition root) for WORDSHAPE.

Assembles the application at runtime: wires concrete adapters (locale
registry, formatter, transformation cache) into the service-layer
`StringShaper` and `Localizer`, and reads configuration.

Import rules:
- Entry points and `wordshape.api` import *this* package.
- This package may import: `wordshape.adapters`, `wordshape.service_layer`,
  `wordshape.interfaces`, `wordshape.domain`, and `wordshape.config`.
- Inner layers must not import `wordshape.bootstrap`.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    default_container,
    reset_default_container,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "default_container",
    "reset_default_container",
]
