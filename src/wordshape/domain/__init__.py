"""Domain layer for WORDSHAPE.

Contains the pure string rules: case-shape transformations with no state and
no I/O. This package is deliberately technology-agnostic.

Dependency rule: do not import from `wordshape.adapters`,
`wordshape.service_layer` or `wordshape.entrypoints`.
"""
