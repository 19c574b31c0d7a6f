"""Interfaces (application boundary) for WORDSHAPE.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (locale registries, formatters, transformation
caches). Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any
`wordshape.*` modules. It may be imported by `wordshape.service_layer`,
`wordshape.adapters`, and `wordshape.bootstrap`.
"""
