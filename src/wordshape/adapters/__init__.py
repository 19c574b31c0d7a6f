"""Adapters for WORDSHAPE.

Concrete implementations of the contracts in `wordshape.interfaces`:
in-memory locale registries, the positional template formatter, and the
in-memory transformation cache.
"""
