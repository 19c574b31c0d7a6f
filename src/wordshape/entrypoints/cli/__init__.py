"""WORDSHAPE command-line interface."""
