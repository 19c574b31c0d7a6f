"""Entry points for WORDSHAPE (command-line interface)."""
