"""Unit tests.

Fast, deterministic checks of a single module. Collaborators are replaced by
the small fakes in each package (see `service_layer/fakes.py`).
"""
