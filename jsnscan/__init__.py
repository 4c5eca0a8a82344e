"""Byte-level JSON scanning: get, filter, strip, replace and clear values, and split objects."""

__version__ = "0.1.0"