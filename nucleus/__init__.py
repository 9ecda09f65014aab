"""Nucleus — scores hand-traced loops against a perfect circle."""

__version__ = "0.1.0"
