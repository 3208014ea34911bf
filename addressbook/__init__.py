"""Address book contact search."""

__version__ = "0.1.0"
