"""Trim a set of characters from both ends of a string."""

__version__ = "0.1.0"
__all__ = ["trim"]