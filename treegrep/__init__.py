"""Recursive, multi-threaded regular-expression search through a directory tree."""

__version__ = "0.1.0"
__all__ = ["__version__"]