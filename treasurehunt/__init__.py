"""Manage treasure hunts stored as per-hunt directories of text records."""

__version__ = "0.1.0"
__all__ = ["__version__"]