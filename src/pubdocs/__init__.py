"""pubdocs - read-only web view and filename index over a directory tree."""

__version__ = "0.1.0"
