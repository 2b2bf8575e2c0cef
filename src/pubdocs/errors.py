"""Exceptions raised by pubdocs."""

from __future__ import annotations

from pathlib import Path


class PubDocsError(Exception):
    """Base class for pubdocs errors."""


class RootInaccessibleError(PubDocsError):
    """The index root is missing, not a directory, or cannot be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"Index root {root} is not accessible: {reason}")
        self.root = root
        self.reason = reason
