"""Utility helpers for working with files."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path, PurePath

VIEWABLE_EXTENSIONS = frozenset({".pdf", ".txt", ".md", ".html", ".htm"})

_ICONS = {
    ".pdf": "📕",
    ".doc": "📘",
    ".docx": "📘",
    ".xls": "📗",
    ".xlsx": "📗",
    ".ppt": "📙",
    ".pptx": "📙",
    ".txt": "📄",
    ".md": "📝",
    ".csv": "📊",
    ".html": "🌐",
    ".htm": "🌐",
}


def relative_posix(path: str | os.PathLike[str], root: str | os.PathLike[str]) -> str:
    """Return ``path`` relative to ``root`` with ``/`` separators."""
    return PurePath(path).relative_to(PurePath(root)).as_posix()


def is_within(path: Path, root: Path) -> bool:
    """Check that ``path`` is ``root`` or lies below it once both are resolved."""
    real_root = os.path.realpath(root)
    real_path = os.path.realpath(path)
    return real_path == real_root or real_path.startswith(real_root.rstrip(os.sep) + os.sep)


def mtime_utc(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def can_view(extension: str) -> bool:
    return extension.lower() in VIEWABLE_EXTENSIONS


def file_icon(extension: str) -> str:
    return _ICONS.get(extension.lower(), "📄") if extension else "📄"


def format_file_size(size: int) -> str:
    """Format a byte count for display, e.g. ``1.5 MB``."""
    value = float(size)
    units = ["B", "KB", "MB", "GB", "TB"]
    unit_index = 0
    while value >= 1024 and unit_index < len(units) - 1:
        value /= 1024
        unit_index += 1
    if unit_index == 0:
        return f"{int(value)} B"
    return f"{value:.1f} {units[unit_index]}"
