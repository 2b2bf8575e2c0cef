"""Directory listings and breadcrumbs for the browse view."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from pubdocs.models import BreadcrumbPart, DirectoryListing, FileEntry
from pubdocs.utils.files import can_view, is_within, mtime_utc, relative_posix

ROOT_LABEL = "Root"
HOME_LABEL = "Home"

LOGGER = logging.getLogger(__name__)


def is_path_allowed(root: Path, path: Path) -> bool:
    return is_within(path, root)


def list_directory(root: Path, directory: Path) -> DirectoryListing:
    """List the immediate children of ``directory``, each group sorted by name.

    Raises ``FileNotFoundError`` or ``NotADirectoryError`` for bad input and
    ``PermissionError`` if the directory cannot be read.
    """
    root = Path(os.path.abspath(root))
    abs_dir = Path(os.path.abspath(directory))
    if not abs_dir.exists():
        raise FileNotFoundError(f"Path not found: {abs_dir}")
    if not abs_dir.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {abs_dir}")

    files: List[FileEntry] = []
    directories: List[FileEntry] = []
    with os.scandir(abs_dir) as entries:
        for entry in entries:
            try:
                info = entry.stat()
                is_dir = entry.is_dir()
            except OSError as exc:
                LOGGER.warning("Skipping unreadable entry %s: %s", entry.path, exc)
                continue
            extension = "" if is_dir else os.path.splitext(entry.name)[1].lower()
            item = FileEntry(
                name=entry.name,
                relative_path=relative_posix(entry.path, root),
                is_dir=is_dir,
                size=info.st_size,
                mod_time=mtime_utc(info.st_mtime),
                extension=extension,
                can_view=False if is_dir else can_view(extension),
            )
            (directories if is_dir else files).append(item)

    directories.sort(key=lambda item: item.name)
    files.sort(key=lambda item: item.name)

    rel = relative_posix(abs_dir, root)
    return DirectoryListing(
        path=ROOT_LABEL if rel == "." else rel,
        files=files,
        directories=directories,
        scan_time=datetime.now(timezone.utc),
    )


def build_breadcrumb(relative_path: str) -> List[BreadcrumbPart]:
    parts = [BreadcrumbPart(name=HOME_LABEL, path="/")]
    if relative_path in ("", ".", ROOT_LABEL):
        return parts

    current = ""
    for segment in relative_path.strip("/").split("/"):
        if not segment:
            continue
        current = f"{current}/{segment}"
        parts.append(BreadcrumbPart(name=segment, path=current))
    return parts
