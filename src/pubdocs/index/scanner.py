"""Filesystem walk producing document records."""

from __future__ import annotations

import logging
import os
import stat
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from pubdocs.errors import RootInaccessibleError
from pubdocs.models import DocumentRecord
from pubdocs.utils.files import mtime_utc, relative_posix

LOGGER = logging.getLogger(__name__)


def scan_documents(root: str | os.PathLike[str]) -> Dict[str, List[DocumentRecord]]:
    """Walk ``root`` and group every non-directory entry by filename.

    The walk keeps its own stack of pending directories, so tree depth is not
    bounded by the interpreter's recursion limit. Entries that cannot be
    inspected (permissions, broken symlinks, files that vanish mid-walk) are
    logged and skipped. Failing to list ``root`` itself raises
    :class:`RootInaccessibleError`.
    """
    root_path = Path(os.path.abspath(root))
    documents: Dict[str, List[DocumentRecord]] = defaultdict(list)

    try:
        pending = _scan_directory(os.fspath(root_path), root_path, documents)
    except OSError as exc:
        raise RootInaccessibleError(root_path, exc.strerror or str(exc)) from exc

    # depth-first, children in listing order
    stack = list(reversed(pending))
    while stack:
        directory = stack.pop()
        try:
            pending = _scan_directory(directory, root_path, documents)
        except OSError as exc:
            LOGGER.warning("Error accessing path %s: %s", directory, exc)
            continue
        stack.extend(reversed(pending))

    return dict(documents)


def _scan_directory(
    directory: str, root: Path, documents: Dict[str, List[DocumentRecord]]
) -> List[str]:
    """Record the files directly inside ``directory`` and return its subdirectories.

    Raises ``OSError`` only when ``directory`` itself cannot be listed; entries
    already recorded before a mid-listing failure are kept.
    """
    subdirectories: List[str] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                info = None if is_dir else entry.stat()
            except OSError as exc:
                LOGGER.warning("Error accessing path %s: %s", entry.path, exc)
                continue

            if info is None:
                subdirectories.append(entry.path)
                continue

            # symlinks pointing at directories are neither indexed nor followed
            if stat.S_ISDIR(info.st_mode):
                continue

            documents[entry.name].append(
                DocumentRecord(
                    id=entry.name,
                    path=relative_posix(entry.path, root),
                    name=entry.name,
                    size=info.st_size,
                    mod_time=mtime_utc(info.st_mtime),
                    full_path=entry.path,
                )
            )
    return subdirectories
