"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def doc_tree(tmp_path: Path) -> Path:
    """Directory with ``a/report.txt``, ``b/report.txt`` and ``c/notes.md``."""
    root = tmp_path / "docs"
    for rel, content in {
        "a/report.txt": "alpha report",
        "b/report.txt": "beta report",
        "c/notes.md": "# notes",
    }.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root
