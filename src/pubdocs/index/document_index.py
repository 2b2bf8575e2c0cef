"""Concurrently readable in-memory document index."""

from __future__ import annotations

import logging
import os
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List

from pubdocs.errors import RootInaccessibleError
from pubdocs.index.scanner import scan_documents
from pubdocs.models import DocumentRecord, IndexSnapshot, IndexStats, SearchResult

LOGGER = logging.getLogger(__name__)

Scanner = Callable[[str], Dict[str, List[DocumentRecord]]]
Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentIndex:
    """Filename index over a directory tree.

    Readers never lock: every scan builds a private mapping that is frozen into
    an :class:`IndexSnapshot` and published with a single attribute assignment,
    so a reader sees one complete snapshot or the next one. Refreshes are
    serialized by ``_refresh_lock``; a caller that waited while another scan ran
    returns without scanning again when that scan began after its request.
    """

    def __init__(self, *, scanner: Scanner = scan_documents, clock: Clock = _utcnow) -> None:
        self._scanner = scanner
        self._clock = clock
        self._snapshot = IndexSnapshot()
        self._refresh_lock = threading.Lock()
        self._scans_started = 0
        self._last_scan_ok = False

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    @property
    def is_refreshing(self) -> bool:
        return self._refresh_lock.locked()

    def refresh(self, root: str | os.PathLike[str]) -> bool:
        """Rescan ``root`` and install the result.

        Returns ``False`` when the root is inaccessible; the previous snapshot
        stays live in that case.
        """
        ticket = self._scans_started
        with self._refresh_lock:
            if self._scans_started > ticket and self._last_scan_ok:
                LOGGER.debug("Refresh of %s coalesced with a completed scan", root)
                return True
            self._scans_started += 1
            self._last_scan_ok = False

            LOGGER.info("Scanning documents under %s", root)
            start = time.monotonic()
            try:
                documents = self._scanner(os.fspath(root))
            except RootInaccessibleError as exc:
                LOGGER.error("Error during document scan: %s", exc)
                return False

            snapshot = IndexSnapshot.build(documents, last_scan=self._clock())
            self._snapshot = snapshot
            self._last_scan_ok = True

        LOGGER.info(
            "Indexed %d files under %d ids in %.2fs",
            snapshot.total_files,
            snapshot.unique_ids,
            time.monotonic() - start,
        )
        return True

    def search(self, query: str) -> SearchResult:
        """Return every record whose identifier starts with ``query``."""
        snapshot = self._snapshot
        query = query.strip()
        results: List[DocumentRecord] = []
        if query:
            for doc_id, records in snapshot.documents.items():
                if doc_id.startswith(query):
                    results.extend(records)
        return SearchResult(
            query=query,
            results=results,
            count=len(results),
            search_time=self._clock(),
        )

    def stats(self) -> IndexStats:
        snapshot = self._snapshot
        last_scan = snapshot.last_scan
        return IndexStats(
            unique_ids=snapshot.unique_ids,
            total_files=snapshot.total_files,
            last_scan=last_scan,
            index_age=self._clock() - last_scan if last_scan is not None else None,
        )
