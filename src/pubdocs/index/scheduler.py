"""Periodic background refresh of a :class:`DocumentIndex`."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from pubdocs.config import DEFAULT_REFRESH_MINUTES
from pubdocs.index.document_index import DocumentIndex

LOGGER = logging.getLogger(__name__)

JOB_ID = "refresh_index"


class RefreshScheduler:
    """Runs ``index.refresh(root)`` at startup and then on a fixed interval.

    The interval is wall-clock based. APScheduler drops a tick that fires while
    the previous scan is still running (``max_instances=1``); the index itself
    also serializes refreshes, so on-demand calls through :meth:`run_now` never
    overlap a scheduled scan either.
    """

    def __init__(
        self,
        index: DocumentIndex,
        root: Path,
        *,
        interval_minutes: float = DEFAULT_REFRESH_MINUTES,
    ) -> None:
        self.index = index
        self.root = Path(root)
        self.interval_minutes = interval_minutes
        self._scheduler = BackgroundScheduler()

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def start(self) -> None:
        self._scheduler.add_job(
            self._run_job,
            trigger=IntervalTrigger(minutes=self.interval_minutes),
            id=JOB_ID,
            name="Document index refresh",
            max_instances=1,
            coalesce=True,
            next_run_time=datetime.now(self._scheduler.timezone),
            replace_existing=True,
        )
        self._scheduler.start()
        LOGGER.info(
            "Index refresh scheduled every %s minutes for %s", self.interval_minutes, self.root
        )

    def stop(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            LOGGER.info("Index refresh scheduler stopped")

    def run_now(self) -> bool:
        """Refresh synchronously, waiting for any scan already in flight."""
        LOGGER.info("Forcing document index refresh")
        return self.index.refresh(self.root)

    def get_status(self) -> Dict[str, Any]:
        next_run = None
        if self._scheduler.running:
            job = self._scheduler.get_job(JOB_ID)
            if job is not None and job.next_run_time is not None:
                next_run = job.next_run_time.isoformat()
        return {
            "running": self._scheduler.running,
            "refreshing": self.index.is_refreshing,
            "next_run": next_run,
            "interval_minutes": self.interval_minutes,
            "root": str(self.root),
        }

    def _run_job(self) -> None:
        try:
            self.index.refresh(self.root)
        except Exception:
            LOGGER.exception("Scheduled index refresh failed")
