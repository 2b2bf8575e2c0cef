"""FastAPI application serving the browse view and the document index API."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, List

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from pubdocs import __version__
from pubdocs.config import AppConfig
from pubdocs.index.document_index import DocumentIndex
from pubdocs.index.scheduler import RefreshScheduler
from pubdocs.models import IndexStats, SearchResult
from pubdocs.web.frontend import resource_dir, router as frontend_router

LOGGER = logging.getLogger(__name__)

api = APIRouter(prefix="/api")


class DocumentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    path: str
    name: str
    size: int
    mod_time: datetime
    full_path: str


class SearchResponse(BaseModel):
    query: str
    results: List[DocumentOut]
    count: int
    search_time: datetime

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            query=result.query,
            results=[DocumentOut.model_validate(record) for record in result.results],
            count=result.count,
            search_time=result.search_time,
        )


class StatsResponse(BaseModel):
    unique_ids: int
    total_files: int
    last_scan: datetime | None = None
    index_age: float | None = None

    @classmethod
    def from_stats(cls, stats: IndexStats) -> "StatsResponse":
        return cls(
            unique_ids=stats.unique_ids,
            total_files=stats.total_files,
            last_scan=stats.last_scan,
            index_age=stats.index_age.total_seconds() if stats.index_age is not None else None,
        )


class RefreshResponse(BaseModel):
    status: str
    refreshed: bool
    stats: StatsResponse


@api.get("/search", response_model=SearchResponse)
async def search_documents(request: Request, query: str = Query("", alias="id")) -> SearchResponse:
    index: DocumentIndex = request.app.state.index
    return SearchResponse.from_result(index.search(query))


@api.get("/stats", response_model=StatsResponse)
async def index_stats(request: Request) -> StatsResponse:
    index: DocumentIndex = request.app.state.index
    return StatsResponse.from_stats(index.stats())


@api.post("/refresh", response_model=RefreshResponse)
async def force_refresh(request: Request) -> RefreshResponse:
    scheduler: RefreshScheduler = request.app.state.scheduler
    refreshed = await asyncio.to_thread(scheduler.run_now)
    return RefreshResponse(
        status="ok",
        refreshed=refreshed,
        stats=StatsResponse.from_stats(scheduler.index.stats()),
    )


def create_app(config: AppConfig, *, index: DocumentIndex | None = None) -> FastAPI:
    """Build the application for ``config.root``.

    The index and its scheduler live on ``app.state``; the scheduler is started
    and stopped with the application lifespan.
    """
    root = config.resolve_root(Path.cwd())
    index = index if index is not None else DocumentIndex()
    scheduler = RefreshScheduler(
        index, root, interval_minutes=config.refresh_interval_minutes
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        LOGGER.info("Serving %s", root)
        scheduler.start()
        try:
            yield
        finally:
            scheduler.stop()

    app = FastAPI(title="pubdocs", version=__version__, lifespan=lifespan)
    app.state.config = config
    app.state.root = root
    app.state.index = index
    app.state.scheduler = scheduler

    app.mount("/static", StaticFiles(directory=str(resource_dir("static"))), name="static")
    app.include_router(api)
    app.include_router(frontend_router)
    return app
