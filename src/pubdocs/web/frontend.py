"""Server-rendered directory browser."""

from __future__ import annotations

import logging
import os
from importlib.resources import files
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from pubdocs.browse import build_breadcrumb, is_path_allowed, list_directory
from pubdocs.utils.files import file_icon, format_file_size

LOGGER = logging.getLogger(__name__)

router = APIRouter()


def resource_dir(name: str) -> Path:
    return Path(str(files("pubdocs.web").joinpath(name)))


templates = Jinja2Templates(directory=str(resource_dir("templates")))
templates.env.globals["file_icon"] = file_icon
templates.env.globals["format_file_size"] = format_file_size


def _serve_file(full_path: Path, download: bool) -> FileResponse:
    if download:
        return FileResponse(full_path, filename=full_path.name)
    if full_path.suffix.lower() == ".pdf":
        return FileResponse(
            full_path,
            media_type="application/pdf",
            filename=full_path.name,
            content_disposition_type="inline",
        )
    return FileResponse(full_path)


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    return Response(status_code=204)


@router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def browse(request: Request, path: str, download: bool = False) -> Response:
    root: Path = request.app.state.root
    full_path = Path(os.path.normpath(root / path.lstrip("/")))

    try:
        allowed = is_path_allowed(root, full_path)
    except ValueError as exc:
        # embedded NUL bytes cannot name anything on disk
        raise HTTPException(status_code=404, detail=f"Path not found: {path}") from exc
    if not allowed:
        raise HTTPException(status_code=403, detail="Access denied")
    if not full_path.exists():
        raise HTTPException(status_code=404, detail=f"Path not found: {path}")

    if not full_path.is_dir():
        return _serve_file(full_path, download)

    try:
        listing = list_directory(root, full_path)
    except OSError as exc:
        LOGGER.error("Error scanning directory %s: %s", full_path, exc)
        raise HTTPException(status_code=500, detail="Error scanning directory") from exc

    return templates.TemplateResponse(
        request,
        "browse.html",
        {
            "title": request.app.state.config.title,
            "listing": listing,
            "breadcrumb": build_breadcrumb(listing.path),
        },
    )
