"""Command line interface for pubdocs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from pubdocs.config import AppConfig
from pubdocs.index.document_index import DocumentIndex
from pubdocs.utils.files import format_file_size
from pubdocs.web.app import create_app


console = Console()
DEFAULTS = AppConfig.from_env()
app = typer.Typer(help="pubdocs - read-only web view and filename index for a directory")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _validate_root(root: Optional[Path]) -> Path:
    if root is None:
        raise typer.BadParameter("No directory given and PUBDOCS_ROOT is not set")
    if not root.exists():
        raise typer.BadParameter(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise typer.BadParameter(f"Path is not a directory: {root}")
    return AppConfig(root=root).resolve_root(Path.cwd())


def _build_index(root: Path) -> DocumentIndex:
    index = DocumentIndex()
    if not index.refresh(root):
        console.print(f"[red]Could not scan {root}.[/red]")
        raise typer.Exit(code=1)
    return index


@app.command()
def serve(
    root: Optional[Path] = typer.Argument(
        DEFAULTS.root, help="Directory to publish (defaults to $PUBDOCS_ROOT)."
    ),
    host: str = typer.Option(DEFAULTS.host, help="Host interface"),
    port: int = typer.Option(DEFAULTS.port, help="Server port"),
    interval: int = typer.Option(
        DEFAULTS.refresh_interval_minutes, help="Minutes between index refreshes"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Start the web server."""
    _setup_logging(verbose)
    resolved = _validate_root(root)
    config = AppConfig(
        root=resolved,
        host=host,
        port=port,
        refresh_interval_minutes=interval,
        title=DEFAULTS.title,
    )

    console.print(f"Serving [bold]{resolved}[/bold] on http://{host}:{port}")
    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        reload=False,
        log_level="debug" if verbose else "info",
    )


@app.command()
def scan(
    root: Path = typer.Argument(..., help="Directory to scan."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan a directory once and report index statistics."""
    _setup_logging(verbose)
    index = _build_index(_validate_root(root))
    stats = index.stats()
    console.print(f"Unique ids: {stats.unique_ids}, files: {stats.total_files}")


@app.command()
def search(
    root: Path = typer.Argument(..., help="Directory to scan."),
    query: str = typer.Argument(..., help="Filename prefix"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan a directory once and look up files by name prefix."""
    _setup_logging(verbose)
    index = _build_index(_validate_root(root))

    result = index.search(query)
    if not result.count:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name")
    table.add_column("Path")
    table.add_column("Size", justify="right")
    table.add_column("Modified")

    for record in sorted(result.results, key=lambda item: item.path):
        table.add_row(
            record.name,
            record.path,
            format_file_size(record.size),
            record.mod_time.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)
    console.print(f"{result.count} match(es)")
