"""
Command-line interface for portfolio-press.

Uses Typer to provide the ``build`` and ``check`` commands. Configuration
comes from an optional YAML file; command-line options override it.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from .config import AppConfig, load_config
from .errors import PublishError
from .runner import run_publish

app = typer.Typer(add_completion=False, help="Build a static portfolio and blog site.")
console = Console()
error_console = Console(stderr=True)


def _load(config: Path | None, content: Path) -> AppConfig:
    if config is None:
        candidate = content / "site.yaml"
        config = candidate if candidate.is_file() else None
    return load_config(str(config) if config else None)


def _fail(exc: PublishError) -> NoReturn:
    error_console.print(
        f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False, soft_wrap=True
    )
    raise typer.Exit(code=1) from exc


def _apply_overrides(
    cfg: AppConfig,
    workers: int | None,
    log_level: str | None,
    log_format: str | None,
    log_file: bool | None,
) -> None:
    if workers is not None:
        cfg.output.workers = workers
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file


@app.command()
def build(
    content: Path = typer.Option(
        Path("."), "--content", "-i", exists=True, file_okay=False, help="Content root folder."
    ),
    output: Path = typer.Option(Path("public"), "--output", "-o", help="Destination folder."),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config (default: <content>/site.yaml)."
    ),
    workers: int | None = typer.Option(None, "--workers", "-w", min=1, help="Render threads."),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Publish the site.

    Loads articles and resume data from the content folder, renders every
    page and replaces the output folder in one step. Exits non-zero with a
    single error line if anything is malformed.

    Args:
        content: Content root holding articles, data and assets
        output: Directory the site is written to
        config: Optional path to YAML config file
        workers: Number of render threads
        progress: Whether to show progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    try:
        cfg = _load(config, content)
        _apply_overrides(cfg, workers, log_level, log_format, log_file)
        result = run_publish(content, output, cfg, show_progress=progress, console=console)
    except PublishError as exc:
        _fail(exc)

    console.print(
        f"Site published: {escape(str(result.output_dir))} ({result.pages} pages)",
        highlight=False,
        soft_wrap=True,
    )


@app.command()
def check(
    content: Path = typer.Option(
        Path("."), "--content", "-i", exists=True, file_okay=False, help="Content root folder."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config (default: <content>/site.yaml)."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Validate content and render in memory without writing anything."""
    try:
        cfg = _load(config, content)
        _apply_overrides(cfg, None, log_level, None, None)
        result = run_publish(content, None, cfg, show_progress=False, console=console)
    except PublishError as exc:
        _fail(exc)

    console.print(
        f"Content OK: {result.pages} pages, {result.articles} articles, {result.tags} tags",
        highlight=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    app()
