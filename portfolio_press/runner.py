"""
Publish Driver.

This module coordinates the whole build, strictly in order:
1. Load configuration (done by the caller, passed in as AppConfig)
2. Discover articles and resume data; build the article and tag indices
3. Validate navigation and check for slug collisions
4. Render every page through the Site Assembler
5. Flush all documents, feeds and assets to the destination tree
6. Report the outcome

Any PublishError aborts the run before the flush, so a failed run never
leaves partial output behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from .assembler import assemble, check_destination, check_output_paths, flush, supplementary_files
from .config import AppConfig
from .core.index import build_tag_index, check_tag_index, sort_by_date
from .core.types import Site
from .errors import PublishError
from .input.articles import discover_articles
from .input.resume import load_resume
from .logging_utils import log_event, setup_logging
from .render.layout import resolve_navigation
from .render.pages import static_pages


@dataclass
class PublishResult:
    """Summary of a publish run.

    Attributes:
        output_dir: Destination directory, or None for a dry run
        pages: Number of HTML documents rendered
        articles: Number of articles published
        tags: Number of tag pages
        files: Number of supplementary files (feeds, stylesheets)
    """

    output_dir: Path | None
    pages: int
    articles: int
    tags: int
    files: int = 0


def build_site(content_root: Path, cfg: AppConfig, logger: logging.Logger | None = None) -> Site:
    """Discover content and construct the immutable Site.

    Raises:
        ContentLoadError, ResourceNotFoundError, ResourceDecodeError,
        SlugCollisionError, ConfigError
    """
    articles_dir = content_root / cfg.content.articles_dir
    articles = sort_by_date(discover_articles(articles_dir, cfg.content, cfg.output))
    tags = build_tag_index(articles, cfg.output.tags_path)
    check_tag_index(articles, tags)
    log_event(
        logger,
        f"Loaded {len(articles)} articles with {len(tags)} tags",
        event="content_loaded",
        articles=len(articles),
        tags=len(tags),
    )

    resume = load_resume(content_root / cfg.content.resume_file)
    log_event(logger, f"Loaded {len(resume)} resume entries", event="resume_loaded", entries=len(resume))

    pages = static_pages()
    resolve_navigation(cfg, pages)
    site = Site(
        config=cfg,
        pages=pages,
        articles=tuple(articles),
        tags=tags,
        resume=tuple(resume),
    )
    check_output_paths(site)
    return site


def run_publish(
    content_root: Path,
    output_dir: Path | None,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> PublishResult:
    """Run the complete publish pipeline.

    Args:
        content_root: Folder holding articles, resume data and assets
        output_dir: Destination for the site; None renders without writing
        cfg: Application configuration
        show_progress: Whether to display progress bars
        console: Rich console for output (creates default if None)

    Returns:
        PublishResult describing what was produced

    Raises:
        PublishError: Any fatal content, resource, collision or render error
    """
    console = console or Console()
    logger = setup_logging(cfg.logging, console=console)
    log_event(
        logger,
        "Publish start",
        event="publish_start",
        content=str(content_root),
        output=str(output_dir) if output_dir else None,
    )

    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        disable=not show_progress,
    )
    try:
        if output_dir is not None:
            check_destination(
                content_root,
                output_dir,
                protected=[content_root / cfg.content.articles_dir, content_root / cfg.content.assets_dir],
            )
        with progress:
            stage_task = progress.add_task("Stages", total=3 if output_dir is None else 4)

            site = build_site(content_root, cfg, logger)
            progress.advance(stage_task, 1)

            total = len(site.pages) + len(site.articles) + len(site.tags)
            render_task = progress.add_task("Render", total=total)
            documents = assemble(
                site,
                workers=cfg.output.workers,
                on_rendered=lambda _doc: progress.advance(render_task, 1),
            )
            log_event(logger, f"Rendered {len(documents)} pages", event="pages_rendered", pages=len(documents))
            progress.advance(stage_task, 1)

            extra_files = supplementary_files(site, documents)
            progress.advance(stage_task, 1)

            if output_dir is not None:
                flush(
                    documents,
                    output_dir,
                    extra_files=extra_files,
                    assets_dir=content_root / cfg.content.assets_dir,
                    workers=cfg.output.workers,
                )
                log_event(logger, "Output flushed", event="output_flushed", output=str(output_dir))
                progress.advance(stage_task, 1)
    except PublishError as exc:
        logger.error("Publish failed: %s", exc, extra={"event": "publish_failed"})
        raise

    result = PublishResult(
        output_dir=output_dir,
        pages=len(documents),
        articles=len(site.articles),
        tags=len(site.tags),
        files=len(extra_files),
    )
    log_event(
        logger,
        "Publish complete",
        event="publish_complete",
        pages=result.pages,
        articles=result.articles,
        tags=result.tags,
    )
    return result
