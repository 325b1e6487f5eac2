"""
Site Assembler.

Turns a Site into the closed set of output documents (one per static page,
per article and per tag) and flushes them to disk. Rendering only reads the
frozen Site, so pages render independently on a thread pool; results keep
page order regardless of which thread finished first.

Output is written to a staging directory beside the destination and swapped
in only once every file is on disk, so an aborted run never leaves a
partial site behind.
"""

from __future__ import annotations

import shutil
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from .core.index import ensure_unique_slugs
from .core.types import Site
from .errors import ConfigError, OutputError, RenderError
from .logging_utils import get_logger
from .render.feeds import render_feed, render_sitemap
from .render.layout import compose
from .render.nodes import Node
from .render.pages import render_article, render_tag

logger = get_logger("assembler")

HIGHLIGHT_CSS_PATH = "css/highlight.css"


@dataclass(frozen=True)
class PageJob:
    """Everything needed to render one document, bound to its content."""

    path: str
    title: str
    description: str | None
    body: Callable[[], list[Node]]


@dataclass(frozen=True)
class RenderedDocument:
    path: str
    title: str
    html: str


def page_jobs(site: Site) -> list[PageJob]:
    """One job per static page, article and tag, in that order."""
    jobs = [
        PageJob(page.path, page.title, None, lambda page=page: page.render(site))
        for page in site.pages
    ]
    jobs.extend(
        PageJob(
            article.path,
            article.title,
            article.description,
            lambda article=article: render_article(article, site),
        )
        for article in site.articles
    )
    jobs.extend(
        PageJob(tag.path, tag.name, None, lambda tag=tag: render_tag(tag, site))
        for tag in site.tags
    )
    return jobs


def check_output_paths(site: Site) -> None:
    """Fail when two entities would be written to the same document.

    Raises:
        SlugCollisionError: Two articles, two tags, or any two documents
            share an output path
    """
    ensure_unique_slugs((article.slug, _source_label(article)) for article in site.articles)
    ensure_unique_slugs((tag.slug, tag.name) for tag in site.tags)
    labels = [(page.path, f"page {page.title}") for page in site.pages]
    labels += [(article.path, _source_label(article)) for article in site.articles]
    labels += [(tag.path, f"tag {tag.name}") for tag in site.tags]
    ensure_unique_slugs(labels)


def _source_label(article) -> str:
    if article.source is not None:
        return f"{article.title} [{article.source.name}]"
    return article.title


def render_document(job: PageJob, site: Site) -> RenderedDocument:
    body = job.body()
    html = compose(job.title, body, site, path=job.path, description=job.description)
    return RenderedDocument(path=job.path, title=job.title, html=html)


def assemble(
    site: Site,
    workers: int = 1,
    on_rendered: Callable[[RenderedDocument], None] | None = None,
) -> list[RenderedDocument]:
    """Render every document of the site.

    Any renderer error propagates and aborts the whole assembly.
    """
    jobs = page_jobs(site)
    documents: list[RenderedDocument] = []
    if workers <= 1:
        for job in jobs:
            document = render_document(job, site)
            documents.append(document)
            if on_rendered is not None:
                on_rendered(document)
    else:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="render") as pool:
            futures = [pool.submit(render_document, job, site) for job in jobs]
            for future in futures:
                document = future.result()
                documents.append(document)
                if on_rendered is not None:
                    on_rendered(document)

    expected = len(site.pages) + len(site.articles) + len(site.tags)
    if len(documents) != expected:
        raise RenderError(f"Rendered {len(documents)} documents, expected {expected}")
    return documents


def supplementary_files(site: Site, documents: list[RenderedDocument]) -> dict[str, str]:
    """Sitemap, feed and stylesheet files that accompany the documents."""
    output = site.config.output
    files: dict[str, str] = {}
    if output.sitemap:
        files["sitemap.xml"] = render_sitemap(site, [document.path for document in documents])
    if output.feed:
        files["feed.xml"] = render_feed(site)
    if output.highlight_css:
        try:
            formatter = HtmlFormatter(style=output.highlight_style)
        except ClassNotFound as exc:
            raise ConfigError(f"Unknown highlight style '{output.highlight_style}'") from exc
        files[HIGHLIGHT_CSS_PATH] = formatter.get_style_defs(".codehilite") + "\n"
    return files


def check_destination(content_root: Path, destination: Path, protected: list[Path] | None = None) -> None:
    """Refuse an output directory that would replace or swallow content.

    The destination must not be the content root or one of its parents,
    and must not sit inside any ``protected`` folder (articles, assets).

    Raises:
        ConfigError: The destination overlaps the content tree
        OutputError: The destination exists and is not a directory
    """
    target = Path(destination).resolve()
    root = Path(content_root).resolve()
    if target == root or target in root.parents:
        raise ConfigError("Output directory would replace the content folder", destination)
    for folder in protected or []:
        folder = Path(folder).resolve()
        if target == folder or folder in target.parents:
            raise ConfigError(f"Output directory is inside content folder {folder}", destination)
    if target.exists() and not target.is_dir():
        raise OutputError("Output path exists and is not a directory", destination)


def flush(
    documents: list[RenderedDocument],
    destination: Path,
    extra_files: dict[str, str] | None = None,
    assets_dir: Path | None = None,
    workers: int = 1,
) -> Path:
    """Write all output to a staging directory, then swap it into place.

    Returns:
        The destination directory

    Raises:
        OutputError: The destination is not a directory or a write failed;
            the previous destination is left as it was
    """
    destination = Path(destination)
    if destination.exists() and not destination.is_dir():
        raise OutputError("Output path exists and is not a directory", destination)
    parent = destination.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{destination.name}-staging-", dir=parent))
    except OSError as exc:
        raise OutputError(f"Cannot create output directory: {exc}", destination) from exc

    try:
        staging.chmod(0o755)
        if assets_dir is not None and assets_dir.is_dir():
            shutil.copytree(assets_dir, staging, dirs_exist_ok=True)
            logger.debug("Copied assets from %s", assets_dir)

        outputs = [(document.path, document.html) for document in documents]
        outputs.extend((extra_files or {}).items())
        if workers <= 1:
            for relative, text in outputs:
                _write(staging, relative, text)
        else:
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="flush") as pool:
                for future in [pool.submit(_write, staging, rel, text) for rel, text in outputs]:
                    future.result()

        _swap(staging, destination)
    except OSError as exc:
        shutil.rmtree(staging, ignore_errors=True)
        raise OutputError(f"Cannot write site: {exc}", destination) from exc
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise
    return destination


def _write(root: Path, relative: str, text: str) -> None:
    target = root / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")


def _swap(staging: Path, destination: Path) -> None:
    if not destination.exists():
        staging.rename(destination)
        return
    backup = Path(tempfile.mkdtemp(prefix=f".{destination.name}-previous-", dir=destination.parent))
    backup.rmdir()
    destination.rename(backup)
    try:
        staging.rename(destination)
    except OSError:
        backup.rename(destination)
        raise
    shutil.rmtree(backup)
