"""Markdown article loader.

Each article is a ``.md`` file that opens with a YAML front matter block:

    ---
    title: Clean Mobile Architecture
    date: 2024-03-18
    tags: [architecture, flutter]
    image: /images/clean.png
    ---
    Markdown body...

``title`` and ``date`` are required. ``tags`` may also be a comma-separated
string. ``description``, ``slug`` and ``published`` are optional.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any

import markdown
import yaml
from bs4 import BeautifulSoup

from ..config import ContentConfig, OutputConfig
from ..core.index import sort_by_date
from ..core.metrics import reading_minutes, word_count
from ..core.slugs import document_path, slugify
from ..core.types import Article
from ..errors import ConfigError, ContentLoadError
from ..logging_utils import get_logger

logger = get_logger("input.articles")

FRONT_MATTER_DELIMITER = "---"
ELLIPSIS = "…"


def discover_articles(
    articles_dir: Path,
    content: ContentConfig | None = None,
    output: OutputConfig | None = None,
) -> list[Article]:
    """Load every published article below ``articles_dir``, newest first.

    A missing directory yields an empty blog rather than an error.

    Raises:
        ContentLoadError: Any article has malformed or missing metadata
    """
    content = content or ContentConfig()
    output = output or OutputConfig()
    if not articles_dir.is_dir():
        logger.warning("Articles directory not found: %s", articles_dir)
        return []

    articles = []
    for path in sorted(articles_dir.rglob("*.md")):
        article = load_article(path, content, output)
        if article is None:
            logger.debug("Skipping unpublished article %s", path)
            continue
        articles.append(article)
    return sort_by_date(articles)


def load_article(
    path: Path,
    content: ContentConfig | None = None,
    output: OutputConfig | None = None,
) -> Article | None:
    """Load one article file; returns None when it is marked unpublished."""
    content = content or ContentConfig()
    output = output or OutputConfig()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentLoadError(f"Cannot read article: {exc}", path) from exc

    meta, body = parse_front_matter(text, path)
    if not _parse_bool(meta.get("published", True), "published", path):
        return None

    title = meta.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ContentLoadError("Article is missing a title", path)
    title = title.strip()

    published = _parse_date(meta.get("date"), path)
    tags = _parse_tags(meta.get("tags"), path)

    slug_value = meta.get("slug")
    if slug_value is not None and not isinstance(slug_value, str):
        raise ContentLoadError("Article slug must be a string", path)
    slug = slugify(slug_value) if slug_value else slugify(title)

    html = render_markdown(body, content.markdown_extensions)
    description = meta.get("description")
    if description is not None and not isinstance(description, str):
        raise ContentLoadError("Article description must be a string", path)
    if not description:
        description = html_to_text(html)
    description = truncate_words(description.strip(), content.description_chars)

    image = meta.get("image")
    if image is not None and not isinstance(image, str):
        raise ContentLoadError("Article image must be a string", path)

    words = word_count(body)
    return Article(
        slug=slug,
        title=title,
        date=published,
        body=body,
        html=html,
        tags=tags,
        description=description,
        word_count=words,
        reading_minutes=reading_minutes(
            words, content.words_per_minute, content.min_reading_minutes
        ),
        image=image or None,
        path=document_path(output.articles_path, slug),
        source=path,
    )


def parse_front_matter(text: str, path: Path | None = None) -> tuple[dict[str, Any], str]:
    """Split a document into its YAML metadata and markdown body."""
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise ContentLoadError("Article has no front matter block", path)

    for idx in range(1, len(lines)):
        if lines[idx].strip() == FRONT_MATTER_DELIMITER:
            header = "".join(lines[1:idx])
            body = "".join(lines[idx + 1 :])
            break
    else:
        raise ContentLoadError("Front matter block is not closed", path)

    try:
        meta = yaml.safe_load(header) or {}
    except (yaml.YAMLError, ValueError) as exc:
        raise ContentLoadError(f"Invalid front matter: {exc}", path) from exc
    if not isinstance(meta, dict):
        raise ContentLoadError("Front matter must be a mapping", path)
    return meta, body.strip()


def render_markdown(text: str, extensions: list[str] | None = None) -> str:
    """Render markdown to HTML with syntax-highlighted code blocks."""
    extensions = list(extensions) if extensions is not None else ["fenced_code", "codehilite"]
    configs = {}
    if "codehilite" in extensions:
        configs["codehilite"] = {"guess_lang": False, "css_class": "codehilite"}
    try:
        return markdown.markdown(
            text,
            extensions=extensions,
            extension_configs=configs,
            output_format="html",
        )
    except (ImportError, TypeError, AttributeError) as exc:
        raise ConfigError(f"Cannot load markdown extensions {extensions}: {exc}") from exc


def html_to_text(html: str) -> str:
    """Collapse rendered HTML to a single line of plain text."""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return " ".join(text.split())


def truncate_words(text: str, max_chars: int) -> str:
    """Cut ``text`` at a word boundary so the result fits ``max_chars``."""
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    cut = text[: max_chars - 1]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(" ,.;:") + ELLIPSIS


def _parse_date(value: Any, path: Path) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        raw = value.strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise ContentLoadError(f"Invalid article date '{raw}'", path) from exc
    if value is None:
        raise ContentLoadError("Article is missing a date", path)
    raise ContentLoadError(f"Invalid article date {value!r}", path)


def _parse_tags(value: Any, path: Path) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, list):
        items = value
    else:
        raise ContentLoadError("Article tags must be a list or a comma-separated string", path)

    tags: list[str] = []
    for item in items:
        if not isinstance(item, (str, int, float)) or isinstance(item, bool):
            raise ContentLoadError(f"Invalid tag {item!r}", path)
        name = str(item).strip()
        if name and name not in tags:
            tags.append(name)
    return tuple(tags)


def _parse_bool(value: Any, key: str, path: Path) -> bool:
    if isinstance(value, bool):
        return value
    raise ContentLoadError(f"Article '{key}' must be true or false", path)
