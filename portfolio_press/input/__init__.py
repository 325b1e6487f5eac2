"""Content discovery: markdown articles and structured resume data."""

from .articles import discover_articles, load_article, parse_front_matter, render_markdown
from .resume import load_resume

__all__ = [
    "discover_articles",
    "load_article",
    "load_resume",
    "parse_front_matter",
    "render_markdown",
]
