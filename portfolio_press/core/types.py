"""
Core data types for the publish pipeline.

This module defines the content model shared by every stage:
- Article: A dated, tagged markdown document loaded from the content tree
- Tag: A label and the articles that declare it (derived, never authored)
- ResumeEntry: One job record from the structured resume data
- Page: A renderable unit with a title, an output path and a body function
- Site: The aggregate root handed to every renderer

All of them are frozen: they are built once during discovery and only read
while pages render, which is what makes rendering safe across threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from .slugs import href_for

if TYPE_CHECKING:
    from ..config import AppConfig
    from ..render.nodes import Node


@dataclass(frozen=True)
class Article:
    """A single blog article.

    Attributes:
        slug: Unique path-safe identifier, used for the output folder
        title: Article headline (never empty)
        date: Publish date
        body: Markdown source of the article
        html: Body rendered to HTML
        tags: Tag names in declaration order, without duplicates
        description: Short plain-text preview used by listings
        word_count: Whitespace-token count of the body
        reading_minutes: Estimated reading time in whole minutes
        image: Optional preview image reference
        path: Relative output path of the article document
        source: File the article was loaded from
    """

    slug: str
    title: str
    date: date
    body: str
    html: str
    tags: tuple[str, ...] = ()
    description: str = ""
    word_count: int = 0
    reading_minutes: int = 0
    image: str | None = None
    path: str = ""
    source: Path | None = None

    @property
    def href(self) -> str:
        return href_for(self.path)


@dataclass(frozen=True)
class Tag:
    """A tag and every article that declares it, newest first."""

    name: str
    slug: str
    articles: tuple[Article, ...] = ()
    path: str = ""

    @property
    def href(self) -> str:
        return href_for(self.path)


@dataclass(frozen=True)
class ResumeEntry:
    """One job on the resume page."""

    title: str
    company: str
    location: str
    date: str
    application: str


@dataclass(frozen=True)
class Page:
    """A static page: fixed identity, body produced from the Site.

    Attributes:
        key: Stable identifier navigation entries refer to ("home", "blog", ...)
        title: Page title, also shown in the document head
        path: Relative output path of the document
        render: Pure function from the Site to the page body nodes
    """

    key: str
    title: str
    path: str
    render: Callable[["Site"], list["Node"]] = field(compare=False, repr=False)

    @property
    def href(self) -> str:
        return href_for(self.path)


@dataclass(frozen=True)
class Site:
    """Aggregate root for one publish run.

    Attributes:
        config: Resolved application configuration
        pages: Static pages in declaration order (home first)
        articles: All articles, newest first
        tags: All tags, ordered by name
        resume: Resume entries in the order they were loaded
    """

    config: "AppConfig"
    pages: tuple[Page, ...]
    articles: tuple[Article, ...] = ()
    tags: tuple[Tag, ...] = ()
    resume: tuple[ResumeEntry, ...] = ()

    @property
    def name(self) -> str:
        return self.config.site.name

    @property
    def base_url(self) -> str:
        return self.config.site.url

    @property
    def author(self) -> str:
        return self.config.site.author

    def page(self, key: str) -> Page | None:
        for page in self.pages:
            if page.key == key:
                return page
        return None

    def tag(self, name: str) -> Tag | None:
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None
