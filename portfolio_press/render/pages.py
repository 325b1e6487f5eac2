"""
Page renderers.

Each renderer is a pure function from the Site (plus the article or tag it
is rendering) to a list of body nodes. Nothing here touches the
filesystem; the assembler wraps the result with the layout and writes it.
"""

from __future__ import annotations

from datetime import date

from ..core.index import sort_by_date
from ..core.slugs import document_path, slugify
from ..core.types import Article, Page, ResumeEntry, Site, Tag
from ..errors import RenderError
from ..input.articles import render_markdown
from .nodes import (
    Card,
    Emphasis,
    Grid,
    Group,
    Heading,
    Link,
    ListNode,
    Node,
    Paragraph,
    Raw,
    Spacer,
    Strong,
    Style,
    Text,
)

TITLE_STYLE = Style.of("title")
META_STYLE = Style.of("meta")
PREVIEW_WIDTH = 6


def format_date(value: date) -> str:
    """Medium date style, e.g. ``Jan 5, 2024``."""
    return f"{value:%b} {value.day}, {value.year}"


def render_home(site: Site) -> list[Node]:
    home = site.config.home
    nodes: list[Node] = [Heading(2, home.heading, style=TITLE_STYLE)]
    if home.bio.strip():
        nodes.append(
            Group(Raw(render_markdown(home.bio, site.config.content.markdown_extensions)),
                  style=Style.of("bio"))
        )
    return nodes


def render_blog_index(site: Site) -> list[Node]:
    """Article previews, newest first, in a two-column grid."""
    previews = [article_preview(article, site) for article in sort_by_date(site.articles)]
    return [
        Heading(2, "Blog", style=TITLE_STYLE),
        Grid(previews, width=PREVIEW_WIDTH, style=Style.of("previews", row_gap="20px")),
    ]


def article_preview(article: Article, site: Site) -> Card:
    footer = tag_links(article, site)
    return Card(
        body=Paragraph(article.description, style=Style.of(margin_bottom="0")),
        header=Heading(4, Link(article.href, article.title)),
        footer=Group(footer, tag="section") if footer else None,
        image=article.image,
        image_alt=article.title,
        style=Style.of("article-preview"),
    )


def tag_links(article: Article, site: Site) -> list[Node]:
    """Links to the tag page of every tag the article declares."""
    links: list[Node] = []
    for name in article.tags:
        tag = site.tag(name)
        if tag is None:
            raise RenderError(f"Article '{article.title}' declares unindexed tag '{name}'")
        links.append(Link(tag.href, tag.name, style=Style.of("tag-link")))
    return links


def render_article(article: Article, site: Site) -> list[Node]:
    if not article.title.strip():
        raise RenderError("Cannot render an article without a title", article.source)
    nodes: list[Node] = [
        Heading(1, article.title, style=Style.of(font_weight="500", margin_top="1.5rem")),
        Paragraph(format_date(article.date), style=META_STYLE),
        Paragraph(
            f"{article.word_count} words; {article.reading_minutes} minutes to read.",
            style=META_STYLE,
        ),
        Raw(article.html),
    ]
    links = tag_links(article, site)
    if links:
        nodes.append(Group(links, tag="section", style=Style.of("article-tags")))
    return [Group(nodes, tag="article", style=Style.of(width="90%"))]


def render_resume(site: Site) -> list[Node]:
    nodes: list[Node] = [Heading(2, "My Resume", style=TITLE_STYLE)]
    nodes.extend(resume_card(entry) for entry in site.resume)
    return nodes


def resume_card(entry: ResumeEntry) -> Card:
    if not entry.title.strip():
        raise RenderError(f"Resume entry at {entry.company or 'unknown company'} has no title")
    flush = Style.of(margin="0")
    return Card(
        body=[
            Paragraph(Strong(entry.title), style=flush),
            Paragraph([Text(f"{entry.company}, {entry.location}, "), Emphasis(entry.date)],
                      style=flush),
            Spacer(10),
            Paragraph(entry.application, style=flush),
        ],
        style=Style.of("resume-entry", margin_top="20px"),
    )


def render_tag(tag: Tag, site: Site) -> list[Node]:
    """Heading with the tag name and a link to each article carrying it."""
    if not tag.articles:
        raise RenderError(f"Tag '{tag.name}' has no articles")
    brand = Style.of(color=site.config.site.brand_color)
    return [
        Spacer(30),
        Heading(1, tag.name),
        ListNode([[Link(article.href, article.title, style=brand)] for article in tag.articles]),
    ]


def static_pages() -> tuple[Page, ...]:
    """Home, Blog and Resume; the home page is the site index."""
    return (
        Page(key="home", title="Home", path=document_path(), render=render_home),
        Page(key="blog", title="Blog", path=document_path(slugify("Blog")), render=render_blog_index),
        Page(
            key="resume",
            title="Resume",
            path=document_path(slugify("Resume")),
            render=render_resume,
        ),
    )
