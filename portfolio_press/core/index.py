"""
Article and tag indices.

The tag index is derived entirely from the articles: a tag exists only
because at least one article declares it, and its article list is exactly
the set of articles declaring it.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import RenderError, SlugCollisionError
from .slugs import document_path, slugify
from .types import Article, Tag


def sort_by_date(articles: Iterable[Article]) -> list[Article]:
    """Newest first; same-day articles fall back to slug order."""
    by_slug = sorted(articles, key=lambda article: article.slug)
    return sorted(by_slug, key=lambda article: article.date, reverse=True)


def build_tag_index(articles: Iterable[Article], tags_path: str = "tags") -> tuple[Tag, ...]:
    """Group articles under every tag they declare.

    Raises:
        SlugCollisionError: Two distinct tag names share a slug
    """
    ordered = sort_by_date(articles)
    members: dict[str, list[Article]] = {}
    for article in ordered:
        for name in article.tags:
            members.setdefault(name, []).append(article)

    tags = []
    for name in sorted(members, key=lambda value: (value.lower(), value)):
        slug = slugify(name)
        tags.append(
            Tag(
                name=name,
                slug=slug,
                articles=tuple(members[name]),
                path=document_path(tags_path, slug),
            )
        )
    ensure_unique_slugs((tag.slug, tag.name) for tag in tags)
    return tuple(tags)


def ensure_unique_slugs(items: Iterable[tuple[str, str]]) -> None:
    """Raise on the first slug claimed by two different labels.

    Args:
        items: (slug, label) pairs; the label names the owner in the error
    """
    seen: dict[str, str] = {}
    for slug, label in items:
        owner = seen.get(slug)
        if owner is not None:
            raise SlugCollisionError(slug, owner, label)
        seen[slug] = label


def check_tag_index(articles: Iterable[Article], tags: Iterable[Tag]) -> None:
    """Verify articles and tags reference each other consistently.

    Raises:
        RenderError: A tag is empty, lists an article that does not declare
            it, or misses an article that does
    """
    articles = list(articles)
    by_name = {tag.name: tag for tag in tags}
    for tag in by_name.values():
        if not tag.articles:
            raise RenderError(f"Tag '{tag.name}' has no articles")
        for article in tag.articles:
            if tag.name not in article.tags:
                raise RenderError(
                    f"Tag '{tag.name}' lists '{article.title}' which does not declare it"
                )
    for article in articles:
        for name in article.tags:
            tag = by_name.get(name)
            if tag is None or article not in tag.articles:
                raise RenderError(f"Article '{article.title}' is missing from tag '{name}'")
