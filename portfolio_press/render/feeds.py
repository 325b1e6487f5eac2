"""sitemap.xml and RSS 2.0 feed generation.

Timestamps come from article dates only, so unchanged content always
produces the same bytes.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from email.utils import format_datetime

from ..core.index import sort_by_date
from ..core.slugs import absolute_url
from ..core.types import Site
from .layout import template_environment


def rfc2822(value: date) -> str:
    return format_datetime(datetime.combine(value, time.min, tzinfo=timezone.utc))


def render_sitemap(site: Site, paths: list[str]) -> str:
    """Sitemap listing ``paths`` in order; article pages carry a lastmod."""
    lastmod = {article.path: article.date.isoformat() for article in site.articles}
    for tag in site.tags:
        lastmod[tag.path] = max(article.date for article in tag.articles).isoformat()
    entries = [
        {"loc": absolute_url(site.base_url, path), "lastmod": lastmod.get(path)}
        for path in paths
    ]
    return template_environment().get_template("sitemap.xml").render(entries=entries)


def render_feed(site: Site) -> str:
    cfg = site.config.site
    articles = sort_by_date(site.articles)
    items = [
        {
            "title": article.title,
            "link": absolute_url(site.base_url, article.path),
            "pub_date": rfc2822(article.date),
            "description": article.description,
            "tags": article.tags,
        }
        for article in articles
    ]
    return template_environment().get_template("feed.xml").render(
        title=cfg.name,
        link=absolute_url(site.base_url, "index.html"),
        description=cfg.description or cfg.name,
        language=cfg.language,
        last_build=rfc2822(articles[0].date) if articles else None,
        items=items,
    )
