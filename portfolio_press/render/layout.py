"""
Layout Composer.

Wraps a page body in the shared chrome: document head, fixed navigation
bar, spacer, centred content column and footer. ``compose`` is total: it
never fails on well-formed input, and navigation targets are validated
once per run by ``resolve_navigation`` before any page is rendered.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..config import AppConfig
from ..core.slugs import INDEX_FILE, absolute_url
from ..core.types import Page, Site
from ..errors import ConfigError
from .html import render_nodes
from .nodes import Group, Image, Link, NavBar, Node, Paragraph, Spacer, Span, Style, Text

NAVBAR_HEIGHT = 54
FOOTER_TOP_SPACE = 30
FOOTER_BOTTOM_SPACE = 20
HOME_KEY = "home"


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def resolve_navigation(config: AppConfig, pages: tuple[Page, ...]) -> list[tuple[str, Page]]:
    """Pair each navigation label with the static page it targets.

    Raises:
        ConfigError: A navigation entry names an unknown page
    """
    by_key = {page.key: page for page in pages}
    resolved = []
    for item in config.navigation:
        page = by_key.get(item.target)
        if page is None:
            known = ", ".join(sorted(by_key))
            raise ConfigError(
                f"Navigation entry '{item.label}' targets unknown page '{item.target}' "
                f"(known pages: {known})"
            )
        resolved.append((item.label, page))
    return resolved


def navigation_bar(site: Site) -> NavBar:
    cfg = site.config.site
    home = site.page(HOME_KEY)
    return NavBar(
        brand=cfg.logo or cfg.author or cfg.name,
        brand_href=home.href if home else "/",
        links=tuple(
            Link(page.href, label) for label, page in resolve_navigation(site.config, site.pages)
        ),
    )


def footer(site: Site) -> Group:
    cfg = site.config.site
    brand = Style.of(color=cfg.brand_color)
    row: list[Node] = [Paragraph(Text(cfg.author or cfg.name), style=brand)]
    if cfg.email:
        row.append(Spacer())
        row.append(
            Paragraph([Span("\N{E-MAIL SYMBOL} "), Link(f"mailto:{cfg.email}", "Email me")])
        )
    if cfg.repository_url:
        row.append(Spacer())
        source: list[Node] = []
        if cfg.repository_icon:
            source.append(Image(cfg.repository_icon, alt="", style=Style.of("footer-icon", height="16px")))
            source.append(Span(" "))
        source.append(Link(cfg.repository_url, cfg.repository_label))
        row.append(Paragraph(source))
    return Group(
        [
            Spacer(FOOTER_TOP_SPACE),
            Group(row, style=Style.of("footer-row")),
            Spacer(FOOTER_BOTTOM_SPACE),
        ],
        tag="footer",
        style=Style.of("site-footer"),
    )


def compose(
    page_title: str,
    page_body: list[Node],
    site: Site,
    *,
    path: str = INDEX_FILE,
    description: str | None = None,
) -> str:
    """Render a complete HTML document for one page."""
    cfg = site.config
    chrome = [
        navigation_bar(site),
        Spacer(NAVBAR_HEIGHT),
        Group(page_body, tag="main", style=Style.of("content")),
        footer(site),
    ]
    template = template_environment().get_template("document.html")
    return template.render(
        language=cfg.site.language,
        title=f"{page_title}{cfg.site.title_suffix}",
        description=description or cfg.site.description,
        author=cfg.site.author,
        canonical=absolute_url(cfg.site.url, path),
        site_name=cfg.site.name,
        brand_color=cfg.site.brand_color,
        highlight_css=cfg.output.highlight_css,
        feed=cfg.output.feed,
        body=Markup(render_nodes(chrome)),
    )
