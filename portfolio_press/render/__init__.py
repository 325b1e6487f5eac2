"""
Rendering: node tree, HTML serializer, layout and page renderers.
"""

from .html import render_node, render_nodes
from .layout import compose, resolve_navigation
from .pages import (
    render_article,
    render_blog_index,
    render_home,
    render_resume,
    render_tag,
    static_pages,
)

__all__ = [
    "compose",
    "render_article",
    "render_blog_index",
    "render_home",
    "render_node",
    "render_nodes",
    "render_resume",
    "render_tag",
    "resolve_navigation",
    "static_pages",
]
