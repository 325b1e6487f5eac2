"""Serialize render node trees to HTML text."""

from __future__ import annotations

from functools import singledispatch
from html import escape
from typing import Iterable

from ..errors import RenderError
from .nodes import (
    Card,
    Emphasis,
    Grid,
    Group,
    Heading,
    Image,
    Link,
    ListNode,
    NavBar,
    Node,
    Paragraph,
    Raw,
    Spacer,
    Span,
    Strong,
    Style,
    Text,
)


def render_nodes(nodes: Iterable[Node]) -> str:
    return "".join(render_node(node) for node in nodes)


@singledispatch
def render_node(node: Node) -> str:
    raise RenderError(f"No HTML serializer for {type(node).__name__}")


def _attrs(style: Style, *, base: Style | None = None, **attrs: str | None) -> str:
    merged = base.merge(style) if base is not None else style
    parts = []
    for name, value in attrs.items():
        if value is not None:
            parts.append(f' {name}="{escape(value, quote=True)}"')
    if merged.classes:
        parts.append(f' class="{escape(" ".join(merged.classes), quote=True)}"')
    if merged.css:
        declarations = "; ".join(f"{prop}: {value}" for prop, value in merged.css)
        parts.append(f' style="{escape(declarations, quote=True)}"')
    for name, value in merged.attrs:
        parts.append(f' {name}="{escape(value, quote=True)}"')
    return "".join(parts)


@render_node.register
def _(node: Text) -> str:
    if node.style:
        return f"<span{_attrs(node.style)}>{escape(node.text, quote=False)}</span>"
    return escape(node.text, quote=False)


@render_node.register
def _(node: Raw) -> str:
    return node.html


@render_node.register
def _(node: Heading) -> str:
    return f"<h{node.level}{_attrs(node.style)}>{render_nodes(node.children)}</h{node.level}>"


@render_node.register
def _(node: Paragraph) -> str:
    return f"<p{_attrs(node.style)}>{render_nodes(node.children)}</p>"


@render_node.register
def _(node: Emphasis) -> str:
    return f"<em{_attrs(node.style)}>{render_nodes(node.children)}</em>"


@render_node.register
def _(node: Strong) -> str:
    return f"<strong{_attrs(node.style)}>{render_nodes(node.children)}</strong>"


@render_node.register
def _(node: Span) -> str:
    return f"<span{_attrs(node.style)}>{render_nodes(node.children)}</span>"


@render_node.register
def _(node: Link) -> str:
    return f"<a{_attrs(node.style, href=node.href)}>{render_nodes(node.children)}</a>"


@render_node.register
def _(node: Image) -> str:
    return f"<img{_attrs(node.style, src=node.src, alt=node.alt)}>"


@render_node.register
def _(node: ListNode) -> str:
    tag = "ol" if node.ordered else "ul"
    items = "".join(f"<li>{render_nodes(item)}</li>" for item in node.items)
    return f"<{tag}{_attrs(node.style)}>{items}</{tag}>"


@render_node.register
def _(node: Card) -> str:
    parts = [f"<div{_attrs(node.style, base=Style.of('card'))}>"]
    if node.image:
        parts.append(f'<img class="card-img-top" src="{escape(node.image, quote=True)}"'
                     f' alt="{escape(node.image_alt, quote=True)}">')
    if node.header:
        parts.append(f'<div class="card-header">{render_nodes(node.header)}</div>')
    parts.append(f'<div class="card-body">{render_nodes(node.body)}</div>')
    if node.footer:
        parts.append(f'<div class="card-footer">{render_nodes(node.footer)}</div>')
    parts.append("</div>")
    return "".join(parts)


@render_node.register
def _(node: Group) -> str:
    return f"<{node.tag}{_attrs(node.style)}>{render_nodes(node.children)}</{node.tag}>"


@render_node.register
def _(node: Grid) -> str:
    cells = "".join(
        f'<div class="col-md-{node.width}">{render_node(child)}</div>' for child in node.children
    )
    return f"<div{_attrs(node.style, base=Style.of('row'))}>{cells}</div>"


@render_node.register
def _(node: Spacer) -> str:
    if node.size is None:
        base = Style.of("spacer", flex_grow="1")
    else:
        base = Style.of("spacer", height=f"{node.size}px")
    return f"<div{_attrs(node.style, base=base)}></div>"


@render_node.register
def _(node: NavBar) -> str:
    links = "".join(
        f'<li class="nav-item">{render_node(link.styled(Style.of("nav-link")))}</li>'
        for link in node.links
    )
    return (
        f"<nav{_attrs(node.style, base=Style.of('navbar'))}>"
        f'<a class="navbar-brand" href="{escape(node.brand_href, quote=True)}">'
        f"{escape(node.brand, quote=False)}</a>"
        f'<ul class="navbar-nav">{links}</ul>'
        "</nav>"
    )
