"""
Render node tree.

Page renderers describe *what* a page shows as a tree of immutable nodes;
``render.html`` decides *how* that tree becomes markup. Every node carries
a Style record holding CSS classes, inline declarations and extra
attributes. Styles never mutate: ``Style.merge`` returns a new record.

Constructors accept plain strings and lists for convenience. Strings become
escaped Text nodes and lists become tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union


@dataclass(frozen=True)
class Style:
    """Immutable presentation record attached to a node.

    Attributes:
        classes: CSS class names, in order, without duplicates
        css: Inline declarations as (property, value) pairs
        attrs: Additional HTML attributes as (name, value) pairs
    """

    classes: tuple[str, ...] = ()
    css: tuple[tuple[str, str], ...] = ()
    attrs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, *classes: str, attrs: dict[str, str] | None = None, **css: str) -> "Style":
        """Build a style; keyword names use underscores for hyphens."""
        return cls(
            classes=tuple(dict.fromkeys(c for c in classes if c)),
            css=tuple((name.replace("_", "-"), str(value)) for name, value in css.items()),
            attrs=tuple((attrs or {}).items()),
        )

    def merge(self, other: "Style") -> "Style":
        """Combine two styles; ``other`` wins on conflicting declarations."""
        css = dict(self.css)
        css.update(other.css)
        attrs = dict(self.attrs)
        attrs.update(other.attrs)
        return Style(
            classes=tuple(dict.fromkeys(self.classes + other.classes)),
            css=tuple(css.items()),
            attrs=tuple(attrs.items()),
        )

    def __bool__(self) -> bool:
        return bool(self.classes or self.css or self.attrs)


EMPTY = Style()


@dataclass(frozen=True)
class Node:
    style: Style = field(default=EMPTY, kw_only=True)

    def styled(self, style: Style) -> "Node":
        """Copy of this node with ``style`` merged over its own."""
        return replace(self, style=self.style.merge(style))


Content = Union[str, Node, list, tuple, None]


def _children(value: Content) -> tuple[Node, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, Node)):
        value = [value]
    result = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, str):
            result.append(Text(item))
        elif isinstance(item, Node):
            result.append(item)
        else:
            raise TypeError(f"Cannot use {type(item).__name__} as a render node")
    return tuple(result)


class _Container(Node):
    def __post_init__(self) -> None:
        object.__setattr__(self, "children", _children(self.children))


@dataclass(frozen=True)
class Text(Node):
    """Plain text, escaped on output."""

    text: str


@dataclass(frozen=True)
class Raw(Node):
    """Pre-rendered, trusted HTML such as converted markdown."""

    html: str


@dataclass(frozen=True)
class Heading(_Container):
    level: int
    children: tuple[Node, ...]

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()


@dataclass(frozen=True)
class Paragraph(_Container):
    children: tuple[Node, ...]


@dataclass(frozen=True)
class Emphasis(_Container):
    children: tuple[Node, ...]


@dataclass(frozen=True)
class Strong(_Container):
    children: tuple[Node, ...]


@dataclass(frozen=True)
class Span(_Container):
    children: tuple[Node, ...]


@dataclass(frozen=True)
class Link(_Container):
    href: str
    children: tuple[Node, ...]


@dataclass(frozen=True)
class Image(Node):
    src: str
    alt: str = ""


@dataclass(frozen=True)
class ListNode(Node):
    """Bulleted (or numbered) list; each item is a sequence of nodes."""

    items: tuple[tuple[Node, ...], ...]
    ordered: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(_children(item) for item in self.items))


@dataclass(frozen=True)
class Card(Node):
    """Bordered panel with optional image, header and footer."""

    body: tuple[Node, ...]
    header: tuple[Node, ...] = ()
    footer: tuple[Node, ...] = ()
    image: str | None = None
    image_alt: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", _children(self.body))
        object.__setattr__(self, "header", _children(self.header))
        object.__setattr__(self, "footer", _children(self.footer))


GROUP_TAGS = frozenset({"div", "section", "header", "footer", "nav", "main", "article"})


@dataclass(frozen=True)
class Group(_Container):
    """Generic block container; ``tag`` picks the HTML element."""

    children: tuple[Node, ...]
    tag: str = "div"

    def __post_init__(self) -> None:
        if self.tag not in GROUP_TAGS:
            raise ValueError(f"Unsupported group element '{self.tag}'")
        super().__post_init__()


@dataclass(frozen=True)
class Grid(_Container):
    """Responsive grid; each child takes ``width`` of twelve columns."""

    children: tuple[Node, ...]
    width: int = 6

    def __post_init__(self) -> None:
        if not 1 <= self.width <= 12:
            raise ValueError(f"Grid width must be 1-12, got {self.width}")
        super().__post_init__()


@dataclass(frozen=True)
class Spacer(Node):
    """Vertical gap of ``size`` pixels; None stretches inside a flex row."""

    size: int | None = None


@dataclass(frozen=True)
class NavBar(Node):
    """Top navigation bar: brand text linking home plus trailing links."""

    brand: str
    brand_href: str
    links: tuple[Link, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "links", tuple(self.links))
