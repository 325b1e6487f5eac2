from dataclasses import dataclass

import pytest

from portfolio_press.errors import RenderError
from portfolio_press.render.html import render_node, render_nodes
from portfolio_press.render.nodes import (
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
    Style,
    Text,
)


def test_text_is_escaped_and_raw_is_not() -> None:
    assert render_node(Text("<b>&</b>")) == "&lt;b&gt;&amp;&lt;/b&gt;"
    assert render_node(Raw("<b>ok</b>")) == "<b>ok</b>"


def test_heading_serializes_classes_and_inline_css() -> None:
    node = Heading(2, "Blog", style=Style.of("title", margin_top="1.5rem"))

    assert render_node(node) == '<h2 class="title" style="margin-top: 1.5rem">Blog</h2>'


def test_style_merge_is_immutable_and_later_wins() -> None:
    base = Style.of("a", color="red", margin="0")
    override = Style.of("b", "a", color="blue")

    merged = base.merge(override)

    assert merged.classes == ("a", "b")
    assert dict(merged.css) == {"color": "blue", "margin": "0"}
    assert dict(base.css)["color"] == "red"


def test_styled_returns_new_node() -> None:
    link = Link("/blog/", "Blog")

    styled = link.styled(Style.of("nav-link"))

    assert styled.style.classes == ("nav-link",)
    assert link.style == Style()
    assert styled.children == link.children


def test_link_attributes_are_quoted() -> None:
    html = render_node(Link('/search?q="x"', "Find"))

    assert html == '<a href="/search?q=&quot;x&quot;">Find</a>'


def test_paragraph_mixes_text_and_emphasis() -> None:
    node = Paragraph([Text("Cellarpoint, Vancouver, "), Emphasis("2019")])

    assert render_node(node) == "<p>Cellarpoint, Vancouver, <em>2019</em></p>"


def test_list_and_grid_wrap_children() -> None:
    assert render_node(ListNode([["one"], [Link("/2/", "two")]])) == (
        '<ul><li>one</li><li><a href="/2/">two</a></li></ul>'
    )
    assert render_node(Grid(["a", "b"], width=6)) == (
        '<div class="row"><div class="col-md-6">a</div><div class="col-md-6">b</div></div>'
    )


def test_card_renders_optional_sections_in_order() -> None:
    html = render_node(
        Card(body="Body", header="Head", footer="Foot", image="/img.png", image_alt="pic")
    )

    assert html.startswith('<div class="card"><img class="card-img-top" src="/img.png" alt="pic">')
    assert html.index("card-header") < html.index("card-body") < html.index("card-footer")
    assert render_node(Card(body="Only")) == (
        '<div class="card"><div class="card-body">Only</div></div>'
    )


def test_spacer_and_group() -> None:
    assert render_node(Spacer(54)) == '<div class="spacer" style="height: 54px"></div>'
    assert render_node(Group("x", tag="footer")) == "<footer>x</footer>"
    with pytest.raises(ValueError):
        Group("x", tag="script")


def test_navbar_links_get_nav_classes() -> None:
    html = render_node(NavBar(brand="Lyle", brand_href="/", links=(Link("/blog/", "Blog"),)))

    assert '<a class="navbar-brand" href="/">Lyle</a>' in html
    assert '<li class="nav-item"><a href="/blog/" class="nav-link">Blog</a></li>' in html


def test_image_alt_is_escaped() -> None:
    assert render_node(Image("/a.png", alt='"quoted"')) == (
        '<img src="/a.png" alt="&quot;quoted&quot;">'
    )


def test_invalid_nodes_are_rejected() -> None:
    @dataclass(frozen=True)
    class Unknown(Node):
        pass

    with pytest.raises(RenderError):
        render_node(Unknown())
    with pytest.raises(ValueError):
        Heading(7, "too deep")
    with pytest.raises(TypeError):
        Paragraph([42])


def test_render_nodes_concatenates() -> None:
    assert render_nodes([Text("a"), Text("b")]) == "ab"
