"""Tree-building helpers shared by the test suite."""

from __future__ import annotations

from domsnap.model.node import HTML_NS, Element, StyleMap, Text


def el(
    tag: str,
    *children: Element | str,
    attrs: dict[str, str] | None = None,
    style: dict[str, str] | None = None,
    before: dict[str, str] | None = None,
    after: dict[str, str] | None = None,
    namespace: str = HTML_NS,
) -> Element:
    """Build an element; string children become text nodes."""
    styles: dict[str | None, StyleMap] = {}
    if style is not None:
        styles[None] = StyleMap(dict(style))
    if before is not None:
        styles["before"] = StyleMap(dict(before))
    if after is not None:
        styles["after"] = StyleMap(dict(after))
    return Element(
        tag=tag,
        attributes=dict(attrs or {}),
        children=[Text(c) if isinstance(c, str) else c for c in children],
        namespace=namespace,
        styles=styles,
    )


def three_siblings() -> Element:
    """A root with no style and three divs: red, red, blue."""
    return el(
        "section",
        el("div", "Red", attrs={"class": "item"}, style={"display": "block", "color": "red"}),
        el("div", "Also red", style={"display": "block", "color": "red"}),
        el("div", "Blue", attrs={"class": "item"}, style={"display": "block", "color": "blue"}),
        style={},
    )


def star_pseudo() -> dict[str, str]:
    return {
        "content": '"★"',
        "display": "inline",
        "visibility": "visible",
        "width": "auto",
        "height": "auto",
        "font-size": "16px",
        "color": "gold",
    }


def none_pseudo() -> dict[str, str]:
    return {
        "content": "none",
        "display": "inline",
        "visibility": "visible",
        "width": "auto",
        "height": "auto",
        "font-size": "16px",
    }
