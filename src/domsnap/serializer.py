"""Outer-markup serialization of element trees."""

from __future__ import annotations

from html import escape

from domsnap.model.node import HTML_NS, Element, Text

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
    "meta", "source", "track", "wbr",
})

# Elements whose text children are emitted verbatim.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


def _start_tag(element: Element) -> str:
    parts = [element.tag]
    for name, value in element.attributes.items():
        parts.append(f'{name}="{escape(value, quote=True)}"')
    return "<" + " ".join(parts) + ">"


def to_html(root: Element) -> str:
    """Serialize *root* the way a browser's ``outerHTML`` would.

    HTML void elements get no end tag; every other element, SVG included,
    is closed explicitly.
    """
    out: list[str] = []
    # Entries are nodes to open, or pre-rendered end tags.
    stack: list[Element | Text | str] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        if isinstance(item, Text):
            parent = item.parent
            if parent is not None and parent.tag.lower() in RAW_TEXT_ELEMENTS:
                out.append(item.data)
            else:
                out.append(escape(item.data, quote=False))
            continue
        out.append(_start_tag(item))
        if item.namespace == HTML_NS and item.tag.lower() in VOID_ELEMENTS:
            continue
        stack.append(f"</{item.tag}>")
        stack.extend(reversed(item.children))
    return "".join(out)
