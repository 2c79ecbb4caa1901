"""Rebuild a captured page subtree as an in-memory element tree.

The page script (see :mod:`domsnap.browser.capture`) returns::

    {
        "root": {
            "tag": "div", "ns": "http://www.w3.org/1999/xhtml",
            "attrs": [["id", "main"], ...],
            "style": [["display", "block"], ...],
            "before": [["content", "\\"*\\""], ...] | null,
            "after": null,
            "children": [{"text": "Hello"}, {"tag": "span", ...}]
        },
        "ancestors": [{"tag": "body", "ns": "...", "background": "rgb(...)"}, ...]
    }

``ancestors`` runs from the nearest parent outward and only carries the
background color, which is all the background resolver reads.
"""

from __future__ import annotations

from typing import Any

from domsnap.errors import CaptureError
from domsnap.model.node import HTML_NS, Element, StyleMap, Text


def _style(pairs: list[list[str]] | None) -> StyleMap | None:
    if pairs is None:
        return None
    return StyleMap({str(name): str(value) for name, value in pairs})


def _element(data: dict[str, Any]) -> Element:
    if not data.get("tag"):
        raise CaptureError(f"Captured node has no tag: {sorted(data)}")
    styles: dict[str | None, StyleMap] = {}
    for key, pseudo in (("style", None), ("before", "before"), ("after", "after")):
        style = _style(data.get(key))
        if style is not None:
            styles[pseudo] = style
    return Element(
        tag=data["tag"],
        attributes={str(n): str(v) for n, v in data.get("attrs", [])},
        namespace=data.get("ns") or HTML_NS,
        styles=styles,
    )


def build_tree(payload: dict[str, Any]) -> Element:
    """Turn a capture payload into an :class:`Element` tree with parent links."""
    if not isinstance(payload, dict) or not isinstance(payload.get("root"), dict):
        raise CaptureError("Capture payload is missing its 'root' node")

    root = _element(payload["root"])
    stack: list[tuple[dict[str, Any], Element]] = [(payload["root"], root)]
    while stack:
        data, element = stack.pop()
        for child in data.get("children", []):
            if "text" in child:
                element.append(Text(str(child["text"])))
                continue
            child_element = _element(child)
            element.append(child_element)
            stack.append((child, child_element))

    node = root
    for ancestor in payload.get("ancestors", []):
        parent = Element(
            tag=ancestor.get("tag") or "div",
            namespace=ancestor.get("ns") or HTML_NS,
            styles={None: StyleMap({"background-color": ancestor.get("background", "")})},
        )
        parent.append(node)
        node = parent
    return root
