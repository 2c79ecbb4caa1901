"""Background resolver: bake the inherited backdrop into the clone root."""

from __future__ import annotations

import logging
import re

from domsnap.model.node import Element, SourceNode

logger = logging.getLogger("domsnap.transforms")

TRANSPARENT = "transparent"

# rgba(r, g, b, 0) and rgb(r g b / 0) with an alpha of exactly zero.
_ZERO_ALPHA_RE = re.compile(
    r"""
    ^rgba?\(
    \s*[\d.]+%?\s*[,\s]\s*[\d.]+%?\s*[,\s]\s*[\d.]+%?\s*   # r, g, b
    [,/]\s*(?:0+(?:\.0*)?|\.0+)%?\s*                     # alpha == 0
    \)$
    """,
    re.VERBOSE | re.IGNORECASE,
)


def is_transparent(color: str | None) -> bool:
    value = (color or "").strip()
    if not value or value.lower() == TRANSPARENT:
        return True
    return bool(_ZERO_ALPHA_RE.match(value))


def resolve_background(source: SourceNode) -> str:
    """Return the nearest opaque ``background-color`` from *source* upward."""
    node: SourceNode | None = source
    while node is not None:
        style = node.computed_style()
        color = style.get("background-color") if style is not None else ""
        if not is_transparent(color):
            return color.strip()
        node = node.parent
    return TRANSPARENT


def _merge_style(existing: str, name: str, value: str) -> str:
    kept = [
        decl.strip()
        for decl in existing.split(";")
        if decl.strip() and decl.split(":", 1)[0].strip().lower() != name
    ]
    kept.append(f"{name}: {value}")
    return "; ".join(kept) + ";"


class BackgroundTransform:
    """Write the resolved backdrop as an inline style on the clone root."""

    def apply(self, clone: Element, source: SourceNode) -> Element:
        color = resolve_background(source)
        clone.attributes["style"] = _merge_style(
            clone.attributes.get("style", ""), "background-color", color
        )
        logger.debug("Clone root background set to %s", color)
        return clone
