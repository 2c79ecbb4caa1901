"""Attribute filter: keep only attributes that affect rendering or accessibility."""

from __future__ import annotations

import logging

from domsnap.model.node import MATHML_NS, SVG_NS, Element, SourceNode
from domsnap.transforms.allowlists import AllowLists, default_allowlists

logger = logging.getLogger("domsnap.transforms")

_MEDIA_TAGS = frozenset({"video", "audio"})


def is_allowed(
    name: str,
    element: Element,
    allowlists: AllowLists,
    in_svg: bool = False,
    in_math: bool = False,
) -> bool:
    """Decide whether attribute *name* survives on *element*.

    Matching is case-insensitive; namespaced names such as ``xlink:href``
    are matched by their full lower-cased name.
    """
    lowered = name.lower()
    if lowered in allowlists.base:
        return True
    if any(lowered.startswith(prefix) for prefix in allowlists.base_prefixes):
        return True
    if in_svg and lowered in allowlists.svg:
        return True
    tag = element.tag.lower()
    if tag == "canvas" and lowered in allowlists.canvas:
        return True
    if tag in _MEDIA_TAGS and lowered in allowlists.media_elements:
        return True
    if in_math and lowered in allowlists.mathml:
        return True
    return False


def filter_attributes(root: Element, allowlists: AllowLists | None = None) -> int:
    """Strip disallowed attributes from *root* and its descendants.

    Returns the number of attributes removed.
    """
    lists = allowlists or default_allowlists()
    removed = 0
    stack: list[tuple[Element, bool, bool]] = [(root, False, False)]
    while stack:
        element, parent_svg, parent_math = stack.pop()
        tag = element.tag.lower()
        in_svg = parent_svg or element.namespace == SVG_NS or tag == "svg"
        in_math = parent_math or element.namespace == MATHML_NS or tag == "math"
        doomed = [
            name
            for name in element.attributes
            if not is_allowed(name, element, lists, in_svg=in_svg, in_math=in_math)
        ]
        for name in doomed:
            del element.attributes[name]
        removed += len(doomed)
        stack.extend((child, in_svg, in_math) for child in element.element_children)
    return removed


class AttributeFilterTransform:
    """Remove attributes that neither render nor carry accessibility meaning."""

    def __init__(self, allowlists: AllowLists | None = None) -> None:
        self._allowlists = allowlists

    def apply(self, clone: Element, source: SourceNode) -> Element:
        removed = filter_attributes(clone, self._allowlists)
        logger.debug("Attribute filter removed %d attribute(s)", removed)
        return clone
