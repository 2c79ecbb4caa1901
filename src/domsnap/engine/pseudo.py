"""Pseudo-element resolver: which ``::before``/``::after`` are worth a rule."""

from __future__ import annotations

import re

from domsnap.model.node import ComputedStyle

_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")
_QUOTES = "\"'"


def _length(raw: str) -> float:
    """Leading numeric part of a computed length; ``auto`` and friends are 0."""
    match = _NUMBER_RE.match(raw)
    return float(match.group(1)) if match else 0.0


def content_text(content: str) -> str:
    """Strip the surrounding quote characters from a ``content`` value."""
    return content.strip().strip(_QUOTES)


def is_visible_pseudo(style: ComputedStyle | None) -> bool:
    """Return True if a pseudo-element's computed style renders anything.

    ``content`` must resolve to something, the box must not be hidden, and
    it must have some extent: a width, a height, a font size or actual text.
    """
    if style is None:
        return False
    content = style.get("content").strip()
    if content in ("", "none", "normal"):
        return False
    if style.get("display").strip() == "none":
        return False
    if style.get("visibility").strip() == "hidden":
        return False
    return (
        _length(style.get("width")) > 0
        or _length(style.get("height")) > 0
        or _length(style.get("font-size")) > 0
        or bool(content_text(content))
    )
