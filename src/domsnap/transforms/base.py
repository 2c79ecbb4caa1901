"""Base protocol for clone transforms."""

from __future__ import annotations

from typing import Protocol

from domsnap.model.node import Element, SourceNode


class Transform(Protocol):
    """A clone-to-clone fixup step; *source* is the original, attached root."""

    def apply(self, clone: Element, source: SourceNode) -> Element: ...
