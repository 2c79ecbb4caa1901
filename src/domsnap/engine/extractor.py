"""Style extractor: computed style -> normalized declarations."""

from __future__ import annotations

import logging

from domsnap.engine.cloner import Visit
from domsnap.engine.context import SnapshotContext
from domsnap.engine.pseudo import is_visible_pseudo
from domsnap.model.node import ComputedStyle

logger = logging.getLogger("domsnap.engine")


def declarations_of(style: ComputedStyle | None) -> list[str]:
    """Normalize *style* into ``property:value;`` strings.

    Custom properties (``--*``) are dropped: nothing in a detached fragment
    can reference them once values are computed.
    """
    if style is None:
        return []
    declarations: list[str] = []
    for prop, value in style.items():
        name = prop.strip().lower()
        if not name or name.startswith("--"):
            continue
        declarations.append(f"{name}:{value};")
    return declarations


def extract_styles(visits: list[Visit], context: SnapshotContext) -> None:
    """Record declarations for every element and its visible pseudo-elements."""
    for source, _clone, target in visits:
        context.record(target, declarations_of(source.computed_style()))
        for pseudo in context.config.pseudo_elements:
            style = source.computed_style(pseudo)
            if not is_visible_pseudo(style):
                continue
            logger.debug("Visible ::%s on target %s", pseudo, target)
            context.record(target.with_pseudo(pseudo), declarations_of(style))
