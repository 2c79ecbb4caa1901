"""Snapshot entry point: clone, capture, partition."""

from __future__ import annotations

import logging

from domsnap.config import SnapshotConfig
from domsnap.engine.cloner import clone_tree
from domsnap.engine.context import SnapshotContext
from domsnap.engine.extractor import extract_styles
from domsnap.engine.grouping import partition
from domsnap.model.node import SourceNode
from domsnap.model.snapshot import SnapshotResult

logger = logging.getLogger("domsnap.engine")


def snapshot_element(
    element: SourceNode, config: SnapshotConfig | None = None
) -> SnapshotResult:
    """Clone *element* and bake its computed style into generated classes.

    The returned clone has no original classes, one generated class per rule
    group it belongs to, and an anchor class where it hosts a visible
    pseudo-element.  Attributes are untouched here; see
    :func:`domsnap.transforms.apply_transforms`.
    """
    context = SnapshotContext(config=config or SnapshotConfig())
    clone, visits = clone_tree(element, context)
    extract_styles(visits, context)
    groups = partition(context)
    logger.info(
        "Snapshot of <%s>: %d element(s), %d target(s), %d declaration(s), %d rule(s)",
        element.tag,
        len(context.nodes),
        len(context.targets),
        len(context.declarations),
        len(groups),
    )
    return SnapshotResult(
        classes=[g.class_name for g in groups],
        rules=groups,
        element=clone,
        anchors=dict(context.anchors),
    )
