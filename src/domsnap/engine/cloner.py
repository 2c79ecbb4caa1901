"""Tree cloner: structural duplication of a source subtree."""

from __future__ import annotations

from domsnap.engine.context import SnapshotContext
from domsnap.model.node import Element, SourceNode, Text
from domsnap.model.target import TargetId

Visit = tuple[SourceNode, Element, TargetId]


def _shallow_clone(node: SourceNode) -> Element:
    return Element(
        tag=node.tag,
        attributes={k: v for k, v in node.attributes.items() if k.lower() != "class"},
        namespace=node.namespace,
    )


def clone_tree(
    source: SourceNode, context: SnapshotContext
) -> tuple[Element, list[Visit]]:
    """Clone *source* into a detached tree, registering every element.

    Returns the clone root and the ``(source, clone, target)`` triples in
    pre-order.  Clones carry the source attributes minus ``class`` and no
    computed style.  Uses an explicit stack, so depth is not bounded by the
    interpreter's recursion limit.
    """
    visits: list[Visit] = []
    root = _shallow_clone(source)
    visits.append((source, root, context.register(root)))
    stack: list[tuple[SourceNode | Text, Element]] = [
        (child, root) for child in reversed(source.children)
    ]
    while stack:
        node, parent = stack.pop()
        if isinstance(node, Text):
            parent.append(Text(node.data))
            continue
        clone = parent.append(_shallow_clone(node))
        visits.append((node, clone, context.register(clone)))
        stack.extend((child, clone) for child in reversed(node.children))
    return root, visits
