"""Dedup/grouping engine: partition declarations by exact co-occurrence.

Each declaration's *signature* is the exact set of targets holding it.
Declarations with the same signature form one rule group, so every
declaration lands in exactly one rule and a node usually wears several
small shared classes instead of one large unique one.
"""

from __future__ import annotations

from domsnap.engine.context import SnapshotContext
from domsnap.model.snapshot import RuleGroup
from domsnap.model.target import TargetId
from domsnap.stylesheet.model import Selector, StyleRule


def signatures(context: SnapshotContext) -> dict[tuple[TargetId, ...], list[str]]:
    """Invert declaration -> targets into signature -> declarations.

    Both levels keep first-observed order.
    """
    grouped: dict[tuple[TargetId, ...], list[str]] = {}
    for declaration, targets in context.declarations.items():
        grouped.setdefault(tuple(targets), []).append(declaration)
    return grouped


def partition(context: SnapshotContext) -> list[RuleGroup]:
    """Emit one class and rule per signature and apply classes to clones."""
    groups: list[RuleGroup] = []
    for targets, declarations in signatures(context).items():
        class_name = context.next_class_name()
        selectors: list[Selector] = []
        for target in targets:
            if not target.is_pseudo:
                context.node_for(target).add_class(class_name)
                selector = Selector(class_name)
            else:
                anchor = context.anchor_for(target, class_name)
                selector = Selector(anchor, target.pseudo)
            if selector not in selectors:
                selectors.append(selector)
        rule = StyleRule(selectors=tuple(selectors), declarations=tuple(declarations))
        groups.append(RuleGroup(class_name=class_name, targets=targets, rule=rule))
    return groups
