"""Per-invocation snapshot state: counters, target arena and indices."""

from __future__ import annotations

from dataclasses import dataclass, field

from domsnap.config import SnapshotConfig
from domsnap.model.node import Element
from domsnap.model.target import TargetId


@dataclass
class SnapshotContext:
    """Everything one snapshot call owns.

    ``nodes`` is an arena indexed by ``TargetId.index``.  ``declarations``
    maps each declaration to the targets holding it; the inner dict is used
    as an insertion-ordered set, so every signature comes out in discovery
    order without sorting.
    """

    config: SnapshotConfig = field(default_factory=SnapshotConfig)
    nodes: list[Element] = field(default_factory=list)
    targets: list[TargetId] = field(default_factory=list)
    declarations: dict[str, dict[TargetId, None]] = field(default_factory=dict)
    anchors: dict[int, str] = field(default_factory=dict)
    _class_counter: int = 0

    def register(self, clone: Element) -> TargetId:
        """Assign the next element target id to *clone*."""
        target = TargetId(index=len(self.nodes))
        self.nodes.append(clone)
        return target

    def record(self, target: TargetId, declarations: list[str]) -> None:
        self.targets.append(target)
        for decl in declarations:
            self.declarations.setdefault(decl, {})[target] = None

    def node_for(self, target: TargetId) -> Element:
        return self.nodes[target.index]

    def next_class_name(self) -> str:
        name = f"{self.config.class_prefix}{self._class_counter}"
        self._class_counter += 1
        return name

    def anchor_for(self, target: TargetId, class_name: str) -> str:
        """Return the anchor class of *target*'s element, creating it once.

        The first rule group that needs an anchor on an element names it
        (``<class><suffix><element index>``); later pseudo targets on the same
        element reuse it.  Anchors are unique per element.
        """
        anchor = self.anchors.get(target.index)
        if anchor is None:
            anchor = f"{class_name}{self.config.anchor_suffix}{target.index}"
            self.anchors[target.index] = anchor
            self.node_for(target).add_class(anchor)
        return anchor
