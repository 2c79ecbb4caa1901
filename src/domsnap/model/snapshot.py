"""Snapshot result types: serialization modes, rule groups and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from domsnap.model.node import Element
from domsnap.model.target import TargetId
from domsnap.stylesheet.model import StyleRule, Stylesheet


class SerdeMode(Enum):
    """How an element is serialized.  Only ``INLINE_STYLES`` is implemented."""

    INLINE_STYLES = 0
    PARSE_CSS = 1


@dataclass(frozen=True)
class RuleGroup:
    """Declarations shared by exactly the same set of targets.

    Attributes:
        class_name: Generated class for this group.
        targets: The style signature, in discovery order.
        rule: The emitted rule; its selectors resolve every member target.
    """

    class_name: str
    targets: tuple[TargetId, ...]
    rule: StyleRule

    @property
    def signature(self) -> str:
        return ",".join(str(t) for t in self.targets)

    @property
    def declarations(self) -> tuple[str, ...]:
        return self.rule.declarations


@dataclass
class SnapshotResult:
    """Output of one snapshot invocation."""

    classes: list[str]
    rules: list[RuleGroup]
    element: Element
    anchors: dict[int, str] = field(default_factory=dict)

    @property
    def stylesheet(self) -> Stylesheet:
        return Stylesheet(rules=[g.rule for g in self.rules])

    @property
    def css(self) -> str:
        return self.stylesheet.render()
