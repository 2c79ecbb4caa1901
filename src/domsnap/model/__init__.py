"""domsnap model layer -- public type re-exports."""

from domsnap.model.node import (
    HTML_NS,
    MATHML_NS,
    SVG_NS,
    ComputedStyle,
    Element,
    SourceNode,
    StyleMap,
    Text,
)
from domsnap.model.snapshot import RuleGroup, SerdeMode, SnapshotResult
from domsnap.model.target import TargetId

__all__ = [
    # node
    "HTML_NS",
    "SVG_NS",
    "MATHML_NS",
    "ComputedStyle",
    "SourceNode",
    "StyleMap",
    "Element",
    "Text",
    # target
    "TargetId",
    # snapshot
    "SerdeMode",
    "RuleGroup",
    "SnapshotResult",
]
