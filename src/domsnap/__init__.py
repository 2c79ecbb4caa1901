"""domsnap: snapshot a live DOM subtree into a self-contained {html, css} pair."""

from domsnap.config import SnapshotConfig
from domsnap.engine import snapshot_element
from domsnap.model import Element, SerdeMode, SnapshotResult, StyleMap, Text
from domsnap.serde import hydrate, serialize_element

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Element",
    "SerdeMode",
    "SnapshotConfig",
    "SnapshotResult",
    "StyleMap",
    "Text",
    "hydrate",
    "serialize_element",
    "snapshot_element",
]
