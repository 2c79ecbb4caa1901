from domsnap.engine.context import SnapshotContext
from domsnap.engine.snapshot import snapshot_element

__all__ = ["SnapshotContext", "snapshot_element"]
