from __future__ import annotations

import re
from dataclasses import dataclass

# CSS identifier start/continue characters, non-ASCII allowed.
_PREFIX_RE = re.compile(r"^-?(?:[_a-zA-Z]|[^\x00-\x7f])(?:[_a-zA-Z0-9-]|[^\x00-\x7f])*$")
_SUFFIX_RE = re.compile(r"^(?:[_a-zA-Z-]|[^\x00-\x7f])(?:[_a-zA-Z0-9-]|[^\x00-\x7f])*$")

PSEUDO_ELEMENTS = ("before", "after")


@dataclass(frozen=True)
class SnapshotConfig:
    """Knobs for one snapshot invocation.

    Generated classes are ``<class_prefix><counter>``; an element hosting a
    visible pseudo-element additionally wears ``<class><anchor_suffix><index>``.
    The suffix may not start with a digit, otherwise ``ds1`` + ``0`` would
    collide with ``ds10``.
    """

    class_prefix: str = "ds"
    anchor_suffix: str = "-p"
    pseudo_elements: tuple[str, ...] = PSEUDO_ELEMENTS

    def __post_init__(self) -> None:
        if not _PREFIX_RE.match(self.class_prefix):
            raise ValueError(f"Invalid class prefix: {self.class_prefix!r}")
        if not _SUFFIX_RE.match(self.anchor_suffix):
            raise ValueError(f"Invalid anchor suffix: {self.anchor_suffix!r}")
        unknown = set(self.pseudo_elements) - set(PSEUDO_ELEMENTS)
        if unknown:
            raise ValueError(f"Unsupported pseudo-elements: {sorted(unknown)}")


@dataclass(frozen=True)
class PreviewConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    title: str = "domsnap preview"
