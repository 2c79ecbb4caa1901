"""Clone fixups applied after a snapshot, before serialization."""

from __future__ import annotations

from typing import Iterable

from domsnap.model.node import Element, SourceNode
from domsnap.transforms.attributes import AttributeFilterTransform
from domsnap.transforms.background import BackgroundTransform
from domsnap.transforms.base import Transform
from domsnap.transforms.urls import UrlNormalizationTransform

# Order matters: the filter must run before the background write adds ``style``.
BUILTIN_TRANSFORMS: list[Transform] = [
    AttributeFilterTransform(),
    BackgroundTransform(),
    UrlNormalizationTransform(),
]


def apply_transforms(
    clone: Element,
    source: SourceNode,
    custom_transforms: Iterable[Transform] | None = None,
) -> Element:
    """Run the built-in fixups, then any *custom_transforms*, over *clone*."""
    for transform in [*BUILTIN_TRANSFORMS, *(custom_transforms or ())]:
        clone = transform.apply(clone, source)
    return clone


__all__ = [
    "BUILTIN_TRANSFORMS",
    "AttributeFilterTransform",
    "BackgroundTransform",
    "Transform",
    "UrlNormalizationTransform",
    "apply_transforms",
]
