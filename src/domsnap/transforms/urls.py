"""URL normalizer: protocol-relative resource URLs become explicit HTTPS."""

from __future__ import annotations

from domsnap.model.node import Element, SourceNode

URL_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "img": ("src",),
    "a": ("href",),
    "script": ("src",),
    "iframe": ("src",),
    "link": ("href",),
    "form": ("action",),
    "audio": ("src",),
    "video": ("src",),
}


def normalize_url(value: str) -> str:
    """``//host/path`` -> ``https://host/path``; everything else unchanged."""
    if value.startswith("//") and not value.startswith("///"):
        return "https:" + value
    return value


def normalize_urls(root: Element) -> int:
    """Rewrite protocol-relative URLs under *root*; returns the rewrite count."""
    rewritten = 0
    for element in root.iter():
        for attr in URL_ATTRIBUTES.get(element.tag.lower(), ()):
            value = element.attributes.get(attr)
            if value is None:
                continue
            fixed = normalize_url(value)
            if fixed != value:
                element.attributes[attr] = fixed
                rewritten += 1
    return rewritten


class UrlNormalizationTransform:
    """Make protocol-relative references resolvable outside the page."""

    def apply(self, clone: Element, source: SourceNode) -> Element:
        normalize_urls(clone)
        return clone
