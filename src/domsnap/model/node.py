"""Node model: the source-node protocol and an in-memory element/text tree.

Any tree that satisfies :class:`SourceNode` can be snapshotted.  The
:class:`Element` / :class:`Text` dataclasses are the tree the browser binding
builds, the tree tests build by hand, and the representation of every clone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Protocol, Sequence, Union

HTML_NS = "http://www.w3.org/1999/xhtml"
SVG_NS = "http://www.w3.org/2000/svg"
MATHML_NS = "http://www.w3.org/1998/Math/MathML"


class ComputedStyle(Protocol):
    """Read-only computed style of one element or pseudo-element."""

    def items(self) -> Iterable[tuple[str, str]]: ...

    def get(self, prop: str, default: str = "") -> str: ...


class SourceNode(Protocol):
    """An element of a still-attached tree, as seen by the snapshot engine."""

    tag: str
    namespace: str
    attributes: Mapping[str, str]
    children: Sequence[Union["SourceNode", "Text"]]
    parent: "SourceNode | None"

    def computed_style(self, pseudo: str | None = None) -> ComputedStyle | None: ...


@dataclass(frozen=True)
class StyleMap:
    """Ordered property -> value map satisfying :class:`ComputedStyle`."""

    values: dict[str, str] = field(default_factory=dict)

    def items(self) -> list[tuple[str, str]]:
        return list(self.values.items())

    def get(self, prop: str, default: str = "") -> str:
        return self.values.get(prop, default)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(eq=False)
class Text:
    """A text child; copied verbatim into clones."""

    data: str
    parent: Element | None = field(default=None, repr=False)


@dataclass(eq=False)
class Element:
    """A mutable element node.

    ``styles`` maps ``None`` (the element itself), ``"before"`` and ``"after"``
    to computed styles.  Clones are built without styles, so a clone reports
    no computed style, exactly like a detached DOM node.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element | Text] = field(default_factory=list)
    namespace: str = HTML_NS
    styles: dict[str | None, StyleMap] = field(default_factory=dict, repr=False)
    parent: Element | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("Element tag must be a non-empty string")
        for child in self.children:
            child.parent = self

    # --- tree ---------------------------------------------------------------

    def append(self, child: Element | Text) -> Element | Text:
        child.parent = self
        self.children.append(child)
        return child

    @property
    def element_children(self) -> list[Element]:
        return [c for c in self.children if isinstance(c, Element)]

    def iter(self) -> Iterator[Element]:
        """Yield this element and all descendant elements in document order."""
        stack: list[Element] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.element_children))

    @property
    def text_content(self) -> str:
        parts: list[str] = []
        stack: list[Element | Text] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Text):
                parts.append(node.data)
            else:
                stack.extend(reversed(node.children))
        return "".join(parts)

    # --- style --------------------------------------------------------------

    def computed_style(self, pseudo: str | None = None) -> StyleMap | None:
        return self.styles.get(pseudo)

    # --- attributes ---------------------------------------------------------

    @property
    def class_list(self) -> list[str]:
        return self.attributes.get("class", "").split()

    def add_class(self, name: str) -> None:
        classes = self.class_list
        if name not in classes:
            classes.append(name)
            self.attributes["class"] = " ".join(classes)
