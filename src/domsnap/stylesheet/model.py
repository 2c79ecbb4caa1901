"""Stylesheet model: Selector, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Selector:
    """A class selector, optionally qualified by a pseudo-element.

    ``Selector("ds0")`` renders as ``.ds0``;
    ``Selector("ds0-p", "before")`` renders as ``.ds0-p::before``.
    """

    class_name: str
    pseudo: str | None = None

    def __str__(self) -> str:
        if self.pseudo is None:
            return f".{self.class_name}"
        return f".{self.class_name}::{self.pseudo}"


@dataclass(frozen=True)
class StyleRule:
    """One emitted rule: a selector list sharing a declaration body."""

    selectors: tuple[Selector, ...]
    declarations: tuple[str, ...]  # "property:value;"

    @property
    def selector_text(self) -> str:
        return ", ".join(str(s) for s in self.selectors)

    @property
    def properties(self) -> dict[str, str]:
        props: dict[str, str] = {}
        for decl in self.declarations:
            name, _, value = decl.partition(":")
            props[name] = value.removesuffix(";")
        return props

    def render(self) -> str:
        return f"{self.selector_text} {{ {' '.join(self.declarations)} }}"


@dataclass(frozen=True)
class Stylesheet:
    """An ordered collection of emitted rules."""

    rules: list[StyleRule]

    def render(self) -> str:
        return "\n".join(rule.render() for rule in self.rules)

