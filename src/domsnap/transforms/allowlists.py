"""Attribute allow-lists, loaded from the packaged ``allowlists.json``."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

ALLOWLISTS_PATH = Path(__file__).parent / "allowlists.json"


def _flatten(section: list[str] | dict[str, list[str]]) -> frozenset[str]:
    if isinstance(section, dict):
        return frozenset(name.lower() for names in section.values() for name in names)
    return frozenset(name.lower() for name in section)


@dataclass(frozen=True)
class AllowLists:
    """Lower-cased attribute names kept by the attribute filter."""

    base: frozenset[str]
    base_prefixes: tuple[str, ...]
    svg: frozenset[str]
    canvas: frozenset[str]
    media_elements: frozenset[str]
    mathml: frozenset[str]

    @classmethod
    def from_dict(cls, data: dict) -> "AllowLists":
        return cls(
            base=_flatten(data["base"]),
            base_prefixes=tuple(p.lower() for p in data.get("base_prefixes", [])),
            svg=_flatten(data["svg"]),
            canvas=_flatten(data["canvas"]),
            media_elements=_flatten(data["media_elements"]),
            mathml=_flatten(data["mathml"]),
        )

    @classmethod
    def load(cls, path: Path = ALLOWLISTS_PATH) -> "AllowLists":
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))


@lru_cache(maxsize=1)
def default_allowlists() -> AllowLists:
    return AllowLists.load()
