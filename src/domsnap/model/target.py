"""Target identifiers: an element, or one of its pseudo-elements."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TargetId:
    """Identity of one styled unit within a single snapshot invocation.

    ``index`` is the element's dense pre-order position; ``pseudo`` is
    ``None`` for the element itself.  The string form is ``"3"`` or
    ``"3::before"``.
    """

    index: int
    pseudo: str | None = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Target index must be non-negative, got: {self.index}")

    @property
    def is_pseudo(self) -> bool:
        return self.pseudo is not None

    def with_pseudo(self, pseudo: str) -> "TargetId":
        return TargetId(index=self.index, pseudo=pseudo)

    def __str__(self) -> str:
        if self.pseudo is None:
            return str(self.index)
        return f"{self.index}::{self.pseudo}"
