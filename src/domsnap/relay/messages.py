"""Copy-to-clipboard message protocol.

An inspection surface sends ``{"action": "copy-to-clipboard", "text": ...}``
to the coordinator, which forwards ``{"target": "offscreen", "action":
"perform-copy", "text": ...}`` to the clipboard endpoint.  Every response is
``{"success": bool, "error": str | None}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

COPY_TO_CLIPBOARD = "copy-to-clipboard"
PERFORM_COPY = "perform-copy"
OFFSCREEN = "offscreen"


def copy_request(text: str) -> dict[str, Any]:
    return {"action": COPY_TO_CLIPBOARD, "text": text}


def perform_copy(text: str) -> dict[str, Any]:
    return {"target": OFFSCREEN, "action": PERFORM_COPY, "text": text}


@dataclass(frozen=True)
class CopyResponse:
    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "CopyResponse":
        return cls(success=True)

    @classmethod
    def failure(cls, error: str) -> "CopyResponse":
        return cls(success=False, error=error)

    @classmethod
    def from_dict(cls, data: Any) -> "CopyResponse | None":
        """Parse a response; ``None`` when it is not a well-formed response."""
        if not isinstance(data, dict) or not isinstance(data.get("success"), bool):
            return None
        error = data.get("error")
        return cls(success=data["success"], error=None if error is None else str(error))

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "error": self.error}
