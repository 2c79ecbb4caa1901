"""Exception types raised outside the snapshot engine."""

from __future__ import annotations


class DomsnapError(Exception):
    """Base class for all domsnap errors."""


class CaptureError(DomsnapError):
    """Raised when a subtree cannot be captured from a live page."""

    def __init__(
        self, message: str, selector: str | None = None, url: str | None = None
    ):
        self.selector = selector
        self.url = url
        super().__init__(message)


class StylesheetError(DomsnapError):
    """Raised when emitted CSS cannot be parsed back into rules."""

    def __init__(self, message: str, rule_index: int | None = None):
        self.rule_index = rule_index
        super().__init__(message)


class SnapshotFileError(DomsnapError):
    """Raised when a saved snapshot file is unreadable or malformed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class RelayError(DomsnapError):
    """Raised by a clipboard writer that failed to copy text."""
