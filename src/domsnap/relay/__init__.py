from domsnap.relay.clipboard import ClipboardWriter, SubprocessClipboard
from domsnap.relay.coordinator import (
    ClipboardCoordinator,
    ClipboardEndpoint,
    clipboard_coordinator,
)
from domsnap.relay.messages import CopyResponse, copy_request, perform_copy

__all__ = [
    "ClipboardCoordinator",
    "ClipboardEndpoint",
    "ClipboardWriter",
    "CopyResponse",
    "SubprocessClipboard",
    "clipboard_coordinator",
    "copy_request",
    "perform_copy",
]
