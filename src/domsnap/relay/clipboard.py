"""Clipboard writers."""

from __future__ import annotations

import platform
import shutil
import subprocess
from typing import Protocol

from domsnap.errors import RelayError

# Tried in order; the first command found on PATH wins.
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardWriter(Protocol):
    def write(self, text: str) -> None: ...


def find_clipboard_command() -> tuple[str, ...] | None:
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


class SubprocessClipboard:
    """Copy by piping text into the platform's clipboard utility."""

    def __init__(self, command: tuple[str, ...] | None = None, timeout: float = 5.0):
        self.command = command
        self.timeout = timeout

    def write(self, text: str) -> None:
        command = self.command or find_clipboard_command()
        if command is None:
            raise RelayError(f"No clipboard utility found on {platform.system()}")
        try:
            subprocess.run(
                list(command),
                input=text.encode("utf-8"),
                check=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise RelayError(f"{command[0]} failed: {exc}") from exc
