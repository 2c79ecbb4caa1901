"""Background coordinator and clipboard endpoint for copy requests."""

from __future__ import annotations

import logging
from typing import Any, Callable

from domsnap.errors import RelayError
from domsnap.relay.clipboard import ClipboardWriter
from domsnap.relay.messages import (
    COPY_TO_CLIPBOARD,
    OFFSCREEN,
    PERFORM_COPY,
    CopyResponse,
    perform_copy,
)

logger = logging.getLogger("domsnap.relay")

Endpoint = Callable[[dict[str, Any]], Any]


class ClipboardEndpoint:
    """Handles ``perform-copy`` messages addressed to the clipboard document."""

    def __init__(self, writer: ClipboardWriter) -> None:
        self._writer = writer

    def handle(self, message: dict[str, Any]) -> dict[str, Any] | None:
        if message.get("target") != OFFSCREEN or message.get("action") != PERFORM_COPY:
            return None
        text = message.get("text")
        if not isinstance(text, str):
            logger.error("Clipboard endpoint received invalid text type")
            return CopyResponse.failure("Invalid text received by clipboard writer").to_dict()
        try:
            self._writer.write(text)
        except RelayError as exc:
            logger.error("Copy failed: %s", exc)
            return CopyResponse.failure(f"Error during copy: {exc}").to_dict()
        logger.debug("Copied %d chars", len(text))
        return CopyResponse.ok().to_dict()


class ClipboardCoordinator:
    """Routes ``copy-to-clipboard`` requests to a clipboard endpoint.

    Messages aimed at the endpoint itself and unknown actions are ignored
    (``None``); everything else gets exactly one response.
    """

    def __init__(self, endpoint: Endpoint) -> None:
        self._endpoint = endpoint

    def handle(self, message: dict[str, Any]) -> dict[str, Any] | None:
        if message.get("target") == OFFSCREEN:
            logger.debug("Ignoring message targeted to the clipboard endpoint")
            return None
        if message.get("action") != COPY_TO_CLIPBOARD:
            logger.debug("Message action not handled: %r", message.get("action"))
            return None

        text = message.get("text")
        if not isinstance(text, str):
            logger.error("Invalid text received")
            return CopyResponse.failure("Invalid text").to_dict()

        try:
            raw = self._endpoint(perform_copy(text))
        except RelayError as exc:
            logger.error("Error handling copy request: %s", exc)
            return CopyResponse.failure(f"Coordinator error: {exc}").to_dict()

        response = CopyResponse.from_dict(raw)
        if response is None:
            logger.error("Invalid response from clipboard writer: %r", raw)
            return CopyResponse.failure("Invalid response from clipboard writer").to_dict()
        return response.to_dict()


def clipboard_coordinator(writer: ClipboardWriter) -> ClipboardCoordinator:
    """Wire a coordinator to an endpoint backed by *writer*."""
    return ClipboardCoordinator(ClipboardEndpoint(writer).handle)
