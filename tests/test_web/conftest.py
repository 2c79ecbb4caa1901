from __future__ import annotations

import pytest

from domsnap.config import PreviewConfig
from domsnap.errors import RelayError
from domsnap.web.app import create_app


class RecordingClipboard:
    """Clipboard writer that keeps what it was asked to copy."""

    def __init__(self) -> None:
        self.written: list[str] = []
        self.fail_with: str | None = None

    def write(self, text: str) -> None:
        if self.fail_with:
            raise RelayError(self.fail_with)
        self.written.append(text)


SNAPSHOT = {
    "html": '<div class="ds0" style="background-color: transparent;">Hi</div>',
    "css": ".ds0 { color:red; }",
}


@pytest.fixture
def snapshot():
    return dict(SNAPSHOT)


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def app(clipboard):
    """Create a preview app for a small snapshot."""
    application = create_app(SNAPSHOT, writer=clipboard, config=PreviewConfig(title="Card"))
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
