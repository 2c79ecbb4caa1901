from __future__ import annotations

from flask import Flask

from domsnap.config import PreviewConfig
from domsnap.relay import ClipboardWriter, SubprocessClipboard, clipboard_coordinator


def create_app(
    snapshot: dict[str, str],
    writer: ClipboardWriter | None = None,
    config: PreviewConfig | None = None,
) -> Flask:
    """Create the preview app for one ``{html, css}`` snapshot."""
    app = Flask(__name__)
    preview = config or PreviewConfig()

    app.extensions["snapshot"] = {"html": snapshot["html"], "css": snapshot["css"]}
    app.extensions["preview_config"] = preview
    app.extensions["relay"] = clipboard_coordinator(writer or SubprocessClipboard())

    # Register blueprints
    from domsnap.web.routes.api import api_bp
    from domsnap.web.routes.preview import preview_bp

    app.register_blueprint(preview_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
