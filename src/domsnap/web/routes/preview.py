from __future__ import annotations

from flask import Blueprint, Response, current_app

from domsnap.serde import hydrate

preview_bp = Blueprint("preview", __name__)


def hydrated_snapshot() -> str:
    snapshot = current_app.extensions["snapshot"]
    title = current_app.extensions["preview_config"].title
    return hydrate(snapshot["html"], snapshot["css"], title=title)


@preview_bp.route("/")
def index():
    """The snapshot rendered as a standalone document."""
    return Response(hydrated_snapshot(), mimetype="text/html")
