from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from domsnap.relay.messages import COPY_TO_CLIPBOARD
from domsnap.web.routes.preview import hydrated_snapshot

api_bp = Blueprint("api", __name__)


@api_bp.route("/snapshot")
def snapshot():
    """The raw ``{html, css}`` pair."""
    return jsonify(current_app.extensions["snapshot"])


@api_bp.route("/copy", methods=["POST"])
def copy():
    """Relay a copy-to-clipboard request.

    Without a ``text`` field the hydrated snapshot document is copied.
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object required"}), 400

    message = {"action": data.get("action", COPY_TO_CLIPBOARD)}
    message["text"] = data["text"] if "text" in data else hydrated_snapshot()
    response = current_app.extensions["relay"].handle(message)
    if response is None:
        return jsonify({"error": f"unsupported action: {message['action']!r}"}), 400
    status = 200 if response["success"] else 500
    return jsonify(response), status
