"""Element serialization: the snapshot pipeline packaged as ``{html, css}``."""

from __future__ import annotations

import json
import logging
from html import escape
from pathlib import Path

from domsnap.config import SnapshotConfig
from domsnap.engine import snapshot_element
from domsnap.errors import SnapshotFileError
from domsnap.model.node import SourceNode
from domsnap.model.snapshot import SerdeMode
from domsnap.serializer import to_html
from domsnap.transforms import apply_transforms

logger = logging.getLogger("domsnap")

NO_ELEMENT_RESULT = {"html": "<div><b>Oops!</b> No element received</div>", "css": ""}
UNRECOGNIZED_MODE_RESULT = {"html": "<div>Unrecognized mode</div>", "css": ""}


def serialize_element(
    element: SourceNode | None,
    mode: SerdeMode = SerdeMode.INLINE_STYLES,
    config: SnapshotConfig | None = None,
) -> str:
    """Serialize *element* and its subtree into a JSON ``{html, css}`` string.

    Never raises for a missing element or an unsupported mode; those yield
    fixed placeholder results instead.
    """
    if element is None:
        logger.warning("No element received for serialization")
        return json.dumps(NO_ELEMENT_RESULT, ensure_ascii=False)

    result = dict(UNRECOGNIZED_MODE_RESULT)
    if mode is SerdeMode.INLINE_STYLES:
        snapshot = snapshot_element(element, config)
        clone = apply_transforms(snapshot.element, element)
        result = {"html": to_html(clone), "css": snapshot.css}
    else:
        logger.warning("Unrecognized serialization mode: %r", mode)
    return json.dumps(result, ensure_ascii=False)


def hydrate(html: str, css: str, title: str = "domsnap preview") -> str:
    """Bundle a snapshot into a standalone HTML document."""
    safe_css = css.replace("</style", "<\\/style")
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>\n{safe_css}\n</style>\n"
        "</head>\n"
        "<body>\n"
        f"{html}\n"
        "</body>\n"
        "</html>\n"
    )


def load_snapshot(path: str | Path) -> dict[str, str]:
    """Read a saved ``{html, css}`` snapshot file."""
    snapshot_path = Path(path)
    try:
        data = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SnapshotFileError(
            f"Cannot read snapshot {snapshot_path.name}: {exc}", path=str(snapshot_path)
        ) from exc
    if (
        not isinstance(data, dict)
        or not isinstance(data.get("html"), str)
        or not isinstance(data.get("css"), str)
    ):
        raise SnapshotFileError(
            f"Snapshot {snapshot_path.name} must hold string 'html' and 'css' fields",
            path=str(snapshot_path),
        )
    return {"html": data["html"], "css": data["css"]}
