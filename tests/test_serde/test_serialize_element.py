"""Tests for the {html, css} packaging and document hydration."""

import json

import pytest

from domsnap import SerdeMode, SnapshotConfig, hydrate, serialize_element
from domsnap.errors import SnapshotFileError
from domsnap.serde import NO_ELEMENT_RESULT, UNRECOGNIZED_MODE_RESULT, load_snapshot

from tests.factories import el, none_pseudo, star_pseudo, three_siblings


# ---------------------------------------------------------------------------
# serialize_element
# ---------------------------------------------------------------------------


class TestSerializeElement:
    def test_three_siblings(self):
        data = json.loads(serialize_element(three_siblings()))
        assert data == {
            "html": (
                '<section style="background-color: transparent;">'
                '<div class="ds0 ds1">Red</div>'
                '<div class="ds0 ds1">Also red</div>'
                '<div class="ds0 ds2">Blue</div>'
                "</section>"
            ),
            "css": ".ds0 { display:block; }\n.ds1 { color:red; }\n.ds2 { color:blue; }",
        }

    def test_pseudo_anchor_in_markup(self):
        source = el("p", "Hi", style={"display": "block"}, before=star_pseudo(), after=none_pseudo())
        data = json.loads(serialize_element(source))
        assert data["html"] == (
            '<p class="ds0 ds1-p0" style="background-color: transparent;">Hi</p>'
        )
        assert data["css"].startswith(".ds0 { display:block; }\n.ds1-p0::before {")

    def test_non_ascii_kept(self):
        source = el("p", style={}, before=star_pseudo())
        raw = serialize_element(source)
        assert "★" in raw

    def test_missing_element(self):
        assert json.loads(serialize_element(None)) == NO_ELEMENT_RESULT

    def test_unrecognized_mode(self):
        data = json.loads(serialize_element(three_siblings(), SerdeMode.PARSE_CSS))
        assert data == UNRECOGNIZED_MODE_RESULT

    def test_unrecognized_mode_leaves_source_alone(self):
        source = three_siblings()
        serialize_element(source, SerdeMode.PARSE_CSS)
        assert source.element_children[0].attributes == {"class": "item"}

    def test_source_never_mutated(self):
        source = el(
            "div",
            el("img", attrs={"src": "//cdn/x.png", "id": "hero"}, style={"width": "1px"}),
            attrs={"class": "card", "onclick": "go()"},
            style={"color": "red"},
        )
        serialize_element(source)
        assert source.attributes == {"class": "card", "onclick": "go()"}
        assert source.element_children[0].attributes == {"src": "//cdn/x.png", "id": "hero"}

    def test_form_action_rewritten(self):
        source = el("form", attrs={"action": "//site/post", "method": "post"}, style={})
        data = json.loads(serialize_element(source))
        assert data["html"] == (
            '<form action="https://site/post" method="post" '
            'style="background-color: transparent;"></form>'
        )

    def test_config_applied(self):
        data = json.loads(serialize_element(three_siblings(), config=SnapshotConfig(class_prefix="x")))
        assert data["css"].startswith(".x0 {")

    def test_background_from_ancestor(self):
        page = el("body", el("main", three_siblings()), style={"background-color": "rgb(9, 9, 9)"})
        section = page.element_children[0].element_children[0]
        data = json.loads(serialize_element(section))
        assert data["html"].startswith('<section style="background-color: rgb(9, 9, 9);">')

    def test_deterministic(self):
        assert serialize_element(three_siblings()) == serialize_element(three_siblings())


# ---------------------------------------------------------------------------
# hydrate
# ---------------------------------------------------------------------------


class TestHydrate:
    def test_document_shape(self):
        doc = hydrate("<p>x</p>", ".ds0 { color:red; }")
        assert doc.startswith("<!DOCTYPE html>\n<html>\n<head>\n")
        assert "<style>\n.ds0 { color:red; }\n</style>" in doc
        assert "<body>\n<p>x</p>\n</body>" in doc
        assert doc.endswith("</html>\n")

    def test_title_escaped(self):
        doc = hydrate("", "", title="<b>&</b>")
        assert "<title>&lt;b&gt;&amp;&lt;/b&gt;</title>" in doc

    def test_style_close_neutralized(self):
        doc = hydrate("", '.ds0 { content:"</style>"; }')
        assert doc.count("</style>") == 1


# ---------------------------------------------------------------------------
# load_snapshot
# ---------------------------------------------------------------------------


class TestLoadSnapshot:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "snap.json"
        path.write_text(serialize_element(three_siblings()), encoding="utf-8")
        data = load_snapshot(path)
        assert set(data) == {"html", "css"}
        assert data["css"].startswith(".ds0")

    def test_extra_keys_dropped(self, tmp_path):
        path = tmp_path / "snap.json"
        path.write_text('{"html": "<p></p>", "css": "", "meta": 1}')
        assert load_snapshot(str(path)) == {"html": "<p></p>", "css": ""}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotFileError) as exc_info:
            load_snapshot(tmp_path / "nope.json")
        assert exc_info.value.path.endswith("nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(SnapshotFileError, match="Cannot read snapshot"):
            load_snapshot(path)

    @pytest.mark.parametrize("body", ['[]', '{"html": "<p></p>"}', '{"html": 1, "css": ""}'])
    def test_wrong_shape(self, tmp_path, body):
        path = tmp_path / "snap.json"
        path.write_text(body)
        with pytest.raises(SnapshotFileError, match="must hold string"):
            load_snapshot(path)
