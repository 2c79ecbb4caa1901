"""End-to-end tests for snapshot_element."""

from domsnap import SnapshotConfig, snapshot_element
from domsnap.engine.extractor import declarations_of
from domsnap.engine.pseudo import is_visible_pseudo
from domsnap.model import Element, StyleMap

from tests.factories import el, none_pseudo, star_pseudo, three_siblings


def _mixed_tree() -> Element:
    return el(
        "article",
        el("h2", "Title", style={"display": "block", "font-weight": "700"}),
        el(
            "ul",
            el("li", "a", style={"display": "list-item", "color": "red"}, before=star_pseudo()),
            el("li", "b", style={"display": "list-item", "color": "red"}, after=none_pseudo()),
            el("li", "c", style={"display": "list-item", "--x": "1"}, after=star_pseudo()),
            style={"display": "block", "margin": "0px"},
        ),
        el("p", el("em", "x", style={"font-style": "italic"}), style={"display": "block"}),
        style={"display": "block", "font-weight": "400"},
    )


def _expected_declarations(source: Element) -> dict[tuple[int, str | None], set[str]]:
    expected: dict[tuple[int, str | None], set[str]] = {}
    for index, node in enumerate(source.iter()):
        expected[(index, None)] = set(declarations_of(node.computed_style()))
        for pseudo in ("before", "after"):
            style = node.computed_style(pseudo)
            if is_visible_pseudo(style):
                expected[(index, pseudo)] = set(declarations_of(style))
    return expected


def _resolved_declarations(result) -> dict[tuple[int, str | None], set[str]]:
    resolved: dict[tuple[int, str | None], set[str]] = {}
    for index, node in enumerate(result.element.iter()):
        classes = set(node.class_list)
        for pseudo in (None, "before", "after"):
            decls: set[str] = set()
            matched = False
            for group in result.rules:
                for selector in group.rule.selectors:
                    if selector.pseudo == pseudo and selector.class_name in classes:
                        decls.update(group.declarations)
                        matched = True
            if pseudo is None or matched:
                resolved[(index, pseudo)] = decls
    return resolved


# ---------------------------------------------------------------------------
# Worked examples
# ---------------------------------------------------------------------------


class TestThreeSiblings:
    def test_classes(self):
        result = snapshot_element(three_siblings())
        assert result.classes == ["ds0", "ds1", "ds2"]

    def test_css(self):
        result = snapshot_element(three_siblings())
        assert result.css == (
            ".ds0 { display:block; }\n"
            ".ds1 { color:red; }\n"
            ".ds2 { color:blue; }"
        )

    def test_clone_classes(self):
        result = snapshot_element(three_siblings())
        assert result.element.class_list == []
        assert [c.attributes["class"] for c in result.element.element_children] == [
            "ds0 ds1",
            "ds0 ds1",
            "ds0 ds2",
        ]

    def test_source_unchanged(self):
        source = three_siblings()
        snapshot_element(source)
        assert [c.attributes.get("class") for c in source.element_children] == [
            "item",
            None,
            "item",
        ]


class TestPseudoGate:
    def test_only_visible_pseudo_emitted(self):
        source = el("p", style={"display": "block"}, before=star_pseudo(), after=none_pseudo())
        result = snapshot_element(source)
        assert result.css == (
            ".ds0 { display:block; }\n"
            '.ds1-p0::before { content:"★"; display:inline; visibility:visible; '
            "width:auto; height:auto; font-size:16px; color:gold; }"
        )
        assert result.element.class_list == ["ds0", "ds1-p0"]

    def test_no_after_selector(self):
        source = el("p", style={"display": "block"}, before=star_pseudo(), after=none_pseudo())
        result = snapshot_element(source)
        assert "::after" not in result.css


class TestEdgeCases:
    def test_no_styles_anywhere(self):
        result = snapshot_element(el("div", el("span", "hi")))
        assert result.classes == []
        assert result.css == ""
        assert result.element.text_content == "hi"

    def test_single_element(self):
        result = snapshot_element(el("div", style={"color": "red", "display": "block"}))
        assert result.css == ".ds0 { color:red; display:block; }"
        assert result.element.class_list == ["ds0"]

    def test_custom_prefix(self):
        config = SnapshotConfig(class_prefix="snap", anchor_suffix="-a")
        source = el("p", style={"display": "block"}, before=star_pseudo())
        result = snapshot_element(source, config)
        assert result.classes == ["snap0", "snap1"]
        assert result.element.class_list == ["snap0", "snap1-a0"]

    def test_custom_properties_never_emitted(self):
        result = snapshot_element(_mixed_tree())
        assert "--x" not in result.css


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    def test_partition(self):
        source = _mixed_tree()
        result = snapshot_element(source)
        emitted = [d for g in result.rules for d in g.declarations]
        assert len(emitted) == len(set(emitted))
        every = set().union(*_expected_declarations(source).values())
        assert set(emitted) == every

    def test_class_membership(self):
        source = _mixed_tree()
        result = snapshot_element(source)
        assert _resolved_declarations(result) == _expected_declarations(source)

    def test_class_names_unique(self):
        result = snapshot_element(_mixed_tree())
        assert len(result.classes) == len(set(result.classes))

    def test_deterministic(self):
        first = snapshot_element(_mixed_tree())
        second = snapshot_element(_mixed_tree())
        assert first.classes == second.classes
        assert first.css == second.css
        assert [n.attributes for n in first.element.iter()] == [
            n.attributes for n in second.element.iter()
        ]

    def test_counter_is_per_invocation(self):
        snapshot_element(three_siblings())
        assert snapshot_element(three_siblings()).classes[0] == "ds0"

    def test_deep_tree(self):
        root = Element(tag="div", styles={None: StyleMap({"display": "block"})})
        node = root
        for _ in range(5000):
            node = node.append(Element(tag="div", styles={None: StyleMap({"display": "block"})}))
        result = snapshot_element(root)
        assert result.css == ".ds0 { display:block; }"
        assert all(n.class_list == ["ds0"] for n in result.element.iter())
