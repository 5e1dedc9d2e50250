#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_mdast_serialization.py
"""Unit tests for mdast dictionary and JSON serialization."""

import json

import pytest

from adf2mdast.mdast import (
    Code,
    Heading,
    Html,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Text,
    ThematicBreak,
    dict_to_mdast,
    json_to_mdast,
    mdast_to_dict,
    mdast_to_json,
)


@pytest.mark.unit
class TestMdastToDict:
    """Tests for mdast_to_dict."""

    def test_text(self) -> None:
        assert mdast_to_dict(Text(value="Hello")) == {"type": "text", "value": "Hello"}

    def test_heading(self) -> None:
        result = mdast_to_dict(Heading(depth=3, children=[Text("Title")]))

        assert result == {"type": "heading", "depth": 3, "children": [{"type": "text", "value": "Title"}]}

    def test_void_node(self) -> None:
        assert mdast_to_dict(ThematicBreak()) == {"type": "thematicBreak"}

    def test_none_attributes_are_omitted(self) -> None:
        assert mdast_to_dict(Code(value="x = 1")) == {"type": "code", "value": "x = 1"}
        assert mdast_to_dict(Link(url="/a", children=[])) == {"type": "link", "url": "/a", "children": []}

    def test_list_attributes(self) -> None:
        tree = List(ordered=True, start=4, children=[ListItem(checked=True, children=[Paragraph()])])

        assert mdast_to_dict(tree) == {
            "type": "list",
            "ordered": True,
            "spread": False,
            "start": 4,
            "children": [
                {
                    "type": "listItem",
                    "spread": False,
                    "checked": True,
                    "children": [{"type": "paragraph", "children": []}],
                }
            ],
        }

    def test_unknown_node_class(self) -> None:
        class Custom(Node):
            type = "custom"

        with pytest.raises(ValueError, match="Custom"):
            mdast_to_dict(Custom())


@pytest.mark.unit
class TestDictToMdast:
    """Tests for dict_to_mdast."""

    def test_nested_tree(self) -> None:
        data = {
            "type": "root",
            "children": [
                {"type": "code", "lang": "python", "value": "pass"},
                {"type": "html", "value": "<!-- media: file abc -->"},
            ],
        }

        assert dict_to_mdast(data) == Root(
            children=(Code(value="pass", lang="python"), Html(value="<!-- media: file abc -->"))
        )

    def test_unknown_type_strict(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_mdast({"type": "footnoteReference"})

    def test_unknown_type_lenient(self, caplog: pytest.LogCaptureFixture) -> None:
        result = dict_to_mdast(
            {"type": "paragraph", "children": [{"type": "footnoteReference"}]},
            strict_mode=False,
        )

        assert result == Paragraph(children=(Text(""),))
        assert "footnoteReference" in caplog.text

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError):
            dict_to_mdast({"children": []})


@pytest.mark.unit
class TestJson:
    """Tests for the JSON helpers."""

    def test_unicode_is_not_escaped(self) -> None:
        payload = mdast_to_json(Text(value="日付 🗓"))

        assert "日付 🗓" in payload

    def test_indent(self) -> None:
        payload = mdast_to_json(Paragraph(children=[Text("x")]), indent=2)

        assert payload.startswith("{\n  ")

    def test_json_to_mdast(self) -> None:
        tree = Root(children=[Heading(depth=2, children=[Link(url="https://example.com", children=[Text("e")])])])

        assert json_to_mdast(mdast_to_json(tree)) == tree

    def test_json_to_mdast_requires_object(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON object"):
            json_to_mdast("[]")

    def test_json_to_mdast_malformed(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            json_to_mdast("{")
