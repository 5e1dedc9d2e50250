#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_adf_model.py
"""Unit tests for loading ADF JSON into AdfNode values."""

import pytest

from adf2mdast.adf import (
    AdfNode,
    CodeMark,
    EmMark,
    LinkMark,
    StrongMark,
    SubSupMark,
    load_document,
    load_node,
)
from adf2mdast.exceptions import InvalidNodeError, ValidationError


@pytest.mark.unit
class TestLoadNode:
    """Tests for load_node."""

    def test_load_text_node(self) -> None:
        node = load_node({"type": "text", "text": "hello"})

        assert node == AdfNode(type="text", text="hello")
        assert node.content == ()
        assert node.marks == ()

    def test_load_nested_content(self) -> None:
        node = load_node({"type": "paragraph", "content": [{"type": "text", "text": "a"}, {"type": "hardBreak"}]})

        assert [child.type for child in node.content] == ["text", "hardBreak"]

    def test_attrs_are_read_only(self) -> None:
        node = load_node({"type": "heading", "attrs": {"level": 2}})

        with pytest.raises(TypeError):
            node.attrs["level"] = 3  # type: ignore[index]

    def test_attr_defaults(self) -> None:
        node = load_node({"type": "codeBlock", "attrs": {"language": None}})

        assert node.attr("language") is None
        assert node.attr("language", "text") == "text"
        assert node.attr("missing", 7) == 7

    def test_null_attrs_and_content(self) -> None:
        node = load_node({"type": "paragraph", "attrs": None, "content": None})

        assert node.content == ()
        assert dict(node.attrs) == {}

    def test_source_is_not_mutated(self) -> None:
        source = {"type": "text", "text": "x", "marks": [{"type": "underline"}, {"type": "strong"}]}

        load_node(source)

        assert source == {"type": "text", "text": "x", "marks": [{"type": "underline"}, {"type": "strong"}]}

    def test_text_only_kept_on_text_nodes(self) -> None:
        node = load_node({"type": "emoji", "attrs": {"text": ":)"}})

        assert node.text is None


@pytest.mark.unit
class TestLoadMarks:
    """Tests for mark loading."""

    def test_supported_marks(self) -> None:
        node = load_node(
            {
                "type": "text",
                "text": "x",
                "marks": [
                    {"type": "strong"},
                    {"type": "em"},
                    {"type": "code"},
                    {"type": "subsup", "attrs": {"type": "sup"}},
                    {"type": "link", "attrs": {"href": "https://example.com", "title": "Example"}},
                ],
            }
        )

        assert node.marks == (
            StrongMark(),
            EmMark(),
            CodeMark(),
            SubSupMark(kind="sup"),
            LinkMark(href="https://example.com", title="Example"),
        )

    def test_unsupported_marks_are_dropped(self) -> None:
        node = load_node(
            {
                "type": "text",
                "text": "x",
                "marks": [
                    {"type": "underline"},
                    {"type": "strong"},
                    {"type": "textColor", "attrs": {"color": "#97a0af"}},
                    {"type": "annotation", "attrs": {"id": "a1", "annotationType": "inlineComment"}},
                ],
            }
        )

        assert node.marks == (StrongMark(),)

    def test_block_marks_are_ignored(self) -> None:
        node = load_node(
            {
                "type": "paragraph",
                "marks": [{"type": "alignment", "attrs": {"align": "center"}}],
                "content": [{"type": "text", "text": "centered"}],
            }
        )

        assert node.marks == ()
        assert node.content[0].text == "centered"

    def test_link_title_must_be_string(self) -> None:
        node = load_node({"type": "text", "text": "x", "marks": [{"type": "link", "attrs": {"href": "/a", "title": 3}}]})

        assert node.marks == (LinkMark(href="/a"),)

    @pytest.mark.parametrize(
        "mark,expected_path",
        [
            ("strong", "/marks/0"),
            ({"attrs": {}}, "/marks/0"),
            ({"type": "strong", "attrs": ["bold"]}, "/marks/0"),
            ({"type": "subsup", "attrs": {"type": "middle"}}, "/marks/0"),
            ({"type": "link", "attrs": {}}, "/marks/0"),
        ],
    )
    def test_malformed_marks(self, mark, expected_path: str) -> None:
        with pytest.raises(InvalidNodeError) as exc_info:
            load_node({"type": "text", "text": "x", "marks": [mark]})

        assert exc_info.value.node_path == expected_path

    def test_marks_must_be_a_list(self) -> None:
        with pytest.raises(InvalidNodeError, match="'marks' must be a list"):
            load_node({"type": "text", "text": "x", "marks": {"type": "strong"}})


@pytest.mark.unit
class TestInvalidShapes:
    """Tests for shape validation and error locations."""

    def test_node_must_be_object(self) -> None:
        with pytest.raises(InvalidNodeError) as exc_info:
            load_node(["paragraph"])

        assert exc_info.value.node_path == "/"
        assert str(exc_info.value) == "Invalid node shape at /: node must be an object"

    @pytest.mark.parametrize("data", [{}, {"type": 5}, {"type": ""}])
    def test_type_must_be_string(self, data) -> None:
        with pytest.raises(InvalidNodeError, match="missing a string 'type'"):
            load_node(data)

    def test_error_path_points_at_nested_node(self) -> None:
        data = {
            "type": "doc",
            "content": [
                {"type": "paragraph", "content": []},
                {"type": "paragraph", "content": [{"type": "text", "text": "ok"}, {"text": "no type"}]},
            ],
        }

        with pytest.raises(InvalidNodeError) as exc_info:
            load_document(data)

        assert exc_info.value.node_path == "/content/1/content/1"
        assert exc_info.value.parameter_value == {"text": "no type"}

    def test_content_and_text_are_exclusive(self) -> None:
        with pytest.raises(InvalidNodeError, match="both 'content' and 'text'"):
            load_node({"type": "text", "text": "x", "content": []})

    def test_text_node_requires_text(self) -> None:
        with pytest.raises(InvalidNodeError, match="missing a string 'text'"):
            load_node({"type": "text"})

    @pytest.mark.parametrize("data", [{"type": "panel", "attrs": "info"}, {"type": "panel", "content": "x"}])
    def test_attrs_and_content_types(self, data) -> None:
        with pytest.raises(InvalidNodeError):
            load_node(data)

    def test_invalid_node_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            load_node(None)

    def test_max_depth(self) -> None:
        data = {"type": "text", "text": "deep"}
        for _ in range(10):
            data = {"type": "blockquote", "content": [data]}

        load_node(data, max_depth=10)
        with pytest.raises(InvalidNodeError, match="max_nesting_depth=9"):
            load_node(data, max_depth=9)


@pytest.mark.unit
class TestLoadDocument:
    """Tests for load_document."""

    def test_load_document(self) -> None:
        node = load_document({"version": 1, "type": "doc", "content": [{"type": "rule"}]})

        assert node.type == "doc"
        assert node.content == (AdfNode(type="rule"),)

    def test_root_must_be_doc(self) -> None:
        with pytest.raises(InvalidNodeError, match="must have type 'doc'") as exc_info:
            load_document({"type": "paragraph", "content": []})

        assert exc_info.value.node_path == "/"
