#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/adf.py
"""Source model for Atlassian Document Format (ADF) trees.

ADF documents arrive as parsed JSON: nested dicts with a ``type`` tag and
optional ``attrs``, ``content``, ``marks`` and ``text`` keys. This module
loads them into immutable ``AdfNode`` values, checking only the minimal
shape the converter relies on, and maps inline marks onto a closed set of
mark classes.

Marks with no mdast equivalent (underline, colors, annotations, block-level
alignment and similar) are dropped while loading. The text they decorate is
kept.

Examples
--------
    >>> node = load_document({"version": 1, "type": "doc", "content": []})
    >>> node.type
    'doc'

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Optional, Union

from adf2mdast.constants import ADF_DOC_TYPE, ADF_TEXT_TYPE, DEFAULT_MAX_NESTING_DEPTH, SubSupKind
from adf2mdast.exceptions import InvalidNodeError

logger = logging.getLogger(__name__)


# ============================================================================
# Marks
# ============================================================================


@dataclass(frozen=True)
class StrongMark:
    """Bold text."""

    type: ClassVar[str] = "strong"


@dataclass(frozen=True)
class EmMark:
    """Italic text."""

    type: ClassVar[str] = "em"


@dataclass(frozen=True)
class StrikeMark:
    """Struck-through text."""

    type: ClassVar[str] = "strike"


@dataclass(frozen=True)
class CodeMark:
    """Inline code."""

    type: ClassVar[str] = "code"


@dataclass(frozen=True)
class SubSupMark:
    """Subscript or superscript text.

    Parameters
    ----------
    kind : {"sub", "sup"}
        Which of the two the text is

    """

    type: ClassVar[str] = "subsup"
    kind: SubSupKind = "sub"


@dataclass(frozen=True)
class LinkMark:
    """Hyperlinked text.

    Parameters
    ----------
    href : str
        Link destination
    title : str or None, default = None
        Optional link title

    """

    type: ClassVar[str] = "link"
    href: str = ""
    title: Optional[str] = None


Mark = Union[StrongMark, EmMark, StrikeMark, CodeMark, SubSupMark, LinkMark]

_SIMPLE_MARKS: dict[str, Mark] = {
    "strong": StrongMark(),
    "em": EmMark(),
    "strike": StrikeMark(),
    "code": CodeMark(),
}


# ============================================================================
# Nodes
# ============================================================================


@dataclass(frozen=True)
class AdfNode:
    """Immutable ADF node.

    Parameters
    ----------
    type : str
        ADF type tag (e.g. ``"paragraph"``)
    attrs : Mapping, default = empty mapping
        Type-specific attributes, read-only
    content : tuple of AdfNode, default = ()
        Child nodes
    marks : tuple of Mark, default = ()
        Inline marks in source order (text nodes only)
    text : str or None, default = None
        Text content (text nodes only)

    """

    type: str
    attrs: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    content: tuple[AdfNode, ...] = ()
    marks: tuple[Mark, ...] = ()
    text: Optional[str] = None

    def attr(self, name: str, default: Any = None) -> Any:
        """Return an attribute value, or ``default`` when absent or null."""
        value = self.attrs.get(name)
        return default if value is None else value


def _load_mark(data: Any, path: str) -> Mark | None:
    """Load a single mark descriptor, returning None for unsupported marks."""
    if not isinstance(data, Mapping):
        raise InvalidNodeError("mark must be an object", path, data)
    mark_type = data.get("type")
    if not isinstance(mark_type, str):
        raise InvalidNodeError("mark is missing a string 'type'", path, data)

    attrs = data.get("attrs") or {}
    if not isinstance(attrs, Mapping):
        raise InvalidNodeError("mark 'attrs' must be an object", path, data)

    if mark_type in _SIMPLE_MARKS:
        return _SIMPLE_MARKS[mark_type]
    if mark_type == "subsup":
        kind = attrs.get("type")
        if kind not in ("sub", "sup"):
            raise InvalidNodeError(f"subsup mark has invalid type {kind!r}", path, data)
        return SubSupMark(kind=kind)
    if mark_type == "link":
        href = attrs.get("href")
        if not isinstance(href, str):
            raise InvalidNodeError("link mark is missing a string 'href'", path, data)
        title = attrs.get("title")
        return LinkMark(href=href, title=title if isinstance(title, str) else None)

    logger.debug("Dropping unsupported mark '%s' at %s", mark_type, path)
    return None


def _load_node(data: Any, path: str, depth: int, max_depth: int) -> AdfNode:
    if depth > max_depth:
        raise InvalidNodeError(f"document nesting exceeds max_nesting_depth={max_depth}", path)
    if not isinstance(data, Mapping):
        raise InvalidNodeError("node must be an object", path, data)

    node_type = data.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise InvalidNodeError("node is missing a string 'type'", path, data)

    attrs = data.get("attrs")
    if attrs is None:
        attrs = {}
    elif not isinstance(attrs, Mapping):
        raise InvalidNodeError("'attrs' must be an object", path, data)

    raw_content = data.get("content")
    text = data.get("text")
    if raw_content is not None and text is not None:
        raise InvalidNodeError("node has both 'content' and 'text'", path, data)

    marks: tuple[Mark, ...] = ()
    if node_type == ADF_TEXT_TYPE:
        if not isinstance(text, str):
            raise InvalidNodeError("text node is missing a string 'text'", path, data)
        raw_marks = data.get("marks") or []
        if not isinstance(raw_marks, list):
            raise InvalidNodeError("'marks' must be a list", path, data)
        loaded = (_load_mark(mark, f"{path}/marks/{i}") for i, mark in enumerate(raw_marks))
        marks = tuple(mark for mark in loaded if mark is not None)
    elif data.get("marks"):
        # Block marks (alignment, indentation, breakout...) have no mdast equivalent
        logger.debug("Ignoring marks on '%s' node at %s", node_type, path)

    content: tuple[AdfNode, ...] = ()
    if raw_content is not None:
        if not isinstance(raw_content, list):
            raise InvalidNodeError("'content' must be a list", path, data)
        content = tuple(
            _load_node(child, f"{path}/content/{i}", depth + 1, max_depth) for i, child in enumerate(raw_content)
        )

    return AdfNode(
        type=node_type,
        attrs=MappingProxyType(dict(attrs)),
        content=content,
        marks=marks,
        text=text if node_type == ADF_TEXT_TYPE else None,
    )


def load_node(data: Any, max_depth: int = DEFAULT_MAX_NESTING_DEPTH, path: str = "") -> AdfNode:
    """Load any ADF node (a fragment or a whole document) from parsed JSON.

    Parameters
    ----------
    data : Any
        Parsed JSON value, expected to be a mapping
    max_depth : int, default = 128
        Maximum nesting depth accepted below this node
    path : str, default = ""
        Location prefix used in error messages

    Returns
    -------
    AdfNode
        The loaded node

    Raises
    ------
    InvalidNodeError
        If the node or any descendant has an invalid shape

    """
    return _load_node(data, path, 0, max_depth)


def load_document(data: Any, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> AdfNode:
    """Load an ADF document root.

    Parameters
    ----------
    data : Any
        Parsed JSON value of the form ``{"version": 1, "type": "doc", "content": [...]}``
    max_depth : int, default = 128
        Maximum nesting depth of the document

    Returns
    -------
    AdfNode
        The document node

    Raises
    ------
    InvalidNodeError
        If the value is not a ``doc`` node or any descendant has an invalid shape

    """
    node = _load_node(data, "", 0, max_depth)
    if node.type != ADF_DOC_TYPE:
        raise InvalidNodeError(f"document root must have type 'doc', got '{node.type}'", "/", data)
    return node


def check_depth(node: AdfNode, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> None:
    """Check that an already-built node tree is no deeper than ``max_depth``.

    The walk is iterative so arbitrarily deep trees are rejected without
    exhausting the interpreter stack.

    Raises
    ------
    InvalidNodeError
        If any node lies deeper than ``max_depth`` below ``node``

    """
    stack: list[tuple[AdfNode, str, int]] = [(node, "", 0)]
    while stack:
        current, path, depth = stack.pop()
        if depth > max_depth:
            raise InvalidNodeError(f"document nesting exceeds max_nesting_depth={max_depth}", path)
        stack.extend((child, f"{path}/content/{i}", depth + 1) for i, child in enumerate(current.content))


__all__ = [
    "AdfNode",
    "CodeMark",
    "EmMark",
    "LinkMark",
    "Mark",
    "StrikeMark",
    "StrongMark",
    "SubSupMark",
    "check_depth",
    "load_document",
    "load_node",
]
