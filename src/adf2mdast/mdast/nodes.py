#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/mdast/nodes.py
"""mdast node classes produced by the ADF converter.

This module defines the target tree: a markdown-oriented syntax tree whose
node types, attribute names and leaf-value conventions follow mdast
(https://github.com/syntax-tree/mdast). Each node type is a frozen
dataclass, so trees are immutable values compared by structure.

Node Hierarchy
--------------
All nodes inherit from ``Node`` and expose their mdast tag as ``type``.

Parent nodes hold a ``children`` tuple:
    - Root, Paragraph, Heading, Blockquote
    - List, ListItem, Table, TableRow, TableCell
    - Strong, Emphasis, Delete, Link

Literal nodes hold a string ``value``:
    - Text, InlineCode, Code, Html

Void nodes hold neither:
    - ThematicBreak, Break

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional


class Node:
    """Base class for all mdast nodes.

    Attributes
    ----------
    type : str
        The mdast type tag of the node (class-level constant)

    """

    type: ClassVar[str]


class Parent(Node):
    """Base class for nodes with an ordered sequence of children.

    ``children`` is normalized to a tuple on construction, so callers may
    pass any iterable of nodes.
    """

    children: tuple[Node, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


class LiteralNode(Node):
    """Base class for leaf nodes carrying a literal string ``value``."""

    value: str


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Root(Parent):
    """Root of a converted document. Always present, possibly empty."""

    type: ClassVar[str] = "root"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Paragraph(Parent):
    """Paragraph of phrasing content."""

    type: ClassVar[str] = "paragraph"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Heading(Parent):
    """Heading of rank ``depth`` (1 to 6).

    Parameters
    ----------
    depth : int, default = 1
        Heading rank
    children : tuple of Node, default = ()
        Phrasing content of the heading

    """

    type: ClassVar[str] = "heading"
    depth: int = 1
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Blockquote(Parent):
    """Block quotation."""

    type: ClassVar[str] = "blockquote"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Code(LiteralNode):
    """Fenced code block.

    Parameters
    ----------
    value : str
        Code content
    lang : str or None, default = None
        Language of the code, if known

    """

    type: ClassVar[str] = "code"
    value: str = ""
    lang: Optional[str] = None


@dataclass(frozen=True)
class Html(LiteralNode):
    """Raw HTML fragment, used for media markers and sub/superscript."""

    type: ClassVar[str] = "html"
    value: str = ""


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule)."""

    type: ClassVar[str] = "thematicBreak"


@dataclass(frozen=True)
class List(Parent):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default = False
        Whether the items are numbered
    children : tuple of Node, default = ()
        ``ListItem`` children
    spread : bool, default = False
        Whether items are separated by blank lines
    start : int or None, default = None
        Starting number for ordered lists when it is not 1

    """

    type: ClassVar[str] = "list"
    ordered: bool = False
    children: tuple[Node, ...] = ()
    spread: bool = False
    start: Optional[int] = None


@dataclass(frozen=True)
class ListItem(Parent):
    """List item, optionally a checkbox item.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block content of the item
    spread : bool, default = False
        Whether the item's children are separated by blank lines
    checked : bool or None, default = None
        Checkbox state; None when the item is not a task

    """

    type: ClassVar[str] = "listItem"
    children: tuple[Node, ...] = ()
    spread: bool = False
    checked: Optional[bool] = None


@dataclass(frozen=True)
class Table(Parent):
    """Table made of ``TableRow`` children."""

    type: ClassVar[str] = "table"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TableRow(Parent):
    """Table row made of ``TableCell`` children."""

    type: ClassVar[str] = "tableRow"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class TableCell(Parent):
    """Table cell. Header and data cells share this type."""

    type: ClassVar[str] = "tableCell"
    children: tuple[Node, ...] = ()


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(LiteralNode):
    """Plain text."""

    type: ClassVar[str] = "text"
    value: str = ""


@dataclass(frozen=True)
class Strong(Parent):
    """Strong importance (bold)."""

    type: ClassVar[str] = "strong"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Emphasis(Parent):
    """Stress emphasis (italic)."""

    type: ClassVar[str] = "emphasis"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Delete(Parent):
    """Deleted content (strikethrough)."""

    type: ClassVar[str] = "delete"
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class InlineCode(LiteralNode):
    """Inline code span."""

    type: ClassVar[str] = "inlineCode"
    value: str = ""


@dataclass(frozen=True)
class Link(Parent):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link destination
    children : tuple of Node, default = ()
        Link text
    title : str or None, default = None
        Advisory title

    """

    type: ClassVar[str] = "link"
    url: str = ""
    children: tuple[Node, ...] = ()
    title: Optional[str] = None


@dataclass(frozen=True)
class Break(Node):
    """Hard line break."""

    type: ClassVar[str] = "break"


NODE_TYPES: dict[str, type[Any]] = {
    cls.type: cls
    for cls in (
        Root,
        Paragraph,
        Heading,
        Blockquote,
        Code,
        Html,
        ThematicBreak,
        List,
        ListItem,
        Table,
        TableRow,
        TableCell,
        Text,
        Strong,
        Emphasis,
        Delete,
        InlineCode,
        Link,
        Break,
    )
}
