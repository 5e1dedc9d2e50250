#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdast target tree for adf2mdast.

This package provides the node classes of the converted tree, a
``u()`` builder and unist dictionary/JSON serialization.
"""

from adf2mdast.mdast.builder import u
from adf2mdast.mdast.nodes import (
    NODE_TYPES,
    Blockquote,
    Break,
    Code,
    Delete,
    Emphasis,
    Heading,
    Html,
    InlineCode,
    Link,
    List,
    ListItem,
    LiteralNode,
    Node,
    Paragraph,
    Parent,
    Root,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from adf2mdast.mdast.serialization import dict_to_mdast, json_to_mdast, mdast_to_dict, mdast_to_json

__all__ = [
    "NODE_TYPES",
    "Blockquote",
    "Break",
    "Code",
    "Delete",
    "Emphasis",
    "Heading",
    "Html",
    "InlineCode",
    "Link",
    "List",
    "ListItem",
    "LiteralNode",
    "Node",
    "Paragraph",
    "Parent",
    "Root",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "dict_to_mdast",
    "json_to_mdast",
    "mdast_to_dict",
    "mdast_to_json",
    "u",
]
