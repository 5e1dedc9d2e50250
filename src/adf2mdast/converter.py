#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/converter.py
"""ADF to mdast converter.

This module walks an ADF tree depth-first and builds the equivalent mdast
tree. Every ADF node type with a text equivalent has a conversion rule in
a closed dispatch table; each rule returns a list of mdast nodes, which the
caller splices into its own children. This single convention covers the
three shapes a rule can take:

- wrap: return one node holding the converted children (paragraph, list...)
- pass through: return the converted children themselves (panel, layout,
  expand); the container leaves no trace in the output
- drop: return an empty list (placeholder, unknown types)

Node types with no rule are dropped silently so documents written with newer
ADF node types still convert. ``AdfOptions(strict_mode=True)`` turns that
into an ``UnsupportedNodeError``.

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Callable, Union

from adf2mdast.adf import AdfNode, check_depth, load_document, load_node
from adf2mdast.constants import (
    ADF_DOC_TYPE,
    ADF_IGNORED_TYPES,
    ADF_MEDIA_TYPES,
    ADF_NESTED_ITEM_LIST_TYPES,
    ADF_TEXT_TYPE,
    CHECKED_ITEM_STATES,
)
from adf2mdast.exceptions import InvalidNodeError, InvalidOptionsError, UnsupportedNodeError
from adf2mdast.marks import stack_marks
from adf2mdast.mdast.nodes import (
    Blockquote,
    Break,
    Code,
    Heading,
    Html,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from adf2mdast.options import AdfOptions

logger = logging.getLogger(__name__)

AdfInput = Union[AdfNode, Mapping[str, Any]]
ConversionRule = Callable[[AdfNode], list[Node]]


def _card_link(url: str) -> Link:
    return Link(url=url, children=(Text(value=url),))


class AdfToMdastConverter:
    """Convert ADF documents into mdast trees.

    The converter holds nothing but its options, so one instance can be
    shared and called concurrently.

    Parameters
    ----------
    options : AdfOptions or None, default = None
        Conversion options. If None, default options are used.

    Examples
    --------
        >>> converter = AdfToMdastConverter()
        >>> converter.convert({"version": 1, "type": "doc", "content": []})
        Root(children=())

    """

    def __init__(self, options: AdfOptions | None = None):
        """Initialize the converter and its dispatch table."""
        if options is not None and not isinstance(options, AdfOptions):
            raise InvalidOptionsError(
                converter_name="adf",
                expected_type=AdfOptions,
                received_type=type(options),
            )
        self.options: AdfOptions = options or AdfOptions()

        transparent = self._convert_transparent
        self._rules: dict[str, ConversionRule] = {
            # Block structure
            "paragraph": self._convert_paragraph,
            "heading": self._convert_heading,
            "codeBlock": self._convert_code_block,
            "blockquote": self._convert_blockquote,
            "rule": self._convert_rule,
            # Lists
            "bulletList": self._convert_bullet_list,
            "orderedList": self._convert_ordered_list,
            "listItem": self._convert_list_item,
            "taskList": self._convert_item_list,
            "decisionList": self._convert_item_list,
            "taskItem": self._convert_checkable_item,
            "decisionItem": self._convert_checkable_item,
            # Tables
            "table": self._convert_table,
            "tableRow": self._convert_table_row,
            "tableCell": self._convert_table_cell,
            "tableHeader": self._convert_table_cell,
            # Inline content
            "text": self._convert_text,
            "hardBreak": self._convert_hard_break,
            "emoji": self._convert_emoji,
            "mention": self._convert_mention,
            "date": self._convert_date,
            # Media and cards
            "mediaSingle": self._convert_media_container,
            "mediaGroup": self._convert_media_container,
            "media": self._convert_media,
            "mediaInline": self._convert_media,
            "blockCard": self._convert_block_card,
            "inlineCard": self._convert_card_link,
            "embedCard": self._convert_card_link,
            # Containers with no mdast equivalent
            "panel": transparent,
            "layoutSection": transparent,
            "layoutColumn": transparent,
            "expand": transparent,
            "nestedExpand": transparent,
        }

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def convert(self, document: AdfInput) -> Root:
        """Convert an ADF document into an mdast root.

        Parameters
        ----------
        document : AdfNode or Mapping
            The ADF document, either loaded or as parsed JSON

        Returns
        -------
        Root
            Root node whose children are the converted top-level blocks

        Raises
        ------
        InvalidNodeError
            If the document is not a ``doc`` node or contains malformed nodes
        UnsupportedNodeError
            In strict mode, if a node type has no conversion rule

        """
        if isinstance(document, AdfNode):
            if document.type != ADF_DOC_TYPE:
                raise InvalidNodeError(f"document root must have type 'doc', got '{document.type}'")
            check_depth(document, max_depth=self.options.max_nesting_depth)
            root = document
        else:
            root = load_document(document, max_depth=self.options.max_nesting_depth)
        return Root(children=self._convert_children(root))

    def convert_node(self, node: AdfInput) -> list[Node]:
        """Convert a single ADF node (and its subtree).

        Parameters
        ----------
        node : AdfNode or Mapping
            The node to convert

        Returns
        -------
        list of Node
            Zero or more mdast nodes to splice into the parent

        """
        if isinstance(node, AdfNode):
            check_depth(node, max_depth=self.options.max_nesting_depth)
        else:
            node = load_node(node, max_depth=self.options.max_nesting_depth)
        return self._dispatch(node)

    def convert_children(self, node: AdfNode) -> list[Node]:
        """Convert every child of a node and concatenate the results in order."""
        check_depth(node, max_depth=self.options.max_nesting_depth)
        return self._convert_children(node)

    def _convert_children(self, node: AdfNode) -> list[Node]:
        children: list[Node] = []
        for child in node.content:
            children.extend(self._dispatch(child))
        return children

    def _dispatch(self, node: AdfNode) -> list[Node]:
        rule = self._rules.get(node.type)
        if rule is None:
            if self.options.strict_mode and node.type not in ADF_IGNORED_TYPES:
                raise UnsupportedNodeError(node.type)
            logger.debug("Dropping ADF node of type '%s'", node.type)
            return []
        return rule(node)

    def _convert_transparent(self, node: AdfNode) -> list[Node]:
        logger.debug("Unwrapping '%s' container", node.type)
        return self._convert_children(node)

    # ------------------------------------------------------------------
    # Block structure
    # ------------------------------------------------------------------

    def _convert_paragraph(self, node: AdfNode) -> list[Node]:
        return [Paragraph(children=self._convert_children(node))]

    def _convert_heading(self, node: AdfNode) -> list[Node]:
        return [Heading(depth=node.attr("level", 1), children=self._convert_children(node))]

    def _convert_code_block(self, node: AdfNode) -> list[Node]:
        value = "".join(child.text or "" for child in node.content if child.type == ADF_TEXT_TYPE)
        return [Code(value=value, lang=node.attr("language") or None)]

    def _convert_blockquote(self, node: AdfNode) -> list[Node]:
        return [Blockquote(children=self._convert_children(node))]

    def _convert_rule(self, node: AdfNode) -> list[Node]:
        return [ThematicBreak()]

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _convert_bullet_list(self, node: AdfNode) -> list[Node]:
        return [List(ordered=False, spread=False, children=self._convert_children(node))]

    def _convert_ordered_list(self, node: AdfNode) -> list[Node]:
        order = node.attr("order")
        start = order if isinstance(order, int) and not isinstance(order, bool) and order != 1 else None
        return [List(ordered=True, spread=False, start=start, children=self._convert_children(node))]

    def _convert_list_item(self, node: AdfNode) -> list[Node]:
        return [ListItem(spread=False, children=self._convert_children(node))]

    def _convert_item_list(self, node: AdfNode) -> list[Node]:
        """Convert a taskList or decisionList.

        A list nested directly inside a task list belongs to the item
        before it, so it is moved into that item's children.
        """
        items: list[Node] = []
        for child in node.content:
            converted = self._dispatch(child)
            if child.type not in ADF_NESTED_ITEM_LIST_TYPES:
                items.extend(converted)
            elif items and isinstance(items[-1], ListItem):
                previous = items[-1]
                items[-1] = replace(previous, children=previous.children + tuple(converted))
            else:
                items.append(ListItem(spread=False, children=converted))
        return [List(ordered=False, spread=False, children=items)]

    def _convert_checkable_item(self, node: AdfNode) -> list[Node]:
        checked = node.attr("state") in CHECKED_ITEM_STATES
        paragraph = Paragraph(children=self._convert_children(node))
        return [ListItem(checked=checked, spread=False, children=(paragraph,))]

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _convert_table(self, node: AdfNode) -> list[Node]:
        return [Table(children=self._convert_children(node))]

    def _convert_table_row(self, node: AdfNode) -> list[Node]:
        return [TableRow(children=self._convert_children(node))]

    def _convert_table_cell(self, node: AdfNode) -> list[Node]:
        return [TableCell(children=self._convert_children(node))]

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _convert_text(self, node: AdfNode) -> list[Node]:
        return [stack_marks(node.text or "", node.marks)]

    def _convert_hard_break(self, node: AdfNode) -> list[Node]:
        return [Break()]

    def _convert_emoji(self, node: AdfNode) -> list[Node]:
        return [Text(value=node.attr("text") or node.attr("shortName", ""))]

    def _convert_mention(self, node: AdfNode) -> list[Node]:
        return [Text(value=f"@{node.attr('text', '')}")]

    def _convert_date(self, node: AdfNode) -> list[Node]:
        return [Text(value=str(node.attr("timestamp", "")))]

    # ------------------------------------------------------------------
    # Media and cards
    # ------------------------------------------------------------------

    def _convert_media_container(self, node: AdfNode) -> list[Node]:
        markers: list[Node] = []
        for child in node.content:
            converted = self._dispatch(child)
            # Only media children leave output; captions and the like are discarded
            if child.type in ADF_MEDIA_TYPES:
                markers.extend(converted)
        return markers

    def _convert_media(self, node: AdfNode) -> list[Node]:
        marker = self.options.media_marker_template.format(type=node.attr("type", ""), id=node.attr("id", ""))
        return [Html(value=marker)]

    def _convert_block_card(self, node: AdfNode) -> list[Node]:
        url = node.attr("url")
        if not url:
            logger.debug("Dropping blockCard without url")
            return []
        return [Paragraph(children=(_card_link(url),))]

    def _convert_card_link(self, node: AdfNode) -> list[Node]:
        url = node.attr("url")
        if not url:
            logger.debug("Dropping %s without url", node.type)
            return []
        return [_card_link(url)]
