#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/marks.py
"""Mark stacking for ADF text nodes.

An ADF text node carries its formatting as an ordered list of marks. mdast
expresses the same formatting as nested wrapper nodes. ``stack_marks``
builds that nesting:

1. The leaf is chosen first. ``code`` turns the text into an ``inlineCode``
   literal, ``subsup`` turns it into an ``html`` literal
   (``<sub>x</sub>`` / ``<sup>x</sup>``), otherwise it stays ``text``.
2. The wrapper marks (strong, em, strike, link) are folded in list order,
   each one wrapping the result so far. The last mark in the list ends up
   outermost.

Examples
--------
    >>> from adf2mdast.adf import EmMark, StrongMark
    >>> stack_marks("X", [EmMark(), StrongMark()])
    Strong(children=(Emphasis(children=(Text(value='X'),)),))

"""

from __future__ import annotations

from typing import Callable, Sequence

from adf2mdast.adf import CodeMark, EmMark, LinkMark, Mark, StrikeMark, StrongMark, SubSupMark
from adf2mdast.mdast.nodes import Delete, Emphasis, Html, InlineCode, Link, Node, Strong, Text

_WRAPPERS: dict[type, Callable[[Mark, Node], Node]] = {
    StrongMark: lambda mark, node: Strong(children=(node,)),
    EmMark: lambda mark, node: Emphasis(children=(node,)),
    StrikeMark: lambda mark, node: Delete(children=(node,)),
    LinkMark: lambda mark, node: Link(url=mark.href, title=mark.title, children=(node,)),  # type: ignore[union-attr]
}


def _leaf(value: str, marks: Sequence[Mark]) -> Node:
    """Pick the literal node for the text before any wrapping."""
    if any(isinstance(mark, CodeMark) for mark in marks):
        return InlineCode(value=value)
    for mark in marks:
        if isinstance(mark, SubSupMark):
            return Html(value=f"<{mark.kind}>{value}</{mark.kind}>")
    return Text(value=value)


def stack_marks(value: str, marks: Sequence[Mark]) -> Node:
    """Build the mdast node for a text value carrying the given marks.

    Parameters
    ----------
    value : str
        The text of the ADF text node
    marks : sequence of Mark
        The node's marks in source order

    Returns
    -------
    Node
        A single node: the leaf wrapped by one node per wrapper mark, the
        last mark outermost

    """
    node = _leaf(value, marks)
    for mark in marks:
        wrap = _WRAPPERS.get(type(mark))
        if wrap is not None:
            node = wrap(mark, node)
    return node
