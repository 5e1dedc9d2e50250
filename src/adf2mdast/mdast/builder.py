#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/mdast/builder.py
"""Hyperscript-style helper for constructing mdast trees.

``u()`` mirrors the ``unist-builder`` call convention so expected trees can
be written compactly:

    >>> from adf2mdast.mdast.builder import u
    >>> u("root", [u("paragraph", [u("text", "Hello "), u("strong", [u("text", "World")])])])
    Root(children=(Paragraph(children=(Text(value='Hello '), Strong(children=(Text(value='World'),)))),))
    >>> u("link", {"url": "https://example.com"}, [u("text", "example")])
    Link(url='https://example.com', children=(Text(value='example'),), title=None)

"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from adf2mdast.mdast.nodes import NODE_TYPES, LiteralNode, Node, Parent

ValueOrChildren = Union[str, Sequence[Node]]


def u(node_type: str, *args: Any) -> Node:
    """Build an mdast node from a type tag, optional props and value or children.

    Parameters
    ----------
    node_type : str
        mdast type tag (e.g. ``"paragraph"``)
    *args
        Up to two positional arguments: an optional mapping of attributes,
        followed by either a string value (literal nodes) or a sequence of
        child nodes (parent nodes)

    Returns
    -------
    Node
        The constructed node

    Raises
    ------
    ValueError
        If the type tag is unknown, too many arguments are given, or a
        value/children argument does not fit the node kind

    """
    node_class = NODE_TYPES.get(node_type)
    if node_class is None:
        raise ValueError(f"Unknown mdast node type: {node_type!r}")
    if len(args) > 2:
        raise ValueError(f"u() takes at most 2 arguments after the type, got {len(args)}")

    props: Mapping[str, Any] = {}
    rest: list[Any] = list(args)
    if rest and isinstance(rest[0], Mapping):
        props = rest.pop(0)
    if len(rest) > 1:
        raise ValueError("u() accepts a single value or children argument")

    kwargs: dict[str, Any] = dict(props)
    if rest:
        payload = rest[0]
        if isinstance(payload, str):
            if not issubclass(node_class, LiteralNode):
                raise ValueError(f"'{node_type}' nodes take children, not a value")
            kwargs["value"] = payload
        else:
            if not issubclass(node_class, Parent):
                raise ValueError(f"'{node_type}' nodes cannot have children")
            kwargs["children"] = tuple(payload)
    return node_class(**kwargs)
