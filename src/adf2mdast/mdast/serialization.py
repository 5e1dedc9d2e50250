#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/mdast/serialization.py
"""Dictionary and JSON serialization for mdast nodes.

This module converts mdast node objects to and from the plain unist shape
consumed by downstream renderers: every node is a dict with a ``type`` key,
its attributes (``depth``, ``ordered``, ``start``, ``spread``, ``checked``,
``lang``, ``url``, ``title``) as top-level keys, and either ``children`` or
``value``. Optional attributes set to ``None`` are omitted.

Examples
--------
Serialize a tree:

    >>> from adf2mdast.mdast import Heading, Text
    >>> from adf2mdast.mdast.serialization import mdast_to_dict
    >>> mdast_to_dict(Heading(depth=2, children=[Text("Title")]))
    {'type': 'heading', 'depth': 2, 'children': [{'type': 'text', 'value': 'Title'}]}

Load it back:

    >>> from adf2mdast.mdast.serialization import dict_to_mdast
    >>> dict_to_mdast({"type": "text", "value": "Hello"})
    Text(value='Hello')

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any

from adf2mdast.mdast.nodes import NODE_TYPES, LiteralNode, Node, Parent, Text

logger = logging.getLogger(__name__)


def _attribute_names(node_class: type[Any]) -> list[str]:
    """Return the non-structural dataclass fields of a node class."""
    return [f.name for f in fields(node_class) if f.name not in ("children", "value")]


def mdast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an mdast node to its unist dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary with ``type``, attributes, and ``children`` or ``value``

    Raises
    ------
    ValueError
        If the node is not one of the known mdast node classes

    """
    node_class = type(node)
    if NODE_TYPES.get(node.type) is not node_class:
        raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")

    result: dict[str, Any] = {"type": node.type}
    for name in _attribute_names(node_class):
        value = getattr(node, name)
        if value is not None:
            result[name] = value

    if isinstance(node, Parent):
        result["children"] = [mdast_to_dict(child) for child in node.children]
    elif isinstance(node, LiteralNode):
        result["value"] = node.value
    return result


def dict_to_mdast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a unist dictionary back to an mdast node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, unknown nodes become empty ``Text`` nodes.

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValueError
        If the dictionary has no ``type`` or an unknown type and strict_mode is True

    """
    node_type = data.get("type")
    node_class = NODE_TYPES.get(node_type) if isinstance(node_type, str) else None
    if node_class is None:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type!r}")
        logger.warning(f"Unknown node type '{node_type}', replacing with empty text")
        return Text(value="")

    kwargs: dict[str, Any] = {name: data[name] for name in _attribute_names(node_class) if name in data}
    if issubclass(node_class, Parent):
        kwargs["children"] = tuple(dict_to_mdast(child, strict_mode=strict_mode) for child in data.get("children", []))
    elif issubclass(node_class, LiteralNode):
        kwargs["value"] = data.get("value", "")
    return node_class(**kwargs)


def mdast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an mdast node to a JSON string.

    Unicode characters are preserved without escape sequences.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON representation of the node

    """
    return json.dumps(mdast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_mdast(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string produced by ``mdast_to_json``.

    Parameters
    ----------
    json_str : str
        JSON representation of a node
    strict_mode : bool, default True
        Passed to ``dict_to_mdast``

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    json.JSONDecodeError
        If the JSON string is malformed
    ValueError
        If the JSON does not describe a known node

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return dict_to_mdast(data, strict_mode=strict_mode)


__all__ = [
    "mdast_to_dict",
    "dict_to_mdast",
    "mdast_to_json",
    "json_to_mdast",
]
