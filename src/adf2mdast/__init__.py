"""adf2mdast - Convert Atlassian Document Format trees into mdast.

adf2mdast turns documents from Atlassian's collaborative editors (Jira,
Confluence) into a generic markdown syntax tree that any mdast-aware
renderer can turn into text.

The conversion is a pure function of the input tree: no I/O, no global
state, safe to call concurrently.

Examples
--------
Basic usage:

    >>> from adf2mdast import convert
    >>> from adf2mdast.mdast import u
    >>> doc = {
    ...     "version": 1,
    ...     "type": "doc",
    ...     "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}],
    ... }
    >>> convert(doc) == u("root", [u("paragraph", [u("text", "Hello")])])
    True

Handing the tree to a JavaScript renderer:

    >>> from adf2mdast.mdast import mdast_to_json
    >>> payload = mdast_to_json(convert(doc))

See Also
--------
adf2mdast.mdast : Target node definitions, builder and serialization
adf2mdast.options : Conversion options

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from adf2mdast.adf import AdfNode, load_document, load_node
from adf2mdast.api import convert, convert_json
from adf2mdast.converter import AdfToMdastConverter
from adf2mdast.exceptions import (
    Adf2MdastError,
    InvalidNodeError,
    InvalidOptionsError,
    ParsingError,
    UnsupportedNodeError,
    ValidationError,
)
from adf2mdast.options import AdfOptions

__all__ = [
    "__version__",
    "AdfNode",
    "AdfOptions",
    "AdfToMdastConverter",
    "Adf2MdastError",
    "InvalidNodeError",
    "InvalidOptionsError",
    "ParsingError",
    "UnsupportedNodeError",
    "ValidationError",
    "convert",
    "convert_json",
    "load_document",
    "load_node",
]
