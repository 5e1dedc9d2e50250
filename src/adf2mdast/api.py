#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/api.py
"""Public entry points for ADF to mdast conversion.

Examples
--------
Convert a parsed ADF document:

    >>> from adf2mdast import convert
    >>> tree = convert({
    ...     "version": 1,
    ...     "type": "doc",
    ...     "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hi"}]}],
    ... })
    >>> tree.children[0].type
    'paragraph'

Convert ADF JSON text, e.g. a response body from the REST API:

    >>> from adf2mdast import convert_json
    >>> convert_json('{"version": 1, "type": "doc", "content": []}')
    Root(children=())

"""

from __future__ import annotations

import json
import logging
from typing import Optional, Union

from adf2mdast.converter import AdfInput, AdfToMdastConverter
from adf2mdast.exceptions import InvalidNodeError, ParsingError
from adf2mdast.mdast.nodes import Root
from adf2mdast.options import AdfOptions

logger = logging.getLogger(__name__)


def convert(document: AdfInput, options: Optional[AdfOptions] = None) -> Root:
    """Convert an ADF document into an mdast tree.

    Parameters
    ----------
    document : AdfNode or Mapping
        The ADF document (``{"version": 1, "type": "doc", "content": [...]}``)
    options : AdfOptions or None, default = None
        Conversion options

    Returns
    -------
    Root
        The mdast root node

    Raises
    ------
    InvalidNodeError
        If the document contains malformed nodes
    UnsupportedNodeError
        In strict mode, if a node type has no conversion rule
    InvalidOptionsError
        If ``options`` is not an ``AdfOptions`` instance

    """
    return AdfToMdastConverter(options).convert(document)


def convert_json(json_input: Union[str, bytes], options: Optional[AdfOptions] = None) -> Root:
    """Convert ADF JSON text into an mdast tree.

    Parameters
    ----------
    json_input : str or bytes
        In-memory JSON text of an ADF document. Bytes are decoded as UTF-8.
    options : AdfOptions or None, default = None
        Conversion options

    Returns
    -------
    Root
        The mdast root node

    Raises
    ------
    ParsingError
        If the input is not UTF-8 or not valid JSON
    InvalidNodeError
        If the JSON is not an object or contains malformed nodes

    """
    try:
        text = json_input.decode("utf-8") if isinstance(json_input, bytes) else json_input
    except UnicodeDecodeError as e:
        raise ParsingError(
            f"ADF input is not valid UTF-8: {e}", parsing_stage="input_decoding", original_error=e
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON in ADF input: {e}", parsing_stage="json_parsing", original_error=e) from e

    if not isinstance(data, dict):
        raise InvalidNodeError(f"document must be a JSON object, got {type(data).__name__}", "/", data)

    logger.debug("Loaded ADF JSON document (%d characters)", len(text))
    return convert(data, options)
