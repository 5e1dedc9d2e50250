#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf2mdast/options.py
"""Configuration options for ADF to mdast conversion.

Options are immutable dataclasses. Use ``create_updated()`` to derive a
modified copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from adf2mdast.constants import (
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_MEDIA_MARKER_TEMPLATE,
    DEFAULT_STRICT_MODE,
    MAX_NESTING_DEPTH_LIMIT,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class AdfOptions(CloneFrozenMixin):
    """Options for converting ADF documents into mdast trees.

    The defaults reproduce the standard conversion table: unknown node
    types are dropped and media nodes become HTML comment markers.

    Parameters
    ----------
    strict_mode : bool, default = False
        Raise ``UnsupportedNodeError`` for node types with no conversion rule
        instead of dropping them. ``placeholder`` nodes are always dropped.
        Non-media children of ``mediaSingle``/``mediaGroup`` (captions) are
        checked the same way before being discarded.
    max_nesting_depth : int, default = 128
        Maximum depth of the source tree, at most 200. Deeper documents are
        rejected with ``InvalidNodeError`` before any conversion happens.
    media_marker_template : str, default = "<!-- media: {type} {id} -->"
        Format string for media placeholders. Receives ``type`` and ``id``.

    Examples
    --------
    Fail on node types introduced after this converter was written:
        >>> options = AdfOptions(strict_mode=True)

    Derive a copy with a different marker:
        >>> options = AdfOptions().create_updated(media_marker_template="[{type}:{id}]")

    """

    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={"help": "Fail on node types with no conversion rule", "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum nesting depth of the source tree", "type": int, "importance": "security"},
    )
    media_marker_template: str = field(
        default=DEFAULT_MEDIA_MARKER_TEMPLATE,
        metadata={"help": "Format string for media placeholder HTML nodes", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")
        if self.max_nesting_depth > MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(
                f"max_nesting_depth must be at most {MAX_NESTING_DEPTH_LIMIT}, got {self.max_nesting_depth}"
            )
        try:
            self.media_marker_template.format(type="", id="")
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"media_marker_template may only reference {{type}} and {{id}}: {self.media_marker_template!r}"
            ) from e
