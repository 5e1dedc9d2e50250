#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the adf2mdast library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Behavior - Defaults for ``AdfOptions``
3. ADF Vocabulary - Type tags and attribute values of the source format
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

SubSupKind = Literal["sub", "sup"]

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_STRICT_MODE = False
DEFAULT_MAX_NESTING_DEPTH = 128
DEFAULT_MEDIA_MARKER_TEMPLATE = "<!-- media: {type} {id} -->"

# Upper bound for max_nesting_depth. Conversion recurses a few frames per
# source level and must stay inside the interpreter recursion limit.
MAX_NESTING_DEPTH_LIMIT = 200

# =============================================================================
# ADF Vocabulary
# =============================================================================

ADF_DOC_TYPE = "doc"
ADF_TEXT_TYPE = "text"

# Task and decision item states that map to a checked list item
CHECKED_ITEM_STATES = frozenset({"DONE", "DECIDED"})

# Node types treated as media children of mediaSingle/mediaGroup
ADF_MEDIA_TYPES = frozenset({"media", "mediaInline"})

# Nested list containers allowed directly inside taskList/decisionList
ADF_NESTED_ITEM_LIST_TYPES = frozenset({"taskList", "decisionList"})

# Editor-only nodes that never produce output, even in strict mode
ADF_IGNORED_TYPES = frozenset({"placeholder"})
