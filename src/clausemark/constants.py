#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the clausemark library.

This module centralizes the schema namespaces, tag names and rendering
defaults used across the package.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Schema Namespaces - Qualified kind names for both schemas
3. Tag Encoding - Synthetic tag names and the percent-encoding safe set
4. Defaults - Rewrite and renderer defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ListType = Literal["bullet", "ordered"]
ListDelimiter = Literal["period", "paren"]
EmphasisSymbol = Literal["*", "_"]
CodeFenceChar = Literal["`", "~"]

# =============================================================================
# Schema Namespaces
# =============================================================================

PLAIN_NAMESPACE = "clausemark.plain"
ANNOTATED_NAMESPACE = "clausemark.annotated"

# Marker carried by every synthetic document wrapper handed to the renderer
MARKDOWN_DOCUMENT_XMLNS = "http://commonmark.org/xml/1.0"

# Key holding the qualified kind name in serialized records
NODE_TYPE_KEY = "node_type"

SCHEMA_VERSION = 1

# =============================================================================
# Tag Encoding
# =============================================================================

CLAUSE_TAG = "clause"
LIST_TAG = "list"
VARIABLE_TAG = "variable"
COMPUTED_TAG = "computed"
CONDITIONAL_TAG = "if"

# Characters left as-is by percent encoding in addition to ASCII letters,
# digits and "_.-~" (which urllib.parse.quote never encodes)
PERCENT_ENCODE_SAFE = "!*'()"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_WRAP_VARIABLES = True

DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_BULLET_SYMBOLS = "*-+"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
MIN_CODE_FENCE_LENGTH = 3
MAX_CODE_FENCE_LENGTH = 10
DEFAULT_COLLAPSE_BLANK_LINES = True
DEFAULT_ESCAPE_SPECIAL = True
