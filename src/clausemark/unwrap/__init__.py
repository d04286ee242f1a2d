#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rewrite of annotated trees into plain markdown trees.

Use ``unwrap_document`` for the common case, or build an
``UnwrapTransformer`` with a custom ``ConversionContext`` to substitute the
validator, registry or renderer.
"""

from __future__ import annotations

from clausemark.unwrap.context import ConversionContext, DocumentRenderer, RecordValidator
from clausemark.unwrap.converters import (
    convert_clause,
    convert_conditional_variable,
    convert_list_variable,
    convert_variable,
)
from clausemark.unwrap.tags import build_tag, format_attribute_string, percent_decode, percent_encode, self_closing_tag
from clausemark.unwrap.transformer import UnwrapTransformer, unwrap_document

__all__ = [
    "ConversionContext",
    "DocumentRenderer",
    "RecordValidator",
    "UnwrapTransformer",
    "build_tag",
    "convert_clause",
    "convert_conditional_variable",
    "convert_list_variable",
    "convert_variable",
    "format_attribute_string",
    "percent_decode",
    "percent_encode",
    "self_closing_tag",
    "unwrap_document",
]
