#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/schema/__init__.py
"""Schema registry and validator for the plain and annotated node kinds."""

from clausemark.schema.registry import (
    KindDescriptor,
    Property,
    TypeRegistry,
    annotated_kind_name,
    default_registry,
    plain_kind_name,
)
from clausemark.schema.validator import SchemaValidator

__all__ = [
    "KindDescriptor",
    "Property",
    "SchemaValidator",
    "TypeRegistry",
    "annotated_kind_name",
    "default_registry",
    "plain_kind_name",
]
