#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This module converts plain and annotated trees to and from JSON text, using
the schema validator for the record form. Deserialization validates every
record against its kind, so a JSON document that does not match the schema
is rejected rather than half-loaded.

Examples
--------
Serialize an annotated tree to JSON:

    >>> from clausemark.ast import Document, Paragraph, Variable
    >>> from clausemark.ast.serialization import ast_to_json
    >>>
    >>> doc = Document(children=[
    ...     Paragraph(children=[Variable(id="party", value="Acme")])
    ... ])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to a tree:

    >>> from clausemark.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].children[0].value
    'Acme'

"""

from __future__ import annotations

import json
import logging
from typing import Any

from clausemark.ast.nodes import Node
from clausemark.constants import SCHEMA_VERSION
from clausemark.exceptions import SchemaValidationError
from clausemark.schema.validator import SchemaValidator

logger = logging.getLogger(__name__)


def ast_to_dict(node: Node, validator: SchemaValidator | None = None) -> dict[str, Any]:
    """Convert an AST node to its record representation.

    Parameters
    ----------
    node : Node
        The AST node to convert
    validator : SchemaValidator or None, default = None
        Validator to use (a default one when omitted)

    Returns
    -------
    dict
        Record representation of the node

    """
    return (validator or SchemaValidator()).to_dict(node)


def dict_to_ast(data: dict[str, Any], validator: SchemaValidator | None = None) -> Node:
    """Convert a record back to an AST node, validating it.

    Raises
    ------
    SchemaValidationError
        If the record does not satisfy its kind's schema
    UnknownKindError
        If the record names an unregistered kind

    """
    return (validator or SchemaValidator()).from_dict(data, expected=Node)


def ast_to_json(node: Node, indent: int | None = None, validator: SchemaValidator | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)
    validator : SchemaValidator or None, default = None
        Validator to use (a default one when omitted)

    Returns
    -------
    str
        JSON string whose root object carries a ``schema_version`` field

    """
    node_dict = ast_to_dict(node, validator)
    versioned_dict = {"schema_version": SCHEMA_VERSION, **node_dict}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, validator: SchemaValidator | None = None) -> Node:
    """Deserialize a JSON string to an AST node.

    If no schema_version is present, version 1 is assumed.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, reject documents declaring an unsupported schema version.
        If False, log a warning and attempt to load them anyway.
    validator : SchemaValidator or None, default = None
        Validator to use (a default one when omitted)

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    SchemaValidationError
        If the schema version is unsupported (with validate_schema=True) or
        any record does not satisfy its schema
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise SchemaValidationError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", None)
    if schema_version is None:
        schema_version = SCHEMA_VERSION

    if schema_version != SCHEMA_VERSION:
        if validate_schema:
            raise SchemaValidationError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of clausemark supports schema version {SCHEMA_VERSION} only.",
                field_name="schema_version",
                field_value=schema_version,
            )
        logger.warning(
            "Schema version %s differs from supported version %s. Attempting to load anyway.",
            schema_version,
            SCHEMA_VERSION,
        )

    return dict_to_ast(data, validator)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
