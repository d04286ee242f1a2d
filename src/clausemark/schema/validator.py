#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/schema/validator.py
"""Schema validation and record conversion for AST nodes.

The ``SchemaValidator`` converts nodes to plain dictionary records and back.
Every record carries its qualified kind name under the ``"node_type"`` key:

    >>> validator = SchemaValidator()
    >>> validator.to_dict(Text(text="Hello"))
    {'node_type': 'clausemark.plain.Text', 'text': 'Hello'}

Turning a record back into a node checks it against the kind's declared
properties. A candidate that is missing a required field, carries a field
its kind does not declare, or holds a value of the wrong shape is rejected
with ``SchemaValidationError``; a record naming an unregistered kind is
rejected with ``UnknownKindError``.

"""

from __future__ import annotations

from typing import Any

from clausemark.constants import NODE_TYPE_KEY
from clausemark.exceptions import SchemaValidationError
from clausemark.schema.registry import KindDescriptor, Property, TypeRegistry, default_registry


class SchemaValidator:
    """Convert nodes to records and validate records back into nodes.

    Parameters
    ----------
    registry : TypeRegistry or None, default = None
        Registry describing the known kinds. A registry holding both the
        plain and the annotated schema is used when omitted.

    """

    def __init__(self, registry: TypeRegistry | None = None):
        """Initialize the validator with a type registry."""
        self.registry = registry or default_registry()

    def to_dict(self, node: Any) -> dict[str, Any]:
        """Convert a node (or tag descriptor) into a record.

        The dump is lossless: every declared property with a value is
        included, nested nodes and descriptors are converted recursively.

        Parameters
        ----------
        node : Any
            Instance of a registered class

        Returns
        -------
        dict
            Record with a ``"node_type"`` key

        Raises
        ------
        UnknownKindError
            If the node's class (or a nested value's class) is not registered

        """
        descriptor = self.registry.kind_for_node(node)
        record: dict[str, Any] = {NODE_TYPE_KEY: descriptor.qualified_name}
        for prop in descriptor.properties:
            value = getattr(node, prop.attr)
            if value is None and prop.optional:
                continue
            record[prop.key] = self._dump_value(prop, value)
        return record

    def _dump_value(self, prop: Property, value: Any) -> Any:
        if prop.array:
            return [self._dump_item(prop, item) for item in value]
        return self._dump_item(prop, value)

    def _dump_item(self, prop: Property, value: Any) -> Any:
        if prop.is_primitive or value is None:
            return value
        return self.to_dict(value)

    def from_dict(self, record: Any, expected: type | None = None) -> Any:
        """Validate a record and build the node it describes.

        Parameters
        ----------
        record : dict
            Record with a ``"node_type"`` key
        expected : type or None, default = None
            When given, the record's kind must produce an instance of this
            class (or a subclass)

        Returns
        -------
        Any
            Node (or descriptor) of the concrete registered class

        Raises
        ------
        SchemaValidationError
            If the record does not satisfy its kind's schema
        UnknownKindError
            If the record names an unregistered kind

        """
        if not isinstance(record, dict):
            raise SchemaValidationError(
                f"Expected a record, got {type(record).__name__}", field_value=record
            )

        kind_name = record.get(NODE_TYPE_KEY)
        if not kind_name:
            raise SchemaValidationError(f"Record must contain a '{NODE_TYPE_KEY}' field", field_name=NODE_TYPE_KEY)

        descriptor = self.registry.kind_by_name(kind_name)
        if expected is not None and not issubclass(descriptor.node_class, expected):
            raise SchemaValidationError(
                f"Expected a {expected.__name__} record, got {kind_name}",
                node_type=kind_name,
                field_name=NODE_TYPE_KEY,
                field_value=kind_name,
            )

        for key in record:
            if key != NODE_TYPE_KEY and descriptor.property_by_key(key) is None:
                raise SchemaValidationError(
                    f"Field '{key}' is not declared by {kind_name}",
                    node_type=kind_name,
                    field_name=key,
                    field_value=record[key],
                )

        kwargs: dict[str, Any] = {}
        for prop in descriptor.properties:
            value = record.get(prop.key)
            if value is None:
                if prop.optional:
                    continue
                raise SchemaValidationError(
                    f"Missing required field '{prop.key}' in {kind_name}", node_type=kind_name, field_name=prop.key
                )
            kwargs[prop.attr] = self._load_value(descriptor, prop, value)

        return descriptor.node_class(**kwargs)

    def _load_value(self, descriptor: KindDescriptor, prop: Property, value: Any) -> Any:
        if prop.array:
            if not isinstance(value, list):
                raise SchemaValidationError(
                    f"Field '{prop.key}' of {descriptor.qualified_name} must be a list",
                    node_type=descriptor.qualified_name,
                    field_name=prop.key,
                    field_value=value,
                )
            return [self._load_item(descriptor, prop, item) for item in value]
        return self._load_item(descriptor, prop, value)

    def _load_item(self, descriptor: KindDescriptor, prop: Property, value: Any) -> Any:
        if not prop.is_primitive:
            return self.from_dict(value, expected=prop.type)

        # bool is a subclass of int; an integer field must not accept True
        if not isinstance(value, prop.type) or (prop.type is int and isinstance(value, bool)):
            raise SchemaValidationError(
                f"Field '{prop.key}' of {descriptor.qualified_name} must be of type {prop.type.__name__}, "
                f"got {type(value).__name__}",
                node_type=descriptor.qualified_name,
                field_name=prop.key,
                field_value=value,
            )
        if prop.choices is not None and value not in prop.choices:
            raise SchemaValidationError(
                f"Field '{prop.key}' of {descriptor.qualified_name} must be one of {', '.join(prop.choices)}, "
                f"got {value!r}",
                node_type=descriptor.qualified_name,
                field_name=prop.key,
                field_value=value,
            )
        return value


__all__ = ["SchemaValidator"]
