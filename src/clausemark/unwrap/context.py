#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/unwrap/context.py
"""Collaborators used by the annotated to plain rewrite.

The rewrite needs three capabilities: a validator turning records into
nodes (and back), a type registry for retagging, and a renderer producing
literal markdown for a document-shaped sub-tree. They travel together in a
``ConversionContext`` so tests can substitute fakes for any of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from clausemark.ast.nodes import Document
from clausemark.options.markdown import MarkdownRendererOptions
from clausemark.renderers.markdown import MarkdownRenderer
from clausemark.schema.registry import TypeRegistry, default_registry
from clausemark.schema.validator import SchemaValidator


class RecordValidator(Protocol):
    """Protocol for validators converting between nodes and records.

    ``to_dict`` is a lossless dump including the ``"node_type"`` kind name;
    ``from_dict`` builds a node of the concrete kind, raising
    ``SchemaValidationError`` for records that do not fit the schema.
    """

    def to_dict(self, node: Any) -> dict[str, Any]: ...

    def from_dict(self, record: Any, expected: type | None = None) -> Any: ...


class DocumentRenderer(Protocol):
    """Protocol for renderer callables turning a plain document into text."""

    def __call__(self, document: Document) -> str: ...


@dataclass(frozen=True)
class ConversionContext:
    """Capability bundle for ``UnwrapTransformer``.

    Parameters
    ----------
    validator : RecordValidator
        Converts nodes to records and validates records into nodes
    registry : TypeRegistry
        Resolves kind names when retagging
    renderer : DocumentRenderer
        Renders a plain ``Document`` to literal markdown

    """

    validator: RecordValidator
    registry: TypeRegistry
    renderer: DocumentRenderer

    @classmethod
    def default(cls, renderer_options: MarkdownRendererOptions | None = None) -> ConversionContext:
        """Build a context from the default registry, validator and markdown renderer.

        Parameters
        ----------
        renderer_options : MarkdownRendererOptions or None, default = None
            Options for the markdown renderer

        Returns
        -------
        ConversionContext
            Context sharing one registry between validator and retagging

        """
        registry = default_registry()
        return cls(
            validator=SchemaValidator(registry),
            registry=registry,
            renderer=MarkdownRenderer(renderer_options),
        )
