#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/unwrap/transformer.py
"""Bottom-up rewrite of annotated trees into the plain schema.

``UnwrapTransformer`` walks a tree depth-first. Plain nodes are rebuilt with
their children transformed; each annotated kind is handed to its converter
after its own children have been converted, so a clause nested inside a
clause is already a code block when the outer clause renders its content.

The input tree is left untouched. A failure raised by the validator or the
renderer propagates to the caller and no result is produced.

Examples
--------
    >>> from clausemark.ast import Document, Paragraph, Variable
    >>> from clausemark.unwrap import unwrap_document
    >>> doc = Document(children=[Paragraph(children=[Variable(id="x", value="a b")])])
    >>> unwrap_document(doc).children[0].children[0].text
    '<variable id="x" value="a%20b"/>'

"""

from __future__ import annotations

import logging

from clausemark.ast.annotated import Clause, ComputedVariable, ConditionalVariable, ListVariable, Variable
from clausemark.ast.nodes import CodeBlock, HtmlInline, Node
from clausemark.ast.transforms import NodeTransformer
from clausemark.ast.visitors import AnnotatedNodeVisitor
from clausemark.options.unwrap import UnwrapOptions
from clausemark.unwrap.context import ConversionContext
from clausemark.unwrap.converters import (
    convert_clause,
    convert_conditional_variable,
    convert_list_variable,
    convert_variable,
)

logger = logging.getLogger(__name__)


class UnwrapTransformer(NodeTransformer, AnnotatedNodeVisitor):
    """Transformer converting every annotated node into plain nodes.

    Parameters
    ----------
    context : ConversionContext or None, default = None
        Validator, registry and renderer; ``ConversionContext.default()``
        when omitted
    options : UnwrapOptions or None, default = None
        Rewrite options; defaults when omitted

    """

    def __init__(self, context: ConversionContext | None = None, options: UnwrapOptions | None = None):
        """Initialize the transformer with its collaborators and options."""
        self.context = context or ConversionContext.default()
        self.options = options or UnwrapOptions()

    def visit_clause(self, node: Clause) -> CodeBlock:
        """Convert a clause after converting its children."""
        converted = Clause(src=node.src, clauseid=node.clauseid, children=self._transform_children(node.children))
        logger.debug(f"Converting clause {node.clauseid!r} ({node.src})")
        return convert_clause(converted, self.context)

    def visit_list_variable(self, node: ListVariable) -> CodeBlock:
        """Convert a bound list after converting its items."""
        converted = ListVariable(
            type=node.type,
            children=self._transform_children(node.children),
            start=node.start,
            tight=node.tight,
            delimiter=node.delimiter,
        )
        logger.debug(f"Converting {node.type} list variable with {len(converted.children)} item(s)")
        return convert_list_variable(converted, self.context)

    def visit_variable(self, node: Variable) -> HtmlInline:
        """Convert a variable."""
        logger.debug(f"Converting variable {node.id!r}")
        return convert_variable(node, self.context, self.options)

    def visit_computed_variable(self, node: ComputedVariable) -> HtmlInline:
        """Convert a computed variable."""
        logger.debug("Converting computed variable")
        return convert_variable(node, self.context, self.options)

    def visit_conditional_variable(self, node: ConditionalVariable) -> HtmlInline:
        """Convert a conditional variable."""
        logger.debug(f"Converting conditional variable {node.id!r}")
        return convert_conditional_variable(node, self.context, self.options)


def unwrap_document(
    node: Node,
    options: UnwrapOptions | None = None,
    context: ConversionContext | None = None,
) -> Node:
    """Rewrite an annotated tree into a new plain-schema tree.

    Parameters
    ----------
    node : Node
        Root of the annotated tree (usually a ``Document``)
    options : UnwrapOptions or None, default = None
        Rewrite options
    context : ConversionContext or None, default = None
        Collaborators; the default registry, validator and markdown renderer
        when omitted

    Returns
    -------
    Node
        Root of the rewritten tree. Running the rewrite again on it returns
        an equal tree.

    Raises
    ------
    SchemaValidationError
        If a synthesized node does not fit the plain schema
    UnknownKindError
        If a kind needed for retagging is missing from the registry

    """
    transformer = UnwrapTransformer(context=context, options=options)
    result = transformer.transform(node)
    logger.debug(f"Rewrote {type(node).__name__} tree")
    return result  # type: ignore[return-value]


__all__ = ["UnwrapTransformer", "unwrap_document"]
