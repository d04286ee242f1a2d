#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base classes for traversing and processing
AST nodes. ``NodeVisitor`` covers the plain schema; ``AnnotatedNodeVisitor``
adds one method per annotated kind, so a visitor meant to handle annotated
trees cannot be instantiated until it handles every semantic kind.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from clausemark.ast.annotated import Clause, ComputedVariable, ConditionalVariable, ListVariable, Variable
from clausemark.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    Item,
    LineBreak,
    Link,
    List,
    Node,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Abstract base class for plain-schema node visitors.

    Subclasses implement a visit_* method for each plain node kind. Nodes of
    kinds the visitor has no method for (annotated nodes, for a plain
    visitor) are routed to ``generic_visit``.

    Examples
    --------
    Simple visitor that counts text nodes:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     # ... remaining visit_* methods

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            The code block node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_html_block(self, node: HtmlBlock) -> Any:
        """Visit an HtmlBlock node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The list node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_item(self, node: Item) -> Any:
        """Visit an Item node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HtmlInline) -> Any:
        """Visit an HtmlInline node.

        Parameters
        ----------
        node : HtmlInline
            The inline HTML node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for node kinds without a visit_* method.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


class AnnotatedNodeVisitor(NodeVisitor):
    """Abstract base class for visitors of annotated trees.

    Adds one abstract method per semantic kind to the plain visitor
    interface. Adding a kind to the annotated schema means adding a method
    here, which every concrete annotated visitor must then implement.

    """

    @abstractmethod
    def visit_clause(self, node: Clause) -> Any:
        """Visit a Clause node.

        Parameters
        ----------
        node : Clause
            The clause node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_variable(self, node: ListVariable) -> Any:
        """Visit a ListVariable node."""
        pass

    @abstractmethod
    def visit_variable(self, node: Variable) -> Any:
        """Visit a Variable node."""
        pass

    @abstractmethod
    def visit_computed_variable(self, node: ComputedVariable) -> Any:
        """Visit a ComputedVariable node."""
        pass

    @abstractmethod
    def visit_conditional_variable(self, node: ConditionalVariable) -> Any:
        """Visit a ConditionalVariable node."""
        pass
