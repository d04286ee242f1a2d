#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/ast/transforms.py
"""AST transformation and traversal utilities.

This module provides the construct-then-replace transformer base class used by
the annotated to plain rewrite, along with helpers for collecting and cloning
nodes.

Examples
--------
Collect all inline HTML nodes from a document:

    >>> from clausemark.ast import transforms
    >>> tags = transforms.extract_nodes(doc, HtmlInline)

Snapshot a tree before handing it to code that mutates nodes:

    >>> snapshot = transforms.clone_node(doc)

"""

from __future__ import annotations

import copy
from typing import Callable, Type

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
    get_node_children,
    replace_node_children,
)
from clausemark.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses implement visit_* methods that return replacement nodes, or
    None to remove a node. The transformer never mutates its input: every
    visited node is rebuilt, and the result is a new tree with the
    transformations applied.

    Nodes of kinds without a visit_* method are passed through unchanged
    apart from having their children transformed.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(text=node.text.upper())
    >>>
    >>> transformer = UppercaseTransformer()
    >>> new_doc = transformer.transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes.

        Parameters
        ----------
        children : list of Node
            Children to transform

        Returns
        -------
        list of Node
            Transformed children (filtered for None values)

        """
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform nodes generically using traversal helpers.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Copy of the node with its children transformed

        """
        transformed = replace_node_children(node, self._transform_children(get_node_children(node)))
        if transformed is node:
            # Leaf node - return a copy
            return copy.copy(node)
        return transformed

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children), xmlns=node.xmlns)

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Transform a BlockQuote node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak:
        """Transform a ThematicBreak node."""
        return ThematicBreak()

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return CodeBlock(text=node.text, info=node.info, tag=copy.deepcopy(node.tag))

    def visit_html_block(self, node: HtmlBlock) -> HtmlBlock:
        """Transform an HtmlBlock node."""
        return HtmlBlock(text=node.text, tag=copy.deepcopy(node.tag))

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return List(
            type=node.type,
            children=self._transform_children(node.children),
            start=node.start,
            tight=node.tight,
            delimiter=node.delimiter,
        )

    def visit_item(self, node: Item) -> Item:
        """Transform an Item node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> Text:
        """Transform a Text node."""
        return Text(text=node.text)

    def visit_emphasis(self, node: Emphasis) -> Emphasis:
        """Transform an Emphasis node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong:
        """Transform a Strong node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code:
        """Transform a Code node."""
        return Code(text=node.text)

    def visit_link(self, node: Link) -> Link:
        """Transform a Link node."""
        return Link(destination=node.destination, children=self._transform_children(node.children), title=node.title)

    def visit_image(self, node: Image) -> Image:
        """Transform an Image node."""
        return Image(destination=node.destination, children=self._transform_children(node.children), title=node.title)

    def visit_line_break(self, node: LineBreak) -> LineBreak:
        """Transform a LineBreak node."""
        return LineBreak(soft=node.soft)

    def visit_html_inline(self, node: HtmlInline) -> HtmlInline:
        """Transform an HtmlInline node."""
        return HtmlInline(text=node.text, tag=copy.deepcopy(node.tag))

    def generic_visit(self, node: Node) -> Node:
        """Pass through a node of a kind without a visit_* method."""
        return self._generic_transform(node)


class NodeCollector(NodeVisitor):
    """Visitor that collects nodes matching a condition, in pre-order.

    Parameters
    ----------
    predicate : callable or None, default = None
        Function that takes a node and returns True to collect it

    """

    def __init__(self, predicate: Callable[[Node], bool] | None = None):
        """Initialize the collector with an optional predicate function."""
        self.predicate = predicate or (lambda n: True)
        self.collected: list[Node] = []

    def _generic_visit(self, node: Node) -> None:
        if self.predicate(node):
            self.collected.append(node)
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Visit a Document node."""
        self._generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Visit a Paragraph node."""
        self._generic_visit(node)

    def visit_heading(self, node: Heading) -> None:
        """Visit a Heading node."""
        self._generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Visit a BlockQuote node."""
        self._generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Visit a ThematicBreak node."""
        self._generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Visit a CodeBlock node."""
        self._generic_visit(node)

    def visit_html_block(self, node: HtmlBlock) -> None:
        """Visit an HtmlBlock node."""
        self._generic_visit(node)

    def visit_list(self, node: List) -> None:
        """Visit a List node."""
        self._generic_visit(node)

    def visit_item(self, node: Item) -> None:
        """Visit an Item node."""
        self._generic_visit(node)

    def visit_text(self, node: Text) -> None:
        """Visit a Text node."""
        self._generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Visit an Emphasis node."""
        self._generic_visit(node)

    def visit_strong(self, node: Strong) -> None:
        """Visit a Strong node."""
        self._generic_visit(node)

    def visit_code(self, node: Code) -> None:
        """Visit a Code node."""
        self._generic_visit(node)

    def visit_link(self, node: Link) -> None:
        """Visit a Link node."""
        self._generic_visit(node)

    def visit_image(self, node: Image) -> None:
        """Visit an Image node."""
        self._generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> None:
        """Visit a LineBreak node."""
        self._generic_visit(node)

    def visit_html_inline(self, node: HtmlInline) -> None:
        """Visit an HtmlInline node."""
        self._generic_visit(node)

    def generic_visit(self, node: Node) -> None:
        """Visit a node of any other kind (annotated nodes included)."""
        self._generic_visit(node)


def clone_node(node: Node) -> Node:
    """Create a deep copy of an AST node.

    Parameters
    ----------
    node : Node
        Node to clone

    Returns
    -------
    Node
        Deep copy of the node

    Examples
    --------
    >>> cloned_doc = clone_node(doc)
    >>> cloned_doc is doc
    False

    """
    return copy.deepcopy(node)


def extract_nodes(root: Node, node_type: Type[Node] | None = None) -> list[Node]:
    """Extract all nodes of a specific type from a tree.

    Parameters
    ----------
    root : Node
        Root of the tree to extract from
    node_type : type or None, default = None
        Node type to extract (None for all nodes)

    Returns
    -------
    list of Node
        All matching nodes, in pre-order

    Examples
    --------
    >>> variables = extract_nodes(doc, Variable)

    """
    predicate = (lambda n: isinstance(n, node_type)) if node_type else (lambda n: True)
    collector = NodeCollector(predicate=predicate)
    root.accept(collector)
    return collector.collected
