#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

Two node schemas share one class hierarchy:

- nodes: the plain markdown schema (and the TagInfo/Attribute descriptors)
- annotated: template-aware semantic nodes that may appear in a plain tree
- visitors: visitor base classes for both schemas
- transforms: construct-then-replace transformer and traversal helpers
- serialization: JSON round trip through the schema validator

Examples
--------
Build an annotated tree:

    >>> from clausemark.ast import Clause, Document, Paragraph, Text, Variable
    >>> doc = Document(children=[
    ...     Clause(src="ap://late-delivery@0.1", clauseid="c1", children=[
    ...         Paragraph(children=[Text(text="Seller: "), Variable(id="seller", value="Acme")])
    ...     ])
    ... ])

"""

from __future__ import annotations

from clausemark.ast.annotated import Clause, ComputedVariable, ConditionalVariable, ListVariable, Variable
from clausemark.ast.nodes import (
    Attribute,
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
    TagInfo,
    Text,
    ThematicBreak,
    get_node_children,
    replace_node_children,
)
from clausemark.ast.transforms import NodeCollector, NodeTransformer, clone_node, extract_nodes
from clausemark.ast.visitors import AnnotatedNodeVisitor, NodeVisitor

__all__ = [
    # Plain schema
    "Attribute",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HtmlBlock",
    "HtmlInline",
    "Image",
    "Item",
    "LineBreak",
    "Link",
    "List",
    "Node",
    "Paragraph",
    "Strong",
    "TagInfo",
    "Text",
    "ThematicBreak",
    # Annotated schema
    "Clause",
    "ComputedVariable",
    "ConditionalVariable",
    "ListVariable",
    "Variable",
    # Visitors and transforms
    "AnnotatedNodeVisitor",
    "NodeCollector",
    "NodeTransformer",
    "NodeVisitor",
    "clone_node",
    "extract_nodes",
    "get_node_children",
    "replace_node_children",
]
