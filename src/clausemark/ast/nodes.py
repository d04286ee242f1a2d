#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/ast/nodes.py
"""AST node classes for the plain markdown schema.

This module defines the node hierarchy of the *plain* schema: standard
markdown block and inline nodes only. It is the target of the annotated to
plain rewrite, and the only schema the markdown renderer understands.

Two auxiliary descriptors, ``TagInfo`` and ``Attribute``, describe a
synthetic HTML-like tag. They are attached to ``CodeBlock``, ``HtmlBlock``
and ``HtmlInline`` nodes to carry semantic information that has no other
place in plain markdown.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Paragraph, Heading, BlockQuote, ThematicBreak
    - CodeBlock, HtmlBlock, List, Item

Inline nodes:
    - Text, Emphasis, Strong, Code, Link, Image, LineBreak, HtmlInline

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional

from clausemark.constants import MARKDOWN_DOCUMENT_XMLNS, ListDelimiter, ListType


@dataclass
class Attribute:
    """A single ``name="value"`` pair of a synthetic tag.

    Parameters
    ----------
    name : str
        Attribute name
    value : str
        Attribute value, stored unescaped. Percent-encoding only ever appears
        in ``TagInfo.attribute_string``.

    """

    name: str
    value: str


@dataclass
class TagInfo:
    """Descriptor of a synthetic HTML-like tag.

    Parameters
    ----------
    tag_name : str
        Tag name (e.g. ``"clause"``, ``"variable"``)
    attribute_string : str
        Exact serialized attribute text, ``name="value"`` pairs joined by
        single spaces in attribute order
    content : str
        Inner literal text; empty for self-closing tags
    closed : bool
        True for a self-closing tag, False for a tag with a body
    attributes : list of Attribute, default = empty list
        Ordered attribute pairs

    """

    tag_name: str
    attribute_string: str
    content: str
    closed: bool
    attributes: list[Attribute] = field(default_factory=list)


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes, plain and annotated, inherit from this base class
    and support the visitor pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    xmlns : str, default = markdown document namespace
        Namespace marker identifying the tree as a markdown document

    """

    children: list[Node] = field(default_factory=list)
    xmlns: str = MARKDOWN_DOCUMENT_XMLNS

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes forming the paragraph

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node with level and inline content.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    children : list of Node, default = empty list
        Inline nodes forming the heading text

    """

    level: int
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block node.

    Besides ordinary code, a code block is the carrier for a converted
    container (clause or bound list): ``text`` then holds the rendered
    markdown of the container's children, ``info`` a human-readable tag
    summary written after the opening fence, and ``tag`` the full tag
    descriptor.

    Parameters
    ----------
    text : str
        Literal content (not parsed as markdown)
    info : str or None, default = None
        Info string written after the opening fence
    tag : TagInfo or None, default = None
        Synthetic tag descriptor

    """

    text: str
    info: Optional[str] = None
    tag: Optional[TagInfo] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_code_block method

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)


@dataclass
class HtmlBlock(Node):
    """Raw HTML block node.

    Parameters
    ----------
    text : str
        Raw HTML content, emitted verbatim
    tag : TagInfo or None, default = None
        Synthetic tag descriptor

    """

    text: str
    tag: Optional[TagInfo] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


@dataclass
class List(Node):
    """List node (ordered or bullet).

    Parameters
    ----------
    type : {'bullet', 'ordered'}
        List kind
    children : list of Item, default = empty list
        List items
    start : int or None, default = None
        Starting number for ordered lists (1 when unset)
    tight : bool, default = True
        Whether the list is tight (no blank lines between items)
    delimiter : {'period', 'paren'} or None, default = None
        Delimiter after ordered list numbers (period when unset)

    """

    type: ListType
    children: list[Node] = field(default_factory=list)
    start: Optional[int] = None
    tight: bool = True
    delimiter: Optional[ListDelimiter] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_list method

        Returns
        -------
        Any
            Result from visitor.visit_list(self)

        """
        return visitor.visit_list(self)


@dataclass
class Item(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_item(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    text : str
        Text content

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    text : str
        Code content

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    destination : str
        Link target
    children : list of Node, default = empty list
        Inline nodes forming the link text
    title : str or None, default = None
        Optional link title

    """

    destination: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    destination : str
        Image source
    children : list of Node, default = empty list
        Inline nodes forming the alternative text
    title : str or None, default = None
        Optional image title

    """

    destination: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for a soft break (plain newline), False for a hard break

    """

    soft: bool = False

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class HtmlInline(Node):
    """Inline HTML node.

    The carrier for converted bound variables: ``text`` holds the literal
    markup (usually a self-closing synthetic tag) and ``tag`` its descriptor.
    The text is emitted as-is, without sanitization.

    Parameters
    ----------
    text : str
        Raw inline HTML content
    tag : TagInfo or None, default = None
        Synthetic tag descriptor

    """

    text: str
    tag: Optional[TagInfo] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_html_inline method

        Returns
        -------
        Any
            Result from visitor.visit_html_inline(self)

        """
        return visitor.visit_html_inline(self)


def _has_children_field(node: Node) -> bool:
    return any(f.name == "children" for f in fields(node))  # type: ignore[arg-type]


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Works for plain and annotated nodes alike: every container kind keeps
    its ordered children in a ``children`` field.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> para = Paragraph(children=[Text(text="Hello"), Strong(children=[Text(text="world")])])
    >>> len(get_node_children(para))
    2

    """
    if _has_children_field(node):
        return list(node.children)  # type: ignore[attr-defined]
    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Create a copy of a node with replaced children.

    Parameters
    ----------
    node : Node
        The node to copy and modify
    new_children : list of Node
        New children to use in the copy

    Returns
    -------
    Node
        New node with replaced children, or the node itself for leaf kinds

    """
    if _has_children_field(node):
        return replace(node, children=new_children)  # type: ignore[type-var]
    return node
