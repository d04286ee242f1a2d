#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/renderers/markdown.py
"""Markdown rendering from the plain schema.

This module provides the MarkdownRenderer class which converts plain-schema
AST nodes to CommonMark text. It is the default renderer used by the
annotated to plain rewrite to produce the literal body of converted clauses
and bound lists.

The rendering process uses the visitor pattern to traverse the AST. Block
children of list items and block quotes are rendered to strings first and
then prefixed line by line, so nested structures (a converted clause inside
a list item, a list inside a quote) keep their indentation.

Annotated nodes have no markdown form; handing one to the renderer raises
``RenderingError``.

"""

from __future__ import annotations

import re

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
from clausemark.ast.visitors import NodeVisitor
from clausemark.exceptions import RenderingError
from clausemark.options.markdown import MarkdownRendererOptions
from clausemark.renderers.base import BaseRenderer, InlineContentMixin

_ORDERED_DELIMITERS = {"period": ".", "paren": ")"}
_ORDERED_MARKER_DIGITS = re.compile(r"[0-9]{1,9}")


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render plain-schema AST nodes to markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from clausemark.ast import Document, Heading, Text
        >>> from clausemark.renderers.markdown import MarkdownRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, children=[Text(text="Title")])
        ... ])
        >>> renderer = MarkdownRenderer()
        >>> print(renderer.render_to_string(doc))
        # Title

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._list_marker_stack: list[str] = []
        self._tight_stack: list[bool] = []

    def __call__(self, document: Document) -> str:
        """Render a document; lets the renderer be used as a plain callable."""
        return self.render_to_string(document)

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to markdown string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Markdown text with trailing whitespace removed

        Raises
        ------
        RenderingError
            If the tree contains annotated nodes

        """
        self._output = []
        self._list_marker_stack = []
        self._tight_stack = []

        document.accept(self)

        result = "".join(self._output)

        self._output.clear()
        self._list_marker_stack.clear()
        self._tight_stack.clear()

        return self._cleanup_output(result)

    def _cleanup_output(self, text: str) -> str:
        """Clean up the final output.

        Only trailing whitespace is removed; code and HTML block bodies are
        emitted exactly as given.

        Parameters
        ----------
        text : str
            Raw markdown text

        Returns
        -------
        str
            Cleaned markdown text

        """
        return text.rstrip()

    def _escape_markdown(self, text: str) -> str:
        """Escape special markdown characters with context awareness.

        - Always escapes backslash, backticks, asterisks, braces, brackets,
          ``<`` and ``&``, so text never reads as inline HTML or an entity
        - Escapes block markers (``#``, ``>``, ``-``, ``+``, ``=``, ``~`` and
          the delimiter of ``1.``/``1)``) only at the start of a line
        - Does not escape _ in the middle of words (e.g., snake_case)

        Parameters
        ----------
        text : str
            Text to escape

        Returns
        -------
        str
            Escaped text

        """
        if not self.options.escape_special:
            return text

        always_escape = r"\`*{}[]<&"
        line_start_escape = "#>-+=~"

        escaped_chars = []
        line_start = 0
        for i, char in enumerate(text):
            if char == "\n":
                line_start = i + 1

            if char in always_escape:
                escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char in line_start_escape:
                if i == line_start:
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char in ".)":
                # Ordered list marker: up to nine digits at line start
                if _ORDERED_MARKER_DIGITS.fullmatch(text[line_start:i]):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "_":
                prev_alnum = i > 0 and text[i - 1].isalnum()
                next_alnum = i < len(text) - 1 and text[i + 1].isalnum()

                if not (prev_alnum and next_alnum):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            else:
                escaped_chars.append(char)

        return "".join(escaped_chars)

    @staticmethod
    def _prefix_lines(text: str, prefix: str, skip_first: bool = False) -> str:
        """Prefix every non-empty line of ``text``.

        Parameters
        ----------
        text : str
            Multi-line text
        prefix : str
            Prefix to add
        skip_first : bool, default = False
            Leave the first line unprefixed (it follows a list marker)

        Returns
        -------
        str
            Prefixed text

        """
        lines = text.split("\n")
        prefixed = []
        for i, line in enumerate(lines):
            if (i == 0 and skip_first) or not line:
                prefixed.append(line)
            else:
                prefixed.append(prefix + line)
        return "\n".join(prefixed)

    def _get_bullet_symbol(self, depth: int) -> str:
        """Get the bullet symbol for a given nesting depth.

        Parameters
        ----------
        depth : int
            Nesting depth (0-based)

        Returns
        -------
        str
            Bullet character

        """
        symbols = self.options.bullet_symbols
        return symbols[depth % len(symbols)]

    def _join_blocks(self, children: list[Node], separator: str = "\n\n") -> str:
        blocks = [self._render_inline_content([child]) for child in children]
        if self.options.collapse_blank_lines:
            # Empty blocks would stack separators into runs of blank lines
            blocks = [block for block in blocks if block]
        return separator.join(blocks)

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Parameters
        ----------
        node : Document
            Document to render

        """
        self._output.append(self._join_blocks(node.children))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        content = self._render_inline_content(node.children)
        level = max(1, min(6, node.level))
        self._output.append(f"{'#' * level} {content}")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.children))

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The info string follows the opening fence. The fence is lengthened
        past the longest run of the fence character in the content, so a
        code block holding rendered markdown with its own fences stays
        intact. An info string containing a backtick cannot follow a
        backtick fence, so such blocks are fenced with tildes.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        info = node.info or ""
        fence_char = self.options.code_fence_char
        if fence_char == "`" and "`" in info:
            fence_char = "~"

        fence_length = self.options.code_fence_min
        if fence_char in node.text:
            max_consecutive = 0
            current_consecutive = 0
            for char in node.text:
                if char == fence_char:
                    current_consecutive += 1
                    max_consecutive = max(max_consecutive, current_consecutive)
                else:
                    current_consecutive = 0
            fence_length = max(fence_length, max_consecutive + 1)

        fence = fence_char * fence_length

        self._output.append(f"{fence}{info}\n")
        self._output.append(node.text)
        if not node.text.endswith("\n"):
            self._output.append("\n")
        self._output.append(fence)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node.

        Parameters
        ----------
        node : BlockQuote
            Block quote to render

        """
        quoted = self._join_blocks(node.children)
        quoted_lines = ["> " + line if line else ">" for line in quoted.split("\n")]
        self._output.append("\n".join(quoted_lines))

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Bullet lists cycle through ``bullet_symbols`` by nesting depth;
        ordered lists count up from ``start`` using the node's delimiter.

        Parameters
        ----------
        node : List
            List to render

        """
        start = node.start if node.start is not None else 1
        delimiter = _ORDERED_DELIMITERS.get(node.delimiter or "period", ".")
        depth = sum(1 for marker in self._list_marker_stack if marker)

        rendered_items = []
        self._tight_stack.append(node.tight)
        for i, item in enumerate(node.children):
            if node.type == "ordered":
                marker = f"{start + i}{delimiter} "
            else:
                marker = f"{self._get_bullet_symbol(depth)} "

            self._list_marker_stack.append(marker)
            rendered_items.append(self._render_inline_content([item]))
            self._list_marker_stack.pop()
        self._tight_stack.pop()

        self._output.append(("\n" if node.tight else "\n\n").join(rendered_items))

    def visit_item(self, node: Item) -> None:
        """Render an Item node.

        The first child follows the marker; later lines and children are
        indented by the marker width.

        Parameters
        ----------
        node : Item
            List item to render

        """
        marker = self._list_marker_stack[-1] if self._list_marker_stack else "* "
        tight = self._tight_stack[-1] if self._tight_stack else True

        # Nested lists inside this item count towards bullet depth
        self._list_marker_stack.append("")
        content = self._join_blocks(node.children, "\n" if tight else "\n\n")
        self._list_marker_stack.pop()

        if not content:
            self._output.append(marker.rstrip())
            return

        indent = " " * len(marker)
        self._output.append(marker + self._prefix_lines(content, indent, skip_first=True))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("---")

    def visit_html_block(self, node: HtmlBlock) -> None:
        """Render an HtmlBlock node verbatim."""
        self._output.append(node.text.rstrip("\n"))

    def visit_text(self, node: Text) -> None:
        """Render a Text node.

        Parameters
        ----------
        node : Text
            Text to render

        """
        self._output.append(self._escape_markdown(node.text))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.children)
        symbol = self.options.emphasis_symbol
        self._output.append(f"{symbol}{content}{symbol}")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.children)
        self._output.append(f"**{content}**")

    def visit_code(self, node: Code) -> None:
        """Render a Code node.

        Parameters
        ----------
        node : Code
            Code to render

        """
        longest_run = max((len(run) for run in re.findall(r"`+", node.text)), default=0)
        backticks = "`" * (longest_run + 1)

        text = node.text
        # Parsers strip one space from each side of a span that has both
        if text.startswith("`") or text.endswith("`") or (text.startswith(" ") and text.endswith(" ") and text.strip()):
            text = f" {text} "
        self._output.append(f"{backticks}{text}{backticks}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.children)
        if node.title:
            self._output.append(f'[{content}]({node.destination} "{node.title}")')
        else:
            self._output.append(f"[{content}]({node.destination})")

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        alt = self._render_inline_content(node.children)
        if node.title:
            self._output.append(f'![{alt}]({node.destination} "{node.title}")')
        else:
            self._output.append(f"![{alt}]({node.destination})")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node.

        Parameters
        ----------
        node : LineBreak
            Line break to render

        """
        if node.soft:
            self._output.append("\n")
        else:
            self._output.append("  \n")

    def visit_html_inline(self, node: HtmlInline) -> None:
        """Render an HtmlInline node verbatim.

        Parameters
        ----------
        node : HtmlInline
            Inline HTML to render

        """
        self._output.append(node.text)

    def generic_visit(self, node: Node) -> None:
        """Reject nodes outside the plain schema.

        Raises
        ------
        RenderingError
            Always; annotated nodes must be converted before rendering

        """
        raise RenderingError(
            f"Cannot render {type(node).__name__} node as markdown; convert annotated nodes first",
            node_type=type(node).__name__,
        )
