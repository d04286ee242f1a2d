#  Copyright (c) 2025 Tom Villani, Ph.D.
"""clausemark - rewrite annotated contract templates into plain markdown trees.

clausemark takes a document tree that mixes standard markdown nodes with
template-aware semantic nodes (clauses, bound lists and bound variables) and
produces an equivalent tree using only standard markdown nodes. The semantic
data survives in synthetic HTML-like tags carried by ``CodeBlock`` and
``HtmlInline`` nodes, so a markdown-only toolchain can round-trip the
document without losing template information.

Key Features
------------
- Bottom-up rewrite; nested clauses are converted before their parents
- Percent-encoded tag attributes for values that may hold markup
- Schema registry and validator for both node schemas
- JSON serialization of plain and annotated trees
- CommonMark renderer for plain trees

Examples
--------
Rewrite an annotated document and render it:

    >>> from clausemark import unwrap_document, MarkdownRenderer
    >>> from clausemark.ast import Clause, Document, Paragraph, Text, Variable
    >>> doc = Document(children=[
    ...     Clause(src="ap://payment@0.1", clauseid="c1", children=[
    ...         Paragraph(children=[Text(text="Buyer: "), Variable(id="buyer", value="Acme")]),
    ...     ])
    ... ])
    >>> plain = unwrap_document(doc)
    >>> print(MarkdownRenderer().render_to_string(plain))
    ```<clause src="ap://payment@0.1" clauseid="c1"/>
    Buyer: <variable id="buyer" value="Acme"/>
    ```

"""

from __future__ import annotations

__version__ = "1.0.0"

from clausemark.exceptions import (
    ClauseMarkError,
    InvalidOptionsError,
    RenderingError,
    SchemaValidationError,
    UnknownKindError,
    ValidationError,
)
from clausemark.options import MarkdownRendererOptions, UnwrapOptions
from clausemark.renderers.markdown import MarkdownRenderer
from clausemark.schema import SchemaValidator, TypeRegistry, default_registry
from clausemark.unwrap import ConversionContext, UnwrapTransformer, unwrap_document

__all__ = [
    "__version__",
    # Rewrite
    "ConversionContext",
    "UnwrapOptions",
    "UnwrapTransformer",
    "unwrap_document",
    # Collaborators
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "SchemaValidator",
    "TypeRegistry",
    "default_registry",
    # Exceptions
    "ClauseMarkError",
    "InvalidOptionsError",
    "RenderingError",
    "SchemaValidationError",
    "UnknownKindError",
    "ValidationError",
]
