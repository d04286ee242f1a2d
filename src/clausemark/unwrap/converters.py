#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/unwrap/converters.py
"""Conversions from annotated nodes to plain-schema nodes.

Each converter is a pure function taking a source node (whose children have
already been converted) and the conversion context, and returning a new
plain node. The source node is never modified.

Containers (``Clause``, ``ListVariable``) become ``CodeBlock`` nodes whose
text is the rendered markdown of their content. Bound variables become
``HtmlInline`` nodes holding a self-closing synthetic tag, or the raw bound
value when variables are not wrapped. Every result is built as a record and
passed through the validator, so a result that does not fit the plain
schema fails with ``SchemaValidationError``.

"""

from __future__ import annotations

from typing import Any, Union

from clausemark.ast.annotated import Clause, ComputedVariable, ConditionalVariable, ListVariable, Variable
from clausemark.ast.nodes import CodeBlock, Document, HtmlInline
from clausemark.constants import (
    CLAUSE_TAG,
    COMPUTED_TAG,
    CONDITIONAL_TAG,
    LIST_TAG,
    MARKDOWN_DOCUMENT_XMLNS,
    NODE_TYPE_KEY,
    VARIABLE_TAG,
)
from clausemark.options.unwrap import UnwrapOptions
from clausemark.schema.registry import plain_kind_name
from clausemark.unwrap.context import ConversionContext
from clausemark.unwrap.tags import build_tag, format_attribute_string, self_closing_tag


def _plain_kind(context: ConversionContext, name: str) -> str:
    return context.registry.kind_by_name(plain_kind_name(name)).qualified_name


def _render_records(context: ConversionContext, children: list[dict[str, Any]]) -> str:
    """Render child records wrapped in a synthetic document."""
    wrapper = {
        NODE_TYPE_KEY: _plain_kind(context, "Document"),
        "xmlns": MARKDOWN_DOCUMENT_XMLNS,
        "children": children,
    }
    document = context.validator.from_dict(wrapper, expected=Document)
    return context.renderer(document)


def _container_block(context: ConversionContext, content: str, info: str, tag: dict[str, Any]) -> CodeBlock:
    candidate = {
        NODE_TYPE_KEY: _plain_kind(context, "CodeBlock"),
        # Exactly one trailing newline
        "text": content.rstrip("\n") + "\n",
        "info": info,
        "tag": tag,
    }
    return context.validator.from_dict(candidate, expected=CodeBlock)


def _inline_tag(context: ConversionContext, text: str, tag: dict[str, Any]) -> HtmlInline:
    candidate = {NODE_TYPE_KEY: _plain_kind(context, "HtmlInline"), "text": text, "tag": tag}
    return context.validator.from_dict(candidate, expected=HtmlInline)


def convert_clause(node: Clause, context: ConversionContext) -> CodeBlock:
    """Convert a clause into a code block carrying its rendered content.

    Parameters
    ----------
    node : Clause
        Clause whose children are already plain
    context : ConversionContext
        Collaborators

    Returns
    -------
    CodeBlock
        Block with ``info='<clause src=".." clauseid=".."/>'`` and an open
        ``clause`` tag whose content is the rendered children

    Raises
    ------
    SchemaValidationError
        If the clause's children or the resulting block do not fit the plain schema
    RenderingError
        If an annotated node is still present among the children

    """
    record = context.validator.to_dict(node)
    content = _render_records(context, record.get("children", []))

    attributes = [("src", node.src, False), ("clauseid", node.clauseid, False)]
    attribute_string = format_attribute_string(attributes)
    tag = build_tag(
        CLAUSE_TAG,
        attribute_string,
        content=content,
        closed=False,
        attributes=[(name, value) for name, value, _ in attributes],
    )
    return _container_block(context, content, self_closing_tag(CLAUSE_TAG, attribute_string), tag)


def convert_list_variable(node: ListVariable, context: ConversionContext) -> CodeBlock:
    """Convert a bound list into a code block carrying the rendered list.

    The node's record is retagged as a plain ``List`` (its list fields are
    valid ``List`` fields) and rendered as the sole block of a document.

    Parameters
    ----------
    node : ListVariable
        Bound list whose items are already plain
    context : ConversionContext
        Collaborators

    Returns
    -------
    CodeBlock
        Block with ``info="<list/>"`` and an open ``list`` tag without attributes

    Raises
    ------
    UnknownKindError
        If the registry has no plain ``List`` kind

    """
    record = context.validator.to_dict(node)
    record[NODE_TYPE_KEY] = context.registry.kind_by_name(plain_kind_name("List")).qualified_name
    content = _render_records(context, [record])

    tag = build_tag(LIST_TAG, "", content=content, closed=False)
    return _container_block(context, content, self_closing_tag(LIST_TAG), tag)


def convert_variable(
    node: Union[Variable, ComputedVariable],
    context: ConversionContext,
    options: UnwrapOptions | None = None,
) -> HtmlInline:
    """Convert a variable or computed variable into inline HTML.

    ``value`` and ``format`` are percent-encoded in the attribute string;
    ``id`` is written verbatim. ``format`` appears in the attribute string
    only, not in the tag's attribute list.

    Parameters
    ----------
    node : Variable or ComputedVariable
        Variable to convert
    context : ConversionContext
        Collaborators
    options : UnwrapOptions or None, default = None
        Rewrite options; defaults when omitted

    Returns
    -------
    HtmlInline
        ``<variable id=".." value=".."/>`` (``<computed value=".."/>``), or
        with ``wrap_variables=False`` the raw value (``{{value}}`` for a
        computed variable)

    """
    options = options or UnwrapOptions()
    computed = isinstance(node, ComputedVariable)
    tag_name = COMPUTED_TAG if computed else VARIABLE_TAG

    attributes: list[tuple[str, str, bool]] = []
    if not computed:
        attributes.append(("id", node.id, False))  # type: ignore[union-attr]
    attributes.append(("value", node.value, True))
    tag_attributes = [(name, value) for name, value, _ in attributes]
    if node.format:
        attributes.append(("format", node.format, True))
    attribute_string = format_attribute_string(attributes)

    if options.wrap_variables:
        text = self_closing_tag(tag_name, attribute_string)
    elif computed:
        text = "{{" + node.value + "}}"
    else:
        text = node.value

    tag = build_tag(tag_name, attribute_string, closed=True, attributes=tag_attributes)
    return _inline_tag(context, text, tag)


def convert_conditional_variable(
    node: ConditionalVariable,
    context: ConversionContext,
    options: UnwrapOptions | None = None,
) -> HtmlInline:
    """Convert a conditional variable into inline HTML.

    Attributes are always ``id, value, whenTrue, whenFalse`` in that order;
    all but ``id`` are percent-encoded.

    Parameters
    ----------
    node : ConditionalVariable
        Conditional to convert
    context : ConversionContext
        Collaborators
    options : UnwrapOptions or None, default = None
        Rewrite options; defaults when omitted

    Returns
    -------
    HtmlInline
        ``<if id=".." value=".." whenTrue=".." whenFalse=".."/>``, or the raw
        value with ``wrap_variables=False``

    """
    options = options or UnwrapOptions()
    attributes = [
        ("id", node.id, False),
        ("value", node.value, True),
        ("whenTrue", node.when_true, True),
        ("whenFalse", node.when_false, True),
    ]
    attribute_string = format_attribute_string(attributes)
    text = self_closing_tag(CONDITIONAL_TAG, attribute_string) if options.wrap_variables else node.value

    tag = build_tag(
        CONDITIONAL_TAG,
        attribute_string,
        closed=True,
        attributes=[(name, value) for name, value, _ in attributes],
    )
    return _inline_tag(context, text, tag)


__all__ = [
    "convert_clause",
    "convert_conditional_variable",
    "convert_list_variable",
    "convert_variable",
]
