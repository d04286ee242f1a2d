#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/unwrap/tags.py
"""Synthetic tag encoding.

Converted nodes carry their semantic data in an HTML-like tag such as
``<variable id="seller" value="Acme%20Corp"/>``. Attribute values that may
hold markup-significant characters are percent-encoded with the same rules
as JavaScript's ``encodeURIComponent``: everything except ASCII letters,
digits and ``- _ . ! ~ * ' ( )`` is written as UTF-8 ``%XX`` escapes.
Identifier attributes (``id``, ``src``, ``clauseid``) are written verbatim.

Examples
--------
    >>> percent_encode("1+1")
    '1%2B1'
    >>> format_attribute_string([("id", "x", False), ("value", "a b", True)])
    'id="x" value="a%20b"'

"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
from urllib.parse import quote, unquote

from clausemark.constants import NODE_TYPE_KEY, PERCENT_ENCODE_SAFE
from clausemark.schema.registry import plain_kind_name


def percent_encode(value: str) -> str:
    """Percent-encode a string like ``encodeURIComponent``.

    Parameters
    ----------
    value : str
        Text to encode

    Returns
    -------
    str
        Encoded text containing only unreserved characters and ``%XX`` escapes

    """
    return quote(value, safe=PERCENT_ENCODE_SAFE)


def percent_decode(value: str) -> str:
    """Reverse ``percent_encode``; ``+`` is left as-is."""
    return unquote(value)


def format_attribute_string(attributes: Iterable[tuple[str, str, bool]]) -> str:
    """Join attributes as ``name="value"`` pairs separated by single spaces.

    Parameters
    ----------
    attributes : iterable of (str, str, bool)
        ``(name, value, encode)`` triples in output order; ``encode`` selects
        percent-encoding of the value

    Returns
    -------
    str
        Serialized attribute text

    """
    return " ".join(f'{name}="{percent_encode(value) if encode else value}"' for name, value, encode in attributes)


def self_closing_tag(tag_name: str, attribute_string: str = "") -> str:
    """Build a self-closing tag, ``<name attrs/>`` or ``<name/>``."""
    if attribute_string:
        return f"<{tag_name} {attribute_string}/>"
    return f"<{tag_name}/>"


def build_tag(
    tag_name: str,
    attribute_string: str,
    content: str = "",
    closed: bool = True,
    attributes: Sequence[tuple[str, str]] = (),
) -> dict[str, Any]:
    """Build the record of a tag descriptor.

    Parameters
    ----------
    tag_name : str
        Tag name
    attribute_string : str
        Serialized attribute text (see ``format_attribute_string``)
    content : str, default = ""
        Inner literal text
    closed : bool, default = True
        Whether the tag is self-closing
    attributes : sequence of (str, str), default = ()
        ``(name, value)`` pairs with unencoded values

    Returns
    -------
    dict
        ``TagInfo`` record ready for schema validation

    """
    return {
        NODE_TYPE_KEY: plain_kind_name("TagInfo"),
        "tagName": tag_name,
        "attributeString": attribute_string,
        "content": content,
        "closed": closed,
        "attributes": [
            {NODE_TYPE_KEY: plain_kind_name("Attribute"), "name": name, "value": value} for name, value in attributes
        ],
    }


__all__ = [
    "build_tag",
    "format_attribute_string",
    "percent_decode",
    "percent_encode",
    "self_closing_tag",
]
