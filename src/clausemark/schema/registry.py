#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/schema/registry.py
"""Type registry for the plain and annotated schemas.

The registry maps qualified kind names (``"<namespace>.<Name>"``) and node
classes to ``KindDescriptor`` objects. A descriptor lists the properties a
record of that kind may carry, which is what the schema validator enforces
when it turns a serialized record back into a node.

Examples
--------
Look up a kind by its qualified name:

    >>> registry = default_registry()
    >>> registry.kind_by_name("clausemark.plain.List").node_class
    <class 'clausemark.ast.nodes.List'>

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from clausemark.ast import annotated, nodes
from clausemark.constants import ANNOTATED_NAMESPACE, PLAIN_NAMESPACE
from clausemark.exceptions import UnknownKindError

_LIST_TYPES = ("bullet", "ordered")
_LIST_DELIMITERS = ("period", "paren")


@dataclass(frozen=True)
class Property:
    """A property declared by a kind.

    Parameters
    ----------
    key : str
        Name of the field in serialized records
    attr : str
        Name of the attribute on the node class
    type : type
        ``str``, ``bool`` or ``int`` for primitives; otherwise the class that
        nested records must be instances of (``Node``, ``TagInfo``,
        ``Attribute``)
    optional : bool, default = False
        Whether the field may be absent (or None)
    array : bool, default = False
        Whether the field holds a list of values of ``type``
    choices : tuple of str or None, default = None
        Allowed values for a string property

    """

    key: str
    attr: str
    type: type
    optional: bool = False
    array: bool = False
    choices: Optional[tuple[str, ...]] = None

    @property
    def is_primitive(self) -> bool:
        return self.type in (str, bool, int)


@dataclass(frozen=True)
class KindDescriptor:
    """Descriptor of one kind in a schema.

    Parameters
    ----------
    namespace : str
        Schema namespace the kind belongs to
    name : str
        Short kind name
    node_class : type
        Class instantiated for records of this kind
    properties : tuple of Property, default = ()
        Properties records of this kind may carry

    """

    namespace: str
    name: str
    node_class: type
    properties: tuple[Property, ...] = ()

    @property
    def qualified_name(self) -> str:
        """Fully qualified kind name, ``<namespace>.<name>``."""
        return f"{self.namespace}.{self.name}"

    def property_by_key(self, key: str) -> Property | None:
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None


class TypeRegistry:
    """Registry of kind descriptors.

    Kinds are registered once; both lookup directions (by qualified name and
    by node class) are exact.

    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._by_name: dict[str, KindDescriptor] = {}
        self._by_class: dict[type, KindDescriptor] = {}

    def register(self, descriptor: KindDescriptor) -> None:
        """Register a kind.

        Parameters
        ----------
        descriptor : KindDescriptor
            Kind to register

        Raises
        ------
        ValueError
            If the qualified name or the node class is already registered

        """
        if descriptor.qualified_name in self._by_name:
            raise ValueError(f"Kind already registered: {descriptor.qualified_name}")
        if descriptor.node_class in self._by_class:
            raise ValueError(f"Node class already registered: {descriptor.node_class.__name__}")
        self._by_name[descriptor.qualified_name] = descriptor
        self._by_class[descriptor.node_class] = descriptor

    def kind_by_name(self, qualified_name: str) -> KindDescriptor:
        """Resolve a kind by its qualified name.

        Parameters
        ----------
        qualified_name : str
            Name such as ``"clausemark.plain.CodeBlock"``

        Returns
        -------
        KindDescriptor
            The registered kind

        Raises
        ------
        UnknownKindError
            If no kind is registered under that name

        """
        try:
            return self._by_name[qualified_name]
        except KeyError:
            raise UnknownKindError(qualified_name) from None

    def kind_for_node(self, node: Any) -> KindDescriptor:
        """Resolve the kind of a node (or descriptor) instance.

        Raises
        ------
        UnknownKindError
            If the instance's class is not registered

        """
        try:
            return self._by_class[type(node)]
        except KeyError:
            raise UnknownKindError(type(node).__name__) from None

    def kinds(self, namespace: str | None = None) -> list[KindDescriptor]:
        """List registered kinds, optionally restricted to one namespace."""
        return [d for d in self._by_name.values() if namespace is None or d.namespace == namespace]

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._by_name


def _prop(
    key: str,
    type: type = str,
    attr: str | None = None,
    optional: bool = False,
    array: bool = False,
    choices: tuple[str, ...] | None = None,
) -> Property:
    return Property(key=key, attr=attr or key, type=type, optional=optional, array=array, choices=choices)


_CHILDREN = _prop("children", type=nodes.Node, optional=True, array=True)

_LIST_PROPERTIES = (
    _prop("type", choices=_LIST_TYPES),
    _prop("start", type=int, optional=True),
    _prop("tight", type=bool, optional=True),
    _prop("delimiter", optional=True, choices=_LIST_DELIMITERS),
    _CHILDREN,
)


def _plain_kinds() -> list[KindDescriptor]:
    tag = _prop("tag", type=nodes.TagInfo, optional=True)
    specs: list[tuple[type, tuple[Property, ...]]] = [
        (nodes.Attribute, (_prop("name"), _prop("value"))),
        (
            nodes.TagInfo,
            (
                _prop("tagName", attr="tag_name"),
                _prop("attributeString", attr="attribute_string"),
                _prop("content"),
                _prop("closed", type=bool),
                _prop("attributes", type=nodes.Attribute, optional=True, array=True),
            ),
        ),
        (nodes.Document, (_prop("xmlns", optional=True), _CHILDREN)),
        (nodes.Paragraph, (_CHILDREN,)),
        (nodes.Heading, (_prop("level", type=int), _CHILDREN)),
        (nodes.BlockQuote, (_CHILDREN,)),
        (nodes.ThematicBreak, ()),
        (nodes.CodeBlock, (_prop("text"), _prop("info", optional=True), tag)),
        (nodes.HtmlBlock, (_prop("text"), tag)),
        (nodes.List, _LIST_PROPERTIES),
        (nodes.Item, (_CHILDREN,)),
        (nodes.Text, (_prop("text"),)),
        (nodes.Emphasis, (_CHILDREN,)),
        (nodes.Strong, (_CHILDREN,)),
        (nodes.Code, (_prop("text"),)),
        (nodes.Link, (_prop("destination"), _prop("title", optional=True), _CHILDREN)),
        (nodes.Image, (_prop("destination"), _prop("title", optional=True), _CHILDREN)),
        (nodes.LineBreak, (_prop("soft", type=bool, optional=True),)),
        (nodes.HtmlInline, (_prop("text"), tag)),
    ]
    return [KindDescriptor(PLAIN_NAMESPACE, cls.__name__, cls, props) for cls, props in specs]


def _annotated_kinds() -> list[KindDescriptor]:
    specs: list[tuple[type, tuple[Property, ...]]] = [
        (annotated.Clause, (_prop("src"), _prop("clauseid"), _CHILDREN)),
        (annotated.ListVariable, _LIST_PROPERTIES),
        (annotated.Variable, (_prop("id"), _prop("value"), _prop("format", optional=True))),
        (annotated.ComputedVariable, (_prop("value"), _prop("format", optional=True))),
        (
            annotated.ConditionalVariable,
            (
                _prop("id"),
                _prop("value"),
                _prop("whenTrue", attr="when_true"),
                _prop("whenFalse", attr="when_false"),
            ),
        ),
    ]
    return [KindDescriptor(ANNOTATED_NAMESPACE, cls.__name__, cls, props) for cls, props in specs]


def default_registry() -> TypeRegistry:
    """Build a registry holding both the plain and the annotated schema.

    Returns
    -------
    TypeRegistry
        A new registry; callers may register further kinds on it

    """
    registry = TypeRegistry()
    for descriptor in _plain_kinds() + _annotated_kinds():
        registry.register(descriptor)
    return registry


def plain_kind_name(name: str) -> str:
    """Qualify a short kind name with the plain namespace."""
    return f"{PLAIN_NAMESPACE}.{name}"


def annotated_kind_name(name: str) -> str:
    """Qualify a short kind name with the annotated namespace."""
    return f"{ANNOTATED_NAMESPACE}.{name}"


__all__ = [
    "KindDescriptor",
    "Property",
    "TypeRegistry",
    "annotated_kind_name",
    "default_registry",
    "plain_kind_name",
]
