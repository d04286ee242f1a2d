#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/ast/annotated.py
"""AST node classes for the annotated (template-aware) schema.

The annotated schema extends the plain markdown schema with semantic nodes
produced by template tooling: clauses, bound lists and three kinds of bound
variables. An annotated tree may contain any plain node as well.

Container kinds:
    - Clause: a template clause instance and its content
    - ListVariable: a list bound to a template variable

Leaf kinds:
    - Variable: a named variable and its current value
    - ComputedVariable: the textual result of a template expression
    - ConditionalVariable: a named boolean choosing between two texts

Visitors that do not know the annotated schema (such as the markdown
renderer) receive these nodes through their ``generic_visit`` method.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from clausemark.ast.nodes import Node
from clausemark.constants import ListDelimiter, ListType


def _dispatch(visitor: Any, method_name: str, node: Node) -> Any:
    visit = getattr(visitor, method_name, None)
    if visit is None:
        return visitor.generic_visit(node)
    return visit(node)


@dataclass
class Clause(Node):
    """Template clause instance.

    Parameters
    ----------
    src : str
        Reference to the clause template (opaque identifier)
    clauseid : str
        Stable identifier of this clause instance
    children : list of Node, default = empty list
        Block-level content of the clause

    """

    src: str
    clauseid: str
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this clause.

        Parameters
        ----------
        visitor : Any
            A visitor object, ideally with a visit_clause method

        Returns
        -------
        Any
            Result from visitor.visit_clause(self), or visitor.generic_visit(self)
            for visitors without one

        """
        return _dispatch(visitor, "visit_clause", self)


@dataclass
class ListVariable(Node):
    """List bound to a template variable.

    Carries the same list fields as the plain ``List`` kind so it can be
    retagged as one.

    Parameters
    ----------
    type : {'bullet', 'ordered'}
        List kind
    children : list of Node, default = empty list
        List items
    start : int or None, default = None
        Starting number for ordered lists
    tight : bool, default = True
        Whether the list is tight
    delimiter : {'period', 'paren'} or None, default = None
        Delimiter after ordered list numbers

    """

    type: ListType
    children: list[Node] = field(default_factory=list)
    start: Optional[int] = None
    tight: bool = True
    delimiter: Optional[ListDelimiter] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bound list."""
        return _dispatch(visitor, "visit_list_variable", self)


@dataclass
class Variable(Node):
    """Named template variable bound to a value.

    Parameters
    ----------
    id : str
        Binding name
    value : str
        Current bound text
    format : str or None, default = None
        Display format hint

    """

    id: str
    value: str
    format: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this variable."""
        return _dispatch(visitor, "visit_variable", self)


@dataclass
class ComputedVariable(Node):
    """Result of a template expression; has no binding name."""

    value: str
    format: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this computed variable."""
        return _dispatch(visitor, "visit_computed_variable", self)


@dataclass
class ConditionalVariable(Node):
    """Named boolean-like variable selecting between two literal texts.

    Parameters
    ----------
    id : str
        Binding name
    value : str
        Textual form of the current branch's output
    when_true : str
        Literal text used when the condition holds
    when_false : str
        Literal text used otherwise

    """

    id: str
    value: str
    when_true: str
    when_false: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this conditional variable."""
        return _dispatch(visitor, "visit_conditional_variable", self)
