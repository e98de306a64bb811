# formula/ast_nodes.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas read in reverse-Polish notation.
Two kinds of leaves exist and are never mixed within one formula: truth-value
constants produced by the evaluation grammar, and single-letter variables
produced by the symbolic grammar.

Node Types:
    Literal: Boolean constant (``0`` / ``1``)
    Variable: Propositional atom (``A`` .. ``Z``)
    Not: Negation
    And, Or, Xor, Implies, Equiv: Binary connectives

Nodes compare by structure, so two trees built from the same text are equal.
All nodes support the visitor design pattern for traversal and transformation,
and ``str(node)`` yields the reverse-Polish serialization of the subtree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_literal(self, n: Literal): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_implies(self, n: Implies): ...

    def visit_equiv(self, n: Equiv): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the reverse-Polish serialization of this subtree."""
        from .serializer import serialize

        return serialize(self)


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """Fixed truth value, produced only by the evaluation grammar.

    Attributes:
        value: The constant truth value
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_literal(self)


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional atom, produced only by the symbolic grammar.

    Attributes:
        name: Single uppercase letter identifying the atom
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Common shape of the two-operand connectives.

    Operand order is significant: ``left`` is the operand that appeared first
    in the source text. It matters for ``Implies`` and for serialization.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class And(BinaryOp):
    """Conjunction: true when both operands are true."""

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryOp):
    """Disjunction: true when at least one operand is true."""

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryOp):
    """Exclusive or: true when the operands differ."""

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryOp):
    """Material implication ``left -> right``."""

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Equiv(BinaryOp):
    """Biconditional: true when the operands agree."""

    def accept(self, v: Visitor):
        return v.visit_equiv(self)


LEAF_TYPES = (Literal, Variable)


def is_leaf(node: Expr) -> bool:
    """Return True for atoms and constants."""
    return isinstance(node, LEAF_TYPES)
