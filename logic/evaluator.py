# logic/evaluator.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Two-valued evaluation of formula trees under variable assignments

"""Evaluates propositional formula trees to a truth value.

Evaluation is a pure recursive walk over a well-formed tree. Constants yield
their own value and variables are looked up in the supplied assignment. A
variable without a value evaluates to ``False`` unless the evaluator is
created in strict mode, in which case ``UnboundVariableError`` is raised.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional

from formula import ast_nodes as ast
from formula.exceptions import UnboundVariableError
from utils.logger import get_logger


VariableAssignment = Mapping[str, bool]

_EMPTY_ASSIGNMENT: VariableAssignment = MappingProxyType({})


class Evaluator(ast.Visitor):
    """Computes the truth value of a formula under one assignment.

    Attributes:
        assignment: Read-only mapping from variable name to truth value
        strict: Raise on unassigned variables instead of reading them as False
    """

    def __init__(
        self, assignment: Optional[VariableAssignment] = None, strict: bool = False
    ):
        self.assignment = assignment if assignment is not None else _EMPTY_ASSIGNMENT
        self.strict = strict

    def evaluate(self, root: ast.Expr) -> bool:
        return root.accept(self)

    def visit_literal(self, n: ast.Literal) -> bool:
        return n.value

    def visit_variable(self, n: ast.Variable) -> bool:
        if n.name in self.assignment:
            return self.assignment[n.name]

        if self.strict:
            raise UnboundVariableError(n.name)

        get_logger().debug(f"Variable '{n.name}' is unassigned, reading it as false")
        return False

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    # Operands are evaluated eagerly so strict mode sees every variable.
    def visit_and(self, n: ast.And) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return left or right

    def visit_xor(self, n: ast.Xor) -> bool:
        return n.left.accept(self) != n.right.accept(self)

    def visit_implies(self, n: ast.Implies) -> bool:
        left, right = n.left.accept(self), n.right.accept(self)
        return not left or right

    def visit_equiv(self, n: ast.Equiv) -> bool:
        return n.left.accept(self) == n.right.accept(self)


def evaluate(
    root: ast.Expr,
    assignment: Optional[VariableAssignment] = None,
    strict: bool = False,
) -> bool:
    """Evaluate ``root`` under ``assignment``.

    Args:
        root: Well-formed formula tree
        assignment: Variable values; missing variables read as False
        strict: Raise ``UnboundVariableError`` for missing variables instead

    Returns:
        Truth value of the formula
    """
    return Evaluator(assignment, strict).evaluate(root)
