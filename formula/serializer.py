# formula/serializer.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Reverse-Polish serialization of formula trees

"""Serializes ASTs back into reverse-Polish text.

The output uses the same alphabet the parsers accept, emitting each operand
before its operator (post-order). Parsing the result with the grammar the tree
belongs to yields a tree equal to the original.
"""

from . import ast_nodes as ast


SYMBOLS = {
    ast.And: "&",
    ast.Or: "|",
    ast.Xor: "^",
    ast.Implies: ">",
    ast.Equiv: "=",
}

NEGATION_SYMBOL = "!"


class RPNSerializer(ast.Visitor):
    """Post-order visitor producing reverse-Polish text."""

    def serialize(self, root: ast.Expr) -> str:
        return root.accept(self)

    def visit_literal(self, n: ast.Literal) -> str:
        return "1" if n.value else "0"

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_not(self, n: ast.Not) -> str:
        return n.operand.accept(self) + NEGATION_SYMBOL

    def _visit_binary(self, n: ast.BinaryOp) -> str:
        return n.left.accept(self) + n.right.accept(self) + SYMBOLS[type(n)]

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_xor = _visit_binary
    visit_implies = _visit_binary
    visit_equiv = _visit_binary


def serialize(root: ast.Expr) -> str:
    """Return the reverse-Polish form of ``root``."""
    return RPNSerializer().serialize(root)
