# formula/nnf_transformer.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# AST transformer for Negation Normal Form conversion

"""Transforms Abstract Syntax Trees into Negation Normal Form (NNF).

A formula is in NNF when it is built from leaves, negations of leaves,
conjunctions and disjunctions only. The transformation eliminates the derived
connectives and pushes every negation down to the leaves:

1. Implication: ``a > b`` becomes ``!a | b``
2. Biconditional: ``a = b`` becomes ``(a & b) | (!a & !b)``
3. Exclusive or: ``a ^ b`` becomes ``(a & !b) | (!a & b)``
4. De Morgan's laws and double negation move ``!`` toward the leaves

The result is logically equivalent to the input under every assignment. The
input tree is left untouched; a fresh tree is returned, leaves included.
"""

from __future__ import annotations
from . import ast_nodes as ast
from utils.logger import get_logger


class NNFTransformer(ast.Visitor):
    """Rewrites a formula into Negation Normal Form.

    Positive nodes are handled by the ``visit_*`` methods. A negated subtree is
    handled by ``visit_not``, which looks at the negated node and applies the
    matching dual rule.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Transform the AST into NNF.

        Args:
            root: Root node of the AST to transform

        Returns:
            Equivalent AST in NNF
        """
        logger = get_logger()
        logger.debug(f"Starting NNF transformation of {type(root).__name__}")

        result = self._visit(root)

        logger.debug(f"NNF transformation complete: {type(result).__name__}")
        return result

    def _visit(self, node: ast.Expr) -> ast.Expr:
        return node.accept(self)

    def visit_literal(self, n: ast.Literal) -> ast.Literal:
        return ast.Literal(n.value)

    def visit_variable(self, n: ast.Variable) -> ast.Variable:
        return ast.Variable(n.name)

    def visit_and(self, n: ast.And) -> ast.And:
        return ast.And(self._visit(n.left), self._visit(n.right))

    def visit_or(self, n: ast.Or) -> ast.Or:
        return ast.Or(self._visit(n.left), self._visit(n.right))

    def visit_implies(self, n: ast.Implies) -> ast.Or:
        return ast.Or(self._visit(ast.Not(n.left)), self._visit(n.right))

    def visit_equiv(self, n: ast.Equiv) -> ast.Or:
        both = ast.And(n.left, n.right)
        neither = ast.And(ast.Not(n.left), ast.Not(n.right))
        return ast.Or(self._visit(both), self._visit(neither))

    def visit_xor(self, n: ast.Xor) -> ast.Or:
        only_left = ast.And(n.left, ast.Not(n.right))
        only_right = ast.And(ast.Not(n.left), n.right)
        return ast.Or(self._visit(only_left), self._visit(only_right))

    def visit_not(self, n: ast.Not) -> ast.Expr:
        """Push a negation one level down and keep rewriting.

        Args:
            n: Negation node

        Returns:
            NNF of the negated operand
        """
        inner = n.operand

        if ast.is_leaf(inner):
            return ast.Not(self._visit(inner))

        # !!A -> A
        if isinstance(inner, ast.Not):
            return self._visit(inner.operand)

        # De Morgan: !(A & B) -> !A | !B
        if isinstance(inner, ast.And):
            return ast.Or(
                self._visit(ast.Not(inner.left)), self._visit(ast.Not(inner.right))
            )

        # De Morgan: !(A | B) -> !A & !B
        if isinstance(inner, ast.Or):
            return ast.And(
                self._visit(ast.Not(inner.left)), self._visit(ast.Not(inner.right))
            )

        # !(A > B) -> A & !B
        if isinstance(inner, ast.Implies):
            return ast.And(self._visit(inner.left), self._visit(ast.Not(inner.right)))

        # !(A = B) -> !(A & B) & !(!A & !B)
        # Joined with &, not |: the | form is a tautology, not a negated equivalence.
        if isinstance(inner, ast.Equiv):
            both = ast.And(inner.left, inner.right)
            neither = ast.And(ast.Not(inner.left), ast.Not(inner.right))
            return ast.And(
                self._visit(ast.Not(both)), self._visit(ast.Not(neither))
            )

        # !(A ^ B) -> A = B
        if isinstance(inner, ast.Xor):
            return self._visit(ast.Equiv(inner.left, inner.right))

        raise TypeError(f"Unsupported node type: {type(inner).__name__}")


def is_nnf(expr: ast.Expr) -> bool:
    """Check that ``expr`` uses only leaves, negated leaves, ``&`` and ``|``."""
    if ast.is_leaf(expr):
        return True
    if isinstance(expr, ast.Not):
        return ast.is_leaf(expr.operand)
    if isinstance(expr, (ast.And, ast.Or)):
        return is_nnf(expr.left) and is_nnf(expr.right)
    return False
