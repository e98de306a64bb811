# formula/cnf_transformer.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# AST transformer for Conjunctive Normal Form conversion

"""Transforms NNF Abstract Syntax Trees into Conjunctive Normal Form (CNF).

A CNF formula is a conjunction of clauses, each clause a disjunction of
possibly negated leaves. Starting from a formula in NNF the conversion is
driven by the distributive law:

    (p & q) | r  ->  (p | r) & (q | r)
    p | (q & r)  ->  (p | q) & (p | r)

Distribution is repeated on the freshly built disjunctions until no ``&``
remains below any ``|``. The clauses are then laid out canonically: a
right-nested conjunction of right-nested disjunctions, so ``AB|!C!&`` comes out
as ``A!B!C!&&``.

The output can be exponentially larger than the input; that is inherent to
CNF, not a defect of the conversion.
"""

from __future__ import annotations
from dataclasses import replace
from typing import List, Tuple
from . import ast_nodes as ast
from utils.logger import get_logger


class CNFTransformer:
    """Converts a formula already in NNF into CNF."""

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Transform an NNF AST into CNF.

        Performs a two-phase transformation:
        1. Bottom-up distribution of disjunctions over conjunctions
        2. Flattening into clauses and canonical right-nested rebuild

        Args:
            root: Root node of an AST in NNF

        Returns:
            Equivalent AST in CNF
        """
        logger = get_logger()
        logger.debug(f"Starting CNF transformation of {type(root).__name__}")

        distributed = self._to_cnf(root)
        clauses = _clauses(distributed)
        logger.debug(f"CNF distribution produced {len(clauses)} clause(s)")

        result = _build_right(ast.And, [_build_right(ast.Or, c) for c in clauses])

        logger.debug(f"CNF transformation complete: {type(result).__name__}")
        return result

    def _to_cnf(self, node: ast.Expr) -> ast.Expr:
        if isinstance(node, ast.And):
            return ast.And(self._to_cnf(node.left), self._to_cnf(node.right))

        if isinstance(node, ast.Or):
            return self._distribute(
                ast.Or(self._to_cnf(node.left), self._to_cnf(node.right))
            )

        return node

    def _distribute(self, node: ast.Expr) -> ast.Expr:
        """Push ``node``'s disjunctions below its conjunctions until none remain.

        Both disjunctions created by one distribution step are redistributed
        before returning, since either may again hold a conjunction.
        """
        if isinstance(node, ast.Or):
            left, right = node.left, node.right

            if isinstance(left, ast.And):
                return ast.And(
                    self._distribute(ast.Or(left.left, right)),
                    self._distribute(ast.Or(left.right, right)),
                )

            if isinstance(right, ast.And):
                return ast.And(
                    self._distribute(ast.Or(left, right.left)),
                    self._distribute(ast.Or(left, right.right)),
                )

            return ast.Or(self._distribute(left), self._distribute(right))

        if isinstance(node, ast.And):
            return ast.And(self._distribute(node.left), self._distribute(node.right))

        return node


def _clauses(expr: ast.Expr) -> Tuple[Tuple[ast.Expr, ...], ...]:
    """Split a distributed formula into its clauses.

    Returns:
        Tuple of clauses, each a tuple of leaves or negated leaves
    """
    if isinstance(expr, ast.And):
        return _clauses(expr.left) + _clauses(expr.right)

    return (_factors(expr),)


def _factors(expr: ast.Expr) -> Tuple[ast.Expr, ...]:
    if isinstance(expr, ast.Or):
        return _factors(expr.left) + _factors(expr.right)

    # distribution may place one factor in several clauses
    if isinstance(expr, ast.Not):
        return (replace(expr, operand=replace(expr.operand)),)
    return (replace(expr),)


def _build_right(node_type, items: List[ast.Expr]) -> ast.Expr:
    """Build a right-nested chain ``a op (b op (c ...))`` from ``items``."""
    items = list(items)
    expr = items[-1]
    for item in reversed(items[:-1]):
        expr = node_type(item, expr)
    return expr
