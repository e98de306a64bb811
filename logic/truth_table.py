# logic/truth_table.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Truth table enumeration and rendering

"""Truth table generation for propositional formulas.

The variables of a formula are collected from its tree and sorted. With ``k``
variables, combination index ``i`` runs from ``0`` to ``2**k - 1`` and the
variable at sorted position ``p`` receives bit ``(i >> (k - 1 - p)) & 1``, so
the first variable is the most significant bit. Rows are produced in index
order; this ordering is part of the output contract.

Each row is evaluated on its own fresh, read-only assignment, so rows do not
depend on one another.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterator, List, Sequence, Tuple

from formula import ast_nodes as ast
from .evaluator import Evaluator, VariableAssignment
from utils.logger import get_logger


class VariableCollector(ast.Visitor):
    """Gathers the distinct variable names appearing in a tree."""

    def collect(self, root: ast.Expr) -> FrozenSet[str]:
        return root.accept(self)

    def visit_literal(self, n: ast.Literal) -> FrozenSet[str]:
        return frozenset()

    def visit_variable(self, n: ast.Variable) -> FrozenSet[str]:
        return frozenset((n.name,))

    def visit_not(self, n: ast.Not) -> FrozenSet[str]:
        return n.operand.accept(self)

    def _visit_binary(self, n: ast.BinaryOp) -> FrozenSet[str]:
        return n.left.accept(self) | n.right.accept(self)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_xor = _visit_binary
    visit_implies = _visit_binary
    visit_equiv = _visit_binary


def collect_variables(root: ast.Expr) -> List[str]:
    """Return the formula's variable names in ascending order."""
    return sorted(VariableCollector().collect(root))


def iter_assignments(variables: Sequence[str]) -> Iterator[VariableAssignment]:
    """Yield every assignment of ``variables`` in combination-index order.

    Args:
        variables: Sorted variable names; the first is the most significant bit

    Yields:
        Read-only assignment for each index ``0 .. 2**k - 1``
    """
    k = len(variables)
    for index in range(1 << k):
        yield MappingProxyType(
            {var: bool((index >> (k - 1 - pos)) & 1) for pos, var in enumerate(variables)}
        )


@dataclass(frozen=True)
class TruthTableRow:
    """One line of a truth table.

    Attributes:
        assignment: Values given to each variable
        result: Value of the formula under ``assignment``
    """

    assignment: VariableAssignment
    result: bool


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of a formula.

    Attributes:
        variables: Sorted variable names, one column each
        rows: One row per assignment, in combination-index order
    """

    variables: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[TruthTableRow]:
        return iter(self.rows)

    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    def render(self) -> str:
        """Render the table as text.

        Layout::

            | A | B | = |
            |---|---|---|
            | 0 | 0 | 1 |

        Returns:
            Header, separator and one line per row, newline-terminated
        """
        lines = [
            "| " + "".join(f"{var} | " for var in self.variables) + "= |",
            "|" + "---|" * (len(self.variables) + 1),
        ]
        for row in self.rows:
            bits = "".join(f"{_bit(row.assignment[var])} | " for var in self.variables)
            lines.append(f"| {bits}{_bit(row.result)} |")
        return "\n".join(lines) + "\n"


def _bit(value: bool) -> str:
    return "1" if value else "0"


def generate_truth_table(root: ast.Expr) -> TruthTable:
    """Evaluate ``root`` under every assignment of its variables.

    Args:
        root: Well-formed formula tree

    Returns:
        TruthTable with ``2**k`` rows for ``k`` distinct variables
    """
    logger = get_logger()

    variables = tuple(collect_variables(root))
    rows = tuple(
        TruthTableRow(assignment, Evaluator(assignment).evaluate(root))
        for assignment in iter_assignments(variables)
    )

    logger.truth_table_summary(", ".join(variables), len(rows))
    return TruthTable(variables, rows)
