# logic/api.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# String-in, string-out entry points for external callers

"""Caller-facing operations on reverse-Polish formula strings.

These functions never raise for unparseable input. A rejected formula is
logged as a warning and reported through an explicit outcome instead:

- ``negation_normal_form`` / ``conjunctive_normal_form`` return
  ``INVALID_EXPRESSION``;
- ``eval_formula`` and ``build_truth_table`` return ``None``;
- ``print_truth_table`` prints ``INVALID_EXPRESSION``.
"""

from typing import Optional

from formula import parse_symbolic, parse_evaluation, parse_and_nnf, parse_and_cnf
from formula.exceptions import ParseError
from .evaluator import evaluate
from .truth_table import TruthTable, generate_truth_table
from utils.logger import get_logger


INVALID_EXPRESSION = "Invalid expression"


def eval_formula(expression: str) -> Optional[bool]:
    """Evaluate a formula over ``0`` / ``1``.

    Returns:
        The formula's truth value, or None if it cannot be parsed
    """
    try:
        return evaluate(parse_evaluation(expression))
    except ParseError as e:
        get_logger().invalid_formula(expression, str(e))
        return None


def negation_normal_form(expression: str) -> str:
    """Return the NNF of a symbolic formula as reverse-Polish text."""
    try:
        return str(parse_and_nnf(expression))
    except ParseError as e:
        get_logger().invalid_formula(expression, str(e))
        return INVALID_EXPRESSION


def conjunctive_normal_form(expression: str) -> str:
    """Return the CNF of a symbolic formula as reverse-Polish text."""
    try:
        return str(parse_and_cnf(expression))
    except ParseError as e:
        get_logger().invalid_formula(expression, str(e))
        return INVALID_EXPRESSION


def build_truth_table(expression: str) -> Optional[TruthTable]:
    """Build the truth table of a symbolic formula, or None if it is invalid."""
    try:
        return generate_truth_table(parse_symbolic(expression))
    except ParseError as e:
        get_logger().invalid_formula(expression, str(e))
        return None


def print_truth_table(expression: str) -> None:
    table = build_truth_table(expression)
    if table is None:
        print(INVALID_EXPRESSION)
    else:
        print(table.render(), end="")
