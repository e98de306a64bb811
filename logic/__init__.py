# logic/__init__.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Semantic operations on formula trees

"""Evaluation and truth tables for propositional formulas.

This package provides:
  • Evaluator / evaluate: truth value of a tree under an assignment
  • generate_truth_table: every assignment of a formula's variables, in order
  • eval_formula, negation_normal_form, conjunctive_normal_form,
    build_truth_table, print_truth_table: string-level operations that report
    invalid input without raising
"""

from .evaluator import Evaluator, VariableAssignment, evaluate
from .truth_table import (
    TruthTable,
    TruthTableRow,
    collect_variables,
    generate_truth_table,
    iter_assignments,
)
from .api import (
    INVALID_EXPRESSION,
    eval_formula,
    negation_normal_form,
    conjunctive_normal_form,
    build_truth_table,
    print_truth_table,
)

__all__ = [
    "Evaluator",
    "VariableAssignment",
    "evaluate",
    "TruthTable",
    "TruthTableRow",
    "collect_variables",
    "generate_truth_table",
    "iter_assignments",
    "INVALID_EXPRESSION",
    "eval_formula",
    "negation_normal_form",
    "conjunctive_normal_form",
    "build_truth_table",
    "print_truth_table",
]
