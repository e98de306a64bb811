# tests/logic_tests/test_evaluator.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Evaluator test suite

"""Test suite for formula evaluation.

Covers every connective over constants, variable lookup, the lenient default
for unassigned variables and the strict mode that rejects them.
"""

import pytest
from formula import parse_evaluation, parse_symbolic, UnboundVariableError
from logic import Evaluator, evaluate


class TestEvaluationGrammar:
    """Constant formulas from the evaluation grammar."""

    EVALUATION_CASES = [
        ("0", False),
        ("1", True),
        ("0!", True),
        ("1!", False),
        ("01&", False),
        ("01|", True),
        ("01^", True),
        ("01>", True),
        ("01=", False),
        ("10>", False),
        ("11^", False),
        ("00=", True),
        ("01&1|", True),
        ("0!1&", True),
        ("0!1|", True),
        ("0!1^", False),
        ("0!1>", True),
        ("0!1=", True),
        ("0!1&0&", False),
        ("0!1&1&", True),
        ("0!1|0|", True),
        ("0!1|1|", True),
        ("0!1^0^", False),
        ("0!1^1^", True),
        ("0!1>0>", False),
        ("0!1>1>", True),
        ("0!1=0=", False),
        ("0!1=1=", True),
        ("0!1&0|", True),
        ("0!1|0&", False),
        ("0!1&0^", True),
        ("0!1^0&", False),
        ("0!1&0>", False),
        ("0!1>0&", False),
        ("0!1&0=", False),
    ]

    @pytest.mark.parametrize("source, expected", EVALUATION_CASES)
    def test_evaluate_constants(self, source, expected):
        assert evaluate(parse_evaluation(source)) is expected


class TestVariableEvaluation:
    """Symbolic formulas evaluated under assignments."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(False, False, True), (False, True, True), (True, False, False), (True, True, True)],
    )
    def test_implication_truth_table(self, a, b, expected):
        tree = parse_symbolic("AB>")

        assert evaluate(tree, {"A": a, "B": b}) is expected

    def test_unassigned_variable_reads_false(self):
        tree = parse_symbolic("AB|")

        assert evaluate(tree, {"B": False}) is False
        assert evaluate(tree, {}) is False
        assert evaluate(parse_symbolic("A!")) is True

    def test_strict_mode_rejects_unassigned_variable(self):
        tree = parse_symbolic("AB&")

        with pytest.raises(UnboundVariableError) as exc_info:
            evaluate(tree, {"A": False}, strict=True)

        assert exc_info.value.name == "B"

    def test_strict_mode_accepts_complete_assignment(self):
        evaluator = Evaluator({"A": True, "B": False}, strict=True)

        assert evaluator.evaluate(parse_symbolic("AB>")) is False
        assert evaluator.evaluate(parse_symbolic("AB=!")) is True

    def test_evaluation_does_not_modify_assignment(self):
        assignment = {"A": True}
        evaluate(parse_symbolic("AB&C|"), assignment)

        assert assignment == {"A": True}
