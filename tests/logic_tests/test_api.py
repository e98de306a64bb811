# tests/logic_tests/test_api.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Caller boundary test suite

"""Test suite for the string-level operations.

These operations must turn every malformed formula into an explicit outcome
instead of raising.
"""

import pytest
from logic import (
    INVALID_EXPRESSION,
    eval_formula,
    negation_normal_form,
    conjunctive_normal_form,
    build_truth_table,
    print_truth_table,
)


class TestStringOperations:
    """Documented literal scenarios."""

    def test_conjunctive_normal_form(self):
        assert conjunctive_normal_form("AB|!C!&") == "A!B!C!&&"

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("AB&!", "A!B!|"),
            ("AB|!", "A!B!&"),
            ("AB>", "A!B|"),
            ("AB=", "AB&A!B!&|"),
            ("AB|C&!", "A!B!&C!|"),
        ],
    )
    def test_negation_normal_form(self, source, expected):
        assert negation_normal_form(source) == expected

    def test_eval_formula(self, evaluation_formula):
        assert eval_formula(evaluation_formula) is True
        assert eval_formula("0!1&0&") is False

    def test_truth_table(self, basic_formula):
        table = build_truth_table(basic_formula)

        assert table is not None
        assert table.variables == ("A", "B", "C")
        assert len(table) == 8

    def test_print_truth_table(self, basic_formula, capsys):
        print_truth_table(basic_formula)

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "| A | B | C | = |"
        assert lines[1] == "|---|---|---|---|"
        assert len(lines) == 10


class TestInvalidInput:
    """Malformed formulas yield sentinels, never exceptions."""

    INVALID_SYMBOLIC = ["", "ABBB", "!AB", "AB&?", "ab&", "AB^"]

    @pytest.mark.parametrize("source", INVALID_SYMBOLIC)
    def test_negation_normal_form_sentinel(self, source):
        assert negation_normal_form(source) == INVALID_EXPRESSION

    @pytest.mark.parametrize("source", INVALID_SYMBOLIC)
    def test_conjunctive_normal_form_sentinel(self, source):
        assert conjunctive_normal_form(source) == INVALID_EXPRESSION

    @pytest.mark.parametrize("source", INVALID_SYMBOLIC)
    def test_truth_table_absent(self, source):
        assert build_truth_table(source) is None

    @pytest.mark.parametrize(
        "source", ["0!1&0", "0!1|0!", "0!1^0!1", "", "A", "01&2|"]
    )
    def test_eval_formula_absent(self, source):
        assert eval_formula(source) is None

    def test_print_truth_table_invalid(self, capsys):
        print_truth_table("AB")

        captured = capsys.readouterr()
        assert captured.out == INVALID_EXPRESSION + "\n"
        assert "[WARNING] Invalid expression 'AB'" in captured.err

    def test_rejection_warning_stays_off_stdout(self, capsys):
        assert negation_normal_form("ABBB") == INVALID_EXPRESSION

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid expression 'ABBB'" in captured.err
