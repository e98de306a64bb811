# tests/formula_tests/test_cnf_transformer.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# CNF transformation test suite

"""Test suite for the Conjunctive Normal Form transformer.

Tests verify the canonical clause layout, the absence of conjunctions below
disjunctions, equivalence with the input, and idempotence.
"""

import pytest
from conftest import all_assignments, iter_nodes
from formula import parse_symbolic, parse_and_cnf, to_nnf, to_cnf
from formula import ast_nodes as ast
from formula.cnf_transformer import CNFTransformer
from logic import evaluate, collect_variables
from utils.logger import get_logger


def has_and_below_or(expr, below_or=False):
    if isinstance(expr, ast.And):
        if below_or:
            return True
        return has_and_below_or(expr.left) or has_and_below_or(expr.right)
    if isinstance(expr, ast.Or):
        return has_and_below_or(expr.left, True) or has_and_below_or(expr.right, True)
    return False


class TestCNFTransformation:
    """Test cases for CNF transformation correctness and properties."""

    TEST_CASES = [
        ("A", "A"),
        ("A!", "A!"),
        ("AB|!C!&", "A!B!C!&&"),
        ("AB&!", "A!B!|"),
        ("AB|!", "A!B!&"),
        ("AB&C|", "AC|BC|&"),
        ("ABC&|", "AB|AC|&"),
        ("AB|C|D|", "ABCD|||"),
        ("AB&C&D&", "ABCD&&&"),
        ("AB&CD&|", "AC|AD|BC|BD|&&&"),
        ("AB>", "A!B|"),
        ("AB=", "AA!|AB!|BA!|BB!|&&&"),
        ("AB|C&", "AB|C&"),
    ]

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_cnf_transformation_correctness(self, input_formula, expected_output):
        logger = get_logger()

        transformed_ast = parse_and_cnf(input_formula)
        logger.debug(f"{input_formula} -> {transformed_ast}")

        assert str(transformed_ast) == expected_output, (
            f"Transformation mismatch:\n"
            f"Input: {input_formula}\n"
            f"Got: {transformed_ast}\n"
            f"Expected: {expected_output}"
        )

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_cnf_structure_validity(self, input_formula, expected_output):
        result = parse_and_cnf(input_formula)

        assert not has_and_below_or(result), f"Conjunction below disjunction in {result}"
        for node in iter_nodes(result):
            if isinstance(node, ast.Not):
                assert ast.is_leaf(node.operand)

    @pytest.mark.parametrize("input_formula, expected_output", TEST_CASES)
    def test_cnf_transformation_idempotence(self, input_formula, expected_output):
        first_transform = parse_and_cnf(input_formula)
        second_transform = parse_and_cnf(str(first_transform))

        assert first_transform == second_transform

    def test_nested_distribution_reaches_fixpoint(self):
        """Distribution results that hold new conjunctions are redistributed."""
        source = "AB&CD&|EF&|"
        result = parse_and_cnf(source)

        assert not has_and_below_or(result)

        clauses = []
        node = result
        while isinstance(node, ast.And):
            clauses.append(node.left)
            node = node.right
        clauses.append(node)
        assert len(clauses) == 8

    @pytest.mark.parametrize(
        "source", ["AB=C=", "AB>C>", "AB=!C|", "AB&CD&|EF&|", "AB|CD|&E!F>|!"]
    )
    def test_cnf_equivalence(self, source):
        tree = parse_symbolic(source)
        cnf = to_cnf(tree)
        variables = collect_variables(tree)

        for assignment in all_assignments(variables):
            assert evaluate(tree, assignment) == evaluate(cnf, assignment), (
                f"{source} and {cnf} differ under {assignment}"
            )

    def test_to_cnf_accepts_nnf_input_directly(self):
        nnf = to_nnf(parse_symbolic("AB>C&"))

        assert CNFTransformer().transform(nnf) == to_cnf(nnf)

    def test_output_shares_no_nodes(self):
        """Repeated factors in different clauses are separate objects."""
        nnf = to_nnf(parse_symbolic("AB&C|"))
        cnf = CNFTransformer().transform(nnf)

        cnf_ids = [id(n) for n in iter_nodes(cnf)]
        assert len(cnf_ids) == len(set(cnf_ids))
        assert set(cnf_ids).isdisjoint(id(n) for n in iter_nodes(nnf))
