# tests/conftest.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Boole-RPN tests.

This module makes the project packages importable from the test tree and
provides the helpers shared by the formula and logic test suites.
"""

import sys
import itertools
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages import before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


def all_assignments(variables):
    """Yield every dict assignment of ``variables``."""
    for values in itertools.product((False, True), repeat=len(variables)):
        yield dict(zip(variables, values))


def iter_nodes(expr):
    """Yield every node of a tree, parents before children."""
    from formula import ast_nodes as ast

    yield expr
    if isinstance(expr, ast.Not):
        yield from iter_nodes(expr.operand)
    elif isinstance(expr, ast.BinaryOp):
        yield from iter_nodes(expr.left)
        yield from iter_nodes(expr.right)


@pytest.fixture
def basic_formula():
    """Symbolic formula used by the truth table examples."""
    return "AB&C|"


@pytest.fixture
def evaluation_formula():
    """Evaluation-grammar formula that is true."""
    return "01&1|"
