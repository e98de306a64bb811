# formula/__init__.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Formula parsing and transformation components for propositional logic

"""Reverse-Polish formula parsing and normalization.

This package turns reverse-Polish formula strings into immutable Abstract
Syntax Trees, serializes trees back into reverse-Polish text, and rewrites
them into Negation Normal Form and Conjunctive Normal Form.

Core Functions:
    parse_symbolic: Parse a formula over the variables ``A`` .. ``Z``
    parse_evaluation: Parse a formula over the constants ``0`` / ``1``
    to_nnf / to_cnf: Transform an already parsed tree
    parse_and_nnf / parse_and_cnf: Complete parsing and transformation pipelines
    serialize: Reverse-Polish text of a tree

Supported Logic:
    - Negation ``!`` (unary, postfix)
    - Conjunction ``&``, disjunction ``|``, implication ``>``, biconditional ``=``
    - Exclusive or ``^`` (evaluation grammar only)

Example:
    >>> from formula import parse_and_cnf
    >>> str(parse_and_cnf("AB|!C!&"))
    'A!B!C!&&'
"""

from .ast_nodes import Expr
from .exceptions import (
    ParseError,
    InvalidToken,
    MissingOperand,
    MalformedExpression,
    UnboundVariableError,
)
from .rpn_parser import SymbolicParser, EvaluationParser
from .serializer import serialize
from .nnf_transformer import NNFTransformer, is_nnf
from .cnf_transformer import CNFTransformer
from utils.logger import get_logger


def parse_symbolic(source: str) -> Expr:
    """Parse a symbolic-grammar formula string into an AST.

    Uses a fresh parser instance for each invocation, so parsing is stateless.

    Args:
        source: Reverse-Polish formula over ``A`` .. ``Z``

    Returns:
        Root AST node representing the parsed formula

    Raises:
        ParseError: Formula is malformed or uses characters outside the grammar

    Example:
        >>> parse_symbolic("AB>")
        Implies(left=Variable(name='A'), right=Variable(name='B'))
    """
    result = SymbolicParser().parse(source)
    get_logger().formula_parsed(source, type(result).__name__)
    return result


def parse_evaluation(source: str) -> Expr:
    """Parse an evaluation-grammar formula string into an AST.

    Args:
        source: Reverse-Polish formula over ``0`` and ``1``

    Returns:
        Root AST node representing the parsed formula

    Raises:
        ParseError: Formula is malformed or uses characters outside the grammar
    """
    result = EvaluationParser().parse(source)
    get_logger().formula_parsed(source, type(result).__name__)
    return result


def to_nnf(expr: Expr) -> Expr:
    """Return a fresh NNF tree equivalent to ``expr``."""
    return NNFTransformer().transform(expr)


def to_cnf(expr: Expr) -> Expr:
    """Return a fresh CNF tree equivalent to ``expr``.

    ``expr`` may be any formula; it is brought to NNF first unless it already
    is in that shape.
    """
    if not is_nnf(expr):
        expr = to_nnf(expr)
    return CNFTransformer().transform(expr)


def parse_and_nnf(source: str) -> Expr:
    """Parse a symbolic formula and transform it to Negation Normal Form.

    Args:
        source: Reverse-Polish formula over ``A`` .. ``Z``

    Returns:
        Root AST node of the NNF-transformed formula

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to NNF: {source}")

    result = to_nnf(parse_symbolic(source))

    logger.transform_result("NNF", source, str(result))
    return result


def parse_and_cnf(source: str) -> Expr:
    """Parse a symbolic formula and transform it to Conjunctive Normal Form.

    The parsed tree goes through the NNF transformation before distribution.

    Args:
        source: Reverse-Polish formula over ``A`` .. ``Z``

    Returns:
        Root AST node of the CNF-transformed formula

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to CNF: {source}")

    nnf = to_nnf(parse_symbolic(source))
    logger.debug("NNF transformation completed, beginning CNF distribution")
    result = CNFTransformer().transform(nnf)

    logger.transform_result("CNF", source, str(result))
    return result


__all__ = [
    "parse_symbolic",
    "parse_evaluation",
    "parse_and_nnf",
    "parse_and_cnf",
    "to_nnf",
    "to_cnf",
    "serialize",
    "ParseError",
    "InvalidToken",
    "MissingOperand",
    "MalformedExpression",
    "UnboundVariableError",
]

__version__ = "1.0.0"
__description__ = "Reverse-Polish formula parsing, NNF and CNF transformation"
