# formula/rpn_parser.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Stack-based parser turning reverse-Polish token streams into ASTs

"""Reverse-Polish parser for propositional formulas.

The parser performs a single left-to-right pass over the token stream produced
by one of the grammar lexers, keeping partially built subtrees on a stack:

- an atom or constant pushes a leaf;
- ``!`` pops one operand and pushes its negation;
- a binary operator pops the right operand, then the left operand, and pushes
  the combined node.

Once the input is exhausted exactly one tree must remain on the stack.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from .lexer import SymbolicLexer, EvaluationLexer
from .ast_nodes import (
    Expr,
    Literal,
    Variable,
    Not,
    And,
    Or,
    Xor,
    Implies,
    Equiv,
    BinaryOp,
)
from .exceptions import ParseError, MissingOperand, MalformedExpression
from utils.logger import get_logger


BINARY_OPERATORS: Dict[str, Type[BinaryOp]] = {
    "AND": And,
    "OR": Or,
    "XOR": Xor,
    "IMPLIES": Implies,
    "EQUIV": Equiv,
}


class _RPNParser(ABC):
    """Grammar-independent stack machine.

    Abstract: subclasses set ``lexer_class`` and ``leaf_token`` and implement
    ``make_leaf`` to say how a leaf token becomes a node.

    Attributes:
        lexer_class: SLY lexer producing the token stream
        leaf_token: Token type that denotes an operand
    """

    lexer_class = None
    leaf_token = ""

    @abstractmethod
    def make_leaf(self, token) -> Expr:
        """Build the leaf node for an operand token.

        Args:
            token: SLY token of type ``leaf_token``

        Returns:
            Leaf AST node
        """

    def parse(self, text: str) -> Expr:
        """Parse reverse-Polish formula text into an AST.

        Args:
            text: Formula string in the parser's grammar

        Returns:
            Root AST node representing the parsed formula

        Raises:
            InvalidToken: A character is outside the grammar's alphabet
            MissingOperand: An operator found too few operands
            MalformedExpression: The input did not reduce to one formula
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        stack: List[Expr] = []

        try:
            for token in self.lexer_class().tokenize(text):
                if token.type == self.leaf_token:
                    stack.append(self.make_leaf(token))

                elif token.type == "NOT":
                    if not stack:
                        raise MissingOperand(token.value, token.index, 1, 0)
                    stack.append(Not(stack.pop()))

                else:
                    if len(stack) < 2:
                        raise MissingOperand(token.value, token.index, 2, len(stack))
                    right = stack.pop()
                    left = stack.pop()
                    stack.append(BINARY_OPERATORS[token.type](left, right))

            if len(stack) != 1:
                raise MalformedExpression(len(stack))

        except ParseError as e:
            logger.debug(f"Parse error encountered: {e}")
            raise

        result = stack.pop()
        logger.debug(f"Successfully parsed formula into {type(result).__name__}")
        return result


class SymbolicParser(_RPNParser):
    """Parser for formulas over the variables ``A`` .. ``Z``."""

    lexer_class = SymbolicLexer
    leaf_token = "VAR"

    def make_leaf(self, token) -> Variable:
        return Variable(token.value)


class EvaluationParser(_RPNParser):
    """Parser for formulas over the constants ``0`` and ``1``."""

    lexer_class = EvaluationLexer
    leaf_token = "CONST"

    def make_leaf(self, token) -> Literal:
        return Literal(token.value == "1")
