# formula/exceptions.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Custom exceptions for reverse-Polish formula parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

Every failure the parser can report is a subclass of ``ParseError`` so that
callers can recover from any malformed input with a single ``except`` clause.
The concrete subclasses identify which well-formedness check rejected the
input and keep the details needed to build a useful message.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when a formula string cannot be turned into a tree.

    Attributes:
        position: 0-based index in the source text where the problem was
            detected, or None when the problem concerns the whole input
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class InvalidToken(ParseError):
    """A character outside the active grammar's alphabet."""

    def __init__(self, char: str, position: int):
        super().__init__(
            f"Illegal character '{char}' encountered at position {position}",
            position,
        )
        self.char = char


class MissingOperand(ParseError):
    """An operator was read while too few operands were on the stack."""

    def __init__(self, operator: str, position: int, needed: int, available: int):
        super().__init__(
            f"Operator '{operator}' at position {position} needs {needed} "
            f"operand(s), found {available}",
            position,
        )
        self.operator = operator
        self.needed = needed
        self.available = available


class MalformedExpression(ParseError):
    """The input did not reduce to exactly one formula.

    Raised for empty input (nothing left on the stack) and for trailing
    operands that no operator consumed (more than one element left).
    """

    def __init__(self, remaining: int):
        if remaining == 0:
            message = "Input formula is empty."
        else:
            message = f"Formula leaves {remaining} unconsumed operands on the stack"
        super().__init__(message)
        self.remaining = remaining


class UnboundVariableError(LookupError):
    """Raised by a strict evaluator for a variable missing from the assignment."""

    def __init__(self, name: str):
        super().__init__(f"No value assigned to variable '{name}'")
        self.name = name
