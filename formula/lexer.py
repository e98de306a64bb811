# formula/lexer.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Lexical analyzers for reverse-Polish formulas using SLY

"""Lexical analyzers for reverse-Polish formula strings.

Two grammars are supported and each has its own lexer, since a letter and a
literal-like character would otherwise be ambiguous under a single token set:

Symbolic grammar (``SymbolicLexer``):
- Atoms: ``A`` .. ``Z``
- Operators: ``!`` ``&`` ``|`` ``>`` ``=``

Evaluation grammar (``EvaluationLexer``):
- Constants: ``0`` ``1``
- Operators: ``!`` ``&`` ``|`` ``^`` ``>`` ``=``

Every character is significant; whitespace is not part of either alphabet.
Any character outside the active alphabet raises ``InvalidToken``.
"""

from sly import Lexer
from .exceptions import InvalidToken
from utils.logger import get_logger


def _reject(lexer: Lexer, t):
    """Shared error hook: report the offending character and stop tokenizing."""
    logger = get_logger()

    illegal_char = t.value[0]
    error_pos = lexer.index

    logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

    raise InvalidToken(illegal_char, error_pos)


class SymbolicLexer(Lexer):
    """SLY-based lexer for formulas over propositional variables.

    Attributes:
        tokens: Set of valid token types
    """

    tokens = {
        "VAR",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "EQUIV",
    }

    VAR = r"[A-Z]"
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    IMPLIES = r">"
    EQUIV = r"="

    def error(self, t):
        _reject(self, t)


class EvaluationLexer(Lexer):
    """SLY-based lexer for formulas over the constants ``0`` and ``1``.

    Attributes:
        tokens: Set of valid token types
    """

    tokens = {
        "CONST",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "IMPLIES",
        "EQUIV",
    }

    CONST = r"[01]"
    NOT = r"!"
    AND = r"&"
    OR = r"\|"
    XOR = r"\^"
    IMPLIES = r">"
    EQUIV = r"="

    def error(self, t):
        _reject(self, t)
