# parser/lexer.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Lexical analyzer for Boolean formula tokenization using SLY

"""Lexical analyzer for Boolean formula strings.

This module breaks formula text into tokens for parser consumption. Three
surface notations are accepted and may be mixed freely, every alias of an
operator producing the same token type:

- Keywords: AND, OR, NOT (case-insensitive)
- Symbols: &, |, -, !
- Unicode logic symbols: ∧, ∨, ¬

Variables are a letter prefix followed by digits, e.g. ``x1`` or ``x₁``.
Whitespace is ignored; any other character is rejected with a LexicalError.
"""

from sly import Lexer
from .exceptions import LexicalError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for Boolean formula tokenization.

    Token patterns are tried in definition order, so ``VAR`` comes before the
    keyword operators: an identifier such as ``or1`` is a variable, while a
    bare ``or`` is the disjunction keyword.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "AND",
        "OR",
        "NOT",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # ASCII digits or subscript digits, never both in one identifier
    VAR = r"[A-Za-z]+(?:[0-9]+|[₀-₉]+)"

    # Keywords must end at a word boundary so "andx" is not read as AND + "x"
    AND = r"&|∧|(?i:and)\b"
    OR = r"\||∨|(?i:or)\b"
    NOT = r"-|!|¬|(?i:not)\b"

    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when no token pattern matches at the current
        position. The formula is rejected as a whole, no partial token
        sequence is returned.

        Args:
            t: SLY token object holding the unmatched remainder of the input

        Raises:
            LexicalError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise LexicalError(illegal_char, error_pos)
