# parser/exceptions.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for Boolean formula processing.

This module defines the exceptions raised while turning formula text into an
expression tree. Both concrete errors are fatal to the parse attempt that
raised them and to nothing else: a new call to ``parse`` starts from a clean
lexer, parser and variable registry.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when a formula cannot be turned into an expression tree.

    Base class of every error produced by the parsing pipeline. Callers that
    only need to know that a formula was rejected should catch this class.
    """

    pass


class LexicalError(ParseError):
    """Exception raised when the lexer meets a character it cannot tokenize.

    Attributes:
        char: The offending character
        position: Zero-based character offset of ``char`` in the input
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Illegal character '{char}' at position {position}")


class FormulaSyntaxError(ParseError):
    """Exception raised when the token sequence does not match the grammar.

    Covers unexpected tokens, missing closing parentheses, trailing tokens
    after a complete formula and empty input.

    Attributes:
        found: Text of the offending token, or ``"end of input"``
        position: Character offset of the offending token, ``None`` at end of input
        expected: Human-readable description of what the grammar allowed here
    """

    END_OF_INPUT = "end of input"

    def __init__(self, found: str, position: Optional[int], expected: str):
        self.found = found
        self.position = position
        self.expected = expected

        if position is None:
            where = self.END_OF_INPUT
        else:
            where = f"'{found}' at position {position}"
        super().__init__(f"Syntax error: unexpected {where}, expected {expected}")
