# parser/grammar.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# LALR(1) grammar and parser for Boolean formulas using SLY

"""Boolean formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs AST nodes from the token stream produced by
the lexer and registers every variable it reduces in a VariableRegistry.

Grammar Features:
- AND, OR and NOT with proper precedence
- Stacked negation (``--x1`` negates twice)
- Parenthetical grouping for precedence override
- No implicit conjunction: juxtaposed operands are a syntax error

Operator Precedence (lowest to highest):
- OR: left-associative
- AND: left-associative
- NOT: right-associative
"""

from typing import Iterator, Optional
from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Expr, Var, Not, And, Or
from .exceptions import FormulaSyntaxError, ParseError
from .registry import VariableRegistry
from utils.logger import get_logger

# What may follow each kind of token
_OPERAND_EXPECTED = "a variable, a negation or '('"
_OPERATOR_EXPECTED = "AND, OR or end of input"
_OPERATOR_OR_CLOSE_EXPECTED = "AND, OR or ')'"
_CLOSE_EXPECTED = "')'"

_OPERAND_STARTERS = (None, "AND", "OR", "NOT", "LPAREN")


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for Boolean formulas.

    A parser instance owns the registry its variables are recorded in, so
    each formula must be parsed with a fresh instance.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
        registry: Variables seen so far, in first-seen order
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    def __init__(self, registry: Optional[VariableRegistry] = None):
        self.registry = registry if registry is not None else VariableRegistry()
        self._previous: Optional[str] = None
        self._depth = 0

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("VAR")
    def expr(self, p) -> Expr:
        """Variable, registered on first sight."""
        return Var(self.registry.register(p.VAR))

    def _track(self, tokens) -> Iterator:
        """Pass tokens through while remembering the context of the next one.

        Keeps the type of the last consumed token and the open parenthesis
        depth, which ``error`` uses to describe what was expected.
        """
        for tok in tokens:
            yield tok
            self._previous = tok.type
            if tok.type == "LPAREN":
                self._depth += 1
            elif tok.type == "RPAREN":
                self._depth -= 1

    def parse(self, text: str) -> Expr:
        """Parse formula text into an AST.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the formula is empty, malformed or contains
                illegal characters
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            ast_result = super().parse(self._track(FormulaLexer().tokenize(text)))

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__} "
                f"over {len(self.registry)} variable(s)"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when the next token does not fit any
        grammar rule. The expected construct is derived from the token
        consumed before it and the number of unclosed parentheses.

        Args:
            token: Problematic token or None for end of input

        Raises:
            FormulaSyntaxError: Always raised with token, position and expectation
        """
        if self._previous in _OPERAND_STARTERS:
            expected = _OPERAND_EXPECTED
        elif token is None and self._depth > 0:
            expected = _CLOSE_EXPECTED
        elif self._depth > 0:
            expected = _OPERATOR_OR_CLOSE_EXPECTED
        else:
            expected = _OPERATOR_EXPECTED

        if token is None:
            raise FormulaSyntaxError(FormulaSyntaxError.END_OF_INPUT, None, expected)

        raise FormulaSyntaxError(token.value, token.index, expected)
