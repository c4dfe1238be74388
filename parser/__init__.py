# parser/__init__.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Formula parsing components for propositional logic expressions

"""Boolean formula parsing for brute-force satisfiability search.

This module turns textual propositional formulas into expression trees whose
variables are referenced by index, together with the registry that maps those
indices back to variable names. The same formula may be written with ASCII
keywords, symbolic operators or Unicode logic symbols; all notations parse to
the same tree.

Core Functions:
    parse: Converts a formula string into (expression tree, variable registry)

Supported Logic:
    - Boolean connectives AND, OR, NOT
    - Variables of the form x1, x2, ... (or x₁, x₂, ...)

Grammar Features:
    - Left-associative binary operators, AND binding tighter than OR
    - Right-associative, stackable negation
    - Parenthetical grouping support
    - Lexical and syntax errors that name the offending input

Example:
    >>> from parser import parse
    >>> expr, variables = parse("(x1 OR x2) AND ¬x1")
    >>> variables.names
    ('x1', 'x2')
"""

from typing import NamedTuple
from .ast_nodes import Expr
from .exceptions import FormulaSyntaxError, LexicalError, ParseError
from .grammar import _FormulaParser
from .registry import VariableRegistry
from utils.logger import get_logger


class ParsedFormula(NamedTuple):
    """Result of a successful parse.

    Attributes:
        expr: Root node of the expression tree
        variables: Registry of the variables the tree refers to
    """

    expr: Expr
    variables: VariableRegistry


def parse(source: str) -> ParsedFormula:
    """Parse a formula string into an expression tree and its variables.

    Uses a fresh parser and registry for each invocation, so nothing carries
    over from one formula to the next. Variables receive indices in the order
    they first appear in ``source``.

    Args:
        source: Formula text to parse

    Returns:
        ParsedFormula holding the tree and the variable registry

    Raises:
        LexicalError: ``source`` contains a character no token can start with
        FormulaSyntaxError: The tokens do not form a single formula
        ParseError: Any other failure while parsing

    Example:
        >>> expr, variables = parse("x1 OR x2 AND x3")
        >>> # Or(Var(0), And(Var(1), Var(2)))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    registry = VariableRegistry()
    parser = _FormulaParser(registry)

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return ParsedFormula(result, registry)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "ParsedFormula",
    "ParseError",
    "LexicalError",
    "FormulaSyntaxError",
    "VariableRegistry",
]

__version__ = "1.0.0"
__description__ = "Boolean formula lexing and parsing components"
