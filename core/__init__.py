# core/__init__.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Core module public API for evaluation and satisfiability search

"""Core components for brute-force Boolean satisfiability.

This module evaluates parsed expression trees and enumerates the complete
assignment space of a formula to find every satisfying assignment.

Primary Components:
    evaluate: Truth value of an expression under one assignment
    solve: Exhaustive search returning all satisfying assignments
    Assignment: Total variable assignment with its integer encoding
    SolutionSet: Satisfying assignments in canonical order
    Verdict: SATISFIABLE or UNSATISFIABLE

Example:
    >>> from parser import parse
    >>> from core import solve
    >>> expr, variables = parse("x1 AND -x2")
    >>> solutions = solve(expr, len(variables))
    >>> solutions.codes()
    [1]
"""

from .evaluator import Evaluator, evaluate
from .solver import Assignment, SearchInterrupted, SolutionSet, solve
from .verdict import Verdict

__all__ = [
    "Evaluator",
    "evaluate",
    "Assignment",
    "SolutionSet",
    "SearchInterrupted",
    "solve",
    "Verdict",
]

__version__ = "1.0.0"
__description__ = "Evaluation and brute-force search for Boolean formulas"
