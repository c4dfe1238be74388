# core/solver.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Exhaustive enumeration of variable assignments

"""Brute-force satisfiability search.

Every assignment over the registered variables is tried, counting through
the integers ``0 .. 2**n - 1``. Bit ``i`` of the counter (least significant
bit first) is the value of variable ``i``, so the first-registered variable
toggles fastest. Satisfying assignments are collected in that order, which
makes results reproducible and duplicate-free.

The cost is exponential in the number of variables and no pruning is
attempted. Callers are expected to bound the variable count themselves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple
from parser.ast_nodes import Expr
from .evaluator import Evaluator
from .verdict import Verdict
from utils.logger import get_logger


class SearchInterrupted(RuntimeError):
    """Raised when the caller's stop check ends a search early.

    Attributes:
        partial: Solutions found before the search was stopped
    """

    def __init__(self, partial: SolutionSet):
        self.partial = partial
        super().__init__(
            f"Search interrupted after {partial.examined} of "
            f"{2 ** partial.variable_count} assignments"
        )


@dataclass(frozen=True, slots=True)
class Assignment:
    """Total assignment of truth values to the variables of one formula.

    Attributes:
        code: Integer encoding, bit ``i`` holding the value of variable ``i``
        values: Truth values indexed by variable index
    """

    code: int
    values: Tuple[bool, ...]

    @classmethod
    def from_code(cls, code: int, variable_count: int) -> Assignment:
        """Decode the ``variable_count`` low bits of ``code``."""
        return cls(code, tuple(bool(code >> i & 1) for i in range(variable_count)))

    @classmethod
    def from_values(cls, values) -> Assignment:
        """Build an assignment from truth values in variable index order."""
        values = tuple(bool(v) for v in values)
        code = sum(1 << i for i, value in enumerate(values) if value)
        return cls(code, values)

    def __getitem__(self, index: int) -> bool:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.values)


@dataclass
class SolutionSet:
    """Satisfying assignments of a formula in canonical enumeration order.

    Attributes:
        variable_count: Number of variables the assignments range over
        assignments: Satisfying assignments, strictly increasing by code
        examined: Number of candidate assignments evaluated
    """

    variable_count: int
    assignments: List[Assignment] = field(default_factory=list)
    examined: int = 0

    @property
    def verdict(self) -> Verdict:
        return Verdict.from_count(len(self.assignments))

    def is_satisfiable(self) -> bool:
        return bool(self.assignments)

    def is_unique(self) -> bool:
        """True if exactly one assignment satisfies the formula."""
        return len(self.assignments) == 1

    def codes(self) -> List[int]:
        return [a.code for a in self.assignments]

    def __len__(self) -> int:
        return len(self.assignments)

    def __iter__(self) -> Iterator[Assignment]:
        return iter(self.assignments)

    def __getitem__(self, index: int) -> Assignment:
        return self.assignments[index]


def solve(
    expr: Expr,
    variable_count: int,
    should_stop: Optional[Callable[[], bool]] = None,
) -> SolutionSet:
    """Find every assignment that satisfies ``expr``.

    With no variables the formula is closed and evaluated exactly once
    (under the empty assignment).

    Args:
        expr: Expression tree from the parser
        variable_count: Number of registered variables for the formula
        should_stop: Optional check polled before each candidate; a true
            result ends the search with SearchInterrupted

    Returns:
        SolutionSet in canonical order

    Raises:
        ValueError: ``variable_count`` is negative
        SearchInterrupted: ``should_stop`` asked for the search to end
    """
    if variable_count < 0:
        raise ValueError(f"Variable count must be non-negative, got {variable_count}")

    logger = get_logger()
    total = 1 << variable_count
    logger.search_started(variable_count, total)

    formula = Evaluator(expr)
    solutions = SolutionSet(variable_count)

    for code in range(total):
        if should_stop is not None and should_stop():
            logger.debug(f"Search stopped by caller at assignment {code}")
            raise SearchInterrupted(solutions)

        assignment = Assignment.from_code(code, variable_count)
        solutions.examined += 1
        if formula.evaluate(assignment):
            solutions.assignments.append(assignment)
            logger.solution_found(code, len(solutions.assignments))

    logger.search_finished(str(solutions.verdict), len(solutions))
    return solutions
