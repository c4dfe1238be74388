# core/verdict.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Verdict enumeration for satisfiability search results

from enum import Enum, auto


class Verdict(Enum):
    """Outcome of an exhaustive satisfiability search.

    The search always visits the whole assignment space, so the verdict is
    never inconclusive.

    Values:
        SATISFIABLE: At least one assignment makes the formula true
        UNSATISFIABLE: No assignment makes the formula true
    """

    SATISFIABLE = auto()
    UNSATISFIABLE = auto()

    def __str__(self) -> str:
        """Generate string representation of the verdict.

        Returns:
            Capitalized verdict name, as shown in result banners
        """
        return self.name.capitalize()

    @classmethod
    def from_count(cls, solution_count: int) -> "Verdict":
        """Derive the verdict from the number of satisfying assignments."""
        return cls.SATISFIABLE if solution_count > 0 else cls.UNSATISFIABLE
