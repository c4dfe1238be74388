# utils/formula_printer.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Rendering of formulas, assignments and search results in three notations

"""Text rendering for formulas and solutions.

Formulas are printed back with the names from their VariableRegistry and the
fewest parentheses that keep the tree shape, so printed formulas parse back to
the same tree in every notation. Assignments are printed as ``name = value``
pairs sorted by variable name.

Notations:
    NORMAL: ``-x1 AND (x2 OR x3)``, values T / F
    PROGRAMMATIC: ``!x1 & (x2 | x3)``, values 1 / 0
    MATHEMATICAL: ``¬x₁ ∧ (x₂ ∨ x₃)``, values ⊤ / ⊥
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
from parser.ast_nodes import And, Expr, Not, Or, Var, fold
from parser.registry import VariableRegistry
from core.solver import Assignment, SolutionSet
from utils.logger import get_logger

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")

# Binding strength, loosest first
_OR, _AND, _NOT, _ATOM = 1, 2, 3, 4


@dataclass(frozen=True)
class _Style:
    neg: str
    conj: str
    disj: str
    true: str
    false: str
    subscript: bool


class Notation(Enum):
    """Display notation, selected in the REPL by its command name."""

    NORMAL = "normal"
    PROGRAMMATIC = "prog"
    MATHEMATICAL = "math"

    @property
    def style(self) -> _Style:
        return _STYLES[self]

    @classmethod
    def from_command(cls, command: str) -> "Notation":
        """Look up a notation by its command name (case-insensitive).

        Raises:
            ValueError: ``command`` names no notation
        """
        return cls(command.strip().lower())


_STYLES = {
    Notation.NORMAL: _Style("-", "AND", "OR", "T", "F", False),
    Notation.PROGRAMMATIC: _Style("!", "&", "|", "1", "0", False),
    Notation.MATHEMATICAL: _Style("¬", "∧", "∨", "⊤", "⊥", True),
}


class _Renderer:
    """AST visitor returning ``(text, binding strength)`` for each node."""

    def __init__(self, printer: "FormulaPrinter", registry: VariableRegistry):
        self.printer = printer
        self.registry = registry

    @staticmethod
    def _wrap(rendered: Tuple[str, int], minimum: int) -> str:
        text, strength = rendered
        return text if strength >= minimum else f"({text})"

    def visit_var(self, n: Var):
        return self.printer.variable_name(self.registry.name_of(n.index)), _ATOM

    def visit_not(self, n: Not, operand):
        return f"{self.printer.style.neg}{self._wrap(operand, _NOT)}", _NOT

    def visit_and(self, n: And, left, right):
        # Right operand binds strictly tighter to keep left associativity
        left = self._wrap(left, _AND)
        right = self._wrap(right, _AND + 1)
        return f"{left} {self.printer.style.conj} {right}", _AND

    def visit_or(self, n: Or, left, right):
        left = self._wrap(left, _OR)
        right = self._wrap(right, _OR + 1)
        return f"{left} {self.printer.style.disj} {right}", _OR


class FormulaPrinter:
    """Formats formulas and search results in one notation.

    Attributes:
        notation: Active notation; may be switched between calls
    """

    def __init__(self, notation: Notation = Notation.NORMAL):
        self.notation = notation

    @property
    def style(self) -> _Style:
        return self.notation.style

    def variable_name(self, name: str) -> str:
        if self.style.subscript:
            return name.translate(_SUBSCRIPTS)
        return name

    def format_value(self, value: bool) -> str:
        return self.style.true if value else self.style.false

    def format_formula(self, expr: Expr, registry: VariableRegistry) -> str:
        """Render ``expr`` with the variable names from ``registry``."""
        text, _ = fold(expr, _Renderer(self, registry))
        return text

    def format_assignment(
        self, assignment: Assignment, registry: VariableRegistry
    ) -> str:
        """Render ``assignment`` as name-sorted ``name = value`` pairs."""
        return ", ".join(
            f"{self.variable_name(registry.name_of(i))} = "
            f"{self.format_value(assignment[i])}"
            for i in registry.display_order()
        )

    def format_report(
        self, solutions: SolutionSet, registry: VariableRegistry
    ) -> List[str]:
        """Render the result banner and the satisfying assignments.

        Returns:
            ``["Unsatisfiable"]``, ``["Satisfiable: <assignment>"]`` or the
            ``Satisfiable (k solutions):`` banner followed by one indented
            line per assignment in canonical order
        """
        logger = get_logger()
        logger.debug(
            f"Formatting {len(solutions)} solution(s) in {self.notation.value} notation"
        )

        if not solutions.is_satisfiable():
            return [str(solutions.verdict)]

        if solutions.is_unique():
            rendered = self.format_assignment(solutions[0], registry)
            if not rendered:
                return [str(solutions.verdict)]
            return [f"{solutions.verdict}: {rendered}"]

        lines = [f"{solutions.verdict} ({len(solutions)} solutions):"]
        for assignment in solutions:
            lines.append(f"  {self.format_assignment(assignment, registry)}")
        return lines
