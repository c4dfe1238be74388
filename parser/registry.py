# parser/registry.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Bidirectional variable name <-> index mapping built during one parse

"""Variable registry for parsed Boolean formulas.

The parser resolves every variable name to a 0-based index the first time
the name is seen, so expression trees and assignments never carry strings.
The registry keeps the mapping in both directions for the solver (which only
needs the variable count) and for the printer (which maps indices back to
names for display).

Names are canonicalized on registration: letters are lowercased and
subscript digits are rewritten as ASCII digits, so ``X1``, ``x1`` and ``x₁``
denote the same variable.
"""

import re
from typing import Dict, Iterator, List, Tuple

_SUBSCRIPT_DIGITS = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")
_NAME_PARTS = re.compile(r"([a-z]+)([0-9]+)")


def canonical_name(name: str) -> str:
    """Return the canonical spelling of a variable name.

    Args:
        name: Variable name as written in the formula (e.g. ``X₁₂``)

    Returns:
        Lowercase name with ASCII digits (e.g. ``x12``)
    """
    return name.translate(_SUBSCRIPT_DIGITS).lower()


def _sort_key(name: str) -> Tuple:
    # x2 sorts before x10
    match = _NAME_PARTS.fullmatch(name)
    if match is None:
        return (name, -1)
    return (match.group(1), int(match.group(2)))


class VariableRegistry:
    """Append-only bijection between variable names and indices.

    Indices are assigned in first-seen order starting at 0. A registry is
    owned by exactly one parse; it is never shared between formulas and
    offers no removal.
    """

    def __init__(self):
        self._indices: Dict[str, int] = {}
        self._names: List[str] = []

    def register(self, name: str) -> int:
        """Return the index of ``name``, assigning the next free one if new.

        Args:
            name: Variable name in any accepted spelling

        Returns:
            Index of the variable
        """
        key = canonical_name(name)
        index = self._indices.get(key)
        if index is None:
            index = len(self._names)
            self._indices[key] = index
            self._names.append(key)
        return index

    def index_of(self, name: str) -> int:
        """Look up the index of a registered variable.

        Raises:
            KeyError: ``name`` was never registered
        """
        return self._indices[canonical_name(name)]

    def name_of(self, index: int) -> str:
        """Look up the canonical name of the variable at ``index``.

        Raises:
            IndexError: ``index`` was never assigned
        """
        if index < 0:
            raise IndexError(f"Variable index out of range: {index}")
        return self._names[index]

    @property
    def names(self) -> Tuple[str, ...]:
        """Canonical names in index (registration) order."""
        return tuple(self._names)

    def display_order(self) -> List[int]:
        """Indices sorted by variable name, numeric suffixes compared as numbers."""
        return sorted(range(len(self._names)), key=lambda i: _sort_key(self._names[i]))

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_name(name) in self._indices

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableRegistry):
            return NotImplemented
        return self._names == other._names

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name}={i}" for i, name in enumerate(self._names))
        return f"VariableRegistry({pairs})"
