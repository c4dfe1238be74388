# tests/conftest.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Boolsat tests.

This module puts the project root on the import path and provides formulas
and helpers shared by the parser, core and integration suites.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def single_solution_formula():
    """Formula with exactly one satisfying assignment.

    Returns:
        str: Formula registering x2, x4, x1 in that order
    """
    return "(x2 OR x4) AND (x1 OR x2) AND (-x2)"


@pytest.fixture
def tautology_formula():
    """Formula satisfied by every assignment over two variables.

    Returns:
        str: Tautology over x1 and x2
    """
    return "(-x1 OR x1) AND (x2 OR -x2)"


@pytest.fixture
def contradiction_formula():
    """Formula no assignment satisfies.

    Returns:
        str: Contradiction over x1
    """
    return "x1 AND -x1"


def _right_nested_disjunction(depth: int) -> str:
    text = "x1 OR x1"
    for _ in range(depth):
        text = f"x1 OR ({text})"
    return text


# (formula, number of satisfying assignments); every formula is written the
# way the normal notation prints it, with no redundant parentheses
LARGE_FORMULAS = {
    "or_chain": (" OR ".join(["x1"] * 600), 1),
    "cnf_400_clauses": (" AND ".join(["(x1 OR x2)", "(-x3 OR x4 OR x5)"] * 200), 21),
    "negation_stack": ("-" * 1001 + "x1", 1),
    "right_nested": (_right_nested_disjunction(300), 1),
}


@pytest.fixture(params=list(LARGE_FORMULAS.values()), ids=list(LARGE_FORMULAS))
def large_formula(request):
    """Formulas whose trees are hundreds of levels deep.

    Returns:
        tuple: Formula text and its number of satisfying assignments
    """
    return request.param
