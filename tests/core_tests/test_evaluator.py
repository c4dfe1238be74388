# tests/core_tests/test_evaluator.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Test suite for expression evaluation under assignments

"""Test suite for the compiled Evaluator and the evaluate function."""

import pytest
from parser import parse
from parser.ast_nodes import And, Or, Not, Var
from core.evaluator import Evaluator, evaluate
from core.solver import Assignment


class TestEvaluator:
    """Test cases for truth-value evaluation of expression trees."""

    @pytest.mark.parametrize(
        "left, right",
        [(False, False), (False, True), (True, False), (True, True)],
    )
    def test_binary_connectives(self, left, right):
        """Test AND and OR against their truth tables."""
        assignment = (left, right)

        assert evaluate(And(Var(0), Var(1)), assignment) == (left and right)
        assert evaluate(Or(Var(0), Var(1)), assignment) == (left or right)

    @pytest.mark.parametrize("value", [False, True])
    def test_negation(self, value):
        """Test that NOT complements and double NOT restores the value."""
        assert evaluate(Not(Var(0)), (value,)) is (not value)
        assert evaluate(Not(Not(Var(0))), (value,)) is value

    def test_variables_read_by_index(self):
        """Test that Var(i) reads position i of the assignment."""
        assignment = (False, True, False)

        assert [evaluate(Var(i), assignment) for i in range(3)] == [False, True, False]

    def test_accepts_assignment_objects(self):
        """Test evaluation with an Assignment decoded from its integer code."""
        expr, _ = parse("x1 AND -x2 AND x3")

        assert evaluate(expr, Assignment.from_code(0b101, 3)) is True
        assert evaluate(expr, Assignment.from_code(0b111, 3)) is False

    def test_result_is_bool(self):
        """Test that evaluate normalizes truthy values to bool."""
        assert evaluate(Var(0), [1]) is True
        assert evaluate(Var(0), [0]) is False

    def test_evaluation_has_no_side_effects(self):
        """Test that evaluating twice gives the same answer and keeps the input."""
        expr, _ = parse("(x1 OR x2) AND -(x1 AND x2)")
        assignment = [True, False]

        first = evaluate(expr, assignment)
        second = evaluate(expr, assignment)

        assert first is second is True
        assert assignment == [True, False]

    def test_compiled_formula_reused_across_assignments(self):
        """Test that one Evaluator answers for every assignment it is given."""
        evaluator = Evaluator(And(Var(0), Or(Var(1), Not(Var(1)))))

        assert len(evaluator.program) == 6
        assert evaluator((True, False)) is True
        assert evaluator.evaluate((False, True)) is False

    @pytest.mark.parametrize("depth", [1, 999, 5000])
    def test_deep_negation_chain(self, depth):
        """Test stacked negations far deeper than the interpreter stack."""
        expr = Var(0)
        for _ in range(depth):
            expr = Not(expr)

        assert evaluate(expr, (True,)) is (depth % 2 == 0)

    def test_long_left_leaning_chain(self):
        """Test a 5000-operand disjunction where only the last operand is true."""
        expr = Var(0)
        for i in range(1, 5000):
            expr = Or(expr, Var(i))
        assignment = [False] * 4999 + [True]

        assert evaluate(expr, assignment) is True
        assert evaluate(expr, [False] * 5000) is False
