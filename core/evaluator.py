# core/evaluator.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Truth-value evaluation of expression trees under a total assignment

"""Evaluation of Boolean expression trees.

The evaluator is the inner loop of the brute-force search: it runs once per
candidate assignment. The tree is flattened once into postfix instructions,
and each assignment is then evaluated with an operand stack, so neither the
flattening nor the evaluation depends on Python recursion. Variables are
looked up by index in a sequence of booleans, no name resolution happens here.
"""

from typing import List, Sequence, Tuple
from parser.ast_nodes import And, Expr, Not, Or, Var, fold

# Instruction opcodes
_LOAD, _NOT, _AND, _OR = range(4)

Instruction = Tuple[int, int]


class _Compiler:
    """Visitor emitting postfix instructions for a tree."""

    def __init__(self):
        self.program: List[Instruction] = []

    def visit_var(self, n: Var):
        self.program.append((_LOAD, n.index))

    def visit_not(self, n: Not, operand):
        self.program.append((_NOT, 0))

    def visit_and(self, n: And, left, right):
        self.program.append((_AND, 0))

    def visit_or(self, n: Or, left, right):
        self.program.append((_OR, 0))


class Evaluator:
    """Compiled form of one formula, evaluated under many assignments.

    Both operands of AND and OR are always evaluated; evaluation has no side
    effects so the order is irrelevant.

    Attributes:
        program: Postfix instructions, one per tree node
    """

    __slots__ = ("program",)

    def __init__(self, expr: Expr):
        compiler = _Compiler()
        fold(expr, compiler)
        self.program = tuple(compiler.program)

    def evaluate(self, assignment: Sequence[bool]) -> bool:
        """Compute the truth value of the formula under ``assignment``."""
        stack: List[bool] = []
        push, pop = stack.append, stack.pop
        for op, arg in self.program:
            if op == _LOAD:
                push(bool(assignment[arg]))
            elif op == _NOT:
                push(not pop())
            elif op == _AND:
                right = pop()
                push(pop() and right)
            else:
                right = pop()
                push(pop() or right)
        return stack[0]

    def __call__(self, assignment: Sequence[bool]) -> bool:
        return self.evaluate(assignment)


def evaluate(expr: Expr, assignment: Sequence[bool]) -> bool:
    """Evaluate ``expr`` under ``assignment``.

    Args:
        expr: Well-formed expression tree from the parser
        assignment: Truth value for every variable index the tree refers to

    Returns:
        Truth value of the formula
    """
    return Evaluator(expr).evaluate(assignment)
