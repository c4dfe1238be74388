# parser/ast_nodes.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Abstract Syntax Tree node classes for Boolean formula representation

"""AST node classes for representing parsed Boolean formulas.

This module defines immutable and hashable node classes used to build tree
representations of propositional formulas. Variables are referenced by the
index the parser assigned to them, never by name; the ``VariableRegistry``
returned alongside the tree maps indices back to names.

Node Types:
    Var: Reference to a variable by index
    Not, And, Or: Standard Boolean connectives

The tree is built bottom-up by the parser and never mutated afterwards. Every
composite node exclusively owns its children.

Traversal:
    Formulas such as a long chain of ORs produce trees as deep as they are
    long, so no walk over a tree recurses. ``postorder`` yields nodes with an
    explicit stack, and ``fold`` drives a visitor over that order, handing
    each visit method the results already computed for the node's children.
    Equality, hashing and the string form are built on the same walk.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors driven by ``fold``.

    Each visit method receives the node and the results of its children,
    left to right.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not, operand): ...

    def visit_and(self, n: And, left, right): ...

    def visit_or(self, n: Or, left, right): ...


@dataclass(frozen=True, slots=True, eq=False)
class Expr:
    """Base class for all AST nodes in Boolean formulas.

    The string form of a tree names variable ``i`` as ``v{i}`` and uses the
    symbolic operators. Because the parser assigns indices in first-seen
    order and the string lists variables in tree order, parsing ``str(tree)``
    yields a tree equal to the original.
    """

    @property
    def children(self) -> Tuple[Expr, ...]:
        return ()

    def accept(self, v: Visitor, *results):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node
            results: Visit results of the children, left to right

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def _signature(self) -> Tuple:
        # Postfix form is unambiguous because every node type has a fixed arity
        return tuple(
            (type(node), node.index) if isinstance(node, Var) else type(node)
            for node in postorder(self)
        )

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return self._signature() == other._signature()

    def __hash__(self) -> int:
        return hash(self._signature())

    def __str__(self) -> str:
        return fold(self, _IndexFormatter())


@dataclass(frozen=True, slots=True, eq=False)
class Var(Expr):
    """Reference to a formula variable.

    Attributes:
        index: Index assigned to the variable by the registry
    """

    index: int

    def accept(self, v: Visitor, *results):
        return v.visit_var(self)


@dataclass(frozen=True, slots=True, eq=False)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def accept(self, v: Visitor, *results):
        return v.visit_not(self, *results)


@dataclass(frozen=True, slots=True, eq=False)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *results):
        return v.visit_and(self, *results)


@dataclass(frozen=True, slots=True, eq=False)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def accept(self, v: Visitor, *results):
        return v.visit_or(self, *results)


def postorder(root: Expr) -> Iterator[Expr]:
    """Yield the nodes of ``root`` children first, left to right."""
    stack: List[Tuple[Expr, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))


def fold(root: Expr, v: Visitor):
    """Visit every node of ``root`` bottom-up and return the root's result.

    Args:
        root: Tree to traverse
        v: Visitor whose methods combine the results of child nodes

    Returns:
        Whatever the visitor returned for ``root``
    """
    results: list = []
    for node in postorder(root):
        arity = len(node.children)
        if arity:
            args = results[-arity:]
            del results[-arity:]
            results.append(node.accept(v, *args))
        else:
            results.append(node.accept(v))
    return results[0]


class _IndexFormatter:
    def visit_var(self, n: Var) -> str:
        return f"v{n.index}"

    def visit_not(self, n: Not, operand: str) -> str:
        return f"!{operand}"

    def visit_and(self, n: And, left: str, right: str) -> str:
        return f"({left} & {right})"

    def visit_or(self, n: Or, left: str, right: str) -> str:
        return f"({left} | {right})"
