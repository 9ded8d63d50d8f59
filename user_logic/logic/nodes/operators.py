"""
Operator Nodes for the user-logic expression tree.

This module defines nodes that apply a function to evaluated operands:
- IfNode: Ternary branch on a condition
- UnaryOperationNode: f(value)
- BinaryOperationNode: left-to-right pairwise reduction over n operands
- ComplexOperationNode: f(*values) over positional operands

Operand evaluation is eager: every operand is evaluated before the
function runs, so n-ary `and`/`or` never short-circuit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from ..types import Context, Value
from .base import LogicNode


@dataclass(frozen=True)
class IfNode:
    """
    Ternary: evaluate the condition, then exactly one branch.

    Attributes:
        condition: Node whose truthiness picks the branch
        if_true: Evaluated when condition is truthy
        if_false: Evaluated otherwise

    YAML Syntax:
        if: ["$user.admin", "Welcome back", "Access denied"]
    """
    condition: LogicNode
    if_true: LogicNode
    if_false: LogicNode

    def evaluate(self, context: Context) -> Value:
        if self.condition.evaluate(context):
            return self.if_true.evaluate(context)
        return self.if_false.evaluate(context)

    def __repr__(self) -> str:
        return f"If({self.condition!r}, {self.if_true!r}, {self.if_false!r})"


@dataclass(frozen=True)
class UnaryOperationNode:
    """
    Apply a function to a single evaluated operand.

    Attributes:
        name: Operation name for display
        func: Callable taking the operand value
        operand: Child node
    """
    name: str
    func: Callable[[Any], Any] = field(compare=False)
    operand: LogicNode

    def evaluate(self, context: Context) -> Value:
        return self.func(self.operand.evaluate(context))

    def __repr__(self) -> str:
        return f"{self.name}({self.operand!r})"


@dataclass(frozen=True)
class BinaryOperationNode:
    """
    Reduce two or more operands pairwise, left to right.

    Attributes:
        name: Operation name for display
        func: Callable taking (left, right) values
        operands: Child nodes (at least 2)

    Semantics:
        {and: [a, b, c]} -> func(func(a, b), c)
        All operands are evaluated, whatever the intermediate results.
    """
    name: str
    func: Callable[[Any, Any], Any] = field(compare=False)
    operands: tuple[LogicNode, ...]

    def __post_init__(self):
        if len(self.operands) < 2:
            raise ValueError(f"{self.name}: requires at least 2 operands")

    def evaluate(self, context: Context) -> Value:
        values = [operand.evaluate(context) for operand in self.operands]
        result = values[0]
        for value in values[1:]:
            result = self.func(result, value)
        return result

    def __repr__(self) -> str:
        operands_str = ", ".join(repr(o) for o in self.operands)
        return f"{self.name}({operands_str})"


@dataclass(frozen=True)
class ComplexOperationNode:
    """
    Apply a function to all positional operand values at once.

    Attributes:
        name: Operation name for display
        func: Callable taking the values as positional arguments
        operands: Child nodes
    """
    name: str
    func: Callable[..., Any] = field(compare=False)
    operands: tuple[LogicNode, ...]

    def evaluate(self, context: Context) -> Value:
        return self.func(*[operand.evaluate(context) for operand in self.operands])

    def __repr__(self) -> str:
        operands_str = ", ".join(repr(o) for o in self.operands)
        return f"{self.name}({operands_str})"


__all__ = [
    "IfNode",
    "UnaryOperationNode",
    "BinaryOperationNode",
    "ComplexOperationNode",
]
