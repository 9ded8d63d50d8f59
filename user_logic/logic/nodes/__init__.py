"""
Node Types for the user-logic expression tree.

Nodes are frozen dataclasses; each implements evaluate(context) and owns
its children exclusively. Trees are never mutated after compilation, so a
compiled tree can be evaluated from several threads at once.

Node Categories:
- Leaf nodes: LiteralNode, ValueTemplateNode, StringTemplateNode
- Operator nodes: IfNode, UnaryOperationNode, BinaryOperationNode,
  ComplexOperationNode
- Collection nodes: ArrayNode, ObjectNode, ObjectPropertyNode, MapNode
- Wrapper nodes: DebugNode

Usage:
    # {eq: ["$user.age", 18]}
    node = BinaryOperationNode(
        name="eq",
        func=strict_equals,
        operands=(
            ValueTemplateNode(("user", "age"), resolver),
            LiteralNode(18),
        ),
    )
    node.evaluate({"user": {"age": 18}})  # True
"""

from .base import (
    LogicNode,
    LiteralNode,
    ValueTemplateNode,
    StringTemplateNode,
)
from .operators import (
    IfNode,
    UnaryOperationNode,
    BinaryOperationNode,
    ComplexOperationNode,
)
from .collections import (
    ArrayNode,
    ObjectNode,
    ObjectPropertyNode,
    MapNode,
)
from .debug import DebugNode

__all__ = [
    "LogicNode",
    "LiteralNode",
    "ValueTemplateNode",
    "StringTemplateNode",
    "IfNode",
    "UnaryOperationNode",
    "BinaryOperationNode",
    "ComplexOperationNode",
    "ArrayNode",
    "ObjectNode",
    "ObjectPropertyNode",
    "MapNode",
    "DebugNode",
]
