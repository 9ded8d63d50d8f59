"""
Base Node Types for the user-logic expression tree.

This module defines the evaluation contract and the leaf node types:
- LogicNode: Protocol every compiled node satisfies
- LiteralNode: Constant value
- ValueTemplateNode: Dotted path read from the context
- StringTemplateNode: Text with ${path} placeholders
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..constants import PATH_SEPARATOR, PLACEHOLDER_PATTERN
from ..resolve import PathResolver
from ..types import UNDEFINED, Context, Value, stringify


# =============================================================================
# Evaluation Contract
# =============================================================================

@runtime_checkable
class LogicNode(Protocol):
    """A compiled, evaluatable unit of the expression tree."""

    def evaluate(self, context: Context) -> Value: ...


# =============================================================================
# Leaf Nodes
# =============================================================================

@dataclass(frozen=True)
class LiteralNode:
    """
    A constant value, returned unchanged.

    Attributes:
        value: The literal (number, bool, None, string, opaque object)

    Examples:
        LiteralNode(5)
        LiteralNode("plain text")
    """
    value: Any

    def evaluate(self, context: Context) -> Value:
        return self.value

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


@dataclass(frozen=True)
class ValueTemplateNode:
    """
    A dotted path read from the context.

    Attributes:
        path: Path segments (e.g. ("foo", "bar") for "$foo.bar")
        resolver: Strategy that walks the context

    Missing paths evaluate to UNDEFINED.
    """
    path: tuple[str, ...]
    resolver: PathResolver

    def evaluate(self, context: Context) -> Value:
        return self.resolver.get(context, self.path)

    def __repr__(self) -> str:
        return f"Value(${PATH_SEPARATOR.join(self.path)})"


@dataclass(frozen=True)
class StringTemplateNode:
    """
    Text with ${path} placeholders.

    Attributes:
        text: Template body without the surrounding markers
        placeholders: One compiled value template per placeholder,
            in order of appearance

    Placeholders whose value is UNDEFINED are left as written.

    Examples:
        "`Yes ${foo.bar}!`" over {"foo": {"bar": 5}} -> "Yes 5!"
    """
    text: str
    placeholders: tuple[LogicNode, ...]

    def evaluate(self, context: Context) -> Value:
        nodes = iter(self.placeholders)

        def _replace(match):
            value = next(nodes).evaluate(context)
            return match.group(0) if value is UNDEFINED else stringify(value)

        return PLACEHOLDER_PATTERN.sub(_replace, self.text)

    def __repr__(self) -> str:
        return f"Template({self.text!r})"


__all__ = [
    "LogicNode",
    "LiteralNode",
    "ValueTemplateNode",
    "StringTemplateNode",
]
