"""
Collection Nodes for the user-logic expression tree.

This module defines nodes that build or walk collections:
- ArrayNode: Evaluate each element into a list
- ObjectNode: Evaluate each value into a dict with the same keys
- ObjectPropertyNode: Walk a base value through evaluated keys
- MapNode: Evaluate a body once per entry of a source collection
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..constants import MAP_BINDING
from ..resolve import PathResolver, split_path
from ..types import UNDEFINED, Context, Value, is_sequence
from .base import LogicNode


@dataclass(frozen=True)
class ArrayNode:
    """
    Positional list of child expressions.

    Attributes:
        items: Child nodes, one per element

    Examples:
        ["$foo", "bar"] over {"foo": "test"} -> ["test", "bar"]
    """
    items: tuple[LogicNode, ...]

    def evaluate(self, context: Context) -> Value:
        return [item.evaluate(context) for item in self.items]

    def __repr__(self) -> str:
        return f"Array({list(self.items)!r})"


@dataclass(frozen=True)
class ObjectNode:
    """
    Keyed collection of child expressions.

    Attributes:
        entries: (key, node) pairs in declaration order
    """
    entries: tuple[tuple[str, LogicNode], ...]

    def evaluate(self, context: Context) -> Value:
        return {key: node.evaluate(context) for key, node in self.entries}

    def __repr__(self) -> str:
        entries_str = ", ".join(f"{key!r}: {node!r}" for key, node in self.entries)
        return f"Object({{{entries_str}}})"


@dataclass(frozen=True)
class ObjectPropertyNode:
    """
    Walk a base value through one or more keys.

    Attributes:
        base: Node producing the value to walk
        keys: Nodes producing keys; dotted strings are split,
            lists are taken as segment lists; missing (UNDEFINED or None)
            keys are skipped
        resolver: Strategy that walks the base (no inheritance)

    Examples:
        {"object-property": [{literal: {foo: {bar: 3}}}, "foo.bar"]} -> 3
        {"object-property": [{literal: {foo: {bar: 3}}}, "foo", "bar"]} -> 3
    """
    base: LogicNode
    keys: tuple[LogicNode, ...]
    resolver: PathResolver

    def evaluate(self, context: Context) -> Value:
        value = self.base.evaluate(context)
        for key_node in self.keys:
            key = key_node.evaluate(context)
            # A missing or null key leaves the value as walked so far
            if key is UNDEFINED or key is None:
                continue
            value = self.resolver.get(value, split_path(key))
        return value

    def __repr__(self) -> str:
        keys_str = ", ".join(repr(k) for k in self.keys)
        return f"Property({self.base!r}, {keys_str})"


@dataclass(frozen=True)
class MapNode:
    """
    Evaluate a body once per entry of a collection.

    Attributes:
        source: Node producing a mapping or a sequence
        body: Node evaluated with a `map` binding added to the context

    Semantics:
        mapping source  -> {key: body({map: {key, value}})}
        sequence source -> [body({map: {index, value}})]
    """
    source: LogicNode
    body: LogicNode

    def evaluate(self, context: Context) -> Value:
        source = self.source.evaluate(context)
        if isinstance(source, Mapping):
            return {
                key: self.body.evaluate({**context, MAP_BINDING: {"key": key, "value": value}})
                for key, value in source.items()
            }
        if is_sequence(source):
            return [
                self.body.evaluate({**context, MAP_BINDING: {"index": index, "value": value}})
                for index, value in enumerate(source)
            ]
        raise TypeError(
            f"map: source must be an object or an array, got {type(source).__name__} ({source!r})"
        )

    def __repr__(self) -> str:
        return f"Map({self.source!r}, {self.body!r})"


__all__ = [
    "ArrayNode",
    "ObjectNode",
    "ObjectPropertyNode",
    "MapNode",
]
