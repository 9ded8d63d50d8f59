"""
Debug wrapper node.

Wraps a compiled node and reports each evaluation to a debug sink. The
counter is shared by every wrapper created under one `debug` operation,
so record ids increase across the whole wrapped subtree.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any

from ...utils.debug import DebugSink
from ..types import Context, Value
from .base import LogicNode


@dataclass(frozen=True)
class DebugNode:
    """
    Observability wrapper; the wrapped result is returned unchanged.

    Attributes:
        definition: Raw definition the wrapped node was compiled from
        node: The wrapped node
        counter: Id source shared within one `debug` operation
        sink: Receives the "evaluating" and "result" records
    """
    definition: Any
    node: LogicNode
    counter: itertools.count = field(compare=False, repr=False)
    sink: DebugSink = field(compare=False, repr=False)

    def evaluate(self, context: Context) -> Value:
        record_id = next(self.counter)
        self.sink.evaluating(record_id, self.definition, context)
        result = self.node.evaluate(context)
        self.sink.result(record_id, result)
        return result

    def __repr__(self) -> str:
        return f"Debug({self.node!r})"


__all__ = [
    "DebugNode",
]
