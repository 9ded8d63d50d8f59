"""
UserLogic: compile once, evaluate many times.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .compiler import compile_logic
from .nodes import LogicNode
from .types import Context, LookupReporter, Value


class UserLogic:
    """
    A compiled definition bound to its operations and base context.

    Compilation happens in the constructor, so unknown operations and
    malformed templates surface immediately. Evaluation never mutates the
    compiled tree or the contexts, so one instance can be shared.

    Attributes:
        definition: The definition as given
        base_context: Defaults merged under every evaluation context
        lookups: Paths reported while compiling, in definition order

    Example:
        logic = UserLogic(
            {"concat": ["$greeting", "$name"]},
            base_context={"greeting": "Hello "},
        )
        logic.evaluate({"name": "Ada"})  # "Hello Ada"
    """

    def __init__(
        self,
        definition: Any,
        operations=None,
        report_lookup: Optional[LookupReporter] = None,
        base_context: Optional[Context] = None,
    ):
        self.definition = definition
        self.base_context = dict(base_context or {})
        self.lookups: list[list[str]] = []

        def _report(path: list) -> None:
            self.lookups.append(list(path))
            if report_lookup is not None:
                report_lookup(path)

        self._root = compile_logic(definition, operations, _report)

    @property
    def root_node(self) -> LogicNode:
        return self._root

    def evaluate(self, context: Optional[Context] = None) -> Value:
        """
        Evaluate against base_context overlaid with context.

        Args:
            context: Runtime values; its keys win over base_context

        Returns:
            The expression's value (UNDEFINED for missing paths)
        """
        if context is not None and not isinstance(context, Mapping):
            raise TypeError(f"context must be a mapping, got {type(context).__name__}")
        return self._root.evaluate({**self.base_context, **(context or {})})

    def __repr__(self) -> str:
        return f"UserLogic({self.definition!r})"
