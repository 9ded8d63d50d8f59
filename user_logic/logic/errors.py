"""
Logic error types.

Compile-time errors carry the offending definition and an actionable
message. Evaluation-time failures are ordinary Python exceptions.
"""

from typing import Any, Iterable, Optional


class LogicError(Exception):
    """Base class for user-logic errors."""


class CompileError(LogicError):
    """Error during definition compilation with actionable message."""

    def __init__(self, definition: Any, message: str, allowed: Optional[Iterable[str]] = None):
        self.definition = definition
        self.allowed = sorted(allowed) if allowed is not None else None
        full_msg = f"{message}: {definition!r}"
        if self.allowed:
            full_msg += f". Available: {', '.join(self.allowed)}"
        super().__init__(full_msg)


class UnknownOperationError(CompileError):
    """Definition names an operation absent from the registry."""

    def __init__(self, operation: Any, definition: Any, allowed: Optional[Iterable[str]] = None):
        self.operation = operation
        super().__init__(definition, f"No such operation '{operation}'", allowed)


class MalformedTemplateError(CompileError):
    """String template opened with the marker but not closed with it."""

    def __init__(self, definition: Any, marker: str):
        self.marker = marker
        super().__init__(
            definition,
            f"Template strings beginning with {marker} must end with a {marker}",
        )


class InvalidDefinitionError(CompileError):
    """Operand shape is wrong for the operation (arity, container type)."""
