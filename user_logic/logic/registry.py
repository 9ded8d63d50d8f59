"""
Operation Registry - Single source of truth for available operations.

Used by:
- The compiler (operation key -> node factory)
- The CLI `operations` listing

Design:
- Built-in operations are a closed set (OpKind) registered once
- Host extensions are plain factories, registered per compilation by
  override-merge; the default registry is never mutated
- Unknown operations fail at compile time, never during evaluation
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterator, Optional, Union

from .constants import OP_ARRAY, OP_LITERAL, OP_STRING_TEMPLATE, OP_VALUE_TEMPLATE
from . import operations as ops
from .operations import NodeFactory


class OpCategory(Enum):
    """Operation groups, for display."""
    SYNTAX = auto()      # selected by definition shape ($path, `text`, lists)
    CONTROL = auto()     # if
    BOOLEAN = auto()     # not, and, or
    COMPARISON = auto()  # eq, gt, gte, lt, lte
    COLLECTION = auto()  # array, object, object-property, map
    STRING = auto()      # capitalize, concat, split, join
    INTROSPECTION = auto()  # typeof, debug
    EXTENSION = auto()   # host-provided


class OpKind(Enum):
    """Closed set of built-in operations."""
    LITERAL = OP_LITERAL
    VALUE_TEMPLATE = OP_VALUE_TEMPLATE
    STRING_TEMPLATE = OP_STRING_TEMPLATE
    IF = "if"
    TYPEOF = "typeof"
    NOT = "not"
    AND = "and"
    OR = "or"
    EQ = "eq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    ARRAY = OP_ARRAY
    OBJECT = "object"
    OBJECT_PROPERTY = "object-property"
    MAP = "map"
    DEBUG = "debug"
    CAPITALIZE = "capitalize"
    CONCAT = "concat"
    SPLIT = "split"
    JOIN = "join"
    EXTENSION = "extension"


@dataclass(frozen=True)
class OperationSpec:
    """
    Specification for a single operation.

    Attributes:
        name: Operation key as written in definitions
        kind: Built-in kind, or EXTENSION for host factories
        category: Display group
        factory: Builds the node from the sub-definition
        description: One-line summary
    """
    name: str
    kind: OpKind
    category: OpCategory
    factory: NodeFactory
    description: str = ""

    @classmethod
    def extension(cls, name: str, factory: NodeFactory) -> "OperationSpec":
        """Wrap a host-provided factory."""
        doc = (factory.__doc__ or "").strip().splitlines()
        return cls(
            name=name,
            kind=OpKind.EXTENSION,
            category=OpCategory.EXTENSION,
            factory=factory,
            description=doc[0] if doc else "",
        )


OperationEntry = Union[OperationSpec, NodeFactory]


class OperationRegistry(Mapping):
    """
    Immutable mapping from operation name to node factory.

    Example:
        registry = DEFAULT_OPERATIONS.merged({"upper": unary_operation(str.upper)})
        registry.lookup("upper")   # factory
        registry.lookup("bogus")   # None
    """

    def __init__(self, entries: Optional[Mapping[str, OperationEntry]] = None):
        specs = {}
        for name, entry in (entries or {}).items():
            if isinstance(entry, OperationSpec):
                specs[name] = entry
            elif callable(entry):
                specs[name] = OperationSpec.extension(name, entry)
            else:
                raise TypeError(
                    f"Operation '{name}' must be a node factory or OperationSpec, "
                    f"got {type(entry).__name__}"
                )
        self._specs = MappingProxyType(specs)

    def lookup(self, name: str) -> Optional[NodeFactory]:
        """Get the factory for an operation, or None if unknown."""
        spec = self._specs.get(name)
        return spec.factory if spec else None

    def spec(self, name: str) -> Optional[OperationSpec]:
        """Get the full specification for an operation, or None if unknown."""
        return self._specs.get(name)

    def specs(self) -> list[OperationSpec]:
        """All specifications in registration order."""
        return list(self._specs.values())

    def names(self) -> list[str]:
        return list(self._specs)

    def merged(
        self,
        overrides: Optional[Union["OperationRegistry", Mapping[str, OperationEntry]]] = None,
    ) -> "OperationRegistry":
        """
        Return a new registry with overrides replacing same-named entries.

        Args:
            overrides: Registry or mapping of name -> factory/OperationSpec

        Returns:
            self when there is nothing to merge, else a new registry
        """
        if not overrides:
            return self
        if isinstance(overrides, OperationRegistry):
            extra = {spec.name: spec for spec in overrides.specs()}
        else:
            extra = dict(overrides)
        return OperationRegistry({**self._specs, **extra})

    def __getitem__(self, name: str) -> NodeFactory:
        return self._specs[name].factory

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OperationRegistry({', '.join(self._specs)})"


def _builtin(kind: OpKind, category: OpCategory, factory: NodeFactory, description: str) -> OperationSpec:
    return OperationSpec(
        name=kind.value,
        kind=kind,
        category=category,
        factory=factory,
        description=description,
    )


# =============================================================================
# DEFAULT OPERATIONS - built once, shared, never mutated
# =============================================================================

_BUILTIN_SPECS = [
    _builtin(OpKind.LITERAL, OpCategory.SYNTAX, ops.literal_node,
             "Constant value; embedded {$logic: ...} is compiled"),
    _builtin(OpKind.VALUE_TEMPLATE, OpCategory.SYNTAX, ops.value_template_node,
             '"$a.b" reads a dotted path from the context'),
    _builtin(OpKind.STRING_TEMPLATE, OpCategory.SYNTAX, ops.string_template_node,
             '"`text ${a.b}`" interpolates context values'),
    _builtin(OpKind.IF, OpCategory.CONTROL, ops.if_node,
             "[condition, then, else]"),
    _builtin(OpKind.TYPEOF, OpCategory.INTROSPECTION, ops.typeof_node,
             "Type name of the operand; null and arrays report object"),
    _builtin(OpKind.NOT, OpCategory.BOOLEAN, ops.not_node,
             "Negated truthiness"),
    _builtin(OpKind.AND, OpCategory.BOOLEAN, ops.and_node,
             "Pairwise and over 2+ operands, all evaluated"),
    _builtin(OpKind.OR, OpCategory.BOOLEAN, ops.or_node,
             "Pairwise or over 2+ operands, all evaluated"),
    _builtin(OpKind.EQ, OpCategory.COMPARISON, ops.eq_node,
             "Strict equality"),
    _builtin(OpKind.GT, OpCategory.COMPARISON, ops.gt_node, "Greater than"),
    _builtin(OpKind.GTE, OpCategory.COMPARISON, ops.gte_node, "Greater than or equal"),
    _builtin(OpKind.LT, OpCategory.COMPARISON, ops.lt_node, "Less than"),
    _builtin(OpKind.LTE, OpCategory.COMPARISON, ops.lte_node, "Less than or equal"),
    _builtin(OpKind.ARRAY, OpCategory.SYNTAX, ops.array_node,
             "List of expressions"),
    _builtin(OpKind.OBJECT, OpCategory.COLLECTION, ops.object_node,
             "Mapping of expressions"),
    _builtin(OpKind.OBJECT_PROPERTY, OpCategory.COLLECTION, ops.object_property_node,
             "[base, key, ...] walks base through keys"),
    _builtin(OpKind.MAP, OpCategory.COLLECTION, ops.map_node,
             "[source, body] evaluates body per entry with `map` bound"),
    _builtin(OpKind.DEBUG, OpCategory.INTROSPECTION, ops.debug_node,
             "Reports every evaluation of the wrapped subtree"),
    _builtin(OpKind.CAPITALIZE, OpCategory.STRING, ops.capitalize_node,
             "Upper-case the first character"),
    _builtin(OpKind.CONCAT, OpCategory.STRING, ops.concat_node,
             "Concatenate operands as strings"),
    _builtin(OpKind.SPLIT, OpCategory.STRING, ops.split_node,
             "[value, separator] -> list"),
    _builtin(OpKind.JOIN, OpCategory.STRING, ops.join_node,
             "[values, separator] -> string"),
]

DEFAULT_OPERATIONS = OperationRegistry({spec.name: spec for spec in _BUILTIN_SPECS})


def as_registry(
    operations: Optional[Union[OperationRegistry, Mapping[str, OperationEntry]]] = None,
) -> OperationRegistry:
    """Defaults override-merged with the caller's operations."""
    return DEFAULT_OPERATIONS.merged(operations)
