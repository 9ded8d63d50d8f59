"""
Operation factories: definition fragments to nodes.

Each factory receives the sub-definition found under its operation key
and returns a compiled node:

    factory(definition=..., parse=..., report_lookup=...) -> LogicNode

- definition: The value under the operation key (already unwrapped)
- parse: Compiles a child definition with the same registry; takes an
  optional child_parse override that is threaded to grandchildren
- report_lookup: Compile-time callback receiving value-template paths

Factory helpers for host extensions:

    operations = {
        "upper": unary_operation(str.upper, name="upper"),
        "add": binary_operation(operator.add, name="add"),
        "clamp": complex_operation(lambda v, lo, hi: max(lo, min(hi, v)), arity=3),
    }
    UserLogic({"upper": "$name"}, operations=operations)
"""

from __future__ import annotations

import itertools
import operator
from collections.abc import Mapping
from typing import Any, Callable, Optional

from ..utils.debug import DebugSink, get_debug_sink
from .constants import LOGIC_KEY, PATH_SEPARATOR, PLACEHOLDER_PATTERN, VALUE_TEMPLATE_SIGIL
from .errors import InvalidDefinitionError
from .nodes import (
    ArrayNode,
    BinaryOperationNode,
    ComplexOperationNode,
    DebugNode,
    IfNode,
    LiteralNode,
    LogicNode,
    MapNode,
    ObjectNode,
    ObjectPropertyNode,
    StringTemplateNode,
    UnaryOperationNode,
    ValueTemplateNode,
)
from .resolve import PLAIN_RESOLVER, PathResolver, default_resolver
from .types import UNDEFINED, ValueType, stringify, strict_equals

NodeFactory = Callable[..., LogicNode]
ParseFn = Callable[..., LogicNode]


# =============================================================================
# Operand Validation
# =============================================================================

def _require_operands(
    name: str,
    definition: Any,
    minimum: int,
    maximum: Optional[int] = None,
) -> list:
    """
    Check a positional operand list at compile time.

    Raises:
        InvalidDefinitionError: If definition is not a list or has the wrong length
    """
    if not isinstance(definition, (list, tuple)):
        raise InvalidDefinitionError(
            definition, f"'{name}' expects a list of operands, got {type(definition).__name__}"
        )
    count = len(definition)
    if count < minimum or (maximum is not None and count > maximum):
        if maximum is None:
            expected = f"at least {minimum}"
        elif maximum == minimum:
            expected = f"exactly {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        raise InvalidDefinitionError(
            definition, f"'{name}' expects {expected} operands, got {count}"
        )
    return list(definition)


# =============================================================================
# Syntactic Operations
# =============================================================================

def literal_node(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
    """
    Compile a literal value.

    Lists and mappings are walked so that embedded {"$logic": ...}
    sub-expressions are compiled; strings inside literals are NOT templates.

    Examples:
        {literal: {test: 4}}                            -> {"test": 4}
        {literal: {test: {$logic: {or: [false, 5]}}}}   -> {"test": 5}
        {literal: {test: [{$logic: {or: [false, 5]}}]}} -> {"test": [5]}
    """
    if isinstance(definition, (list, tuple)):
        return ArrayNode(tuple(literal_node(child, parse) for child in definition))
    if isinstance(definition, Mapping):
        if LOGIC_KEY in definition:
            return parse(definition[LOGIC_KEY])
        return ObjectNode(tuple(
            (key, literal_node(child, parse)) for key, child in definition.items()
        ))
    return LiteralNode(definition)


def make_value_template_operation(resolver: PathResolver) -> NodeFactory:
    """
    Build a valueTemplate factory bound to a specific path resolver.

    Register the result under "valueTemplate" to change how "$path"
    lookups walk the context.
    """
    def value_template(definition: str, parse: ParseFn, report_lookup) -> LogicNode:
        path = definition.split(PATH_SEPARATOR)
        report_lookup(list(path))
        return ValueTemplateNode(tuple(path), resolver)

    return value_template


def value_template_node(definition: str, parse: ParseFn, report_lookup) -> LogicNode:
    """Compile "$a.b.c" (sigil already stripped) using the configured resolver."""
    return make_value_template_operation(default_resolver())(
        definition=definition, parse=parse, report_lookup=report_lookup
    )


def string_template_node(definition: str, parse: ParseFn, report_lookup=None) -> LogicNode:
    """
    Compile template text (markers already stripped).

    Each ${name} placeholder is compiled as "$name" now, so its lookup is
    reported at compile time like any other value template.
    """
    placeholders = tuple(
        parse(f"{VALUE_TEMPLATE_SIGIL}{name}")
        for name in PLACEHOLDER_PATTERN.findall(definition)
    )
    return StringTemplateNode(definition, placeholders)


def array_node(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
    """Compile each element of a list independently."""
    if not isinstance(definition, (list, tuple)):
        raise InvalidDefinitionError(
            definition, f"'array' expects a list, got {type(definition).__name__}"
        )
    return ArrayNode(tuple(parse(child) for child in definition))


# =============================================================================
# Control and Generic Operations
# =============================================================================

def if_node(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
    """[condition, if_true, if_false]; a missing else branch yields UNDEFINED."""
    operands = _require_operands("if", definition, 2, 3)
    condition, if_true = parse(operands[0]), parse(operands[1])
    if_false = parse(operands[2]) if len(operands) == 3 else LiteralNode(UNDEFINED)
    return IfNode(condition, if_true, if_false)


def unary_operation(func: Callable[[Any], Any], name: Optional[str] = None) -> NodeFactory:
    """Factory for operations taking one operand: {name: operand}."""
    op_name = name or func.__name__.lstrip("_")

    def factory(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
        return UnaryOperationNode(op_name, func, parse(definition))

    return factory


def binary_operation(func: Callable[[Any, Any], Any], name: Optional[str] = None) -> NodeFactory:
    """Factory for pairwise-reducing operations: {name: [a, b, ...]}."""
    op_name = name or func.__name__.lstrip("_")

    def factory(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
        operands = _require_operands(op_name, definition, 2)
        return BinaryOperationNode(op_name, func, tuple(parse(child) for child in operands))

    return factory


def complex_operation(
    func: Callable[..., Any],
    name: Optional[str] = None,
    arity: Optional[int] = None,
) -> NodeFactory:
    """Factory for positional operations: {name: [a, b, ...]} -> func(a, b, ...)."""
    op_name = name or func.__name__.lstrip("_")

    def factory(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
        if arity is None:
            operands = _require_operands(op_name, definition, 0)
        else:
            operands = _require_operands(op_name, definition, arity, arity)
        return ComplexOperationNode(op_name, func, tuple(parse(child) for child in operands))

    return factory


# =============================================================================
# Collection Operations
# =============================================================================

def object_node(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
    """Compile each value of a mapping, keeping its keys."""
    if not isinstance(definition, Mapping):
        raise InvalidDefinitionError(
            definition, f"'object' expects a mapping, got {type(definition).__name__}"
        )
    return ObjectNode(tuple((key, parse(child)) for key, child in definition.items()))


def object_property_node(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
    """[base, key, ...]: walk base through each evaluated key."""
    operands = _require_operands("object-property", definition, 2)
    return ObjectPropertyNode(
        base=parse(operands[0]),
        keys=tuple(parse(child) for child in operands[1:]),
        resolver=PLAIN_RESOLVER,
    )


def map_node(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
    """[source, body]: evaluate body per entry with a `map` binding."""
    source, body = _require_operands("map", definition, 2, 2)
    return MapNode(parse(source), parse(body))


# =============================================================================
# Debug Operation
# =============================================================================

def make_debug_operation(sink: Optional[DebugSink] = None) -> NodeFactory:
    """
    Build a debug factory reporting to a specific sink.

    Every node compiled under the debug operation is wrapped, not only the
    top one. Ids come from a counter owned by this operation instance.
    """
    def debug(definition: Any, parse: ParseFn, report_lookup=None) -> LogicNode:
        counter = itertools.count(1)
        target = sink or get_debug_sink()

        def debug_parse(child_definition: Any, child_parse: Optional[ParseFn] = None) -> LogicNode:
            node = parse(child_definition, child_parse=debug_parse)
            return DebugNode(child_definition, node, counter, target)

        return debug_parse(definition)

    return debug


debug_node = make_debug_operation()


# =============================================================================
# Built-in Functions
# =============================================================================

def _typeof(value: Any) -> str:
    # null and arrays report "object"
    value_type = ValueType.from_value(value)
    if value_type in (ValueType.NULL, ValueType.ARRAY):
        return ValueType.OBJECT.value
    return value_type.value


def _not(value: Any) -> bool:
    return not value


def _and(left: Any, right: Any) -> Any:
    return left and right


def _or(left: Any, right: Any) -> Any:
    return left or right


def _ordering(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    # Missing values never satisfy an ordering
    def ordered(left: Any, right: Any) -> bool:
        if left is UNDEFINED or right is UNDEFINED:
            return False
        return compare(left, right)

    ordered.__name__ = compare.__name__
    return ordered


def _capitalize(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"capitalize: expected a string, got {type(value).__name__} ({value!r})")
    return value[:1].upper() + value[1:]


def _concat(left: Any, right: Any) -> str:
    return stringify(left) + stringify(right)


def _split(value: str, separator: str) -> list:
    if not isinstance(value, str):
        raise TypeError(f"split: expected a string, got {type(value).__name__} ({value!r})")
    if separator == "":
        return list(value)
    return value.split(separator)


def _join(values: Any, separator: str) -> str:
    if isinstance(values, (str, Mapping)) or not hasattr(values, "__iter__"):
        raise TypeError(f"join: expected an array, got {type(values).__name__} ({values!r})")
    return stringify(separator).join(
        "" if value is None or value is UNDEFINED else stringify(value) for value in values
    )


typeof_node = unary_operation(_typeof, name="typeof")
not_node = unary_operation(_not, name="not")
and_node = binary_operation(_and, name="and")
or_node = binary_operation(_or, name="or")
eq_node = binary_operation(strict_equals, name="eq")
gt_node = binary_operation(_ordering(operator.gt), name="gt")
gte_node = binary_operation(_ordering(operator.ge), name="gte")
lt_node = binary_operation(_ordering(operator.lt), name="lt")
lte_node = binary_operation(_ordering(operator.le), name="lte")
capitalize_node = unary_operation(_capitalize, name="capitalize")
concat_node = binary_operation(_concat, name="concat")
split_node = complex_operation(_split, name="split", arity=2)
join_node = complex_operation(_join, name="join", arity=2)
