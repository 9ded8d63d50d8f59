"""
Compiler: definitions to LogicNode trees.

Dispatches on definition shape, in priority order:

    "$a.b"            -> valueTemplate (lookup reported at compile time)
    "`text ${a}`"     -> stringTemplate (must end with the marker)
    "any other text"  -> literal
    [a, b, ...]       -> array
    5, true, null     -> literal
    {"op": operands}  -> registry[op] (first key names the operation)

Usage:
    node = compile_logic({"eq": ["$user.role", "admin"]})
    node.evaluate({"user": {"role": "admin"}})  # True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from ..config import get_config
from ..config.constants import DEFAULT_TEMPLATE_MARKER
from ..utils.logger import get_logger
from .constants import (
    OP_ARRAY,
    OP_LITERAL,
    OP_STRING_TEMPLATE,
    OP_VALUE_TEMPLATE,
    VALUE_TEMPLATE_SIGIL,
)
from .errors import InvalidDefinitionError, MalformedTemplateError, UnknownOperationError
from .nodes import LogicNode
from .operations import ParseFn
from .registry import OperationRegistry, as_registry
from .types import LookupReporter

logger = get_logger(__name__)


def _ignore_lookup(path: list) -> None:
    pass


def _select_operation(definition: Any, template_marker: str) -> tuple[str, Any]:
    """
    Pick the operation name and the sub-definition handed to its factory.

    Raises:
        MalformedTemplateError: If a template string is not closed
        InvalidDefinitionError: If a mapping names no operation
    """
    if isinstance(definition, str):
        if definition.startswith(VALUE_TEMPLATE_SIGIL):
            return OP_VALUE_TEMPLATE, definition[len(VALUE_TEMPLATE_SIGIL):]
        if definition.startswith(template_marker):
            if len(definition) < 2 or not definition.endswith(template_marker):
                raise MalformedTemplateError(definition, template_marker)
            return OP_STRING_TEMPLATE, definition[1:-1]
        return OP_LITERAL, definition

    if isinstance(definition, (list, tuple)):
        return OP_ARRAY, definition

    if not isinstance(definition, Mapping):
        return OP_LITERAL, definition

    if not definition:
        raise InvalidDefinitionError(definition, "Object definitions must name an operation")
    name = next(iter(definition))
    return name, definition[name]


def create_logic_node(
    definition: Any,
    operations: OperationRegistry,
    report_lookup: LookupReporter,
    child_parse: Optional[ParseFn] = None,
    template_marker: str = DEFAULT_TEMPLATE_MARKER,
) -> LogicNode:
    """
    Compile one definition into a node.

    Args:
        definition: JSON-shaped definition
        operations: Registry to resolve operation keys against
        report_lookup: Called with each value-template path, at compile time
        child_parse: Compiler the new node uses for its children, in place
            of the default (the debug operation uses this to wrap a subtree)
        template_marker: Paired delimiter for string templates

    Returns:
        Fully compiled node

    Raises:
        UnknownOperationError: If an operation key is not registered
        MalformedTemplateError: If a template string is not closed
        InvalidDefinitionError: If operands have the wrong shape
    """
    def default_parse(child_definition: Any, child_parse: Optional[ParseFn] = None) -> LogicNode:
        return create_logic_node(
            child_definition,
            operations,
            report_lookup,
            child_parse=child_parse,
            template_marker=template_marker,
        )

    parse = child_parse or default_parse

    name, prepared = _select_operation(definition, template_marker)
    factory = operations.lookup(name)
    if factory is None:
        raise UnknownOperationError(name, definition, allowed=operations.names())

    logger.debug("Compiling %s: %r", name, prepared)
    return factory(definition=prepared, parse=parse, report_lookup=report_lookup)


def compile_logic(
    definition: Any,
    operations=None,
    report_lookup: Optional[LookupReporter] = None,
) -> LogicNode:
    """
    Compile a definition with the default operations plus overrides.

    Args:
        definition: JSON-shaped definition
        operations: Extra or replacement operations (name -> factory)
        report_lookup: Optional compile-time callback for value-template paths

    Returns:
        Root node of the compiled tree
    """
    return create_logic_node(
        definition,
        as_registry(operations),
        report_lookup or _ignore_lookup,
        template_marker=get_config().logic.template_marker,
    )
