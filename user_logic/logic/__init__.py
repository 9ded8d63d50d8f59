"""
Logic compilation and evaluation.

Definitions are JSON-shaped data compiled once into trees of frozen nodes,
then evaluated against runtime contexts.

Design principles:
- Compile everything up front; unknown operations and malformed templates
  fail at construction, never mid-evaluation
- Report context lookups at compile time so hosts can see dependencies
- Missing paths evaluate to UNDEFINED, not errors
- Trees and contexts are never mutated during evaluation
"""

from .types import (
    UNDEFINED,
    ValueType,
    is_undefined,
    stringify,
    to_json_compatible,
)
from .errors import (
    LogicError,
    CompileError,
    UnknownOperationError,
    MalformedTemplateError,
    InvalidDefinitionError,
)
from .resolve import (
    PathResolver,
    InheritedPathResolver,
    split_path,
)
from .nodes import LogicNode
from .operations import (
    NodeFactory,
    unary_operation,
    binary_operation,
    complex_operation,
    make_value_template_operation,
    make_debug_operation,
)
from .registry import (
    OpKind,
    OpCategory,
    OperationSpec,
    OperationRegistry,
    DEFAULT_OPERATIONS,
)
from .compiler import (
    compile_logic,
    create_logic_node,
)
from .user_logic import UserLogic
from .logic_map import (
    LogicMap,
    LogicMapEntry,
    make_logic_map,
    eval_logic_map,
    collect_lookups,
)
from .loader import load_definition, load_context

__all__ = [
    # Values
    "UNDEFINED",
    "ValueType",
    "is_undefined",
    "stringify",
    "to_json_compatible",
    # Errors
    "LogicError",
    "CompileError",
    "UnknownOperationError",
    "MalformedTemplateError",
    "InvalidDefinitionError",
    # Path resolution
    "PathResolver",
    "InheritedPathResolver",
    "split_path",
    # Operations
    "LogicNode",
    "NodeFactory",
    "unary_operation",
    "binary_operation",
    "complex_operation",
    "make_value_template_operation",
    "make_debug_operation",
    # Registry
    "OpKind",
    "OpCategory",
    "OperationSpec",
    "OperationRegistry",
    "DEFAULT_OPERATIONS",
    # Compilation
    "compile_logic",
    "create_logic_node",
    "UserLogic",
    # Logic maps
    "LogicMap",
    "LogicMapEntry",
    "make_logic_map",
    "eval_logic_map",
    "collect_lookups",
    # Files
    "load_definition",
    "load_context",
]
