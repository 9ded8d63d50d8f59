"""
user-logic - JSON-defined rules and templates

Compiles JSON-shaped definitions (boolean logic, comparisons, string and
value templates, object construction, collection mapping) into expression
trees and evaluates them against runtime contexts, without executing host
code.
"""

__version__ = "1.0.0"
__author__ = "user-logic"

from .config import get_config
from .logic import (
    UNDEFINED,
    UserLogic,
    compile_logic,
    make_logic_map,
    eval_logic_map,
    DEFAULT_OPERATIONS,
    LogicError,
    UnknownOperationError,
    MalformedTemplateError,
)

__all__ = [
    "__version__",
    "get_config",
    "UNDEFINED",
    "UserLogic",
    "compile_logic",
    "make_logic_map",
    "eval_logic_map",
    "DEFAULT_OPERATIONS",
    "LogicError",
    "UnknownOperationError",
    "MalformedTemplateError",
]
