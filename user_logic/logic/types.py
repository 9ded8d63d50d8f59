"""
Logic value type definitions.

The value model flowing through compiled nodes: JSON data plus the
UNDEFINED sentinel for paths that do not exist in the context.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Sequence

# JSON-shaped data; not enforced
Value = Any
Context = Mapping[str, Any]
LookupReporter = Callable[[list], None]


class _Undefined:
    """
    Missing-value sentinel.

    Distinct from None (JSON null). Falsy, so it reads as "not set" in
    conditions, and a singleton so identity checks are safe.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_undefined(value: Any) -> bool:
    """Check if value is the missing-value sentinel."""
    return value is UNDEFINED


class ValueType(str, Enum):
    """
    JSON type names, as reported by the `typeof` operation.
    """

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def from_value(cls, value: Any) -> "ValueType":
        """
        Determine ValueType from a Python value.

        Args:
            value: Any Python value

        Returns:
            Appropriate ValueType enum; unknown objects report OBJECT
        """
        if value is UNDEFINED:
            return cls.UNDEFINED
        if value is None:
            return cls.NULL
        # bool first: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        return cls.OBJECT


def to_json_compatible(value: Any) -> Any:
    """Recursively replace UNDEFINED with None and tuples with lists."""
    if value is UNDEFINED:
        return None
    if isinstance(value, Mapping):
        return {key: to_json_compatible(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_compatible(item) for item in value]
    return value


def stringify(value: Any) -> str:
    """
    Render a value for string interpolation.

    JSON spelling for scalars (true, false, null), integral floats without
    a trailing ".0", and compact JSON for collections.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(to_json_compatible(value), separators=(",", ":"), default=str)
    return str(value)


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that never treats a bool as equal to a number."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def is_sequence(value: Any) -> bool:
    """Check if value is an ordered, non-string sequence."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
