"""
Logic Constants for the user-logic definition language.

This module defines all constant values used by the compiler and nodes:
- Definition sigils and marker keys
- Built-in operation names
- Placeholder pattern for string templates
"""

from __future__ import annotations

import re

from ..config.constants import DEFAULT_PARENT_KEY, DEFAULT_TEMPLATE_MARKER

# =============================================================================
# Definition Syntax
# =============================================================================

VALUE_TEMPLATE_SIGIL = "$"      # "$foo.bar" -> value template
PATH_SEPARATOR = "."            # Dot-separated lookup paths
LOGIC_KEY = "$logic"            # Embedded expression in literals and logic maps
CONDITION_KEY = "if"            # Conditional marker in array logic maps
MAP_BINDING = "map"             # Context key injected by the `map` operation

# ${name} placeholders inside string templates
PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]+)}")

# =============================================================================
# Operation Names
# =============================================================================
# Syntactic operations are selected by definition shape, not by key.

OP_LITERAL = "literal"
OP_VALUE_TEMPLATE = "valueTemplate"
OP_STRING_TEMPLATE = "stringTemplate"
OP_ARRAY = "array"


__all__ = [
    "DEFAULT_PARENT_KEY",
    "DEFAULT_TEMPLATE_MARKER",
    "VALUE_TEMPLATE_SIGIL",
    "PATH_SEPARATOR",
    "LOGIC_KEY",
    "CONDITION_KEY",
    "MAP_BINDING",
    "PLACEHOLDER_PATTERN",
    "OP_LITERAL",
    "OP_VALUE_TEMPLATE",
    "OP_STRING_TEMPLATE",
    "OP_ARRAY",
]
