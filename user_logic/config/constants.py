"""
Configuration constants for user-logic.

Defaults shared by the config loader and the logic compiler. Kept free of
imports from the logic package so config can load first.
"""

# =============================================================================
# Syntax Defaults
# =============================================================================

# Paired delimiter for string templates: `Hello ${name}!`
DEFAULT_TEMPLATE_MARKER = "`"

# Mapping key naming an ancestor scope for inherited path lookups
DEFAULT_PARENT_KEY = "__parent__"

# =============================================================================
# Environment Variables
# =============================================================================

ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_DIR = "USER_LOGIC_LOG_DIR"
ENV_DEBUG = "USER_LOGIC_DEBUG"
ENV_PARENT_KEY = "USER_LOGIC_PARENT_KEY"
ENV_TEMPLATE_MARKER = "USER_LOGIC_TEMPLATE_MARKER"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TRUTHY_ENV_VALUES = ("1", "true", "yes")
