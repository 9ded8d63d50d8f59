"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    LogConfig,
    LogicConfig,
)

from .constants import (
    DEFAULT_PARENT_KEY,
    DEFAULT_TEMPLATE_MARKER,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "reset_config",
    "LogConfig",
    "LogicConfig",
    # Syntax defaults
    "DEFAULT_PARENT_KEY",
    "DEFAULT_TEMPLATE_MARKER",
]
