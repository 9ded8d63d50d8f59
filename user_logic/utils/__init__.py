"""
Utility modules.
"""

from .logger import get_logger, setup_logger, ColoredFormatter
from .debug import (
    DebugSink,
    LoggingDebugSink,
    enable_debug,
    is_debug_enabled,
    get_debug_sink,
    set_debug_sink,
)

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "ColoredFormatter",
    # Debug sink
    "DebugSink",
    "LoggingDebugSink",
    "enable_debug",
    "is_debug_enabled",
    "get_debug_sink",
    "set_debug_sink",
]
