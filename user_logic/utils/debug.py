"""
Debug utilities for user-logic.

Provides the sink that receives records from the `debug` operation.
Every wrapped node emits two records per evaluation, sharing one id:

    USER-LOGIC (3): evaluating {'eq': ['$foo', 5]} with context {...}
    USER-LOGIC (3): result = True

Usage:
    from user_logic.utils.debug import enable_debug, set_debug_sink

    # Promote debug records from DEBUG to INFO
    enable_debug()

    # Route records somewhere else
    set_debug_sink(MyCollectingSink())

Enable debugging:
    - Set environment variable: USER_LOGIC_DEBUG=1
    - Or use CLI flag: --debug
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from ..config import get_config
from .logger import ROOT_LOGGER_NAME, get_logger

DEBUG_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.debug"

# None = defer to USER_LOGIC_DEBUG via config
_debug_enabled: Optional[bool] = None


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    if _debug_enabled is None:
        return get_config().logic.debug
    return _debug_enabled


def enable_debug(enabled: bool = True) -> None:
    """Enable or disable debug mode programmatically."""
    global _debug_enabled
    _debug_enabled = enabled

    if enabled:
        get_logger().setLevel(logging.DEBUG)


class DebugSink(Protocol):
    """Receives observability records from debug-wrapped nodes."""

    def evaluating(self, record_id: int, definition: Any, context: Any) -> None: ...

    def result(self, record_id: int, value: Any) -> None: ...


class LoggingDebugSink:
    """Debug sink writing to the "user_logic.debug" logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger(DEBUG_LOGGER_NAME)

    @property
    def level(self) -> int:
        return logging.INFO if is_debug_enabled() else logging.DEBUG

    def evaluating(self, record_id: int, definition: Any, context: Any) -> None:
        self.logger.log(
            self.level,
            "USER-LOGIC (%d): evaluating %r with context %r",
            record_id, definition, context,
        )

    def result(self, record_id: int, value: Any) -> None:
        self.logger.log(self.level, "USER-LOGIC (%d): result = %r", record_id, value)


_debug_sink: DebugSink = LoggingDebugSink()


def get_debug_sink() -> DebugSink:
    """Sink used by the default `debug` operation."""
    return _debug_sink


def set_debug_sink(sink: Optional[DebugSink] = None) -> DebugSink:
    """
    Replace the default debug sink.

    Args:
        sink: New sink, or None to restore logging output

    Returns:
        The previously installed sink
    """
    global _debug_sink
    previous = _debug_sink
    _debug_sink = sink or LoggingDebugSink()
    return previous
