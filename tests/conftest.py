"""
Pytest configuration for user-logic tests.
"""

import pytest

from user_logic.config import reset_config
from user_logic.utils import debug as debug_utils


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from the caller's environment and global state."""
    for name in (
        "LOG_LEVEL",
        "USER_LOGIC_LOG_DIR",
        "USER_LOGIC_DEBUG",
        "USER_LOGIC_PARENT_KEY",
        "USER_LOGIC_TEMPLATE_MARKER",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(debug_utils, "_debug_enabled", None)
    reset_config()
    previous_sink = debug_utils.set_debug_sink(None)
    yield
    debug_utils.set_debug_sink(previous_sink)
    reset_config()


class RecordingSink:
    """Debug sink that keeps records in memory."""

    def __init__(self):
        self.records = []

    def evaluating(self, record_id, definition, context):
        self.records.append(("evaluating", record_id, definition, context))

    def result(self, record_id, value):
        self.records.append(("result", record_id, value))


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def lookups() -> list:
    """List collecting reported lookup paths."""
    return []
