"""
Configuration management for user-logic.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_PARENT_KEY,
    DEFAULT_TEMPLATE_MARKER,
    ENV_DEBUG,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_PARENT_KEY,
    ENV_TEMPLATE_MARKER,
    TRUTHY_ENV_VALUES,
    VALID_LOG_LEVELS,
)


@dataclass
class LogConfig:
    """
    Logging configuration.

    Attributes:
        level: Log level name for the "user_logic" logger
        log_dir: Directory for the log file (None = console only)
    """
    level: str = "INFO"
    log_dir: Optional[str] = None

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"{ENV_LOG_LEVEL} must be one of {list(VALID_LOG_LEVELS)}, got '{self.level}'"
            )


@dataclass
class LogicConfig:
    """
    Compiler and evaluation settings.

    Attributes:
        debug: Emit debug-operation records at INFO instead of DEBUG
        parent_key: Mapping key that links a scope to its ancestor for
            inherited value-template lookups
        template_marker: Single character delimiting string templates
    """
    debug: bool = False
    parent_key: str = DEFAULT_PARENT_KEY
    template_marker: str = DEFAULT_TEMPLATE_MARKER

    def __post_init__(self):
        if not self.parent_key:
            raise ValueError(f"{ENV_PARENT_KEY} must be a non-empty string")
        if len(self.template_marker) != 1:
            raise ValueError(
                f"{ENV_TEMPLATE_MARKER} must be a single character, got '{self.template_marker}'"
            )
        if self.template_marker == "$":
            raise ValueError(
                f"{ENV_TEMPLATE_MARKER} cannot be '$' (reserved for value templates)"
            )


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)

        self.log = self._load_log_config()
        self.logic = self._load_logic_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv(ENV_LOG_LEVEL, "INFO"),
            log_dir=os.getenv(ENV_LOG_DIR) or None,
        )

    def _load_logic_config(self) -> LogicConfig:
        """Load compiler configuration from environment."""
        return LogicConfig(
            debug=os.getenv(ENV_DEBUG, "").lower() in TRUTHY_ENV_VALUES,
            parent_key=os.getenv(ENV_PARENT_KEY, DEFAULT_PARENT_KEY),
            template_marker=os.getenv(ENV_TEMPLATE_MARKER, DEFAULT_TEMPLATE_MARKER),
        )

    def summary(self) -> dict:
        """Settings as a plain dict for display."""
        return {
            "log_level": self.log.level,
            "log_dir": self.log.log_dir,
            "debug": self.logic.debug,
            "parent_key": self.logic.parent_key,
            "template_marker": self.logic.template_marker,
        }


def get_config() -> Config:
    """Get or create the global config instance."""
    return Config()


def reset_config() -> None:
    """Drop the global config so the next get_config() re-reads the environment."""
    Config._instance = None
