"""Configuration models.

This module provides Pydantic models for roadboard configuration sections
and the main Config container class.
"""

from roadboard.config._models._board import BoardConfig
from roadboard.config._models._common import (
    BoardLocale,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from roadboard.config._models._config import Config
from roadboard.config._models._logging import LoggingConfig

__all__ = [
    "BoardConfig",
    "BoardLocale",
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
]
