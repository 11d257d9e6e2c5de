"""Roadboard configuration.

This module provides the public API for roadboard configuration: layered
loading from defaults, user and project TOML files, the environment and CLI
overrides, with typed access to each section.

Example:
    >>> from roadboard.config import Config
    >>> config = Config.load()
    >>> config.board.suggestion_limit
    10
"""

from roadboard.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._discovery import (
    PROJECT_CONFIG_NAME,
    discover_sources,
    find_project_root,
    get_user_config_path,
)
from ._load import safe_load_config
from ._loader import (
    ENV_PREFIX,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    BoardConfig,
    BoardLocale,
    Config,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LoggingConfig,
    LogLevel,
)
from ._validation import ValidationIssue, raise_if_validation_errors, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "PROJECT_CONFIG_NAME",
    "BoardConfig",
    "BoardLocale",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ValidationIssue",
    "deep_merge",
    "discover_sources",
    "find_project_root",
    "get_user_config_path",
    "parse_env_vars",
    "parse_string_value",
    "raise_if_validation_errors",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
]
