# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration container with typed access.

This module provides the Config class, the primary interface for reading
roadboard configuration values.
"""

from typing import TYPE_CHECKING, Any, ClassVar, TypeVar, overload

import tomli_w
from pydantic import BaseModel, ConfigDict, PrivateAttr

from roadboard.config._defaults import DEFAULT_CONFIG
from roadboard.config._loader import copy_value, deep_merge, parse_env_vars, read_toml_file
from roadboard.config._models._board import BoardConfig
from roadboard.config._models._common import ConfigSource, ConfigSourceName
from roadboard.config._models._logging import LoggingConfig

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Self

T = TypeVar("T")


class Config(BaseModel):
    """Configuration container with typed access.

    Instances are immutable. Use the factory methods rather than the
    constructor.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _board: BoardConfig = PrivateAttr(default_factory=BoardConfig)

    def __init__(
        self,
        *,
        _data: dict[str, Any] | None = None,
        _sources: tuple[ConfigSource, ...] = (),
    ) -> None:
        """Initialize from an already merged and validated dictionary.

        Args:
            _data: The complete merged configuration dictionary.
            _sources: Sources that contributed to this configuration.
        """
        super().__init__()
        self._data = _data if _data is not None else copy_value(DEFAULT_CONFIG)
        self._sources = _sources
        self._logging = LoggingConfig.model_validate(self._data.get("logging", {}))
        self._board = BoardConfig.model_validate(self._data.get("board", {}))

    @classmethod
    def _build(
        cls,
        data: dict[str, Any],
        sources: tuple[ConfigSource, ...],
        *,
        validate: bool,
        source: str | None = None,
    ) -> "Self":
        # Deferred import to avoid circular dependency
        from roadboard.config._validation import (  # noqa: PLC0415
            ConfigSchema,
            raise_if_validation_errors,
            validate_config,
        )

        merged = deep_merge(DEFAULT_CONFIG, data)
        if validate:
            raise_if_validation_errors(validate_config(merged), source=source)
        else:
            # Invalid sections fall back to their defaults
            for section in ConfigSchema.model_fields:
                if validate_config({section: merged.get(section, {})}):
                    merged[section] = copy_value(DEFAULT_CONFIG[section])
        return cls(_data=merged, _sources=sources)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        validate: bool = True,
    ) -> "Self":
        """Create configuration from a dictionary merged over the defaults.

        Args:
            data: Dictionary of configuration values.
            validate: Whether to validate the configuration. Invalid sections
                are replaced by their defaults when False.

        Raises:
            ConfigValidationError: If validation fails (when validate=True).
        """
        return cls._build(data, (), validate=validate)

    @classmethod
    def from_file(
        cls,
        path: "Path",
        *,
        validate: bool = True,
    ) -> "Self":
        """Load configuration from a single TOML file merged over the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.PROJECT,
            path=path,
            exists=True,
            values=data,
        )
        return cls._build(data, (source,), validate=validate, source=str(path))

    @classmethod
    def load(
        cls,
        *,
        project_root: "Path | None" = None,
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
    ) -> "Self":
        """Load merged configuration from all sources.

        Sources merge in precedence order: defaults, user file, project file,
        environment, CLI overrides.

        Args:
            project_root: Project root directory. If None, auto-detect by
                searching upward for ``roadboard.toml``.
            include_env: Include ``ROADBOARD_*`` environment variables.
            include_cli: Include CLI overrides.
            cli_overrides: CLI argument overrides, used if include_cli is True.

        Raises:
            ConfigLoadError: If config files cannot be parsed.
            ConfigValidationError: If merged config fails validation.
        """
        from roadboard.config._discovery import discover_sources  # noqa: PLC0415

        sources = discover_sources(
            project_root=project_root,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        loaded_sources: list[ConfigSource] = []

        # Discovery lists sources highest first; merge lowest first
        for source in reversed(sources):
            values: dict[str, Any] = {}

            if source.name in (ConfigSourceName.DEFAULT, ConfigSourceName.CLI):
                values = source.values
            elif source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.path and source.exists:
                values = read_toml_file(source.path)

            loaded_sources.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )
            if values:
                merged = deep_merge(merged, values)

        return cls._build(
            merged, tuple(reversed(loaded_sources)), validate=True
        )

    @property
    def sources(self) -> list[ConfigSource]:
        """Sources that contributed to this configuration, highest first."""
        return list(self._sources)

    @property
    def logging(self) -> LoggingConfig:
        return self._logging

    @property
    def board(self) -> BoardConfig:
        return self._board

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, default: T) -> T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Examples:
            >>> config.get("board.locale")
            'en'
            >>> config.get("nonexistent", "fallback")
            'fallback'
        """
        current: Any = self._data

        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        return current

    def to_dict(self, *, include_defaults: bool = True) -> dict[str, Any]:
        """Convert configuration to a dictionary.

        Args:
            include_defaults: If False, only values that differ from the
                defaults are included.
        """
        if include_defaults:
            return copy_value(self._data)
        return _diff_from_defaults(self._data, DEFAULT_CONFIG)

    def to_toml(self, *, include_defaults: bool = False) -> str:
        """Convert configuration to a TOML string."""
        return tomli_w.dumps(self.to_dict(include_defaults=include_defaults))


def _diff_from_defaults(
    data: dict[str, Any],
    defaults: dict[str, Any],
) -> dict[str, Any]:
    result: dict[str, Any] = {}

    for key, value in data.items():
        if key not in defaults:
            result[key] = copy_value(value)
        elif isinstance(value, dict) and isinstance(defaults[key], dict):
            nested_diff = _diff_from_defaults(value, defaults[key])
            if nested_diff:
                result[key] = nested_diff
        elif value != defaults[key]:
            result[key] = copy_value(value)

    return result
