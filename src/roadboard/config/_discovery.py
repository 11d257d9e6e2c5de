"""Project root and config path discovery utilities.

The project root is the nearest directory, searching upward, that contains a
``roadboard.toml`` file. The user config file lives in the platform config
directory.
"""

from pathlib import Path
from typing import Any, Final

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._models._common import ConfigSource, ConfigSourceName

PROJECT_CONFIG_NAME: Final = "roadboard.toml"


def find_project_root(start: Path | None = None) -> Path | None:
    """Find the project root by searching upward for ``roadboard.toml``.

    Args:
        start: Directory to start searching from. Defaults to the current
            working directory.

    Returns:
        The directory containing ``roadboard.toml``, or None if the
        filesystem root is reached without finding one.
    """
    current = (start or Path.cwd()).resolve()

    while True:
        if (current / PROJECT_CONFIG_NAME).is_file():
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/roadboard/config.toml``
    - macOS: ``~/Library/Application Support/roadboard/config.toml``
    - Windows: ``%APPDATA%\roadboard\config.toml``

    The path is returned whether or not the file exists.
    """
    return platformdirs.user_config_path("roadboard") / "config.toml"


def _file_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    project_root: Path | None = None,
    *,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover all configuration sources.

    File sources are checked for existence but not read. The project source
    is omitted when no project root is found.

    Args:
        project_root: Project root directory. If None, auto-detect by
            searching upward for ``roadboard.toml``.
        include_env: Include environment variables as a source.
        include_cli: Include CLI overrides as a source.
        cli_overrides: CLI argument overrides. Only used if include_cli is True.

    Returns:
        ConfigSource objects in precedence order, highest first.
    """
    sources: list[ConfigSource] = []
    resolved_root = project_root if project_root else find_project_root()

    if include_cli:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides or {},
            )
        )

    if include_env:
        # Values are parsed during loading
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    if resolved_root:
        project_path = resolved_root / PROJECT_CONFIG_NAME
        sources.append(
            ConfigSource(
                name=ConfigSourceName.PROJECT,
                path=project_path,
                exists=_file_exists(project_path),
                values={},
            )
        )

    user_path = get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources
