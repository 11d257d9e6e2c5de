from pathlib import Path

import platformdirs

APP_NAME = "roadboard"


def get_log_dir() -> Path:
    """Get the platform log directory for roadboard."""
    return platformdirs.user_log_path(APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file."""
    return get_log_dir() / "cli.log"


def resolve_data_file(data_file: str | Path, *, base: Path | None = None) -> Path:
    """Resolve a dataset path against a base directory.

    Args:
        data_file: Absolute path, or a path relative to ``base``.
        base: Directory relative paths are resolved from. Defaults to the
            current working directory.

    Returns:
        The absolute dataset path.
    """
    path = Path(data_file).expanduser()
    if path.is_absolute():
        return path
    return (base or Path.cwd()) / path
