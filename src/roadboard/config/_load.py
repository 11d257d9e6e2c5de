import os
import sys
from typing import TYPE_CHECKING

from roadboard.exceptions import ConfigError

from ._models import Config

if TYPE_CHECKING:
    from pathlib import Path


def _fail_or_warn(message: str, *, strict: bool) -> tuple[Config, str]:
    if strict:
        print(f"Error: {message}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"Warning: {message}", file=sys.stderr)  # noqa: T201
    return Config.from_dict({}), message


def safe_load_config(
    *,
    config_path: "Path | None" = None,
    project_root: "Path | None" = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Behavior on failure depends on ROADBOARD_STRICT_CONFIG:
    - unset or "0": warn to stderr and return the default config
    - "1": exit with status 1

    An explicit config_path must exist; a missing file always exits.

    Args:
        config_path: Explicit path to a config file (--config flag).
        project_root: Project root directory override.
        cli_overrides: CLI argument overrides passed to Config.load().

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
    """
    strict_mode = os.environ.get("ROADBOARD_STRICT_CONFIG", "0") == "1"

    if config_path is not None and not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    try:
        if config_path is not None:
            return Config.from_file(config_path), None

        config = Config.load(
            project_root=project_root,
            include_env=True,
            include_cli=cli_overrides is not None,
            cli_overrides=cli_overrides,
        )
    except ConfigError as e:
        return _fail_or_warn(f"Failed to load config: {e}", strict=strict_mode)
    except OSError as e:
        return _fail_or_warn(f"Failed to load config: {e}", strict=strict_mode)
    else:
        return config, None
