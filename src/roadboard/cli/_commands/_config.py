# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: A002, D415
"""Config commands for viewing roadboard configuration."""

from typing import Annotated

from cyclopts import App, Parameter

from roadboard.config import Config, ConfigError

from ._context import CLIContext, OutputFormat
from ._shared import ExitCode, exit_with_error, format_json, format_toml, format_yaml

app = App(name="config", help="View roadboard configuration.")


def _load_config() -> Config:
    ctx = CLIContext.get_current()
    if ctx.config_error is not None:
        exit_with_error(ctx.config_error, ExitCode.LOAD_ERROR)
    config_path = ctx.config_path
    try:
        if config_path is not None:
            return Config.from_file(config_path)
        return Config.load()
    except (ConfigError, OSError) as e:
        exit_with_error(f"Failed to load config: {e}", ExitCode.LOAD_ERROR)


@app.command(name="show")
def _show(
    *,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, yaml)"),
    ] = OutputFormat.TOML,
    section: Annotated[
        str | None,
        Parameter(name=["--section"], help="Show one section only (logging, board)"),
    ] = None,
    no_defaults: Annotated[
        bool, Parameter(name="--no-defaults", help="Exclude default values")
    ] = False,
) -> None:
    """Display merged configuration

    Shows the configuration merged from defaults, the user and project
    files, the environment and command-line overrides.
    """
    if format not in (OutputFormat.TOML, OutputFormat.JSON, OutputFormat.YAML):
        exit_with_error(
            f"Unsupported format '{format}'. Valid: toml, json, yaml",
            ExitCode.VALIDATION_ERROR,
        )

    data = _load_config().to_dict(include_defaults=not no_defaults)

    if section:
        if not isinstance(data.get(section), dict):
            exit_with_error(f"Section '{section}' not found", ExitCode.NOT_FOUND)
        data = {section: data[section]}

    match format:
        case OutputFormat.JSON:
            output = format_json(data)
        case OutputFormat.YAML:
            output = format_yaml(data)
        case _:
            output = format_toml(data)

    print(output.rstrip())  # noqa: T201
