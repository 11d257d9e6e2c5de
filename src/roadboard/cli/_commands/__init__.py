"""Roadboard CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._board import labels, show, statuses, suggest
from ._config import app as config_app
from ._context import CLIContext, OutputFormat
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    format_json,
    format_table,
    format_toml,
    format_yaml,
    get_console,
    get_error_console,
    to_plain_data,
)

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "config_app",
    "exit_with_error",
    "format_json",
    "format_table",
    "format_toml",
    "format_yaml",
    "get_console",
    "get_error_console",
    "register_commands",
    "to_plain_data",
]


def register_commands(app: "App") -> None:
    app.command(show, name="show")
    app.command(suggest, name="suggest")
    app.command(labels, name="labels")
    app.command(statuses, name="statuses")
    app.command(config_app)
