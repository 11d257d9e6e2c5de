# pyright: reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- Generic output formatters (JSON, YAML, TOML, table)
- Console helpers for normal and error output
"""

from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Never

import orjson

if TYPE_CHECKING:
    from rich.console import Console

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_with_error",
    "format_json",
    "format_table",
    "format_toml",
    "format_yaml",
    "get_console",
    "get_error_console",
    "to_plain_data",
]


class ExitCode(IntEnum):
    """Standard exit codes for roadboard CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3


def _json_default(value: object) -> object:
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Path):
        return str(value)
    msg = f"Type is not JSON serializable: {type(value).__name__}"
    raise TypeError(msg)


def to_plain_data(value: object) -> Any:
    """Convert view records into plain dicts, lists and scalars.

    Dataclasses, enums and datetimes are converted by orjson; the result only
    holds types every formatter accepts.
    """
    return orjson.loads(
        orjson.dumps(value, default=_json_default, option=orjson.OPT_NON_STR_KEYS)
    )


def format_json(data: FormattableData | list[Any], *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Data to format as JSON.
        indent: Whether to pretty-print with indentation.
    """
    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, default=_json_default, option=options).decode("utf-8")


def format_yaml(data: FormattableData | list[Any]) -> str:
    """Format data as YAML."""
    import yaml

    return yaml.safe_dump(
        data,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )


def format_toml(data: FormattableData) -> str:
    """Format data as TOML."""
    import tomli_w

    return tomli_w.dumps(data)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format data as a Markdown table.

    Args:
        headers: Column headers for the table.
        rows: List of rows, where each row is a list of cell values.
    """
    from pytablewriter import MarkdownTableWriter

    writer = MarkdownTableWriter(
        headers=headers,
        value_matrix=rows,
        margin=1,
    )
    return writer.dumps()


def get_console(*, no_color: bool = False) -> "Console":
    """Get a Rich console writing to stdout."""
    from rich.console import Console

    return Console(no_color=no_color, highlight=False)


def get_error_console() -> "Console":
    """Get a Rich console configured for error output to stderr."""
    from rich.console import Console

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.LOAD_ERROR,
    *,
    console: "Console | None" = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(code)
