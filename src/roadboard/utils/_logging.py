"""Logging utilities for roadboard.

This module provides standalone structlog logger factories writing JSON or
text logs to a file. Each logger is self-contained and does not modify the
global structlog configuration.
"""

import logging
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_cli_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str, *, respect_env: bool = False) -> int:
    """Convert a log level name to a logging level integer.

    Args:
        level: Log level name (debug, info, warning, error).
        respect_env: If True, ROADBOARD_DEBUG forces DEBUG.
    """
    if respect_env and getenv("ROADBOARD_DEBUG", None):
        return logging.DEBUG

    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _create_logger(
    log_file_path: str,
    *,
    log_level: int = logging.INFO,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":
    """Create a standalone structlog logger appending to a file.

    Args:
        log_file_path: Path to the log file; parent directories are created.
        log_level: Minimum level written.
        log_format: Output format, either "json" or "text".

    Returns:
        A configured FilteringBoundLogger instance.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLoggerFactory(file=log_path.open("a"))(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":
    """Create a logger for CLI commands.

    Writes structured logs to ``log_file``, or to ``cli.log`` in the
    platform log directory when empty. ROADBOARD_DEBUG forces DEBUG level
    regardless of ``level``.

    Args:
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to the log file.
        command: Name of the CLI command, bound to every entry.

    Returns:
        A FilteringBoundLogger instance configured for CLI logging.
    """
    logger = _create_logger(
        log_file if log_file else str(get_cli_log_file()),
        log_level=_log_level_from_string(level, respect_env=True),
        log_format=log_format,
    )

    if command:
        return logger.bind(command=command)
    return logger


def create_null_logger() -> "FilteringBoundLogger":
    """Create a logger that discards every event."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )
