# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false, reportUnknownMemberType=false, reportUnknownVariableType=false
"""Configuration validation using the Pydantic section models."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from roadboard.config._models._board import BoardConfig
from roadboard.config._models._logging import LoggingConfig
from roadboard.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a configuration validation issue.

    Attributes:
        key: Dotted path to the configuration key (e.g., "board.locale").
        message: Human-readable description of the issue.
        expected: Description of expected value or type, if available.
        actual: The actual value that caused the issue.
        source: Name of the source where the issue was found, or None.
        severity: Whether this is an error or warning.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    source: str | None
    severity: Literal["error", "warning"]


class ConfigSchema(BaseModel):
    """Root configuration schema; unknown keys are ignored."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    board: BoardConfig = BoardConfig()


class LoggingConfigStrict(LoggingConfig):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class BoardConfigStrict(BoardConfig):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ConfigSchemaStrict(BaseModel):
    """Root configuration schema rejecting unknown keys."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    logging: LoggingConfigStrict = LoggingConfigStrict()
    board: BoardConfigStrict = BoardConfigStrict()


def _pydantic_error_to_issue(
    error: "ErrorDetails",
    source: str | None,
) -> ValidationIssue:
    key = ".".join(str(part) for part in error.get("loc", ()))

    ctx = error.get("ctx")
    expected: str | None = None
    if ctx is not None:
        if "expected" in ctx:
            expected = str(ctx["expected"])
        elif "ge" in ctx:
            expected = f">= {ctx['ge']}"
        elif "le" in ctx:
            expected = f"<= {ctx['le']}"

    return ValidationIssue(
        key=key,
        message=str(error.get("msg", "Validation error")),
        expected=expected,
        actual=error.get("input"),
        source=source,
        severity="error",
    )


def validate_config(
    config: dict[str, Any],
    *,
    strict: bool = False,
    source: str | None = None,
) -> list[ValidationIssue]:
    """Validate a configuration dictionary.

    Args:
        config: The configuration dictionary to validate.
        strict: If True, unknown keys are errors. If False, they are ignored.
        source: Source name attached to every issue.

    Returns:
        List of ValidationIssue objects. Empty list indicates valid config.
    """
    schema_class = ConfigSchemaStrict if strict else ConfigSchema

    try:
        _ = schema_class.model_validate(config)
    except ValidationError as e:
        return [_pydantic_error_to_issue(err, source=source) for err in e.errors()]
    else:
        return []


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise ConfigValidationError for the first error-level issue.

    Args:
        issues: Issues to check.
        source: Source reported in the exception; defaults to the source of
            the issue itself.

    Raises:
        ConfigValidationError: If any issues have severity="error".
    """
    errors = [i for i in issues if i.severity == "error"]
    if errors:
        issue = errors[0]
        msg = f"Invalid configuration value for '{issue.key}'"
        raise ConfigValidationError(
            msg,
            key=issue.key,
            value=issue.actual,
            expected=issue.expected or issue.message,
            source=source or issue.source,
        )
