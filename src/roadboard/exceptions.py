"""Roadboard exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class RoadboardError(Exception):
    """Base exception for roadboard errors."""


# =============================================================================
# Dataset Exceptions
# =============================================================================


class DatasetError(RoadboardError):
    """Base exception for dataset errors."""


class DatasetLoadError(DatasetError):
    """Raised when a dataset cannot be read or decoded.

    Attributes:
        path: Path of the dataset file, if the data came from disk.
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        path: "Path | None" = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and load context.

        Args:
            message: Human-readable error message.
            path: Path of the dataset file.
            cause: Underlying exception.
        """
        super().__init__(message)
        self.path: Path | None = path
        self.cause: Exception | None = cause


class EmptyDatasetError(DatasetLoadError):
    """Raised when a dataset has no milestones.

    A board without data is a load failure, not a "zero results" state.
    """


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(RoadboardError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: "Path | None" = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
