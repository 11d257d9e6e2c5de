# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
# pyright: reportExplicitAny=false
"""Reading roadmap datasets.

The dataset file is the JSON document written by the ingestion step. Parsing
is lenient: missing or malformed optional parts (fields, custom fields,
labels, descriptions, sub-issues) are replaced with empty values instead of
failing. The only structural requirement is at least one milestone.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

import orjson
import pendulum

from roadboard.dataset._models import (
    DEFAULT_LABEL_COLOR,
    Dataset,
    FieldValue,
    Issue,
    Label,
    Milestone,
    Project,
    ProjectField,
    StatusOption,
    SubIssues,
)
from roadboard.enums import IssueState, StatusColor
from roadboard.exceptions import DatasetLoadError, EmptyDatasetError

__all__ = [
    "EMPTY_DATASET_MESSAGE",
    "load_dataset",
    "normalize_color",
    "parse_dataset",
    "read_json",
]

EMPTY_DATASET_MESSAGE: Final = "No roadmap data available yet. Please check back later."

_HEX_COLOR: Final = re.compile(r"[0-9a-f]{6}")


def read_json(path: Path) -> dict[str, Any]:
    """Read a JSON object from disk.

    Args:
        path: Path to the JSON file.

    Returns:
        The decoded JSON object.

    Raises:
        DatasetLoadError: If the file cannot be read, is not valid JSON, or
            does not contain a JSON object.
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        msg = f"Failed to load data: {e}"
        raise DatasetLoadError(msg, path=path, cause=e) from e

    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        msg = f"Failed to parse data file {path}: {e}"
        raise DatasetLoadError(msg, path=path, cause=e) from e

    if not isinstance(data, dict):
        msg = f"Data file {path} must contain a JSON object"
        raise DatasetLoadError(msg, path=path)
    return data


def load_dataset(path: Path) -> Dataset:
    """Load and parse a dataset file.

    Args:
        path: Path to the dataset JSON file.

    Returns:
        The parsed dataset.

    Raises:
        DatasetLoadError: If the file cannot be read or decoded.
        EmptyDatasetError: If the dataset has no milestones.
    """
    data = read_json(path)
    try:
        return parse_dataset(data)
    except EmptyDatasetError as e:
        e.path = path
        raise


def parse_dataset(data: Mapping[str, Any]) -> Dataset:
    """Build a Dataset from decoded JSON.

    Args:
        data: Decoded dataset document.

    Returns:
        The parsed dataset.

    Raises:
        EmptyDatasetError: If ``milestones`` is missing or empty.
    """
    raw_milestones = _as_list(data.get("milestones"))
    milestones = tuple(
        _parse_milestone(item) for item in raw_milestones if isinstance(item, dict)
    )
    if not milestones:
        raise EmptyDatasetError(EMPTY_DATASET_MESSAGE)

    fields = tuple(
        _parse_field(item)
        for item in _as_list(data.get("fields"))
        if isinstance(item, dict) and item.get("name")
    )

    return Dataset(
        milestones=milestones,
        fields=fields,
        project=_parse_project(data.get("project")),
        generated_at=_parse_datetime(data.get("generated_at")),
    )


def normalize_color(value: object) -> str:
    """Normalize a label color to six lowercase hex digits.

    Args:
        value: Raw color value, with or without a leading ``#``.

    Returns:
        The normalized color, or the default gray if the value is unusable.
    """
    if not isinstance(value, str):
        return DEFAULT_LABEL_COLOR
    color = value.strip().removeprefix("#").lower()
    if _HEX_COLOR.fullmatch(color) is None:
        return DEFAULT_LABEL_COLOR
    return color


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _as_list(value: object) -> list[Any]:
    return value if isinstance(value, list) else []


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _parse_datetime(value: object) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = pendulum.parse(value)
    except ValueError:
        return None
    return parsed if isinstance(parsed, datetime) else None


def _parse_project(value: object) -> Project | None:
    if not isinstance(value, dict):
        return None
    return Project(
        title=str(value.get("title") or ""),
        url=str(value.get("url") or ""),
    )


def _parse_status_color(value: object) -> StatusColor:
    if not isinstance(value, str):
        return StatusColor.GRAY
    try:
        return StatusColor(value.upper())
    except ValueError:
        return StatusColor.GRAY


def _parse_field(data: dict[str, Any]) -> ProjectField:
    options = tuple(
        StatusOption(
            name=str(option["name"]),
            color=_parse_status_color(option.get("color")),
            id=_optional_str(option.get("id")),
        )
        for option in _as_list(data.get("options"))
        if isinstance(option, dict) and option.get("name") is not None
    )
    return ProjectField(
        name=str(data["name"]),
        options=options,
        id=_optional_str(data.get("id")),
    )


def _parse_state(value: object) -> IssueState | str:
    if not isinstance(value, str):
        return IssueState.OPEN
    try:
        return IssueState(value)
    except ValueError:
        return value


def _parse_labels(value: object) -> tuple[Label, ...]:
    return tuple(
        Label(name=str(label["name"]), color=normalize_color(label.get("color")))
        for label in _as_list(value)
        if isinstance(label, dict) and label.get("name") is not None
    )


def _parse_custom_fields(value: object) -> Mapping[str, FieldValue]:
    if not isinstance(value, dict):
        return MappingProxyType({})
    fields: dict[str, FieldValue] = {}
    for name, entry in value.items():
        if not isinstance(entry, dict) or entry.get("value") is None:
            continue
        fields[str(name)] = FieldValue(
            value=str(entry["value"]),
            option_id=_optional_str(entry.get("optionId")),
        )
    return MappingProxyType(fields)


def _parse_sub_issues(value: object) -> SubIssues | None:
    if not isinstance(value, dict):
        return None
    try:
        total = int(value.get("total", 0))
        completed = int(value.get("completed", 0))
    except (TypeError, ValueError):
        return None
    total = max(total, 0)
    return SubIssues(total=total, completed=min(max(completed, 0), total))


def _parse_issue(data: dict[str, Any]) -> Issue:
    description = data.get("description")
    return Issue(
        id=str(data.get("id") or ""),
        title=str(data.get("title") or ""),
        state=_parse_state(data.get("state")),
        url=str(data.get("url") or ""),
        labels=_parse_labels(data.get("labels")),
        custom_fields=_parse_custom_fields(data.get("customFields")),
        sub_issues=_parse_sub_issues(data.get("subIssues")),
        description=description if isinstance(description, str) else None,
        is_private=bool(data.get("isPrivate", False)),
    )


def _parse_milestone(data: dict[str, Any]) -> Milestone:
    description = data.get("description")
    return Milestone(
        title=str(data.get("title") or ""),
        due_on=_parse_datetime(data.get("dueOn")),
        description=description if isinstance(description, str) else None,
        issues=tuple(
            _parse_issue(item)
            for item in _as_list(data.get("issues"))
            if isinstance(item, dict)
        ),
    )
