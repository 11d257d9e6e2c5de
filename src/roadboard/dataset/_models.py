"""Data models for roadmap datasets.

A dataset is the snapshot produced by the ingestion step: project metadata,
the project's single-select fields, and the issues grouped into milestones.
All models are frozen dataclasses with slots; a dataset is read-only for the
lifetime of a board and is replaced wholesale on reload.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Final

from roadboard.enums import IssueState, StatusColor

__all__ = [
    "DEFAULT_LABEL_COLOR",
    "STATUS_FIELD_NAME",
    "Dataset",
    "FieldValue",
    "Issue",
    "Label",
    "Milestone",
    "Project",
    "ProjectField",
    "StatusOption",
    "SubIssues",
]

STATUS_FIELD_NAME: Final = "Status"
"""Name of the project field that drives sorting, status filters and suggestions."""

DEFAULT_LABEL_COLOR: Final = "6b7280"
"""Neutral gray used for labels without a usable color."""


@dataclass(frozen=True, slots=True)
class Label:
    """Issue label.

    Attributes:
        name: Label name, the label's identity within a dataset.
        color: Six lowercase hex digits without a leading ``#``.
    """

    name: str
    color: str = DEFAULT_LABEL_COLOR


@dataclass(frozen=True, slots=True)
class StatusOption:
    """One option of a single-select project field.

    Attributes:
        name: Option name (e.g. "Todo", "In Progress").
        color: Declared color, GRAY when unknown.
        id: Option identifier from the project API.
    """

    name: str
    color: StatusColor = StatusColor.GRAY
    id: str | None = None


@dataclass(frozen=True, slots=True)
class ProjectField:
    """Single-select project field with ordered options."""

    name: str
    options: tuple[StatusOption, ...] = ()
    id: str | None = None


@dataclass(frozen=True, slots=True)
class FieldValue:
    """Value of a custom field on an issue."""

    value: str
    option_id: str | None = None


@dataclass(frozen=True, slots=True)
class SubIssues:
    """Sub-issue completion summary, with ``0 <= completed <= total``."""

    total: int
    completed: int = 0


@dataclass(frozen=True, slots=True)
class Issue:
    """Work item shown as a card on the board.

    Attributes:
        id: Issue node identifier.
        title: Issue title.
        state: IssueState when recognized, otherwise the raw state string.
        url: Link to the issue.
        labels: Labels in display order.
        custom_fields: Custom field values keyed by field name.
        sub_issues: Sub-issue summary, if the issue tracks any.
        description: Issue description, if provided.
        is_private: Whether the issue lives in a private repository.
    """

    id: str
    title: str
    state: IssueState | str = IssueState.OPEN
    url: str = ""
    labels: tuple[Label, ...] = ()
    custom_fields: Mapping[str, FieldValue] = field(
        default_factory=lambda: MappingProxyType({})
    )
    sub_issues: SubIssues | None = None
    description: str | None = None
    is_private: bool = False

    @property
    def status(self) -> str | None:
        """Value of the Status custom field, or None if unset."""
        value = self.custom_fields.get(STATUS_FIELD_NAME)
        return value.value if value is not None else None

    @property
    def label_names(self) -> frozenset[str]:
        """Names of the issue's labels."""
        return frozenset(label.name for label in self.labels)


@dataclass(frozen=True, slots=True)
class Milestone:
    """Named, optionally dated group of issues, rendered as one column.

    A milestone without ``due_on`` is the "unplanned" bucket.
    """

    title: str
    due_on: datetime | None = None
    description: str | None = None
    issues: tuple[Issue, ...] = ()


@dataclass(frozen=True, slots=True)
class Project:
    """Project the dataset was fetched from."""

    title: str = ""
    url: str = ""


@dataclass(frozen=True, slots=True)
class Dataset:
    """Complete roadmap snapshot.

    Attributes:
        milestones: Milestones in display order.
        fields: Single-select project fields.
        project: Source project, if known.
        generated_at: When the snapshot was produced.
    """

    milestones: tuple[Milestone, ...]
    fields: tuple[ProjectField, ...] = ()
    project: Project | None = None
    generated_at: datetime | None = None

    @property
    def status_field(self) -> ProjectField | None:
        """The project's Status field, if it has one."""
        for project_field in self.fields:
            if project_field.name == STATUS_FIELD_NAME:
                return project_field
        return None

    @property
    def status_options(self) -> tuple[StatusOption, ...]:
        """Options of the Status field in declared order."""
        status_field = self.status_field
        return status_field.options if status_field is not None else ()

    def iter_issues(self) -> Iterator[Issue]:
        """Iterate over every issue, milestone by milestone."""
        for milestone in self.milestones:
            yield from milestone.issues
