"""Roadmap dataset models and loading.

This package provides the immutable data model of a roadmap snapshot
(milestones, issues, labels and project fields) and the lenient JSON reader
that builds it.
"""

from roadboard.dataset._io import (
    EMPTY_DATASET_MESSAGE,
    load_dataset,
    normalize_color,
    parse_dataset,
    read_json,
)
from roadboard.dataset._models import (
    DEFAULT_LABEL_COLOR,
    STATUS_FIELD_NAME,
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

__all__ = [
    "DEFAULT_LABEL_COLOR",
    "EMPTY_DATASET_MESSAGE",
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
    "load_dataset",
    "normalize_color",
    "parse_dataset",
    "read_json",
]
