"""Shared test fixtures for roadboard tests."""

from pathlib import Path
from typing import Any

import orjson
import pytest
from rich.console import Console

from roadboard.dataset import Dataset, parse_dataset


def make_payload() -> dict[str, Any]:
    """Build a roadmap document shaped like the ingestion output.

    Structure:
        v1.0 (dated, described): Fix login bug [Done], Add dark mode [Todo],
            Refactor <api> & cleanup [In Progress, closed]
        Backlog (undated): Write docs [no status], Bug bash [unknown status]
        Someday: no issues
    """
    return {
        "generated_at": "2025-06-01T12:30:00Z",
        "project": {"title": "Roadmap", "url": "https://example.com/projects/1"},
        "fields": [
            {
                "id": "F1",
                "name": "Status",
                "options": [
                    {"id": "O1", "name": "Todo", "color": "GRAY"},
                    {"id": "O2", "name": "In Progress", "color": "YELLOW"},
                    {"id": "O3", "name": "Done", "color": "GREEN"},
                ],
            },
            {
                "id": "F2",
                "name": "Priority",
                "options": [{"id": "P1", "name": "High", "color": "RED"}],
            },
        ],
        "milestones": [
            {
                "title": "v1.0",
                "dueOn": "2025-12-31T00:00:00Z",
                "description": "First public release",
                "issues": [
                    {
                        "id": "I1",
                        "title": "Fix login bug",
                        "state": "OPEN",
                        "url": "https://example.com/issues/1",
                        "labels": [
                            {"name": "bug", "color": "d73a4a"},
                            {"name": "auth", "color": "0e8a16"},
                        ],
                        "customFields": {
                            "Status": {"value": "Done", "optionId": "O3"},
                            "Priority": {"value": "High", "optionId": "P1"},
                        },
                        "subIssues": {"total": 4, "completed": 1},
                    },
                    {
                        "id": "I2",
                        "title": "Add dark mode",
                        "state": "OPEN",
                        "url": "https://example.com/issues/2",
                        "labels": [{"name": "enhancement", "color": "a2eeef"}],
                        "customFields": {"Status": {"value": "Todo", "optionId": "O1"}},
                        "description": "Support a dark color scheme.",
                    },
                    {
                        "id": "I3",
                        "title": "Refactor <api> & cleanup",
                        "state": "CLOSED",
                        "url": "https://example.com/issues/3",
                        "labels": [{"name": "bug", "color": "ff0000"}],
                        "customFields": {
                            "Status": {"value": "In Progress", "optionId": "O2"}
                        },
                        "isPrivate": True,
                    },
                ],
            },
            {
                "title": "Backlog",
                "dueOn": None,
                "issues": [
                    {
                        "id": "I4",
                        "title": "Write docs",
                        "state": "OPEN",
                        "url": "https://example.com/issues/4",
                        "labels": [{"name": "documentation", "color": "0075ca"}],
                    },
                    {
                        "id": "I5",
                        "title": "Bug bash",
                        "state": "OPEN",
                        "url": "https://example.com/issues/5",
                        "customFields": {"Status": {"value": "Unknown"}},
                    },
                ],
            },
            {"title": "Someday", "issues": []},
        ],
    }


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def dataset(sample_payload: dict[str, Any]) -> Dataset:
    return parse_dataset(sample_payload)


@pytest.fixture
def data_file(tmp_path: Path, sample_payload: dict[str, Any]) -> Path:
    """Write the sample roadmap to disk and return its path."""
    path = tmp_path / "roadmap-data.json"
    path.write_bytes(orjson.dumps(sample_payload))
    return path


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
