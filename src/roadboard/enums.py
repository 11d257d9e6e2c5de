"""Enumeration types for roadboard."""

from enum import StrEnum


class IssueState(StrEnum):
    """Issue lifecycle states as reported by the project API."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class StatusColor(StrEnum):
    """Color names a project single-select option can declare."""

    GREEN = "GREEN"
    YELLOW = "YELLOW"
    PURPLE = "PURPLE"
    BLUE = "BLUE"
    ORANGE = "ORANGE"
    RED = "RED"
    PINK = "PINK"
    GRAY = "GRAY"


class SuggestionKind(StrEnum):
    """Facet an autocomplete suggestion would set."""

    STATUS = "status"
    LABEL = "label"
    TEXT = "text"


class FacetKind(StrEnum):
    """Independent filter dimensions of the board."""

    TEXT = "text"
    ISSUE_STATE = "issue_state"
    STATUS = "status"
    LABEL = "label"
