"""View records for the search bar around the board.

The search bar shows one badge per active facet, a status dropdown, a label
dropdown and a results counter. These records are derived from the dataset
and filter state the same way the board is.
"""

from dataclasses import dataclass

from roadboard.board._colors import (
    LabelStyle,
    StatusPalette,
    get_status_palette,
    label_style,
)
from roadboard.board._filters import (
    count_filtered_issues,
    extract_labels,
    find_status_option,
    get_total_issues,
)
from roadboard.board._state import FilterState
from roadboard.board._suggestions import FACET_PREFIXES
from roadboard.dataset import Dataset
from roadboard.enums import FacetKind, IssueState, StatusColor, SuggestionKind

__all__ = [
    "FilterBadge",
    "LabelOptionView",
    "ResultsSummary",
    "StatusOptionView",
    "ToolbarView",
    "build_badges",
    "build_label_options",
    "build_status_options",
    "build_toolbar",
    "summarize_results",
]


@dataclass(frozen=True, slots=True)
class FilterBadge:
    """Removable badge for one active facet value.

    Attributes:
        kind: Facet the badge represents.
        value: Facet value; removing the badge clears it.
        caption: Facet name shown before the value.
        palette: Status colors for status badges.
        style: Label colors for label badges, None for unknown labels.
    """

    kind: FacetKind
    value: str
    caption: str
    palette: StatusPalette | None = None
    style: LabelStyle | None = None


@dataclass(frozen=True, slots=True)
class StatusOptionView:
    """Entry of the status dropdown."""

    name: str
    color: StatusColor
    palette: StatusPalette
    is_selected: bool
    is_first: bool
    is_last: bool


@dataclass(frozen=True, slots=True)
class LabelOptionView:
    """Entry of the label dropdown."""

    name: str
    style: LabelStyle
    is_selected: bool


@dataclass(frozen=True, slots=True)
class ResultsSummary:
    """Counter shown while filters are active."""

    count: int
    total: int

    def __str__(self) -> str:
        return f"Showing {self.count} of {self.total} issues"


@dataclass(frozen=True, slots=True)
class ToolbarView:
    """Everything the search bar displays.

    Attributes:
        badges: Active facet badges: text, issue state, status, then labels.
        status_options: Status dropdown entries; empty hides the dropdown.
        label_options: Label dropdown entries sorted by name.
        results: Results counter, None when no filter is active.
        show_clear: Whether the clear-all control is shown.
    """

    badges: tuple[FilterBadge, ...]
    status_options: tuple[StatusOptionView, ...]
    label_options: tuple[LabelOptionView, ...]
    results: ResultsSummary | None
    show_clear: bool


def build_badges(dataset: Dataset | None, state: FilterState) -> tuple[FilterBadge, ...]:
    """Build one badge per active facet value."""
    badges: list[FilterBadge] = []

    if state.text:
        badges.append(
            FilterBadge(
                kind=FacetKind.TEXT,
                value=state.text,
                caption=FACET_PREFIXES[SuggestionKind.TEXT],
            )
        )

    if state.issue_state:
        badges.append(
            FilterBadge(
                kind=FacetKind.ISSUE_STATE,
                value=str(state.issue_state),
                caption="State",
                palette=get_status_palette(
                    StatusColor.GREEN
                    if state.issue_state == IssueState.OPEN
                    else StatusColor.PURPLE
                ),
            )
        )

    if state.project_status:
        status_options = dataset.status_options if dataset is not None else ()
        option = find_status_option(status_options, state.project_status)
        badges.append(
            FilterBadge(
                kind=FacetKind.STATUS,
                value=state.project_status,
                caption=FACET_PREFIXES[SuggestionKind.STATUS],
                palette=get_status_palette(option.color if option else None),
            )
        )

    known_labels = {label.name: label for label in extract_labels(dataset)}
    for name in state.labels:
        label = known_labels.get(name)
        badges.append(
            FilterBadge(
                kind=FacetKind.LABEL,
                value=name,
                caption=FACET_PREFIXES[SuggestionKind.LABEL],
                style=label_style(label.color) if label is not None else None,
            )
        )

    return tuple(badges)


def build_status_options(
    dataset: Dataset | None, state: FilterState
) -> tuple[StatusOptionView, ...]:
    """Build the status dropdown entries in declared order."""
    options = dataset.status_options if dataset is not None else ()
    last_index = len(options) - 1
    return tuple(
        StatusOptionView(
            name=option.name,
            color=option.color,
            palette=get_status_palette(option.color),
            is_selected=state.project_status == option.name,
            is_first=index == 0,
            is_last=index == last_index,
        )
        for index, option in enumerate(options)
    )


def build_label_options(
    dataset: Dataset | None, state: FilterState
) -> tuple[LabelOptionView, ...]:
    """Build the label dropdown entries."""
    return tuple(
        LabelOptionView(
            name=label.name,
            style=label_style(label.color),
            is_selected=state.has_label(label.name),
        )
        for label in extract_labels(dataset)
    )


def summarize_results(
    dataset: Dataset | None, state: FilterState
) -> ResultsSummary | None:
    """Count matching issues, or None when no filter is active."""
    if not state.has_active_filters():
        return None
    return ResultsSummary(
        count=count_filtered_issues(dataset, state),
        total=get_total_issues(dataset),
    )


def build_toolbar(
    dataset: Dataset | None,
    state: FilterState,
    *,
    pending_text: str = "",
) -> ToolbarView:
    """Build the complete search bar view.

    Args:
        dataset: Dataset on display.
        state: Active filters.
        pending_text: Uncommitted text in the search input; it keeps the
            clear-all control visible even without badges.

    Returns:
        The toolbar view record.
    """
    badges = build_badges(dataset, state)
    return ToolbarView(
        badges=badges,
        status_options=build_status_options(dataset, state),
        label_options=build_label_options(dataset, state),
        results=summarize_results(dataset, state),
        show_clear=bool(badges) or bool(pending_text),
    )
