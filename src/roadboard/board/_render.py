"""Derivation of board view records from a dataset and filter state.

``render`` is a pure function of its inputs. It filters and orders the issues
of each milestone, drops milestones left empty, and turns the rest into
column and card records carrying everything a presentation layer needs
(escaped and highlighted titles, resolved colors, excerpts, progress). It
never produces markup beyond the ``<mark>`` highlight in card titles.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final

from roadboard.board._colors import (
    LabelStyle,
    StatusPalette,
    get_status_palette,
    label_style,
    string_to_hsl_color,
)
from roadboard.board._filters import (
    filter_issues,
    find_status_option,
    get_total_issues,
    sort_issues_by_status,
)
from roadboard.board._state import FilterState
from roadboard.board._text import format_simple_date, highlight_text, truncate_text
from roadboard.dataset import Dataset, Issue, Label, Milestone, StatusOption, SubIssues
from roadboard.enums import IssueState, StatusColor

__all__ = [
    "DEFAULT_DESCRIPTION_LENGTH",
    "MAX_PROGRESS_SEGMENTS",
    "NO_RESULTS_MESSAGE",
    "Board",
    "CardView",
    "ColumnView",
    "LabelView",
    "NoResults",
    "RenderOptions",
    "RenderResult",
    "SubIssueProgress",
    "render",
    "render_card",
    "sub_issue_progress",
]

DEFAULT_DESCRIPTION_LENGTH: Final = 300

NO_RESULTS_MESSAGE: Final = "No issues match your filters"

MAX_PROGRESS_SEGMENTS: Final = 50
"""Largest number of progress bar segments; larger totals are scaled down."""


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Presentation settings for a render pass.

    Attributes:
        description_max_length: Length at which card descriptions are cut.
        locale: Locale for due date display ("en" or "fr").
    """

    description_max_length: int = DEFAULT_DESCRIPTION_LENGTH
    locale: str = "en"


@dataclass(frozen=True, slots=True)
class SubIssueProgress:
    """Sub-issue progress bar data.

    Attributes:
        completed: Completed sub-issues.
        total: All sub-issues, always greater than zero.
        percentage: Completion rounded to a whole percent.
        segments: One flag per sub-issue, True for completed ones first. Past
            MAX_PROGRESS_SEGMENTS sub-issues each flag covers an equal share
            and the completed count is scaled down.
    """

    completed: int
    total: int
    percentage: int
    segments: tuple[bool, ...]


@dataclass(frozen=True, slots=True)
class LabelView:
    """Label pill on a card."""

    name: str
    style: LabelStyle
    is_active: bool = False


@dataclass(frozen=True, slots=True)
class CardView:
    """Issue card.

    Attributes:
        id: Issue identifier.
        title: Raw issue title.
        title_html: Escaped title with text filter matches highlighted.
        url: Issue link; presentation layers omit it for private issues.
        is_private: Whether the issue is private.
        state: Issue state.
        status: Status field value, if any.
        status_color: Resolved status color, GRAY when unresolved.
        status_palette: Display colors for ``status_color``.
        description: Full description, if any.
        description_excerpt: Description cut for display.
        sub_issues: Progress summary, if the issue has sub-issues.
        labels: Label pills in issue order.
    """

    id: str
    title: str
    title_html: str
    url: str
    is_private: bool
    state: IssueState | str
    status: str | None
    status_color: StatusColor
    status_palette: StatusPalette
    description: str | None = None
    description_excerpt: str | None = None
    sub_issues: SubIssueProgress | None = None
    labels: tuple[LabelView, ...] = ()


@dataclass(frozen=True, slots=True)
class ColumnView:
    """Milestone column.

    Attributes:
        title: Milestone title.
        due_on: Due date, None for the unplanned column.
        due_on_display: Formatted due date, None when undated.
        description: Milestone description, if non-empty.
        show_description_placeholder: Whether to reserve description space
            because another visible column has a description.
        accent_color: Stable color derived from the title.
        cards: Cards in status order.
        column_index: Position among visible columns, starting at 0.
        is_last_column: Whether this is the final visible column.
    """

    title: str
    due_on: datetime | None
    due_on_display: str | None
    description: str | None
    show_description_placeholder: bool
    accent_color: str
    cards: tuple[CardView, ...]
    column_index: int
    is_last_column: bool


@dataclass(frozen=True, slots=True)
class Board:
    """Successful render with at least one visible column."""

    columns: tuple[ColumnView, ...]
    has_any_description: bool
    matched_count: int
    total_count: int


@dataclass(frozen=True, slots=True)
class NoResults:
    """Terminal state when the filters leave no visible column."""

    total_count: int
    message: str = field(default=NO_RESULTS_MESSAGE)


type RenderResult = Board | NoResults


def sub_issue_progress(sub_issues: SubIssues | None) -> SubIssueProgress | None:
    """Summarize sub-issues, or None when there are none to show."""
    if sub_issues is None or sub_issues.total <= 0:
        return None
    total = sub_issues.total
    completed = min(max(sub_issues.completed, 0), total)
    # Half-up rounding of a non-negative ratio
    percentage = (completed * 200 + total) // (total * 2)
    count = min(total, MAX_PROGRESS_SEGMENTS)
    filled = completed * count // total
    return SubIssueProgress(
        completed=completed,
        total=total,
        percentage=percentage,
        segments=(True,) * filled + (False,) * (count - filled),
    )


def _render_label(label: Label, state: FilterState) -> LabelView:
    return LabelView(
        name=label.name,
        style=label_style(label.color),
        is_active=state.has_label(label.name),
    )


def render_card(
    issue: Issue,
    state: FilterState,
    status_options: tuple[StatusOption, ...],
    options: RenderOptions,
) -> CardView:
    """Build the view record of one issue."""
    option = find_status_option(status_options, issue.status)
    status_color = option.color if option is not None else StatusColor.GRAY

    return CardView(
        id=issue.id,
        title=issue.title,
        title_html=highlight_text(issue.title, state.text),
        url=issue.url,
        is_private=issue.is_private,
        state=issue.state,
        status=issue.status,
        status_color=status_color,
        status_palette=get_status_palette(status_color),
        description=issue.description or None,
        description_excerpt=truncate_text(
            issue.description or None, options.description_max_length
        ),
        sub_issues=sub_issue_progress(issue.sub_issues),
        labels=tuple(_render_label(label, state) for label in issue.labels),
    )


def _visible_milestones(
    dataset: Dataset,
    state: FilterState,
    status_options: tuple[StatusOption, ...],
) -> list[tuple[Milestone, list[Issue]]]:
    visible: list[tuple[Milestone, list[Issue]]] = []
    for milestone in dataset.milestones:
        issues = sort_issues_by_status(
            filter_issues(milestone.issues, state), status_options
        )
        if issues:
            visible.append((milestone, issues))
    return visible


def render(
    dataset: Dataset,
    state: FilterState,
    *,
    options: RenderOptions | None = None,
) -> RenderResult:
    """Compute the board for the current filters.

    Args:
        dataset: Dataset to display.
        state: Active filters.
        options: Presentation settings.

    Returns:
        A Board with the visible columns, or NoResults when every milestone
        is filtered out.
    """
    options = options if options is not None else RenderOptions()
    status_options = dataset.status_options
    total_count = get_total_issues(dataset)

    visible = _visible_milestones(dataset, state, status_options)
    if not visible:
        return NoResults(total_count=total_count)

    has_any_description = any(milestone.description for milestone, _ in visible)
    last_index = len(visible) - 1

    columns = tuple(
        ColumnView(
            title=milestone.title,
            due_on=milestone.due_on,
            due_on_display=(
                format_simple_date(milestone.due_on, options.locale)
                if milestone.due_on is not None
                else None
            ),
            description=milestone.description or None,
            show_description_placeholder=(
                has_any_description and not milestone.description
            ),
            accent_color=string_to_hsl_color(milestone.title),
            cards=tuple(
                render_card(issue, state, status_options, options) for issue in issues
            ),
            column_index=index,
            is_last_column=index == last_index,
        )
        for index, (milestone, issues) in enumerate(visible)
    )

    return Board(
        columns=columns,
        has_any_description=has_any_description,
        matched_count=sum(len(column.cards) for column in columns),
        total_count=total_count,
    )
