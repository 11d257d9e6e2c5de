"""Mutable facet selection for a board.

FilterState is the only mutable object of a board. It is written by the
controller in response to user intents and read by the filter, suggestion
and render functions within the same synchronous pass.
"""

from dataclasses import dataclass, field

from roadboard.enums import IssueState

__all__ = ["FilterState"]


@dataclass(slots=True)
class FilterState:
    """Active filters of a board.

    Attributes:
        text: Free-text filter matched against titles and label names.
        issue_state: Issue state filter (OPEN/CLOSED), or None.
        project_status: Status field value filter, or None.
        labels: Selected label names in selection order, without duplicates.
    """

    text: str = ""
    issue_state: IssueState | str | None = None
    project_status: str | None = None
    labels: list[str] = field(default_factory=list)

    def set_text(self, text: str) -> None:
        """Replace the text filter. The caller trims."""
        self.text = text

    def add_label(self, name: str) -> None:
        """Select a label. Selecting an already selected label is a no-op."""
        if name not in self.labels:
            self.labels.append(name)

    def remove_label(self, name: str) -> None:
        """Deselect a label. Removing an unselected label is a no-op."""
        if name in self.labels:
            self.labels.remove(name)

    def clear_labels(self) -> None:
        """Deselect every label."""
        self.labels.clear()

    def has_label(self, name: str) -> bool:
        """Return whether a label is selected."""
        return name in self.labels

    def set_project_status(self, status: str | None) -> None:
        """Replace the status filter."""
        self.project_status = status

    def set_issue_state(self, state: IssueState | str | None) -> None:
        """Replace the issue state filter.

        Unknown state strings are kept verbatim, so they simply match issues
        carrying the same raw state. An empty string clears the filter.

        Args:
            state: An IssueState, its string value, or None to clear.
        """
        if not state:
            self.issue_state = None
            return
        try:
            self.issue_state = IssueState(state)
        except ValueError:
            self.issue_state = state

    def reset(self) -> None:
        """Clear every facet."""
        self.text = ""
        self.issue_state = None
        self.project_status = None
        self.labels = []

    def has_active_filters(self) -> bool:
        """Return whether any facet is active."""
        return bool(
            self.text
            or self.issue_state
            or self.project_status
            or self.labels
        )

    def copy(self) -> "FilterState":
        """Return an independent copy of this state."""
        return FilterState(
            text=self.text,
            issue_state=self.issue_state,
            project_status=self.project_status,
            labels=list(self.labels),
        )
