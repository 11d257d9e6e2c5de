from roadboard.board import FilterState, filter_issues
from roadboard.dataset import Dataset
from roadboard.enums import IssueState


class TestFilterState:
    def test_defaults_are_inactive(self) -> None:
        state = FilterState()

        assert state.text == ""
        assert state.issue_state is None
        assert state.project_status is None
        assert state.labels == []
        assert not state.has_active_filters()

    def test_add_label_is_idempotent(self) -> None:
        state = FilterState()

        state.add_label("bug")
        state.add_label("bug")

        assert state.labels == ["bug"]

    def test_labels_keep_selection_order(self) -> None:
        state = FilterState()

        state.add_label("ui")
        state.add_label("bug")

        assert state.labels == ["ui", "bug"]

    def test_remove_unselected_label_is_noop(self) -> None:
        state = FilterState(labels=["bug"])

        state.remove_label("missing")

        assert state.labels == ["bug"]

    def test_set_issue_state_accepts_strings(self) -> None:
        state = FilterState()

        state.set_issue_state("CLOSED")

        assert state.issue_state is IssueState.CLOSED

    def test_set_issue_state_keeps_unknown_value(self) -> None:
        state = FilterState()

        state.set_issue_state("MERGED")

        assert state.issue_state == "MERGED"

    def test_empty_issue_state_leaves_filters_inactive(
        self, dataset: Dataset
    ) -> None:
        state = FilterState(issue_state=IssueState.OPEN)

        state.set_issue_state("")

        assert state.issue_state is None
        assert not state.has_active_filters()
        issues = list(dataset.iter_issues())
        assert filter_issues(issues, state) == issues

    def test_empty_issue_state_matches_everything(self, dataset: Dataset) -> None:
        state = FilterState(issue_state="")

        issues = list(dataset.iter_issues())
        assert not state.has_active_filters()
        assert filter_issues(issues, state) == issues

    def test_clear_labels(self) -> None:
        state = FilterState(labels=["ui", "bug"])

        state.clear_labels()

        assert state.labels == []
        assert not state.has_active_filters()

    def test_each_facet_activates_filters(self) -> None:
        assert FilterState(text="x").has_active_filters()
        assert FilterState(issue_state=IssueState.OPEN).has_active_filters()
        assert FilterState(project_status="Todo").has_active_filters()
        assert FilterState(labels=["bug"]).has_active_filters()

    def test_reset_clears_everything(self) -> None:
        state = FilterState(
            text="x", issue_state=IssueState.OPEN, project_status="Todo", labels=["a"]
        )

        state.reset()

        assert state == FilterState()

    def test_copy_is_independent(self) -> None:
        state = FilterState(labels=["bug"])

        clone = state.copy()
        clone.add_label("ui")

        assert state.labels == ["bug"]
        assert clone.labels == ["bug", "ui"]
