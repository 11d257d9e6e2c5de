from roadboard.board import (
    FilterState,
    count_filtered_issues,
    extract_labels,
    filter_issues,
    find_status_option,
    get_status_options,
    get_total_issues,
    issue_matches,
    label_sort_key,
    sort_issues_by_status,
)
from roadboard.dataset import (
    Dataset,
    FieldValue,
    Issue,
    Label,
    Milestone,
    ProjectField,
    StatusOption,
    parse_dataset,
)
from roadboard.enums import IssueState, StatusColor


def _issue(
    title: str,
    *,
    status: str | None = None,
    labels: tuple[str, ...] = (),
    state: IssueState | str = IssueState.OPEN,
) -> Issue:
    return Issue(
        id=title,
        title=title,
        state=state,
        labels=tuple(Label(name=name, color="6b7280") for name in labels),
        custom_fields={"Status": FieldValue(value=status)} if status else {},
    )


TODO = StatusOption(name="Todo", color=StatusColor.GRAY)
DONE = StatusOption(name="Done", color=StatusColor.GREEN)


class TestIssueMatches:
    def test_text_matches_title_case_insensitively(self) -> None:
        issue = _issue("Fix Login Bug")

        assert issue_matches(issue, FilterState(text="login"))
        assert not issue_matches(issue, FilterState(text="logout"))

    def test_text_matches_label_names(self) -> None:
        issue = _issue("Something", labels=("Documentation",))

        assert issue_matches(issue, FilterState(text="docu"))

    def test_issue_state_must_match(self) -> None:
        issue = _issue("A", state=IssueState.CLOSED)

        assert issue_matches(issue, FilterState(issue_state=IssueState.CLOSED))
        assert not issue_matches(issue, FilterState(issue_state=IssueState.OPEN))

    def test_status_must_match_exactly(self) -> None:
        issue = _issue("A", status="Todo")

        assert issue_matches(issue, FilterState(project_status="Todo"))
        assert not issue_matches(issue, FilterState(project_status="todo"))

    def test_issue_without_status_fails_status_filter(self) -> None:
        assert not issue_matches(_issue("A"), FilterState(project_status="Todo"))

    def test_labels_combine_with_and(self) -> None:
        both = _issue("A", labels=("bug", "ui"))
        one = _issue("B", labels=("bug",))
        state = FilterState(labels=["bug", "ui"])

        assert issue_matches(both, state)
        assert not issue_matches(one, state)


class TestFilterIssues:
    def test_scenario_selected_label(self) -> None:
        dataset = parse_dataset(
            {
                "milestones": [
                    {
                        "title": "v1",
                        "issues": [
                            {
                                "title": "Fix bug",
                                "state": "OPEN",
                                "labels": [{"name": "bug", "color": "ff0000"}],
                                "customFields": {"Status": {"value": "Todo"}},
                            }
                        ],
                    }
                ],
                "fields": [
                    {
                        "name": "Status",
                        "options": [
                            {"name": "Todo", "color": "GRAY"},
                            {"name": "Done", "color": "GREEN"},
                        ],
                    }
                ],
            }
        )
        issues = dataset.milestones[0].issues

        assert filter_issues(issues, FilterState(labels=["bug"])) == list(issues)
        assert filter_issues(issues, FilterState(labels=["missing"])) == []

    def test_empty_state_keeps_everything_in_order(self, dataset: Dataset) -> None:
        issues = list(dataset.iter_issues())

        assert filter_issues(issues, FilterState()) == issues

    def test_combines_facets(self, dataset: Dataset) -> None:
        state = FilterState(text="bug", issue_state=IssueState.OPEN)

        result = filter_issues(dataset.iter_issues(), state)

        assert [issue.id for issue in result] == ["I1", "I5"]


class TestSortIssuesByStatus:
    def test_scenario_declared_order(self) -> None:
        done = _issue("Done issue", status="Done")
        todo = _issue("Todo issue", status="Todo")

        assert sort_issues_by_status([done, todo], [TODO, DONE]) == [todo, done]

    def test_unknown_and_missing_statuses_sort_last(self) -> None:
        unknown = _issue("unknown", status="Later")
        missing = _issue("missing")
        done = _issue("done", status="Done")

        result = sort_issues_by_status([unknown, missing, done], [TODO, DONE])

        assert result == [done, unknown, missing]

    def test_is_stable_for_equal_ranks(self) -> None:
        first = _issue("first", status="Todo")
        second = _issue("second", status="Todo")

        assert sort_issues_by_status([first, second], [TODO]) == [first, second]

    def test_without_options_keeps_input_order(self) -> None:
        issues = [_issue("b", status="Done"), _issue("a", status="Todo")]

        assert sort_issues_by_status(issues, []) == issues

    def test_returns_new_list(self) -> None:
        issues = [_issue("a", status="Todo")]

        assert sort_issues_by_status(issues, [TODO]) is not issues


class TestCounters:
    def test_total_ignores_filters(self, dataset: Dataset) -> None:
        assert get_total_issues(dataset) == 5

    def test_count_applies_filters(self, dataset: Dataset) -> None:
        assert count_filtered_issues(dataset, FilterState(labels=["bug"])) == 2

    def test_missing_dataset_counts_zero(self) -> None:
        assert get_total_issues(None) == 0
        assert count_filtered_issues(None, FilterState()) == 0


class TestStatusOptions:
    def test_reads_status_field(self, dataset: Dataset) -> None:
        assert [o.name for o in get_status_options(dataset)] == [
            "Todo",
            "In Progress",
            "Done",
        ]

    def test_missing_status_field_yields_empty(self) -> None:
        dataset = Dataset(
            milestones=(Milestone(title="v1"),),
            fields=(ProjectField(name="Priority"),),
        )

        assert get_status_options(dataset) == ()
        assert get_status_options(None) == ()

    def test_find_status_option(self) -> None:
        assert find_status_option([TODO, DONE], "Done") == DONE
        assert find_status_option([TODO, DONE], "Later") is None
        assert find_status_option([TODO, DONE], None) is None


class TestExtractLabels:
    def test_sorted_unique_first_color_wins(self, dataset: Dataset) -> None:
        labels = extract_labels(dataset)

        assert [label.name for label in labels] == [
            "auth",
            "bug",
            "documentation",
            "enhancement",
        ]
        assert next(label for label in labels if label.name == "bug").color == "d73a4a"

    def test_sorts_case_insensitively(self) -> None:
        names = ["beta", "Alpha", "alpha", "Charlie"]

        assert sorted(names, key=label_sort_key) == ["alpha", "Alpha", "beta", "Charlie"]

    def test_missing_dataset_yields_empty(self) -> None:
        assert extract_labels(None) == []
