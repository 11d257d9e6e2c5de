from hypothesis import given, strategies as st

from roadboard.board import (
    FilterState,
    extract_labels,
    filter_issues,
    label_sort_key,
    sort_issues_by_status,
)
from roadboard.dataset import Dataset, FieldValue, Issue, Label, Milestone, StatusOption
from roadboard.enums import IssueState

LABEL_NAMES = ["bug", "Bug", "ui", "docs", "auth"]
STATUS_NAMES = ["Todo", "In Progress", "Done", "Later"]
COLORS = ["d73a4a", "0e8a16", "a2eeef", "6b7280"]

label_strategy = st.builds(
    Label, name=st.sampled_from(LABEL_NAMES), color=st.sampled_from(COLORS)
)

issue_fields = st.tuples(
    st.text(alphabet="abcdefg ", max_size=12),
    st.sampled_from([IssueState.OPEN, IssueState.CLOSED]),
    st.none() | st.sampled_from(STATUS_NAMES),
    st.lists(label_strategy, max_size=4, unique_by=lambda label: label.name),
)


@st.composite
def issue_lists(draw: st.DrawFn) -> list[Issue]:
    fields = draw(st.lists(issue_fields, max_size=15))
    return [
        Issue(
            id=str(index),
            title=title,
            state=state,
            labels=tuple(labels),
            custom_fields={"Status": FieldValue(value=status)} if status else {},
        )
        for index, (title, state, status, labels) in enumerate(fields)
    ]


filter_states = st.builds(
    FilterState,
    text=st.text(alphabet="abcdefg", max_size=3),
    issue_state=st.none() | st.sampled_from([IssueState.OPEN, IssueState.CLOSED]),
    project_status=st.none() | st.sampled_from(STATUS_NAMES),
    labels=st.lists(st.sampled_from(LABEL_NAMES), max_size=3, unique=True),
)

status_option_lists = st.lists(
    st.sampled_from(STATUS_NAMES[:3]), unique=True, max_size=3
).map(lambda names: [StatusOption(name=name) for name in names])


@given(issues=issue_lists())
def test_empty_state_keeps_every_issue(issues: list[Issue]) -> None:
    assert filter_issues(issues, FilterState()) == issues


@given(issues=issue_lists(), state=filter_states)
def test_filter_keeps_input_order(issues: list[Issue], state: FilterState) -> None:
    result = [issue.id for issue in filter_issues(issues, state)]
    positions = [int(issue_id) for issue_id in result]

    assert positions == sorted(positions)


@given(issues=issue_lists(), state=filter_states)
def test_filter_is_idempotent(issues: list[Issue], state: FilterState) -> None:
    once = filter_issues(issues, state)

    assert filter_issues(once, state) == once


@given(issues=issue_lists(), state=filter_states, extra=st.sampled_from(LABEL_NAMES))
def test_adding_a_label_never_widens(
    issues: list[Issue], state: FilterState, extra: str
) -> None:
    narrowed = state.copy()
    narrowed.add_label(extra)

    assert len(filter_issues(issues, narrowed)) <= len(filter_issues(issues, state))


@given(
    issues=issue_lists(),
    selected=st.lists(st.sampled_from(LABEL_NAMES), max_size=3, unique=True),
)
def test_labels_combine_with_and(issues: list[Issue], selected: list[str]) -> None:
    kept = {issue.id for issue in filter_issues(issues, FilterState(labels=selected))}

    for issue in issues:
        assert (issue.id in kept) == issue.label_names.issuperset(selected)


@given(issues=issue_lists(), options=status_option_lists)
def test_sort_orders_by_declared_status(
    issues: list[Issue], options: list[StatusOption]
) -> None:
    rank = {option.name: index for index, option in enumerate(options)}
    unknown = len(options)

    def _rank(issue: Issue) -> int:
        return rank.get(issue.status, unknown) if issue.status else unknown

    result = sort_issues_by_status(issues, options)

    assert sorted(issue.id for issue in result) == sorted(issue.id for issue in issues)
    if options:
        ranks = [_rank(issue) for issue in result]
        assert ranks == sorted(ranks)
        for value in set(ranks):
            same_rank = [int(i.id) for i in result if _rank(i) == value]
            assert same_rank == sorted(same_rank)
    else:
        assert result == issues


@given(issues=issue_lists())
def test_extract_labels_sorted_unique_first_color(issues: list[Issue]) -> None:
    dataset = Dataset(milestones=(Milestone(title="m", issues=tuple(issues)),))

    labels = extract_labels(dataset)
    names = [label.name for label in labels]

    assert len(names) == len(set(names))
    assert names == sorted(names, key=label_sort_key)
    for label in labels:
        first = next(
            candidate
            for issue in issues
            for candidate in issue.labels
            if candidate.name == label.name
        )
        assert label.color == first.color
