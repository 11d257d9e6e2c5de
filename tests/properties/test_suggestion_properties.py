from hypothesis import given, strategies as st

from roadboard.board import FilterState, suggest
from roadboard.dataset import parse_dataset
from roadboard.enums import SuggestionKind

LABEL_NAMES = ["bug", "Bug", "ui", "docs", "auth"]
STATUS_NAMES = ["Todo", "In Progress", "Done", "Later"]

GROUP_ORDER = [SuggestionKind.STATUS, SuggestionKind.LABEL, SuggestionKind.TEXT]

DATASET = parse_dataset(
    {
        "fields": [
            {"name": "Status", "options": [{"name": name} for name in STATUS_NAMES]}
        ],
        "milestones": [
            {
                "title": "m",
                "issues": [
                    {
                        "id": str(index),
                        "title": f"{name} issue {index}",
                        "labels": [{"name": name}],
                    }
                    for index, name in enumerate(LABEL_NAMES)
                ],
            }
        ],
    }
)


@given(
    query=st.text(alphabet="abdegiostuBDIPT ", min_size=1, max_size=4),
    limit=st.integers(min_value=0, max_value=20),
    status=st.none() | st.sampled_from(STATUS_NAMES),
    labels=st.lists(st.sampled_from(LABEL_NAMES), unique=True, max_size=3),
)
def test_suggestions_respect_limit_and_active_facets(
    query: str, limit: int, status: str | None, labels: list[str]
) -> None:
    state = FilterState(project_status=status, labels=labels)

    result = suggest(query, DATASET, state, limit=limit)

    assert len(result) <= limit
    for suggestion in result:
        assert query.lower() in suggestion.value.lower()
        if suggestion.kind is SuggestionKind.STATUS:
            assert suggestion.value != status
        if suggestion.kind is SuggestionKind.LABEL:
            assert suggestion.value not in labels

    groups = [GROUP_ORDER.index(suggestion.kind) for suggestion in result]
    assert groups == sorted(groups)


@given(query=st.text(max_size=4), limit=st.integers(min_value=1, max_value=5))
def test_larger_limit_extends_prefix(query: str, limit: int) -> None:
    short = suggest(query, DATASET, FilterState(), limit=limit)
    longer = suggest(query, DATASET, FilterState(), limit=limit + 5)

    assert longer[: len(short)] == short
