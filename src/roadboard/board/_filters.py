"""Facet filtering and status ordering of issues.

All functions are pure: they read a dataset and a FilterState and return new
lists without touching either.
"""

from collections.abc import Iterable, Sequence

from roadboard.board._state import FilterState
from roadboard.dataset import Dataset, Issue, Label, StatusOption

__all__ = [
    "count_filtered_issues",
    "extract_labels",
    "filter_issues",
    "find_status_option",
    "get_status_options",
    "get_total_issues",
    "issue_matches",
    "label_sort_key",
    "sort_issues_by_status",
]


def issue_matches(issue: Issue, state: FilterState) -> bool:
    """Return whether an issue satisfies every active facet.

    Facets combine with AND. The label facet itself is an AND as well: the
    issue must carry every selected label.

    Args:
        issue: Issue to test.
        state: Active filters.

    Returns:
        True if the issue should be shown.
    """
    if state.text:
        needle = state.text.lower()
        title_match = needle in issue.title.lower()
        label_match = any(needle in label.name.lower() for label in issue.labels)
        if not title_match and not label_match:
            return False

    if state.issue_state and issue.state != state.issue_state:
        return False

    if state.project_status and issue.status != state.project_status:
        return False

    return not state.labels or issue.label_names.issuperset(state.labels)


def filter_issues(issues: Iterable[Issue], state: FilterState) -> list[Issue]:
    """Keep the issues matching the active filters, in input order."""
    return [issue for issue in issues if issue_matches(issue, state)]


def sort_issues_by_status(
    issues: Iterable[Issue],
    status_options: Sequence[StatusOption],
) -> list[Issue]:
    """Order issues by the declared order of their Status value.

    Issues without a Status, or with a value that is not one of the options,
    rank after all known statuses. The sort is stable, so issues with equal
    rank keep their input order.

    Args:
        issues: Issues to order.
        status_options: Status options in declared order.

    Returns:
        A new list of the issues. Without options, the input order is kept.
    """
    if not status_options:
        return list(issues)

    order: dict[str, int] = {}
    for index, option in enumerate(status_options):
        # First declaration wins if a name repeats
        order.setdefault(option.name, index)
    unknown_rank = len(status_options)

    def _rank(issue: Issue) -> int:
        status = issue.status
        if status is None:
            return unknown_rank
        return order.get(status, unknown_rank)

    return sorted(issues, key=_rank)


def get_status_options(dataset: Dataset | None) -> tuple[StatusOption, ...]:
    """Return the Status field options of a dataset, or an empty tuple."""
    if dataset is None:
        return ()
    return dataset.status_options


def find_status_option(
    status_options: Iterable[StatusOption], name: str | None
) -> StatusOption | None:
    """Find a status option by name."""
    if name is None:
        return None
    for option in status_options:
        if option.name == name:
            return option
    return None


def count_filtered_issues(dataset: Dataset | None, state: FilterState) -> int:
    """Count issues matching the active filters across all milestones."""
    if dataset is None:
        return 0
    return sum(
        len(filter_issues(milestone.issues, state)) for milestone in dataset.milestones
    )


def get_total_issues(dataset: Dataset | None) -> int:
    """Count all issues, ignoring filters."""
    if dataset is None:
        return 0
    return sum(len(milestone.issues) for milestone in dataset.milestones)


def label_sort_key(name: str) -> tuple[str, str]:
    """Collation key approximating a locale-aware name comparison.

    Names compare case-insensitively first; on a tie the lowercase form sorts
    before the uppercase one, as locale collation does.
    """
    return (name.casefold(), name.swapcase())


def extract_labels(dataset: Dataset | None) -> list[Label]:
    """Collect the distinct labels of a dataset.

    Labels are deduplicated by name; the color of the first occurrence wins.

    Args:
        dataset: Dataset to scan.

    Returns:
        Distinct labels sorted by name.
    """
    if dataset is None:
        return []

    labels: dict[str, Label] = {}
    for issue in dataset.iter_issues():
        for label in issue.labels:
            if label.name not in labels:
                labels[label.name] = label

    return sorted(labels.values(), key=lambda label: label_sort_key(label.name))
