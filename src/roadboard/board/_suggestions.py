"""Autocomplete suggestions for the search box.

Suggestions come in three groups, always in this order: status options,
labels, then issue titles. Groups are concatenated before the result is
truncated, so a broad query can fill the list with statuses and labels and
leave no room for titles.
"""

from dataclasses import dataclass
from typing import Final

from roadboard.board._filters import extract_labels, get_status_options
from roadboard.board._state import FilterState
from roadboard.dataset import Dataset
from roadboard.enums import SuggestionKind

__all__ = [
    "DEFAULT_SUGGESTION_LIMIT",
    "FACET_PREFIXES",
    "Suggestion",
    "suggest",
]

DEFAULT_SUGGESTION_LIMIT: Final = 10

FACET_PREFIXES: Final = {
    SuggestionKind.STATUS: "Status",
    SuggestionKind.LABEL: "Label",
    SuggestionKind.TEXT: "Text",
}
"""Human-readable facet names used in suggestion and badge captions."""


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Autocomplete candidate.

    Attributes:
        kind: Facet the suggestion sets when selected.
        value: Value written to that facet.
        display: Caption shown to the user.
    """

    kind: SuggestionKind
    value: str
    display: str


def _facet_display(kind: SuggestionKind, value: str) -> str:
    return f"{FACET_PREFIXES[kind]}:{value}"


def suggest(
    query: str,
    dataset: Dataset | None,
    state: FilterState,
    *,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[Suggestion]:
    """Build suggestions for a partially typed query.

    Args:
        query: Text typed so far. An empty query yields no suggestions.
        dataset: Dataset to draw candidates from.
        state: Active filters; already selected statuses and labels are not
            suggested again.
        limit: Maximum number of suggestions returned.

    Returns:
        At most ``limit`` suggestions: statuses, then labels, then titles.
    """
    if not query or dataset is None:
        return []

    needle = query.lower()
    suggestions: list[Suggestion] = []

    for option in get_status_options(dataset):
        if needle in option.name.lower() and option.name != state.project_status:
            suggestions.append(
                Suggestion(
                    kind=SuggestionKind.STATUS,
                    value=option.name,
                    display=_facet_display(SuggestionKind.STATUS, option.name),
                )
            )

    for label in extract_labels(dataset):
        if needle in label.name.lower() and not state.has_label(label.name):
            suggestions.append(
                Suggestion(
                    kind=SuggestionKind.LABEL,
                    value=label.name,
                    display=_facet_display(SuggestionKind.LABEL, label.name),
                )
            )

    suggestions.extend(
        Suggestion(kind=SuggestionKind.TEXT, value=issue.title, display=issue.title)
        for issue in dataset.iter_issues()
        if needle in issue.title.lower()
    )

    return suggestions[: max(limit, 0)]
