"""Intent-level entry point driving a board.

A BoardController owns the FilterState of one board. Every mutating intent
applies a single state change and recomputes the whole board, so callers
always receive a fresh snapshot and never observe a partially updated state.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from roadboard.board._render import Board, RenderOptions, RenderResult, render
from roadboard.board._state import FilterState
from roadboard.board._suggestions import DEFAULT_SUGGESTION_LIMIT, Suggestion, suggest
from roadboard.board._toolbar import ToolbarView, build_toolbar
from roadboard.enums import FacetKind, IssueState, SuggestionKind
from roadboard.utils import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from roadboard.dataset import Dataset

__all__ = ["BoardController", "BoardSnapshot"]


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Board and search bar computed in one pass."""

    result: RenderResult
    toolbar: ToolbarView


class BoardController:
    """Applies user intents to a FilterState and re-renders the board.

    Unknown label or status names are accepted as ordinary facet values; they
    simply match nothing.
    """

    def __init__(
        self,
        dataset: "Dataset",
        *,
        state: FilterState | None = None,
        options: RenderOptions | None = None,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
        logger: "FilteringBoundLogger | None" = None,
    ) -> None:
        self._dataset: Dataset = dataset
        self._state: FilterState = state if state is not None else FilterState()
        self._options: RenderOptions = options if options is not None else RenderOptions()
        self._suggestion_limit: int = suggestion_limit
        self._logger: FilteringBoundLogger = (
            logger if logger is not None else create_null_logger()
        )
        self._pending_text: str = ""

    @property
    def dataset(self) -> "Dataset":
        return self._dataset

    @property
    def state(self) -> FilterState:
        """Live filter state. Mutate it through the intent methods."""
        return self._state

    @property
    def options(self) -> RenderOptions:
        return self._options

    def snapshot(self) -> BoardSnapshot:
        """Recompute the board without changing any facet."""
        return BoardSnapshot(
            result=render(self._dataset, self._state, options=self._options),
            toolbar=build_toolbar(
                self._dataset, self._state, pending_text=self._pending_text
            ),
        )

    def _apply(self, intent: str, **details: object) -> BoardSnapshot:
        snapshot = self.snapshot()
        matched = (
            snapshot.result.matched_count if isinstance(snapshot.result, Board) else 0
        )
        self._logger.debug(
            "Intent applied",
            intent=intent,
            matched=matched,
            total=snapshot.result.total_count,
            **details,
        )
        return snapshot

    # -------------------------------------------------------------------------
    # Search input
    # -------------------------------------------------------------------------

    def input_text_changed(self, query: str) -> list[Suggestion]:
        """Return suggestions for the text typed so far.

        The query is matched as typed, surrounding whitespace included. The
        filter state is left untouched; only the clear-all control of the
        next snapshot reflects the pending input.
        """
        self._pending_text = query
        return suggest(
            query,
            self._dataset,
            self._state,
            limit=self._suggestion_limit,
        )

    def commit_text_filter(self, text: str) -> BoardSnapshot:
        """Replace the text filter with the trimmed input."""
        self._pending_text = ""
        self._state.set_text(text.strip())
        return self._apply("commit_text_filter", text=self._state.text)

    def select_suggestion(self, suggestion: Suggestion) -> BoardSnapshot:
        """Apply a suggestion to the facet it targets.

        Status suggestions toggle like a status click, label suggestions add
        the label, and title suggestions replace the text filter.
        """
        self._pending_text = ""
        match suggestion.kind:
            case SuggestionKind.STATUS:
                self._toggle_status(suggestion.value)
            case SuggestionKind.LABEL:
                self._state.add_label(suggestion.value)
            case SuggestionKind.TEXT:
                self._state.set_text(suggestion.value.strip())
        return self._apply(
            "select_suggestion", kind=str(suggestion.kind), value=suggestion.value
        )

    # -------------------------------------------------------------------------
    # Facet toggles
    # -------------------------------------------------------------------------

    def toggle_label(self, name: str) -> BoardSnapshot:
        """Add a label to the filter, or remove it when already selected."""
        if self._state.has_label(name):
            self._state.remove_label(name)
        else:
            self._state.add_label(name)
        return self._apply("toggle_label", label=name, labels=list(self._state.labels))

    def _toggle_status(self, name: str) -> None:
        if self._state.project_status == name:
            self._state.set_project_status(None)
        else:
            self._state.set_project_status(name)

    def toggle_status(self, name: str) -> BoardSnapshot:
        """Select a status, or clear it when it is already the active one."""
        self._toggle_status(name)
        return self._apply(
            "toggle_status", status=name, project_status=self._state.project_status
        )

    def set_issue_state(self, state: IssueState | str | None) -> BoardSnapshot:
        """Replace the issue state filter; None or an empty string clears it."""
        self._state.set_issue_state(state)
        return self._apply(
            "set_issue_state",
            issue_state=None
            if self._state.issue_state is None
            else str(self._state.issue_state),
        )

    # -------------------------------------------------------------------------
    # Facet removal
    # -------------------------------------------------------------------------

    def _remove(self, kind: FacetKind, value: str | None) -> None:
        match kind:
            case FacetKind.TEXT:
                self._state.set_text("")
            case FacetKind.ISSUE_STATE:
                self._state.set_issue_state(None)
            case FacetKind.STATUS:
                self._state.set_project_status(None)
            case FacetKind.LABEL:
                if value is None:
                    self._state.clear_labels()
                else:
                    self._state.remove_label(value)

    def remove_facet(self, kind: FacetKind, value: str | None = None) -> BoardSnapshot:
        """Clear one facet.

        Args:
            kind: Facet to clear.
            value: Label to remove for LABEL; None removes every label. Ignored
                for the other facets.
        """
        self._remove(kind, value)
        return self._apply("remove_facet", kind=str(kind), value=value)

    def remove_last_facet(self) -> BoardSnapshot:
        """Remove the most recent facet, as backspace on an empty input does.

        The last selected label goes first, then the status, then the text
        filter. Without any of them this only re-renders.
        """
        removed: FacetKind | None = None
        if self._state.labels:
            self._state.remove_label(self._state.labels[-1])
            removed = FacetKind.LABEL
        elif self._state.project_status:
            self._state.set_project_status(None)
            removed = FacetKind.STATUS
        elif self._state.text:
            self._state.set_text("")
            removed = FacetKind.TEXT
        return self._apply(
            "remove_last_facet", kind=None if removed is None else str(removed)
        )

    def clear_all(self) -> BoardSnapshot:
        """Reset every facet and the pending input."""
        self._pending_text = ""
        self._state.reset()
        return self._apply("clear_all")

    # -------------------------------------------------------------------------
    # Data
    # -------------------------------------------------------------------------

    def reload(self, dataset: "Dataset") -> BoardSnapshot:
        """Swap in a new dataset, keeping the active filters."""
        self._dataset = dataset
        self._logger.info(
            "Dataset reloaded",
            milestones=len(dataset.milestones),
            generated_at=None
            if dataset.generated_at is None
            else dataset.generated_at.isoformat(),
        )
        return self._apply("reload")
