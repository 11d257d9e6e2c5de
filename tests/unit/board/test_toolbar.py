from roadboard.board import (
    STATUS_PALETTE,
    FilterState,
    ResultsSummary,
    build_badges,
    build_label_options,
    build_status_options,
    build_toolbar,
    label_style,
    summarize_results,
)
from roadboard.dataset import Dataset
from roadboard.enums import FacetKind, IssueState, StatusColor


class TestBuildBadges:
    def test_no_filters_no_badges(self, dataset: Dataset) -> None:
        assert build_badges(dataset, FilterState()) == ()

    def test_empty_issue_state_has_no_badge(self, dataset: Dataset) -> None:
        assert build_badges(dataset, FilterState(issue_state="")) == ()

    def test_badge_order(self, dataset: Dataset) -> None:
        state = FilterState(
            text="bug",
            issue_state=IssueState.OPEN,
            project_status="Done",
            labels=["enhancement", "bug"],
        )

        badges = build_badges(dataset, state)

        assert [(badge.kind, badge.value) for badge in badges] == [
            (FacetKind.TEXT, "bug"),
            (FacetKind.ISSUE_STATE, "OPEN"),
            (FacetKind.STATUS, "Done"),
            (FacetKind.LABEL, "enhancement"),
            (FacetKind.LABEL, "bug"),
        ]
        assert [badge.caption for badge in badges] == [
            "Text",
            "State",
            "Status",
            "Label",
            "Label",
        ]

    def test_issue_state_palette(self, dataset: Dataset) -> None:
        (open_badge,) = build_badges(dataset, FilterState(issue_state=IssueState.OPEN))
        (closed_badge,) = build_badges(
            dataset, FilterState(issue_state=IssueState.CLOSED)
        )

        assert open_badge.palette == STATUS_PALETTE[StatusColor.GREEN]
        assert closed_badge.palette == STATUS_PALETTE[StatusColor.PURPLE]

    def test_status_palette(self, dataset: Dataset) -> None:
        (known,) = build_badges(dataset, FilterState(project_status="In Progress"))
        (unknown,) = build_badges(dataset, FilterState(project_status="Later"))

        assert known.palette == STATUS_PALETTE[StatusColor.YELLOW]
        assert unknown.palette == STATUS_PALETTE[StatusColor.GRAY]

    def test_label_style(self, dataset: Dataset) -> None:
        known, unknown = build_badges(dataset, FilterState(labels=["bug", "missing"]))

        assert known.style == label_style("d73a4a")
        assert unknown.style is None


class TestDropdowns:
    def test_status_options(self, dataset: Dataset) -> None:
        options = build_status_options(dataset, FilterState(project_status="Done"))

        assert [option.name for option in options] == ["Todo", "In Progress", "Done"]
        assert [option.is_selected for option in options] == [False, False, True]
        assert options[0].is_first
        assert options[-1].is_last
        assert not options[1].is_first
        assert not options[1].is_last

    def test_no_status_field(self) -> None:
        assert build_status_options(None, FilterState()) == ()

    def test_label_options(self, dataset: Dataset) -> None:
        options = build_label_options(dataset, FilterState(labels=["bug"]))

        assert [option.name for option in options] == [
            "auth",
            "bug",
            "documentation",
            "enhancement",
        ]
        assert [option.is_selected for option in options] == [False, True, False, False]


class TestResults:
    def test_hidden_without_filters(self, dataset: Dataset) -> None:
        assert summarize_results(dataset, FilterState()) is None

    def test_counts_matches(self, dataset: Dataset) -> None:
        summary = summarize_results(dataset, FilterState(labels=["bug"]))

        assert summary == ResultsSummary(count=2, total=5)
        assert str(summary) == "Showing 2 of 5 issues"


class TestBuildToolbar:
    def test_idle_toolbar(self, dataset: Dataset) -> None:
        toolbar = build_toolbar(dataset, FilterState())

        assert toolbar.badges == ()
        assert toolbar.results is None
        assert not toolbar.show_clear
        assert len(toolbar.status_options) == 3
        assert len(toolbar.label_options) == 4

    def test_pending_text_shows_clear(self, dataset: Dataset) -> None:
        toolbar = build_toolbar(dataset, FilterState(), pending_text="lo")

        assert toolbar.badges == ()
        assert toolbar.show_clear

    def test_active_filter_shows_clear(self, dataset: Dataset) -> None:
        toolbar = build_toolbar(dataset, FilterState(text="docs"))

        assert toolbar.show_clear
        assert toolbar.results == ResultsSummary(count=1, total=5)
