"""Faceted filtering, suggestions and view derivation for the board.

Example:
    >>> from roadboard.board import BoardController
    >>> controller = BoardController(dataset)
    >>> snapshot = controller.toggle_label("bug")
    >>> snapshot.toolbar.results
    ResultsSummary(count=1, total=2)
"""

from ._colors import (
    HSL,
    RGB,
    STATUS_PALETTE,
    LabelStyle,
    StatusPalette,
    brighten_color,
    get_luminance,
    get_perceived_lightness,
    get_status_palette,
    hex_to_hsl,
    hex_to_rgb,
    is_light_color,
    label_style,
    string_to_hsl_color,
)
from ._controller import BoardController, BoardSnapshot
from ._filters import (
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
from ._render import (
    DEFAULT_DESCRIPTION_LENGTH,
    MAX_PROGRESS_SEGMENTS,
    NO_RESULTS_MESSAGE,
    Board,
    CardView,
    ColumnView,
    LabelView,
    NoResults,
    RenderOptions,
    RenderResult,
    SubIssueProgress,
    render,
    render_card,
    sub_issue_progress,
)
from ._state import FilterState
from ._suggestions import DEFAULT_SUGGESTION_LIMIT, FACET_PREFIXES, Suggestion, suggest
from ._text import (
    escape_html,
    format_simple_date,
    format_timestamp,
    highlight_text,
    truncate_text,
)
from ._toolbar import (
    FilterBadge,
    LabelOptionView,
    ResultsSummary,
    StatusOptionView,
    ToolbarView,
    build_badges,
    build_label_options,
    build_status_options,
    build_toolbar,
    summarize_results,
)

__all__ = [
    "DEFAULT_DESCRIPTION_LENGTH",
    "DEFAULT_SUGGESTION_LIMIT",
    "FACET_PREFIXES",
    "HSL",
    "MAX_PROGRESS_SEGMENTS",
    "NO_RESULTS_MESSAGE",
    "RGB",
    "STATUS_PALETTE",
    "Board",
    "BoardController",
    "BoardSnapshot",
    "CardView",
    "ColumnView",
    "FilterBadge",
    "FilterState",
    "LabelOptionView",
    "LabelStyle",
    "LabelView",
    "NoResults",
    "RenderOptions",
    "RenderResult",
    "ResultsSummary",
    "StatusOptionView",
    "StatusPalette",
    "SubIssueProgress",
    "Suggestion",
    "ToolbarView",
    "brighten_color",
    "build_badges",
    "build_label_options",
    "build_status_options",
    "build_toolbar",
    "count_filtered_issues",
    "escape_html",
    "extract_labels",
    "filter_issues",
    "find_status_option",
    "format_simple_date",
    "format_timestamp",
    "get_luminance",
    "get_perceived_lightness",
    "get_status_palette",
    "get_status_options",
    "get_total_issues",
    "hex_to_hsl",
    "hex_to_rgb",
    "highlight_text",
    "is_light_color",
    "issue_matches",
    "label_sort_key",
    "label_style",
    "render",
    "render_card",
    "sort_issues_by_status",
    "string_to_hsl_color",
    "sub_issue_progress",
    "suggest",
    "summarize_results",
    "truncate_text",
]
