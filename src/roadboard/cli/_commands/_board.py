# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: A002, D415, TC003
"""Board commands: render the board, suggest, and list facets."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter
from rich.markup import escape
from rich.panel import Panel

from roadboard.board import (
    Board,
    BoardController,
    CardView,
    ColumnView,
    RenderOptions,
    extract_labels,
    get_status_palette,
    get_status_options,
)
from roadboard.dataset import Dataset, load_dataset
from roadboard.enums import IssueState
from roadboard.exceptions import DatasetLoadError
from roadboard.utils import resolve_data_file

from ._context import CLIContext, OutputFormat
from ._shared import (
    ExitCode,
    exit_with_error,
    format_json,
    format_table,
    format_yaml,
    get_console,
    to_plain_data,
)

if TYPE_CHECKING:
    from rich.console import Console

    from roadboard.board import BoardSnapshot

__all__ = ["labels", "show", "statuses", "suggest"]

DataFileOption = Annotated[
    Path | None,
    Parameter(
        name=["--data-file", "-d"],
        help="Roadmap dataset (defaults to board.data_file)",
    ),
]

FormatOption = Annotated[
    OutputFormat,
    Parameter(name=["--format", "-f"], help="Output format (plain, json, yaml, table)"),
]

_MACHINE_FORMATS = (OutputFormat.JSON, OutputFormat.YAML, OutputFormat.TABLE)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _load(data_file: Path | None) -> Dataset:
    ctx = CLIContext.get_current()
    path = resolve_data_file(
        data_file if data_file is not None else ctx.config.board.data_file
    )

    if not path.is_file():
        exit_with_error(f"Data file not found: {path}", ExitCode.NOT_FOUND)

    try:
        dataset = load_dataset(path)
    except DatasetLoadError as e:
        if ctx.logger is not None:
            ctx.logger.error("Dataset load failed", path=str(path), error=str(e))
        exit_with_error(str(e), ExitCode.LOAD_ERROR)

    if ctx.logger is not None:
        ctx.logger.info(
            "Dataset loaded",
            path=str(path),
            milestones=len(dataset.milestones),
        )
    return dataset


def _controller(dataset: Dataset) -> BoardController:
    ctx = CLIContext.get_current()
    board_config = ctx.config.board
    return BoardController(
        dataset,
        options=RenderOptions(
            description_max_length=board_config.description_max_length,
            locale=board_config.locale.value,
        ),
        suggestion_limit=board_config.suggestion_limit,
        logger=ctx.logger,
    )


def _parse_issue_state(state: str | None) -> IssueState | None:
    if state is None:
        return None
    try:
        return IssueState(state.upper())
    except ValueError:
        valid = ", ".join(s.value.lower() for s in IssueState)
        exit_with_error(
            f"Invalid state '{state}'. Valid: {valid}", ExitCode.VALIDATION_ERROR
        )


def _reject_format(format: OutputFormat, allowed: tuple[OutputFormat, ...]) -> None:
    if format not in allowed:
        valid = ", ".join(f.value for f in allowed)
        exit_with_error(
            f"Unsupported format '{format}'. Valid: {valid}",
            ExitCode.VALIDATION_ERROR,
        )


def _card_line(card: CardView) -> str:
    status = card.status or "No status"
    line = f"[bold]{escape(card.title)}[/bold] [dim]({escape(status)})[/dim]"
    if card.labels:
        names = ", ".join(escape(label.name) for label in card.labels)
        line += f" [cyan]{names}[/cyan]"
    if card.sub_issues is not None:
        progress = card.sub_issues
        line += f" [dim]{progress.completed}/{progress.total} ({progress.percentage}%)[/dim]"
    return f"• {line}"


def _column_panel(column: ColumnView, *, verbose: bool) -> Panel:
    title = escape(column.title)
    if column.due_on_display:
        title = f"{title} [dim]· {column.due_on_display}[/dim]"

    lines: list[str] = []
    if verbose and column.description:
        lines.append(f"[italic]{escape(column.description)}[/italic]")
    lines.extend(_card_line(card) for card in column.cards)
    if verbose:
        lines.extend(
            f"  [dim]{escape(card.description_excerpt)}[/dim]"
            for card in column.cards
            if card.description_excerpt
        )

    return Panel("\n".join(lines), title=title, title_align="left")


def _print_snapshot(console: "Console", snapshot: "BoardSnapshot") -> None:
    ctx = CLIContext.get_current()
    result = snapshot.result

    if isinstance(result, Board):
        for column in result.columns:
            console.print(_column_panel(column, verbose=ctx.verbose))
    else:
        console.print(f"[dim]{result.message}[/dim]")

    if snapshot.toolbar.results is not None and not ctx.quiet:
        console.print(f"\n[dim]{snapshot.toolbar.results}[/dim]")


def _emit_machine(
    format: OutputFormat,
    data: object,
    headers: list[str],
    rows: list[list[str]],
) -> None:
    match format:
        case OutputFormat.JSON:
            output = format_json(to_plain_data(data))
        case OutputFormat.YAML:
            output = format_yaml(to_plain_data(data))
        case _:
            output = format_table(headers, rows)
    print(output.rstrip())  # noqa: T201


def _snapshot_rows(snapshot: "BoardSnapshot") -> list[list[str]]:
    if not isinstance(snapshot.result, Board):
        return []
    return [
        [
            column.title,
            card.title,
            card.status or "",
            str(card.state),
            ", ".join(label.name for label in card.labels),
        ]
        for column in snapshot.result.columns
        for card in column.cards
    ]


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------


def show(
    *,
    data_file: DataFileOption = None,
    text: Annotated[
        str | None, Parameter(name=["--text", "-t"], help="Text filter")
    ] = None,
    state: Annotated[
        str | None, Parameter(name=["--state"], help="Issue state (open, closed)")
    ] = None,
    status: Annotated[
        str | None, Parameter(name=["--status", "-s"], help="Status field value")
    ] = None,
    label: Annotated[
        list[str] | None,
        Parameter(name=["--label", "-l"], help="Required label (repeatable)"),
    ] = None,
    format: FormatOption = OutputFormat.PLAIN,
) -> None:
    """Render the board

    Filters the roadmap by text, issue state, status and labels, then prints
    one column per milestone that still has matching issues.
    """
    _reject_format(format, (OutputFormat.PLAIN, *_MACHINE_FORMATS))
    issue_state = _parse_issue_state(state)

    controller = _controller(_load(data_file))
    if text:
        controller.commit_text_filter(text)
    if issue_state is not None:
        controller.set_issue_state(issue_state)
    if status:
        controller.toggle_status(status)
    for name in dict.fromkeys(label or []):
        controller.toggle_label(name)
    snapshot = controller.snapshot()

    if format in _MACHINE_FORMATS:
        _emit_machine(
            format,
            snapshot,
            ["Milestone", "Title", "Status", "State", "Labels"],
            _snapshot_rows(snapshot),
        )
        return

    _print_snapshot(get_console(no_color=CLIContext.get_current().no_color), snapshot)


def suggest(
    query: str,
    /,
    *,
    data_file: DataFileOption = None,
    status: Annotated[
        str | None, Parameter(name=["--status", "-s"], help="Active status filter")
    ] = None,
    label: Annotated[
        list[str] | None,
        Parameter(name=["--label", "-l"], help="Active label filter (repeatable)"),
    ] = None,
    format: FormatOption = OutputFormat.PLAIN,
) -> None:
    """Show autocomplete suggestions for a query

    Statuses and labels already active are not suggested again.
    """
    _reject_format(format, (OutputFormat.PLAIN, *_MACHINE_FORMATS))

    controller = _controller(_load(data_file))
    if status:
        controller.toggle_status(status)
    for name in dict.fromkeys(label or []):
        controller.toggle_label(name)
    suggestions = controller.input_text_changed(query)

    if format in _MACHINE_FORMATS:
        _emit_machine(
            format,
            suggestions,
            ["Kind", "Value", "Display"],
            [[str(s.kind), s.value, s.display] for s in suggestions],
        )
        return

    console = get_console(no_color=CLIContext.get_current().no_color)
    if not suggestions:
        console.print("[dim]No suggestions.[/dim]")
    for suggestion in suggestions:
        console.print(escape(suggestion.display))


def labels(
    *,
    data_file: DataFileOption = None,
    format: FormatOption = OutputFormat.PLAIN,
) -> None:
    """List the labels used on the board"""
    _reject_format(format, (OutputFormat.PLAIN, *_MACHINE_FORMATS))
    found = extract_labels(_load(data_file))
    data = [{"name": label.name, "color": f"#{label.color}"} for label in found]

    if format in _MACHINE_FORMATS:
        _emit_machine(
            format,
            data,
            ["Label", "Color"],
            [[item["name"], item["color"]] for item in data],
        )
        return

    console = get_console(no_color=CLIContext.get_current().no_color)
    if not data:
        console.print("[dim]No labels found.[/dim]")
    for item in data:
        console.print(f"[{item['color']}]●[/] {escape(item['name'])}")


def statuses(
    *,
    data_file: DataFileOption = None,
    format: FormatOption = OutputFormat.PLAIN,
) -> None:
    """List the status options in board order"""
    _reject_format(format, (OutputFormat.PLAIN, *_MACHINE_FORMATS))
    options = get_status_options(_load(data_file))
    data = [
        {
            "name": option.name,
            "color": option.color.value,
            "dot": get_status_palette(option.color).dot,
        }
        for option in options
    ]

    if format in _MACHINE_FORMATS:
        _emit_machine(
            format,
            data,
            ["Status", "Color", "Dot"],
            [[item["name"], item["color"], item["dot"]] for item in data],
        )
        return

    console = get_console(no_color=CLIContext.get_current().no_color)
    if not data:
        console.print("[dim]No Status field defined.[/dim]")
    for item in data:
        console.print(f"[{item['dot']}]●[/] {escape(item['name'])}")
