import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from roadboard.cli import CLIContext, create_app


@pytest.fixture(autouse=True)
def isolated_cli(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> Generator[None]:
    """Keep commands away from the real user config and environment."""
    for key in list(os.environ):
        if key.startswith("ROADBOARD_"):
            monkeypatch.delenv(key)
    _ = mocker.patch(
        "roadboard.config._discovery.get_user_config_path",
        return_value=tmp_path / "user" / "config.toml",
    )
    CLIContext.reset()
    yield
    CLIContext.reset()


@pytest.fixture
def roadboard_cli(console: Console) -> Callable[..., None]:
    """Create CLI app for testing.

    Returns a callable that runs the CLI and suppresses SystemExit.
    Use roadboard_cli_with_exit_code when you need to check the exit code.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str | Path) -> None:
        try:
            app([str(arg) for arg in args])
        except SystemExit:
            pass

    return _run


@pytest.fixture
def roadboard_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code."""
    app = create_app(console=console, error_console=console)

    def _run(*args: str | Path) -> int:
        try:
            app([str(arg) for arg in args])
        except SystemExit as e:
            if e.code is None:
                return 0
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def cli_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI log at a temporary file and run from tmp_path."""
    log_file = tmp_path / "logs" / "cli.log"
    monkeypatch.setenv("ROADBOARD_LOGGING__FILE", str(log_file))
    monkeypatch.chdir(tmp_path)
    return log_file


@pytest.fixture
def roadboard_meta(cli_log_file: Path) -> Callable[..., int]:  # noqa: ARG001
    """Run the CLI through its global options, as the console script does.

    Config is loaded and the CLI logger created, unlike roadboard_cli which
    calls commands directly with a default context.
    """

    def _run(*args: str | Path) -> int:
        try:
            create_app().meta([str(arg) for arg in args])
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 0
        return 0

    return _run
