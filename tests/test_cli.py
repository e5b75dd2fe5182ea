"""Tests for the worktimer CLI layer.

``run_session`` and the logger are mocked so no terminal or log directory
is touched.
"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import click.testing
import pytest

import worktimer
from worktimer.cli.keyboard import TerminalError
from worktimer.cli.main import cli
from worktimer.core.commands import Command, Mode
from worktimer.core.controller import Snapshot


def _snapshot(remaining: int = 600, timed_out: bool = False) -> Snapshot:
    return Snapshot(
        remaining=remaining,
        target=1500,
        percent=0.6,
        running=False,
        timed_out=timed_out,
        quitting=True,
        mode=Mode.WORK,
        enabled_commands=frozenset({Command.START}),
    )


@pytest.fixture()
def runner() -> click.testing.CliRunner:
    """Return a Click CliRunner for invoking the CLI."""
    return click.testing.CliRunner()


@pytest.fixture(autouse=True)
def mock_logger() -> Iterator[MagicMock]:
    with patch("worktimer.cli.main.get_logger") as mock_get_logger:
        yield mock_get_logger


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestOptions:
    """Durations come from options or environment variables."""

    @patch("worktimer.cli.main.run_session")
    def test_defaults(self, mock_run: MagicMock, runner: click.testing.CliRunner) -> None:
        mock_run.return_value = _snapshot()
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        controller = mock_run.call_args.args[0]
        assert controller.config.work_seconds == 25 * 60
        assert controller.config.break_seconds == 5 * 60
        assert controller.config.autostart is True

    @patch("worktimer.cli.main.run_session")
    def test_custom_durations(self, mock_run: MagicMock, runner: click.testing.CliRunner) -> None:
        mock_run.return_value = _snapshot()
        result = runner.invoke(cli, ["--work", "20", "--break", "10", "--no-autostart"])
        assert result.exit_code == 0
        config = mock_run.call_args.args[0].config
        assert config.work_seconds == 1200
        assert config.break_seconds == 600
        assert config.autostart is False

    @patch("worktimer.cli.main.run_session")
    def test_environment_variables(
        self, mock_run: MagicMock, runner: click.testing.CliRunner
    ) -> None:
        mock_run.return_value = _snapshot()
        result = runner.invoke(cli, [], env={"WORKTIMER_WORK": "30", "WORKTIMER_BREAK": "7"})
        assert result.exit_code == 0
        config = mock_run.call_args.args[0].config
        assert config.work_seconds == 1800
        assert config.break_seconds == 420

    @pytest.mark.parametrize("value", ["0", "61", "abc"])
    def test_invalid_work_minutes(self, runner: click.testing.CliRunner, value: str) -> None:
        result = runner.invoke(cli, ["--work", value])
        assert result.exit_code != 0

    @patch("worktimer.cli.main.run_session")
    def test_debug_sets_log_level(
        self,
        mock_run: MagicMock,
        runner: click.testing.CliRunner,
        mock_logger: MagicMock,
    ) -> None:
        mock_run.return_value = _snapshot()
        runner.invoke(cli, ["--debug"])
        mock_logger.assert_called_once_with(10)

    def test_version(self, runner: click.testing.CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert worktimer.__version__ in result.output


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


class TestOutcome:
    """A summary is printed on exit; terminal failures exit 1."""

    @patch("worktimer.cli.main.run_session")
    def test_summary_when_stopped(
        self, mock_run: MagicMock, runner: click.testing.CliRunner
    ) -> None:
        mock_run.return_value = _snapshot(remaining=454)
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Stopped work timer with 07:34 remaining" in result.output

    @patch("worktimer.cli.main.run_session")
    def test_summary_when_done(self, mock_run: MagicMock, runner: click.testing.CliRunner) -> None:
        mock_run.return_value = _snapshot(remaining=0, timed_out=True)
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "All done!" in result.output

    @patch("worktimer.cli.main.run_session")
    def test_terminal_error_exits_1(
        self, mock_run: MagicMock, runner: click.testing.CliRunner
    ) -> None:
        mock_run.side_effect = TerminalError("stdin is not a terminal")
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Uh oh, we encountered an error: stdin is not a terminal" in result.output
