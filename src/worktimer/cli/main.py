"""CLI entry point for worktimer.

Uses Click to parse the work/break durations, then hands the terminal
over to the full-screen timer until the user quits.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TypeVar

import click

import worktimer
from worktimer.cli.display import DONE_MESSAGE, format_remaining
from worktimer.cli.keyboard import TerminalError
from worktimer.cli.screen import run_session
from worktimer.core.config import DEFAULT_BREAK_MINUTES, DEFAULT_WORK_MINUTES, TimerConfig
from worktimer.core.controller import SessionController, Snapshot
from worktimer.logger import get_logger

T = TypeVar("T")

_MINUTES = click.IntRange(1, 60)


def _run(action: Callable[[], T]) -> T:
    """Execute *action*, converting terminal failures to a CLI error.

    On ``TerminalError`` the message is printed to stderr and the process
    exits with code 1.
    """
    try:
        return action()
    except TerminalError as exc:
        logging.getLogger(__name__).error("terminal initialisation failed: %s", exc)
        click.echo(f"Uh oh, we encountered an error: {exc}", err=True)
        sys.exit(1)


def _summary(snapshot: Snapshot) -> str:
    if snapshot.timed_out:
        return DONE_MESSAGE
    return f"Stopped {snapshot.mode.value} timer with {format_remaining(snapshot.remaining)} remaining"


@click.command()
@click.version_option(version=worktimer.__version__, prog_name="worktimer")
@click.option(
    "--work",
    "work_minutes",
    type=_MINUTES,
    default=DEFAULT_WORK_MINUTES,
    show_default=True,
    envvar="WORKTIMER_WORK",
    help="Length of a work period in minutes.",
)
@click.option(
    "--break",
    "break_minutes",
    type=_MINUTES,
    default=DEFAULT_BREAK_MINUTES,
    show_default=True,
    envvar="WORKTIMER_BREAK",
    help="Length of a break in minutes.",
)
@click.option(
    "--autostart/--no-autostart",
    default=True,
    show_default=True,
    help="Start counting down as soon as the timer opens.",
)
@click.option("--debug", is_flag=True, help="Write debug records to the log file.")
def cli(work_minutes: int, break_minutes: int, autostart: bool, debug: bool) -> None:
    """worktimer: a terminal work/break countdown timer.

    Keys: s/space start or stop, r reset, p start break, w start work, q quit.
    """
    config = TimerConfig.from_minutes(work_minutes, break_minutes, autostart=autostart)
    logger = get_logger(logging.DEBUG if debug else logging.INFO)
    logger.info(
        "session opened: work=%ds break=%ds autostart=%s",
        config.work_seconds,
        config.break_seconds,
        config.autostart,
    )

    controller = SessionController(config)
    snapshot = _run(lambda: run_session(controller))
    logger.info("session closed with %ds remaining", snapshot.remaining)
    click.echo(_summary(snapshot))
