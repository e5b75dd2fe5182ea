"""Rendering of a session snapshot with rich."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from worktimer.cli.keymap import DEFAULT_KEYMAP, Keymap
from worktimer.core.commands import Mode
from worktimer.core.controller import Snapshot

PADDING = 2
MAX_WIDTH = 80
DEFAULT_BAR_WIDTH = 40
_MIN_BAR_WIDTH = 10

BORDER_COLOR = "#7D56F4"
HELP_KEY_STYLE = "#909090"
HELP_TEXT_STYLE = "#626262"
HELP_DISABLED_STYLE = "#3C3C3C"
HELP_SEPARATOR = " • "

DONE_MESSAGE = "All done!"

_MODE_TITLES = {Mode.WORK: "work", Mode.BREAK: "break"}


def format_remaining(seconds: int) -> str:
    """Format *seconds* as ``MM:SS``."""
    seconds = max(seconds, 0)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def bar_width(terminal_width: int | None) -> int:
    """Width of the progress bar for a terminal *terminal_width* columns wide."""
    if terminal_width is None:
        return DEFAULT_BAR_WIDTH
    width = terminal_width - PADDING * 2 - 4
    return max(min(width, MAX_WIDTH), _MIN_BAR_WIDTH)


class TimerView:
    """Builds the renderable shown on every redraw."""

    def __init__(self, keymap: Keymap = DEFAULT_KEYMAP) -> None:
        self.keymap = keymap

    def render(self, snapshot: Snapshot) -> RenderableType:
        progress = ProgressBar(
            total=1.0,
            completed=snapshot.percent,
            width=bar_width(snapshot.width),
        )
        if snapshot.timed_out:
            countdown = Text(DONE_MESSAGE, style="bold")
        else:
            countdown = Text(format_remaining(snapshot.remaining), style="bold")
        state = "running" if snapshot.running else "stopped"
        return Panel(
            Group(progress, Text(""), countdown, Text(""), self.help_view(snapshot)),
            title=_MODE_TITLES[snapshot.mode],
            subtitle=state,
            border_style=BORDER_COLOR,
            padding=(1, 1, 0, 1),
            expand=False,
        )

    def help_view(self, snapshot: Snapshot) -> Text:
        """One-line legend of the key bindings; inactive ones are dimmed."""
        legend = Text()
        for index, (binding, enabled) in enumerate(
            self.keymap.help_entries(snapshot.enabled_commands)
        ):
            if index:
                legend.append(HELP_SEPARATOR, style=HELP_DISABLED_STYLE)
            key_style = HELP_KEY_STYLE if enabled else HELP_DISABLED_STYLE
            text_style = HELP_TEXT_STYLE if enabled else HELP_DISABLED_STYLE
            legend.append(binding.help_key, style=key_style)
            legend.append(" ")
            legend.append(binding.help_text, style=text_style)
        return legend
