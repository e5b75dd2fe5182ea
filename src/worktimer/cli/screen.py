"""Full-screen timer session wiring keyboard, event loop and display."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.live import Live

from worktimer.cli.display import TimerView
from worktimer.cli.keyboard import KeyboardReader
from worktimer.cli.keymap import DEFAULT_KEYMAP, Keymap
from worktimer.core.commands import Command, Effect
from worktimer.core.controller import SessionController, Snapshot
from worktimer.core.events import CommandEvent, Event, ResizeEvent
from worktimer.core.loop import EventLoop

logger = logging.getLogger(__name__)


class InputSource:
    """Turns pending key presses and width changes into events."""

    def __init__(self, keyboard: KeyboardReader, console: Console, keymap: Keymap) -> None:
        self._keyboard = keyboard
        self._console = console
        self._keymap = keymap
        self._width: int | None = None

    def __call__(self) -> list[Event]:
        events: list[Event] = []
        width = self._console.size.width
        if width != self._width:
            self._width = width
            events.append(ResizeEvent(width))
        for key in self._keyboard.read_keys():
            command = self._keymap.lookup(key)
            if command is None:
                logger.debug("unbound key %r", key)
                continue
            events.append(CommandEvent(command))
        return events


def run_session(
    controller: SessionController,
    console: Console | None = None,
    keymap: Keymap = DEFAULT_KEYMAP,
    keyboard_factory: Callable[[], KeyboardReader] = KeyboardReader,
) -> Snapshot:
    """Run the timer screen until the user quits and return the last snapshot.

    Raises :class:`~worktimer.cli.keyboard.TerminalError` if the terminal
    cannot be put into cbreak mode.
    """
    console = console if console is not None else Console()
    view = TimerView(keymap)
    loop = EventLoop(controller, tick_interval=float(controller.config.tick_seconds))

    if controller.config.autostart:
        loop.post(CommandEvent(Command.START))

    def on_effects(effects: list[Effect]) -> None:
        if Effect.TIMEOUT in effects:
            console.bell()

    with keyboard_factory() as keyboard:
        poll = InputSource(keyboard, console, keymap)
        with Live(
            view.render(controller.snapshot()),
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live:

            def render(snapshot: Snapshot) -> None:
                live.update(view.render(snapshot), refresh=True)

            try:
                return loop.run(poll, render, on_effects=on_effects)
            except KeyboardInterrupt:
                loop.post(CommandEvent(Command.QUIT))
                loop.process_pending()
                return controller.snapshot()
