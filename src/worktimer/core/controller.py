"""Session controller -- owns the clock and dispatches events to it."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from worktimer.core.clock import DurationClock
from worktimer.core.commands import Command, CommandInterpreter, Effect, Mode, SessionState
from worktimer.core.config import TimerConfig
from worktimer.core.events import CommandEvent, Event, ResizeEvent, TickEvent
from worktimer.core.progress import compute_percent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session for the renderer."""

    remaining: int
    target: int
    percent: float
    running: bool
    timed_out: bool
    quitting: bool
    mode: Mode
    enabled_commands: frozenset[Command]
    width: int | None = None


class SessionController:
    """Owns one session's clock and applies events to it in arrival order.

    Nothing here is shared between instances, so several controllers can
    live side by side (which the tests rely on).
    """

    def __init__(self, config: TimerConfig | None = None) -> None:
        self._config: TimerConfig = config if config is not None else TimerConfig()
        self._interpreter = CommandInterpreter(self._config)
        clock = DurationClock(self._config.work_seconds, quantum=self._config.tick_seconds)
        self._state = SessionState(clock=clock)
        self._width: int | None = None

    # -- properties ----------------------------------------------------------

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def clock(self) -> DurationClock:
        return self._state.clock

    @property
    def quitting(self) -> bool:
        return self._state.quitting

    # -- public API ----------------------------------------------------------

    def handle(self, event: Event) -> list[Effect]:
        """Apply a single event and return the effects it produced."""
        if self._state.quitting:
            return []

        match event:
            case TickEvent(quanta=quanta):
                if self.clock.advance(quanta):
                    logger.info("%s period finished", self._state.mode.value)
                    return [Effect.TIMEOUT]
                return []
            case CommandEvent(command=command):
                _, effects = self._interpreter.apply(command, self._state)
                if Effect.QUIT in effects:
                    logger.info("quit requested with %ds remaining", self.clock.remaining)
                return effects
            case ResizeEvent(width=width):
                self._width = width
                return []
        logger.warning("dropping unknown event %r", event)
        return []

    def dispatch(self, command: Command) -> list[Effect]:
        """Shorthand for ``handle(CommandEvent(command))``."""
        return self.handle(CommandEvent(command))

    def snapshot(self) -> Snapshot:
        """Return the state the renderer needs for one redraw."""
        clock = self.clock
        return Snapshot(
            remaining=clock.remaining,
            target=clock.target,
            percent=compute_percent(clock),
            running=clock.running,
            timed_out=clock.timed_out,
            quitting=self._state.quitting,
            mode=self._state.mode,
            enabled_commands=self._state.enabled_commands,
            width=self._width,
        )
