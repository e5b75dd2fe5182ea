"""Command interpreter -- maps user commands onto clock mutations.

Every command is total: combinations that make no sense in the current
state (starting a timed-out clock, anything after quit) are silently
ignored rather than reported as errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from worktimer.core.clock import DurationClock
from worktimer.core.config import TimerConfig

logger = logging.getLogger(__name__)


class Command(Enum):
    """User commands understood by the interpreter."""

    START = "start"
    STOP = "stop"
    TOGGLE_START_STOP = "toggle"
    RESET = "reset"
    SWITCH_TO_BREAK = "break"
    SWITCH_TO_WORK = "work"
    QUIT = "quit"


class Mode(Enum):
    """Which configured duration the clock is counting."""

    WORK = "work"
    BREAK = "break"


class Effect(Enum):
    """Observable outcomes reported back to the caller."""

    STARTED = "started"
    STOPPED = "stopped"
    RESET = "reset"
    RETARGETED = "retargeted"
    TIMEOUT = "timeout"
    QUIT = "quit"


@dataclass
class SessionState:
    """Mutable state owned by a single session."""

    clock: DurationClock
    mode: Mode = Mode.WORK
    quitting: bool = False

    @property
    def start_enabled(self) -> bool:
        return not self.clock.running

    @property
    def stop_enabled(self) -> bool:
        return self.clock.running

    @property
    def enabled_commands(self) -> frozenset[Command]:
        """Commands currently actionable; exactly one of START/STOP."""
        toggled = Command.STOP if self.clock.running else Command.START
        return frozenset(
            {
                toggled,
                Command.TOGGLE_START_STOP,
                Command.RESET,
                Command.SWITCH_TO_BREAK,
                Command.SWITCH_TO_WORK,
                Command.QUIT,
            }
        )


class CommandInterpreter:
    """Applies commands to a :class:`SessionState`.

    The work and break spans come from the :class:`TimerConfig` rather
    than being baked into the handlers, so any durations can be tested.
    """

    def __init__(self, config: TimerConfig) -> None:
        self._config = config

    def apply(self, command: Command, state: SessionState) -> tuple[SessionState, list[Effect]]:
        """Apply *command* to *state* in place and return it with its effects."""
        if state.quitting:
            logger.debug("ignoring %s while quitting", command.value)
            return state, []

        clock = state.clock
        effects: list[Effect] = []

        match command:
            case Command.START:
                if clock.start():
                    effects.append(Effect.STARTED)
            case Command.STOP:
                if clock.stop():
                    effects.append(Effect.STOPPED)
            case Command.TOGGLE_START_STOP:
                was_running = clock.running
                if clock.toggle() != was_running:
                    effects.append(Effect.STARTED if clock.running else Effect.STOPPED)
            case Command.RESET:
                clock.stop()
                self._retarget(state, Mode.WORK)
                effects.append(Effect.RESET)
            case Command.SWITCH_TO_BREAK | Command.SWITCH_TO_WORK:
                mode = Mode.BREAK if command is Command.SWITCH_TO_BREAK else Mode.WORK
                self._retarget(state, mode)
                effects.append(Effect.RETARGETED)
                if clock.start():
                    effects.append(Effect.STARTED)
            case Command.QUIT:
                state.quitting = True
                effects.append(Effect.QUIT)

        logger.debug(
            "%s -> %s (%ds/%ds)", command.value, clock.state.value, clock.remaining, clock.target
        )
        return state, effects

    def duration_for(self, mode: Mode) -> int:
        """Return the configured span, in seconds, for *mode*."""
        if mode is Mode.BREAK:
            return self._config.break_seconds
        return self._config.work_seconds

    # -- private helpers -----------------------------------------------------

    def _retarget(self, state: SessionState, mode: Mode) -> None:
        state.mode = mode
        state.clock.retarget(self.duration_for(mode))
