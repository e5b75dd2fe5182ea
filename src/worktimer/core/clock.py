"""Duration clock -- a deterministic countdown advanced by tick quanta."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ClockState(Enum):
    """Observable states of the clock."""

    IDLE = "idle"
    RUNNING = "running"
    TIMED_OUT = "timed_out"


class DurationClock:
    """A countdown over a target span, measured in whole seconds.

    The clock never looks at the wall clock.  Time only passes when the
    owner calls :meth:`advance`, one quantum per tick, so the same sequence
    of calls always produces the same state.
    """

    def __init__(self, target: int, quantum: int = 1) -> None:
        if quantum <= 0:
            raise ValueError(f"quantum must be positive, got {quantum}")
        self._quantum: int = quantum
        self._target: int = 0
        self._remaining: int = 0
        self._running: bool = False
        self.retarget(target)

    # -- properties ----------------------------------------------------------

    @property
    def target(self) -> int:
        return self._target

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def elapsed(self) -> int:
        return self._target - self._remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def timed_out(self) -> bool:
        return self._remaining == 0

    @property
    def quantum(self) -> int:
        return self._quantum

    @property
    def state(self) -> ClockState:
        if self.timed_out:
            return ClockState.TIMED_OUT
        if self._running:
            return ClockState.RUNNING
        return ClockState.IDLE

    # -- public interface ----------------------------------------------------

    def start(self) -> bool:
        """Start counting down.  Returns ``True`` if the clock was started.

        A running or timed-out clock is left alone.
        """
        if self._running or self.timed_out:
            return False
        self._running = True
        logger.debug("clock started with %ds remaining", self._remaining)
        return True

    def stop(self) -> bool:
        """Stop counting down.  Returns ``True`` if the clock was running."""
        was_running = self._running
        self._running = False
        if was_running:
            logger.debug("clock stopped with %ds remaining", self._remaining)
        return was_running

    def toggle(self) -> bool:
        """Stop a running clock, otherwise start it.  Returns ``running``."""
        if self._running:
            self.stop()
        else:
            self.start()
        return self._running

    def retarget(self, target: int) -> None:
        """Reset the countdown to a full *target* span.

        ``running`` is not changed; callers decide whether to start.
        """
        if target < 0:
            raise ValueError(f"target must not be negative, got {target}")
        self._target = target
        self._remaining = target
        if target == 0:
            self._running = False
        logger.debug("clock retargeted to %ds", target)

    def advance(self, quanta: int = 1) -> bool:
        """Count down by *quanta* ticks.

        Has no effect unless the clock is running.  Returns ``True`` exactly
        when this call drove the remaining time to zero (a timeout).
        """
        if not self._running or quanta <= 0:
            return False
        self._remaining = max(self._remaining - quanta * self._quantum, 0)
        if self._remaining == 0:
            self._running = False
            logger.debug("clock timed out after %ds", self._target)
            return True
        return False
