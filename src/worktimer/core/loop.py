"""Single-threaded event loop feeding a :class:`SessionController`.

Input, countdown ticks and resizes all go through one FIFO queue and are
applied one at a time.  Two cadences are kept apart: the countdown ticks
once per ``tick_interval`` while the clock runs, and the screen is redrawn
once per ``frame_interval`` whether or not anything changed.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable, Iterable

from worktimer.core.commands import Effect
from worktimer.core.controller import SessionController, Snapshot
from worktimer.core.events import Event, TickEvent

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL = 0.25

_RESTARTS_PHASE = frozenset({Effect.STARTED, Effect.RESET, Effect.RETARGETED})


class EventLoop:
    """Queues events and hands them to the controller in arrival order."""

    def __init__(
        self,
        controller: SessionController,
        tick_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {tick_interval}")
        self._controller = controller
        self._tick_interval = tick_interval
        self._clock = clock
        self._queue: deque[Event] = deque()
        self._next_tick: float | None = None

    @property
    def pending(self) -> int:
        """Number of events waiting to be processed."""
        return len(self._queue)

    def post(self, event: Event) -> None:
        """Append *event* to the queue."""
        self._queue.append(event)

    def schedule_ticks(self, now: float | None = None) -> int:
        """Queue one tick for every countdown interval that has passed.

        Returns the number of ticks queued.
        """
        now = self._clock() if now is None else now
        self._sync_phase(now)
        if self._next_tick is None:
            return 0
        count = 0
        while now >= self._next_tick:
            self.post(TickEvent())
            self._next_tick += self._tick_interval
            count += 1
        return count

    def process_pending(self) -> list[Effect]:
        """Apply every queued event and return the combined effects.

        Once the controller is quitting the rest of the queue is dropped.
        """
        effects: list[Effect] = []
        while self._queue:
            if self._controller.quitting:
                logger.debug("discarding %d queued events", len(self._queue))
                self._queue.clear()
                break
            event = self._queue.popleft()
            handled = self._controller.handle(event)
            if _RESTARTS_PHASE.intersection(handled):
                self._next_tick = None
            effects.extend(handled)
            self._sync_phase(self._clock())
        return effects

    def run(
        self,
        poll: Callable[[], Iterable[Event]],
        render: Callable[[Snapshot], None],
        sleep: Callable[[float], None] = time.sleep,
        frame_interval: float = DEFAULT_FRAME_INTERVAL,
        on_effects: Callable[[list[Effect]], None] | None = None,
    ) -> Snapshot:
        """Run until the controller is quitting and return the final snapshot."""
        logger.debug("event loop started")
        while True:
            # Ticks already due go ahead of this frame's input, so a key that
            # retargets the clock is never followed by a stale tick.
            self.schedule_ticks()
            for event in poll():
                self.post(event)
            effects = self.process_pending()
            if effects and on_effects is not None:
                on_effects(effects)
            snapshot = self._controller.snapshot()
            render(snapshot)
            if snapshot.quitting:
                break
            sleep(frame_interval)
        logger.debug("event loop stopped")
        return snapshot

    # -- private helpers -----------------------------------------------------

    def _sync_phase(self, now: float) -> None:
        """Restart the countdown phase when the clock starts or stops."""
        if not self._controller.clock.running:
            self._next_tick = None
        elif self._next_tick is None:
            self._next_tick = now + self._tick_interval
