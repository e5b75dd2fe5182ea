"""Progress calculator -- completion fraction of a clock."""

from __future__ import annotations

from worktimer.core.clock import DurationClock


def compute_percent(clock: DurationClock) -> float:
    """Return how much of the target span has elapsed, in ``[0.0, 1.0]``.

    A zero target yields ``0.0`` rather than dividing by zero.
    """
    if clock.target <= 0:
        return 0.0
    percent = (clock.target - clock.remaining) / clock.target
    return min(max(percent, 0.0), 1.0)
