"""Timer configuration -- the fixed work and break durations."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5

_MIN_DURATION = 1
_MAX_DURATION = 60


def _check_minutes(name: str, minutes: int) -> None:
    if not isinstance(minutes, int) or isinstance(minutes, bool):
        raise TypeError(f"{name} must be an integer, got {type(minutes).__name__}")
    if not (_MIN_DURATION <= minutes <= _MAX_DURATION):
        raise ValueError(
            f"{name} must be between {_MIN_DURATION} and {_MAX_DURATION}, got {minutes}"
        )


@dataclass(frozen=True)
class TimerConfig:
    """Durations (in seconds) used for the work and break modes.

    The configuration is fixed for the life of a session; commands only ever
    switch between these two spans.
    """

    work_seconds: int = DEFAULT_WORK_MINUTES * 60
    break_seconds: int = DEFAULT_BREAK_MINUTES * 60
    tick_seconds: int = 1
    autostart: bool = True

    def __post_init__(self) -> None:
        for name in ("work_seconds", "break_seconds", "tick_seconds"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @classmethod
    def from_minutes(
        cls,
        work_minutes: int = DEFAULT_WORK_MINUTES,
        break_minutes: int = DEFAULT_BREAK_MINUTES,
        autostart: bool = True,
    ) -> TimerConfig:
        """Build a config from whole minutes (1--60 each)."""
        _check_minutes("work_minutes", work_minutes)
        _check_minutes("break_minutes", break_minutes)
        return cls(
            work_seconds=work_minutes * 60,
            break_seconds=break_minutes * 60,
            autostart=autostart,
        )
