"""Events funnelled into the session controller."""

from __future__ import annotations

from dataclasses import dataclass

from worktimer.core.commands import Command


@dataclass(frozen=True)
class TickEvent:
    """The countdown cadence fired *quanta* times."""

    quanta: int = 1


@dataclass(frozen=True)
class CommandEvent:
    """A key press already mapped to a command."""

    command: Command


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed width."""

    width: int


Event = TickEvent | CommandEvent | ResizeEvent
