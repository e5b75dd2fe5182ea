"""Key bindings -- raw keys to commands, plus the help legend entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from worktimer.core.commands import Command


@dataclass(frozen=True)
class KeyBinding:
    """One entry of the key map and of the help legend."""

    keys: tuple[str, ...]
    help_key: str
    help_text: str
    command: Command
    # Command whose enabled flag decides whether this binding is active.
    gate: Command | None = None

    def matches(self, key: str) -> bool:
        return key in self.keys or key.lower() in self.keys


class Keymap:
    """The ordered set of bindings shown in the help legend."""

    def __init__(self, bindings: tuple[KeyBinding, ...]) -> None:
        self.bindings = bindings

    def lookup(self, key: str) -> Command | None:
        """Return the command bound to *key*, or ``None``."""
        for binding in self.bindings:
            if binding.matches(key):
                return binding.command
        return None

    def help_entries(
        self, enabled_commands: frozenset[Command]
    ) -> Iterator[tuple[KeyBinding, bool]]:
        """Yield each binding with whether it is currently actionable."""
        for binding in self.bindings:
            if binding.gate is None:
                yield binding, True
            else:
                yield binding, binding.gate in enabled_commands


DEFAULT_KEYMAP = Keymap(
    (
        KeyBinding(("s", " "), "s", "start", Command.TOGGLE_START_STOP, gate=Command.START),
        KeyBinding(("s", " "), "s", "stop", Command.TOGGLE_START_STOP, gate=Command.STOP),
        KeyBinding(("r",), "r", "reset", Command.RESET),
        KeyBinding(("q",), "q", "quit", Command.QUIT),
        KeyBinding(("p",), "p", "start break", Command.SWITCH_TO_BREAK),
        KeyBinding(("w",), "w", "start work", Command.SWITCH_TO_WORK),
    )
)
