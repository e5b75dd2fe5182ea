"""Tests for the default key bindings."""

import pytest

from worktimer.cli.keymap import DEFAULT_KEYMAP
from worktimer.core.commands import Command


class TestLookup:
    """Raw keys map onto commands."""

    @pytest.mark.parametrize(
        ("key", "command"),
        [
            ("s", Command.TOGGLE_START_STOP),
            (" ", Command.TOGGLE_START_STOP),
            ("S", Command.TOGGLE_START_STOP),
            ("r", Command.RESET),
            ("q", Command.QUIT),
            ("p", Command.SWITCH_TO_BREAK),
            ("w", Command.SWITCH_TO_WORK),
        ],
    )
    def test_bound_keys(self, key: str, command: Command) -> None:
        assert DEFAULT_KEYMAP.lookup(key) == command

    def test_unbound_key(self) -> None:
        assert DEFAULT_KEYMAP.lookup("x") is None

    def test_ctrl_c_is_not_a_key_binding(self) -> None:
        # ctrl+c arrives as KeyboardInterrupt in cbreak mode, not as a key.
        assert DEFAULT_KEYMAP.lookup("\x03") is None


class TestHelpEntries:
    """The legend gates start/stop on the enabled commands."""

    def _enabled(self, running: bool) -> dict[str, bool]:
        toggled = Command.STOP if running else Command.START
        enabled = frozenset({toggled, Command.RESET, Command.QUIT})
        return {b.help_text: on for b, on in DEFAULT_KEYMAP.help_entries(enabled)}

    def test_legend_order(self) -> None:
        texts = [b.help_text for b, _ in DEFAULT_KEYMAP.help_entries(frozenset())]
        assert texts == ["start", "stop", "reset", "quit", "start break", "start work"]

    def test_stopped_enables_start(self) -> None:
        entries = self._enabled(running=False)
        assert entries["start"] is True
        assert entries["stop"] is False

    def test_running_enables_stop(self) -> None:
        entries = self._enabled(running=True)
        assert entries["start"] is False
        assert entries["stop"] is True
        assert entries["reset"] is True
