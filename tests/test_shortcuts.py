# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Tests for keyboard shortcut handling."""

import pytest

from pitchside.engine.shortcuts import KeyboardDispatcher, KeyPress, ShortcutAction, classify_shortcut


class TestClassifyShortcut:
    """Mapping of key presses to history actions."""

    @pytest.mark.parametrize(
        "press, expected",
        [
            (KeyPress("z", ctrl=True), ShortcutAction.UNDO),
            (KeyPress("z", meta=True), ShortcutAction.UNDO),
            (KeyPress("Z", ctrl=True), ShortcutAction.UNDO),
            (KeyPress("y", ctrl=True), ShortcutAction.REDO),
            (KeyPress("y", meta=True), ShortcutAction.REDO),
            (KeyPress("z", ctrl=True, shift=True), ShortcutAction.REDO),
            (KeyPress("z", meta=True, shift=True), ShortcutAction.REDO),
        ],
    )
    def test_history_shortcuts(self, press: KeyPress, expected: ShortcutAction) -> None:
        """Ctrl/Cmd+Z undoes; Ctrl/Cmd+Y and Ctrl/Cmd+Shift+Z redo."""
        assert classify_shortcut(press) is expected

    @pytest.mark.parametrize("press", [KeyPress("z"), KeyPress("y", shift=True), KeyPress("x", ctrl=True)])
    def test_other_keys_ignored(self, press: KeyPress) -> None:
        """Unmodified keys and other combinations are not shortcuts."""
        assert classify_shortcut(press) is None


class TestKeyboardDispatcher:
    """Listener registration and release."""

    def test_dispatch_stops_at_first_handler(self) -> None:
        """Only listeners up to the first handler see the press."""
        seen = []
        dispatcher = KeyboardDispatcher()
        dispatcher.add_listener(lambda press: seen.append("a") or False)
        dispatcher.add_listener(lambda press: seen.append("b") or True)
        dispatcher.add_listener(lambda press: seen.append("c") or True)
        assert dispatcher.dispatch(KeyPress("q"))
        assert seen == ["a", "b"]

    def test_listening_releases_on_exit(self) -> None:
        """The scoped listener is removed when the block ends."""
        dispatcher = KeyboardDispatcher()
        with dispatcher.listening(lambda press: True):
            assert dispatcher.listener_count == 1
            assert dispatcher.dispatch(KeyPress("z", ctrl=True))
        assert dispatcher.listener_count == 0
        assert not dispatcher.dispatch(KeyPress("z", ctrl=True))

    def test_listening_releases_on_error(self) -> None:
        """Release is guaranteed even when the block raises."""
        dispatcher = KeyboardDispatcher()
        with pytest.raises(RuntimeError):
            with dispatcher.listening(lambda press: True):
                raise RuntimeError("teardown")
        assert dispatcher.listener_count == 0

    def test_remove_unknown_listener(self) -> None:
        """Removing a listener that was never added is harmless."""
        KeyboardDispatcher().remove_listener(lambda press: True)
