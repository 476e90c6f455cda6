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
"""Keyboard shortcut classification and scoped listener registration."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional


class ShortcutAction(str, Enum):
    """History actions reachable from the keyboard."""

    UNDO = "undo"
    REDO = "redo"


@dataclass(frozen=True)
class KeyPress:
    """Toolkit-neutral description of a key press.

    Parameters
    ----------
    key : str
        Character produced by the key, for example ``"z"``. Case is ignored.
    ctrl : bool, default=False
        Whether a Control key was held.
    meta : bool, default=False
        Whether a Command/Meta key was held.
    shift : bool, default=False
        Whether a Shift key was held.
    """

    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False


def classify_shortcut(press: KeyPress) -> Optional[ShortcutAction]:
    """Map a key press to an undo or redo action.

    ``Ctrl/Cmd+Z`` undoes; ``Ctrl/Cmd+Y`` and ``Ctrl/Cmd+Shift+Z`` redo.

    Parameters
    ----------
    press : KeyPress
        Key press to classify.

    Returns
    -------
    ShortcutAction | None
        The matching action, or ``None`` for any other key press.
    """
    if not (press.ctrl or press.meta):
        return None
    key = press.key.lower()
    if key == "z":
        return ShortcutAction.REDO if press.shift else ShortcutAction.UNDO
    if key == "y":
        return ShortcutAction.REDO
    return None


KeyListener = Callable[[KeyPress], bool]


class KeyboardDispatcher:
    """Fan key presses out to the listeners currently registered.

    Listeners return ``True`` when they handled a press; dispatch stops at the
    first one that does.
    """

    def __init__(self) -> None:
        self._listeners: List[KeyListener] = []

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)

    def add_listener(self, listener: KeyListener) -> None:
        """Register ``listener`` for future key presses.

        Parameters
        ----------
        listener : KeyListener
            Callable receiving each :class:`KeyPress`.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: KeyListener) -> None:
        """Unregister ``listener``; unknown listeners are ignored.

        Parameters
        ----------
        listener : KeyListener
            Callable previously passed to :meth:`add_listener`.
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, press: KeyPress) -> bool:
        """Deliver ``press`` to the registered listeners.

        Parameters
        ----------
        press : KeyPress
            Key press to deliver.

        Returns
        -------
        bool
            ``True`` when a listener handled the press.
        """
        for listener in list(self._listeners):
            if listener(press):
                return True
        return False

    @contextmanager
    def listening(self, listener: KeyListener) -> Iterator[KeyListener]:
        """Register ``listener`` for the duration of a ``with`` block.

        The listener is removed when the block exits, including on error.

        Parameters
        ----------
        listener : KeyListener
            Callable to register.

        Yields
        ------
        KeyListener
            The registered listener.
        """
        self.add_listener(listener)
        try:
            yield listener
        finally:
            self.remove_listener(listener)
