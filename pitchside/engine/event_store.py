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
"""Active event list backed by the undo/redo history."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .events import EVENT_CLASSES, MatchEvent
from .history import HistoryStore, Snapshot

ChangeListener = Callable[[List[MatchEvent]], None]


class EventStore:
    """Ordered event list that always mirrors the visible history snapshot.

    Each edit builds a new list and commits it, so the history keeps every
    previous version intact. Listeners receive a fresh list copy after each
    change, including undo and redo.

    Parameters
    ----------
    history : HistoryStore | None, optional
        History to commit into; a new empty one is created when omitted.
    """

    def __init__(self, history: Optional[HistoryStore] = None) -> None:
        self.history = history if history is not None else HistoryStore()
        self._listeners: List[ChangeListener] = []

    @property
    def events(self) -> Snapshot:
        """The visible events in insertion order."""
        return self.history.current

    def __len__(self) -> int:
        """Return the number of visible events."""
        return len(self.history.current)

    def add_listener(self, listener: ChangeListener) -> None:
        """Register a callback invoked with the event list after every change.

        Parameters
        ----------
        listener : ChangeListener
            Callable receiving the new event list.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        """Unregister a previously added callback.

        Parameters
        ----------
        listener : ChangeListener
            Callback to remove; unknown callbacks are ignored.
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def append(self, event: MatchEvent) -> bool:
        """Commit the current events plus ``event``.

        Parameters
        ----------
        event : MatchEvent
            Newly captured event.

        Returns
        -------
        bool
            Always ``True``; appending is always a change.
        """
        self._commit(self.events + (event,))
        return True

    def delete_at(self, index: int) -> bool:
        """Commit the current events without the one at ``index``.

        Parameters
        ----------
        index : int
            Zero-based position of the event to remove. Negative or
            out-of-range positions are ignored.

        Returns
        -------
        bool
            ``True`` when an event was removed.
        """
        events = self.events
        if not 0 <= index < len(events):
            return False
        self._commit(events[:index] + events[index + 1 :])
        return True

    def clear(self) -> bool:
        """Commit an empty event list.

        Returns
        -------
        bool
            ``True`` when events were removed; an already empty store is left
            untouched and no history entry is created.
        """
        if not self.events:
            return False
        self._commit(())
        return True

    def replace(self, events: Sequence[MatchEvent]) -> bool:
        """Commit an explicitly edited or externally loaded event list.

        Parameters
        ----------
        events : Sequence[MatchEvent]
            Complete replacement list.

        Returns
        -------
        bool
            Always ``True``; the replacement becomes a new history entry.

        Raises
        ------
        ValueError
            Raised when an element is not a shot, pass, or defensive event.
            Nothing is committed in that case.
        """
        snapshot = tuple(events)
        for position, event in enumerate(snapshot):
            if not isinstance(event, EVENT_CLASSES):
                raise ValueError(f"Event {position} is not a recorded event (got {type(event).__name__})")
        self._commit(snapshot)
        return True

    def undo(self) -> bool:
        """Show the previous snapshot.

        Returns
        -------
        bool
            ``True`` when the history moved.
        """
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self._notify(snapshot)
        return True

    def redo(self) -> bool:
        """Show the next snapshot.

        Returns
        -------
        bool
            ``True`` when the history moved.
        """
        snapshot = self.history.redo()
        if snapshot is None:
            return False
        self._notify(snapshot)
        return True

    def _commit(self, events: Snapshot) -> None:
        """Commit ``events`` to history and notify listeners.

        Parameters
        ----------
        events : Snapshot
            New visible event list.
        """
        self._notify(self.history.commit(events))

    def _notify(self, events: Snapshot) -> None:
        """Invoke every listener with a list copy of ``events``.

        Parameters
        ----------
        events : Snapshot
            Event list to publish.
        """
        for listener in list(self._listeners):
            listener(list(events))
