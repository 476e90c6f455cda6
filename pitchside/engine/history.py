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
"""Bounded undo/redo history of event-list snapshots."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .config import ENGINE_CONFIG
from .events import MatchEvent

Snapshot = Tuple[MatchEvent, ...]


class HistoryStore:
    """Index-addressed sequence of immutable event-list snapshots.

    The store starts with a single empty snapshot. ``snapshots[index]`` is
    always the visible event list; undo and redo only move ``index``. A commit
    discards every snapshot after ``index`` before appending, and the oldest
    snapshot is evicted once the configured capacity is exceeded.

    Parameters
    ----------
    max_snapshots : int | None, optional
        Capacity of the history; defaults to ``ENGINE_CONFIG.history.max_snapshots``.
    """

    def __init__(self, max_snapshots: Optional[int] = None) -> None:
        capacity = ENGINE_CONFIG.history.max_snapshots if max_snapshots is None else max_snapshots
        if capacity < 1:
            raise ValueError("max_snapshots must be at least 1")
        self.max_snapshots = capacity
        self._snapshots: List[Snapshot] = [()]
        self._index = 0

    def __len__(self) -> int:
        """Return the number of stored snapshots."""
        return len(self._snapshots)

    @property
    def index(self) -> int:
        """Position of the visible snapshot."""
        return self._index

    @property
    def snapshots(self) -> Tuple[Snapshot, ...]:
        """All stored snapshots, oldest first."""
        return tuple(self._snapshots)

    @property
    def current(self) -> Snapshot:
        """The visible snapshot."""
        return self._snapshots[self._index]

    @property
    def can_undo(self) -> bool:
        """Whether an older snapshot is reachable."""
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        """Whether a newer snapshot is reachable."""
        return self._index < len(self._snapshots) - 1

    def commit(self, snapshot: Sequence[MatchEvent]) -> Snapshot:
        """Store ``snapshot`` as the newest version and make it visible.

        Parameters
        ----------
        snapshot : Sequence[MatchEvent]
            Complete event list for the new version.

        Returns
        -------
        Snapshot
            The stored, immutable snapshot.
        """
        frozen = tuple(snapshot)
        del self._snapshots[self._index + 1 :]
        self._snapshots.append(frozen)
        if len(self._snapshots) > self.max_snapshots:
            del self._snapshots[0]
        self._index = len(self._snapshots) - 1
        return frozen

    def undo(self) -> Optional[Snapshot]:
        """Step back one snapshot.

        Returns
        -------
        Snapshot | None
            The now-visible snapshot, or ``None`` when already at the oldest one.
        """
        if not self.can_undo:
            return None
        self._index -= 1
        return self.current

    def redo(self) -> Optional[Snapshot]:
        """Step forward one snapshot.

        Returns
        -------
        Snapshot | None
            The now-visible snapshot, or ``None`` when already at the newest one.
        """
        if not self.can_redo:
            return None
        self._index += 1
        return self.current
