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
"""Tests for the bounded undo/redo history."""

import random

import pytest

from pitchside.engine.events import DefensiveEvent
from pitchside.engine.history import HistoryStore


def tackle(x: float) -> DefensiveEvent:
    return DefensiveEvent(x=x, y=50.0, action_type="tackle", success=True)


class TestHistoryStore:
    """Behaviour of HistoryStore."""

    def test_initial_state(self) -> None:
        """History starts with one empty snapshot at index 0."""
        history = HistoryStore()
        assert len(history) == 1
        assert history.index == 0
        assert history.current == ()
        assert not history.can_undo
        assert not history.can_redo

    def test_commit_advances_index(self) -> None:
        """Each commit becomes the visible snapshot."""
        history = HistoryStore()
        history.commit([tackle(1)])
        history.commit([tackle(1), tackle(2)])
        assert history.index == 2
        assert history.current == (tackle(1), tackle(2))
        assert history.can_undo

    def test_commit_freezes_snapshot(self) -> None:
        """Mutating the committed list does not alter history."""
        history = HistoryStore()
        events = [tackle(1)]
        history.commit(events)
        events.append(tackle(2))
        assert history.current == (tackle(1),)

    def test_undo_redo_identity(self) -> None:
        """undo followed by redo restores the visible snapshot."""
        history = HistoryStore()
        history.commit([tackle(1)])
        history.commit([tackle(1), tackle(2)])
        before = history.current
        assert history.undo() == (tackle(1),)
        assert history.redo() == before
        assert history.current == before

    def test_boundaries_are_no_ops(self) -> None:
        """Undo at the oldest and redo at the newest snapshot do nothing."""
        history = HistoryStore()
        assert history.undo() is None
        assert history.redo() is None
        history.commit([tackle(1)])
        assert history.redo() is None
        assert history.index == 1

    def test_commit_after_undo_truncates_future(self) -> None:
        """A new commit makes the undone snapshots unreachable."""
        history = HistoryStore()
        history.commit([tackle(1)])
        history.commit([tackle(1), tackle(2)])
        history.undo()
        history.undo()
        history.commit([tackle(3)])
        assert not history.can_redo
        assert history.redo() is None
        assert history.snapshots == ((), (tackle(3),))

    def test_capacity_evicts_oldest(self) -> None:
        """Once 50 snapshots are stored the oldest is dropped."""
        history = HistoryStore()
        for i in range(60):
            history.commit([tackle(i)])
        assert len(history) == 50
        assert history.index == 49
        assert history.current == (tackle(59),)
        assert history.snapshots[0] == (tackle(10),)

    def test_undo_reaches_oldest_retained_snapshot(self) -> None:
        """After eviction undo stops at the oldest retained snapshot."""
        history = HistoryStore(max_snapshots=3)
        for i in range(5):
            history.commit([tackle(i)])
        assert history.undo() == (tackle(3),)
        assert history.undo() == (tackle(2),)
        assert history.undo() is None

    def test_length_never_exceeds_capacity(self) -> None:
        """Random commit/undo/redo sequences respect the cap and index bounds."""
        rng = random.Random(7)
        history = HistoryStore()
        for step in range(500):
            choice = rng.random()
            if choice < 0.6:
                history.commit([tackle(step % 100)])
            elif choice < 0.8:
                history.undo()
            else:
                history.redo()
            assert len(history) <= 50
            assert 0 <= history.index < len(history)

    def test_invalid_capacity(self) -> None:
        """A history must be able to hold at least the current snapshot."""
        with pytest.raises(ValueError):
            HistoryStore(max_snapshots=0)
