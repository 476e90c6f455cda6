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
"""Tests for the pygame input adapter."""

from pathlib import Path

import pytest

pygame = pytest.importorskip("pygame")

from pitchside.engine.events import EventType, ShotEvent
from pitchside.engine.recorder import MatchEventRecorder
from pitchside.engine.shortcuts import KeyboardDispatcher
from pitchside.utils.debug import RecorderDebugger
from pitchside.visualizer.visualizer import (
    dispatch_pygame_event,
    key_press_from_pygame,
    pitch_rect_for,
    pitch_to_screen,
)


@pytest.fixture
def recorder(tmp_path: Path) -> MatchEventRecorder:
    rec = MatchEventRecorder(debugger=RecorderDebugger(output_dir=str(tmp_path)))
    yield rec
    rec.close()


def key_event(key: int, mod: int = 0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod)


def click_event(pos, button: int = 1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


class TestLayout:
    """Pitch placement inside the window."""

    def test_pitch_rect_is_two_to_one(self) -> None:
        """The pitch keeps a 2:1 aspect ratio inside the margins."""
        rect = pitch_rect_for((1000, 500), 20)
        assert rect.width == 2 * rect.height
        assert rect.height <= 460
        assert rect.left >= 20 and rect.top >= 20

    def test_pitch_to_screen_corners(self) -> None:
        """Pitch corners map onto the rectangle corners."""
        rect = pygame.Rect(10, 20, 200, 100)
        assert pitch_to_screen(0, 0, rect) == (10, 20)
        assert pitch_to_screen(100, 100, rect) == (210, 120)
        assert pitch_to_screen(50, 50, rect) == (110, 70)


class TestKeyTranslation:
    """Conversion of pygame key events."""

    def test_ctrl_z(self) -> None:
        """Modifier flags are carried over."""
        press = key_press_from_pygame(key_event(pygame.K_z, pygame.KMOD_LCTRL | pygame.KMOD_LSHIFT))
        assert press is not None
        assert press.key == "z"
        assert press.ctrl and press.shift and not press.meta

    def test_non_printable_key(self) -> None:
        """Keys without a printable character are dropped."""
        assert key_press_from_pygame(key_event(pygame.K_F1)) is None


class TestDispatch:
    """Routing pygame events into the recorder."""

    def test_recording_and_tab_keys(self, recorder: MatchEventRecorder) -> None:
        """R toggles recording and the number keys select tabs."""
        dispatcher = KeyboardDispatcher()
        assert dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_r), None)
        assert recorder.is_recording
        assert dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_2), None)
        assert recorder.event_type is EventType.PASS
        assert dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_3), None)
        assert recorder.event_type is EventType.DEFENSIVE
        assert not dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_x), None)

    def test_click_records_shot(self, recorder: MatchEventRecorder) -> None:
        """A left click inside the pitch commits a shot."""
        rect = pygame.Rect(0, 0, 200, 100)
        dispatcher = KeyboardDispatcher()
        recorder.start_recording()
        assert dispatch_pygame_event(recorder, dispatcher, click_event((180, 50)), rect)
        assert len(recorder.events) == 1
        assert isinstance(recorder.events[0], ShotEvent)
        assert recorder.events[0].x == pytest.approx(90.0)

    def test_click_without_surface_is_ignored(self, recorder: MatchEventRecorder) -> None:
        """Clicks before the surface is laid out record nothing."""
        recorder.start_recording()
        dispatch_pygame_event(recorder, KeyboardDispatcher(), click_event((180, 50)), None)
        assert recorder.events == ()

    def test_right_click_is_not_consumed(self, recorder: MatchEventRecorder) -> None:
        """Only the primary button records events."""
        recorder.start_recording()
        rect = pygame.Rect(0, 0, 200, 100)
        assert not dispatch_pygame_event(recorder, KeyboardDispatcher(), click_event((180, 50), button=3), rect)
        assert recorder.events == ()

    def test_undo_only_inside_session(self, recorder: MatchEventRecorder) -> None:
        """Ctrl+Z reaches the recorder only while a session is open."""
        rect = pygame.Rect(0, 0, 200, 100)
        dispatcher = KeyboardDispatcher()
        with recorder.session(dispatcher):
            dispatch_pygame_event(recorder, dispatcher, click_event((100, 50)), rect)
            assert dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_z, pygame.KMOD_LCTRL), rect)
            assert recorder.events == ()
            assert dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_y, pygame.KMOD_LCTRL), rect)
            assert len(recorder.events) == 1

        assert not dispatch_pygame_event(recorder, dispatcher, key_event(pygame.K_z, pygame.KMOD_LCTRL), rect)
        assert len(recorder.events) == 1
