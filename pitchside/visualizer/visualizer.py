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
"""Pygame front end for the recorder.

The window is the capture surface: left clicks inside the pitch rectangle are
forwarded to :meth:`MatchEventRecorder.handle_pointer` and key presses go
through a :class:`KeyboardDispatcher` so the undo/redo shortcuts are only
live while a recorder session is open. Drawing is deliberately plain.
"""
from typing import Any, Optional, Tuple

try:
    import pygame
except Exception:
    pygame = None

from pitchside.engine.config import ENGINE_CONFIG
from pitchside.engine.events import DefensiveEvent, EventType, PassEvent, ShotEvent, ShotOutcome
from pitchside.engine.geometry import SurfaceRect, Vector2D
from pitchside.engine.recorder import MatchEventRecorder
from pitchside.engine.shortcuts import KeyboardDispatcher, KeyPress

_TAB_KEYS = {"1": EventType.SHOT, "2": EventType.PASS, "3": EventType.DEFENSIVE}

PITCH = (38, 160, 72)
LINE = (245, 245, 245)
TEXT = (245, 245, 245)
OUTCOME_COLOURS = {
    ShotOutcome.GOAL: (16, 185, 129),
    ShotOutcome.SAVED: (245, 158, 11),
    ShotOutcome.MISS: (239, 68, 68),
}
SUCCESS = (16, 185, 129)
FAILURE = (239, 68, 68)
PASS_COMPLETE = (59, 130, 246)


def key_press_from_pygame(event: Any) -> Optional[KeyPress]:
    """Translate a pygame ``KEYDOWN`` event into a :class:`KeyPress`.

    Parameters
    ----------
    event : Any
        Pygame event carrying ``key`` and ``mod`` attributes.

    Returns
    -------
    KeyPress | None
        The key press, or ``None`` for non-printable keys or when pygame is
        unavailable.
    """
    if pygame is None or event.type != pygame.KEYDOWN:
        return None
    if not 32 <= event.key < 127:
        return None
    mod = getattr(event, "mod", 0)
    return KeyPress(
        key=chr(event.key),
        ctrl=bool(mod & pygame.KMOD_CTRL),
        meta=bool(mod & pygame.KMOD_META),
        shift=bool(mod & pygame.KMOD_SHIFT),
    )


def dispatch_pygame_event(
    recorder: MatchEventRecorder,
    dispatcher: KeyboardDispatcher,
    event: Any,
    surface_rect: Any,
) -> bool:
    """Route one pygame event to the recorder.

    Left clicks become pointer input. Key presses are offered to the
    dispatcher first (undo/redo), then ``R`` toggles recording and ``1``/``2``/``3``
    select the shot, pass, or defensive tab.

    Parameters
    ----------
    recorder : MatchEventRecorder
        Recorder receiving the input.
    dispatcher : KeyboardDispatcher
        Dispatcher holding the session's shortcut listeners.
    event : Any
        Pygame event to route.
    surface_rect : Any
        ``pygame.Rect`` of the pitch surface, or ``None`` if not laid out yet.

    Returns
    -------
    bool
        ``True`` when the event was consumed.
    """
    if pygame is None:
        return False

    if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 1) == 1:
        rect = SurfaceRect.from_rect(surface_rect) if surface_rect is not None else None
        recorder.handle_pointer(event.pos, rect)
        return True

    press = key_press_from_pygame(event)
    if press is None:
        return False
    if dispatcher.dispatch(press):
        return True
    if press.ctrl or press.meta:
        return False
    key = press.key.lower()
    if key == "r":
        recorder.toggle_recording()
        return True
    if key in _TAB_KEYS:
        recorder.select_event_type(_TAB_KEYS[key])
        return True
    return False


def pitch_rect_for(screen_size: Tuple[int, int], margin: int) -> Any:
    """Return the largest 2:1 pitch rectangle centred in the window.

    Parameters
    ----------
    screen_size : Tuple[int, int]
        Window size in pixels.
    margin : int
        Minimum gap between the pitch and the window edge.

    Returns
    -------
    pygame.Rect
        Rectangle of the capture surface.
    """
    avail_w = max(1, screen_size[0] - 2 * margin)
    avail_h = max(1, screen_size[1] - 2 * margin)
    width = min(avail_w, avail_h * 2)
    height = width // 2
    left = (screen_size[0] - width) // 2
    top = (screen_size[1] - height) // 2
    return pygame.Rect(left, top, width, height)


def pitch_to_screen(x: float, y: float, rect: Any) -> Tuple[int, int]:
    """Map pitch percentages back to screen pixels.

    Parameters
    ----------
    x : float
        Horizontal pitch coordinate.
    y : float
        Vertical pitch coordinate.
    rect : Any
        ``pygame.Rect`` of the pitch surface.

    Returns
    -------
    Tuple[int, int]
        Screen position in pixels.
    """
    scale = ENGINE_CONFIG.pitch.scale
    return int(rect.left + x / scale * rect.width), int(rect.top + y / scale * rect.height)


def _draw(screen: Any, font: Any, recorder: MatchEventRecorder, rect: Any) -> None:
    """Draw the pitch, recorded events, and a one-line status bar.

    Parameters
    ----------
    screen : Any
        Display surface.
    font : Any
        Font used for the status bar.
    recorder : MatchEventRecorder
        Recorder whose events are drawn.
    rect : Any
        ``pygame.Rect`` of the pitch surface.
    """
    radius = ENGINE_CONFIG.window.marker_radius
    screen.fill((0, 0, 0))
    pygame.draw.rect(screen, PITCH, rect)
    pygame.draw.rect(screen, LINE, rect, 3)
    pygame.draw.line(screen, LINE, (rect.centerx, rect.top), (rect.centerx, rect.bottom), 2)

    for event in recorder.events:
        if isinstance(event, ShotEvent):
            pygame.draw.circle(screen, OUTCOME_COLOURS[event.outcome], pitch_to_screen(event.x, event.y, rect), radius)
        elif isinstance(event, PassEvent):
            colour = PASS_COMPLETE if event.completed else FAILURE
            start = pitch_to_screen(event.start_x, event.start_y, rect)
            end = pitch_to_screen(event.end_x, event.end_y, rect)
            pygame.draw.line(screen, colour, start, end, 2)
            pygame.draw.circle(screen, colour, end, radius // 2)
        elif isinstance(event, DefensiveEvent):
            sx, sy = pitch_to_screen(event.x, event.y, rect)
            colour = SUCCESS if event.success else FAILURE
            pygame.draw.rect(screen, colour, (sx - radius, sy - radius, 2 * radius, 2 * radius))

    start: Optional[Vector2D] = recorder.pass_start
    if start is not None:
        pygame.draw.circle(screen, PASS_COMPLETE, pitch_to_screen(start.x, start.y, rect), radius, 2)

    summary = recorder.summary()
    status = (
        f"{'REC' if recorder.is_recording else 'PAUSED'} | {recorder.event_type.value} | "
        f"events {len(recorder.events)} | xG {summary.total_xg:.2f} | xA {summary.total_xa:.2f}"
    )
    screen.blit(font.render(status, True, TEXT), (8, 4))


def start_visualizer(
    recorder: MatchEventRecorder,
    screen_size: Optional[Tuple[int, int]] = None,
    fps: Optional[int] = None,
) -> None:
    """Run an interactive capture window until it is closed.

    Returns immediately when pygame is not installed. Press ``Q`` or close the
    window to end the session.

    Parameters
    ----------
    recorder : MatchEventRecorder
        Recorder receiving the input.
    screen_size : Tuple[int, int] | None
        Initial window size; defaults to ``ENGINE_CONFIG.window.screen_size``.
    fps : int | None
        Frame rate cap; defaults to ``ENGINE_CONFIG.window.fps``.
    """
    if pygame is None:
        return

    window = ENGINE_CONFIG.window
    screen_size = screen_size or window.screen_size
    fps = fps or window.fps

    pygame.init()
    screen = pygame.display.set_mode(screen_size, pygame.RESIZABLE)
    pygame.display.set_caption("Match Event Recorder")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)
    dispatcher = KeyboardDispatcher()

    try:
        with recorder.session(dispatcher):
            running = True
            while running:
                pitch_rect = pitch_rect_for(screen_size, window.margin)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_q:
                        running = False
                    elif event.type == pygame.VIDEORESIZE:
                        screen_size = (event.w, event.h)
                        screen = pygame.display.set_mode(screen_size, pygame.RESIZABLE)
                    else:
                        dispatch_pygame_event(recorder, dispatcher, event, pitch_rect)

                _draw(screen, font, recorder, pitch_rect)
                pygame.display.flip()
                clock.tick(fps)
    finally:
        pygame.quit()
