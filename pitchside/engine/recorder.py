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
"""Recording session controller.

:class:`MatchEventRecorder` owns every piece of mutable state for one recording
session: the recording flag, the selected capture tab and attributes, the
capture state machine, and the event store with its history. The surrounding
UI feeds it raw input and reads back the event list; an external collaborator
can subscribe to committed changes through ``on_events_change``.
"""
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from pitchside.models.attributes import AttributeConfig
from pitchside.utils.debug import RecorderDebugger

from .capture import EventCapture
from .config import ENGINE_CONFIG
from .event_store import EventStore
from .events import EventType, MatchEvent
from .geometry import CoordinateMapper, SurfaceRect, Vector2D
from .history import HistoryStore
from .shortcuts import KeyboardDispatcher, KeyPress, ShortcutAction, classify_shortcut
from .summary import EventSummary, summarize


class MatchEventRecorder:
    """Capture, compute, and history core for a single recording session.

    Parameters
    ----------
    on_events_change : Callable[[List[MatchEvent]], None] | None, optional
        Callback invoked with the visible event list after every append,
        delete, clear, load, undo, or redo.
    attributes : AttributeConfig | None, optional
        Initial attribute selections; defaults are used when omitted.
    debugger : RecorderDebugger | None, optional
        Session log. When omitted one is created if
        ``ENGINE_CONFIG.logging.enabled`` is set.
    history : HistoryStore | None, optional
        Pre-built history, mainly useful for a custom capacity.
    """

    def __init__(
        self,
        on_events_change: Optional[Callable[[List[MatchEvent]], None]] = None,
        attributes: Optional[AttributeConfig] = None,
        debugger: Optional[RecorderDebugger] = None,
        history: Optional[HistoryStore] = None,
    ) -> None:
        self.on_events_change = on_events_change
        self.attributes = attributes if attributes is not None else AttributeConfig()
        if debugger is None and ENGINE_CONFIG.logging.enabled:
            debugger = RecorderDebugger()
        self.debugger = debugger
        self.mapper = CoordinateMapper()
        self.capture = EventCapture()
        self.store = EventStore(history)
        self.store.add_listener(self._publish)
        self.is_recording = False

    # ==================== RENDER STATE ====================
    @property
    def events(self) -> Tuple[MatchEvent, ...]:
        """The visible events in insertion order."""
        return self.store.events

    @property
    def event_type(self) -> EventType:
        """The selected capture tab."""
        return self.capture.event_type

    @property
    def pass_start(self) -> Optional[Vector2D]:
        """Transient marker for a half-captured pass."""
        return self.capture.pass_start

    @property
    def can_undo(self) -> bool:
        """Whether :meth:`undo` would change the visible events."""
        return self.store.history.can_undo

    @property
    def can_redo(self) -> bool:
        """Whether :meth:`redo` would change the visible events."""
        return self.store.history.can_redo

    def summary(self) -> EventSummary:
        """Return headline figures for the visible events.

        Returns
        -------
        EventSummary
            Aggregated counts and totals.
        """
        return summarize(self.events)

    # ==================== UI INPUTS ====================
    def start_recording(self) -> None:
        """Enable click capture."""
        self._set_recording(True)

    def stop_recording(self) -> None:
        """Disable click capture and discard any half-captured pass."""
        self._set_recording(False)

    def toggle_recording(self) -> bool:
        """Flip the recording flag.

        Returns
        -------
        bool
            The new value of the flag.
        """
        self._set_recording(not self.is_recording)
        return self.is_recording

    def select_event_type(self, event_type: EventType) -> None:
        """Select the capture tab used for subsequent clicks.

        Parameters
        ----------
        event_type : EventType
            Tab to activate; plain strings such as ``"pass"`` are accepted.
        """
        self.capture.select_event_type(event_type)

    def update_attributes(self, **changes: object) -> None:
        """Change attribute selections used for subsequent events."""
        self.attributes.update(**changes)

    def handle_pointer(self, pointer: Tuple[float, float], rect: Optional[SurfaceRect]) -> Optional[MatchEvent]:
        """Process a raw click on the capture surface.

        Parameters
        ----------
        pointer : Tuple[float, float]
            Screen position of the click in pixels.
        rect : SurfaceRect | None
            Bounding rectangle of the capture surface, ``None`` when unavailable.

        Returns
        -------
        MatchEvent | None
            The committed event when the click completed one.
        """
        point = self.mapper.map_click(pointer, rect, self.is_recording)
        if point is None:
            self._log_ignored("recording disabled" if not self.is_recording else "click off capture surface")
            return None
        return self.handle_point(point)

    def handle_point(self, point: Vector2D) -> Optional[MatchEvent]:
        """Process a click already expressed in pitch coordinates.

        Parameters
        ----------
        point : Vector2D
            Pitch location in ``[0, 100]`` on both axes.

        Returns
        -------
        MatchEvent | None
            The committed event when the click completed one.
        """
        if not self.is_recording:
            self._log_ignored("recording disabled")
            return None
        scale = ENGINE_CONFIG.pitch.scale
        if not (0.0 <= point.x <= scale and 0.0 <= point.y <= scale):
            self._log_ignored(f"point ({point.x:.1f}, {point.y:.1f}) outside pitch")
            return None

        result = self.capture.handle_click(point, self.attributes)
        if result.event is None:
            if result.pass_start is not None and self.debugger:
                self.debugger.log_pass_start(result.pass_start.x, result.pass_start.y)
            return None

        self.store.append(result.event)
        if self.debugger:
            self.debugger.log_capture(result.event.describe(), len(self.store))
        return result.event

    def handle_key(self, press: KeyPress) -> bool:
        """Apply an undo/redo keyboard shortcut.

        Parameters
        ----------
        press : KeyPress
            Key press delivered by the UI toolkit.

        Returns
        -------
        bool
            ``True`` when the press is a history shortcut, even if the history
            was already at its boundary.
        """
        action = classify_shortcut(press)
        if action is ShortcutAction.UNDO:
            self.undo()
            return True
        if action is ShortcutAction.REDO:
            self.redo()
            return True
        return False

    # ==================== EDITS AND HISTORY ====================
    def undo(self) -> bool:
        """Show the previous version of the event list.

        Returns
        -------
        bool
            ``True`` when the visible events changed.
        """
        return self._track("undo", self.store.undo())

    def redo(self) -> bool:
        """Show the next version of the event list.

        Returns
        -------
        bool
            ``True`` when the visible events changed.
        """
        return self._track("redo", self.store.redo())

    def delete_event(self, index: int) -> bool:
        """Remove the event at ``index``.

        Parameters
        ----------
        index : int
            Zero-based position in :attr:`events`.

        Returns
        -------
        bool
            ``True`` when an event was removed.
        """
        return self._track("delete", self.store.delete_at(index))

    def clear_events(self) -> bool:
        """Remove every event. Confirmation prompts belong to the caller.

        Returns
        -------
        bool
            ``True`` when there were events to remove.
        """
        return self._track("clear", self.store.clear())

    def load_events(self, events: Sequence[MatchEvent]) -> bool:
        """Replace the visible events, for example with a saved session.

        Parameters
        ----------
        events : Sequence[MatchEvent]
            Complete replacement list.

        Returns
        -------
        bool
            Always ``True``; the replacement can be undone.

        Raises
        ------
        ValueError
            Raised when an element is not a shot, pass, or defensive event.
        """
        return self._track("load", self.store.replace(events))

    # ==================== SESSION LIFETIME ====================
    @contextmanager
    def session(self, dispatcher: Optional[KeyboardDispatcher] = None) -> Iterator["MatchEventRecorder"]:
        """Record with keyboard shortcuts bound for the lifetime of a ``with`` block.

        Recording starts on entry. On exit the shortcut listener is released and
        recording stops, even when the block raises.

        Parameters
        ----------
        dispatcher : KeyboardDispatcher | None
            Dispatcher that receives key presses from the UI; a private one is
            created when omitted.

        Yields
        ------
        MatchEventRecorder
            This recorder.
        """
        dispatcher = dispatcher if dispatcher is not None else KeyboardDispatcher()
        try:
            with dispatcher.listening(self.handle_key):
                self.start_recording()
                yield self
        finally:
            self.stop_recording()

    def close(self) -> None:
        """Close the session log."""
        if self.debugger:
            self.debugger.close()

    # ==================== HELPER METHODS ====================
    def _set_recording(self, enabled: bool) -> None:
        """Store the recording flag and reset the capture machine.

        Parameters
        ----------
        enabled : bool
            New value of the flag.
        """
        changed = enabled != self.is_recording
        self.is_recording = enabled
        self.capture.reset()
        if changed and self.debugger:
            self.debugger.log_recording(enabled)

    def _track(self, action: str, changed: bool) -> bool:
        """Log the result of a history operation.

        Parameters
        ----------
        action : str
            Name of the operation.
        changed : bool
            Whether the operation changed the visible events.

        Returns
        -------
        bool
            ``changed``, unmodified.
        """
        if self.debugger:
            if changed:
                history = self.store.history
                self.debugger.log_history(action, history.index, len(history), len(self.store))
            else:
                self.debugger.log_ignored(f"{action}: no change")
        return changed

    def _log_ignored(self, reason: str) -> None:
        """Record input that produced no state change.

        Parameters
        ----------
        reason : str
            Short explanation for the log.
        """
        if self.debugger:
            self.debugger.log_ignored(reason)

    def _publish(self, events: List[MatchEvent]) -> None:
        """Forward a committed change to ``on_events_change``.

        Errors raised by the collaborator are logged and re-raised.

        Parameters
        ----------
        events : List[MatchEvent]
            Visible events after the change.
        """
        if self.on_events_change is None:
            return
        try:
            self.on_events_change(events)
        except Exception as exc:
            if self.debugger:
                self.debugger.log_error(type(exc).__name__, f"on_events_change failed: {exc}")
            raise
