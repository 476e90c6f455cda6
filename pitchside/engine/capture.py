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
"""Click-driven capture state machine for shots, passes, and defensive actions.

Shots and defensive actions complete on a single click. Passes need two: the
first click records a transient start marker and the second completes the
event. The pending start point only exists inside :class:`AwaitingPassEnd`, so
a machine in :class:`Idle` can never carry a stale marker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pitchside.models.attributes import AttributeConfig

from .events import DefensiveEvent, EventType, MatchEvent, PassEvent, ShotEvent, coerce_enum
from .geometry import Vector2D
from .metrics import MetricEngine


@dataclass(frozen=True)
class Idle:
    """Waiting for the first click of any event."""


@dataclass(frozen=True)
class AwaitingPassEnd:
    """First pass click received; the next click completes the pass.

    Parameters
    ----------
    start : Vector2D
        Pitch location of the first click.
    """

    start: Vector2D


CaptureState = Union[Idle, AwaitingPassEnd]


@dataclass(frozen=True)
class CaptureResult:
    """Outcome of feeding one click to the state machine.

    Parameters
    ----------
    event : MatchEvent | None, optional
        Completed event ready to commit, if the click finished one.
    pass_start : Vector2D | None, optional
        Pending pass-start marker after the click, for display only.
    """

    event: Optional[MatchEvent] = None
    pass_start: Optional[Vector2D] = None


class EventCapture:
    """Turn normalised clicks into completed events.

    Parameters
    ----------
    metrics : type[MetricEngine], optional
        Provider of the ``xg`` and ``xa`` functions; defaults to :class:`MetricEngine`.
    """

    def __init__(self, metrics: type = MetricEngine) -> None:
        self.metrics = metrics
        self.state: CaptureState = Idle()
        self.event_type = EventType.SHOT

    @property
    def pass_start(self) -> Optional[Vector2D]:
        """Start point of the pending pass, or ``None`` when idle."""
        if isinstance(self.state, AwaitingPassEnd):
            return self.state.start
        return None

    def reset(self) -> None:
        """Return to :class:`Idle`, discarding any pending pass start."""
        self.state = Idle()

    def select_event_type(self, event_type: EventType) -> None:
        """Switch the active capture tab.

        Leaving the pass tab abandons a half-captured pass.

        Parameters
        ----------
        event_type : EventType
            Newly selected tab; plain strings such as ``"pass"`` are accepted.
        """
        event_type = coerce_enum(EventType, event_type, "event_type")
        if event_type is not EventType.PASS:
            self.reset()
        self.event_type = event_type

    def handle_click(self, point: Vector2D, attributes: AttributeConfig) -> CaptureResult:
        """Advance the machine with a click already mapped to pitch coordinates.

        Parameters
        ----------
        point : Vector2D
            Pitch location of the click.
        attributes : AttributeConfig
            Current attribute selections applied to any completed event.

        Returns
        -------
        CaptureResult
            The completed event, if any, and the pending pass marker.
        """
        if isinstance(self.state, AwaitingPassEnd):
            event = self._build_pass(self.state.start, point, attributes)
            self.state = Idle()
            return CaptureResult(event=event)

        if self.event_type is EventType.SHOT:
            return CaptureResult(event=self._build_shot(point, attributes))

        if self.event_type is EventType.PASS:
            self.state = AwaitingPassEnd(point)
            return CaptureResult(pass_start=point)

        return CaptureResult(event=self._build_defensive(point, attributes))

    def _build_shot(self, point: Vector2D, attributes: AttributeConfig) -> ShotEvent:
        """Create a shot event with its xG.

        Parameters
        ----------
        point : Vector2D
            Shot location.
        attributes : AttributeConfig
            Source of outcome, body part, assist type, phase, and zone.

        Returns
        -------
        ShotEvent
            The completed shot.
        """
        xg = self.metrics.xg(point, attributes.outcome, attributes.body_part)
        return ShotEvent(
            x=point.x,
            y=point.y,
            outcome=attributes.outcome,
            body_part=attributes.body_part,
            assist_type=attributes.assist_type,
            xg=xg,
            phase=attributes.phase,
            zone=attributes.zone,
        )

    def _build_pass(self, start: Vector2D, end: Vector2D, attributes: AttributeConfig) -> PassEvent:
        """Create a pass event with its xA.

        Parameters
        ----------
        start : Vector2D
            Location of the first click.
        end : Vector2D
            Location of the second click.
        attributes : AttributeConfig
            Source of the completion flag, phase, and zone.

        Returns
        -------
        PassEvent
            The completed pass.
        """
        xa = self.metrics.xa(end, attributes.pass_completed)
        return PassEvent(
            start_x=start.x,
            start_y=start.y,
            end_x=end.x,
            end_y=end.y,
            completed=attributes.pass_completed,
            xa=xa,
            phase=attributes.phase,
            zone=attributes.zone,
        )

    def _build_defensive(self, point: Vector2D, attributes: AttributeConfig) -> DefensiveEvent:
        """Create a defensive event.

        Parameters
        ----------
        point : Vector2D
            Action location.
        attributes : AttributeConfig
            Source of action type, success flag, phase, and zone.

        Returns
        -------
        DefensiveEvent
            The completed defensive action.
        """
        return DefensiveEvent(
            x=point.x,
            y=point.y,
            action_type=attributes.action_type,
            success=attributes.success,
            phase=attributes.phase,
            zone=attributes.zone,
        )
