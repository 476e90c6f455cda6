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
"""Event domain models captured by the recorder.

Every recorded action is one of three frozen dataclasses. Together they form
the closed union :data:`MatchEvent`; renderers and serialisers dispatch on the
``event_type`` class attribute. Categorical attributes are ``str``-valued enums
so that they compare equal to, and serialise as, their plain names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Type, TypeVar, Union

from .config import ENGINE_CONFIG


class EventType(str, Enum):
    """Capture tab selected in the recorder."""

    SHOT = "shot"
    PASS = "pass"
    DEFENSIVE = "defensive"


class ShotOutcome(str, Enum):
    """Result of a shot."""

    GOAL = "goal"
    MISS = "miss"
    SAVED = "saved"


class BodyPart(str, Enum):
    """Body part used to strike a shot."""

    FOOT = "foot"
    HEAD = "head"
    OTHER = "other"


class AssistType(str, Enum):
    """How the chance leading to a shot was created."""

    OPEN_PLAY = "open_play"
    CORNER = "corner"
    FREE_KICK = "free_kick"
    THROUGH_BALL = "through_ball"
    CROSS = "cross"


class DefensiveAction(str, Enum):
    """Kind of defensive action."""

    TACKLE = "tackle"
    INTERCEPTION = "interception"
    BLOCK = "block"
    CLEARANCE = "clearance"


class MatchPhase(str, Enum):
    """Tactical phase of play attached to each event."""

    IN_POSSESSION = "in_possession"
    OUT_POSSESSION = "out_possession"
    ATTACKING_TRANSITION = "attacking_transition"
    DEFENSIVE_TRANSITION = "defensive_transition"


class PitchZone(str, Enum):
    """Pitch third attached to each event."""

    BUILD_UP = "build_up"
    PROGRESSION = "progression"
    FINISHING = "finishing"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    """Convert ``value`` to a member of ``enum_cls``.

    Parameters
    ----------
    enum_cls : Type[E]
        Target enumeration.
    value : Any
        Enum member or its raw value (for example ``"goal"``).
    field_name : str
        Name of the field being validated, used in the error message.

    Returns
    -------
    E
        The matching enum member.

    Raises
    ------
    ValueError
        Raised when ``value`` is not a valid member of ``enum_cls``.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{field_name} must be one of: {allowed} (got {value!r})") from exc


def _check_coordinate(field_name: str, value: float) -> None:
    """Reject coordinates outside the pitch percentage grid.

    Parameters
    ----------
    field_name : str
        Name of the coordinate field, used in the error message.
    value : float
        Coordinate to validate.
    """
    scale = ENGINE_CONFIG.pitch.scale
    if not 0.0 <= value <= scale:
        raise ValueError(f"{field_name} must be between 0 and {scale:g} (got {value})")


def _check_bounded(field_name: str, value: float, upper: float) -> None:
    """Reject metric values outside ``[0, upper]``.

    Parameters
    ----------
    field_name : str
        Name of the metric field, used in the error message.
    value : float
        Metric value to validate.
    upper : float
        Inclusive upper bound.
    """
    if not 0.0 <= value <= upper:
        raise ValueError(f"{field_name} must be between 0 and {upper:g} (got {value})")


@dataclass(frozen=True)
class ShotEvent:
    """A shot recorded at a single pitch location.

    Parameters
    ----------
    x : float
        Horizontal pitch coordinate in ``[0, 100]``.
    y : float
        Vertical pitch coordinate in ``[0, 100]``.
    outcome : ShotOutcome
        Whether the shot was scored, missed, or saved.
    body_part : BodyPart
        Body part used for the shot.
    assist_type : AssistType
        How the chance was created.
    xg : float
        Expected goals value in ``[0, 1]``.
    phase : MatchPhase, default=MatchPhase.IN_POSSESSION
        Phase of play when the shot was taken.
    zone : PitchZone, default=PitchZone.PROGRESSION
        Pitch third tag selected when the shot was recorded.
    """

    event_type: ClassVar[EventType] = EventType.SHOT

    x: float
    y: float
    outcome: ShotOutcome
    body_part: BodyPart
    assist_type: AssistType
    xg: float
    phase: MatchPhase = MatchPhase.IN_POSSESSION
    zone: PitchZone = PitchZone.PROGRESSION

    def __post_init__(self) -> None:
        """Validate coordinates and the xG bound, coercing enum fields."""
        _check_coordinate("x", self.x)
        _check_coordinate("y", self.y)
        _check_bounded("xg", self.xg, ENGINE_CONFIG.metrics.xg_max)
        object.__setattr__(self, "outcome", coerce_enum(ShotOutcome, self.outcome, "outcome"))
        object.__setattr__(self, "body_part", coerce_enum(BodyPart, self.body_part, "body_part"))
        object.__setattr__(self, "assist_type", coerce_enum(AssistType, self.assist_type, "assist_type"))
        object.__setattr__(self, "phase", coerce_enum(MatchPhase, self.phase, "phase"))
        object.__setattr__(self, "zone", coerce_enum(PitchZone, self.zone, "zone"))

    def describe(self) -> str:
        """Return a one-line label for event lists.

        Returns
        -------
        str
            Summary such as ``"Shot: goal (xG 0.90)"``.
        """
        return f"Shot: {self.outcome.value} (xG {self.xg:.2f})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain mapping for external persistence collaborators.

        Returns
        -------
        Dict[str, Any]
            Event fields keyed by their data-model names.
        """
        return {
            "type": self.event_type.value,
            "x": self.x,
            "y": self.y,
            "outcome": self.outcome.value,
            "bodyPart": self.body_part.value,
            "assistType": self.assist_type.value,
            "xG": self.xg,
            "phase": self.phase.value,
            "zone": self.zone.value,
        }


@dataclass(frozen=True)
class PassEvent:
    """A pass between two pitch locations.

    Start and end are independent points; they may coincide.

    Parameters
    ----------
    start_x : float
        Horizontal coordinate where the pass was played.
    start_y : float
        Vertical coordinate where the pass was played.
    end_x : float
        Horizontal coordinate where the pass arrived.
    end_y : float
        Vertical coordinate where the pass arrived.
    completed : bool
        Whether the pass reached a teammate.
    xa : float
        Expected assists value in ``[0, 0.8]``.
    phase : MatchPhase, default=MatchPhase.IN_POSSESSION
        Phase of play when the pass was made.
    zone : PitchZone, default=PitchZone.PROGRESSION
        Pitch third tag selected when the pass was recorded.
    """

    event_type: ClassVar[EventType] = EventType.PASS

    start_x: float
    start_y: float
    end_x: float
    end_y: float
    completed: bool
    xa: float
    phase: MatchPhase = MatchPhase.IN_POSSESSION
    zone: PitchZone = PitchZone.PROGRESSION

    def __post_init__(self) -> None:
        """Validate both endpoints and the xA bound, coercing enum fields."""
        _check_coordinate("start_x", self.start_x)
        _check_coordinate("start_y", self.start_y)
        _check_coordinate("end_x", self.end_x)
        _check_coordinate("end_y", self.end_y)
        _check_bounded("xa", self.xa, ENGINE_CONFIG.metrics.xa_max)
        object.__setattr__(self, "phase", coerce_enum(MatchPhase, self.phase, "phase"))
        object.__setattr__(self, "zone", coerce_enum(PitchZone, self.zone, "zone"))

    def describe(self) -> str:
        """Return a one-line label for event lists.

        Returns
        -------
        str
            Summary such as ``"Pass: completed (xA 0.80)"``.
        """
        status = "completed" if self.completed else "incomplete"
        return f"Pass: {status} (xA {self.xa:.2f})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain mapping for external persistence collaborators.

        Returns
        -------
        Dict[str, Any]
            Event fields keyed by their data-model names.
        """
        return {
            "type": self.event_type.value,
            "startX": self.start_x,
            "startY": self.start_y,
            "endX": self.end_x,
            "endY": self.end_y,
            "completed": self.completed,
            "xA": self.xa,
            "phase": self.phase.value,
            "zone": self.zone.value,
        }


@dataclass(frozen=True)
class DefensiveEvent:
    """A defensive action recorded at a single pitch location.

    Parameters
    ----------
    x : float
        Horizontal pitch coordinate in ``[0, 100]``.
    y : float
        Vertical pitch coordinate in ``[0, 100]``.
    action_type : DefensiveAction
        Kind of defensive action.
    success : bool
        Whether the action won or kept the ball out of danger.
    phase : MatchPhase, default=MatchPhase.IN_POSSESSION
        Phase of play when the action happened.
    zone : PitchZone, default=PitchZone.PROGRESSION
        Pitch third tag selected when the action was recorded.
    """

    event_type: ClassVar[EventType] = EventType.DEFENSIVE

    x: float
    y: float
    action_type: DefensiveAction
    success: bool
    phase: MatchPhase = MatchPhase.IN_POSSESSION
    zone: PitchZone = PitchZone.PROGRESSION

    def __post_init__(self) -> None:
        """Validate coordinates and coerce enum fields."""
        _check_coordinate("x", self.x)
        _check_coordinate("y", self.y)
        object.__setattr__(self, "action_type", coerce_enum(DefensiveAction, self.action_type, "action_type"))
        object.__setattr__(self, "phase", coerce_enum(MatchPhase, self.phase, "phase"))
        object.__setattr__(self, "zone", coerce_enum(PitchZone, self.zone, "zone"))

    def describe(self) -> str:
        """Return a one-line label for event lists.

        Returns
        -------
        str
            Summary such as ``"Tackle: success"``.
        """
        status = "success" if self.success else "failed"
        return f"{self.action_type.value.capitalize()}: {status}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain mapping for external persistence collaborators.

        Returns
        -------
        Dict[str, Any]
            Event fields keyed by their data-model names.
        """
        return {
            "type": self.event_type.value,
            "x": self.x,
            "y": self.y,
            "actionType": self.action_type.value,
            "success": self.success,
            "phase": self.phase.value,
            "zone": self.zone.value,
        }


MatchEvent = Union[ShotEvent, PassEvent, DefensiveEvent]
"""Closed union of every event the recorder can commit."""

EVENT_CLASSES = (ShotEvent, PassEvent, DefensiveEvent)
"""Concrete classes accepted wherever a :data:`MatchEvent` is stored."""
