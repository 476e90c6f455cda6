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
"""Attribute selections applied to newly captured events."""
from dataclasses import dataclass, fields

from pitchside.engine.events import (
    AssistType,
    BodyPart,
    DefensiveAction,
    MatchPhase,
    PitchZone,
    ShotOutcome,
    coerce_enum,
)

_ENUM_FIELDS = {
    "outcome": ShotOutcome,
    "body_part": BodyPart,
    "assist_type": AssistType,
    "action_type": DefensiveAction,
    "phase": MatchPhase,
    "zone": PitchZone,
}
_FLAG_FIELDS = ("success", "pass_completed")


def _check_flag(name: str, value: object) -> bool:
    """Return ``value`` if it is a real boolean.

    Parameters
    ----------
    name : str
        Option name, used in the error message.
    value : object
        Candidate flag value.

    Returns
    -------
    bool
        The unchanged flag.
    """
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be True or False (got {value!r})")
    return value


@dataclass
class AttributeConfig:
    """Options currently selected in the surrounding UI.

    Only the options relevant to the active capture tab are read when an event
    is built; ``phase`` and ``zone`` are attached to every event.

    Parameters
    ----------
    outcome : ShotOutcome, default=ShotOutcome.MISS
        Result applied to new shots.
    body_part : BodyPart, default=BodyPart.FOOT
        Body part applied to new shots.
    assist_type : AssistType, default=AssistType.OPEN_PLAY
        Chance creation type applied to new shots.
    action_type : DefensiveAction, default=DefensiveAction.TACKLE
        Kind of action applied to new defensive events.
    success : bool, default=True
        Success flag applied to new defensive events.
    pass_completed : bool, default=True
        Completion flag applied to new passes.
    phase : MatchPhase, default=MatchPhase.IN_POSSESSION
        Phase of play tag.
    zone : PitchZone, default=PitchZone.PROGRESSION
        Pitch third tag.
    """

    outcome: ShotOutcome = ShotOutcome.MISS
    body_part: BodyPart = BodyPart.FOOT
    assist_type: AssistType = AssistType.OPEN_PLAY
    action_type: DefensiveAction = DefensiveAction.TACKLE
    success: bool = True
    pass_completed: bool = True
    phase: MatchPhase = MatchPhase.IN_POSSESSION
    zone: PitchZone = PitchZone.PROGRESSION

    def __post_init__(self) -> None:
        """Coerce string selections to their enum members and check the flags."""
        for name, enum_cls in _ENUM_FIELDS.items():
            setattr(self, name, coerce_enum(enum_cls, getattr(self, name), name))
        for name in _FLAG_FIELDS:
            _check_flag(name, getattr(self, name))

    def update(self, **changes: object) -> None:
        """Apply new selections, validating each before any is stored.

        Raises
        ------
        ValueError
            Raised for an unknown option name or an invalid value.
        """
        known = {f.name for f in fields(self)}
        staged = {}
        for name, value in changes.items():
            if name not in known:
                raise ValueError(f"Unknown attribute option '{name}'. Known options: {', '.join(sorted(known))}")
            if name in _ENUM_FIELDS:
                value = coerce_enum(_ENUM_FIELDS[name], value, name)
            else:
                value = _check_flag(name, value)
            staged[name] = value
        for name, value in staged.items():
            setattr(self, name, value)
