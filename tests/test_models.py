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
"""Tests for event models and attribute selections."""

import pytest

from pitchside.engine.events import (
    AssistType,
    BodyPart,
    DefensiveAction,
    DefensiveEvent,
    EventType,
    MatchPhase,
    PassEvent,
    PitchZone,
    ShotEvent,
    ShotOutcome,
)
from pitchside.models.attributes import AttributeConfig


def make_shot(**overrides: object) -> ShotEvent:
    values = dict(
        x=90.0,
        y=50.0,
        outcome=ShotOutcome.GOAL,
        body_part=BodyPart.FOOT,
        assist_type=AssistType.CROSS,
        xg=0.9,
        phase=MatchPhase.ATTACKING_TRANSITION,
        zone=PitchZone.FINISHING,
    )
    values.update(overrides)
    return ShotEvent(**values)


class TestShotEvent:
    """Tests for ShotEvent."""

    def test_discriminant(self) -> None:
        """Each event class carries its type tag."""
        assert make_shot().event_type is EventType.SHOT
        assert PassEvent.event_type is EventType.PASS
        assert DefensiveEvent.event_type is EventType.DEFENSIVE

    def test_string_values_are_coerced(self) -> None:
        """Enum fields accept their plain string values."""
        shot = make_shot(outcome="saved", body_part="head", assist_type="corner", phase="in_possession", zone="build_up")
        assert shot.outcome is ShotOutcome.SAVED
        assert shot.body_part is BodyPart.HEAD
        assert shot.assist_type is AssistType.CORNER
        assert shot.phase is MatchPhase.IN_POSSESSION
        assert shot.zone is PitchZone.BUILD_UP

    def test_unknown_enum_value_rejected(self) -> None:
        """Values outside the enumeration raise ValueError."""
        with pytest.raises(ValueError, match="outcome"):
            make_shot(outcome="post")

    @pytest.mark.parametrize("field_name, value", [("x", -0.1), ("y", 100.1), ("xg", 1.01), ("xg", -0.2)])
    def test_bounds_enforced(self, field_name: str, value: float) -> None:
        """Coordinates and xG must lie within their ranges."""
        with pytest.raises(ValueError, match=field_name):
            make_shot(**{field_name: value})

    def test_is_immutable(self) -> None:
        """Events are frozen so history snapshots cannot be altered."""
        shot = make_shot()
        with pytest.raises(AttributeError):
            shot.x = 10.0  # type: ignore[misc]

    def test_describe_and_to_dict(self) -> None:
        """Labels and plain mappings use the data-model names."""
        shot = make_shot()
        assert shot.describe() == "Shot: goal (xG 0.90)"
        payload = shot.to_dict()
        assert payload["type"] == "shot"
        assert payload["bodyPart"] == "foot"
        assert payload["assistType"] == "cross"
        assert payload["xG"] == 0.9
        assert payload["phase"] == "attacking_transition"
        assert payload["zone"] == "finishing"


class TestPassEvent:
    """Tests for PassEvent."""

    def test_start_and_end_may_coincide(self) -> None:
        """A zero-length pass is degenerate but valid."""
        event = PassEvent(start_x=40, start_y=40, end_x=40, end_y=40, completed=True, xa=0.0)
        assert (event.start_x, event.start_y) == (event.end_x, event.end_y)

    def test_xa_cap_enforced(self) -> None:
        """xA above 0.8 is rejected."""
        with pytest.raises(ValueError, match="xa"):
            PassEvent(start_x=0, start_y=0, end_x=100, end_y=50, completed=True, xa=0.81)

    def test_end_point_validated(self) -> None:
        """Both endpoints are checked independently."""
        with pytest.raises(ValueError, match="end_y"):
            PassEvent(start_x=0, start_y=0, end_x=50, end_y=101, completed=True, xa=0.0)

    def test_describe_and_to_dict(self) -> None:
        """Incomplete passes are labelled as such."""
        event = PassEvent(start_x=10, start_y=20, end_x=30, end_y=40, completed=False, xa=0.0)
        assert event.describe() == "Pass: incomplete (xA 0.00)"
        assert event.to_dict() == {
            "type": "pass",
            "startX": 10,
            "startY": 20,
            "endX": 30,
            "endY": 40,
            "completed": False,
            "xA": 0.0,
            "phase": "in_possession",
            "zone": "progression",
        }


class TestDefensiveEvent:
    """Tests for DefensiveEvent."""

    def test_defaults_and_describe(self) -> None:
        """Phase and zone default to the recorder defaults."""
        event = DefensiveEvent(x=20, y=70, action_type="interception", success=False)
        assert event.action_type is DefensiveAction.INTERCEPTION
        assert event.phase is MatchPhase.IN_POSSESSION
        assert event.zone is PitchZone.PROGRESSION
        assert event.describe() == "Interception: failed"
        assert event.to_dict()["actionType"] == "interception"


class TestAttributeConfig:
    """Tests for AttributeConfig."""

    def test_defaults(self) -> None:
        """Defaults match the recorder's initial selections."""
        attrs = AttributeConfig()
        assert attrs.outcome is ShotOutcome.MISS
        assert attrs.body_part is BodyPart.FOOT
        assert attrs.assist_type is AssistType.OPEN_PLAY
        assert attrs.action_type is DefensiveAction.TACKLE
        assert attrs.success is True
        assert attrs.pass_completed is True
        assert attrs.phase is MatchPhase.IN_POSSESSION
        assert attrs.zone is PitchZone.PROGRESSION

    def test_constructor_coerces_strings(self) -> None:
        """String selections become enum members."""
        attrs = AttributeConfig(outcome="goal", zone="finishing")
        assert attrs.outcome is ShotOutcome.GOAL
        assert attrs.zone is PitchZone.FINISHING

    def test_update(self) -> None:
        """Updates coerce values and leave other options untouched."""
        attrs = AttributeConfig()
        attrs.update(body_part="head", pass_completed=False)
        assert attrs.body_part is BodyPart.HEAD
        assert attrs.pass_completed is False
        assert attrs.outcome is ShotOutcome.MISS

    def test_update_is_all_or_nothing(self) -> None:
        """An invalid value leaves every option unchanged."""
        attrs = AttributeConfig()
        with pytest.raises(ValueError):
            attrs.update(outcome="goal", zone="penalty_box")
        assert attrs.outcome is ShotOutcome.MISS

    def test_update_unknown_option(self) -> None:
        """Unknown option names are rejected."""
        with pytest.raises(ValueError, match="Unknown attribute option"):
            AttributeConfig().update(weather="rain")

    @pytest.mark.parametrize("option", ["success", "pass_completed"])
    def test_constructor_rejects_non_bool_flags(self, option: str) -> None:
        """Flag options only accept real booleans."""
        with pytest.raises(ValueError, match=f"{option} must be True or False"):
            AttributeConfig(**{option: "false"})

    def test_update_rejects_non_bool_flags(self) -> None:
        """String or numeric flags leave every option unchanged."""
        attrs = AttributeConfig()
        with pytest.raises(ValueError, match="pass_completed must be True or False"):
            attrs.update(pass_completed="false")
        with pytest.raises(ValueError, match="success must be True or False"):
            attrs.update(outcome="goal", success=0)
        assert attrs.pass_completed is True
        assert attrs.success is True
        assert attrs.outcome is ShotOutcome.MISS
