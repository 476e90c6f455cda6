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
"""Expected goals (xG) and expected assists (xA) heuristics.

Both metrics are deterministic functions of pitch geometry and categorical
attributes. They are total: any point is accepted, and results are clamped to
their configured bounds rather than rejected.
"""

from __future__ import annotations

from .config import ENGINE_CONFIG
from .events import BodyPart, ShotOutcome, coerce_enum
from .geometry import Vector2D, goal_point


def _clamp(value: float, lower: float, upper: float) -> float:
    """Restrict ``value`` to the closed interval ``[lower, upper]``.

    Parameters
    ----------
    value : float
        Number to clamp.
    lower : float
        Inclusive lower bound.
    upper : float
        Inclusive upper bound.

    Returns
    -------
    float
        ``value`` limited to the interval.
    """
    return min(upper, max(lower, value))


def expected_goals(point: Vector2D, outcome: ShotOutcome, body_part: BodyPart) -> float:
    """Estimate the probability that a shot results in a goal.

    The geometric component decays linearly with distance to the goal point
    and is scaled down for headers and other body parts. Scored shots are
    never reported below the configured goal floor.

    Parameters
    ----------
    point : Vector2D
        Pitch location of the shot.
    outcome : ShotOutcome
        Result of the shot.
    body_part : BodyPart
        Body part used for the shot.

    Returns
    -------
    float
        xG value in ``[0, 1]``.
    """
    cfg = ENGINE_CONFIG.metrics
    outcome = coerce_enum(ShotOutcome, outcome, "outcome")
    body_part = coerce_enum(BodyPart, body_part, "body_part")

    distance = point.distance_to(goal_point())
    base = max(0.0, 1.0 - distance / cfg.xg_distance_divisor)

    if body_part is BodyPart.HEAD:
        base *= cfg.head_multiplier
    elif body_part is BodyPart.OTHER:
        base *= cfg.other_multiplier

    if outcome is ShotOutcome.GOAL:
        base = max(base, cfg.goal_floor)

    return _clamp(base, 0.0, cfg.xg_max)


def expected_assists(end_point: Vector2D, completed: bool) -> float:
    """Estimate the chance that a pass leads to a goal.

    Parameters
    ----------
    end_point : Vector2D
        Pitch location where the pass arrived.
    completed : bool
        Whether the pass reached a teammate; incomplete passes score zero.

    Returns
    -------
    float
        xA value in ``[0, 0.8]``.
    """
    cfg = ENGINE_CONFIG.metrics
    distance_to_goal = end_point.distance_to(goal_point())
    base = max(0.0, 1.0 - distance_to_goal / cfg.xa_distance_divisor)

    if not completed:
        base = 0.0

    return _clamp(base, 0.0, cfg.xa_max)


class MetricEngine:
    """Namespace bundling the metric functions for injection into capture code."""

    xg = staticmethod(expected_goals)
    xa = staticmethod(expected_assists)
