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
"""Aggregate statistics over a recorded event list.

These mirror the headline numbers shown next to the recorder: shot and goal
counts, cumulative xG/xA, pass accuracy, and the same figures split by phase
of play and by pitch third.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .events import DefensiveEvent, MatchEvent, MatchPhase, PassEvent, PitchZone, ShotEvent, ShotOutcome


def _percentage(part: int, whole: int) -> float:
    """Return ``part`` as a percentage of ``whole``.

    Parameters
    ----------
    part : int
        Numerator count.
    whole : int
        Denominator count.

    Returns
    -------
    float
        Percentage in ``[0, 100]``; ``0.0`` when ``whole`` is zero.
    """
    if whole == 0:
        return 0.0
    return part / whole * 100.0


@dataclass(frozen=True)
class EventSummary:
    """Headline figures for a recording session.

    Parameters
    ----------
    shots : int
        Number of shots.
    goals : int
        Number of shots that were scored.
    total_xg : float
        Sum of shot xG.
    passes : int
        Number of passes.
    completed_passes : int
        Number of completed passes.
    pass_accuracy : float
        Completed passes as a percentage of all passes.
    total_xa : float
        Sum of pass xA.
    defensive_actions : int
        Number of defensive actions.
    successful_defensive_actions : int
        Number of successful defensive actions.
    """

    shots: int
    goals: int
    total_xg: float
    passes: int
    completed_passes: int
    pass_accuracy: float
    total_xa: float
    defensive_actions: int
    successful_defensive_actions: int


@dataclass(frozen=True)
class PhaseStats:
    """Event counts for a single phase of play.

    Parameters
    ----------
    total : int
        Number of events tagged with the phase.
    shots : int
        Shots tagged with the phase.
    passes : int
        Passes tagged with the phase.
    defensive : int
        Defensive actions tagged with the phase.
    pass_completion : float
        Completed passes as a percentage of the phase's passes.
    """

    total: int
    shots: int
    passes: int
    defensive: int
    pass_completion: float


@dataclass(frozen=True)
class ZoneStats:
    """Event counts for a single pitch third.

    Parameters
    ----------
    total : int
        Number of events tagged with the zone.
    shots : int
        Shots tagged with the zone.
    passes : int
        Passes tagged with the zone.
    pass_completion : float
        Completed passes as a percentage of the zone's passes.
    total_xg : float
        Sum of xG for the zone's shots.
    """

    total: int
    shots: int
    passes: int
    pass_completion: float
    total_xg: float


def summarize(events: Iterable[MatchEvent]) -> EventSummary:
    """Compute headline figures for ``events``.

    Parameters
    ----------
    events : Iterable[MatchEvent]
        Recorded events in any order.

    Returns
    -------
    EventSummary
        Aggregated counts and totals.
    """
    events = list(events)
    shots = [e for e in events if isinstance(e, ShotEvent)]
    passes = [e for e in events if isinstance(e, PassEvent)]
    defensive = [e for e in events if isinstance(e, DefensiveEvent)]
    completed = sum(1 for p in passes if p.completed)

    return EventSummary(
        shots=len(shots),
        goals=sum(1 for s in shots if s.outcome is ShotOutcome.GOAL),
        total_xg=sum(s.xg for s in shots),
        passes=len(passes),
        completed_passes=completed,
        pass_accuracy=_percentage(completed, len(passes)),
        total_xa=sum(p.xa for p in passes),
        defensive_actions=len(defensive),
        successful_defensive_actions=sum(1 for d in defensive if d.success),
    )


def phase_breakdown(events: Iterable[MatchEvent]) -> Dict[MatchPhase, PhaseStats]:
    """Split event counts by phase of play.

    Parameters
    ----------
    events : Iterable[MatchEvent]
        Recorded events in any order.

    Returns
    -------
    Dict[MatchPhase, PhaseStats]
        Statistics for every phase, including phases with no events.
    """
    events = list(events)
    breakdown: Dict[MatchPhase, PhaseStats] = {}
    for phase in MatchPhase:
        tagged = [e for e in events if e.phase is phase]
        passes: List[PassEvent] = [e for e in tagged if isinstance(e, PassEvent)]
        breakdown[phase] = PhaseStats(
            total=len(tagged),
            shots=sum(1 for e in tagged if isinstance(e, ShotEvent)),
            passes=len(passes),
            defensive=sum(1 for e in tagged if isinstance(e, DefensiveEvent)),
            pass_completion=_percentage(sum(1 for p in passes if p.completed), len(passes)),
        )
    return breakdown


def zone_breakdown(events: Iterable[MatchEvent]) -> Dict[PitchZone, ZoneStats]:
    """Split event counts by pitch third.

    Parameters
    ----------
    events : Iterable[MatchEvent]
        Recorded events in any order.

    Returns
    -------
    Dict[PitchZone, ZoneStats]
        Statistics for every zone, including zones with no events.
    """
    events = list(events)
    breakdown: Dict[PitchZone, ZoneStats] = {}
    for zone in PitchZone:
        tagged = [e for e in events if e.zone is zone]
        shots = [e for e in tagged if isinstance(e, ShotEvent)]
        passes = [e for e in tagged if isinstance(e, PassEvent)]
        breakdown[zone] = ZoneStats(
            total=len(tagged),
            shots=len(shots),
            passes=len(passes),
            pass_completion=_percentage(sum(1 for p in passes if p.completed), len(passes)),
            total_xg=sum(s.xg for s in shots),
        )
    return breakdown
