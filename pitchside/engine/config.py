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
"""Central configuration for recorder tuning parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(slots=True)
class PitchConfig:
    """Normalised pitch coordinate space used by every recorded event.

    Parameters
    ----------
    scale : float, default=100.0
        Upper bound of both axes; coordinates are percentages of the surface.
    goal_x : float, default=100.0
        X coordinate of the attacking goal reference point.
    goal_y : float, default=50.0
        Y coordinate of the attacking goal reference point.
    """

    scale: float = 100.0
    goal_x: float = 100.0
    goal_y: float = 50.0


@dataclass(slots=True)
class MetricConfig:
    """Coefficients for the expected goals and expected assists heuristics.

    Parameters
    ----------
    xg_distance_divisor : float, default=100.0
        Distance at which the geometric xG component reaches zero.
    head_multiplier : float, default=0.7
        Scaling applied to headed shots.
    other_multiplier : float, default=0.5
        Scaling applied to shots taken with any other body part.
    goal_floor : float, default=0.3
        Minimum xG reported for a shot that was scored.
    xg_max : float, default=1.0
        Upper clamp for xG.
    xa_distance_divisor : float, default=80.0
        Distance from goal at which a pass end point contributes no xA.
    xa_max : float, default=0.8
        Upper clamp for xA.
    """

    xg_distance_divisor: float = 100.0
    head_multiplier: float = 0.7
    other_multiplier: float = 0.5
    goal_floor: float = 0.3
    xg_max: float = 1.0
    xa_distance_divisor: float = 80.0
    xa_max: float = 0.8


@dataclass(slots=True)
class HistoryConfig:
    """Bounds for the undo/redo snapshot history.

    Parameters
    ----------
    max_snapshots : int, default=50
        Maximum number of event-list snapshots retained, including the initial empty one.
    """

    max_snapshots: int = 50


@dataclass(slots=True)
class LoggingConfig:
    """Settings for the structured session log.

    Parameters
    ----------
    enabled : bool, default=True
        Whether a recorder without an explicit debugger creates one.
    output_dir : str, default="debug_logs"
        Directory where session log files are written.
    recent_buffer : int, default=200
        Number of recent log lines kept in memory for live displays.
    """

    enabled: bool = True
    output_dir: str = "debug_logs"
    recent_buffer: int = 200


@dataclass(slots=True)
class WindowConfig:
    """Pygame window settings for the interactive capture surface.

    Parameters
    ----------
    screen_size : Tuple[int, int], default=(1000, 500)
        Initial window size in pixels; the pitch keeps a 2:1 aspect ratio.
    margin : int, default=20
        Gap in pixels between the window edge and the pitch surface.
    fps : int, default=30
        Target frame rate for the event loop.
    marker_radius : int, default=7
        Radius in pixels for event markers.
    """

    screen_size: Tuple[int, int] = (1000, 500)
    margin: int = 20
    fps: int = 30
    marker_radius: int = 7


@dataclass(slots=True)
class EngineConfig:
    """Top-level container for all recorder configuration groups.

    Parameters
    ----------
    pitch : PitchConfig, default=PitchConfig()
        Coordinate space and goal reference point.
    metrics : MetricConfig, default=MetricConfig()
        xG/xA heuristic coefficients.
    history : HistoryConfig, default=HistoryConfig()
        Undo/redo history bounds.
    logging : LoggingConfig, default=LoggingConfig()
        Session log settings.
    window : WindowConfig, default=WindowConfig()
        Interactive window settings.
    """

    pitch: PitchConfig = field(default_factory=PitchConfig)
    metrics: MetricConfig = field(default_factory=MetricConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    window: WindowConfig = field(default_factory=WindowConfig)


ENGINE_CONFIG = EngineConfig()
"""Singleton-style access to the recorder configuration."""
