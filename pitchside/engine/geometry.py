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
"""Geometry primitives and the pointer-to-pitch coordinate mapper.

Recorded events live in a normalised percentage grid where ``(0, 0)`` is the
top-left corner of the capture surface and ``(100, 100)`` the bottom-right.
The mapper converts raw pointer positions (screen pixels) into that grid using
the bounding rectangle of the surface at the moment of the click.
"""
import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .config import ENGINE_CONFIG


@dataclass(frozen=True)
class Vector2D:
    """Two-dimensional point or offset in pitch percentage units.

    Parameters
    ----------
    x : float
        Horizontal component, ``0`` at the left edge of the surface.
    y : float
        Vertical component, ``0`` at the top edge of the surface.
    """

    x: float
    y: float

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        """Return the vector difference ``self - other``."""
        return Vector2D(self.x - other.x, self.y - other.y)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector.

        Returns
        -------
        float
            Scalar magnitude in percentage units.
        """
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vector2D") -> float:
        """Return the straight-line distance between ``self`` and ``other``.

        Parameters
        ----------
        other : Vector2D
            Point whose separation from ``self`` should be measured.

        Returns
        -------
        float
            Euclidean distance between the two points.
        """
        return (other - self).magnitude()

    def to_tuple(self) -> Tuple[float, float]:
        """Return the components as an ``(x, y)`` tuple.

        Returns
        -------
        Tuple[float, float]
            The ``x`` and ``y`` components.
        """
        return self.x, self.y


def goal_point() -> Vector2D:
    """Return the attacking goal reference point from configuration.

    Returns
    -------
    Vector2D
        Centre of the attacking goal line, ``(100, 50)`` by default.
    """
    pitch = ENGINE_CONFIG.pitch
    return Vector2D(pitch.goal_x, pitch.goal_y)


@dataclass(frozen=True)
class SurfaceRect:
    """Bounding rectangle of the capture surface in screen pixels.

    Parameters
    ----------
    left : float
        Screen x coordinate of the left edge.
    top : float
        Screen y coordinate of the top edge.
    width : float
        Width of the surface in pixels.
    height : float
        Height of the surface in pixels.
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        """Screen x coordinate of the right edge."""
        return self.left + self.width

    @property
    def bottom(self) -> float:
        """Screen y coordinate of the bottom edge."""
        return self.top + self.height

    def is_usable(self) -> bool:
        """Return whether the rectangle has a positive area.

        Returns
        -------
        bool
            ``True`` when both width and height are positive.
        """
        return self.width > 0 and self.height > 0

    def contains(self, px: float, py: float) -> bool:
        """Return whether a screen position lies on the surface, edges included.

        Parameters
        ----------
        px : float
            Screen x coordinate.
        py : float
            Screen y coordinate.

        Returns
        -------
        bool
            ``True`` when the position is inside the rectangle.
        """
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    @classmethod
    def from_rect(cls, rect: Any) -> "SurfaceRect":
        """Build a ``SurfaceRect`` from any object exposing rectangle attributes.

        Parameters
        ----------
        rect : Any
            Object with ``left``, ``top``, ``width`` and ``height`` attributes,
            for example a ``pygame.Rect``.

        Returns
        -------
        SurfaceRect
            Immutable copy of the rectangle geometry.
        """
        return cls(float(rect.left), float(rect.top), float(rect.width), float(rect.height))


class CoordinateMapper:
    """Translate pointer positions into normalised pitch coordinates.

    The mapper is a pure transform. It never raises for unusable input; clicks
    that cannot be placed on the pitch simply produce no coordinates.

    Parameters
    ----------
    scale : float | None, optional
        Upper bound of the pitch axes; defaults to ``ENGINE_CONFIG.pitch.scale``.
    """

    def __init__(self, scale: Optional[float] = None) -> None:
        self.scale = ENGINE_CONFIG.pitch.scale if scale is None else scale

    def map_click(
        self,
        pointer: Tuple[float, float],
        rect: Optional[SurfaceRect],
        recording_enabled: bool = True,
    ) -> Optional[Vector2D]:
        """Map a pointer position to pitch coordinates.

        Parameters
        ----------
        pointer : Tuple[float, float]
            Screen position of the click in pixels.
        rect : SurfaceRect | None
            Bounding rectangle of the capture surface, ``None`` when unavailable.
        recording_enabled : bool
            Whether the capture surface currently accepts input.

        Returns
        -------
        Vector2D | None
            Pitch coordinates in ``[0, scale]``, or ``None`` when recording is
            disabled, the rectangle is missing or degenerate, or the pointer
            falls outside the surface.
        """
        if not recording_enabled or rect is None or not rect.is_usable():
            return None

        px, py = pointer
        if not rect.contains(px, py):
            return None

        x = (px - rect.left) / rect.width * self.scale
        y = (py - rect.top) / rect.height * self.scale
        return Vector2D(x, y)
