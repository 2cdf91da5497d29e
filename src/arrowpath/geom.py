"""Handling geometries"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from arrowpath.common import Point2D, Vector2D


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling.

    All angles are given in radians. Points live in screen coordinates, i.e. the
    y axis points down. Methods named ``screen_*`` measure angles with the y axis
    flipped back, so that a positive angle turns counter-clockwise on screen.
    """

    @staticmethod
    def screen_angle(vector: Sequence[float]) -> float:
        """
        Angle of the given vector measured with a flipped y axis.

        Args:
            vector (Sequence[float]): 2D vector (dx, dy) in screen coordinates

        Returns:
            float: angle in range (-pi, pi]
        """
        return math.atan2(-vector[1], vector[0])

    @staticmethod
    def screen_offset(point: Sequence[float], distance: float, angle: float) -> Point2D:
        """
        Move _point_ by _distance_ along the direction given by the screen angle _angle_.

        Args:
            point (Sequence[float]): 2D start point (x, y)
            distance (float): distance to move
            angle (float): direction as returned by screen_angle()

        Returns:
            Tuple[float, float]: the moved point
        """
        return (
            float(point[0] + distance * math.cos(angle)),
            float(point[1] - distance * math.sin(angle)),
        )

    @staticmethod
    def turn_angle(to_prev: Sequence[float], to_next: Sequence[float]) -> float:
        """
        Signed angle between the two vectors leaving a corner.

        _to_prev_ points from the corner back to the previous vertex,
        _to_next_ points from the corner to the next vertex.
        A straight pass-through gives +-pi, a full reversal gives 0.

        Returns:
            float: angle in range (-pi, pi]
        """
        cross = to_next[1] * to_prev[0] - to_next[0] * to_prev[1]
        dot = to_next[0] * to_prev[0] + to_next[1] * to_prev[1]
        return math.atan2(cross, dot)

    @staticmethod
    def interpolate(start: Sequence[float], vector: Sequence[float], fraction: float) -> Point2D:
        """Point at _fraction_ along _vector_ starting at _start_."""
        return (float(start[0] + vector[0] * fraction), float(start[1] + vector[1] * fraction))

    @staticmethod
    def negate(vector: Vector2D) -> Vector2D:
        """Return the reversed vector."""
        return (-vector[0], -vector[1])


###############################################################################
# Box
###############################################################################
@dataclass
class Box:
    """
    Represents an axis aligned rectangular box.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    _xmin: float
    _ymin: float
    _xmax: float
    _ymax: float

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        """Initialize Box with coordinates.

        Args:
            xmin: The minimum x-coordinate
            ymin: The minimum y-coordinate
            xmax: The maximum x-coordinate
            ymax: The maximum y-coordinate
        """
        self._xmin = xmin
        self._ymin = ymin
        self._xmax = xmax
        self._ymax = ymax

        # Normalize coordinates to ensure xmin <= xmax and ymin <= ymax
        if self._xmin > self._xmax:
            self._xmin, self._xmax = self._xmax, self._xmin
        if self._ymin > self._ymax:
            self._ymin, self._ymax = self._ymax, self._ymin

    @classmethod
    def from_points(cls, points: Union[Sequence[Tuple[float, float]], NDArray[np.float64]]) -> Box:
        """
        Create the bounding box of the given points.

        An empty point set results in a degenerated box at the origin.

        Args:
            points: a sequence of (x, y) or an array of shape (n, 2)

        Returns:
            Box: the smallest box containing all points
        """
        arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        if arr.shape[0] == 0:
            return cls(0.0, 0.0, 0.0, 0.0)
        xmin, ymin = arr.min(axis=0)
        xmax, ymax = arr.max(axis=0)
        return cls(float(xmin), float(ymin), float(xmax), float(ymax))

    @property
    def xmin(self) -> float:
        """float: The minimum x-coordinate."""
        return self._xmin

    @property
    def ymin(self) -> float:
        """float: The minimum y-coordinate."""
        return self._ymin

    @property
    def xmax(self) -> float:
        """float: The maximum x-coordinate."""
        return self._xmax

    @property
    def ymax(self) -> float:
        """float: The maximum y-coordinate."""
        return self._ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""

        return self._xmax - self._xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""

        return self._ymax - self._ymin

    def expand(self, margin: float) -> Box:
        """Return a new box grown by _margin_ on every side."""
        return Box(self._xmin - margin, self._ymin - margin, self._xmax + margin, self._ymax + margin)
