"""Building rounded paths from polylines by tangent-circle corner rounding."""

from __future__ import annotations

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from arrowpath.common import InvalidRadiusError, MalformedVerticesError, Point2D
from arrowpath.geom import GeomMath
from arrowpath.segment import CircleSegment, LineSegment, Segment

logger = logging.getLogger(__name__)

VertexInput = Union[Sequence[float], Sequence[Tuple[float, float]], NDArray[np.float64]]


###############################################################################
# RoundedPath
###############################################################################
class RoundedPath(NamedTuple):
    """Ordered segments of a rounded path together with their total arc length.

    Unpacks as ``segments, arc_length = path``.
    """

    segments: Tuple[Segment, ...]
    arc_length: float

    @property
    def is_empty(self) -> bool:
        """True if the path has no segments."""
        return not self.segments


EMPTY_PATH = RoundedPath((), 0.0)


###############################################################################
# RoundedPathBuilder
###############################################################################
class RoundedPathBuilder:
    """Collection of static methods to turn a polyline into a RoundedPath."""

    # Turn angles within this distance of 0 (reversal) or +-pi (straight) are snapped
    ANGLE_EPS: float = 1.0e-9  # pylint: disable=invalid-name

    @staticmethod
    def normalize_vertices(vertices: Optional[VertexInput]) -> NDArray[np.float64]:
        """
        Convert vertex input into an array of shape (n, 2).

        Accepts a flat coordinate sequence [x0, y0, x1, y1, ...] or a sequence
        (or array) of (x, y) pairs. None is treated as no vertices.

        Args:
            vertices: the vertex data

        Returns:
            NDArray[np.float64]: the vertices, shape (n, 2)

        Raises:
            MalformedVerticesError: on odd-length flat data, wrong shapes or non-finite coordinates
        """
        if vertices is None:
            return np.empty((0, 2), dtype=np.float64)
        try:
            arr = np.asarray(vertices, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise MalformedVerticesError(f"vertices are not numeric coordinates: {e}") from e

        if arr.ndim == 1:
            if arr.shape[0] % 2:
                raise MalformedVerticesError(f"flat coordinate list must have even length, got {arr.shape[0]}")
            arr = arr.reshape(-1, 2)
        elif arr.ndim != 2 or arr.shape[1] != 2:
            raise MalformedVerticesError(f"vertices must have shape (n, 2), got {arr.shape}")

        if not np.all(np.isfinite(arr)):
            raise MalformedVerticesError("vertices must have finite coordinates")
        return arr

    @staticmethod
    def validate_radius(radius: float) -> float:
        """Return _radius_ as float.

        Raises:
            InvalidRadiusError: if the radius is negative or not finite
        """
        value = float(radius)
        if not math.isfinite(value) or value < 0.0:
            raise InvalidRadiusError(f"radius must be a finite non-negative number, got {radius}")
        return value

    @classmethod
    def build(cls, vertices: Optional[VertexInput], radius: float = 0.0) -> RoundedPath:
        """
        Build the rounded path through _vertices_.

        Each interior vertex is replaced by a circular arc of _radius_ tangent to
        both adjacent edges. The result alternates lines and arcs:
        Line, [Circle, Line] * (n - 2). With fewer than 2 vertices the path is empty.

        Args:
            vertices: flat coordinates or (x, y) pairs, in traversal order
            radius: corner radius shared by all interior vertices

        Returns:
            RoundedPath: the segments and their total arc length

        Raises:
            MalformedVerticesError: if the vertex data is malformed
            InvalidRadiusError: if the radius is negative or not finite
        """
        points = cls.normalize_vertices(vertices)
        radius = cls.validate_radius(radius)
        if points.shape[0] < 2:
            return EMPTY_PATH

        segments: List[Segment] = []
        exit_point: Point2D = (float(points[0, 0]), float(points[0, 1]))
        for index in range(1, points.shape[0] - 1):
            corner_segments, exit_point = cls.round_corner(
                exit_point, points[index - 1], points[index], points[index + 1], radius, index
            )
            segments.extend(corner_segments)
        segments.append(LineSegment(exit_point, points[-1]))

        arc_length = 0.0
        for segment in segments:
            arc_length += segment.arc_length

        logger.debug("built rounded path: %d segments, arc length %g", len(segments), arc_length)
        return RoundedPath(tuple(segments), arc_length)

    @classmethod
    def round_corner(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        cls,
        entry_point: Point2D,
        prev: NDArray[np.float64],
        corner: NDArray[np.float64],
        following: NDArray[np.float64],
        radius: float,
        index: int = 0,
    ) -> Tuple[List[Segment], Point2D]:
        """
        Round a single corner.

        Args:
            entry_point: where the incoming line starts (exit point of the previous corner)
            prev: previous vertex
            corner: the vertex to round
            following: next vertex
            radius: corner radius
            index: vertex index, only used for logging

        Returns:
            Tuple[List[Segment], Point2D]: the incoming line and the arc,
                and the point where the outgoing line has to start
        """
        to_prev = prev - corner
        to_next = following - corner
        turn = GeomMath.turn_angle(to_prev, to_next)
        corner_point: Point2D = (float(corner[0]), float(corner[1]))

        # a reversal or a zero-length edge has no tangent circle
        if abs(turn) <= cls.ANGLE_EPS or not to_prev.any() or not to_next.any():
            logger.warning(
                "vertex %d at (%g, %g) has no tangent circle, leaving it unrounded",
                index,
                corner_point[0],
                corner_point[1],
            )
            return [LineSegment(entry_point, corner_point)], corner_point

        # straight pass-through: -pi and pi describe the same corner, keep the
        # counter-clockwise form so the zero-length arc has no winding of its own
        if abs(abs(turn) - math.pi) <= cls.ANGLE_EPS:
            turn = math.pi

        start_angle = GeomMath.screen_angle(to_prev)
        end_angle = GeomMath.screen_angle(to_next)
        half_turn = turn / 2

        tangent_distance = radius / abs(math.tan(half_turn))
        center_distance = radius / abs(math.sin(half_turn))

        arc_start_point = GeomMath.screen_offset(corner, tangent_distance, start_angle)
        arc_end_point = GeomMath.screen_offset(corner, tangent_distance, end_angle)
        center = GeomMath.screen_offset(corner, center_distance, start_angle - half_turn)
        arc_start_angle = math.atan2(arc_start_point[1] - center[1], arc_start_point[0] - center[0])

        circle = CircleSegment(center, radius, arc_start_angle, turn - math.pi, turn > 0)
        return [LineSegment(entry_point, arc_start_point), circle], arc_end_point
