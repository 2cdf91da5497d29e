"""Line and circle segments of a rounded path with an arc-length aware interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import NamedTuple, Optional, Sequence

from arrowpath.common import TAU, Point2D, Vector2D
from arrowpath.context import DrawingContext
from arrowpath.geom import GeomMath


###############################################################################
# SegmentSpan
###############################################################################
class SegmentSpan(NamedTuple):
    """Geometry at both ends of a drawn part of a segment.

    The vectors are unit vectors perpendicular to the path, oriented so that
    an arrowhead built from them points away from the drawn part.

    Attributes:
        first_point: point at the local start
        first_tangent: outward vector at the local start
        last_point: point at the local end
        last_tangent: outward vector at the local end
    """

    first_point: Point2D
    first_tangent: Vector2D
    last_point: Point2D
    last_tangent: Vector2D


###############################################################################
# Segment
###############################################################################
class Segment(ABC):
    """A piece of path geometry addressed by local fractions in [0, 1]."""

    @property
    @abstractmethod
    def arc_length(self) -> float:
        """float: Length of the segment measured along its curve."""

    @abstractmethod
    def span(self, start: float = 0.0, end: float = 1.0) -> SegmentSpan:
        """Return the end geometry of the part between the local fractions _start_ and _end_.

        Nothing is drawn.
        """

    @abstractmethod
    def draw(self, context: DrawingContext, start: float = 0.0, end: float = 1.0, move: bool = False) -> SegmentSpan:
        """Draw the part between the local fractions _start_ and _end_ onto _context_.

        Args:
            context: the drawing surface
            start: local start fraction in [0, 1]
            end: local end fraction in [0, 1]
            move: True if this is the first drawn segment and a new sub-path has to be started

        Returns:
            SegmentSpan: the geometry at both ends of the drawn part
        """

    def get_offset(self, start: float, correction: Optional[float] = None) -> float:  # pylint: disable=unused-argument
        """Dash offset correction contributed by this segment when drawing starts at _start_.

        _correction_ is the backend specific arc factor, None selects the segment's default.
        """
        return 0.0


###############################################################################
# LineSegment
###############################################################################
class LineSegment(Segment):
    """Straight segment between two points."""

    def __init__(self, start: Sequence[float], end: Sequence[float]):
        self._start: Point2D = (float(start[0]), float(start[1]))
        self._end: Point2D = (float(end[0]), float(end[1]))
        self._vector: Vector2D = (self._end[0] - self._start[0], self._end[1] - self._start[1])
        self._length = math.hypot(*self._vector)
        if self._length > 0.0:
            self._tangent: Vector2D = (-self._vector[1] / self._length, self._vector[0] / self._length)
        else:
            # zero-length line: no direction at all
            self._tangent = (0.0, 0.0)

    @property
    def start(self) -> Point2D:
        """Start point of the line."""
        return self._start

    @property
    def end(self) -> Point2D:
        """End point of the line."""
        return self._end

    @property
    def vector(self) -> Vector2D:
        """Vector from start to end."""
        return self._vector

    @property
    def tangent(self) -> Vector2D:
        """Unit normal of the line direction, used as outward vector at the line's end."""
        return self._tangent

    @property
    def arc_length(self) -> float:
        return self._length

    def span(self, start: float = 0.0, end: float = 1.0) -> SegmentSpan:
        return SegmentSpan(
            GeomMath.interpolate(self._start, self._vector, start),
            GeomMath.negate(self._tangent),
            GeomMath.interpolate(self._start, self._vector, end),
            self._tangent,
        )

    def draw(self, context: DrawingContext, start: float = 0.0, end: float = 1.0, move: bool = False) -> SegmentSpan:
        span = self.span(start, end)
        if move:
            context.move_to(*span.first_point)
        context.line_to(*span.last_point)
        return span

    def __repr__(self) -> str:
        return f"LineSegment(start={self._start}, end={self._end}, arc_length={self._length:g})"


###############################################################################
# CircleSegment
###############################################################################
class CircleSegment(Segment):
    """Circular arc rounding a corner of the path.

    _delta_angle_ is the signed angle produced by the path builder
    (turn angle - pi). For clockwise arcs the angle actually swept is
    _delta_angle_ + 2*pi, which is what the arc length and the drawing use.
    """

    # Empirical factor aligning the dash phase behind clockwise arcs with a canvas stroking primitive.
    # Drawing contexts override it through DrawingContext.dash_offset_correction.
    DASH_OFFSET_CORRECTION: float = 1.045  # pylint: disable=invalid-name

    def __init__(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        center: Sequence[float],
        radius: float,
        start_angle: float,
        delta_angle: float,
        counter_clockwise: bool,
    ):
        self._center: Point2D = (float(center[0]), float(center[1]))
        self._radius = float(radius)
        self._start_angle = float(start_angle)
        self._delta_angle = float(delta_angle)
        self._counter_clockwise = bool(counter_clockwise)
        self._sweep = self._delta_angle if self._counter_clockwise else self._delta_angle + TAU
        self._length = abs(self._sweep * self._radius)

    @property
    def center(self) -> Point2D:
        """Center of the circle."""
        return self._center

    @property
    def radius(self) -> float:
        """Radius of the circle."""
        return self._radius

    @property
    def start_angle(self) -> float:
        """Canvas angle of the arc's start point seen from the center."""
        return self._start_angle

    @property
    def delta_angle(self) -> float:
        """Signed angle as given by the path builder."""
        return self._delta_angle

    @property
    def sweep(self) -> float:
        """Signed angle swept when drawing the whole arc (negative = counter-clockwise)."""
        return self._sweep

    @property
    def counter_clockwise(self) -> bool:
        """True if the arc is drawn toward decreasing canvas angles."""
        return self._counter_clockwise

    @property
    def arc_length(self) -> float:
        return self._length

    def _angles(self, start: float, end: float) -> tuple[float, float]:
        return self._start_angle + self._sweep * start, self._start_angle + self._sweep * end

    def span(self, start: float = 0.0, end: float = 1.0) -> SegmentSpan:
        start_angle, end_angle = self._angles(start, end)
        start_vector = (math.cos(start_angle), math.sin(start_angle))
        end_vector = (math.cos(end_angle), math.sin(end_angle))
        cx, cy = self._center
        return SegmentSpan(
            (cx + self._radius * start_vector[0], cy + self._radius * start_vector[1]),
            GeomMath.negate(start_vector) if self._counter_clockwise else start_vector,
            (cx + self._radius * end_vector[0], cy + self._radius * end_vector[1]),
            end_vector if self._counter_clockwise else GeomMath.negate(end_vector),
        )

    def draw(self, context: DrawingContext, start: float = 0.0, end: float = 1.0, move: bool = False) -> SegmentSpan:
        # arcs always continue the current sub-path, so _move_ is not used
        start_angle, end_angle = self._angles(start, end)
        context.arc(
            self._center[0],
            self._center[1],
            self._radius,
            start_angle,
            end_angle,
            self._counter_clockwise,
        )
        return self.span(start, end)

    def get_offset(self, start: float, correction: Optional[float] = None) -> float:
        if self._counter_clockwise:
            return 0.0
        if correction is None:
            correction = self.DASH_OFFSET_CORRECTION
        return -start * correction * self._delta_angle * self._radius / 2

    def __repr__(self) -> str:
        return (
            f"CircleSegment(center={self._center}, radius={self._radius:g}, "
            f"start_angle={self._start_angle:g}, delta_angle={self._delta_angle:g}, "
            f"counter_clockwise={self._counter_clockwise})"
        )
