"""Arrow shape: a rounded polyline drawn partially with optional arrowheads."""

from __future__ import annotations

import logging
import numbers
from typing import Any, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from arrowpath.builder import EMPTY_PATH, RoundedPath, RoundedPathBuilder
from arrowpath.common import ArrowPathError
from arrowpath.context import DrawingContext
from arrowpath.geom import Box
from arrowpath.renderer import PathRenderer, RenderResult

logger = logging.getLogger(__name__)


def _check_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


def _check_non_negative(name: str, value: Any) -> float:
    number = _check_number(name, value)
    if number < 0.0:
        raise ValueError(f"{name} must not be negative, got {number}")
    return number


###############################################################################
# Arrow
###############################################################################
class Arrow:
    """
    A polyline with rounded corners, drawn between two fractions of its length.

    The rounded path is derived from ``points`` and ``radius`` and cached.
    Only these two attributes invalidate the cache; ``start``, ``end``,
    ``arrow_size``, ``start_arrow``, ``end_arrow`` and ``stroke_width`` just
    change what part of the cached path gets painted and how.
    The cache is rebuilt lazily on the next paint (or access of ``path``).

    An Arrow is not thread-safe: callers must not paint or modify the same
    instance from several threads at once.

    Attributes:
        points (List[float]): flat vertex coordinates [x0, y0, x1, y1, ...]
        radius (float): corner radius
        start (float): start of the visible part as fraction of the total length
        end (float): end of the visible part as fraction of the total length
        arrow_size (float): size of the arrowheads
        start_arrow (bool): draw an arrowhead at the start of the visible part
        end_arrow (bool): draw an arrowhead at the end of the visible part
        stroke_width (float): stroke width of the host shape
    """

    def __init__(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        points: Optional[Sequence[float]] = None,
        radius: float = 0.0,
        start: float = 0.0,
        end: float = 1.0,
        arrow_size: float = 0.0,
        start_arrow: bool = False,
        end_arrow: bool = False,
        stroke_width: float = 1.0,
    ):
        self._points: List[float] = []
        self._radius = 0.0
        self.points = [] if points is None else points
        self.radius = radius
        self.start = start
        self.end = end
        self.arrow_size = arrow_size
        self.start_arrow = start_arrow
        self.end_arrow = end_arrow
        self.stroke_width = stroke_width

        self._path: RoundedPath = EMPTY_PATH
        self._dirty = True

    ###########################################################################
    # Attributes invalidating the path
    ###########################################################################

    @property
    def points(self) -> List[float]:
        """Flat vertex coordinates [x0, y0, x1, y1, ...]."""
        return list(self._points)

    @points.setter
    def points(self, value: Sequence[float]) -> None:
        if isinstance(value, np.ndarray):
            value = value.ravel().tolist()
        self._points = [_check_number("points", coordinate) for coordinate in value]
        self.mark_dirty()

    @property
    def radius(self) -> float:
        """Corner radius shared by all interior vertices."""
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = _check_number("radius", value)
        self.mark_dirty()

    def mark_dirty(self) -> None:
        """Force a rebuild of the path on the next paint."""
        self._dirty = True

    @property
    def dirty(self) -> bool:
        """True if the cached path does not reflect points and radius."""
        return self._dirty

    ###########################################################################
    # Attributes selecting the painted part
    ###########################################################################

    @property
    def start(self) -> float:
        """Start fraction of the visible part."""
        return self._start

    @start.setter
    def start(self, value: float) -> None:
        self._start = _check_number("start", value)

    @property
    def end(self) -> float:
        """End fraction of the visible part."""
        return self._end

    @end.setter
    def end(self, value: float) -> None:
        self._end = _check_number("end", value)

    @property
    def arrow_size(self) -> float:
        """Size of the arrowheads."""
        return self._arrow_size

    @arrow_size.setter
    def arrow_size(self, value: float) -> None:
        self._arrow_size = _check_non_negative("arrow_size", value)

    @property
    def start_arrow(self) -> bool:
        """Draw an arrowhead at the start of the visible part."""
        return self._start_arrow

    @start_arrow.setter
    def start_arrow(self, value: bool) -> None:
        self._start_arrow = bool(value)

    @property
    def end_arrow(self) -> bool:
        """Draw an arrowhead at the end of the visible part."""
        return self._end_arrow

    @end_arrow.setter
    def end_arrow(self, value: bool) -> None:
        self._end_arrow = bool(value)

    @property
    def stroke_width(self) -> float:
        """Stroke width, used to set the arrowheads flush with the stroke end."""
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, value: float) -> None:
        self._stroke_width = _check_non_negative("stroke_width", value)

    ###########################################################################
    # Derived data
    ###########################################################################

    @property
    def path(self) -> RoundedPath:
        """
        The rounded path, rebuilt first if points or radius changed.

        Raises:
            ArrowPathError: if points or radius are malformed; the arrow stays dirty
        """
        if self._dirty:
            self._path = RoundedPathBuilder.build(self._points, self._radius)
            self._dirty = False
            logger.debug("arrow path rebuilt with %d segments", len(self._path.segments))
        return self._path

    @property
    def arc_length(self) -> float:
        """Total arc length of the rounded path."""
        return self.path.arc_length

    @property
    def vertices(self) -> NDArray[np.float64]:
        """Complete coordinate pairs of ``points`` as array of shape (n, 2)."""
        count = len(self._points) - len(self._points) % 2
        return np.asarray(self._points[:count], dtype=np.float64).reshape(-1, 2)

    def bounding_box(self) -> Box:
        """Bounding box of all vertices."""
        return Box.from_points(self.vertices)

    def width(self) -> float:
        """Extent of the vertices in x-direction, 0 without vertices."""
        return self.bounding_box().width

    def height(self) -> float:
        """Extent of the vertices in y-direction, 0 without vertices."""
        return self.bounding_box().height

    ###########################################################################
    # Painting
    ###########################################################################

    def paint(self, context: DrawingContext) -> RenderResult:
        """
        Paint the visible part of the arrow onto _context_.

        An arrow with malformed points or radius paints nothing and stays dirty
        until corrected values are set.

        Args:
            context: the drawing surface

        Returns:
            RenderResult: what has been painted
        """
        try:
            path = self.path
        except ArrowPathError as e:
            logger.warning("arrow not painted: %s", e)
            return RenderResult()

        return PathRenderer.render(
            context,
            path,
            self._start,
            self._end,
            self._arrow_size,
            self._start_arrow,
            self._end_arrow,
            self._stroke_width,
        )

    ###########################################################################
    # Serialization
    ###########################################################################

    def to_dict(self) -> dict:
        """Convert the Arrow attributes to a dictionary."""
        return {
            "points": self.points,
            "radius": self._radius,
            "start": self._start,
            "end": self._end,
            "arrow_size": self._arrow_size,
            "start_arrow": self._start_arrow,
            "end_arrow": self._end_arrow,
            "stroke_width": self._stroke_width,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Arrow:
        """Create an Arrow from a dictionary as produced by to_dict()."""
        return cls(
            points=data.get("points", []),
            radius=data.get("radius", 0.0),
            start=data.get("start", 0.0),
            end=data.get("end", 1.0),
            arrow_size=data.get("arrow_size", 0.0),
            start_arrow=data.get("start_arrow", False),
            end_arrow=data.get("end_arrow", False),
            stroke_width=data.get("stroke_width", 1.0),
        )

    def __str__(self):
        """Returns a string representation of the Arrow instance."""
        return (
            f"Arrow(points={self._points}, radius={self._radius}, "
            f"start={self._start}, end={self._end}, arrow_size={self._arrow_size})"
        )
