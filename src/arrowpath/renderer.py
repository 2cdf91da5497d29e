"""Partial rendering of rounded paths with optional arrowheads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from arrowpath.builder import RoundedPath
from arrowpath.common import Point2D, Vector2D
from arrowpath.context import DrawingContext
from arrowpath.segment import Segment


###############################################################################
# RenderResult
###############################################################################
@dataclass(frozen=True)
class RenderResult:
    """Outcome of rendering a sub-range of a path.

    Attributes:
        first_point: first point of the visible sub-range (None for an empty path)
        first_tangent: outward vector at the first point
        last_point: last point of the visible sub-range
        last_tangent: outward vector at the last point
        dash_offset: dash phase applied before stroking
        arrow_scale: arrowhead scale factor in [0, 1]
        drawn_segments: number of segments that issued drawing primitives
        arrowheads: number of arrowheads emitted
    """

    first_point: Optional[Point2D] = None
    first_tangent: Optional[Vector2D] = None
    last_point: Optional[Point2D] = None
    last_tangent: Optional[Vector2D] = None
    dash_offset: float = 0.0
    arrow_scale: float = 0.0
    drawn_segments: int = 0
    arrowheads: int = 0


###############################################################################
# ArrowheadDrawer
###############################################################################
class ArrowheadDrawer:
    """Draws triangular arrowheads at the ends of a stroked path."""

    @staticmethod
    def draw(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        context: DrawingContext,
        point: Point2D,
        tangent: Vector2D,
        scale: float,
        arrow_size: float,
        stroke_half_width: float,
    ) -> Tuple[Point2D, Point2D, Point2D]:
        """
        Append a closed arrowhead triangle to the current (fill) path of _context_.

        _tangent_ is the outward vector reported by the segment at _point_.
        The apex is moved by half the stroke width along the path direction,
        so that the arrowhead covers the end of the stroke.

        Args:
            context: the drawing surface
            point: path end point
            tangent: outward vector at _point_
            scale: scale factor in [0, 1]
            arrow_size: full size of the arrowhead
            stroke_half_width: half of the stroke width

        Returns:
            Tuple[Point2D, Point2D, Point2D]: apex and the two base corners
        """
        size = arrow_size * scale
        normal = (-tangent[1], tangent[0])
        apex = (
            point[0] - normal[0] * stroke_half_width * scale,
            point[1] - normal[1] * stroke_half_width * scale,
        )
        left = (apex[0] + (normal[0] + tangent[0]) * size, apex[1] + (normal[1] + tangent[1]) * size)
        right = (apex[0] + (normal[0] - tangent[0]) * size, apex[1] + (normal[1] - tangent[1]) * size)

        context.move_to(*apex)
        context.line_to(*left)
        context.line_to(*right)
        context.line_to(*apex)
        context.close_path()
        return apex, left, right


###############################################################################
# PathRenderer
###############################################################################
class PathRenderer:
    """Renders a contiguous sub-range of a RoundedPath."""

    # Arrowheads scaled down to this factor or below are not drawn
    ARROW_SCALE_EPS: float = 0.0001  # pylint: disable=invalid-name

    @staticmethod
    def arrow_scale(distance: float, arrow_size: float) -> float:
        """
        Scale factor for arrowheads on a visible path of length _distance_.

        Arrowheads shrink linearly once the visible path is shorter than _arrow_size_.
        A non-positive _arrow_size_ gives 0.
        """
        if arrow_size <= 0.0:
            return 0.0
        return min(max(distance, 0.0), arrow_size) / arrow_size

    @staticmethod
    def local_fraction(boundary: float, before: float, segment: Segment) -> float:
        """
        Position of the global length _boundary_ inside _segment_, clamped to [0, 1].

        Args:
            boundary: global length along the path
            before: global length at the start of _segment_
            segment: the segment

        Returns:
            float: local fraction in [0, 1]
        """
        length = segment.arc_length
        if length <= 0.0:
            return 0.0 if boundary <= before else 1.0
        return min(max((boundary - before) / length, 0.0), 1.0)

    @classmethod
    def render(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        cls,
        context: DrawingContext,
        path: RoundedPath,
        start_fraction: float = 0.0,
        end_fraction: float = 1.0,
        arrow_size: float = 0.0,
        start_arrow: bool = False,
        end_arrow: bool = False,
        stroke_width: float = 1.0,
    ) -> RenderResult:
        """
        Stroke the part of _path_ between two fractions of its total length.

        The fractions may be given in either order. Segments before the visible
        range only contribute their dash offset correction, segments after it are
        not visited. An empty range strokes nothing but still reports the point
        where it sits. Arrowhead directions are taken from segments with a positive length.

        Args:
            context: the drawing surface
            path: the path to render
            start_fraction: start of the visible range as fraction of the total length
            end_fraction: end of the visible range as fraction of the total length
            arrow_size: full size of the arrowheads
            start_arrow: draw an arrowhead at the first visible point
            end_arrow: draw an arrowhead at the last visible point
            stroke_width: stroke width, used to place the arrowheads

        Returns:
            RenderResult: end points, dash offset and arrowhead information
        """
        segments, total = path
        start = start_fraction * total
        end = end_fraction * total
        if start > end:
            start, end = end, start

        distance = end - start
        scale = cls.arrow_scale(distance, arrow_size)
        visible = distance > 0.0

        offset = start
        length = 0.0
        drawn = 0
        first_point = first_tangent = last_point = last_tangent = None
        tangent_has_length = False

        context.begin_path()
        for segment in segments:
            before = length
            length += segment.arc_length
            local_start = cls.local_fraction(start, before, segment)
            local_end = cls.local_fraction(end, before, segment)

            offset -= segment.get_offset(local_start, context.dash_offset_correction)
            if length < start:
                continue

            if visible:
                span = segment.draw(context, local_start, local_end, first_point is None)
                drawn += 1
            else:
                span = segment.span(local_start, local_end)

            # zero-length segments give points but no direction; their tangents
            # only stand in until a segment with length has been visited
            has_length = segment.arc_length > 0.0
            if first_point is None:
                first_point = span.first_point
            if first_tangent is None or (has_length and not tangent_has_length):
                first_tangent = span.first_tangent
            if has_length or not tangent_has_length:
                last_tangent = span.last_tangent
            last_point = span.last_point
            tangent_has_length = tangent_has_length or has_length

            if length > end:
                break

        arrowheads = 0
        if visible:
            context.set_dash_offset(offset)
            context.stroke()
            context.begin_path()
            if end_arrow and last_point is not None and scale > cls.ARROW_SCALE_EPS:
                ArrowheadDrawer.draw(context, last_point, last_tangent, scale, arrow_size, stroke_width / 2)
                arrowheads += 1
            if start_arrow and first_point is not None and scale > cls.ARROW_SCALE_EPS:
                ArrowheadDrawer.draw(context, first_point, first_tangent, scale, arrow_size, stroke_width / 2)
                arrowheads += 1
            context.fill()

        return RenderResult(
            first_point=first_point,
            first_tangent=first_tangent,
            last_point=last_point,
            last_tangent=last_tangent,
            dash_offset=offset,
            arrow_scale=scale,
            drawn_segments=drawn,
            arrowheads=arrowheads,
        )
