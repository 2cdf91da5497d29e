"""Test module for arrowpath.segment

The tests are run using pytest.
"""

import math

import pytest

from arrowpath.segment import CircleSegment, LineSegment, SegmentSpan

###############################################################################
# LineSegment Tests
###############################################################################


class TestLineSegment:
    """Test class for LineSegment functionality."""

    def test_arc_length_is_euclidean_distance(self):
        """Test that the arc length of a line is the distance of its endpoints."""
        line = LineSegment((1.0, 2.0), (4.0, 6.0))

        assert line.arc_length == pytest.approx(5.0)
        assert line.vector == (3.0, 4.0)

    def test_tangent_is_unit_normal(self):
        """Test that the tangent is a unit vector perpendicular to the line."""
        line = LineSegment((0.0, 0.0), (3.0, 4.0))
        tx, ty = line.tangent

        assert math.hypot(tx, ty) == pytest.approx(1.0)
        assert tx * 3.0 + ty * 4.0 == pytest.approx(0.0)

    def test_span_interpolates_endpoints(self):
        """Test the geometry reported for a part of the line."""
        line = LineSegment((0.0, 0.0), (10.0, 0.0))

        span = line.span(0.25, 0.75)

        assert isinstance(span, SegmentSpan)
        assert span.first_point == (2.5, 0.0)
        assert span.last_point == (7.5, 0.0)
        assert span.last_tangent == pytest.approx((0.0, 1.0))
        assert span.first_tangent == pytest.approx((0.0, -1.0))

    def test_draw_with_move(self, recorder):
        """Test that the first drawn segment starts a new sub-path."""
        line = LineSegment((0.0, 0.0), (10.0, 0.0))

        first, first_tangent, last, last_tangent = line.draw(recorder, 0.0, 0.5, True)

        assert recorder.calls == [("move_to", (0.0, 0.0)), ("line_to", (5.0, 0.0))]
        assert first == (0.0, 0.0)
        assert last == (5.0, 0.0)
        assert first_tangent == pytest.approx((-last_tangent[0], -last_tangent[1]))

    def test_draw_without_move(self, recorder):
        """Test that a continuing segment only connects to its end."""
        line = LineSegment((0.0, 0.0), (0.0, 8.0))

        line.draw(recorder, 0.5, 1.0, False)

        assert recorder.calls == [("line_to", (0.0, 8.0))]

    def test_zero_length_line(self, recorder):
        """Test that a zero-length line has no direction and does not divide by zero."""
        line = LineSegment((3.0, 3.0), (3.0, 3.0))

        span = line.draw(recorder, 0.0, 1.0, True)

        assert line.arc_length == 0.0
        assert line.tangent == (0.0, 0.0)
        assert span.first_point == span.last_point == (3.0, 3.0)

    def test_offset_is_zero(self):
        """Test that lines never correct the dash offset."""
        line = LineSegment((0.0, 0.0), (10.0, 0.0))

        assert line.get_offset(0.0) == 0.0
        assert line.get_offset(0.7) == 0.0


###############################################################################
# CircleSegment Tests
###############################################################################


def clockwise_quarter() -> CircleSegment:
    """Arc rounding the corner (0,0) -> (10,0) -> (10,10) with radius 2."""
    return CircleSegment((8.0, 2.0), 2.0, -math.pi / 2, -math.pi / 2 - math.pi, False)


def counter_clockwise_quarter() -> CircleSegment:
    """Arc rounding the corner (0,0) -> (10,0) -> (10,-10) with radius 2."""
    return CircleSegment((8.0, -2.0), 2.0, math.pi / 2, math.pi / 2 - math.pi, True)


class TestCircleSegment:
    """Test class for CircleSegment functionality."""

    def test_counter_clockwise_sweep_and_length(self):
        """Test that counter-clockwise arcs sweep the stored delta angle."""
        arc = counter_clockwise_quarter()

        assert arc.sweep == pytest.approx(-math.pi / 2)
        assert arc.arc_length == pytest.approx(abs(arc.delta_angle * arc.radius))
        assert arc.arc_length == pytest.approx(math.pi)

    def test_clockwise_sweep_and_length(self):
        """Test that clockwise arcs sweep the delta angle plus a full turn."""
        arc = clockwise_quarter()

        assert arc.sweep == pytest.approx(math.pi / 2)
        assert arc.arc_length == pytest.approx(math.pi)

    def test_draw_clockwise_issues_arc(self, recorder):
        """Test the arc primitive issued for a clockwise arc."""
        arc = clockwise_quarter()

        arc.draw(recorder, 0.0, 1.0, True)

        assert recorder.names() == ["arc"]
        cx, cy, radius, start_angle, end_angle, counter_clockwise = recorder.args_of("arc")[0]
        assert (cx, cy, radius) == (8.0, 2.0, 2.0)
        assert start_angle == pytest.approx(-math.pi / 2)
        assert end_angle == pytest.approx(0.0)
        assert counter_clockwise is False

    def test_draw_counter_clockwise_partial(self, recorder):
        """Test that local fractions interpolate the swept angle."""
        arc = counter_clockwise_quarter()

        arc.draw(recorder, 0.5, 1.0, False)

        _, _, _, start_angle, end_angle, counter_clockwise = recorder.args_of("arc")[0]
        assert start_angle == pytest.approx(math.pi / 4)
        assert end_angle == pytest.approx(0.0)
        assert counter_clockwise is True

    def test_span_points_lie_on_tangent_points(self):
        """Test the end points of a whole clockwise arc."""
        span = clockwise_quarter().span(0.0, 1.0)

        assert span.first_point == pytest.approx((8.0, 0.0))
        assert span.last_point == pytest.approx((10.0, 2.0))

    def test_span_outward_vectors_clockwise(self):
        """Test outward vectors of a clockwise arc match the adjacent lines."""
        span = clockwise_quarter().span(0.0, 1.0)
        incoming = LineSegment((0.0, 0.0), (8.0, 0.0))
        outgoing = LineSegment((10.0, 2.0), (10.0, 10.0))

        assert span.first_tangent == pytest.approx(incoming.span().first_tangent)
        assert span.last_tangent == pytest.approx(outgoing.span().last_tangent)

    def test_span_outward_vectors_counter_clockwise(self):
        """Test outward vectors of a counter-clockwise arc match the adjacent lines."""
        span = counter_clockwise_quarter().span(0.0, 1.0)
        incoming = LineSegment((0.0, 0.0), (8.0, 0.0))
        outgoing = LineSegment((10.0, -2.0), (10.0, -10.0))

        assert span.first_point == pytest.approx((8.0, 0.0))
        assert span.last_point == pytest.approx((10.0, -2.0))
        assert span.first_tangent == pytest.approx(incoming.span().first_tangent)
        assert span.last_tangent == pytest.approx(outgoing.span().last_tangent)

    def test_offset_counter_clockwise_is_zero(self):
        """Test that counter-clockwise arcs do not correct the dash offset."""
        arc = counter_clockwise_quarter()

        assert arc.get_offset(0.0) == 0.0
        assert arc.get_offset(1.0) == 0.0

    def test_offset_clockwise_formula(self):
        """Test the empirical dash offset correction of clockwise arcs.

        The factor 1.045 is an approximation tuned against a canvas stroking
        backend; this pins the formula, not its accuracy.
        """
        arc = clockwise_quarter()
        expected = -0.5 * 1.045 * arc.delta_angle * arc.radius / 2

        assert CircleSegment.DASH_OFFSET_CORRECTION == 1.045
        assert arc.get_offset(0.5) == pytest.approx(expected)
        assert arc.get_offset(0.0) == 0.0

    def test_offset_correction_can_be_overridden(self):
        """Test that a backend specific correction factor can be plugged in."""

        class ExactCircleSegment(CircleSegment):
            """CircleSegment without empirical scaling."""

            DASH_OFFSET_CORRECTION = 1.0

        arc = ExactCircleSegment((8.0, 2.0), 2.0, -math.pi / 2, -1.5 * math.pi, False)

        assert arc.get_offset(1.0) == pytest.approx(1.5 * math.pi)

    def test_offset_correction_argument(self):
        """Test that a correction passed by the caller replaces the default factor."""
        arc = clockwise_quarter()

        assert arc.get_offset(1.0, 0.0) == 0.0
        assert arc.get_offset(1.0, 1.0) == pytest.approx(1.5 * math.pi)
        assert arc.get_offset(1.0, None) == pytest.approx(1.045 * 1.5 * math.pi)
        assert counter_clockwise_quarter().get_offset(1.0, 1.0) == 0.0

    def test_zero_radius_arc(self, recorder):
        """Test that a zero radius arc has zero length and collapses to its center."""
        arc = CircleSegment((5.0, 5.0), 0.0, 0.0, -math.pi / 2, True)

        span = arc.draw(recorder, 0.0, 1.0, False)

        assert arc.arc_length == 0.0
        assert span.first_point == span.last_point == (5.0, 5.0)
        assert arc.get_offset(1.0) == 0.0
