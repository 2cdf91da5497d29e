"""Drawing surface interface used by segments, renderer and arrows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class DrawingContext(ABC):
    """Primitive path operations of a host drawing surface.

    The angles and winding of ``arc`` follow the HTML canvas convention: angles
    in radians measured in screen space (y axis pointing down) and
    ``counter_clockwise=False`` sweeping from ``start_angle`` toward increasing
    angles. ``line_to`` and ``arc`` connect to the current point when there is one.

    ``dash_offset_correction`` is the factor used to shift the dash phase behind
    clockwise arcs. None keeps the empirical default of the arc segments, which
    suits canvas-like backends; a backend that strokes arcs with their exact
    length sets it to 0.
    """

    dash_offset_correction: Optional[float] = None

    @abstractmethod
    def begin_path(self) -> None:
        """Discard the current path and start an empty one."""

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at (x, y)."""

    @abstractmethod
    def line_to(self, x: float, y: float) -> None:
        """Connect the current point to (x, y) with a straight line."""

    @abstractmethod
    def arc(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        """Add a circular arc around (cx, cy) from start_angle to end_angle."""

    @abstractmethod
    def close_path(self) -> None:
        """Close the current sub-path."""

    @abstractmethod
    def set_dash_offset(self, value: float) -> None:
        """Set the phase of the dash pattern used by the next stroke."""

    @abstractmethod
    def stroke(self) -> None:
        """Stroke the current path."""

    @abstractmethod
    def fill(self) -> None:
        """Fill the current path."""
