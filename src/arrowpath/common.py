"""Central module containing types, constants and exceptions for arrow path handling."""

from __future__ import annotations

import math
from typing import Tuple

###############################################################################
# Types
###############################################################################


Point2D = Tuple[float, float]  # (x, y) in screen coordinates (y axis pointing down)
Vector2D = Tuple[float, float]  # (dx, dy) in screen coordinates


###############################################################################
# Enums and Consts
###############################################################################


TAU: float = 2.0 * math.pi


###############################################################################
# Exceptions
###############################################################################


class ArrowPathError(Exception):
    """Base exception for errors raised while building an arrow path."""


class MalformedVerticesError(ArrowPathError, ValueError):
    """Raised when the vertex data cannot describe a polyline.

    Covers flat coordinate lists of odd length, arrays with a wrong shape
    and non-finite coordinates.
    """


class InvalidRadiusError(ArrowPathError, ValueError):
    """Raised when the corner radius is negative or not finite."""
