"""Shared fixtures for the arrowpath tests."""

from typing import Any, List, Tuple

import pytest

from arrowpath.context import DrawingContext


class RecordingContext(DrawingContext):
    """DrawingContext that records every primitive call as (name, args)."""

    def __init__(self):
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(self, cx, cy, radius, start_angle, end_angle, counter_clockwise=False) -> None:
        self._record("arc", cx, cy, radius, start_angle, end_angle, counter_clockwise)

    def close_path(self) -> None:
        self._record("close_path")

    def set_dash_offset(self, value: float) -> None:
        self._record("set_dash_offset", value)

    def stroke(self) -> None:
        self._record("stroke")

    def fill(self) -> None:
        self._record("fill")

    def names(self) -> List[str]:
        """Names of the recorded calls in order."""
        return [name for name, _ in self.calls]

    def args_of(self, name: str) -> List[Tuple[Any, ...]]:
        """Arguments of all recorded calls named _name_."""
        return [args for call_name, args in self.calls if call_name == name]


@pytest.fixture
def recorder() -> RecordingContext:
    """A fresh recording drawing context."""
    return RecordingContext()
