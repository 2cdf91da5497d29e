"""SVG page and drawing context for rendering arrows with svgwrite."""

from __future__ import annotations

import copy
import gzip
import io
import math
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

import svgwrite
import svgwrite.base
import svgwrite.container
import svgwrite.path
from svgwrite.extensions import Inkscape

from arrowpath.arrow import Arrow
from arrowpath.common import TAU, Point2D
from arrowpath.context import DrawingContext
from arrowpath.geom import Box


def _fmt(value: float) -> str:
    # drop floating point noise like 2.4e-16 and avoid "-0"
    return f"{round(value, 9) + 0.0:.10g}"


###############################################################################
# SvgPage
###############################################################################
@dataclass
class SvgPage:
    """A page (canvas) described by SVG.

    The coordinate system is the screen system of the drawing context:
    x left-to-right, y top-to-bottom.
    Contains groups/layers:
        - main   -- editable->locked=False  --  hidden->display="block"
        - debug  -- editable->locked=False  --  hidden->display="none"
    """

    _inkscape: Inkscape  # extension to support layers

    drawing: svgwrite.Drawing
    main_layer: svgwrite.container.Group
    debug_layer: svgwrite.container.Group

    def __init__(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        width: float,
        height: float,
        viewbox_x: float = 0.0,
        viewbox_y: float = 0.0,
        unit: str = "px",
    ):
        """
        Initialize the SVG page.

        Args:
            width (float): The width of the page in _unit_ and of the viewbox in user units.
            height (float): The height of the page in _unit_ and of the viewbox in user units.
            viewbox_x (float, optional): x-coordinate of the viewbox's top-left point. Defaults to 0.0.
            viewbox_y (float, optional): y-coordinate of the viewbox's top-left point. Defaults to 0.0.
            unit (str, optional): unit of the page size. Defaults to "px".
        """
        # profile="full" to support numbers with more than 4 decimal digits
        self.drawing = svgwrite.Drawing(
            size=(f"{width}{unit}", f"{height}{unit}"),
            viewBox=(f"{viewbox_x} {viewbox_y} {width} {height}"),
            profile="full",
        )

        # Initialize Inkscape extension for layer support
        self._inkscape = Inkscape(self.drawing)

        # Define layers
        self.main_layer = self._inkscape.layer(label="main", locked=False)
        self.debug_layer = self._inkscape.layer(label="debug", locked=False, display="none")

    @classmethod
    def from_box(cls, box: Box, margin: float = 0.0, unit: str = "px") -> SvgPage:
        """Create a page whose viewbox shows _box_ plus _margin_ on every side."""
        page_box = box.expand(margin)
        return cls(page_box.width, page_box.height, page_box.xmin, page_box.ymin, unit)

    def add(
        self,
        element: svgwrite.base.BaseElement,
        add_to_debug_layer: bool = False,
    ) -> svgwrite.base.BaseElement:
        """Add a SVG element as subelement either to main or debug layer.

        Args:
            element (svgwrite.base.BaseElement): append this SVG element
            add_to_debug_layer (bool, optional): True if element should be added to debug layer.
                Defaults to False.

        Returns:
            svgwrite.base.BaseElement: the added element
        """
        if add_to_debug_layer:
            return self.debug_layer.add(element)
        return self.main_layer.add(element)

    def add_polyline_debug(
        self, vertices: Sequence[Sequence[float]], stroke: str = "red", stroke_width: float = 0.5
    ) -> svgwrite.base.BaseElement:
        """Add the unrounded control polyline of an arrow to the debug layer."""
        polyline = self.drawing.polyline(
            points=[(float(x), float(y)) for x, y in vertices],
            stroke=stroke,
            stroke_width=stroke_width,
            fill="none",
        )
        return self.add(polyline, add_to_debug_layer=True)

    def assemble(self, include_debug_layer: bool = False) -> svgwrite.Drawing:
        """Return a copy of the drawing with the layers attached.

        Args:
            include_debug_layer (bool, optional): Include the debug layer. Defaults to False.

        Returns:
            svgwrite.Drawing: the assembled drawing
        """
        drawing = copy.deepcopy(self.drawing)
        if include_debug_layer:
            drawing.add(copy.deepcopy(self.debug_layer))
        drawing.add(copy.deepcopy(self.main_layer))
        return drawing

    def tostring(self, include_debug_layer: bool = False) -> str:
        """Return the SVG document as string."""
        return self.assemble(include_debug_layer).tostring()

    def save_as(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        filename: str,
        include_debug_layer: bool = False,
        pretty: bool = False,
        indent: int = 2,
        compressed: bool = False,
    ):
        """Save as SVG file

        Args:
            filename (str): path and filename
            include_debug_layer (bool, optional): True if file should contain debug_layer. Defaults to False.
            pretty (bool, optional): True for easy readable output. Defaults to False.
            indent (int, optional): Indention if pretty is enabled. Defaults to 2 spaces.
            compressed (bool, optional): Save as compressed svgz-file. Defaults to False.
        """
        drawing_for_save = self.assemble(include_debug_layer)

        # setup IO:
        svg_buffer = io.StringIO()
        drawing_for_save.write(svg_buffer, pretty=pretty, indent=indent)
        output_data = svg_buffer.getvalue().encode("utf-8")
        if compressed:
            output_data = gzip.compress(output_data)

        # save file:
        with open(filename, "wb") as svg_file:
            svg_file.write(output_data)


###############################################################################
# SvgDrawingContext
###############################################################################
class SvgDrawingContext(DrawingContext):
    """DrawingContext that turns the path primitives into SVG path elements on a SvgPage.

    Each stroke() and fill() adds one <path> element holding the current path data.
    Arcs are converted from the canvas convention into SVG elliptical arc commands.
    SVG strokes arcs with their exact length, so no dash offset correction is applied.
    """

    dash_offset_correction = 0.0

    def __init__(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        page: SvgPage,
        stroke: str = "black",
        fill: str = "black",
        stroke_width: float = 1.0,
        dash: Optional[Sequence[float]] = None,
        add_to_debug_layer: bool = False,
    ):
        self.page = page
        self.stroke_color = stroke
        self.fill_color = fill
        self.stroke_width = stroke_width
        self.dash = list(dash) if dash else None
        self.add_to_debug_layer = add_to_debug_layer
        self.dash_offset = 0.0
        self.elements: List[svgwrite.path.Path] = []
        self._commands: List[str] = []
        self._current: Optional[Point2D] = None
        self._subpath_start: Optional[Point2D] = None

    @property
    def path_data(self) -> str:
        """SVG path data of the current path."""
        return " ".join(self._commands)

    def _has_geometry(self) -> bool:
        return any(not command.startswith("M") for command in self._commands)

    def begin_path(self) -> None:
        self._commands = []
        self._current = None
        self._subpath_start = None

    def move_to(self, x: float, y: float) -> None:
        self._commands.append(f"M {_fmt(x)} {_fmt(y)}")
        self._current = (x, y)
        self._subpath_start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self.move_to(x, y)
            return
        self._commands.append(f"L {_fmt(x)} {_fmt(y)}")
        self._current = (x, y)

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
        start = (cx + radius * math.cos(start_angle), cy + radius * math.sin(start_angle))
        if self._current is None or math.dist(self._current, start) > 1.0e-9:
            self.line_to(*start)
        if radius <= 0.0:
            return

        sweep = start_angle - end_angle if counter_clockwise else end_angle - start_angle
        full_circle = sweep >= TAU
        sweep = sweep % TAU
        if not full_circle and sweep == 0.0:
            return

        sweep_flag = 0 if counter_clockwise else 1
        if full_circle:
            # SVG cannot draw a closed arc in one command
            direction = -1.0 if counter_clockwise else 1.0
            middle_angle = start_angle + direction * math.pi
            middle = (cx + radius * math.cos(middle_angle), cy + radius * math.sin(middle_angle))
            self._push_arc(radius, 0, sweep_flag, middle)
            self._push_arc(radius, 0, sweep_flag, start)
            return

        end = (cx + radius * math.cos(end_angle), cy + radius * math.sin(end_angle))
        self._push_arc(radius, 1 if sweep > math.pi else 0, sweep_flag, end)

    def _push_arc(self, radius: float, large_arc: int, sweep_flag: int, target: Point2D) -> None:
        self._commands.append(
            f"A {_fmt(radius)} {_fmt(radius)} 0 {large_arc} {sweep_flag} {_fmt(target[0])} {_fmt(target[1])}"
        )
        self._current = target

    def close_path(self) -> None:
        if self._subpath_start is None:
            return
        self._commands.append("Z")
        self._current = self._subpath_start

    def set_dash_offset(self, value: float) -> None:
        self.dash_offset = value

    def stroke(self) -> None:
        if not self._has_geometry():
            return
        element = self.page.drawing.path(d=self.path_data)
        element.stroke(self.stroke_color, width=self.stroke_width)
        element.fill("none")
        if self.dash:
            element.dasharray(self.dash, offset=self.dash_offset)
        self.elements.append(self.page.add(element, self.add_to_debug_layer))

    def fill(self) -> None:
        if not self._has_geometry():
            return
        element = self.page.drawing.path(d=self.path_data)
        element.fill(self.fill_color)
        element.stroke("none")
        self.elements.append(self.page.add(element, self.add_to_debug_layer))


def render_arrows_svg(
    arrows: Sequence[Arrow],
    margin: float = 10.0,
    stroke: str = "black",
    dash: Optional[Sequence[float]] = None,
    include_debug_layer: bool = False,
) -> Optional[SvgPage]:
    """Paint _arrows_ onto a new page fitted around all of their vertices.

    The control polylines go to the debug layer.

    Args:
        arrows: Arrow instances to paint
        margin: space around the vertices
        stroke: stroke and fill colour
        dash: dash pattern for the strokes
        include_debug_layer: draw the control polylines

    Returns:
        SvgPage: the page, None if no arrow has vertices
    """
    boxes = [arrow.bounding_box() for arrow in arrows if len(arrow.vertices)]
    if not boxes:
        return None
    box = Box(
        min(b.xmin for b in boxes),
        min(b.ymin for b in boxes),
        max(b.xmax for b in boxes),
        max(b.ymax for b in boxes),
    )
    page = SvgPage.from_box(box, margin)
    for arrow in arrows:
        context = SvgDrawingContext(page, stroke=stroke, fill=stroke, stroke_width=arrow.stroke_width, dash=dash)
        arrow.paint(context)
        if include_debug_layer and len(arrow.vertices):
            page.add_polyline_debug(arrow.vertices)
    return page


def main():
    """Main"""

    output_filename = "data/output/example/svg/arrowpath/example_arrows.svg"

    arrows = [
        Arrow([0, 0, 100, 0, 100, 60, 200, 60], radius=15, arrow_size=8, end_arrow=True, stroke_width=2),
        Arrow([0, 100, 60, 160, 120, 100, 180, 160], radius=10, start=0.2, end=0.9, arrow_size=8,
              start_arrow=True, end_arrow=True, stroke_width=2),
    ]
    page = render_arrows_svg(arrows, margin=20, dash=[6, 3], include_debug_layer=True)

    # Save the SVG file
    os.makedirs(os.path.dirname(output_filename), exist_ok=True)
    print(f"save file {output_filename} ...")
    page.save_as(output_filename, include_debug_layer=True, pretty=True, indent=2)
    print("save done.")


if __name__ == "__main__":
    main()
