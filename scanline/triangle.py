"""Scanline triangle fill built on the DDA line drawer."""

from __future__ import annotations

import logging

from scanline.canvas import Canvas
from scanline.geometry import Vector, Vertex, first_sample, unit_step
from scanline.interpolate import interpolate_color, step_size
from scanline.line import draw_line

_logger = logging.getLogger(__name__)

Y_AXIS = 1


def sort_by_y(v1: Vertex, v2: Vertex, v3: Vertex) -> tuple[Vertex, Vertex, Vertex]:
    """Order three vertices top to bottom with pairwise compare-and-swap.

    Vertices with equal y keep their argument order.
    """
    if v1.point.y > v2.point.y:
        v1, v2 = v2, v1
    if v1.point.y > v3.point.y:
        v1, v3 = v3, v1
    if v2.point.y > v3.point.y:
        v2, v3 = v3, v2
    return v1, v2, v3


class EdgeWalker:
    """Walks one triangle edge a scanline at a time.

    Holds the current sample point, the per-scanline step and the
    interpolation counter, so a walker can be carried from one sweep into
    the next without restarting its color gradient.
    """

    def __init__(self, start: Vertex, end: Vertex):
        self.start = start
        self.end = end
        self.step = unit_step(Vector.from_points(start.point, end.point), Y_AXIS)
        self.q = first_sample(start.point, self.step, Y_AXIS)
        self.color_step = step_size(start.point, end.point, Y_AXIS)
        self.index = 0

    def __repr__(self):
        return f"EdgeWalker(q={self.q!r}, index={self.index})"

    def below(self, y) -> bool:
        return self.q.y < y

    def sample(self) -> Vertex:
        color = interpolate_color(self.start.color, self.end.color, self.color_step, self.index)
        return Vertex(self.q.to_point(), color)

    def advance(self) -> None:
        self.q.add(self.step)
        self.index += 1


def _sweep(canvas: Canvas, edge: EdgeWalker, long_edge: EdgeWalker, stop_y) -> int:
    rows = 0
    while edge.below(stop_y):
        draw_line(canvas, edge.sample(), long_edge.sample())
        edge.advance()
        long_edge.advance()
        rows += 1
    return rows


def draw_triangle(canvas: Canvas, vertex1: Vertex, vertex2: Vertex, vertex3: Vertex) -> int:
    """Fill a triangle with colors interpolated from its three vertices.

    The upper half pairs edge top->mid with the long edge top->bottom, the
    lower half pairs edge mid->bottom with the same long edge, which keeps
    advancing from where the upper half stopped. Each scanline is drawn with
    ``draw_line`` in interpolated mode, so the fill composites over existing
    content. Returns the number of scanlines drawn.
    """
    top, mid, bottom = sort_by_y(vertex1, vertex2, vertex3)
    long_edge = EdgeWalker(top, bottom)

    rows = _sweep(canvas, EdgeWalker(top, mid), long_edge, mid.point.y)
    rows += _sweep(canvas, EdgeWalker(mid, bottom), long_edge, bottom.point.y)

    _logger.debug("triangle %s %s %s: %d scanlines", top.point, mid.point, bottom.point, rows)
    return rows
