"""Digital differential analyzer (DDA) line drawing."""

from __future__ import annotations

import logging

from scanline.canvas import Canvas
from scanline.color import Color
from scanline.compositing import over
from scanline.geometry import Vector, Vertex, first_sample, round_half_away, unit_step
from scanline.interpolate import interpolate_color, step_size

_logger = logging.getLogger(__name__)


def dominant_axis(delta: Vector) -> int:
    """Axis with the larger absolute extent; ties go to x."""
    return 0 if abs(delta[0]) >= abs(delta[1]) else 1


def draw_line(canvas: Canvas, vertex1: Vertex, vertex2: Vertex, fixed_color: Color | None = None) -> int:
    """Paint the pixels between two vertices and return how many were painted.

    With ``fixed_color`` every pixel is set to that color as is. Without it the
    endpoint colors are interpolated per pixel and composited over whatever
    the canvas already holds.

    Stepping runs along the dominant axis from the first sample on an integer
    grid line while it stays strictly below the far endpoint, so the far
    endpoint itself is usually not painted and coincident endpoints paint
    nothing.
    """
    delta = Vector.from_points(vertex1.point, vertex2.point)
    i = dominant_axis(delta)
    if delta[i] < 0:
        vertex1, vertex2 = vertex2, vertex1
        delta.reverse()

    p1, p2 = vertex1.point, vertex2.point
    dp = unit_step(delta, i)
    q = first_sample(p1, dp, i)
    step = step_size(p1, p2, i)

    painted = 0
    while q[i] < p2[i]:
        x, y = round_half_away(q.x), round_half_away(q.y)
        if fixed_color is not None:
            canvas.set_pixel(x, y, fixed_color)
        else:
            color = interpolate_color(vertex1.color, vertex2.color, step, painted)
            canvas.set_pixel(x, y, over(color, canvas.get_pixel(x, y)))
        q.add(dp)
        painted += 1

    _logger.debug("line %s -> %s: %d pixels", p1, p2, painted)
    return painted
