"""Step sizes and linear color interpolation along a rasterized segment."""

from __future__ import annotations

from scanline.color import Color
from scanline.geometry import Point, round_half_away


def step_size(p1: Point, p2: Point, axis: int) -> float:
    """Interpolation progress per pixel step along ``axis``.

    ``min(1 / (round(|p2 - p1|) - 1), 1)``: the last pixel of a run reaches
    progress 1.0. Spans of one pixel or less saturate at 1.0.
    """
    steps = round_half_away(abs(p2[axis] - p1[axis])) - 1
    if steps <= 0:
        return 1.0
    return min(1.0 / steps, 1.0)


def interpolate_color(c1: Color, c2: Color, step: float, step_index: int) -> Color:
    """Color ``step_index`` steps of size ``step`` from ``c1`` towards ``c2``."""
    t = min(max(step_index * step, 0.0), 1.0)
    return Color(*(round_half_away(a + (b - a) * t) for a, b in zip(c1, c2)))
