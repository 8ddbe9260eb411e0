"""Scanline triangle fill."""

from __future__ import annotations

import numpy as np

from scanline.canvas import Canvas
from scanline.color import Color
from scanline.geometry import Vertex
from scanline.interpolate import interpolate_color
from scanline.triangle import EdgeWalker, draw_triangle, sort_by_y

RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
WHITE = Color(255, 255, 255, 255)


def row_widths(canvas: Canvas) -> list[int]:
    return canvas.painted_mask().sum(axis=1).tolist()


def assert_rows_start_at_left_and_are_contiguous(canvas: Canvas) -> None:
    mask = canvas.painted_mask()
    for y in range(canvas.height):
        xs = np.nonzero(mask[y])[0]
        if xs.size:
            assert xs.tolist() == list(range(xs[0], xs[0] + xs.size)), f"gap in row {y}"


def test_sort_by_y_is_stable() -> None:
    a = Vertex.at(0, 5, RED)
    b = Vertex.at(1, 1, GREEN)
    c = Vertex.at(2, 1, BLUE)
    assert sort_by_y(a, b, c) == (b, c, a)
    assert sort_by_y(c, b, a) == (c, b, a)
    assert sort_by_y(a, a, b) == (b, a, a)


def test_edge_walker_starts_on_grid_and_steps_one_row() -> None:
    edge = EdgeWalker(Vertex.at(0, 0.5, RED), Vertex.at(4, 4.5, BLUE))
    assert (edge.q.x, edge.q.y) == (0.5, 1.0)
    assert edge.sample().color == RED
    edge.advance()
    assert (edge.q.x, edge.q.y) == (1.5, 2.0)
    assert edge.index == 1


def test_right_triangle_rows_match_edge_interpolation() -> None:
    canvas = Canvas(8, 8)
    rows = draw_triangle(canvas, Vertex.at(0, 0, RED), Vertex.at(4, 0, GREEN), Vertex.at(0, 4, BLUE))

    assert rows == 4
    assert row_widths(canvas) == [4, 3, 2, 1, 0, 0, 0, 0]
    assert_rows_start_at_left_and_are_contiguous(canvas)
    for y in range(4):
        assert canvas.get_pixel(0, y) == interpolate_color(RED, BLUE, 1 / 3, y)
        assert canvas.get_pixel(3 - y, y) == interpolate_color(GREEN, BLUE, 1 / 3, y)
    assert canvas.get_pixel(3, 0) == GREEN
    assert canvas.get_pixel(0, 3) == BLUE


def test_long_edge_gradient_continues_into_lower_half() -> None:
    canvas = Canvas(8, 8)
    draw_triangle(canvas, Vertex.at(0, 0, RED), Vertex.at(6, 3, GREEN), Vertex.at(0, 6, BLUE))

    assert row_widths(canvas) == [0, 2, 4, 6, 4, 2, 0, 0]
    assert_rows_start_at_left_and_are_contiguous(canvas)
    for y in range(1, 6):
        assert canvas.get_pixel(0, y) == interpolate_color(RED, BLUE, 0.2, y)
    # right ends: edge top->mid above the middle vertex, mid->bottom below it
    for y in (1, 2):
        assert canvas.get_pixel(2 * y - 1, y) == interpolate_color(RED, GREEN, 0.5, y)
    for y in (3, 4, 5):
        assert canvas.get_pixel(5 - 2 * (y - 3), y) == interpolate_color(GREEN, BLUE, 0.5, y - 3)


def test_flat_bottom_triangle_fills_upper_half_only() -> None:
    canvas = Canvas(8, 8)
    draw_triangle(canvas, Vertex.at(0, 0, RED), Vertex.at(4, 4, RED), Vertex.at(0, 4, RED))
    assert row_widths(canvas) == [0, 1, 2, 3, 0, 0, 0, 0]


def test_degenerate_triangles_do_not_raise() -> None:
    canvas = Canvas(8, 8)
    assert draw_triangle(canvas, Vertex.at(0, 2, RED), Vertex.at(5, 2, RED), Vertex.at(3, 2, RED)) == 0
    assert draw_triangle(canvas, Vertex.at(1, 1, RED), Vertex.at(1, 1, RED), Vertex.at(1, 1, RED)) == 0
    draw_triangle(canvas, Vertex.at(0, 0, RED), Vertex.at(2, 2, RED), Vertex.at(4, 4, RED))
    assert not canvas.painted_mask().any()


def test_translucent_fill_composites_over_background() -> None:
    canvas = Canvas(8, 8)
    canvas.fill(WHITE)
    half_blue = Color(0, 0, 255, 128)
    draw_triangle(canvas, Vertex.at(0, 0, half_blue), Vertex.at(6, 3, half_blue), Vertex.at(0, 6, half_blue))

    inside = canvas.get_pixel(0, 3)
    assert inside != WHITE
    assert inside != half_blue
    assert inside == Color(127, 127, 255, 255)
    assert canvas.get_pixel(7, 7) == WHITE
