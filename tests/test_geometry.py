"""Point / Vector arithmetic and the DDA stepping helpers."""

from __future__ import annotations

import math

from scanline.color import WHITE, Color
from scanline.geometry import (
    SENTINEL_VERTEX,
    Point,
    Vector,
    Vertex,
    first_sample,
    round_half_away,
    unit_step,
)


def test_vector_from_points_is_end_minus_start() -> None:
    v = Vector.from_points(Point(1.0, 2.0), Point(4.0, 6.0))
    assert v == Vector(3.0, 4.0)
    assert v.magnitude() == 5.0


def test_scale_returns_new_vector() -> None:
    v = Vector(1.5, -2.0)
    scaled = v.scale(2.0)
    assert scaled == Vector(3.0, -4.0)
    assert v == Vector(1.5, -2.0)


def test_add_reverse_swap_mutate_in_place() -> None:
    v = Vector(1.0, 2.0)
    v.add(Vector(0.5, 0.5))
    assert v == Vector(1.5, 2.5)
    v.reverse()
    assert v == Vector(-1.5, -2.5)
    v.swap()
    assert v == Vector(-2.5, -1.5)
    assert (v.x, v.y) == (v[0], v[1])


def test_round_half_away_from_zero() -> None:
    assert round_half_away(2.5) == 3
    assert round_half_away(3.5) == 4
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.49) == 2
    assert round_half_away(-0.3) == 0


def test_unit_step_advances_one_unit_along_axis() -> None:
    assert unit_step(Vector(4.0, 2.0), 0) == Vector(1.0, 0.5)
    assert unit_step(Vector(-1.0, 4.0), 1) == Vector(-0.25, 1.0)


def test_unit_step_falls_back_to_other_axis_then_zero() -> None:
    assert unit_step(Vector(3.0, 0.0), 1) == Vector(1.0, 0.0)
    assert unit_step(Vector(0.0, 0.0), 0) == Vector(0.0, 0.0)


def test_first_sample_lands_on_next_grid_line() -> None:
    q = first_sample(Point(0.5, 0.0), Vector(1.0, 0.5), 0)
    assert q == Vector(1.0, 0.25)
    q = first_sample(Point(2.0, 3.0), Vector(1.0, 0.5), 0)
    assert q == Vector(2.0, 3.0)


def test_vertex_helpers() -> None:
    v = Vertex.at(1, 2, Color(1, 2, 3))
    assert v.point == Point(1.0, 2.0)
    assert isinstance(v.point.x, float)
    assert SENTINEL_VERTEX.color == WHITE
    assert math.isclose(Vector(1.0, 1.0).offset(v.point).magnitude(), math.hypot(2.0, 3.0))
