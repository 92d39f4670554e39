"""Tests for Vector2 helpers."""

import math

import pytest

from stickcar.core.vector import Vector2, clamp


def test_normalized_unit_length():
    v = Vector2(3, 4).normalized()
    assert v.x == pytest.approx(0.6)
    assert v.y == pytest.approx(0.8)


def test_normalized_zero_vector_is_zero():
    assert Vector2(0, 0).normalized() == Vector2(0, 0)


def test_distance_and_heading():
    assert Vector2(1, 1).distance_to(Vector2(4, 5)) == pytest.approx(5.0)
    assert Vector2(0, 2).heading() == pytest.approx(math.pi / 2)


def test_in_place_operators_mutate():
    v = Vector2(1, 2)
    alias = v
    v += Vector2(1, 1)
    v *= 2
    assert alias == Vector2(4, 6)


def test_perpendicular_turns_counter_clockwise():
    assert Vector2(2, 5).perpendicular() == Vector2(-5, 2)


def test_as_int_tuple_rounds():
    assert Vector2(1.6, 2.4).as_int_tuple() == (2, 2)


def test_clamp():
    assert clamp(7, -5, 5) == 5
    assert clamp(-7, -5, 5) == -5
    assert clamp(3, -5, 5) == 3
