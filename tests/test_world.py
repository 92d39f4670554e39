"""Tests for the frame-driven world."""

import pytest

from stickcar.control.input import InputState
from stickcar.core.world import World
from stickcar.vehicle.car import Car


@pytest.fixture
def world():
    world = World()
    world.add_car(Car())
    return world


def test_zero_input_keeps_car_at_rest(world):
    car = world.cars[0]
    before = [p.as_tuple() for p in car.motor_positions()]
    for _ in range(5):
        world.step()
    after = car.motor_positions()
    for (x, y), pos in zip(before, after):
        assert pos.x == pytest.approx(x)
        assert pos.y == pytest.approx(y)


def test_step_counts_frames(world):
    world.step(InputState(throttle=1))
    world.step(InputState(throttle=1))
    assert world.frame == 2


def test_step_applies_input(world):
    world.step(InputState(throttle=2, steering=1))
    assert world.cars[0].motor_speeds == (1, 3, 1, 3)


def test_steps_per_frame():
    world = World(steps_per_frame=4)
    car = Car()
    world.add_car(car)
    start = car.centroid().y
    world.step(InputState(throttle=1))
    assert car.centroid().y == pytest.approx(start + 4.0)


def test_invalid_steps_per_frame():
    with pytest.raises(ValueError):
        World(steps_per_frame=0)


def test_run_returns_history(world):
    history = world.run(10, InputState(throttle=2))
    assert len(history) == 10
    assert history[-1].centroid.y == pytest.approx(425.0 + 20.0, abs=0.5)
    assert world.frame == 10


def test_run_needs_a_car():
    with pytest.raises(ValueError):
        World().run(3)


def test_remove_car(world):
    car = world.cars[0]
    world.remove_car(car)
    world.remove_car(car)
    assert world.cars == []


def test_reset(world):
    world.run(10, InputState(throttle=3, steering=2))
    world.reset()
    assert world.frame == 0
    assert world.cars[0].motor_positions()[0].as_tuple() == (300, 350)
