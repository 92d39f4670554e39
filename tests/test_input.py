"""Tests for the key-repeat input controller."""

import dataclasses

import pytest

from stickcar.control.input import Axis, InputConfig, InputController, InputState, Key


@pytest.fixture
def controller():
    return InputController()


def test_first_press_starts_axis_timer(controller):
    assert controller.press(Key.RIGHT) is Axis.STEERING
    assert controller.is_repeating(Axis.STEERING)
    assert not controller.is_repeating(Axis.THROTTLE)


def test_second_press_on_running_axis_does_not_restart(controller):
    controller.press(Key.RIGHT)
    assert controller.press(Key.LEFT) is None


def test_press_alone_does_not_change_value(controller):
    controller.press(Key.UP)
    assert controller.throttle == 0


def test_repeat_accumulates(controller):
    controller.press(Key.UP)
    for _ in range(3):
        controller.repeat(Axis.THROTTLE)
    assert controller.throttle == 3

    controller.press(Key.LEFT)
    controller.repeat(Axis.STEERING)
    assert controller.steering == -1


def test_repeat_clamps_to_limit(controller):
    controller.press(Key.DOWN)
    for _ in range(20):
        controller.repeat(Axis.THROTTLE)
    assert controller.throttle == -5

    controller.press(Key.RIGHT)
    for _ in range(20):
        controller.repeat(Axis.STEERING)
    assert controller.steering == 5


def test_custom_limits():
    controller = InputController(InputConfig(max_steering=2))
    controller.press(Key.LEFT)
    for _ in range(5):
        controller.repeat(Axis.STEERING)
    assert controller.steering == -2


def test_latest_key_sets_direction(controller):
    controller.press(Key.RIGHT)
    controller.repeat(Axis.STEERING)
    controller.repeat(Axis.STEERING)
    controller.press(Key.LEFT)
    controller.repeat(Axis.STEERING)
    assert controller.steering == 1


def test_release_resets_axis(controller):
    controller.press(Key.UP)
    controller.repeat(Axis.THROTTLE)
    controller.press(Key.RIGHT)
    controller.repeat(Axis.STEERING)

    assert controller.release(Key.UP) is Axis.THROTTLE
    assert controller.throttle == 0
    assert not controller.is_repeating(Axis.THROTTLE)
    assert controller.steering == 1


def test_repeat_after_release_is_ignored(controller):
    controller.press(Key.RIGHT)
    controller.release(Key.RIGHT)
    controller.repeat(Axis.STEERING)
    assert controller.steering == 0


def test_snapshot_is_frozen(controller):
    controller.press(Key.UP)
    controller.repeat(Axis.THROTTLE)
    snapshot = controller.snapshot()
    assert snapshot == InputState(throttle=1, steering=0)

    controller.repeat(Axis.THROTTLE)
    assert snapshot.throttle == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.throttle = 3


def test_repeat_intervals(controller):
    assert controller.repeat_interval_ms(Axis.STEERING) == 100
    assert controller.repeat_interval_ms(Axis.THROTTLE) == 4


def test_reset(controller):
    controller.press(Key.UP)
    controller.repeat(Axis.THROTTLE)
    controller.reset()
    assert controller.snapshot() == InputState()
    assert not controller.is_repeating(Axis.THROTTLE)
