"""Driver input state with key-repeat accumulators.

Holding an arrow key starts a repeat timer for its axis. Each timer fire
moves that axis' accumulator one unit toward the held key's direction,
clamped to the axis limit. Releasing a key on an axis stops its timer and
snaps the accumulator back to zero.

The controller has no timers of its own: press() and release() report
which axis timer to start or cancel, and the owner (the renderer's event
loop) calls repeat() whenever that timer fires. The frame loop reads
snapshot() once per frame.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from stickcar.core.vector import clamp

logger = logging.getLogger(__name__)


class Key(Enum):
    """Arrow keys."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Axis(Enum):
    """Input axes."""
    STEERING = "steering"
    THROTTLE = "throttle"


KEY_AXIS: Dict[Key, Axis] = {
    Key.LEFT: Axis.STEERING,
    Key.RIGHT: Axis.STEERING,
    Key.UP: Axis.THROTTLE,
    Key.DOWN: Axis.THROTTLE,
}

KEY_DIRECTION: Dict[Key, int] = {
    Key.LEFT: -1,
    Key.RIGHT: 1,
    Key.UP: 1,
    Key.DOWN: -1,
}


@dataclass
class InputConfig:
    """Input accumulator limits and repeat rates."""
    max_steering: float = 5.0
    max_throttle: float = 5.0
    steering_repeat_ms: int = 100
    throttle_repeat_ms: int = 4       # As fast as a browser's zero-delay interval

    def limit(self, axis: Axis) -> float:
        return self.max_steering if axis is Axis.STEERING else self.max_throttle


@dataclass(frozen=True)
class InputState:
    """Snapshot of driver input read by the frame loop."""
    throttle: float = 0.0
    steering: float = 0.0


class InputController:
    """Keyboard accumulator for throttle and steering."""

    def __init__(self, config: Optional[InputConfig] = None):
        self.config = config or InputConfig()
        self._values: Dict[Axis, float] = {Axis.STEERING: 0.0, Axis.THROTTLE: 0.0}
        self._active_key: Dict[Axis, Optional[Key]] = {
            Axis.STEERING: None,
            Axis.THROTTLE: None,
        }
        self._repeating: Dict[Axis, bool] = {
            Axis.STEERING: False,
            Axis.THROTTLE: False,
        }

    @property
    def throttle(self) -> float:
        return self._values[Axis.THROTTLE]

    @property
    def steering(self) -> float:
        return self._values[Axis.STEERING]

    def is_repeating(self, axis: Axis) -> bool:
        return self._repeating[axis]

    def repeat_interval_ms(self, axis: Axis) -> int:
        if axis is Axis.STEERING:
            return self.config.steering_repeat_ms
        return self.config.throttle_repeat_ms

    def press(self, key: Key) -> Optional[Axis]:
        """Handle a key press.

        The latest key pressed on an axis decides the repeat direction.

        Returns:
            The axis whose repeat timer must be started, or None if it is
            already running.
        """
        axis = KEY_AXIS[key]
        self._active_key[axis] = key

        if self._repeating[axis]:
            return None

        self._repeating[axis] = True
        logger.debug("Repeat started on %s (%s)", axis.value, key.value)
        return axis

    def release(self, key: Key) -> Axis:
        """Handle a key release.

        Returns:
            The axis whose repeat timer must be cancelled.
        """
        axis = KEY_AXIS[key]
        self._repeating[axis] = False
        self._active_key[axis] = None
        self._values[axis] = 0.0
        logger.debug("Repeat stopped on %s", axis.value)
        return axis

    def repeat(self, axis: Axis) -> float:
        """Apply one repeat step to an axis and return its new value."""
        key = self._active_key[axis]
        if not self._repeating[axis] or key is None:
            return self._values[axis]

        limit = self.config.limit(axis)
        self._values[axis] = clamp(self._values[axis] + KEY_DIRECTION[key], -limit, limit)
        return self._values[axis]

    def snapshot(self) -> InputState:
        return InputState(throttle=self.throttle, steering=self.steering)

    def reset(self) -> None:
        """Zero both axes and stop all repeats."""
        for axis in Axis:
            self._values[axis] = 0.0
            self._active_key[axis] = None
            self._repeating[axis] = False
