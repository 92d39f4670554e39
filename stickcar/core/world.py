"""Simulation world advancing cars once per frame."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from stickcar.control.input import InputState

if TYPE_CHECKING:
    from stickcar.vehicle.car import Car, CarState

logger = logging.getLogger(__name__)


@dataclass
class World:
    """Frame-driven simulation world.

    There is no real-time clock: each rendered frame applies the current
    driver input and advances every car by a fixed number of steps.
    """

    steps_per_frame: int = 1
    frame: int = 0

    # Managed objects
    cars: list = field(default_factory=list)

    def __post_init__(self):
        if self.steps_per_frame < 1:
            raise ValueError(f"steps_per_frame must be >= 1, got {self.steps_per_frame}")

    def add_car(self, car: Car) -> None:
        """Add a car to the simulation."""
        self.cars.append(car)

    def remove_car(self, car: Car) -> None:
        """Remove a car from the simulation."""
        if car in self.cars:
            self.cars.remove(car)

    def step(self, inputs: Optional[InputState] = None) -> None:
        """Advance one frame.

        Args:
            inputs: Driver input for this frame. No input means coasting
                    at zero throttle and steering.
        """
        inputs = inputs or InputState()
        for car in self.cars:
            car.set_car_speed(inputs.throttle, inputs.steering)
            car.tick(self.steps_per_frame)

        self.frame += 1

    def run(self, frames: int, inputs: Optional[InputState] = None) -> List[CarState]:
        """Run headless with constant input.

        Returns:
            State of the first car after each frame
        """
        if frames < 0:
            raise ValueError(f"frames must be non-negative, got {frames}")
        if not self.cars:
            raise ValueError("World has no cars to run")

        history = []
        for _ in range(frames):
            self.step(inputs)
            history.append(self.cars[0].get_state())

        logger.info("Ran %d frames, now at frame %d", frames, self.frame)
        return history

    def reset(self) -> None:
        """Reset simulation to initial state."""
        self.frame = 0
        for car in self.cars:
            car.reset()
