"""Four-motor car built from a braced quadrilateral of sticks.

Motor layout (canvas y grows downward):

         S0
        _____
    [0]-| ^ |-[1]
        | | |
    S1->|   |<-S3
    [2]-|   |-[3]
        ‾‾‾‾‾
         S2

S4 is the diagonal from motor 0 to motor 3, splitting the body into two
triangles so it keeps its shape.

Each motor is driven along the direction of one reference edge (S1 by
default), scaled by that motor's own speed. The rear pair uses the same
reference edge as the front pair, so all four motors always push parallel
to each other.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

from stickcar.core.constraints import ConstraintSystem, PointHandle, StickHandle
from stickcar.core.vector import Vector2

logger = logging.getLogger(__name__)

NUM_MOTORS = 4

# (point1, point2) motor indices for S0..S4
BODY_TOPOLOGY: Tuple[Tuple[int, int], ...] = (
    (0, 1),  # S0 front
    (0, 2),  # S1 left
    (2, 3),  # S2 rear
    (3, 1),  # S3 right
    (0, 3),  # S4 diagonal brace
)


class MotorPosition(IntEnum):
    """Motor indices."""
    FRONT_LEFT = 0
    FRONT_RIGHT = 1
    REAR_LEFT = 2
    REAR_RIGHT = 3


LEFT_MOTORS = (MotorPosition.FRONT_LEFT, MotorPosition.REAR_LEFT)
RIGHT_MOTORS = (MotorPosition.FRONT_RIGHT, MotorPosition.REAR_RIGHT)


@dataclass
class CarConfig:
    """Car layout configuration (canvas units)."""
    origin_x: float = 300.0        # Front-left motor x
    origin_y: float = 350.0        # Front-left motor y
    track: float = 150.0           # Left to right motor spacing
    wheelbase: float = 150.0       # Front to rear motor spacing
    motor_radius: float = 5.0      # Display radius
    reference_edge: int = 1        # Stick whose direction drives all motors

    @classmethod
    def default(cls) -> CarConfig:
        """Square chassis in the upper middle of the canvas."""
        return cls()

    @classmethod
    def wide(cls) -> CarConfig:
        """Wide, short chassis."""
        return cls(origin_x=250.0, origin_y=400.0, track=250.0, wheelbase=120.0)

    @classmethod
    def compact(cls) -> CarConfig:
        """Small chassis, quicker to rotate."""
        return cls(origin_x=350.0, origin_y=450.0, track=80.0, wheelbase=100.0,
                   motor_radius=4.0)

    def validate(self) -> None:
        """Raise ValueError for layouts the stick body cannot represent."""
        if self.track <= 0:
            raise ValueError(f"track must be positive, got {self.track}")
        if self.wheelbase <= 0:
            raise ValueError(f"wheelbase must be positive, got {self.wheelbase}")
        if self.motor_radius < 0:
            raise ValueError(f"motor_radius must be >= 0, got {self.motor_radius}")
        if not 0 <= self.reference_edge < len(BODY_TOPOLOGY):
            raise ValueError(
                f"reference_edge must be in 0..{len(BODY_TOPOLOGY) - 1}, "
                f"got {self.reference_edge}"
            )

    def motor_layout(self) -> List[Vector2]:
        """Initial motor positions, indexed by MotorPosition."""
        return [
            Vector2(self.origin_x + self.track * (i % 2),
                    self.origin_y + (0.0 if i < 2 else self.wheelbase))
            for i in range(NUM_MOTORS)
        ]


@dataclass
class CarState:
    """Vehicle state snapshot for telemetry."""
    motor_positions: List[Vector2] = field(default_factory=list)
    motor_velocities: List[Vector2] = field(default_factory=list)
    motor_speeds: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    centroid: Vector2 = field(default_factory=Vector2)
    heading: float = 0.0           # radians, reference edge direction
    body_lengths: List[float] = field(default_factory=list)


class Car:
    """Four-motor stick car.

    The motors are points in a ConstraintSystem; the body is five sticks
    between them.
    """

    def __init__(self, config: Optional[CarConfig] = None):
        """Initialize car.

        Args:
            config: Layout configuration. Uses defaults if None.
        """
        self.config = config or CarConfig()
        self.config.validate()

        self.system = ConstraintSystem()
        self.motor_speeds: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.motors: Tuple[PointHandle, ...] = ()
        self.body_lines: Tuple[StickHandle, ...] = ()

        self._build()

    def _build(self) -> None:
        self.system = ConstraintSystem()
        self.motors = tuple(
            self.system.add_point(position, self.config.motor_radius)
            for position in self.config.motor_layout()
        )
        self.body_lines = tuple(
            self.system.stick_between_points(self.motors[a], self.motors[b], f"S{i}")
            for i, (a, b) in enumerate(BODY_TOPOLOGY)
        )
        self.motor_speeds = (0.0, 0.0, 0.0, 0.0)

    def reset(self) -> None:
        """Rebuild the body at its configured layout with motors stopped."""
        self._build()
        logger.info("Car reset to layout at (%.0f, %.0f)",
                    self.config.origin_x, self.config.origin_y)

    def reference_direction(self) -> Vector2:
        """Current unit direction of the reference edge."""
        return self.system.direction(self.body_lines[self.config.reference_edge])

    def set_motor_speed(
        self,
        m0: float = 0.0,
        m1: float = 0.0,
        m2: float = 0.0,
        m3: float = 0.0
    ) -> None:
        """Set per-motor scalar speeds and derive motor velocities.

        Every motor is driven along the reference edge, front and rear alike.
        """
        self.motor_speeds = (m0, m1, m2, m3)

        direction = self.reference_direction()
        for handle, speed in zip(self.motors, self.motor_speeds):
            self.system.point(handle).velocity = direction * speed

    def set_car_speed(self, throttle: float, steering: float) -> None:
        """Differential drive: left motors throttle - steering, right throttle + steering."""
        speeds = [0.0] * NUM_MOTORS
        for motor in LEFT_MOTORS:
            speeds[motor] = throttle - steering
        for motor in RIGHT_MOTORS:
            speeds[motor] = throttle + steering
        self.set_motor_speed(*speeds)

    def tick(self, steps: int = 1) -> None:
        """Re-aim motors along the current body, then advance each motor."""
        self.set_motor_speed(*self.motor_speeds)
        for handle in self.motors:
            self.system.tick_point(handle, steps)

    def motor_positions(self) -> List[Vector2]:
        return [self.system.point(h).position.copy() for h in self.motors]

    def motor_velocities(self) -> List[Vector2]:
        return [self.system.point(h).velocity.copy() for h in self.motors]

    def centroid(self) -> Vector2:
        """Average motor position."""
        total = Vector2()
        for position in self.motor_positions():
            total += position
        return total / NUM_MOTORS

    def heading(self) -> float:
        """Heading of the reference edge (radians)."""
        return self.reference_direction().heading()

    def get_state(self) -> CarState:
        """Get current state snapshot."""
        return CarState(
            motor_positions=self.motor_positions(),
            motor_velocities=self.motor_velocities(),
            motor_speeds=self.motor_speeds,
            centroid=self.centroid(),
            heading=self.heading(),
            body_lengths=[self.system.current_length(s) for s in self.body_lines],
        )
