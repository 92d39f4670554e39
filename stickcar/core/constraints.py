"""Point masses joined by distance constraints ("sticks").

Points and sticks are stored in a ConstraintSystem and refer to each other
by integer handles. A point keeps the handles of the sticks attached to it;
a stick keeps the handles of its two endpoints and the rest length recorded
when it was created.

Resolving a stick is a direct positional correction:
- Unconstrained: both endpoints move half the error along the stick axis
- Fixed point: only the other endpoint moves, by the full error
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from stickcar.core.vector import EPSILON, Vector2

logger = logging.getLogger(__name__)

# Position advance per step is velocity * STEP_SIZE
STEP_SIZE = 1

PointHandle = int
StickHandle = int


@dataclass
class Point:
    """Mass-less particle with position and velocity."""
    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    radius: float = 5.0                               # Display radius (px)
    sticks: List[StickHandle] = field(default_factory=list)


@dataclass(frozen=True)
class Stick:
    """Distance constraint between two points.

    Frozen: the rest length never changes once the stick exists.
    """
    point1: PointHandle
    point2: PointHandle
    rest_length: float
    label: str = ""

    def other(self, point: PointHandle) -> PointHandle:
        """Return the endpoint that is not `point`."""
        if point == self.point1:
            return self.point2
        if point == self.point2:
            return self.point1
        raise ValueError(f"Point {point} is not an endpoint of stick {self.label!r}")


class ConstraintSystem:
    """Arena owning every point and stick of a simulation."""

    def __init__(self):
        self._points: List[Point] = []
        self._sticks: List[Stick] = []

    @property
    def points(self) -> Sequence[Point]:
        return tuple(self._points)

    @property
    def sticks(self) -> Sequence[Stick]:
        return tuple(self._sticks)

    def point(self, handle: PointHandle) -> Point:
        """Look up a point by handle."""
        if not 0 <= handle < len(self._points):
            raise IndexError(f"Unknown point handle {handle}")
        return self._points[handle]

    def stick(self, handle: StickHandle) -> Stick:
        """Look up a stick by handle."""
        if not 0 <= handle < len(self._sticks):
            raise IndexError(f"Unknown stick handle {handle}")
        return self._sticks[handle]

    def stick_handles_for(self, point: PointHandle) -> Tuple[StickHandle, ...]:
        return tuple(self.point(point).sticks)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_point(self, position: Vector2, radius: float = 5.0) -> PointHandle:
        """Add a standalone point at `position` (copied)."""
        self._points.append(Point(position=position.copy(), radius=radius))
        return len(self._points) - 1

    def stick_between_points(
        self,
        point1: PointHandle,
        point2: PointHandle,
        label: str = ""
    ) -> StickHandle:
        """Join two existing points with a stick.

        The rest length is the distance between the points right now.
        Coincident points give a zero rest length, which is allowed.

        Raises:
            IndexError: If either handle is unknown
            ValueError: If both handles name the same point
        """
        p1 = self.point(point1)
        p2 = self.point(point2)
        if point1 == point2:
            raise ValueError("A stick needs two distinct points")

        rest_length = p1.position.distance_to(p2.position)
        self._sticks.append(Stick(point1, point2, rest_length, label))
        handle = len(self._sticks) - 1

        p1.sticks.append(handle)
        p2.sticks.append(handle)

        logger.debug("Stick %d %r: points (%d, %d) rest length %.3f",
                     handle, label, point1, point2, rest_length)
        return handle

    def stick_between_positions(
        self,
        position1: Vector2,
        position2: Vector2,
        label: str = "",
        radius: float = 5.0
    ) -> StickHandle:
        """Create two new points and join them with a stick."""
        point1 = self.add_point(position1, radius)
        point2 = self.add_point(position2, radius)
        return self.stick_between_points(point1, point2, label)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick_point(self, handle: PointHandle, steps: int = 1) -> None:
        """Advance a point by `steps` velocity steps, then resolve its sticks.

        The attached sticks are resolved once, after all steps, in the
        order they were attached.
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        point = self.point(handle)
        for _ in range(steps):
            point.position += point.velocity * STEP_SIZE

        for stick in point.sticks:
            self.update_stick(stick)

    def update_stick(
        self,
        handle: StickHandle,
        fixed_point: Optional[PointHandle] = None
    ) -> None:
        """Move the endpoints of a stick back to its rest length.

        Args:
            handle: Stick to resolve
            fixed_point: Optional endpoint that must stay where it is.
                        If None the correction is split between both ends.

        Raises:
            ValueError: If fixed_point is not an endpoint of the stick
        """
        stick = self.stick(handle)
        p1 = self._points[stick.point1]
        p2 = self._points[stick.point2]

        if fixed_point is not None:
            movable = self._points[stick.other(fixed_point)]
            anchor = self._points[fixed_point]

        current = p1.position.distance_to(p2.position)
        if current < EPSILON:
            # Coincident endpoints: no axis to correct along
            logger.debug("Stick %d %r has coincident endpoints, skipping",
                         handle, stick.label)
            return

        delta = stick.rest_length - current

        if fixed_point is None:
            correction = (p1.position - p2.position).normalized() * (delta / 2)
            p1.position += correction
            p2.position -= correction
        else:
            correction = (anchor.position - movable.position).normalized() * delta
            movable.position -= correction

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def current_length(self, handle: StickHandle) -> float:
        stick = self.stick(handle)
        return self._points[stick.point1].position.distance_to(
            self._points[stick.point2].position
        )

    def direction(self, handle: StickHandle) -> Vector2:
        """Unit vector from point1 to point2 (zero if they coincide)."""
        stick = self.stick(handle)
        return (self._points[stick.point2].position
                - self._points[stick.point1].position).normalized()

    def mid_point(self, handle: StickHandle) -> Vector2:
        """Point half a rest length from point1 along the stick.

        Equals the geometric midpoint only while the constraint holds.
        """
        stick = self.stick(handle)
        return (self._points[stick.point1].position
                + self.direction(handle) * (stick.rest_length / 2))
