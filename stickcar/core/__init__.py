"""Core simulation components."""

from stickcar.core.vector import Vector2
from stickcar.core.constraints import ConstraintSystem, Point, Stick, STEP_SIZE
from stickcar.core.world import World

__all__ = [
    "Vector2",
    "ConstraintSystem",
    "Point",
    "Stick",
    "STEP_SIZE",
    "World",
]
