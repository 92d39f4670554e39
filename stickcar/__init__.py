"""
stickcar - A four-motor car built from distance-constrained point masses.

Features:
- Two-point distance constraints resolved by direct positional correction
- Braced quadrilateral car body driven by four motors
- Differential throttle/steering drive
- Pygame renderer with key-repeat arrow-key input
"""

__version__ = "0.1.0"

from stickcar.core.vector import Vector2
from stickcar.core.constraints import ConstraintSystem, Point, Stick
from stickcar.core.world import World
from stickcar.vehicle.car import Car, CarConfig

__all__ = [
    "Vector2",
    "ConstraintSystem",
    "Point",
    "Stick",
    "World",
    "Car",
    "CarConfig",
    "__version__",
]
