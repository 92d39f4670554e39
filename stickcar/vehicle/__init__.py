"""Stick-built vehicle."""

from stickcar.vehicle.car import Car, CarConfig, CarState, MotorPosition

__all__ = [
    "Car",
    "CarConfig",
    "CarState",
    "MotorPosition",
]
