"""Configuration presets for cars."""

from stickcar.config.car_presets import CAR_PRESETS, get_car_config

__all__ = [
    "CAR_PRESETS",
    "get_car_config",
]
