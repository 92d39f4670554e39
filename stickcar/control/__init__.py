"""Driver input handling."""

from stickcar.control.input import Axis, InputConfig, InputController, InputState, Key

__all__ = [
    "Axis",
    "InputConfig",
    "InputController",
    "InputState",
    "Key",
]
