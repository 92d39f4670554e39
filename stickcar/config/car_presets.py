"""Pre-configured car layouts."""

from stickcar.vehicle.car import CarConfig


CAR_PRESETS = {
    "default": {
        "name": "Default",
        "description": "Square 150x150 chassis driven along the left edge (S1)",
        "config": CarConfig.default,
    },
    "wide": {
        "name": "Wide",
        "description": "Wide, short chassis that turns slowly",
        "config": CarConfig.wide,
    },
    "compact": {
        "name": "Compact",
        "description": "Small chassis that turns quickly",
        "config": CarConfig.compact,
    },
    "long": {
        "name": "Long",
        "description": "Narrow chassis with a long wheelbase",
        "config": lambda: CarConfig(
            origin_x=340.0,
            origin_y=300.0,
            track=100.0,
            wheelbase=260.0,
        ),
    },
    "right_drive": {
        "name": "Right Drive",
        "description": "Driven along the right edge (S3), which points up the canvas",
        "config": lambda: CarConfig(reference_edge=3),
    },
}


def get_car_config(preset_name: str) -> CarConfig:
    """Get a car configuration by preset name.

    Args:
        preset_name: Name of the preset

    Returns:
        CarConfig instance

    Raises:
        ValueError: If preset name is not found
    """
    if preset_name not in CAR_PRESETS:
        available = ", ".join(CAR_PRESETS.keys())
        raise ValueError(f"Unknown car preset '{preset_name}'. Available: {available}")

    return CAR_PRESETS[preset_name]["config"]()
