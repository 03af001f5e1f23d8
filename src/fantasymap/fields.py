"""Field generation: elevation and moisture."""

import numpy as np
from numpy.typing import NDArray

from .config import FieldConfig
from .island import island_distance
from .noise import NoiseSource, noise_axis, synthesize_grid


def _shape(field: NDArray[np.float64], exponent: float) -> NDArray[np.float64]:
    # Fractional powers of negative values are NaN; clamp_to_water_level
    # absorbs them for elevation.
    with np.errstate(invalid="ignore"):
        return np.power(field, exponent)


def make_elevation(
    noise: NoiseSource,
    width: int,
    height: int,
    config: FieldConfig,
    island_percent: float,
) -> NDArray[np.float64]:
    """Generate the elevation field.

    Blends fractal noise with the island mask so land gathers toward the
    center, then shapes it with the elevation exponent.

    Args:
        noise: Elevation noise source.
        width: Map width in pixels.
        height: Map height in pixels.
        config: Elevation field parameters.
        island_percent: Weight of the island mask in [0, 1].

    Returns:
        2D elevation array of shape (height, width), not yet clamped.
    """
    xs = noise_axis(width, config.amplitude)
    ys = noise_axis(height, config.amplitude)

    elevation = synthesize_grid(noise, xs, ys, config.gains)

    d = island_distance(width, height)
    elevation = (1.0 - island_percent) * elevation + island_percent * (1.0 - d)

    return _shape(elevation, config.exponent)


def make_moisture(
    noise: NoiseSource,
    width: int,
    height: int,
    config: FieldConfig,
) -> NDArray[np.float64]:
    """Generate the moisture field.

    Args:
        noise: Moisture noise source.
        width: Map width in pixels.
        height: Map height in pixels.
        config: Moisture field parameters.

    Returns:
        2D moisture array of shape (height, width).
    """
    xs = noise_axis(width, config.amplitude)
    ys = noise_axis(height, config.amplitude)

    moisture = synthesize_grid(noise, xs, ys, config.gains)
    return _shape(moisture, config.exponent)


def clamp_to_water_level(
    elevation: NDArray[np.float64],
    water_level: float,
) -> NDArray[np.float64]:
    """Flatten everything below the water level onto it.

    Args:
        elevation: Shaped elevation field.
        water_level: Elevation floor.

    Returns:
        New array with every cell >= water_level.
    """
    # fmax replaces NaN with the water level as well
    return np.fmax(elevation, water_level)
