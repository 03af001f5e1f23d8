"""Relief shadows cast by light arriving from the west edge."""

import numpy as np
from numpy.typing import NDArray

from .config import ShadowConfig


def compute_shadow_heights(
    elevation: NDArray[np.float64],
    water_level: float,
    slope: float,
) -> NDArray[np.float64]:
    """Trace the light ray height across each row, west to east.

    The ray starts at 0 on column 0 and drops by `slope` per column. Land
    directly to the west raises it to that land's elevation first; water
    never does.

    Args:
        elevation: Elevation field, shape (height, width).
        water_level: Cells at or below this never cast shadows.
        slope: Height lost per column.

    Returns:
        Shadow height field, same shape as elevation.
    """
    height, width = elevation.shape
    shadow = np.zeros((height, width), dtype=np.float64)

    # Rows are independent; only the column walk is sequential
    for x in range(1, width):
        west = elevation[:, x - 1]
        carried = shadow[:, x - 1]
        shadow[:, x] = np.where(
            west > water_level, np.maximum(carried, west), carried
        ) - slope

    return shadow


def darken(
    colors: NDArray[np.uint8],
    mask: NDArray[np.bool_],
    gamma: float,
) -> None:
    """Gamma-compress the RGB channels of masked cells in place.

    Each channel becomes (c/255)^(1/gamma) * 255, truncated. Alpha is
    left untouched.
    """
    rgb = colors[mask, :3].astype(np.float64)
    shaded = np.power(rgb / 255.0, 1.0 / gamma) * 255.0
    colors[mask, :3] = shaded.astype(np.uint8)


def cast_shadow(
    colors: NDArray[np.uint8],
    elevation: NDArray[np.float64],
    water_level: float,
    config: ShadowConfig,
) -> NDArray[np.bool_]:
    """Darken every cell lying below the traced light ray.

    Args:
        colors: RGBA raster, shape (height, width, 4); modified in place.
        elevation: Elevation field, shape (height, width).
        water_level: Water level used when the field was clamped.
        config: Shadow parameters.

    Returns:
        Boolean mask of the cells that were darkened.
    """
    shadow = compute_shadow_heights(elevation, water_level, config.slope)
    shadowed = shadow > elevation
    darken(colors, shadowed, config.gamma)
    return shadowed
