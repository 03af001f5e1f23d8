"""Island shaping: radial distance term and mask."""

import math

import numpy as np
from numpy.typing import NDArray

# sqrt(2) is the squared-distance scale of a unit square's corner
_CORNER_SCALE = math.sqrt(2.0)


def island_distance(width: int, height: int) -> NDArray[np.float64]:
    """Compute the island distance term for every cell.

    Coordinates are normalized to roughly [-1, 1] around the map center,
    then d = min(1, (dx^2 + dy^2) / sqrt(2)). The center is the true
    half-width, so odd sizes center between pixels.

    Args:
        width: Map width in pixels.
        height: Map height in pixels.

    Returns:
        Array of shape (height, width) in [0, 1]; 0 at the center.
    """
    cx, cy = width / 2, height / 2
    dx = ((np.arange(width, dtype=np.float64) - cx) / cx)[np.newaxis, :]
    dy = ((np.arange(height, dtype=np.float64) - cy) / cy)[:, np.newaxis]
    return np.minimum(1.0, (dx * dx + dy * dy) / _CORNER_SCALE)


def island_mask(x: float, y: float, width: int, height: int) -> float:
    """Island mask at one pixel: 1 at the center, falling to 0 at corners."""
    cx, cy = width / 2, height / 2
    dx = (x - cx) / cx
    dy = (y - cy) / cy
    return 1.0 - min(1.0, (dx * dx + dy * dy) / _CORNER_SCALE)
