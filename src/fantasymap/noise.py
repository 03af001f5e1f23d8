"""Noise sources and the reciprocal-weighted octave blend.

A noise source is any object that samples a seeded, continuous 2D field.
Fields are built by sampling one source at several gains and weighting
each octave by 1/gain, so low frequencies dominate.
"""

from typing import Protocol, Sequence

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex


class NoiseSource(Protocol):
    """Seeded 2D coherent noise."""

    def sample(self, x: float, y: float) -> float:
        """Sample the field at a single point."""
        ...

    def sample_grid(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        """Sample every (xs[j], ys[i]) pair.

        Returns:
            Array of shape (len(ys), len(xs)).
        """
        ...


class OpenSimplexNoise:
    """OpenSimplex noise normalized to [0, 1]."""

    def __init__(self, seed: int):
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        return (self._simplex.noise2(x, y) + 1.0) / 2.0

    def sample_grid(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        raw = self._simplex.noise2array(
            np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)
        )
        return (raw.astype(np.float64) + 1.0) / 2.0

    def __repr__(self) -> str:
        return f"OpenSimplexNoise(seed={self.seed})"


def noise_axis(n: int, amplitude: float) -> NDArray[np.float64]:
    """Map pixel indices 0..n-1 to noise-space coordinates.

    The map center lands on 0 and the edges on roughly +/- amplitude. The
    center is the true half-width n / 2, so odd sizes center between pixels.

    Args:
        n: Number of pixels along the axis.
        amplitude: Noise-space extent of half the axis.

    Returns:
        1D array of n coordinates.
    """
    pixels = np.arange(n, dtype=np.float64)
    return amplitude * (2.0 * (pixels - n / 2) / n)


def synthesize(
    noise: NoiseSource,
    x: float,
    y: float,
    gains: Sequence[float],
) -> float:
    """Blend octaves of noise at a single point.

    Each octave samples noise(g*x, g*y) and is weighted by 1/g; the result
    is the weighted mean, so it stays in the source's output range.

    Args:
        noise: Noise source to sample.
        x: Noise-space x coordinate.
        y: Noise-space y coordinate.
        gains: Octave frequency multipliers.

    Returns:
        Blended noise value.
    """
    total = 0.0
    weight_sum = 0.0
    for gain in gains:
        total += (1.0 / gain) * noise.sample(gain * x, gain * y)
        weight_sum += 1.0 / gain
    return total / weight_sum


def synthesize_grid(
    noise: NoiseSource,
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    gains: Sequence[float],
) -> NDArray[np.float64]:
    """Blend octaves of noise over a whole grid.

    Same weighting as synthesize(), applied to every (xs[j], ys[i]) pair.

    Args:
        noise: Noise source to sample.
        xs: Noise-space x coordinates (one per column).
        ys: Noise-space y coordinates (one per row).
        gains: Octave frequency multipliers.

    Returns:
        Array of shape (len(ys), len(xs)).
    """
    result = np.zeros((len(ys), len(xs)), dtype=np.float64)
    weight_sum = 0.0

    for gain in gains:
        result += (1.0 / gain) * noise.sample_grid(gain * xs, gain * ys)
        weight_sum += 1.0 / gain

    result /= weight_sum
    return result
