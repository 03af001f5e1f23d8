"""Shared test fixtures for map generation tests."""

from typing import Callable

import numpy as np
import pytest
from numpy.typing import NDArray

from fantasymap.config import FieldConfig, MapConfig


class ConstantNoise:
    """Noise source returning the same value everywhere."""

    def __init__(self, value: float):
        self.value = value

    def sample(self, x: float, y: float) -> float:
        return self.value

    def sample_grid(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        return np.full((len(ys), len(xs)), self.value, dtype=np.float64)


class FunctionNoise:
    """Noise source backed by a plain function of (x, y)."""

    def __init__(self, fn: Callable[[float, float], float]):
        self.fn = fn

    def sample(self, x: float, y: float) -> float:
        return self.fn(x, y)

    def sample_grid(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        return np.array([[self.fn(x, y) for x in xs] for y in ys], dtype=np.float64)


@pytest.fixture
def small_config() -> MapConfig:
    """32x24 map with reference parameters."""
    return MapConfig(width=32, height=24)


@pytest.fixture
def flat_config() -> MapConfig:
    """4x4 map, no island bias, linear exponents."""
    return MapConfig(
        width=4,
        height=4,
        island_percent=0.0,
        water_level=0.25,
        elevation=FieldConfig(exponent=1.0, amplitude=8.0),
        moisture=FieldConfig(exponent=1.0, amplitude=4.0),
    )


def seeded_constant_noise(values: dict[int, float]) -> Callable[[int], ConstantNoise]:
    """Noise factory mapping each seed to a constant-valued source."""

    def factory(seed: int) -> ConstantNoise:
        return ConstantNoise(values[seed])

    return factory
