"""Tests for island shaping."""

import math

import numpy as np
import pytest

from fantasymap.island import island_distance, island_mask


class TestIslandMask:
    """Tests for the scalar island mask."""

    def test_center_is_one(self) -> None:
        """Mask is exactly 1 at the grid center."""
        assert island_mask(50, 50, 100, 100) == 1.0

    def test_corners_near_zero(self) -> None:
        """Mask is ~0 at all four corners."""
        for x, y in [(0, 0), (99, 0), (0, 99), (99, 99)]:
            assert island_mask(x, y, 100, 100) <= 1e-9

    def test_edge_midpoint(self) -> None:
        """Left edge midpoint: dx=-1, dy=0 gives 1 - 1/sqrt(2)."""
        assert island_mask(0, 50, 100, 100) == pytest.approx(1 - 1 / math.sqrt(2))

    def test_range(self) -> None:
        """Mask stays in [0, 1]."""
        values = [island_mask(x, y, 40, 30) for x in range(40) for y in range(30)]
        assert min(values) >= 0.0
        assert max(values) <= 1.0

    def test_non_square(self) -> None:
        """Normalization is per axis."""
        assert island_mask(0, 25, 200, 50) == pytest.approx(island_mask(25, 0, 50, 200))

    def test_returns_float(self) -> None:
        """The scalar mask is a plain float, not a numpy scalar or array."""
        value = island_mask(3, 4, 10, 10)
        assert type(value) is float


class TestIslandDistance:
    """Tests for the distance grid."""

    def test_shape(self) -> None:
        """Grid shape is (height, width)."""
        assert island_distance(30, 20).shape == (20, 30)

    def test_matches_scalar_mask(self) -> None:
        """Grid distance equals 1 - mask cell by cell."""
        d = island_distance(12, 8)
        for y in range(8):
            for x in range(12):
                assert d[y, x] == pytest.approx(1.0 - island_mask(x, y, 12, 8))

    def test_symmetric(self) -> None:
        """Distance is symmetric about the center."""
        d = island_distance(100, 100)
        assert d[25, 50] == pytest.approx(d[75, 50])
        assert d[50, 25] == pytest.approx(d[50, 75])

    def test_clamped_to_one(self) -> None:
        """Distance never exceeds 1."""
        assert island_distance(64, 64).max() == 1.0
        assert np.all(island_distance(64, 64) >= 0.0)
