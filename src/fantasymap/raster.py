"""Raster orchestration: seeds in, RGBA pixels out."""

from typing import Callable

import numpy as np
import structlog
from numpy.typing import NDArray
from pydantic import BaseModel, Field, model_validator

from .biomes import BiomeTable, classify_grid, default_biome_table
from .config import MapConfig
from .exceptions import RasterNotGeneratedError
from .fields import clamp_to_water_level, make_elevation, make_moisture
from .noise import NoiseSource, OpenSimplexNoise
from .shadow import cast_shadow

logger = structlog.get_logger()

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Seeds(BaseModel, frozen=True):
    """Elevation and moisture seeds; the two must differ."""

    elevation: int = Field(ge=INT64_MIN, le=INT64_MAX)
    moisture: int = Field(ge=INT64_MIN, le=INT64_MAX)

    @model_validator(mode="after")
    def check_seeds_differ(self) -> "Seeds":
        if self.elevation == self.moisture:
            raise ValueError(
                f"elevation and moisture seeds must differ (both {self.elevation})"
            )
        return self

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> "Seeds":
        """Draw two distinct non-negative 63-bit seeds."""
        rng = rng if rng is not None else np.random.default_rng()
        elevation = int(rng.integers(0, INT64_MAX, dtype=np.int64))
        moisture = int(rng.integers(0, INT64_MAX, dtype=np.int64))
        while moisture == elevation:
            moisture = int(rng.integers(0, INT64_MAX, dtype=np.int64))

        logger.info("seeds_drawn", elevation=elevation, moisture=moisture)
        return cls(elevation=elevation, moisture=moisture)


class Raster:
    """Owns the elevation, moisture and color grids of one map.

    Grids are None until generate() is called. Each generate() call
    allocates fresh grids and binds them together once all three are
    complete; apply_shadow() modifies the color grid in place.
    """

    def __init__(
        self,
        config: MapConfig | None = None,
        noise_factory: Callable[[int], NoiseSource] = OpenSimplexNoise,
        biome_table: BiomeTable | None = None,
    ):
        self.config = config if config is not None else MapConfig()
        self.noise_factory = noise_factory
        self.biome_table = (
            biome_table
            if biome_table is not None
            else default_biome_table(
                self.config.water_level, self.config.shoreline_width
            )
        )

        self.seeds: Seeds | None = None
        self.elevation: NDArray[np.float64] | None = None
        self.moisture: NDArray[np.float64] | None = None
        self.colors: NDArray[np.uint8] | None = None

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def generated(self) -> bool:
        """Whether generate() has completed at least once."""
        return self.colors is not None

    def generate(self, seeds: Seeds) -> None:
        """Rebuild all three grids from a seed pair.

        Args:
            seeds: Elevation and moisture seeds.
        """
        config = self.config
        width, height = config.width, config.height

        logger.debug(
            "raster_generating",
            width=width,
            height=height,
            elevation_seed=seeds.elevation,
            moisture_seed=seeds.moisture,
        )

        elevation_noise = self.noise_factory(seeds.elevation)
        moisture_noise = self.noise_factory(seeds.moisture)

        elevation = make_elevation(
            elevation_noise, width, height, config.elevation, config.island_percent
        )
        moisture = make_moisture(moisture_noise, width, height, config.moisture)
        elevation = clamp_to_water_level(elevation, config.water_level)

        colors = classify_grid(elevation, moisture, self.biome_table)

        self.seeds = seeds
        self.elevation = elevation
        self.moisture = moisture
        self.colors = colors

        land_fraction = float(np.mean(elevation > config.water_level))
        logger.info(
            "raster_generated",
            width=width,
            height=height,
            elevation_seed=seeds.elevation,
            moisture_seed=seeds.moisture,
            land_fraction=round(land_fraction, 4),
        )

    def apply_shadow(self) -> int:
        """Darken cells shadowed by terrain to their west.

        Repeated calls compound: a cell shadowed twice is darkened twice.

        Returns:
            Number of cells darkened.

        Raises:
            RasterNotGeneratedError: If generate() has not been called.
        """
        if self.colors is None or self.elevation is None:
            raise RasterNotGeneratedError("apply_shadow() called before generate()")

        shadowed = cast_shadow(
            self.colors, self.elevation, self.config.water_level, self.config.shadow
        )
        count = int(np.count_nonzero(shadowed))
        logger.info("shadow_applied", shadowed_cells=count)
        return count

    def pixels(self) -> bytes:
        """Row-major RGBA bytes, 4 per pixel.

        Raises:
            RasterNotGeneratedError: If generate() has not been called.
        """
        if self.colors is None:
            raise RasterNotGeneratedError("pixels() called before generate()")
        return self.colors.tobytes()
