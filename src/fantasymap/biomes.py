"""Biome classification: (elevation, moisture) to RGBA via an ordered table.

The table is elevation-major: bands are scanned in ascending order and the
first band whose upper bound admits the elevation wins. Within that band
the moisture sub-bands are scanned the same way. Bounds are exclusive
(boundary values belong to the higher band) unless a band is marked
inclusive, and the final band and final sub-band have no bound.
"""

from enum import Enum

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, model_validator

Color = tuple[int, int, int, int]


class Biome(str, Enum):
    """Biomes of the reference palette."""

    OCEAN = "ocean"
    BEACH = "beach"
    SUBTROPICAL_DESERT = "subtropical_desert"
    GRASSLAND = "grassland"
    TROPICAL_SEASONAL_FOREST = "tropical_seasonal_forest"
    TROPICAL_RAIN_FOREST = "tropical_rain_forest"
    TEMPERATE_DESERT = "temperate_desert"
    TEMPERATE_DECIDUOUS_FOREST = "temperate_deciduous_forest"
    TEMPERATE_RAIN_FOREST = "temperate_rain_forest"
    SHRUBLAND = "shrubland"
    TAIGA = "taiga"
    SCORCHED = "scorched"
    BARE = "bare"
    TUNDRA = "tundra"
    SNOW = "snow"

    @property
    def color(self) -> Color:
        """RGBA color used when drawing this biome."""
        return BIOME_COLORS[self]


BIOME_COLORS: dict[Biome, Color] = {
    Biome.OCEAN: (20, 52, 164, 255),
    Biome.BEACH: (157, 145, 122, 255),
    Biome.SUBTROPICAL_DESERT: (203, 210, 161, 255),
    Biome.GRASSLAND: (143, 169, 96, 255),
    Biome.TROPICAL_SEASONAL_FOREST: (101, 151, 79, 255),
    Biome.TROPICAL_RAIN_FOREST: (69, 117, 88, 255),
    Biome.TEMPERATE_DESERT: (203, 210, 161, 255),
    Biome.TEMPERATE_DECIDUOUS_FOREST: (113, 147, 95, 255),
    Biome.TEMPERATE_RAIN_FOREST: (85, 134, 90, 255),
    Biome.SHRUBLAND: (139, 152, 122, 255),
    Biome.TAIGA: (156, 170, 124, 255),
    Biome.SCORCHED: (85, 85, 85, 255),
    Biome.BARE: (136, 136, 136, 255),
    Biome.TUNDRA: (187, 187, 172, 255),
    Biome.SNOW: (221, 221, 227, 255),
}


class MoistureBand(BaseModel, frozen=True):
    """Moisture sub-band: applies while moisture < upper (None = rest)."""

    upper: float | None
    biome: Biome


class ElevationBand(BaseModel, frozen=True):
    """Elevation band with its moisture sub-bands in ascending order."""

    upper: float | None
    moisture_bands: tuple[MoistureBand, ...]
    inclusive: bool = False

    @model_validator(mode="after")
    def check_moisture_bands(self) -> "ElevationBand":
        _check_ascending([b.upper for b in self.moisture_bands], "moisture")
        return self

    def admits(self, elevation: float) -> bool:
        if self.upper is None:
            return True
        if self.inclusive:
            return elevation <= self.upper
        return elevation < self.upper

    def admits_grid(self, elevation: NDArray[np.float64]) -> NDArray[np.bool_]:
        if self.upper is None:
            return np.ones(elevation.shape, dtype=bool)
        if self.inclusive:
            return elevation <= self.upper
        return elevation < self.upper


class BiomeTable(BaseModel, frozen=True):
    """Ordered elevation bands covering every (elevation, moisture) pair."""

    bands: tuple[ElevationBand, ...]

    @model_validator(mode="after")
    def check_bands(self) -> "BiomeTable":
        _check_ascending([b.upper for b in self.bands], "elevation")
        return self


def _check_ascending(uppers: list[float | None], name: str) -> None:
    """Bounds must ascend and end with exactly one catch-all."""
    if not uppers:
        raise ValueError(f"at least one {name} band is required")
    if uppers[-1] is not None:
        raise ValueError(f"last {name} band must be a catch-all (upper=None)")
    bounded = uppers[:-1]
    if any(u is None for u in bounded):
        raise ValueError(f"only the last {name} band may be a catch-all")
    if any(a > b for a, b in zip(bounded, bounded[1:])):
        raise ValueError(f"{name} band bounds must be ascending")


def _bands(*pairs: tuple[float | None, Biome]) -> tuple[MoistureBand, ...]:
    return tuple(MoistureBand(upper=u, biome=b) for u, b in pairs)


_LAND_BANDS: tuple[ElevationBand, ...] = (
    ElevationBand(
        upper=0.5,
        moisture_bands=_bands(
            (0.16, Biome.SUBTROPICAL_DESERT),
            (0.33, Biome.GRASSLAND),
            (0.66, Biome.TROPICAL_SEASONAL_FOREST),
            (None, Biome.TROPICAL_RAIN_FOREST),
        ),
    ),
    ElevationBand(
        upper=0.75,
        moisture_bands=_bands(
            (0.16, Biome.TEMPERATE_DESERT),
            (0.5, Biome.GRASSLAND),
            (0.83, Biome.TEMPERATE_DECIDUOUS_FOREST),
            (None, Biome.TEMPERATE_RAIN_FOREST),
        ),
    ),
    ElevationBand(
        upper=0.9,
        moisture_bands=_bands(
            (0.33, Biome.TEMPERATE_DESERT),
            (0.66, Biome.SHRUBLAND),
            (None, Biome.TAIGA),
        ),
    ),
    ElevationBand(
        upper=None,
        moisture_bands=_bands(
            (0.1, Biome.SCORCHED),
            (0.2, Biome.BARE),
            (0.5, Biome.TUNDRA),
            (None, Biome.SNOW),
        ),
    ),
)


def default_biome_table(
    water_level: float = 0.25,
    shoreline_width: float = 0.025,
) -> BiomeTable:
    """Build the reference palette.

    Water is the only inclusive band, so cells clamped to exactly the
    water level classify as ocean. Land bands lying entirely below the
    top of the beach can never match and are left out, so any water
    level yields a valid table.

    Args:
        water_level: Elevation at or below which cells are ocean.
        shoreline_width: Height of the beach band above the water level.

    Returns:
        BiomeTable with water, beach, and whichever of lowland, midland,
        highland and peak lie above the beach.
    """
    shore_top = water_level + shoreline_width
    land = tuple(
        band for band in _LAND_BANDS if band.upper is None or band.upper > shore_top
    )
    return BiomeTable(
        bands=(
            ElevationBand(
                upper=water_level,
                inclusive=True,
                moisture_bands=_bands((None, Biome.OCEAN)),
            ),
            ElevationBand(
                upper=shore_top,
                moisture_bands=_bands((None, Biome.BEACH)),
            ),
        )
        + land
    )


def classify_biome(elevation: float, moisture: float, table: BiomeTable) -> Biome:
    """Look up the biome for one (elevation, moisture) pair."""
    for band in table.bands:
        if not band.admits(elevation):
            continue
        for sub in band.moisture_bands:
            if sub.upper is None or moisture < sub.upper:
                return sub.biome
    # Unreachable: the validator guarantees trailing catch-alls
    raise AssertionError("biome table is not total")


def classify(elevation: float, moisture: float, table: BiomeTable) -> Color:
    """Classify one cell to an RGBA color."""
    return classify_biome(elevation, moisture, table).color


def classify_grid(
    elevation: NDArray[np.float64],
    moisture: NDArray[np.float64],
    table: BiomeTable,
) -> NDArray[np.uint8]:
    """Classify every cell of the fields to an RGBA color.

    Args:
        elevation: Elevation field, shape (height, width).
        moisture: Moisture field, same shape.
        table: Biome lookup table.

    Returns:
        uint8 array of shape (height, width, 4).
    """
    height, width = elevation.shape
    colors = np.zeros((height, width, 4), dtype=np.uint8)
    unassigned = np.ones((height, width), dtype=bool)

    for band in table.bands:
        in_band = unassigned & band.admits_grid(elevation)
        unassigned &= ~in_band

        for sub in band.moisture_bands:
            if sub.upper is None:
                cells = in_band
            else:
                cells = in_band & (moisture < sub.upper)
            colors[cells] = sub.biome.color
            in_band = in_band & ~cells

    return colors
