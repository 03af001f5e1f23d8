"""Deterministic fantasy island map generation.

Two seeds drive an elevation and a moisture field; the fields are shaped
into an island, classified into biome colors, and optionally shaded with
west-lit relief shadows.
"""

from .biomes import (
    BIOME_COLORS,
    Biome,
    BiomeTable,
    ElevationBand,
    MoistureBand,
    classify,
    classify_biome,
    classify_grid,
    default_biome_table,
)
from .config import (
    FieldConfig,
    MapConfig,
    ShadowConfig,
    find_config,
    list_configs,
    load_config,
)
from .exceptions import MapError, RasterNotGeneratedError
from .fields import clamp_to_water_level, make_elevation, make_moisture
from .island import island_distance, island_mask
from .noise import NoiseSource, OpenSimplexNoise, noise_axis, synthesize, synthesize_grid
from .raster import Raster, Seeds
from .shadow import cast_shadow, compute_shadow_heights, darken

__all__ = [
    # Config
    "FieldConfig",
    "MapConfig",
    "ShadowConfig",
    "find_config",
    "list_configs",
    "load_config",
    # Noise
    "NoiseSource",
    "OpenSimplexNoise",
    "noise_axis",
    "synthesize",
    "synthesize_grid",
    # Fields
    "island_distance",
    "island_mask",
    "make_elevation",
    "make_moisture",
    "clamp_to_water_level",
    # Biomes
    "Biome",
    "BIOME_COLORS",
    "BiomeTable",
    "ElevationBand",
    "MoistureBand",
    "classify",
    "classify_biome",
    "classify_grid",
    "default_biome_table",
    # Shadow
    "cast_shadow",
    "compute_shadow_heights",
    "darken",
    # Raster
    "Raster",
    "Seeds",
    # Exceptions
    "MapError",
    "RasterNotGeneratedError",
]
