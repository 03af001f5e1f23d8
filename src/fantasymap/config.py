"""Map generation configuration models and TOML preset loading."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class FieldConfig(BaseModel):
    """Fractal noise and shaping parameters for a single scalar field."""

    exponent: float = Field(default=1.0, description="Power applied after blending")
    amplitude: float = Field(
        default=4.0, description="Noise-space extent of half the map"
    )
    gains: list[float] = Field(
        default_factory=lambda: [1.0, 2.0, 4.0],
        min_length=1,
        description="Octave frequency multipliers, each weighted by 1/gain",
    )

    @field_validator("gains")
    @classmethod
    def check_gains_positive(cls, gains: list[float]) -> list[float]:
        if any(g <= 0 for g in gains):
            raise ValueError("gains must be positive")
        return gains


class ShadowConfig(BaseModel):
    """Relief shadow parameters."""

    slope: float = Field(
        default=0.002, description="Light ray height lost per column"
    )
    gamma: float = Field(
        default=0.5, gt=0, description="Gamma for shadowed cells (<1 darkens)"
    )


class MapConfig(BaseModel):
    """Complete map generation configuration."""

    width: int = Field(default=1200, ge=1, description="Map width in pixels")
    height: int = Field(default=1000, ge=1, description="Map height in pixels")

    elevation: FieldConfig = Field(
        default_factory=lambda: FieldConfig(exponent=2.0, amplitude=8.0)
    )
    moisture: FieldConfig = Field(
        default_factory=lambda: FieldConfig(exponent=1.0, amplitude=4.0)
    )

    island_percent: float = Field(
        default=0.25, ge=0.0, le=1.0, description="Weight of the island mask"
    )
    water_level: float = Field(
        default=0.25, description="Elevation floor; cells at it are ocean"
    )
    shoreline_width: float = Field(
        default=0.025, ge=0.0, description="Beach band height above water level"
    )
    shadow: ShadowConfig = Field(default_factory=ShadowConfig)


def load_config(config_path: Path) -> MapConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed MapConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return MapConfig.model_validate(data)


def _configs_dir() -> Path:
    return Path(__file__).parent.parent.parent / "configs"


def find_config(name: str) -> Path:
    """Find a config file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends with .toml
    2. configs/{name}.toml

    Args:
        name: Preset name or path.

    Returns:
        Path to the config file.

    Raises:
        FileNotFoundError: If config file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Config file not found: {name}")

    config_path = _configs_dir() / f"{name}.toml"
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Config '{name}' not found in {_configs_dir()}. "
        f"Available configs: {list_configs()}"
    )


def list_configs() -> list[str]:
    """List available preset names."""
    configs_dir = _configs_dir()
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))
