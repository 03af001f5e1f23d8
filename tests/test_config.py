"""Tests for map configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fantasymap.config import (
    FieldConfig,
    MapConfig,
    ShadowConfig,
    find_config,
    list_configs,
    load_config,
)


class TestMapConfig:
    """Tests for MapConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults match the reference constants."""
        config = MapConfig()
        assert config.width == 1200
        assert config.height == 1000
        assert config.elevation.exponent == 2.0
        assert config.elevation.amplitude == 8.0
        assert config.elevation.gains == [1.0, 2.0, 4.0]
        assert config.moisture.exponent == 1.0
        assert config.moisture.amplitude == 4.0
        assert config.moisture.gains == [1.0, 2.0, 4.0]
        assert config.island_percent == 0.25
        assert config.water_level == 0.25
        assert config.shadow.slope == 0.002
        assert config.shadow.gamma == 0.5

    def test_island_percent_range(self) -> None:
        """Island percent outside [0, 1] is rejected."""
        with pytest.raises(ValidationError):
            MapConfig(island_percent=1.5)

    def test_zero_width_rejected(self) -> None:
        """Width must be at least 1."""
        with pytest.raises(ValidationError):
            MapConfig(width=0)

    def test_gains_must_be_positive(self) -> None:
        """Zero or negative gains are rejected."""
        with pytest.raises(ValidationError):
            FieldConfig(gains=[1.0, 0.0])

    def test_gains_must_not_be_empty(self) -> None:
        """At least one gain is required."""
        with pytest.raises(ValidationError):
            FieldConfig(gains=[])

    def test_non_power_of_two_gains_allowed(self) -> None:
        """Gains need not be powers of two."""
        config = FieldConfig(gains=[1.0, 3.0, 7.5])
        assert config.gains == [1.0, 3.0, 7.5]

    def test_gamma_must_be_positive(self) -> None:
        """Gamma of zero is rejected."""
        with pytest.raises(ValidationError):
            ShadowConfig(gamma=0.0)


class TestLoadConfig:
    """Tests for TOML loading."""

    def test_load_partial_file(self, tmp_path: Path) -> None:
        """Missing keys fall back to defaults."""
        path = tmp_path / "small.toml"
        path.write_text(
            "width = 64\nheight = 48\n\n[elevation]\nexponent = 1.5\n"
        )
        config = load_config(path)
        assert config.width == 64
        assert config.height == 48
        assert config.elevation.exponent == 1.5
        assert config.elevation.gains == [1.0, 2.0, 4.0]
        assert config.moisture.exponent == 1.0

    def test_invalid_values_rejected(self, tmp_path: Path) -> None:
        """Out-of-range values fail validation."""
        path = tmp_path / "bad.toml"
        path.write_text("island_percent = 2.0\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_default_preset_matches_defaults(self) -> None:
        """The shipped default preset equals MapConfig()."""
        assert load_config(find_config("default")) == MapConfig()


class TestFindConfig:
    """Tests for preset discovery."""

    def test_presets_listed(self) -> None:
        """Shipped presets are discoverable."""
        names = list_configs()
        assert "default" in names
        assert "archipelago" in names

    def test_every_preset_loads(self) -> None:
        """Every shipped preset validates."""
        for name in list_configs():
            load_config(find_config(name))

    def test_explicit_path(self, tmp_path: Path) -> None:
        """A .toml path is returned as-is."""
        path = tmp_path / "mine.toml"
        path.write_text("")
        assert find_config(str(path)) == path

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        """A missing explicit path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            find_config(str(tmp_path / "missing.toml"))

    def test_unknown_preset_raises(self) -> None:
        """An unknown preset name raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Available configs"):
            find_config("no_such_preset")
