"""Noise map generation parameters and TOML config loading."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError

# Stand-in for non-positive scales, keeps the sample divisor non-zero
MIN_SCALE = 1e-4


class GenerationParameters(BaseModel):
    """Immutable input bundle for one noise map.

    Out-of-range values are accepted as given; use clamped() to get the
    values generation actually runs with.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=100, description="Map width in cells")
    height: int = Field(default=100, description="Map height in cells")
    seed: int = Field(default=0, description="Seed for octave offsets")
    scale: float = Field(default=25.0, description="Cells per noise unit")
    octaves: int = Field(default=4, description="Number of noise layers")
    persistence: float = Field(
        default=0.5, description="Amplitude multiplier per octave"
    )
    lacunarity: float = Field(
        default=2.0, description="Frequency multiplier per octave"
    )
    offset: tuple[float, float] = Field(
        default=(0.0, 0.0), description="Sample offset added to every octave"
    )

    def clamped(self) -> "GenerationParameters":
        """Return a copy with invalid values replaced by safe defaults.

        Returns self unchanged when nothing needs clamping.
        """
        updates: dict[str, Any] = {}
        if self.width < 1:
            updates["width"] = 1
        if self.height < 1:
            updates["height"] = 1
        if self.octaves < 0:
            updates["octaves"] = 0
        # Negated comparisons also catch NaN
        if not self.scale > 0:
            updates["scale"] = MIN_SCALE
        if not self.lacunarity >= 1:
            updates["lacunarity"] = 1.0

        if not updates:
            return self
        return self.model_copy(update=updates)


class Config(BaseModel):
    """Complete configuration file contents."""

    model_config = ConfigDict(extra="forbid")

    noise: GenerationParameters = Field(default_factory=GenerationParameters)

    def with_overrides(self, **overrides: Any) -> "Config":
        """Return a copy with every non-None override applied to noise.

        Args:
            **overrides: GenerationParameters field values.

        Returns:
            New Config (self if there is nothing to apply).
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        noise = GenerationParameters.model_validate({**self.noise.model_dump(), **values})
        return Config(noise=noise)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or does
            not match the config schema.
    """
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed TOML in {config_path}: {e}") from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e
