"""Seeded multi-octave noise map generation.

Produces deterministic 2D heightmaps in [0, 1] from coherent Perlin noise.
"""

from .config import MIN_SCALE, Config, GenerationParameters, load_config
from .exceptions import ConfigError, InvalidParametersError, NoiseMapError
from .generator import generate_noise_map, inverse_lerp
from .offsets import generate_octave_offsets
from .perlin import perlin_noise
from .validation import (
    ValidationResult,
    generate_noise_map_strict,
    validate_parameters,
)

__all__ = [
    # Config
    "Config",
    "GenerationParameters",
    "MIN_SCALE",
    "load_config",
    # Generation
    "generate_noise_map",
    "generate_noise_map_strict",
    "generate_octave_offsets",
    "inverse_lerp",
    "perlin_noise",
    # Validation
    "ValidationResult",
    "validate_parameters",
    # Exceptions
    "NoiseMapError",
    "InvalidParametersError",
    "ConfigError",
]
