"""Strict parameter validation on top of the permissive generator."""

import math

import numpy as np
import structlog
from numpy.typing import NDArray

from .config import GenerationParameters
from .exceptions import InvalidParametersError
from .generator import generate_noise_map

logger = structlog.get_logger()


class ValidationResult:
    """Result of parameter validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def _amplitude_overflows(persistence: float, octaves: int) -> bool:
    """Whether the last octave's amplitude leaves the float range."""
    if octaves <= 1:
        return False
    try:
        amplitude = abs(persistence) ** (octaves - 1)
    except OverflowError:
        return True
    # Summing octaves near the float limit still overflows
    return amplitude * octaves > 1e300


def validate_parameters(params: GenerationParameters) -> ValidationResult:
    """Check parameters against the ranges generation expects.

    Anything the generator would silently clamp is reported as an error.

    Args:
        params: Parameters to check.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    if params.width < 1:
        result.add_error(f"width must be at least 1, got {params.width}")
    if params.height < 1:
        result.add_error(f"height must be at least 1, got {params.height}")
    if not params.scale > 0:
        result.add_error(f"scale must be positive, got {params.scale}")
    if params.octaves < 0:
        result.add_error(f"octaves must be non-negative, got {params.octaves}")
    if not params.lacunarity >= 1:
        result.add_error(f"lacunarity must be at least 1, got {params.lacunarity}")

    if not math.isfinite(params.persistence):
        result.add_error(f"persistence must be finite, got {params.persistence}")
    elif not 0.0 <= params.persistence <= 1.0:
        if _amplitude_overflows(params.persistence, params.octaves):
            result.add_error(
                f"persistence {params.persistence} overflows over "
                f"{params.octaves} octaves"
            )
        else:
            result.add_warning(f"persistence {params.persistence} is outside [0, 1]")

    if not all(math.isfinite(value) for value in params.offset):
        result.add_error(f"offset must be finite, got {params.offset}")

    if params.octaves == 0:
        result.add_warning("octaves is 0, the map will be uniform")

    if result.passed:
        logger.debug("validation_passed", warnings=len(result.warnings))
    else:
        logger.warning("validation_failed", errors=result.errors)

    for warning in result.warnings:
        logger.warning("validation_warning", message=warning)

    return result


def generate_noise_map_strict(params: GenerationParameters) -> NDArray[np.float32]:
    """Generate a noise map, rejecting parameters that would be clamped.

    Args:
        params: Generation parameters.

    Returns:
        Noise map as from generate_noise_map.

    Raises:
        InvalidParametersError: If validation reports any error.
    """
    result = validate_parameters(params)
    if not result.passed:
        raise InvalidParametersError(result)
    return generate_noise_map(params)
