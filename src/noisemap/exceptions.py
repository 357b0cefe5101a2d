"""Custom exceptions for noise map generation.

The generator itself never raises; these come from the strict
validating wrapper and from config loading.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import ValidationResult


class NoiseMapError(Exception):
    """Base exception for noise map errors."""

    pass


class InvalidParametersError(NoiseMapError):
    """Raised by strict generation when parameters fail validation."""

    def __init__(self, result: "ValidationResult"):
        super().__init__("; ".join(result.errors))
        self.result = result


class ConfigError(NoiseMapError):
    """Raised when a config file is missing or malformed."""

    pass
