"""Multi-octave noise map generation.

Sums octaves of coherent noise at increasing frequency and decreasing
amplitude, then rescales the result into [0, 1].
"""

from typing import Callable

import numpy as np
import structlog
from numpy.typing import ArrayLike, NDArray

from .config import GenerationParameters
from .offsets import generate_octave_offsets
from .perlin import perlin_noise

logger = structlog.get_logger()

NoiseFunction = Callable[[NDArray[np.float64], NDArray[np.float64]], ArrayLike]


def inverse_lerp(
    values: NDArray[np.float64],
    lower: float,
    upper: float,
) -> NDArray[np.float64]:
    """Rescale values from [lower, upper] into [0, 1].

    Args:
        values: Input array.
        lower: Value mapped to 0.
        upper: Value mapped to 1.

    Returns:
        New array clipped to [0, 1]. All zeros when lower == upper.
    """
    if upper == lower:
        return np.zeros_like(values)
    return np.clip((values - lower) / (upper - lower), 0.0, 1.0)


def _finite_bounds(values: NDArray[np.float64]) -> tuple[float, float]:
    """Min and max over the finite cells, (0.0, 0.0) if there are none."""
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return 0.0, 0.0
    return float(finite.min()), float(finite.max())


def generate_noise_map(
    params: GenerationParameters,
    noise: NoiseFunction = perlin_noise,
) -> NDArray[np.float32]:
    """Generate a normalized multi-octave noise map.

    Never raises for out-of-range parameters: they are clamped for this
    call only (see GenerationParameters.clamped). Sampling is centered on
    the middle of the grid so resizing the map does not shift features.

    Args:
        params: Generation parameters.
        noise: 2D noise primitive returning values in [0, 1]. Called once
            per octave with full coordinate grids.

    Returns:
        Fresh float32 array of shape (width, height), indexed [x, y],
        with values in [0, 1].
    """
    effective = params.clamped()
    if effective is not params:
        logger.debug(
            "parameters_clamped",
            requested=params.model_dump(),
            effective=effective.model_dump(),
        )

    width, height = effective.width, effective.height
    octave_offsets = generate_octave_offsets(
        effective.seed, effective.octaves, effective.offset
    )

    half_width = width / 2
    half_height = height / 2

    xs, ys = np.meshgrid(
        np.arange(width, dtype=np.float64) - half_width,
        np.arange(height, dtype=np.float64) - half_height,
        indexing="ij",
    )

    accumulated = np.zeros((width, height), dtype=np.float64)
    amplitude = 1.0
    frequency = 1.0

    # Huge or NaN persistence and infinite offsets overflow here; the
    # non-finite cells are folded back into range below
    with np.errstate(over="ignore", invalid="ignore"):
        for offset_x, offset_y in octave_offsets:
            divisor = effective.scale * frequency
            sample_x = xs / divisor + offset_x
            sample_y = ys / divisor + offset_y

            # Remap to [-1, 1] so octaves can cancel each other out
            raw = np.asarray(noise(sample_x, sample_y), dtype=np.float64) * 2.0 - 1.0
            accumulated += raw * amplitude

            amplitude *= effective.persistence
            frequency *= effective.lacunarity

    min_value, max_value = _finite_bounds(accumulated)
    if not np.isfinite(accumulated).all():
        logger.debug(
            "non_finite_cells",
            count=int(np.count_nonzero(~np.isfinite(accumulated))),
        )
        # +inf maps to the top of the range, -inf and NaN to the bottom
        accumulated = np.nan_to_num(
            accumulated, nan=min_value, posinf=max_value, neginf=min_value
        )

    noise_map = inverse_lerp(accumulated, min_value, max_value).astype(np.float32)

    logger.debug(
        "noise_map_generated",
        width=width,
        height=height,
        seed=effective.seed,
        octaves=effective.octaves,
        raw_min=min_value,
        raw_max=max_value,
    )
    return noise_map
