"""Per-octave sample offsets derived from a seed."""

import numpy as np
from numpy.typing import NDArray

# Half-open range [low, high) for each offset draw
OFFSET_RANGE = (-100_000, 100_000)


def generate_octave_offsets(
    seed: int,
    count: int,
    base_offset: tuple[float, float] = (0.0, 0.0),
) -> NDArray[np.float64]:
    """Generate one (x, y) sample offset per octave.

    Draws are made in the order x0, y0, x1, y1, ... from a generator
    seeded only by `seed`, so a seed always yields the same offsets and
    octave i always gets the same pair regardless of how many octaves
    follow it.

    Args:
        seed: Any integer. Negative and oversized seeds are folded into
            the unsigned 64-bit range.
        count: Number of octaves. Zero or less yields no offsets.
        base_offset: (x, y) added to every drawn pair.

    Returns:
        Array of shape (count, 2) with column 0 the x offset.
    """
    if count <= 0:
        return np.empty((0, 2), dtype=np.float64)

    rng = np.random.default_rng(seed % 2**64)

    # Row-major fill keeps the x-before-y, octave-by-octave draw order
    draws = rng.integers(OFFSET_RANGE[0], OFFSET_RANGE[1], size=(count, 2))

    return draws.astype(np.float64) + np.asarray(base_offset, dtype=np.float64)
