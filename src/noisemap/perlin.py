"""Coherent noise primitive for noise map generation.

Provides classic 2D gradient (Perlin) noise evaluated over numpy arrays.
The permutation table is fixed, so the same coordinates always produce the
same value in any process.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Ken Perlin's reference permutation
PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# Doubled so that P[P[xi] + yi] never needs a second wrap
_P = np.array(PERMUTATION + PERMUTATION, dtype=np.int64)

_GRADIENTS = np.array(
    [[1.0, 1.0], [-1.0, 1.0], [1.0, -1.0], [-1.0, -1.0]], dtype=np.float64
)


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    # 6t^5 - 15t^4 + 10t^3
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(
    a: NDArray[np.float64], b: NDArray[np.float64], t: NDArray[np.float64]
) -> NDArray[np.float64]:
    return a + t * (b - a)


def _gradient(
    h: NDArray[np.int64], x: NDArray[np.float64], y: NDArray[np.float64]
) -> NDArray[np.float64]:
    """Dot product of the hashed corner gradient with the offset (x, y)."""
    g = _GRADIENTS[h & 3]
    return g[..., 0] * x + g[..., 1] * y


def perlin_noise(x: ArrayLike, y: ArrayLike) -> NDArray[np.float64] | float:
    """Sample 2D Perlin noise.

    Inputs may be scalars or any arrays that broadcast against each other.
    Integer coordinates fall on the lattice and always evaluate to 0.5.

    Args:
        x: Sample x coordinate(s).
        y: Sample y coordinate(s).

    Returns:
        Noise value(s) in [0, 1]. A float for scalar input, otherwise an
        array with the broadcast shape of x and y.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    x_floor = np.floor(x)
    y_floor = np.floor(y)

    # Lattice cell, wrapped into the permutation table before the integer
    # cast so coordinates beyond the int64 range stay valid
    with np.errstate(invalid="ignore"):
        xi = np.mod(x_floor, 256).astype(np.int64) & 255
        yi = np.mod(y_floor, 256).astype(np.int64) & 255
    xi1 = (xi + 1) & 255
    yi1 = (yi + 1) & 255

    # Position inside the cell
    xf = x - x_floor
    yf = y - y_floor

    u = _fade(xf)
    v = _fade(yf)

    aa = _P[_P[xi] + yi]
    ab = _P[_P[xi] + yi1]
    ba = _P[_P[xi1] + yi]
    bb = _P[_P[xi1] + yi1]

    bottom = _lerp(_gradient(aa, xf, yf), _gradient(ba, xf - 1.0, yf), u)
    top = _lerp(_gradient(ab, xf, yf - 1.0), _gradient(bb, xf - 1.0, yf - 1.0), u)
    value = _lerp(bottom, top, v)

    # Diagonal gradients bound the raw value to [-1, 1]; clip absorbs rounding
    result = np.clip((value + 1.0) * 0.5, 0.0, 1.0)

    if result.ndim == 0:
        return float(result)
    return result
