# kernels.py
from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt
import numba as nb

# Glyph ramp, indexed by glyph_index()
GLYPHS = ".:=*-X"

GLYPH_DEFAULT = 0
GLYPH_ONE = 1
GLYPH_TWO = 2
GLYPH_THREE = 3
GLYPH_SLOW = 4
GLYPH_BOUNDARY = 5

# ---- JIT’d escape-time kernels (scalar + batched) ----
# fastmath is left off: it assumes no NaNs, and the distance estimate relies on them.

@nb.njit(cache=True)
def iterate_point(
    c_x: float,
    c_y: float,
    max_iter: int,
    escape_radius_sq: float,
) -> tuple[int, float, float, float, float]:
    """
    Iterate z -> z² + c together with its derivative dz -> 2·z·dz + 1.

    Args:
        c_x: Real part of c.
        c_y: Imaginary part of c.
        max_iter: Iteration cap.
        escape_radius_sq: Squared modulus at which z has escaped.

    Returns:
        (iterations, x, y, dx, dy) at the point the loop stopped.
    """
    x = 0.0
    y = 0.0
    dx = 1.0
    dy = 0.0
    iterations = 0
    while x * x + y * y < escape_radius_sq and iterations < max_iter:
        old_x = x
        old_dx = dx
        x = x * x - y * y + c_x
        dx = 2.0 * (old_x * dx - y * dy) + 1.0
        dy = 2.0 * (old_dx * y + dy * old_x)
        y = 2.0 * y * old_x + c_y
        iterations += 1
    return iterations, x, y, dx, dy

@nb.njit(cache=True)
def distance_estimate(x: float, y: float, dx: float, dy: float) -> float:
    """
    Distance estimate |z|·ln|z| / |dz|.

    Returns NaN when |z| or |dz| is zero, or when the result is not finite.
    """
    modulus = math.sqrt(x * x + y * y)
    deriv_modulus = math.sqrt(dx * dx + dy * dy)
    if modulus == 0.0 or deriv_modulus == 0.0:
        return math.nan
    distance = modulus * math.log(modulus) / deriv_modulus
    if not math.isfinite(distance):
        return math.nan
    return distance

@nb.njit(cache=True)
def glyph_index(iterations: int, distance: float, max_iter: int, threshold: float) -> int:
    """
    Index into GLYPHS for a cell. The boundary rule overrides the iteration ramp.
    A NaN distance never satisfies the threshold.
    """
    glyph = GLYPH_DEFAULT
    if iterations == 1:
        glyph = GLYPH_ONE
    elif iterations == 2:
        glyph = GLYPH_TWO
    elif iterations == 3:
        glyph = GLYPH_THREE
    elif iterations >= 5:
        glyph = GLYPH_SLOW
    if distance <= threshold or iterations >= max_iter:
        glyph = GLYPH_BOUNDARY
    return glyph

@nb.njit(cache=True)
def render_indices(
    width: int,
    height: int,
    max_iter: int,
    escape_radius_sq: float,
    x_offset: float,
    x_scale: float,
    y_offset: float,
    y_scale: float,
    threshold: float,
) -> tuple[npt.NDArray[np.int64], npt.NDArray[np.float64], npt.NDArray[np.int64]]:
    """
    Batched escape-time render over the whole grid.

    Returns:
        iterations, distances and glyph indices, each of shape (height, width),
        row-major with row j mapped to c_y and column i to c_x.
    """
    iterations = np.zeros((height, width), dtype=np.int64)
    distances = np.empty((height, width), dtype=np.float64)
    glyphs = np.zeros((height, width), dtype=np.int64)
    for j in range(height):
        c_y = (j - y_offset) / y_scale
        for i in range(width):
            c_x = (i - x_offset) / x_scale
            n, x, y, dx, dy = iterate_point(c_x, c_y, max_iter, escape_radius_sq)
            d = distance_estimate(x, y, dx, dy)
            iterations[j, i] = n
            distances[j, i] = d
            glyphs[j, i] = glyph_index(n, d, max_iter, threshold)
    return iterations, distances, glyphs
