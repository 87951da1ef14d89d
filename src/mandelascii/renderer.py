"""
Escape-Time Distance Renderer
=============================
This module turns the JIT kernels into text.

Why is this file needed?
------------------------
1. Grid description: GridSpec bundles the plane mapping and cut-offs so the
   kernels can be called with one consistent set of numbers.
2. Output: It converts glyph indices into rows of characters and writes
   them to a stream, one line per grid row.

Classes:
    GridSpec: Grid size, plane mapping and thresholds.
    CellResult: Classification of a single cell.
    RenderResult: Arrays produced by a full-grid render.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import sys
from typing import Optional, TextIO, TYPE_CHECKING

import numpy as np

from mandelascii import config
from mandelascii.dev import timer
from mandelascii.kernels import GLYPHS, distance_estimate, glyph_index, iterate_point, render_indices

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_GLYPH_TABLE = np.array(list(GLYPHS))


@dataclass(frozen=True)
class GridSpec:
    """
    Fixed grid mapped onto the complex plane.

    Cell (i, j) maps to c = ((i - x_offset) / x_scale, (j - y_offset) / y_scale).
    """
    width: int = config.GRID_WIDTH
    height: int = config.GRID_HEIGHT
    max_iter: int = config.MAX_ITERATIONS
    x_offset: float = config.X_OFFSET
    x_scale: float = config.X_SCALE
    y_offset: float = config.Y_OFFSET
    y_scale: float = config.Y_SCALE
    escape_radius_sq: float = config.ESCAPE_RADIUS_SQ
    distance_threshold: float = config.DISTANCE_THRESHOLD

    def __post_init__(self) -> None:
        for name in ("width", "height", "max_iter"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"'{name}' must be an integer, got {value!r}.")
            if value <= 0:
                raise ValueError(f"'{name}' must be positive, got {getattr(self, name)}.")
        for name in ("x_scale", "y_scale"):
            if getattr(self, name) == 0:
                raise ValueError(f"'{name}' must be non-zero.")
        if self.escape_radius_sq <= 0:
            raise ValueError(f"'escape_radius_sq' must be positive, got {self.escape_radius_sq}.")

    def cell_to_complex(self, i: int, j: int) -> tuple[float, float]:
        """Map column i and row j to (c_x, c_y)."""
        return (i - self.x_offset) / self.x_scale, (j - self.y_offset) / self.y_scale


DEFAULT_GRID = GridSpec()


@dataclass(frozen=True)
class CellResult:
    iterations: int
    distance: float
    glyph: str

    @property
    def is_degenerate(self) -> bool:
        """True when the distance estimate could not be computed."""
        return math.isnan(self.distance)


@dataclass
class RenderResult:
    """Per-cell arrays of a full render, each of shape (height, width)."""
    grid: GridSpec
    iterations: npt.NDArray[np.int64]
    distances: npt.NDArray[np.float64]
    glyph_indices: npt.NDArray[np.int64]

    def __post_init__(self) -> None:
        shape = (self.grid.height, self.grid.width)
        for name in ("iterations", "distances", "glyph_indices"):
            if getattr(self, name).shape != shape:
                raise ValueError(f"'{name}' must have shape {shape}, got {getattr(self, name).shape}.")

    def lines(self) -> list[str]:
        chars = _GLYPH_TABLE[self.glyph_indices]
        return ["".join(row) for row in chars]

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines())


def select_glyph(iterations: int, distance: float, grid: GridSpec = DEFAULT_GRID) -> str:
    """
    Glyph for a cell with the given escape count and distance estimate.

    Args:
        iterations: Escape iteration count.
        distance: Distance estimate (NaN for degenerate cells).
        grid: Supplies the iteration cap and distance threshold.

    Returns:
        One of '.', ':', '=', '*', '-', 'X'.
    """
    return GLYPHS[glyph_index(int(iterations), float(distance), grid.max_iter, grid.distance_threshold)]


def classify_cell(i: int, j: int, grid: GridSpec = DEFAULT_GRID) -> CellResult:
    """Run the escape-time iteration for a single cell."""
    c_x, c_y = grid.cell_to_complex(i, j)
    iterations, x, y, dx, dy = iterate_point(c_x, c_y, grid.max_iter, grid.escape_radius_sq)
    distance = distance_estimate(x, y, dx, dy)
    return CellResult(
        iterations=int(iterations),
        distance=float(distance),
        glyph=select_glyph(iterations, distance, grid),
    )


@timer
def render_grid(grid: GridSpec = DEFAULT_GRID) -> RenderResult:
    """Render every cell of the grid."""
    iterations, distances, glyphs = render_indices(
        grid.width,
        grid.height,
        grid.max_iter,
        float(grid.escape_radius_sq),
        float(grid.x_offset),
        float(grid.x_scale),
        float(grid.y_offset),
        float(grid.y_scale),
        float(grid.distance_threshold),
    )
    degenerate = int(np.count_nonzero(np.isnan(distances)))
    logger.debug(f"Rendered {grid.width}x{grid.height} grid, {degenerate} degenerate cells.")
    return RenderResult(grid=grid, iterations=iterations, distances=distances, glyph_indices=glyphs)


def render_lines(grid: GridSpec = DEFAULT_GRID) -> list[str]:
    return render_grid(grid).lines()


def render(grid: GridSpec = DEFAULT_GRID) -> str:
    """Full picture as text, each row terminated by a newline."""
    return render_grid(grid).text()


def write(stream: Optional[TextIO] = None, grid: GridSpec = DEFAULT_GRID) -> None:
    """Write the rendered picture to `stream` (default: sys.stdout)."""
    out = stream if stream is not None else sys.stdout
    out.write(render(grid))
    out.flush()
