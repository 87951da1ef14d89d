"""
Configuration & Constants
=========================
This module serves as the central registry for the renderer's global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (grid size, plane mapping, cut-offs)
   from being scattered throughout the kernels and the renderer.
2. Single source: The default GridSpec is built from these values, so the
   kernels, the renderer and the tests all agree on the same picture.

Exports:
    GRID_WIDTH (int): Number of columns (characters per line).
    GRID_HEIGHT (int): Number of rows (lines of output).
    MAX_ITERATIONS (int): Iteration cap of the escape-time loop.
    ESCAPE_RADIUS_SQ (float): Squared modulus at which a point has escaped.
    DISTANCE_THRESHOLD (float): Distance estimate below which a cell is drawn as boundary.
    X_OFFSET, X_SCALE (float): Column -> real axis mapping, c_x = (i - X_OFFSET) / X_SCALE.
    Y_OFFSET, Y_SCALE (float): Row -> imaginary axis mapping, c_y = (j - Y_OFFSET) / Y_SCALE.
"""

GRID_WIDTH: int = 120
GRID_HEIGHT: int = 51
MAX_ITERATIONS: int = 25

ESCAPE_RADIUS_SQ: float = 4.0
DISTANCE_THRESHOLD: float = 0.004

X_OFFSET: float = 85.0
X_SCALE: float = 40.0
Y_OFFSET: float = 25.0
Y_SCALE: float = 20.0
