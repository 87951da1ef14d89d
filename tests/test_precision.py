"""Double-precision render against a single-precision reference."""
import numpy as np

from mandelascii.renderer import DEFAULT_GRID, render_lines

f32 = np.float32


def _reference_glyph(iterations, distance):
    glyph = "."
    if iterations == 1:
        glyph = ":"
    elif iterations == 2:
        glyph = "="
    elif iterations == 3:
        glyph = "*"
    elif iterations >= 5:
        glyph = "-"
    if distance <= 0.004 or iterations >= 25:
        glyph = "X"
    return glyph


def _single_precision_lines():
    lines = []
    with np.errstate(all="ignore"):
        for j in range(DEFAULT_GRID.height):
            row = []
            for i in range(DEFAULT_GRID.width):
                c_x = f32(i - 85) / f32(40.0)
                c_y = f32(j - 25) / f32(20.0)
                x, y, dx, dy = f32(0.0), f32(0.0), f32(1.0), f32(0.0)
                iterations = 0
                while x * x + y * y < f32(4.0) and iterations < 25:
                    old_x, old_dx = x, dx
                    x = x * x - y * y + c_x
                    dx = f32(2.0) * (old_x * dx - y * dy) + f32(1.0)
                    dy = f32(2.0) * (old_dx * y + dy * old_x)
                    y = f32(2.0) * y * old_x + c_y
                    iterations += 1
                modulus = np.sqrt(np.float64(x * x + y * y))
                distance = f32(modulus) * f32(np.log(modulus)) / f32(np.sqrt(np.float64(dx * dx + dy * dy)))
                row.append(_reference_glyph(iterations, distance))
            lines.append("".join(row))
    return lines


def test_double_precision_matches_single_precision():
    assert render_lines() == _single_precision_lines()
