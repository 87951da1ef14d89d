"""
ASCII-art Mandelbrot renderer.
The KERNELS module holds the JIT-compiled numerics; the RENDERER module
turns their output into text.
"""
