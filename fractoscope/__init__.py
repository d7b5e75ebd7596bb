"""Building blocks for a fractal explorer: formatting, viewports, sampled rendering and image I/O."""

__version__ = "1.0.0"

__all__ = [
    "cli",
    "colornames",
    "conversions",
    "fmtspec",
    "fragment",
    "pixels",
    "printf",
    "screenshot",
    "viewport",
    "xpm",
]