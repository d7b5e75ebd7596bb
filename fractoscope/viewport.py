"""Mapping between normalised screen coordinates and fractal space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

Vec2 = tuple[float, float]
Matrix = tuple[float, float, float, float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0)


def default_bounds(width: int, height: int) -> list[float]:
    """Bounds ``[xmin, xmax, ymin, ymax]`` keeping the screen aspect ratio."""
    ratio = width / height
    return [-ratio, ratio, -1.0, 1.0]


def _apply(matrix: Matrix, vec: Vec2) -> Vec2:
    a, b, c, d = matrix
    x, y = vec
    return (a * x + b * y, c * x + d * y)


def _invert(matrix: Matrix) -> Matrix:
    a, b, c, d = matrix
    det = a * d - b * c
    if det == 0:
        raise ValueError("transformation matrix is not invertible")
    return (d / det, -b / det, -c / det, a / det)


@dataclass
class Viewport:
    """A linear viewport over the complex plane.

    ``size`` is the screen size in pixels, ``bounds`` the visible region as
    ``[xmin, xmax, ymin, ymax]`` and ``matrix`` a 2x2 row-major transform.
    """

    size: tuple[int, int]
    bounds: Optional[list[float]] = None
    matrix: Sequence[float] = IDENTITY

    def __post_init__(self) -> None:
        self.size = (int(self.size[0]), int(self.size[1]))
        if self.bounds is None:
            self.bounds = default_bounds(*self.size)
        else:
            self.bounds = [float(v) for v in self.bounds]
        if len(self.bounds) != 4:
            raise ValueError("bounds must hold four values")
        self.matrix = tuple(float(v) for v in self.matrix)
        if len(self.matrix) != 4:
            raise ValueError("matrix must hold four values")

    @property
    def _center(self) -> Vec2:
        x0, x1, y0, y1 = self.bounds
        return ((x0 + x1) / 2, (y0 + y1) / 2)

    def move(self, start: Vec2, end: Vec2, factor: float = 1.0) -> None:
        """Translate the bounds by ``(start - end) * factor``."""
        dx = (start[0] - end[0]) * factor
        dy = (start[1] - end[1]) * factor
        x0, x1, y0, y1 = self.bounds
        self.bounds = [x0 + dx, x1 + dx, y0 + dy, y1 + dy]

    def zoom(self, center: Vec2, zoom: int) -> None:
        """Scale the bounds by ``0.9 ** zoom`` and centre them on ``center``."""
        factor = 0.9**zoom
        x0, x1, y0, y1 = self.bounds
        half_w = (x1 - x0) * factor / 2.0
        half_h = (y1 - y0) * factor / 2.0
        cx, cy = center
        self.bounds = [cx - half_w, cx + half_w, cy - half_h, cy + half_h]

    def screen_to_space(self, pos: Vec2) -> Vec2:
        """Map normalised screen coordinates (0..1, y down) to space."""
        x0, x1, y0, y1 = self.bounds
        vec = ((pos[0] - 0.5) * (x1 - x0), (pos[1] - 0.5) * -(y1 - y0))
        vx, vy = _apply(self.matrix, vec)
        cx, cy = self._center
        return (vx + cx, vy + cy)

    def space_to_screen(self, pos: Vec2) -> tuple[int, int]:
        """Map a point in space to integer pixel coordinates."""
        x0, x1, y0, y1 = self.bounds
        width, height = self.size
        cx, cy = self._center
        vec = ((pos[0] - cx) * (width / (x1 - x0)), (-pos[1] + cy) * (height / (y1 - y0)))
        vx, vy = _apply(_invert(self.matrix), vec)
        return (int(vx + width / 2.0), int(vy + height / 2.0))