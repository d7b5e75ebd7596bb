"""Evaluation of a per-pixel shader over a viewport."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .viewport import Viewport

Shader = Callable[[complex], int]

_KERNEL_SUMS = {
    1: 1.0,
    3: 4.897640403536304,
    5: 6.168924081028881,
    7: 6.2797847959347015,
    9: 6.283147856202572,
    11: 6.283185221483608,
    13: 6.2831853741872,
    15: 6.283185374416782,
}


def gauss_sample_weight(size: int, x: int, y: int) -> float:
    """Normalised Gaussian weight of sample ``(x, y)`` in a ``size``-wide kernel."""
    if size == 1:
        return 1.0
    if size > 15:
        total = _KERNEL_SUMS[15]
    else:
        try:
            total = _KERNEL_SUMS[size]
        except KeyError:
            raise ValueError(f"unsupported kernel size: {size}") from None
    return math.exp(-(x * x + y * y) / 2.0) / total


def _weighted_average(samples: Sequence[tuple[int, float]]) -> int:
    totals = [0.0] * 4
    weight_sum = 0.0
    for color, weight in samples:
        weight_sum += weight
        totals = [acc + ((color >> (8 * k)) & 0xFF) * weight for k, acc in enumerate(totals)]
    return sum(
        min(255, max(0, round(acc / weight_sum))) << (8 * k) for k, acc in enumerate(totals)
    )


@dataclass
class FragmentJob:
    """One render pass over ``render_size`` pixels stored in ``pixels``."""

    viewport: Viewport
    render_size: tuple[int, int]
    pixels: list[int]
    default_color: int = 0
    oversampling_factor: int = 1
    oversampling_data: Optional[Sequence[float]] = None
    post_pass: bool = False

    def run(self, shader: Shader) -> None:
        """Evaluate ``shader`` for each pixel and store the colours in place."""
        width, height = self.render_size
        count = width * height
        if len(self.pixels) < count:
            raise ValueError("pixel buffer is smaller than the render size")
        if self.oversampling_data is None:
            self._run_direct(shader, count)
            return
        if len(self.oversampling_data) < count:
            raise ValueError("oversampling data is smaller than the render size")
        for index, level in enumerate(self.oversampling_data[:count]):
            amount = level * self.oversampling_factor
            if amount < 0:
                continue
            self.pixels[index] = self._oversample(index, int(amount), shader)

    def _run_direct(self, shader: Shader, count: int) -> None:
        width, height = self.render_size
        for index, current in enumerate(self.pixels[:count]):
            if self.post_pass and current != self.default_color:
                continue
            pos = (((index % width) + 0.5) / width, (index + 0.5) / width / height)
            x, y = self.viewport.screen_to_space(pos)
            self.pixels[index] = shader(complex(x, y))

    def _oversample(self, index: int, level: int, shader: Shader) -> int:
        width, height = self.render_size
        span = 2 * level + 1
        step = 1.0 / span
        column, row = index % self.viewport.size[0], index // self.viewport.size[0]
        samples = []
        for dy, dx in itertools.product(range(-level, level + 1), repeat=2):
            pos = (
                (column + 0.5 + dx * step) / width,
                (row + 0.5 + dy * step) / height,
            )
            x, y = self.viewport.screen_to_space(pos)
            samples.append((shader(complex(x, y)), gauss_sample_weight(span, dx, dy)))
        return _weighted_average(samples)