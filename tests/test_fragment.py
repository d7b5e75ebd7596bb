import itertools

import pytest

from fractoscope.fragment import FragmentJob, gauss_sample_weight
from fractoscope.viewport import Viewport


@pytest.mark.parametrize("size", [3, 5, 7, 9, 15])
def test_gauss_weights_sum_to_one(size):
    half = size // 2
    total = sum(
        gauss_sample_weight(size, x, y)
        for x, y in itertools.product(range(-half, half + 1), repeat=2)
    )
    assert total == pytest.approx(1.0, abs=1e-6)


def test_single_sample_has_full_weight():
    assert gauss_sample_weight(1, 3, -2) == 1.0


def test_large_kernel_uses_largest_normalisation():
    assert gauss_sample_weight(21, 1, 2) == gauss_sample_weight(15, 1, 2)


def test_even_kernel_size_rejected():
    with pytest.raises(ValueError):
        gauss_sample_weight(4, 0, 0)


def _job(width=4, height=3, **kwargs):
    view = Viewport((width, height))
    return FragmentJob(view, (width, height), [0] * (width * height), **kwargs)


def test_constant_shader_fills_every_pixel():
    job = _job()
    job.run(lambda z: 0x123456)
    assert job.pixels == [0x123456] * 12


def test_samples_lie_inside_bounds():
    job = _job()
    points = []

    def shader(z):
        points.append(z)
        return len(points)

    job.run(shader)
    assert sorted(job.pixels) == list(range(1, 13))
    x0, x1, y0, y1 = job.viewport.bounds
    assert len(set(points)) == 12
    assert all(x0 <= z.real <= x1 and y0 <= z.imag <= y1 for z in points)


def test_real_part_increases_along_a_row():
    job = _job()
    points = []
    job.run(lambda z: points.append(z) or 0)
    first_row = [z.real for z in points[:4]]
    assert first_row == sorted(first_row)
    assert len(set(first_row)) == 4


def test_post_pass_only_recomputes_default_pixels():
    job = _job(default_color=7, post_pass=True)
    job.pixels = [7, 1, 7, 2, 7, 3, 7, 4, 7, 5, 7, 6]
    job.run(lambda z: 9)
    assert job.pixels == [9, 1, 9, 2, 9, 3, 9, 4, 9, 5, 9, 6]


def test_negative_oversampling_leaves_pixels():
    job = _job(oversampling_data=[-1.0] * 12)
    job.pixels = list(range(12))
    job.run(lambda z: 0xFF)
    assert job.pixels == list(range(12))


def test_oversampling_constant_shader_keeps_colour():
    calls = []
    job = _job(oversampling_data=[1.0] * 12, oversampling_factor=1)

    def shader(z):
        calls.append(z)
        return 0x00FF8040

    job.run(shader)
    assert job.pixels == [0x00FF8040] * 12
    assert len(calls) == 12 * 9


def test_oversampling_average_stays_between_samples():
    job = _job(oversampling_data=[2.0] * 12, oversampling_factor=1)
    job.run(lambda z: 0xFFFFFFFF if z.real > 0 else 0)
    for color in job.pixels:
        channels = {(color >> (8 * k)) & 0xFF for k in range(4)}
        assert len(channels) == 1
        assert 0 <= channels.pop() <= 0xFF


def test_short_pixel_buffer_rejected():
    view = Viewport((4, 3))
    job = FragmentJob(view, (4, 3), [0] * 5)
    with pytest.raises(ValueError):
        job.run(lambda z: 0)


def test_short_oversampling_data_rejected():
    job = _job(oversampling_data=[1.0])
    with pytest.raises(ValueError):
        job.run(lambda z: 0)