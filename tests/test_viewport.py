import copy

import pytest

from fractoscope.viewport import Viewport, default_bounds


def test_default_bounds_keep_aspect_ratio():
    assert default_bounds(800, 400) == [-2.0, 2.0, -1.0, 1.0]


def test_new_viewport_uses_default_bounds():
    view = Viewport((640, 480))
    assert view.bounds == default_bounds(640, 480)


def test_screen_center_maps_to_bounds_center():
    view = Viewport((100, 50), bounds=[-3.0, 1.0, 2.0, 6.0])
    x0, x1, y0, y1 = view.bounds
    assert view.screen_to_space((0.5, 0.5)) == pytest.approx(((x0 + x1) / 2, (y0 + y1) / 2))


def test_corners_map_to_bounds():
    view = Viewport((100, 50), bounds=[-3.0, 1.0, 2.0, 6.0])
    x0, x1, y0, y1 = view.bounds
    assert view.screen_to_space((0.0, 0.0)) == pytest.approx((x0, y1))
    assert view.screen_to_space((1.0, 1.0)) == pytest.approx((x1, y0))


@pytest.mark.parametrize("matrix", [(1.0, 0.0, 0.0, 1.0), (2.0, 0.0, 0.0, 2.0)])
@pytest.mark.parametrize("pixel", [(0, 0), (13, 7), (39, 29)])
def test_round_trip_pixel_centres(matrix, pixel):
    width, height = 40, 30
    view = Viewport((width, height), matrix=matrix)
    point = view.screen_to_space(((pixel[0] + 0.5) / width, (pixel[1] + 0.5) / height))
    assert view.space_to_screen(point) == pixel


def test_space_center_maps_to_screen_center():
    view = Viewport((64, 48))
    assert view.space_to_screen((0.0, 0.0)) == (64 // 2, 48 // 2)


def test_move_shifts_bounds():
    view = Viewport((100, 100))
    before = list(view.bounds)
    view.move((0.0, 0.0), (1.0, 2.0), 1.0)
    assert view.bounds == pytest.approx(
        [before[0] - 1.0, before[1] - 1.0, before[2] - 2.0, before[3] - 2.0]
    )


def test_move_factor_scales_translation():
    full = Viewport((100, 100))
    half = copy.deepcopy(full)
    full.move((2.0, 2.0), (0.0, 0.0), 1.0)
    half.move((2.0, 2.0), (0.0, 0.0), 0.5)
    half.move((2.0, 2.0), (0.0, 0.0), 0.5)
    assert half.bounds == pytest.approx(full.bounds)


def test_zoom_zero_recentres_without_scaling():
    view = Viewport((200, 100))
    width = view.bounds[1] - view.bounds[0]
    view.zoom((0.25, -0.5), 0)
    assert view.bounds[1] - view.bounds[0] == pytest.approx(width)
    assert (view.bounds[0] + view.bounds[1]) / 2 == pytest.approx(0.25)
    assert (view.bounds[2] + view.bounds[3]) / 2 == pytest.approx(-0.5)


def test_zoom_in_shrinks_by_constant_factor():
    view = Viewport((200, 100))
    width = view.bounds[1] - view.bounds[0]
    view.zoom((0.0, 0.0), 1)
    assert (view.bounds[1] - view.bounds[0]) / width == pytest.approx(0.9)


def test_zoom_in_then_out_restores_size():
    view = Viewport((200, 100))
    before = list(view.bounds)
    view.zoom((0.0, 0.0), 1)
    view.zoom((0.0, 0.0), -1)
    assert view.bounds == pytest.approx(before)


def test_singular_matrix_cannot_map_to_screen():
    view = Viewport((10, 10), matrix=(1.0, 2.0, 2.0, 4.0))
    with pytest.raises(ValueError):
        view.space_to_screen((0.0, 0.0))


def test_bad_bounds_rejected():
    with pytest.raises(ValueError):
        Viewport((10, 10), bounds=[0.0, 1.0])