import pytest

from fractoscope.screenshot import ppm_bytes, write_ppm


def test_header():
    data = ppm_bytes(2, 1, [0, 0])
    assert data.startswith(b"P6\n2 1\n255\n")


def test_pixel_channel_order():
    data = ppm_bytes(1, 1, [0x112233])
    assert data.endswith(b"\x11\x22\x33")


def test_length_is_header_plus_three_bytes_per_pixel():
    width, height = 4, 3
    data = ppm_bytes(width, height, [0xFFFFFF] * (width * height))
    header = f"P6\n{width} {height}\n255\n".encode()
    assert len(data) == len(header) + 3 * width * height


def test_alpha_byte_ignored():
    assert ppm_bytes(1, 1, [0xFF000000 | 0x0A0B0C]) == ppm_bytes(1, 1, [0x0A0B0C])


def test_extra_pixels_ignored():
    assert ppm_bytes(1, 1, [5, 6, 7]) == ppm_bytes(1, 1, [5])


def test_too_few_pixels():
    with pytest.raises(ValueError):
        ppm_bytes(2, 2, [0, 0, 0])


def test_write_ppm_round_trip(tmp_path):
    path = tmp_path / "screenshot.ppm"
    pixels = [0x102030, 0x405060]
    written = write_ppm(path, 2, 1, pixels)
    content = path.read_bytes()
    assert content == ppm_bytes(2, 1, pixels)
    assert written == len(content)


def test_write_ppm_overwrites(tmp_path):
    path = tmp_path / "screenshot.ppm"
    write_ppm(path, 3, 3, [0] * 9)
    write_ppm(path, 1, 1, [0])
    assert path.read_bytes() == ppm_bytes(1, 1, [0])