import pytest
from hypothesis import given, strategies as st

from minirt.display import DEFAULT_FORMAT, Canvas, Image, PixelFormat


def rgb565():
    return PixelFormat.from_masks(0xF800, 0x07E0, 0x001F, 16)


def test_deep_format_keeps_colour():
    assert DEFAULT_FORMAT.convert(0x123456) == 0x123456


def test_shallow_format_maps_primaries_onto_masks():
    fmt = rgb565()
    assert fmt.convert(0xFF0000) == 0xF800
    assert fmt.convert(0x00FF00) == 0x07E0
    assert fmt.convert(0x0000FF) == 0x001F


def test_shallow_format_white_and_black():
    fmt = rgb565()
    assert fmt.convert(0xFFFFFF) == 0xFFFF
    assert fmt.convert(0x000000) == 0


def test_from_masks_rejects_empty_mask():
    with pytest.raises(ValueError):
        PixelFormat.from_masks(0, 0x00FF00, 0x0000FF, 24)


def test_image_layout():
    image = Image(5, 3)
    assert image.size_line == 5 * image.bits_per_pixel // 8
    assert len(image.data) == image.size_line * image.height
    assert not any(image.data)


def test_image_bytes_are_little_endian():
    image = Image(2, 2)
    image.put_pixel(1, 1, 0x123456)
    offset = image.size_line + 4
    assert bytes(image.data[offset:offset + 4]) == bytes([0x56, 0x34, 0x12, 0x00])


@given(
    st.integers(0, 6),
    st.integers(0, 4),
    st.integers(0, 0xFFFFFFFF),
)
def test_image_pixel_round_trip(x, y, color):
    image = Image(7, 5)
    image.put_pixel(x, y, color)
    assert image.get_pixel(x, y) == color


def test_image_out_of_bounds():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.put_pixel(2, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)
    with pytest.raises(ValueError):
        Canvas(3, -2)


def test_canvas_pixel_put_and_clip():
    canvas = Canvas(3, 3)
    canvas.pixel_put(1, 2, 0xABCDEF)
    canvas.pixel_put(-1, 0, 0xFFFFFF)
    canvas.pixel_put(3, 3, 0xFFFFFF)
    assert canvas.get_pixel(1, 2) == 0xABCDEF
    lit = [(x, y) for x in range(3) for y in range(3) if canvas.get_pixel(x, y)]
    assert lit == [(1, 2)]


def test_canvas_get_pixel_out_of_bounds():
    with pytest.raises(IndexError):
        Canvas(2, 2).get_pixel(5, 0)


def test_canvas_converts_colours():
    canvas = Canvas(1, 1, rgb565())
    canvas.pixel_put(0, 0, 0xFF0000)
    assert canvas.get_pixel(0, 0) == 0xF800


def test_canvas_clear():
    canvas = Canvas(2, 2)
    canvas.pixel_put(0, 0, 0x112233)
    canvas.clear()
    assert canvas.get_pixel(0, 0) == 0


def test_put_image_copies_with_offset_and_clips():
    image = Image(2, 2)
    image.put_pixel(0, 0, 0x010203)
    image.put_pixel(1, 1, 0x0A0B0C)
    canvas = Canvas(3, 3)
    canvas.put_image(image, 2, 2)
    assert canvas.get_pixel(2, 2) == 0x010203
    assert sum(canvas.get_pixel(x, y) for x in range(3) for y in range(3)) == 0x010203


def test_put_image_at_origin_matches_image():
    image = Image(3, 2)
    for x in range(3):
        for y in range(2):
            image.put_pixel(x, y, x * 16 + y)
    canvas = Canvas(3, 2)
    canvas.put_image(image, 0, 0)
    assert all(canvas.get_pixel(x, y) == image.get_pixel(x, y) for x in range(3) for y in range(2))