import io

import pytest

from pbmkit import MalformedPixelData, Pixel, Pixmap, TruncatedData, UnsupportedFormat
from pbmkit.codec import decode_ppm, encode_ppm, read_ppm

from .helpers import stream


def test_decode():
    image = decode_ppm(stream("P3\n# rgb\n2 2\n255\n255 0 0 0 255 0\n0 0 255 10 20 30\n"))
    assert image.size() == (2, 2)
    assert image.max_value == 255
    assert image.get(0, 0) == Pixel(255, 0, 0)
    assert image.get(1, 0) == Pixel(0, 255, 0)
    assert image.get(0, 1) == Pixel(0, 0, 255)
    assert image.get(1, 1) == Pixel(10, 20, 30)


def test_decode_rows_wrapping_over_lines(pixmap):
    text = "P3\n2 2\n255\n255 0\n0 0 255 0\n0 0\n255\n10 20 30\n"
    assert decode_ppm(stream(text)) == pixmap


def test_only_ascii_pixmaps_are_supported():
    with pytest.raises(UnsupportedFormat):
        decode_ppm(stream(b"P6\n1 1\n255\n\x00\x00\x00"))


def test_channel_above_max_is_rejected():
    with pytest.raises(MalformedPixelData):
        decode_ppm(stream("P3\n1 1\n100\n0 101 0\n"))


def test_huge_channel_token_is_rejected():
    with pytest.raises(MalformedPixelData):
        decode_ppm(stream("P3\n1 1\n255\n0 " + "1" * 5000 + " 0\n"))


def test_incomplete_pixel():
    with pytest.raises(TruncatedData):
        decode_ppm(stream("P3\n1 1\n255\n1 2\n"))


def test_encode(pixmap):
    out = io.BytesIO()
    encode_ppm(pixmap, out)
    assert out.getvalue() == b"P3\n2 2\n255\n255 0 0 0 255 0\n0 0 255 10 20 30\n"


def test_round_trip_through_file(tmp_path, pixmap):
    path = tmp_path / "image.ppm"
    pixmap.save(str(path))
    assert read_ppm(str(path)) == pixmap


def test_round_trip_low_max_value():
    image = Pixmap(3, 1, 7, data=[[Pixel(7, 0, 1), Pixel(2, 3, 4), Pixel(5, 6, 7)]])
    out = io.BytesIO()
    encode_ppm(image, out)
    assert decode_ppm(io.BytesIO(out.getvalue())) == image
