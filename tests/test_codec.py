import io

import pytest

from pbmkit import Bitmap, Greymap, Pixel, Pixmap, Point, UnsupportedFormat, decode, load, save
from pbmkit.codec import CodecRegistry

from .helpers import stream


@pytest.mark.parametrize(
    "text, kind",
    [
        (b"P1\n1 1\n1\n", Bitmap),
        (b"P4\n1 1\n\x80", Bitmap),
        (b"P2\n1 1\n3\n2\n", Greymap),
        (b"P3\n1 1\n3\n1 2 3\n", Pixmap),
    ],
)
def test_decode_dispatches_on_magic_number(text, kind):
    assert isinstance(decode(stream(text)), kind)


def test_decode_unknown_magic_number():
    with pytest.raises(UnsupportedFormat):
        decode(stream(b"P6\n1 1\n255\n\x00\x00\x00"))


def test_registry_lists_magic_numbers():
    assert CodecRegistry().magic_numbers == {"P1", "P2", "P3", "P4"}


def test_registry_without_encoder(bitmap):
    registry = CodecRegistry(encoders={})
    with pytest.raises(UnsupportedFormat):
        registry.encode(bitmap, io.BytesIO())


@pytest.mark.parametrize("name", ["bitmap", "greymap", "pixmap"])
def test_save_and_load_round_trip(tmp_path, request, name):
    image = request.getfixturevalue(name)
    path = str(tmp_path / f"image.{name}")
    save(image, path)
    assert load(path) == image


def test_binary_bitmap_round_trip(tmp_path, bitmap):
    bitmap.set_magic_number("P4")
    path = str(tmp_path / "image.pbm")
    bitmap.save(path)
    assert load(path) == bitmap


def test_drawn_pixmap_round_trip(tmp_path, canvas):
    canvas.draw_perlin_noise(Pixel(0, 0, 0), Pixel(255, 128, 0))
    canvas.draw_filled_circle(Point(4, 4), 2, Pixel(1, 2, 3))
    path = str(tmp_path / "drawn.ppm")
    canvas.save(path)
    assert load(path) == canvas


def test_save_to_missing_directory(tmp_path, greymap):
    with pytest.raises(OSError):
        save(greymap, str(tmp_path / "missing" / "image.pgm"))
