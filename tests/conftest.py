import pytest

from pbmkit import Bitmap, Greymap, Pixel, Pixmap


@pytest.fixture
def bitmap() -> Bitmap:
    return Bitmap(
        4,
        3,
        data=[
            [True, False, False, True],
            [False, True, False, False],
            [True, True, True, False],
        ],
    )


@pytest.fixture
def greymap() -> Greymap:
    return Greymap(3, 2, 15, data=[[0, 3, 6], [9, 12, 15]])


@pytest.fixture
def pixmap() -> Pixmap:
    return Pixmap(
        2,
        2,
        255,
        data=[
            [Pixel(255, 0, 0), Pixel(0, 255, 0)],
            [Pixel(0, 0, 255), Pixel(10, 20, 30)],
        ],
    )


@pytest.fixture
def canvas() -> Pixmap:
    return Pixmap(8, 8, 255)
