import io

from pbmkit import Pixel

WHITE = Pixel(255, 255, 255)
RED = Pixel(255, 0, 0)
BLUE = Pixel(0, 0, 255)


def stream(text):
    if isinstance(text, str):
        text = text.encode("ascii")
    return io.BytesIO(text)


def painted(canvas, color):
    """Return the set of (x, y) cells equal to ``color``."""
    return {(x, y) for y in range(canvas.height) for x in range(canvas.width) if canvas.get(x, y) == color}
