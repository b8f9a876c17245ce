import base64
import io

import pytest
from PIL import Image

from panocomposite_backend.render.grid import PixelGrid


def make_image(size, pixels=None, color=(0, 0, 0, 0)):
    img = Image.new("RGBA", size, color)
    if pixels is not None:
        img.frombytes(bytes(c for p in pixels for c in p))
    return img


def png_bytes(size, pixels=None, color=(0, 0, 0, 0)):
    buffer = io.BytesIO()
    make_image(size, pixels, color).save(buffer, format="PNG")
    return buffer.getvalue()


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def data_url(data: bytes) -> str:
    return "data:image/png;base64," + b64(data)


def decode_result(result: str) -> PixelGrid:
    prefix = "data:image/png;base64,"
    assert result.startswith(prefix)
    with Image.open(io.BytesIO(base64.b64decode(result[len(prefix):]))) as img:
        assert img.format == "PNG"
        return PixelGrid.from_image(img)


@pytest.fixture
def red_green_base():
    return png_bytes((2, 1), [(255, 0, 0, 255), (0, 255, 0, 255)])


@pytest.fixture
def blue_half_overlay():
    return png_bytes((2, 1), [(0, 0, 255, 128), (0, 0, 0, 0)])


def pixel_list(grid: PixelGrid) -> list:
    """Pixels em ordem y * width + x, como tuplas de int."""
    return [tuple(int(c) for c in p) for p in grid.pixels.reshape(-1, 4)]
