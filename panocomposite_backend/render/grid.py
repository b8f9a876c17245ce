# render/grid.py
import numpy as np
from PIL import Image

Pixel = tuple[int, int, int, int]


class PixelGrid:
    """
    Grade RGBA8 contígua: np.uint8 com shape (height, width, 4).
    pixels.reshape(-1, 4)[y * width + x] é o pixel (x, y).
    Cada grade tem um único dono por vez (decode -> blend -> encode).
    """

    def __init__(self, width: int, height: int, pixels):
        pixels = np.ascontiguousarray(pixels, dtype=np.uint8)
        if pixels.size != width * height * 4:
            raise ValueError(
                f"Grade {width}x{height} exige {width * height} pixels, "
                f"recebeu {pixels.size // 4}"
            )
        self.width = width
        self.height = height
        self.pixels = pixels.reshape(height, width, 4)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelGrid":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        # np.array copia: a grade precisa ser gravável
        return cls(image.width, image.height, np.array(image, dtype=np.uint8))

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def __repr__(self):
        return f"PixelGrid({self.width}x{self.height})"
