# render/codec.py
import io
import logging

from PIL import Image

from panocomposite_backend.errors import DecodeError, EncodeError, describe_source
from panocomposite_backend.render.grid import PixelGrid

# Assinaturas (magic bytes) -> formato
_SIGNATURES = (
    (b"\xff\xd8\xff", "jpg"),
    (b"\x89PNG", "png"),
    (b"GIF", "gif"),
    (b"BM", "bmp"),
    (b"II*", "tiff"),
    (b"MM*", "tiff"),
    (b"\x00\x00\x01\x00", "ico"),
)

_MIME_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "ico": "image/x-icon",
}


def detect_image_format(data: bytes) -> str:
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    for signature, fmt in _SIGNATURES:
        if data.startswith(signature):
            return fmt
    return "unknown"


def mime_type_for(fmt: str) -> str:
    return _MIME_TYPES.get(fmt.lower(), "image/png")


def decode_image(data: bytes, label: str, index: int | None = None) -> PixelGrid:
    """Decodifica qualquer formato que o Pillow reconheça em grade RGBA8."""
    if not data:
        raise DecodeError(label, "conteúdo vazio", index)

    fmt = detect_image_format(data)
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            grid = PixelGrid.from_image(img)
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        reason = str(e) if fmt == "unknown" else f"{fmt} corrompido: {e}"
        raise DecodeError(label, reason, index) from e

    logging.debug(
        f"🔍 Imagem decodificada ({describe_source(label, index)}): "
        f"{mime_type_for(fmt)} {grid.width}x{grid.height}")
    return grid


def encode_png(grid: PixelGrid) -> bytes:
    buffer = io.BytesIO()
    try:
        grid.to_image().save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(str(e)) from e
    return buffer.getvalue()


def resample(grid: PixelGrid, width: int, height: int) -> PixelGrid:
    """Lanczos (sinc janelado) via Pillow."""
    resized = grid.to_image().resize((width, height), Image.Resampling.LANCZOS)
    return PixelGrid.from_image(resized)
